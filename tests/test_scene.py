# ==============================================================================
# File: tests/test_scene.py
# Purpose: unit tests for scene configuration loading and saving.
# ==============================================================================
import unittest
import tempfile
import os

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from utils.scene import Scene


class TestScene(unittest.TestCase):

    def test_defaults(self):
        scene = Scene.from_dict({})
        self.assertEqual((scene.width, scene.height), (1000.0, 1000.0))
        self.assertEqual(scene.radius, 50.0)
        self.assertEqual(scene.k, 30)
        self.assertEqual(scene.loop_size, 20)
        self.assertIsNone(scene.start)
        self.assertIsNone(scene.seed)
        self.assertEqual(scene.seed_events, [])

    def test_seed_events_sorted_and_filtered(self):
        scene = Scene.from_dict({
            "seed_events": [
                {"frame": 4, "point": [1, 2]},
                {"frame": 0},
                {"frame": 4, "point": None},
            ]
        })
        self.assertEqual([e.frame for e in scene.seed_events], [0, 4, 4])
        at_four = scene.get_seed_events_at_frame(4)
        self.assertEqual(len(at_four), 2)
        self.assertEqual(at_four[0].point, [1.0, 2.0])
        self.assertIsNone(scene.get_seed_events_at_frame(0)[0].point)
        self.assertEqual(scene.get_seed_events_at_frame(3), [])

    def test_malformed_values(self):
        with self.assertRaises(ValueError):
            Scene.from_dict({"start": [1.0, 2.0, 3.0]})
        with self.assertRaises(ValueError):
            Scene.from_dict({"start": 5})
        with self.assertRaises(ValueError):
            Scene.from_dict({"loop_size": -1})
        with self.assertRaises(ValueError):
            Scene().add_seed_event(-2, [0.0, 0.0])

    def test_json_file(self):
        scene = Scene(width=300.0, height=200.0, radius=12.0, k=15, seed=11,
                      start=[150.0, 100.0], loop_size=0, colormap="viridis")
        scene.add_seed_event(3, [10.0, 10.0])

        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "scene.json")
            scene.to_json(path)
            loaded = Scene.from_json(path)

        self.assertEqual(loaded.to_dict(), scene.to_dict())

    def test_bundled_scenes_load(self):
        scenes_dir = Path(__file__).parent.parent / "scenes"
        for path in sorted(scenes_dir.glob("*.json")):
            scene = Scene.from_json(str(path))
            self.assertGreater(scene.radius, 0)


if __name__ == "__main__":
    unittest.main()
