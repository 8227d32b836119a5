# ==============================================================================
# File: tests/test_sampler_wrapper.py
# Purpose: unit tests for frame-by-frame sampling driven by a scene.
# ==============================================================================
import unittest
import tempfile
import os
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from sampler_wrapper import Sampler_Wrapper
from utils.scene import Scene


class FixedDirectionRng:
    """Always picks the first active point and throws candidates straight along +x at distance radius."""

    def integers(self, high):
        return 0

    def uniform(self, low, high):
        return low


class TestSamplerWrapper(unittest.TestCase):

    def make_scene(self, **kwargs):
        params = dict(width=200.0, height=200.0, radius=20.0, k=30, seed=1,
                      start=[190.0, 190.0], loop_size=1)
        params.update(kwargs)
        return Scene(**params)

    def test_default_scene_starts_at_centre(self):
        wrapper = Sampler_Wrapper(seed=0)
        np.testing.assert_allclose(wrapper.get_points(), [[500.0, 500.0]])
        self.assertEqual(wrapper.current_frame, 0)

    def test_random_start(self):
        wrapper = Sampler_Wrapper(scene=self.make_scene(start=None))
        self.assertEqual(len(wrapper.get_points()), 1)

    def test_loop_size_bounds_points_per_frame(self):
        wrapper = Sampler_Wrapper(scene=self.make_scene(loop_size=5))
        wrapper.step()
        self.assertEqual(wrapper.current_frame, 1)
        self.assertLessEqual(len(wrapper.get_points()), 6)
        self.assertEqual(wrapper.sampler.state.n_steps, 5)

    def test_loop_size_zero_runs_to_completion(self):
        wrapper = Sampler_Wrapper(scene=self.make_scene(loop_size=0))
        wrapper.step()
        self.assertEqual(len(wrapper.get_active_points()), 0)
        self.assertTrue(wrapper.is_done())

    def test_seed_events(self):
        scene = self.make_scene()
        scene.add_seed_event(0, [100.0, 190.0])
        scene.add_seed_event(2, [10.0, 10.0])
        wrapper = Sampler_Wrapper(scene=scene)
        self.assertEqual(len(wrapper.get_points()), 2)

        for _ in range(2):
            wrapper.step()
        self.assertFalse(np.any(np.all(np.isclose(wrapper.get_points(), [10.0, 10.0]), axis=1)))
        wrapper.step()
        self.assertTrue(np.any(np.all(np.isclose(wrapper.get_points(), [10.0, 10.0]), axis=1)))

    def test_seed_event_after_exhaustion_restarts_growth(self):
        scene = self.make_scene(width=100.0, height=100.0, start=[95.0, 50.0], loop_size=0)
        scene.add_seed_event(1, [5.0, 50.0])
        wrapper = Sampler_Wrapper(scene=scene)
        wrapper.sampler.rng = FixedDirectionRng()

        wrapper.step()
        self.assertEqual(len(wrapper.get_points()), 1)
        self.assertEqual(len(wrapper.get_active_points()), 0)
        self.assertFalse(wrapper.is_done())

        wrapper.step()
        np.testing.assert_allclose(
            wrapper.get_points(),
            [[95.0, 50.0], [5.0, 50.0], [25.0, 50.0], [45.0, 50.0], [65.0, 50.0]],
        )
        self.assertTrue(wrapper.is_done())

    def test_seed_override_is_reproducible(self):
        runs = []
        for _ in range(2):
            wrapper = Sampler_Wrapper(scene=self.make_scene(seed=None, loop_size=0), seed=5)
            wrapper.step()
            runs.append(wrapper.get_points())
        np.testing.assert_array_equal(runs[0], runs[1])

    def test_scene_file(self):
        scene = self.make_scene(start=[50.0, 60.0])
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "scene.json")
            scene.to_json(path)
            wrapper = Sampler_Wrapper(scene_file=path)
        np.testing.assert_allclose(wrapper.get_points(), [[50.0, 60.0]])

    def test_path_edges_and_order(self):
        wrapper = Sampler_Wrapper(scene=self.make_scene())
        self.assertEqual(wrapper.get_path_edges().shape, (0, 2))
        wrapper.run_to_completion()
        n = len(wrapper.get_points())
        edges = wrapper.get_path_edges()
        self.assertEqual(edges.shape, (n - 1, 2))
        np.testing.assert_array_equal(edges[:, 1] - edges[:, 0], np.ones(n - 1))
        np.testing.assert_array_equal(wrapper.get_order(), np.arange(n))
        self.assertTrue(wrapper.is_done())


if __name__ == "__main__":
    unittest.main()
