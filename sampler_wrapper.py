import numpy as np
from loguru import logger
from sampler import PoissonSampler
from utils.scene import Scene


class Sampler_Wrapper:
    def __init__(self, scene=None, scene_file=None, seed=None):
        """
        Initialize sampler wrapper.

        Args:
            scene: Scene object to use (if provided)
            scene_file: Path to JSON scene file (if provided, scene is ignored)
            seed: Random seed overriding the scene's seed (if provided)
        """
        if scene_file:
            self.scene = Scene.from_json(scene_file)
        elif scene:
            self.scene = scene
        else:
            # Default scene, seeded from the centre of the domain
            self.scene = Scene(width=1000.0, height=1000.0, radius=50.0, k=30,
                               start=[500.0, 500.0], loop_size=20)

        self.seed = seed if seed is not None else self.scene.seed
        self.rng = np.random.default_rng(self.seed)
        self.sampler = PoissonSampler(
            (self.scene.width, self.scene.height),
            self.scene.radius,
            self.scene.k,
            rng=self.rng,
        )

        # Track current frame
        self.current_frame = 0

        self.sampler.start(self.scene.start)

        # Process frame 0 seed events immediately (before first step)
        for event in self.scene.get_seed_events_at_frame(0):
            self.add_seed(event.point)

    def add_seed(self, point=None):
        """
        Add another seed to the running sampler.

        Args:
            point (array-like, shape (2,)): Seed position. Random when None.

        Returns:
            np.ndarray or None: The accepted seed, None if it was discarded.
        """
        seed = self.sampler.start(point)
        if seed is not None:
            logger.info("[Wrapper] Frame {}: seed added at ({}, {})", self.current_frame, seed[0], seed[1])
        return seed

    def step(self):
        # Check for seed events at current frame (skip frame 0, already processed in __init__)
        if self.current_frame > 0:
            for event in self.scene.get_seed_events_at_frame(self.current_frame):
                self.add_seed(event.point)

        if self.scene.loop_size == 0:
            self.sampler.run_to_completion()
        else:
            for i in range(self.scene.loop_size):
                if self.sampler.step() is None and not self.sampler.state.active:
                    break

        # Increment frame counter
        self.current_frame += 1

    def run_to_completion(self):
        return self.sampler.run_to_completion()

    def is_done(self):
        """True once no point is active and no seed events remain."""
        pending = [e for e in self.scene.seed_events if e.frame >= self.current_frame]
        return not self.sampler.state.active and not pending

    def get_points(self):
        return self.sampler.points()

    def get_active_points(self):
        return self.sampler.active_points()

    def get_order(self):
        """Acceptance index of every point, used to colour points along the path."""
        return np.arange(len(self.sampler), dtype=float)

    def get_path_edges(self):
        """Edges (i, i + 1) joining consecutive points in acceptance order."""
        n = len(self.sampler)
        if n < 2:
            return np.zeros((0, 2), dtype=np.int64)
        idx = np.arange(n - 1, dtype=np.int64)
        return np.stack([idx, idx + 1], axis=1)
