import sys
import os
import numpy as np
from loguru import logger
from typing import Optional

sys.path.append(os.path.dirname(os.path.realpath(__file__)))
from utils.structs import ModelStruct, StateStruct, SamplerState

from poisson import *


class PoissonSampler:
    """
    Poisson-disc sampler over a width x height rectangle.

    Points are produced incrementally with `step()` or all at once with
    `run_to_completion()`. No two accepted points are closer than `radius`.
    """

    def __init__(self, size, radius, k=30, rng: Optional[np.random.Generator] = None):
        """
        Args:
            size: (width, height) of the domain.
            radius: Minimum distance between any two accepted points.
            k: Candidates tried per active point before it is retired.
            rng: Random source. A fresh default generator is used when omitted.
        """
        width, height = size
        self.validate_parameters(width, height, radius, k)
        self.rng = rng if rng is not None else np.random.default_rng()
        # turns on per-point debug records, slows down sampling
        self.debug = False
        self.initialize(width, height, radius, k)

    @staticmethod
    def validate_parameters(width, height, radius, k):
        if not (np.isfinite(width) and np.isfinite(height) and width > 0 and height > 0):
            raise InvalidDomainError(f"domain size must be positive, got ({width}, {height})")
        if not (np.isfinite(radius) and radius > 0):
            raise InvalidRadiusError(f"radius must be positive, got {radius}")
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
            raise InvalidRetryBudgetError(f"k must be a positive integer, got {k!r}")

    def initialize(self, width, height, radius, k):
        self.model = ModelStruct(width, height, radius, k)
        self.state = StateStruct(self.model)

    @property
    def size(self):
        return self.model.width, self.model.height

    @property
    def radius(self):
        return self.model.radius

    @property
    def k(self):
        return self.model.k

    @property
    def cell_size(self):
        return self.model.cell_size

    @property
    def grid_shape(self):
        return self.model.grid_dim_x, self.model.grid_dim_y

    @property
    def sampler_state(self) -> SamplerState:
        if not self.state.samples:
            return SamplerState.EMPTY
        if not self.state.active:
            return SamplerState.EXHAUSTED
        if self.state.n_steps == 0:
            return SamplerState.SEEDED
        return SamplerState.GROWING

    def is_exhausted(self):
        return self.sampler_state is SamplerState.EXHAUSTED

    def __len__(self):
        return len(self.state.samples)

    def start(self, x0=None):
        """
        Seed the sampler with an initial point.

        Args:
            x0: (x, y) starting point. Drawn uniformly from the domain when omitted.

        Returns:
            np.ndarray of shape (2,) with the accepted seed, or None when the seed
            was discarded (outside the domain or closer than radius to an existing
            point). A seed accepted after exhaustion starts a new growth front.
        """
        if x0 is None:
            x0 = self.rng.uniform([0.0, 0.0], [self.model.width, self.model.height])
        pos = np.asarray(x0, dtype=float).reshape(-1)
        if pos.shape != (2,):
            raise ValueError(f"start point must have 2 coordinates, got shape {pos.shape}")

        if not in_domain(self.model, pos):
            logger.warning(
                "[Sampler] Seed ({}, {}) outside domain {}x{}, discarded",
                pos[0], pos[1], self.model.width, self.model.height,
            )
            return None
        if not is_far_enough(self.state, self.model, pos, self.debug):
            logger.warning(
                "[Sampler] Seed ({}, {}) closer than radius {} to an existing point, discarded",
                pos[0], pos[1], self.model.radius,
            )
            return None

        add_point(self.state, self.model, pos)
        if self.debug:
            logger.debug("[Sampler] Seed added at ({}, {})", pos[0], pos[1])
        return pos.copy()

    def step(self):
        """
        Run one generation step.

        Picks a random active point and tries up to k candidates around it. The
        first candidate that is inside the domain and at least radius away from
        every accepted point is accepted and returned. When all k candidates fail
        the active point is retired and None is returned. Does nothing once the
        active list is empty.
        """
        if not self.state.active:
            return None
        self.state.n_steps += 1

        active_index = int(self.rng.integers(len(self.state.active)))
        base = self.state.samples[self.state.active[active_index]]

        for n in range(self.model.k):
            sample = generate_candidate(self.model, base, self.rng)

            # bounds check in real space
            if not in_domain(self.model, sample):
                continue

            if is_far_enough(self.state, self.model, sample, self.debug):
                add_point(self.state, self.model, sample)
                if self.debug:
                    logger.debug("[Sampler] Point added at ({}, {})", sample[0], sample[1])
                return sample.copy()

        retired = retire_active(self.state, active_index)
        if self.debug:
            logger.debug(
                "[Sampler] No point found after {} tries, retiring point {} ({} still active)",
                self.model.k, retired, len(self.state.active),
            )
        return None

    def run_to_completion(self):
        """Step until no active points remain. Returns the number of points added."""
        n_before = len(self.state.samples)
        while self.state.active:
            self.step()
        n_added = len(self.state.samples) - n_before
        logger.info(
            "[Sampler] Sampling finished after {} steps: {} points ({} added by this run)",
            self.state.n_steps, len(self.state.samples), n_added,
        )
        return n_added

    def points(self):
        """Accepted points in acceptance order, as a read-only (n, 2) array."""
        return self._export(self.state.samples)

    def active_points(self):
        """Points still able to spawn neighbours, as a read-only (m, 2) array."""
        return self._export([self.state.samples[i] for i in self.state.active])

    @staticmethod
    def _export(positions):
        out = np.array(positions, dtype=float).reshape(-1, 2)
        out.flags.writeable = False
        return out


def sample_blue_noise(size, radius, k=30, start=None, seed=None):
    """
    Generate blue-noise (Poisson-disc) samples in a 2D rectangle in one call.

    Args:
        size (array-like, shape (2,)): Width and height of the rectangle, with its corner at the origin.
        radius (float): Minimum distance between any two samples.
        k (int): Number of candidates per active point (Poisson disk parameter).
        start (array-like, shape (2,), optional): First sample. Random when omitted.
        seed (int, optional): Random seed for reproducibility.

    Returns:
        np.ndarray: Array of shape (m, 2) of sample positions in acceptance order.
    """
    sampler = PoissonSampler(size, radius, k, rng=np.random.default_rng(seed))
    if sampler.start(start) is None:
        logger.warning("[Sampler] Start point {} rejected, returning no samples", start)
        return sampler.points()
    sampler.run_to_completion()
    return sampler.points()
