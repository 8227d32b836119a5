import enum
from math import ceil, sqrt

import numpy as np


class SamplerState(enum.Enum):
    EMPTY = "empty"
    SEEDED = "seeded"
    GROWING = "growing"
    EXHAUSTED = "exhausted"


class ModelStruct:
    """Immutable sampling parameters and the grid geometry derived from them."""

    def __init__(self, width: float, height: float, radius: float, k: int):
        self.width = float(width)
        self.height = float(height)
        self.radius = float(radius)
        self.k = int(k)

        # cell diagonal == radius, so a cell holds at most one point
        self.cell_size = self.radius / sqrt(2)
        self.inv_cell_size = 1.0 / self.cell_size
        self.grid_dim_x = max(1, ceil(self.width / self.cell_size))
        self.grid_dim_y = max(1, ceil(self.height / self.cell_size))


class StateStruct:
    ###### grid #####
    # index into samples for the point in each cell, -1 when empty
    grid: np.ndarray

    ###### points #####
    samples: list
    active: list
    n_steps: int

    def __init__(self, model: ModelStruct):
        self.grid = -np.ones((model.grid_dim_x, model.grid_dim_y), dtype=int)
        self.samples = []
        self.active = []
        self.n_steps = 0
