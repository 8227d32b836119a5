import numpy as np
from utils.structs import *

def pos_to_grid(model: ModelStruct, pos):
    """
    Map a domain-space position to the index of the grid cell containing it.

    PURPOSE:
    The grid is the spatial index of the sampler. Each cell is `cell_size` wide,
    so a position maps to cell floor(pos / cell_size) along each axis. Positions
    lying exactly on the far edge of the domain (x == width or y == height) fall
    one past the last cell when the domain is a whole number of cells wide, so
    the index is clamped to the last cell along that axis.

    INPUT VARIABLES (function parameter):
    - pos: array-like, shape (2,) - Position inside the domain [0, width] x [0, height]

    INPUT VARIABLES (from model):
    - inv_cell_size: float - Inverse of grid cell size (1/cell_size)
    - grid_dim_x, grid_dim_y: int - Grid dimensions in each direction

    RETURNS:
    - (ix, iy): tuple of int - Cell index, guaranteed inside the grid for in-domain positions
    """
    ix = int(np.floor(pos[0] * model.inv_cell_size))
    iy = int(np.floor(pos[1] * model.inv_cell_size))
    return min(ix, model.grid_dim_x - 1), min(iy, model.grid_dim_y - 1)
