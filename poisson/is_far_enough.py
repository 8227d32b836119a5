import numpy as np
from loguru import logger
from utils.structs import *
from .pos_to_grid import pos_to_grid

# cells scanned on each side of the candidate's cell
NEIGHBOR_REACH = 2

def is_far_enough(state: StateStruct, model: ModelStruct, pos, debug=False):
    """
    Test a candidate against every accepted point that could be closer than radius.

    PURPOSE:
    This function is the separation test of the sampler. Instead of comparing the
    candidate with all accepted points, it only looks at the grid cells around the
    candidate's own cell. With cell_size = radius / sqrt(2) a point closer than
    radius can be at most two cells away along either axis, so the scan covers the
    5×5 block of cells centred on the candidate's cell (clipped to the grid). The
    candidate's own cell is part of the scan.

    INPUT VARIABLES (from state):
    - grid[ix, iy]: int - Index into samples of the point stored in cell (ix, iy), or -1
    - samples[i]: np.ndarray, shape (2,) - Accepted point i

    INPUT VARIABLES (from model):
    - radius: float - Minimum separation between accepted points
    - grid_dim_x, grid_dim_y: int - Grid dimensions, used to clip the scanned block

    INPUT VARIABLES (function parameter):
    - pos: np.ndarray, shape (2,) - Candidate position, already known to be in the domain
    - debug: bool - Emit a debug record for the neighbour that rejects the candidate

    RETURNS:
    - bool - True when no stored point lies strictly closer than radius
    """
    gx, gy = pos_to_grid(model, pos)
    rx = range(max(0, gx - NEIGHBOR_REACH), min(model.grid_dim_x, gx + NEIGHBOR_REACH + 1))
    ry = range(max(0, gy - NEIGHBOR_REACH), min(model.grid_dim_y, gy + NEIGHBOR_REACH + 1))
    for ix in rx:
        for iy in ry:
            idx = state.grid[ix, iy]
            if idx == -1:
                continue
            d = np.linalg.norm(state.samples[idx] - pos)
            if d < model.radius:
                if debug:
                    logger.debug("[Sampler] Neighbour detected at distance {} < {}", d, model.radius)
                return False
    return True
