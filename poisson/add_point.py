from utils.structs import *
from .pos_to_grid import pos_to_grid

def add_point(state: StateStruct, model: ModelStruct, pos):
    """
    Accept a point: record it in the grid, the active list and the ordered samples.

    PURPOSE:
    Acceptance is the only operation that writes the grid. The new point gets the
    next index in `samples`, that index is stored in its grid cell and appended to
    `active` so the point can spawn neighbours on later steps.

    INPUT VARIABLES (function parameter):
    - pos: np.ndarray, shape (2,) - Position inside the domain that passed the separation test

    OUTPUT VARIABLES (modified in state):
    - samples: list - The point is appended; its index never changes afterwards
    - grid[ix, iy]: int - Cell containing the point now holds its index
    - active: list - The point's index is appended

    RETURNS:
    - int - Index of the new point in samples
    """
    idx = len(state.samples)
    state.samples.append(pos)
    state.grid[pos_to_grid(model, pos)] = idx
    state.active.append(idx)
    return idx
