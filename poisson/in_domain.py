import numpy as np
from utils.structs import *

def in_domain(model: ModelStruct, pos):
    """
    Check whether a position lies inside the closed domain [0, width] x [0, height].

    Non-finite coordinates are never inside the domain.
    """
    x, y = float(pos[0]), float(pos[1])
    if not (np.isfinite(x) and np.isfinite(y)):
        return False
    return 0.0 <= x <= model.width and 0.0 <= y <= model.height
