import numpy as np
from utils.structs import *

def generate_candidate(model: ModelStruct, base, rng: np.random.Generator):
    """
    Draw one candidate point in the annulus around an active point.

    PURPOSE:
    Candidates are offset from the active point by a uniformly random direction
    and a distance drawn uniformly from [radius, 2 * radius). The inner bound
    keeps the candidate clear of its parent; the outer bound keeps new points
    close enough that the domain fills densely.

    INPUT VARIABLES (function parameter):
    - base: np.ndarray, shape (2,) - Position of the active point
    - rng: np.random.Generator - Uniform random source

    INPUT VARIABLES (from model):
    - radius: float - Minimum separation between accepted points

    RETURNS:
    - np.ndarray, shape (2,) - Candidate position (may lie outside the domain)
    """
    angle = rng.uniform(0.0, 2.0 * np.pi)
    mag = rng.uniform(model.radius, 2.0 * model.radius)
    direction = np.array([np.cos(angle), np.sin(angle)])
    return base + direction * mag
