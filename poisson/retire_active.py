from utils.structs import *

def retire_active(state: StateStruct, active_index: int):
    """
    Remove the entry at position `active_index` of the active list.

    The point stays in samples and in the grid; it only stops spawning neighbours.
    Returns the index of the retired point in samples.
    """
    return state.active.pop(active_index)
