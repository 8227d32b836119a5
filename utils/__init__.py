"""
Utils package for sampler state and scene configuration.
"""
from .structs import ModelStruct, StateStruct, SamplerState
from .scene import Scene, SeedEvent

__all__ = ['ModelStruct', 'StateStruct', 'SamplerState', 'Scene', 'SeedEvent']
