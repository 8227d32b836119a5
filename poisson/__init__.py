"""
Poisson package for the individual steps of Poisson-disc dart throwing.
"""
from .errors import InvalidDomainError, InvalidRadiusError, InvalidRetryBudgetError
from .pos_to_grid import pos_to_grid
from .in_domain import in_domain
from .generate_candidate import generate_candidate
from .is_far_enough import is_far_enough
from .add_point import add_point
from .retire_active import retire_active

__all__ = [
    'InvalidDomainError',
    'InvalidRadiusError',
    'InvalidRetryBudgetError',
    'pos_to_grid',
    'in_domain',
    'generate_candidate',
    'is_far_enough',
    'add_point',
    'retire_active',
]
