class InvalidDomainError(ValueError):
    """Raised when the domain width or height is not a positive number."""


class InvalidRadiusError(ValueError):
    """Raised when the minimum separation radius is not a positive number."""


class InvalidRetryBudgetError(ValueError):
    """Raised when the per-point retry budget is not a positive integer."""
