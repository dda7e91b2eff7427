"""
Error classification for pricing calculations.

Hard preconditions (a result that would be mathematically meaningless)
raise InvalidInputError. Guarded-zero cases are not errors and return a
defined default instead.
"""

from .input_errors import (
    PricingError,
    InvalidInputError,
)
from .system_failures import (
    ConfigurationError,
)

__all__ = [
    "PricingError",
    "InvalidInputError",
    "ConfigurationError",
]
