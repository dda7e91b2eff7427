"""
Input error classifications for pricing calculations.

These exceptions are raised by derived-metric functions when a
precondition that makes the result meaningful does not hold. The caller
decides how to present them.
"""

from typing import Optional, Dict, Any


class PricingError(Exception):
    """Base class for calculation errors that callers are expected to handle."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidInputError(PricingError):
    """A calculation precondition failed (e.g. non-positive contribution margin)."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
