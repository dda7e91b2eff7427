"""
System failure error classifications.

These represent problems outside a single calculation, such as a broken
configuration file, that need intervention to resolve.
"""

from typing import Optional, Dict, Any

from .input_errors import PricingError


class ConfigurationError(PricingError):
    """Configuration file could not be read or failed validation."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context=context)
        self.source = source
        self.errors = errors or []
        self.recoverable = False
