"""Utility functions for the pricing calculator"""

from .formatting import (
    calculate_annual_savings,
    calculate_monthly_from_annual,
    format_currency,
    format_number,
    format_percentage,
)

__all__ = [
    "calculate_annual_savings",
    "calculate_monthly_from_annual",
    "format_currency",
    "format_number",
    "format_percentage",
]
