"""
Input handling: parsing raw form values and clamping them to valid ranges.
"""

from .inputs import clamp_count, clamp_non_negative, clamp_percentage, parse_number

__all__ = [
    "clamp_count",
    "clamp_non_negative",
    "clamp_percentage",
    "parse_number",
]
