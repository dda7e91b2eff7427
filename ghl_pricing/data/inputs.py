"""
Raw input parsing and clamping.

Form values arrive as numbers or numeric strings. Anything non-numeric,
negative or out of range is clamped to a safe value here so the
calculation functions only ever see valid inputs.
"""

import math
from typing import Any, Optional

import structlog

logger = structlog.get_logger(__name__)


def parse_number(raw: Any) -> Optional[float]:
    """
    Parse a raw input value into a finite float.

    Args:
        raw: Number or numeric string; surrounding whitespace and
            thousands separators are accepted

    Returns:
        Parsed value, or None when the input is not a finite number
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(",", "")
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            logger.debug("Non-numeric input", raw=raw)
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def clamp_non_negative(raw: Any, default: float = 0.0) -> float:
    """Parsed value floored at zero; non-numeric input gives ``default``"""
    value = parse_number(raw)
    if value is None:
        return default
    return max(0.0, value)


def clamp_count(raw: Any, minimum: int = 1) -> int:
    """Whole count of at least ``minimum``; fractional input is truncated"""
    value = parse_number(raw)
    if value is None:
        return minimum
    return max(minimum, int(value))


def clamp_percentage(raw: Any, maximum: Optional[float] = None) -> float:
    """Percentage floored at zero and optionally capped at ``maximum``"""
    value = clamp_non_negative(raw)
    if maximum is not None:
        value = min(value, maximum)
    return value
