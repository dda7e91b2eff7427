"""
Output formatting helpers.

Values are rounded here and nowhere else. Rounding is half away from
zero on the decimal representation of the value, so 2.675 formats as
2.68 rather than the 2.67 binary rounding would give.
"""

from decimal import ROUND_HALF_UP, Decimal


def _quantize(value: float, decimals: int) -> Decimal:
    return Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    """
    Format a USD amount with thousands separators and two decimals

    Args:
        amount: Dollar amount

    Returns:
        String such as "$1,234.56" or "-$12.00"
    """
    quantized = _quantize(amount, 2)
    sign = "-" if quantized < 0 else ""
    return f"{sign}${abs(quantized):,.2f}"


def format_number(value: float, max_decimals: int = 2) -> str:
    """Thousands separators, at most ``max_decimals`` decimals and no trailing zeros"""
    quantized = _quantize(value, max_decimals)
    text = f"{quantized:,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a fraction as a percentage, 0.15 -> "15.0%" """
    return f"{_quantize(value * 100, decimals):.{decimals}f}%"


def calculate_monthly_from_annual(annual: float) -> float:
    return annual / 12


def calculate_annual_savings(monthly: float, annual: float) -> float:
    """Savings from paying annually: 12 monthly payments minus the annual price"""
    return monthly * 12 - annual
