"""Tests for output formatting helpers"""

from ghl_pricing.utils.formatting import (
    calculate_annual_savings,
    calculate_monthly_from_annual,
    format_currency,
    format_number,
    format_percentage,
)


class TestFormatCurrency:
    """Test currency formatting"""

    def test_thousands(self):
        """Test thousands separators and two decimals"""
        assert format_currency(1234.5) == "$1,234.50"

    def test_negative(self):
        """Test negative amounts"""
        assert format_currency(-12) == "-$12.00"

    def test_half_up(self):
        """Test halves round away from zero"""
        assert format_currency(2.675) == "$2.68"

    def test_zero(self):
        """Test zero"""
        assert format_currency(0) == "$0.00"


class TestFormatNumber:
    """Test number formatting"""

    def test_rounds_to_two_decimals(self):
        """Test at most two decimals"""
        assert format_number(1234.5678) == "1,234.57"

    def test_drops_trailing_zeros(self):
        """Test trailing zeros are dropped"""
        assert format_number(1000) == "1,000"
        assert format_number(1.5) == "1.5"


class TestFormatPercentage:
    """Test percentage formatting"""

    def test_fraction(self):
        """Test fractions are shown as percentages"""
        assert format_percentage(0.15) == "15.0%"

    def test_decimals(self):
        """Test custom precision"""
        assert format_percentage(0.5, decimals=0) == "50%"


class TestPriceConversions:
    """Test annual/monthly conversions"""

    def test_monthly_from_annual(self):
        """Test annual price per month"""
        assert calculate_monthly_from_annual(1200.0) == 100.0

    def test_annual_savings(self):
        """Test savings from annual billing"""
        assert calculate_annual_savings(497.0, 4970.0) == 994.0
