"""Tests for derived financial metrics"""

import pytest

from conftest import money
from ghl_pricing.errors import InvalidInputError, PricingError
from ghl_pricing.metrics.financial import (
    DiscountTier,
    SaaSTier,
    average_lifespan_months,
    calculate_acv,
    calculate_breakeven,
    calculate_cac_payback_period,
    calculate_churn_rate,
    calculate_client_revenue,
    calculate_customer_lifetime_value,
    calculate_profit_margin,
    calculate_roi,
    calculate_saas_revenue,
    calculate_volume_discount_price,
    select_discount,
)

DISCOUNT_TIERS = [DiscountTier(threshold=100, discount=0.1), DiscountTier(threshold=50, discount=0.05)]


class TestBreakeven:
    """Test break-even client count"""

    def test_worked_example(self):
        """Test 2500 fixed at 247 contribution margin needs 11 clients"""
        assert calculate_breakeven(2500, 297, 50) == 11

    def test_exact_division(self):
        """Test an exact multiple needs no extra client"""
        assert calculate_breakeven(1000, 150, 50) == 10

    def test_no_fixed_costs(self):
        """Test zero fixed costs break even immediately"""
        assert calculate_breakeven(0, 100) == 0

    def test_zero_margin_raises(self):
        """Test zero contribution margin is invalid input"""
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_breakeven(1000, 50, 50)

        assert exc_info.value.field == "contribution_margin"
        assert exc_info.value.value == 0
        assert exc_info.value.context["price_per_client"] == 50

    def test_negative_margin_raises(self):
        """Test negative contribution margin is invalid input"""
        with pytest.raises(InvalidInputError):
            calculate_breakeven(1000, 40, 50)


class TestCACPayback:
    """Test acquisition cost payback"""

    def test_payback(self):
        """Test months to recover acquisition cost"""
        assert calculate_cac_payback_period(200, 50) == money(4.0)

    @pytest.mark.parametrize("monthly_profit", [0, -10])
    def test_non_positive_profit_raises(self, monthly_profit):
        """Test non-positive monthly profit is invalid input"""
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_cac_payback_period(200, monthly_profit)
        assert isinstance(exc_info.value, PricingError)
        assert exc_info.value.field == "monthly_profit"


class TestLifetimeValue:
    """Test lifespan and CLV"""

    def test_clv_worked_example(self):
        """Test 297 x 24 x 0.6"""
        assert calculate_customer_lifetime_value(297, 24, 0.6) == money(4276.80)

    def test_lifespan_from_churn(self):
        """Test lifespan is the inverse of churn"""
        assert average_lifespan_months(0.05, 24) == money(20.0)

    def test_zero_churn_fallback(self):
        """Test zero churn uses the fallback horizon"""
        assert average_lifespan_months(0.0, 36) == 36


class TestROI:
    """Test return on investment"""

    def test_roi(self):
        """Test ROI as a fraction"""
        assert calculate_roi(1000, 1500) == money(0.5)

    def test_zero_investment(self):
        """Test zero investment returns 0"""
        assert calculate_roi(0, 1500) == 0.0


class TestVolumeDiscount:
    """Test volume discount pricing"""

    def test_middle_tier(self):
        """Test the highest threshold not exceeding quantity wins"""
        assert select_discount(75, DISCOUNT_TIERS) == 0.05
        assert calculate_volume_discount_price(100.0, 75, DISCOUNT_TIERS) == money(7125.0)

    def test_no_tier(self):
        """Test quantities below every threshold get no discount"""
        assert select_discount(10, DISCOUNT_TIERS) == 0.0
        assert calculate_volume_discount_price(100.0, 10, DISCOUNT_TIERS) == money(1000.0)

    def test_threshold_inclusive(self):
        """Test reaching a threshold qualifies"""
        assert select_discount(100, DISCOUNT_TIERS) == 0.1
        assert calculate_volume_discount_price(100.0, 100, DISCOUNT_TIERS) == money(9000.0)

    def test_order_independent(self):
        """Test tier order does not matter"""
        assert select_discount(75, list(reversed(DISCOUNT_TIERS))) == 0.05

    def test_no_tiers(self):
        """Test no tiers at all"""
        assert calculate_volume_discount_price(10.0, 5, []) == money(50.0)


class TestRevenueMetrics:
    """Test revenue, margin, ACV and churn"""

    def test_profit_margin(self):
        """Test margin as a fraction"""
        assert calculate_profit_margin(1000, 400) == money(0.6)

    def test_profit_margin_zero_revenue(self):
        """Test zero revenue gives zero margin"""
        assert calculate_profit_margin(0, 400) == 0.0

    def test_client_revenue(self):
        """Test revenue net of churn"""
        assert calculate_client_revenue(10, 100.0) == money(1000.0)
        assert calculate_client_revenue(10, 100.0, churn_rate=0.1) == money(900.0)

    def test_saas_revenue(self):
        """Test MRR across tiers"""
        tiers = [SaaSTier("Basic", 197.0, 10), SaaSTier("Pro", 297.0, 5)]
        assert calculate_saas_revenue(tiers) == money(3455.0)
        assert calculate_saas_revenue([]) == 0.0

    def test_acv(self):
        """Test annual contract value"""
        assert calculate_acv(1000.0, 500.0) == money(12500.0)
        assert calculate_acv(1000.0) == money(12000.0)

    def test_churn_rate(self):
        """Test churn fraction over a period"""
        assert calculate_churn_rate(100, 95, 10) == money(0.15)

    def test_churn_rate_no_start(self):
        """Test zero starting customers"""
        assert calculate_churn_rate(0, 10, 10) == 0.0

    def test_churn_rate_floored(self):
        """Test churn is never negative"""
        assert calculate_churn_rate(100, 120, 10) == 0.0
