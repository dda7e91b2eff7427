"""Tests for the primitive cost functions"""

import pytest

from conftest import money
from ghl_pricing.costs.basic import (
    calculate_a2p_first_month_cost,
    calculate_addon_cost,
    calculate_email_cost,
    calculate_metered_cost,
    calculate_per_thousand_cost,
    calculate_sms_cost,
    calculate_usage_cost,
)
from ghl_pricing.rates.models import BillingFrequency
from ghl_pricing.rates.table import (
    HIPAA_COMPLIANCE,
    WHATSAPP_SERVICE,
    get_addon_by_id,
    get_usage_service_by_id,
)


class TestMeteredCost:
    """Test metered and per-1000 pricing"""

    def test_metered_cost(self):
        """Test cost equals volume times rate"""
        assert calculate_metered_cost(250, 0.02) == money(5.0)

    def test_zero_volume(self):
        """Test zero volume costs nothing"""
        assert calculate_metered_cost(0, 0.0166) == 0.0

    def test_monotonic_in_volume(self):
        """Test cost never decreases as volume grows"""
        costs = [calculate_metered_cost(volume, 0.0083) for volume in range(0, 5000, 250)]
        assert costs == sorted(costs)

    def test_per_thousand(self):
        """Test per-1000 pricing"""
        assert calculate_per_thousand_cost(2500, 0.675) == money(1.6875)

    def test_email_cost(self):
        """Test email sending at the LC Email rate"""
        assert calculate_email_cost(10000, 0.675) == money(6.75)


class TestSMSCost:
    """Test SMS cost with carrier fee"""

    def test_sms_worked_example(self):
        """Test 1000 segments at 0.0083 plus 0.003 carrier fee"""
        assert calculate_sms_cost(1000, 0.0083, 0.003) == money(11.30)

    def test_default_carrier_fee(self):
        """Test the default carrier fee is 0.003 per segment"""
        assert calculate_sms_cost(1000, 0.0083) == money(11.30)

    def test_idempotent(self):
        """Test repeated calls return identical results"""
        assert calculate_sms_cost(1234, 0.0083) == calculate_sms_cost(1234, 0.0083)


class TestUsageCost:
    """Test costing a rate-table service"""

    def test_metered_service(self):
        """Test a per-minute service"""
        service = get_usage_service_by_id("call_outbound")
        assert calculate_usage_cost(service, 100) == money(1.66)

    def test_per_thousand_service(self):
        """Test per-1000 services use the per-thousand rule"""
        service = get_usage_service_by_id("lc_email")
        assert calculate_usage_cost(service, 10000) == money(6.75)

    def test_included_quantity(self):
        """Test only usage beyond the allowance is billed"""
        service = get_usage_service_by_id("lc_email")
        assert calculate_usage_cost(service, 10000, included_quantity=2000) == money(5.4)

    def test_allowance_exceeds_usage(self):
        """Test usage inside the allowance costs nothing"""
        service = get_usage_service_by_id("conversation_ai")
        assert calculate_usage_cost(service, 100, included_quantity=500) == 0.0


class TestAddOnCost:
    """Test add-on charges"""

    def test_monthly_flat(self):
        """Test a flat monthly add-on"""
        assert calculate_addon_cost(HIPAA_COMPLIANCE) == 297.0

    def test_per_sub_account(self):
        """Test per-sub-account add-ons scale with sub-accounts"""
        assert calculate_addon_cost(WHATSAPP_SERVICE, sub_accounts=5) == money(50.0)

    def test_flat_ignores_sub_accounts(self):
        """Test flat add-ons ignore the sub-account count"""
        assert calculate_addon_cost(HIPAA_COMPLIANCE, sub_accounts=5) == 297.0

    def test_semi_annual_monthly_equivalent(self):
        """Test a semi-annual price spread over six months"""
        listings = get_addon_by_id("listings_semiannual")
        assert calculate_addon_cost(listings) == money(25.0)

    def test_yearly_from_semi_annual(self):
        """Test converting a semi-annual price to a yearly charge"""
        listings = get_addon_by_id("listings_semiannual")
        assert calculate_addon_cost(listings, frequency=BillingFrequency.YEARLY) == money(300.0)

    def test_semi_annual_from_yearly(self):
        """Test converting a yearly price to a semi-annual charge"""
        listings = get_addon_by_id("listings_annual")
        assert calculate_addon_cost(listings, frequency=BillingFrequency.SEMI_ANNUAL) == money(150.0)

    def test_one_time_without_price(self):
        """Test add-ons without a one-time price cost nothing one-time"""
        assert calculate_addon_cost(HIPAA_COMPLIANCE, frequency=BillingFrequency.ONE_TIME) == 0.0


class TestA2PCost:
    """Test A2P registration cost"""

    def test_first_month(self):
        """Test registration plus first campaign fee"""
        assert calculate_a2p_first_month_cost("low_volume") == money(35.525)

    def test_unknown_registration(self):
        """Test unknown registration types cost nothing"""
        assert calculate_a2p_first_month_cost("mystery") == 0.0
