"""Tests for the compiled-in rate table"""

import pytest

from ghl_pricing.rates.models import AddOnService, Plan, PlanTier, UsageService, UsageUnit
from ghl_pricing.rates.table import (
    CORE_PLANS,
    SMS_CARRIER_FEE_PROFILES,
    all_addons,
    all_usage_services,
    calculate_yearly_savings,
    get_a2p_registration,
    get_addon_by_id,
    get_carrier_fee,
    get_plan_by_id,
    get_services_by_category,
    get_usage_service_by_id,
)


class TestPlans:
    """Test core plan records"""

    def test_three_plans(self):
        """Test that every tier has exactly one plan"""
        assert [plan.id for plan in CORE_PLANS] == [PlanTier.STARTER, PlanTier.UNLIMITED, PlanTier.PRO]

    def test_yearly_price_within_twelve_months(self):
        """Test the yearly price never exceeds twelve monthly payments"""
        for plan in CORE_PLANS:
            assert plan.yearly_price <= plan.monthly_price * 12

    def test_only_pro_allows_markup(self):
        """Test markup capability per plan"""
        assert get_plan_by_id(PlanTier.PRO).allows_markup is True
        assert get_plan_by_id(PlanTier.UNLIMITED).allows_markup is False
        assert get_plan_by_id(PlanTier.STARTER).allows_markup is False

    def test_lookup_by_string(self):
        """Test plan lookup accepts the tier value"""
        assert get_plan_by_id("unlimited").monthly_price == 297.0

    def test_unknown_plan(self):
        """Test unknown plan ids return None"""
        assert get_plan_by_id("enterprise") is None

    def test_yearly_price_above_monthly_rejected(self):
        """Test a plan costing more yearly than monthly is invalid"""
        with pytest.raises(ValueError):
            Plan(id=PlanTier.STARTER, name="Bad", description="", monthly_price=10.0,
                 yearly_price=121.0, yearly_savings=-1.0, sub_accounts=1,
                 rebilling_at_cost=False, rebilling_with_markup=False, saas_mode=False)

    def test_yearly_savings(self):
        """Test yearly savings for the starter plan"""
        plan = get_plan_by_id(PlanTier.STARTER)
        assert calculate_yearly_savings(plan.monthly_price, plan.yearly_price) == pytest.approx(194.0)


class TestUsageServices:
    """Test usage service records and lookups"""

    def test_rates_non_negative(self):
        """Test every published rate is non-negative"""
        for service in all_usage_services():
            assert service.rate >= 0

    def test_negative_rate_rejected(self):
        """Test a negative rate is invalid"""
        with pytest.raises(ValueError):
            UsageService(id="x", name="x", category="ai", rate=-0.01,
                         unit=UsageUnit.PER_MESSAGE, description="", rebillable=False,
                         markup_allowed=False)

    def test_sms_rate(self):
        """Test the outbound SMS segment rate"""
        assert get_usage_service_by_id("sms_outbound").rate == 0.0083

    def test_per_thousand_units(self):
        """Test which units are quoted per 1000"""
        assert get_usage_service_by_id("lc_email").unit.is_per_thousand
        assert get_usage_service_by_id("content_ai_text").unit.is_per_thousand
        assert not get_usage_service_by_id("call_outbound").unit.is_per_thousand

    def test_unknown_service(self):
        """Test unknown service ids return None"""
        assert get_usage_service_by_id("fax") is None

    def test_ids_unique(self):
        """Test service and add-on ids are unique"""
        service_ids = [service.id for service in all_usage_services()]
        addon_ids = [addon.id for addon in all_addons()]
        assert len(service_ids) == len(set(service_ids))
        assert len(addon_ids) == len(set(addon_ids))


class TestAddOns:
    """Test add-on records and lookups"""

    def test_addon_requires_a_price(self):
        """Test an add-on without any price is invalid"""
        with pytest.raises(ValueError):
            AddOnService(id="x", name="x", category="app", description="", per_sub_account=False)

    def test_listings_prices(self):
        """Test online listings billing options"""
        assert get_addon_by_id("listings_monthly").monthly_price == 30.0
        assert get_addon_by_id("listings_semiannual").semi_annual_price == 150.0
        assert get_addon_by_id("listings_annual").yearly_price == 300.0

    def test_hosting_category(self):
        """Test category lookup returns all hosting options"""
        hosting = get_services_by_category("hosting")
        assert [addon.id for addon in hosting] == [
            "wordpress_standard", "wordpress_25_sites", "wordpress_unlimited"
        ]

    def test_unknown_category(self):
        """Test unknown categories return an empty list"""
        assert get_services_by_category("telepathy") == []


class TestCarrierFees:
    """Test carrier fee and registration lookups"""

    def test_carrier_lookup_case_insensitive(self):
        """Test carrier fee lookup ignores case"""
        assert get_carrier_fee("verizon").fee_per_segment == 0.004
        assert get_carrier_fee("AT&T").fee_per_segment == 0.003

    def test_unknown_carrier(self):
        """Test unknown carriers return None"""
        assert get_carrier_fee("Sprint") is None

    def test_fee_profiles(self):
        """Test blended carrier fee profiles"""
        assert SMS_CARRIER_FEE_PROFILES["weighted"] == 0.0038

    def test_a2p_registration(self):
        """Test A2P registration lookup"""
        assert get_a2p_registration("high_volume").one_time_fee == 71.91
        assert get_a2p_registration("medium_volume") is None
