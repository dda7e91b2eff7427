"""Pytest configuration and shared fixtures."""

import pytest

from ghl_pricing.config.defaults import get_default_config
from ghl_pricing.metrics.dashboard import DashboardCosts, DashboardRevenue
from ghl_pricing.projections.growth import GrowthMetrics
from ghl_pricing.projections.saas import AgencyCosts, PricingTier, RebillingAssumptions
from ghl_pricing.rates.models import PlanTier
from ghl_pricing.rates.table import get_plan_by_id

# Float tolerance for money values
MONEY = {"rel": 1e-9, "abs": 1e-9}


def money(value: float):
    """pytest.approx with the money tolerance."""
    return pytest.approx(value, **MONEY)


@pytest.fixture
def default_config():
    """Built-in default configuration."""
    return get_default_config()


@pytest.fixture
def starter_plan():
    return get_plan_by_id(PlanTier.STARTER)


@pytest.fixture
def unlimited_plan():
    return get_plan_by_id(PlanTier.UNLIMITED)


@pytest.fixture
def pro_plan():
    return get_plan_by_id(PlanTier.PRO)


@pytest.fixture
def sample_tiers() -> list[PricingTier]:
    """Three active client tiers and two unused slots."""
    return [
        PricingTier("Starter", 297.0, 10, setup_fee=500.0),
        PricingTier("Pro", 497.0, 5, setup_fee=1000.0),
        PricingTier("Enterprise", 997.0, 2, setup_fee=2500.0),
        PricingTier("", 0.0, 0, enabled=False),
        PricingTier("", 0.0, 0, enabled=False),
    ]


@pytest.fixture
def sample_growth() -> GrowthMetrics:
    return GrowthMetrics(monthly_growth_rate=10.0, monthly_churn_rate=5.0,
                         projection_period_months=12)


@pytest.fixture
def sample_agency_costs() -> AgencyCosts:
    return AgencyCosts(platform_cost=497.0, usage_cost_per_client=15.0,
                       support_cost_per_client=25.0)


@pytest.fixture
def sample_rebilling() -> RebillingAssumptions:
    return RebillingAssumptions(sms_markup=50.0, email_markup=30.0,
                                ai_services_markup=40.0, usage_volume_per_client=50.0)


@pytest.fixture
def dashboard_costs() -> DashboardCosts:
    return DashboardCosts(platform=497.0, usage=150.0, add_ons=100.0)


@pytest.fixture
def dashboard_revenue() -> DashboardRevenue:
    return DashboardRevenue(subscriptions=2970.0, rebilling=300.0, setup_fees=0.0)
