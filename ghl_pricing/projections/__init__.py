"""
Client, revenue and profit projections over discrete monthly steps.
"""

from .growth import (
    DEFAULT_SCENARIOS,
    CostModel,
    GrowthMetrics,
    GrowthPoint,
    GrowthScenario,
    ProfitTrendPoint,
    RevenueProjection,
    ScenarioOutcome,
    compare_growth_scenarios,
    net_growth_rate,
    new_clients,
    project_clients,
    project_growth,
    project_profit_trend,
    project_revenue_growth,
    round_half_up,
)
from .saas import (
    AgencyCosts,
    ClientValueSummary,
    MonthlySnapshot,
    PricingTier,
    RebillingAssumptions,
    active_tiers,
    calculate_projected_rebilling_profit,
    project_saas_revenue,
    summarize_saas_clients,
)

__all__ = [
    "DEFAULT_SCENARIOS",
    "AgencyCosts",
    "ClientValueSummary",
    "CostModel",
    "GrowthMetrics",
    "GrowthPoint",
    "GrowthScenario",
    "MonthlySnapshot",
    "PricingTier",
    "ProfitTrendPoint",
    "RebillingAssumptions",
    "RevenueProjection",
    "ScenarioOutcome",
    "active_tiers",
    "calculate_projected_rebilling_profit",
    "compare_growth_scenarios",
    "net_growth_rate",
    "new_clients",
    "project_clients",
    "project_growth",
    "project_profit_trend",
    "project_revenue_growth",
    "project_saas_revenue",
    "round_half_up",
    "summarize_saas_clients",
]
