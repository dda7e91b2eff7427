"""
Derived financial metrics and the profit dashboard.
"""

from .dashboard import (
    BreakdownItem,
    BreakevenAnalysis,
    DashboardCosts,
    DashboardRevenue,
    GrowthImpact,
    MarginTrendPoint,
    ProfitMetrics,
    analyze_breakeven,
    calculate_profit_metrics,
    cost_breakdown,
    project_client_growth_impact,
    project_margin_trend,
    revenue_breakdown,
)
from .financial import (
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

__all__ = [
    "BreakdownItem",
    "BreakevenAnalysis",
    "DashboardCosts",
    "DashboardRevenue",
    "DiscountTier",
    "GrowthImpact",
    "MarginTrendPoint",
    "ProfitMetrics",
    "SaaSTier",
    "analyze_breakeven",
    "average_lifespan_months",
    "calculate_acv",
    "calculate_breakeven",
    "calculate_cac_payback_period",
    "calculate_churn_rate",
    "calculate_client_revenue",
    "calculate_customer_lifetime_value",
    "calculate_profit_margin",
    "calculate_profit_metrics",
    "calculate_roi",
    "calculate_saas_revenue",
    "calculate_volume_discount_price",
    "cost_breakdown",
    "project_client_growth_impact",
    "project_margin_trend",
    "revenue_breakdown",
    "select_discount",
]
