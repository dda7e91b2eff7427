"""
Usage rebilling with plan-gated markup.
"""

from .markup import (
    REBILLABLE_UNIT_COSTS,
    HostingRebilling,
    PlanUpgradeAnalysis,
    RebillingLine,
    RebillingSummary,
    ServiceConfig,
    analyze_plan_upgrade,
    calculate_client_price,
    calculate_hosting_rebilling,
    calculate_rebilling_profit,
    calculate_rebilling_summary,
    calculate_service_rebilling,
    effective_markup,
)

__all__ = [
    "REBILLABLE_UNIT_COSTS",
    "HostingRebilling",
    "PlanUpgradeAnalysis",
    "RebillingLine",
    "RebillingSummary",
    "ServiceConfig",
    "analyze_plan_upgrade",
    "calculate_client_price",
    "calculate_hosting_rebilling",
    "calculate_rebilling_profit",
    "calculate_rebilling_summary",
    "calculate_service_rebilling",
    "effective_markup",
]
