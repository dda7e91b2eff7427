"""Rate table: plans, unit rates and add-on prices"""

from .models import (
    AddOnService,
    BillingFrequency,
    Plan,
    PlanTier,
    UsageService,
    UsageUnit,
)
from .table import (
    get_addon_by_id,
    get_plan_by_id,
    get_services_by_category,
    get_usage_service_by_id,
)

__all__ = [
    "AddOnService",
    "BillingFrequency",
    "Plan",
    "PlanTier",
    "UsageService",
    "UsageUnit",
    "get_addon_by_id",
    "get_plan_by_id",
    "get_services_by_category",
    "get_usage_service_by_id",
]
