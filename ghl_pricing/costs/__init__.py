"""Cost functions mapping usage volumes and rates to monetary cost"""

from .ai import AICost, AIUsage, calculate_ai_cost
from .agency import calculate_agency_cost, calculate_agency_cost_breakdown
from .basic import (
    calculate_addon_cost,
    calculate_email_cost,
    calculate_metered_cost,
    calculate_per_thousand_cost,
    calculate_sms_cost,
    calculate_usage_cost,
)
from .summary import UsageCostSummary, calculate_usage_summary
from .usage import calculate_email_usage_cost, calculate_messaging_cost, calculate_voice_cost
from .workflow import calculate_workflow_cost

__all__ = [
    "AICost",
    "AIUsage",
    "UsageCostSummary",
    "calculate_addon_cost",
    "calculate_agency_cost",
    "calculate_agency_cost_breakdown",
    "calculate_ai_cost",
    "calculate_email_cost",
    "calculate_email_usage_cost",
    "calculate_messaging_cost",
    "calculate_metered_cost",
    "calculate_per_thousand_cost",
    "calculate_sms_cost",
    "calculate_usage_cost",
    "calculate_usage_summary",
    "calculate_voice_cost",
    "calculate_workflow_cost",
]
