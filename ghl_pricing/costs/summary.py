"""Combined monthly usage cost across messaging, voice, email, AI and workflows"""

from dataclasses import dataclass

from ..aggregation import CostLine, Totals, sum_lines
from .ai import AICost, AIUsage, calculate_ai_cost
from .usage import (
    EmailCost,
    EmailUsage,
    MessagingCost,
    MessagingUsage,
    VoiceCost,
    VoiceUsage,
    calculate_email_usage_cost,
    calculate_messaging_cost,
    calculate_voice_cost,
)
from .workflow import WorkflowCost, calculate_workflow_cost


@dataclass(frozen=True)
class UsageCostSummary:
    """Per-category usage costs and their totals."""
    messaging: MessagingCost
    voice: VoiceCost
    email: EmailCost
    ai: AICost
    workflow: WorkflowCost
    totals: Totals
    sub_accounts: int

    @property
    def monthly(self) -> float:
        return self.totals.cost

    @property
    def annual(self) -> float:
        return self.totals.cost * 12

    @property
    def per_sub_account(self) -> float:
        if self.sub_accounts > 0:
            return self.totals.cost / self.sub_accounts
        return self.totals.cost


def calculate_usage_summary(messaging: MessagingUsage, voice: VoiceUsage,
                            email: EmailUsage, ai: AIUsage,
                            workflow_executions: float = 0.0) -> UsageCostSummary:
    """
    Monthly usage cost for all categories

    Args:
        messaging: SMS/MMS usage
        voice: Call usage
        email: Email usage
        ai: AI usage, also carries the sub-account count
        workflow_executions: Premium workflow executions

    Returns:
        UsageCostSummary with category breakdowns and totals
    """
    messaging_cost = calculate_messaging_cost(messaging)
    voice_cost = calculate_voice_cost(voice)
    email_cost = calculate_email_usage_cost(email)
    ai_cost = calculate_ai_cost(ai)
    workflow_cost = calculate_workflow_cost(workflow_executions)

    totals = sum_lines([
        CostLine("messaging", "messaging", messaging_cost.total),
        CostLine("voice", "phone", voice_cost.total),
        CostLine("email", "email", email_cost.total),
        CostLine("ai", "ai", ai_cost.total),
        CostLine("workflow", "workflow", workflow_cost.total),
    ])

    return UsageCostSummary(
        messaging=messaging_cost,
        voice=voice_cost,
        email=email_cost,
        ai=ai_cost,
        workflow=workflow_cost,
        totals=totals,
        sub_accounts=ai.sub_accounts,
    )
