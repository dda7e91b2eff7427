"""Premium workflow cost: pay-per-execution vs the best qualifying tier"""

from dataclasses import dataclass
from typing import Optional

from ..rates.models import WorkflowTier
from ..rates.table import WORKFLOW_EXECUTION_RATE, WORKFLOW_TIERS
from .basic import calculate_metered_cost


@dataclass(frozen=True)
class WorkflowCost:
    """Workflow cost comparison."""
    executions: float
    pay_per_use: float
    tier_cost: float
    recommended_tier: str
    savings: float                     # pay_per_use - tier_cost
    total: float


def select_workflow_tier(executions: float) -> Optional[WorkflowTier]:
    """
    Highest paid tier whose included executions do not exceed the volume

    The lifetime free allocation never qualifies.
    """
    best = None
    for tier in WORKFLOW_TIERS:
        if tier.lifetime:
            continue
        if executions >= tier.executions_included:
            if best is None or tier.executions_included > best.executions_included:
                best = tier
    return best


def calculate_workflow_cost(executions: float) -> WorkflowCost:
    """
    Workflow execution cost

    Pay-per-use is executions times the per-execution rate. Once volume
    reaches a tier's execution count the tier price is offered instead;
    the total is whichever is lower.

    Args:
        executions: Monthly workflow executions

    Returns:
        WorkflowCost with both prices and the recommended option
    """
    pay_per_use = calculate_metered_cost(executions, WORKFLOW_EXECUTION_RATE)

    tier = select_workflow_tier(executions)
    if tier is None:
        recommended = "Pay-per-use"
        tier_cost = pay_per_use
    else:
        recommended = f"{tier.name} (${tier.monthly_price:.0f}/month)"
        tier_cost = tier.monthly_price

    return WorkflowCost(
        executions=executions,
        pay_per_use=pay_per_use,
        tier_cost=tier_cost,
        recommended_tier=recommended,
        savings=pay_per_use - tier_cost,
        total=min(pay_per_use, tier_cost),
    )
