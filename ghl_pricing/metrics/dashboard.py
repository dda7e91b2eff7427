"""
Profit dashboard metrics.

Combines agency costs and client revenue into headline profit figures,
break-even status, client growth impact and margin trend scenarios.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidInputError
from ..logging.config import get_calculation_logger, log_guarded_result
from .financial import calculate_breakeven

logger = get_calculation_logger(__name__)

CLIENT_GROWTH_STEPS = (10, 25, 50, 100)

# (name, monthly multiplier, share of growth reaching the margin, margin cap %)
MARGIN_SCENARIOS = (
    ("conservative", 1.05, 0.3, 80.0),
    ("moderate", 1.10, 0.4, 85.0),
    ("aggressive", 1.20, 0.5, 90.0),
)


@dataclass(frozen=True)
class DashboardCosts:
    """Agency monthly costs."""
    platform: float = 0.0
    usage: float = 0.0
    add_ons: float = 0.0

    @property
    def total(self) -> float:
        return self.platform + self.usage + self.add_ons


@dataclass(frozen=True)
class DashboardRevenue:
    """Client monthly revenue."""
    subscriptions: float = 0.0
    rebilling: float = 0.0
    setup_fees: float = 0.0

    @property
    def total(self) -> float:
        return self.subscriptions + self.rebilling + self.setup_fees


@dataclass(frozen=True)
class ProfitMetrics:
    """Headline profit figures."""
    mrr: float
    costs: float
    net_profit: float
    profit_margin: float               # percent
    revenue_per_client: float
    cost_per_client: float


@dataclass(frozen=True)
class BreakevenAnalysis:
    """Break-even status for the current client base."""
    fixed_costs: float
    variable_cost_per_client: float
    price_per_client: float
    achievable: bool
    breakeven_clients: Optional[int] = None
    months_to_breakeven: Optional[int] = None
    currently_profitable: bool = False


@dataclass(frozen=True)
class GrowthImpact:
    scenario: str
    clients: int
    revenue: float
    profit: float


@dataclass(frozen=True)
class MarginTrendPoint:
    month: int
    conservative: float
    moderate: float
    aggressive: float


@dataclass(frozen=True)
class BreakdownItem:
    name: str
    value: float


def calculate_profit_metrics(costs: DashboardCosts, revenue: DashboardRevenue,
                             client_count: int) -> ProfitMetrics:
    """
    Headline profit metrics

    Margin is a percentage of revenue; per-client figures are 0 without clients.
    """
    total_revenue = revenue.total
    total_costs = costs.total
    net_profit = total_revenue - total_costs

    return ProfitMetrics(
        mrr=total_revenue,
        costs=total_costs,
        net_profit=net_profit,
        profit_margin=(net_profit / total_revenue) * 100 if total_revenue > 0 else 0.0,
        revenue_per_client=total_revenue / client_count if client_count > 0 else 0.0,
        cost_per_client=total_costs / client_count if client_count > 0 else 0.0,
    )


def analyze_breakeven(costs: DashboardCosts, client_count: int, price_per_client: float,
                      assumed_monthly_growth: float = 0.10) -> BreakevenAnalysis:
    """
    Break-even analysis for the dashboard

    Platform and add-on costs are fixed; usage is variable per client.
    Months to break even assume the client base grows by
    ``assumed_monthly_growth`` of its current size each month.

    Args:
        costs: Agency monthly costs
        client_count: Current client count
        price_per_client: Monthly revenue per client
        assumed_monthly_growth: Monthly growth fraction for the time estimate

    Returns:
        BreakevenAnalysis; not achievable when price does not exceed
        variable cost per client
    """
    fixed_costs = costs.platform + costs.add_ons
    variable_cost_per_client = costs.usage / client_count if client_count > 0 else 0.0

    try:
        breakeven_clients = calculate_breakeven(fixed_costs, price_per_client,
                                                variable_cost_per_client)
    except InvalidInputError as e:
        log_guarded_result(logger, "breakeven", False, str(e),
                           {"fixed_costs": fixed_costs, "price_per_client": price_per_client})
        return BreakevenAnalysis(
            fixed_costs=fixed_costs,
            variable_cost_per_client=variable_cost_per_client,
            price_per_client=price_per_client,
            achievable=False,
        )

    currently_profitable = client_count >= breakeven_clients
    if currently_profitable:
        months = 0
    elif client_count > 0 and assumed_monthly_growth > 0:
        months = math.ceil((breakeven_clients - client_count)
                           / (client_count * assumed_monthly_growth))
    else:
        # No base to grow from
        months = None

    log_guarded_result(logger, "breakeven", True, "breakeven computed",
                       {"breakeven_clients": breakeven_clients, "client_count": client_count})

    return BreakevenAnalysis(
        fixed_costs=fixed_costs,
        variable_cost_per_client=variable_cost_per_client,
        price_per_client=price_per_client,
        achievable=True,
        breakeven_clients=breakeven_clients,
        months_to_breakeven=months,
        currently_profitable=currently_profitable,
    )


def project_client_growth_impact(metrics: ProfitMetrics, client_count: int) -> list[GrowthImpact]:
    """Revenue and profit at the current client count and after adding more clients"""
    impacts = [GrowthImpact("Current", client_count, metrics.mrr, metrics.net_profit)]
    unit_profit = metrics.revenue_per_client - metrics.cost_per_client

    for step in CLIENT_GROWTH_STEPS:
        clients = client_count + step
        impacts.append(GrowthImpact(
            scenario=f"+{step} Clients",
            clients=clients,
            revenue=clients * metrics.revenue_per_client,
            profit=clients * unit_profit,
        ))

    return impacts


def project_margin_trend(profit_margin: float, months: int = 12) -> list[MarginTrendPoint]:
    """
    Margin % per month under three growth scenarios, months 0..months

    Each scenario passes only part of its growth through to margin and is
    capped at a ceiling.
    """
    points = []
    for month in range(months + 1):
        values = {}
        for name, multiplier, share, cap in MARGIN_SCENARIOS:
            growth = multiplier ** month
            values[name] = min(profit_margin * (1 + (growth - 1) * share), cap)
        points.append(MarginTrendPoint(month=month, **values))
    return points


def revenue_breakdown(revenue: DashboardRevenue) -> list[BreakdownItem]:
    """Revenue parts with a positive value"""
    items = [
        BreakdownItem("Subscriptions", revenue.subscriptions),
        BreakdownItem("Rebilling", revenue.rebilling),
        BreakdownItem("Setup Fees", revenue.setup_fees),
    ]
    return [item for item in items if item.value > 0]


def cost_breakdown(costs: DashboardCosts) -> list[BreakdownItem]:
    """Cost parts with a positive value"""
    items = [
        BreakdownItem("Platform", costs.platform),
        BreakdownItem("Usage", costs.usage),
        BreakdownItem("Add-ons", costs.add_ons),
    ]
    return [item for item in items if item.value > 0]
