"""Compounding client and revenue growth series"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity"""
    return math.floor(value + 0.5)


def net_growth_rate(growth_rate: float, churn_rate: float) -> float:
    """Net monthly growth %: growth minus churn"""
    return growth_rate - churn_rate


def project_clients(initial_clients: int, net_rate: float, month: int) -> int:
    """
    Client count after compounding net growth for a number of months

    clients = round(initial_clients * (1 + net_rate / 100) ** month)

    Month 0 returns the initial count unchanged.
    """
    if month == 0:
        return initial_clients
    return round_half_up(initial_clients * (1 + net_rate / 100) ** month)


def new_clients(initial_clients: int, net_rate: float, month: int) -> int:
    """
    Clients acquired in a month

    The full initial cohort at month 0, afterwards the increase over the
    previous month, never negative.
    """
    if month == 0:
        return initial_clients
    return max(0, project_clients(initial_clients, net_rate, month)
               - project_clients(initial_clients, net_rate, month - 1))


@dataclass(frozen=True)
class GrowthMetrics:
    """Monthly growth and churn % over a projection period."""
    monthly_growth_rate: float = 10.0
    monthly_churn_rate: float = 5.0
    projection_period_months: int = 12

    def __post_init__(self):
        for name in ("monthly_growth_rate", "monthly_churn_rate"):
            rate = getattr(self, name)
            if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not 0 <= rate <= 100:
                raise ValueError(f"{name} must be a percentage between 0 and 100, got {rate!r}")

        period = self.projection_period_months
        if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
            raise ValueError(f"Projection period must be a positive integer, got {period!r}")

    @property
    def net_rate(self) -> float:
        return net_growth_rate(self.monthly_growth_rate, self.monthly_churn_rate)


@dataclass(frozen=True)
class CostModel:
    """Fixed monthly cost plus a variable cost per client."""
    fixed: float = 0.0
    variable_per_client: float = 0.0

    def cost_for(self, clients: float) -> float:
        return self.fixed + clients * self.variable_per_client


@dataclass(frozen=True)
class GrowthPoint:
    month: int
    clients: int
    revenue: float
    setup_fees: float
    cost: float
    profit: float
    profit_margin: float               # percent


def project_growth(initial_clients: int, price_per_client: float, growth: GrowthMetrics,
                   cost_model: CostModel, setup_fee: float = 0.0) -> list[GrowthPoint]:
    """
    Month-by-month series for a single cohort priced at one rate

    Args:
        initial_clients: Clients at month 0
        price_per_client: Monthly revenue per client
        growth: Growth and churn % and the projection period
        cost_model: Cost composition
        setup_fee: One-time fee charged to each new client

    Returns:
        GrowthPoint for months 0..projection_period_months inclusive
    """
    rate = growth.net_rate
    points = []
    for month in range(growth.projection_period_months + 1):
        clients = project_clients(initial_clients, rate, month)
        revenue = clients * price_per_client
        cost = cost_model.cost_for(clients)
        profit = revenue - cost
        points.append(GrowthPoint(
            month=month,
            clients=clients,
            revenue=revenue,
            setup_fees=new_clients(initial_clients, rate, month) * setup_fee,
            cost=cost,
            profit=profit,
            profit_margin=(profit / revenue) * 100 if revenue > 0 else 0.0,
        ))
    return points


@dataclass(frozen=True)
class RevenueProjection:
    month: int
    revenue: float
    growth: float                      # fraction of the previous month


def project_revenue_growth(starting_revenue: float, monthly_growth_rate: float,
                           months: int) -> list[RevenueProjection]:
    """
    Revenue compounding from a starting month

    Month 1 is the starting revenue with zero growth; each later month
    grows by ``monthly_growth_rate`` (a fraction) over the previous one.
    """
    projections = []
    revenue = starting_revenue
    for month in range(1, months + 1):
        if month == 1:
            projections.append(RevenueProjection(month, revenue, 0.0))
            continue

        previous = revenue
        revenue = previous * (1 + monthly_growth_rate)
        growth = (revenue - previous) / previous if previous != 0 else 0.0
        projections.append(RevenueProjection(month, revenue, growth))
    return projections


@dataclass(frozen=True)
class GrowthScenario:
    name: str
    monthly_growth: float              # percent
    churn_rate: float                  # percent


DEFAULT_SCENARIOS = (
    GrowthScenario("Conservative", 5.0, 5.0),
    GrowthScenario("Moderate", 10.0, 3.0),
    GrowthScenario("Aggressive", 20.0, 2.0),
)

SCENARIO_HORIZONS = (6, 12, 24)


@dataclass(frozen=True)
class ScenarioOutcome:
    """Clients and MRR at each horizon for one scenario."""
    scenario: GrowthScenario
    clients: dict[int, int]
    mrr: dict[int, float]


def compare_growth_scenarios(client_count: int, revenue_per_client: float,
                             scenarios: Optional[Sequence[GrowthScenario]] = None,
                             horizons: Sequence[int] = SCENARIO_HORIZONS) -> list[ScenarioOutcome]:
    """Client count and MRR for each scenario at 6, 12 and 24 months"""
    if scenarios is None:
        scenarios = DEFAULT_SCENARIOS

    outcomes = []
    for scenario in scenarios:
        rate = net_growth_rate(scenario.monthly_growth, scenario.churn_rate)
        clients = {months: project_clients(client_count, rate, months) for months in horizons}
        outcomes.append(ScenarioOutcome(
            scenario=scenario,
            clients=clients,
            mrr={months: count * revenue_per_client for months, count in clients.items()},
        ))
    return outcomes


@dataclass(frozen=True)
class ProfitTrendPoint:
    month: int
    revenue: float
    cost: float
    profit: float


def project_profit_trend(mrr: float, costs: float, months: int,
                         monthly_growth: float = 0.10,
                         cost_growth_share: float = 0.6) -> list[ProfitTrendPoint]:
    """
    Revenue, cost and profit for months 0..months

    Revenue compounds at ``monthly_growth``; costs grow by only
    ``cost_growth_share`` of the revenue growth.
    """
    points = []
    for month in range(months + 1):
        multiplier = (1 + monthly_growth) ** month
        revenue = mrr * multiplier
        cost = costs * (1 + (multiplier - 1) * cost_growth_share)
        points.append(ProfitTrendPoint(month, revenue, cost, revenue - cost))
    return points
