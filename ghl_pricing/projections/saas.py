"""
SaaS revenue projection.

Projects client counts, recurring revenue, setup fees, rebilling profit,
cost and profit for every month of a projection period. Client counts
compound per tier at the net growth rate and are rounded per tier.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

from ..metrics.financial import average_lifespan_months
from .growth import GrowthMetrics, new_clients, project_clients


@dataclass(frozen=True)
class PricingTier:
    """Client pricing tier resold by the agency."""
    name: str
    monthly_price: float
    client_count: int
    setup_fee: float = 0.0
    enabled: bool = True

    @property
    def is_active(self) -> bool:
        return self.enabled and self.client_count > 0


@dataclass(frozen=True)
class AgencyCosts:
    """Agency cost composition for projections."""
    platform_cost: float = 497.0
    usage_cost_per_client: float = 15.0
    support_cost_per_client: float = 25.0

    def cost_for(self, clients: float) -> float:
        return self.platform_cost + clients * (self.usage_cost_per_client
                                               + self.support_cost_per_client)


@dataclass(frozen=True)
class RebillingAssumptions:
    """Markup % per service family and usage volume per client."""
    sms_markup: float = 50.0
    email_markup: float = 30.0
    ai_services_markup: float = 40.0
    usage_volume_per_client: float = 50.0

    @property
    def total_markup(self) -> float:
        return self.sms_markup + self.email_markup + self.ai_services_markup


@dataclass(frozen=True)
class MonthlySnapshot:
    """One month of a SaaS projection."""
    month: int
    client_count: int
    mrr: float
    setup_fees: float
    rebilling_profit: float
    revenue: float                     # mrr + rebilling profit
    cost: float
    profit: float
    profit_margin: float               # percent
    tier_clients: dict[str, int] = field(default_factory=dict)
    tier_revenue: dict[str, float] = field(default_factory=dict)


def active_tiers(tiers: Sequence[PricingTier]) -> list[PricingTier]:
    """Enabled tiers with at least one client"""
    return [tier for tier in tiers if tier.is_active]


def calculate_projected_rebilling_profit(client_count: float, rebilling: RebillingAssumptions,
                                         allows_markup: bool) -> float:
    """clients * volume * total markup / 100, or 0 on a plan without markup"""
    if not allows_markup:
        return 0.0
    return client_count * rebilling.usage_volume_per_client * rebilling.total_markup / 100


def project_saas_revenue(tiers: Sequence[PricingTier], growth: GrowthMetrics,
                         costs: AgencyCosts, rebilling: RebillingAssumptions,
                         allows_markup: bool = True) -> list[MonthlySnapshot]:
    """
    Project SaaS revenue month by month

    Setup fees are charged to the full initial cohort at month 0 and to
    net new clients afterwards. They are reported per month but are not
    part of recurring revenue.

    Args:
        tiers: Pricing tiers; disabled or empty tiers contribute nothing
        growth: Growth and churn % and the projection period
        costs: Agency cost composition
        rebilling: Rebilling markup assumptions
        allows_markup: Whether the active plan permits markup

    Returns:
        MonthlySnapshot for months 0..projection_period_months inclusive
    """
    tiers = active_tiers(tiers)
    rate = growth.net_rate
    snapshots = []

    for month in range(growth.projection_period_months + 1):
        tier_clients: dict[str, int] = {}
        tier_revenue: dict[str, float] = {}
        setup_fees = []

        for tier in tiers:
            clients = project_clients(tier.client_count, rate, month)
            tier_clients[tier.name] = tier_clients.get(tier.name, 0) + clients
            tier_revenue[tier.name] = tier_revenue.get(tier.name, 0.0) + clients * tier.monthly_price
            setup_fees.append(new_clients(tier.client_count, rate, month) * tier.setup_fee)

        client_count = sum(tier_clients.values())
        mrr = math.fsum(tier_revenue.values())
        rebilling_profit = calculate_projected_rebilling_profit(client_count, rebilling,
                                                                allows_markup)
        revenue = mrr + rebilling_profit
        cost = costs.cost_for(client_count)
        profit = revenue - cost

        snapshots.append(MonthlySnapshot(
            month=month,
            client_count=client_count,
            mrr=mrr,
            setup_fees=math.fsum(setup_fees),
            rebilling_profit=rebilling_profit,
            revenue=revenue,
            cost=cost,
            profit=profit,
            profit_margin=(profit / revenue) * 100 if revenue > 0 else 0.0,
            tier_clients=tier_clients,
            tier_revenue=tier_revenue,
        ))

    return snapshots


@dataclass(frozen=True)
class ClientValueSummary:
    """Client value figures for the current tier mix."""
    avg_client_value: float
    lifespan_months: float
    lifetime_value: float
    max_acquisition_cost: float
    revenue_breakdown: dict[str, float]


def summarize_saas_clients(tiers: Sequence[PricingTier], monthly_churn_rate: float,
                           fallback_months: float = 24.0,
                           cac_ltv_ratio: float = 0.33) -> ClientValueSummary:
    """
    Average client value, lifetime value and acquisition cost ceiling

    Args:
        tiers: Pricing tiers
        monthly_churn_rate: Monthly churn %
        fallback_months: Lifespan used when churn is zero
        cac_ltv_ratio: Share of lifetime value acquisition may cost

    Returns:
        ClientValueSummary; average value is 0 without active clients
    """
    tiers = active_tiers(tiers)
    total_clients = sum(tier.client_count for tier in tiers)
    breakdown = {tier.name: tier.client_count * tier.monthly_price for tier in tiers}
    total_revenue = math.fsum(breakdown.values())

    avg_client_value = total_revenue / total_clients if total_clients > 0 else 0.0
    lifespan = average_lifespan_months(monthly_churn_rate / 100, fallback_months)
    ltv = avg_client_value * lifespan

    return ClientValueSummary(
        avg_client_value=avg_client_value,
        lifespan_months=lifespan,
        lifetime_value=ltv,
        max_acquisition_cost=ltv * cac_ltv_ratio,
        revenue_breakdown=breakdown,
    )
