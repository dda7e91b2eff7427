"""
Markup and rebilling calculations.

Markup is a percentage on top of base cost. Whether markup may be charged
at all is a plan capability: every function here takes the active plan's
``allows_markup`` flag and applies it itself, so a disallowed markup is
zero no matter what the caller configured.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from ..aggregation import CostLine, Totals, sum_lines
from ..errors import InvalidInputError
from ..logging.config import get_calculation_logger, log_guarded_result
from ..metrics.financial import calculate_cac_payback_period
from ..rates.models import Plan
from ..rates.table import DEFAULT_CARRIER_FEE, get_usage_service_by_id

logger = get_calculation_logger(__name__)

# Per-unit base cost of each rebillable service
REBILLABLE_UNIT_COSTS: dict[str, float] = {
    "sms": get_usage_service_by_id("sms_outbound").rate + DEFAULT_CARRIER_FEE,
    "email": get_usage_service_by_id("lc_email").rate / 1000,
    "conversation_ai": get_usage_service_by_id("conversation_ai").rate,
    "voice_ai": get_usage_service_by_id("voice_ai_engine").rate,
    "reviews_ai": get_usage_service_by_id("reviews_ai").rate,
    "content_ai": get_usage_service_by_id("content_ai_text").rate / 1000,
    "workflows": get_usage_service_by_id("workflow_ai").rate,
}

REBILLABLE_CATEGORIES: dict[str, str] = {
    "sms": "messaging",
    "email": "email",
    "conversation_ai": "ai",
    "voice_ai": "ai",
    "reviews_ai": "ai",
    "content_ai": "ai",
    "workflows": "workflow",
}


def effective_markup(configured_markup: float, allows_markup: bool) -> float:
    """Markup % actually applied: the configured value, or 0 when the plan forbids markup"""
    return configured_markup if allows_markup else 0.0


def calculate_client_price(base_cost: float, markup_pct: float,
                           allows_markup: bool = True) -> float:
    """
    Client-facing price per unit

    client_price = base_cost * (1 + effective_markup / 100)
    """
    return base_cost * (1 + effective_markup(markup_pct, allows_markup) / 100)


def calculate_rebilling_profit(base_cost: float, markup_pct: float, volume: float,
                               allows_markup: bool = True) -> float:
    """
    Profit from reselling a volume of units

    profit = (client_price - base_cost) * volume, exactly 0.0 at zero markup
    """
    markup = effective_markup(markup_pct, allows_markup)
    if markup == 0:
        return 0.0
    return (calculate_client_price(base_cost, markup) - base_cost) * volume


@dataclass(frozen=True)
class ServiceConfig:
    """Per-client monthly volume and configured markup % for one service."""
    volume: float = 0.0
    markup: float = 0.0


@dataclass(frozen=True)
class RebillingLine:
    """Monthly rebilling result for one service across all clients."""
    name: str
    cost_per_unit: float
    client_price_per_unit: float
    effective_markup: float
    monthly_volume: float
    monthly_cost: float
    monthly_revenue: float

    @property
    def monthly_profit(self) -> float:
        return self.monthly_revenue - self.monthly_cost


def calculate_service_rebilling(name: str, unit_cost: float, config: ServiceConfig,
                                num_clients: int, allows_markup: bool) -> RebillingLine:
    """
    Rebill one usage service to every client

    Args:
        name: Service name
        unit_cost: Base cost per unit
        config: Per-client volume and configured markup
        num_clients: Number of clients
        allows_markup: Active plan capability

    Returns:
        RebillingLine for the whole client base
    """
    markup = effective_markup(config.markup, allows_markup)
    client_price = calculate_client_price(unit_cost, markup)
    monthly_volume = config.volume * num_clients

    return RebillingLine(
        name=name,
        cost_per_unit=unit_cost,
        client_price_per_unit=client_price,
        effective_markup=markup,
        monthly_volume=monthly_volume,
        monthly_cost=unit_cost * monthly_volume,
        monthly_revenue=client_price * monthly_volume,
    )


@dataclass(frozen=True)
class HostingRebilling:
    """WordPress hosting resale."""
    total_sites: float
    cost_per_site: float
    client_price_per_site: float

    @property
    def monthly_cost(self) -> float:
        return self.cost_per_site * self.total_sites

    @property
    def monthly_revenue(self) -> float:
        return self.client_price_per_site * self.total_sites

    @property
    def monthly_profit(self) -> float:
        return self.monthly_revenue - self.monthly_cost


def calculate_hosting_rebilling(sites_per_client: float, your_cost: float,
                                client_price: float, num_clients: int) -> HostingRebilling:
    """Hosting is resold at a fixed client price on every plan"""
    return HostingRebilling(
        total_sites=sites_per_client * num_clients,
        cost_per_site=your_cost,
        client_price_per_site=client_price,
    )


@dataclass(frozen=True)
class RebillingSummary:
    """Rebilling results for all services."""
    lines: tuple[RebillingLine, ...]
    hosting: Optional[HostingRebilling]
    totals: Totals
    num_clients: int

    @property
    def monthly_profit(self) -> float:
        return self.totals.profit

    @property
    def annual_profit(self) -> float:
        return self.totals.profit * 12

    @property
    def profit_per_client(self) -> float:
        if self.num_clients > 0:
            return self.totals.profit / self.num_clients
        return 0.0

    def line(self, name: str) -> Optional[RebillingLine]:
        for line in self.lines:
            if line.name == name:
                return line
        return None


def calculate_rebilling_summary(plan: Plan, num_clients: int,
                                configs: Mapping[str, ServiceConfig],
                                hosting: Optional[HostingRebilling] = None) -> RebillingSummary:
    """
    Rebilling cost, revenue and profit for every configured service

    Args:
        plan: Active core plan; its markup capability gates every line
        num_clients: Number of clients
        configs: ServiceConfig keyed by rebillable service name
            (sms, email, conversation_ai, voice_ai, reviews_ai, content_ai, workflows)
        hosting: Optional hosting resale

    Returns:
        RebillingSummary with per-service lines and totals

    Raises:
        KeyError: If a config names a service that cannot be rebilled
    """
    lines = []
    cost_lines = []
    for name, config in configs.items():
        unit_cost = REBILLABLE_UNIT_COSTS[name]
        line = calculate_service_rebilling(name, unit_cost, config, num_clients,
                                           plan.allows_markup)
        lines.append(line)
        cost_lines.append(CostLine(name, REBILLABLE_CATEGORIES[name],
                                   line.monthly_cost, line.monthly_revenue))

    if hosting is not None:
        cost_lines.append(CostLine("wp_hosting", "hosting",
                                   hosting.monthly_cost, hosting.monthly_revenue))

    return RebillingSummary(
        lines=tuple(lines),
        hosting=hosting,
        totals=sum_lines(cost_lines),
        num_clients=num_clients,
    )


@dataclass(frozen=True)
class PlanUpgradeAnalysis:
    """Whether upgrading to the markup-capable plan pays for itself."""
    profit_with_markup: float
    profit_without_markup: float
    additional_profit: float
    plan_difference: float
    achievable: bool
    payback_months: Optional[float] = None
    is_worth_it: bool = False


def analyze_plan_upgrade(summary: RebillingSummary, plan_difference: float = 200.0,
                         worth_it_months: float = 12.0) -> PlanUpgradeAnalysis:
    """
    Compare rebilling profit with and without markup

    Without markup only hosting resale earns a profit. The extra monthly
    profit markup brings has to recoup the monthly plan price difference.

    Args:
        summary: Rebilling summary computed on the markup-capable plan
        plan_difference: Monthly price difference between the plans
        worth_it_months: Payback horizon under which the upgrade is worth it

    Returns:
        PlanUpgradeAnalysis; not achievable when markup adds no profit
    """
    profit_with_markup = summary.monthly_profit
    profit_without_markup = summary.hosting.monthly_profit if summary.hosting else 0.0
    additional_profit = profit_with_markup - profit_without_markup

    try:
        payback = calculate_cac_payback_period(plan_difference, additional_profit)
    except InvalidInputError as e:
        log_guarded_result(logger, "plan_upgrade_payback", False, str(e),
                           {"additional_profit": additional_profit,
                            "plan_difference": plan_difference})
        return PlanUpgradeAnalysis(
            profit_with_markup=profit_with_markup,
            profit_without_markup=profit_without_markup,
            additional_profit=additional_profit,
            plan_difference=plan_difference,
            achievable=False,
        )

    log_guarded_result(logger, "plan_upgrade_payback", True, "payback computed",
                       {"payback_months": payback})
    return PlanUpgradeAnalysis(
        profit_with_markup=profit_with_markup,
        profit_without_markup=profit_without_markup,
        additional_profit=additional_profit,
        plan_difference=plan_difference,
        achievable=True,
        payback_months=payback,
        is_worth_it=payback <= worth_it_months,
    )
