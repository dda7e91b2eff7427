"""Pricing calculator coordinating the cost, rebilling, projection and dashboard calculations"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

from .config.defaults import DefaultConfig, get_default_config
from .costs.agency import (
    AgencyAddOns,
    AgencyCostBreakdown,
    AgencyUsage,
    calculate_agency_cost_breakdown,
)
from .costs.ai import AIUsage
from .costs.summary import UsageCostSummary, calculate_usage_summary
from .costs.usage import EmailUsage, MessagingUsage, VoiceUsage
from .errors import PricingError
from .logging.config import get_calculation_logger
from .metrics.dashboard import (
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
from .projections.growth import (
    GrowthMetrics,
    ProfitTrendPoint,
    ScenarioOutcome,
    compare_growth_scenarios,
    project_profit_trend,
)
from .projections.saas import (
    AgencyCosts,
    ClientValueSummary,
    MonthlySnapshot,
    PricingTier,
    RebillingAssumptions,
    project_saas_revenue,
    summarize_saas_clients,
)
from .rates.models import Plan, PlanTier
from .rates.table import get_plan_by_id
from .rebilling.markup import (
    PlanUpgradeAnalysis,
    RebillingSummary,
    ServiceConfig,
    analyze_plan_upgrade,
    calculate_hosting_rebilling,
    calculate_rebilling_summary,
)

logger = get_calculation_logger(__name__)

REBILLING_SERVICES = (
    "sms",
    "email",
    "conversation_ai",
    "voice_ai",
    "reviews_ai",
    "content_ai",
    "workflows",
)


@dataclass(frozen=True)
class ProfitDashboard:
    """Everything the profit dashboard shows for one set of inputs."""
    metrics: ProfitMetrics
    breakeven: BreakevenAnalysis
    growth_impact: list[GrowthImpact]
    margin_trend: list[MarginTrendPoint]
    profit_trend: list[ProfitTrendPoint]
    scenarios: list[ScenarioOutcome]
    revenue_breakdown: list[BreakdownItem]
    cost_breakdown: list[BreakdownItem]


class PricingCalculator:
    """
    Coordinates the pricing calculations with configured defaults
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def resolve_plan(self, plan: Union[Plan, PlanTier, str]) -> Plan:
        """
        Look up a core plan

        Raises:
            PricingError: If the plan id is unknown
        """
        if isinstance(plan, Plan):
            return plan

        resolved = get_plan_by_id(plan)
        if resolved is None:
            raise PricingError(f"Unknown plan: {plan}", context={"plan": str(plan)})
        return resolved

    def usage_costs(self, messaging: Optional[MessagingUsage] = None,
                    voice: Optional[VoiceUsage] = None,
                    email: Optional[EmailUsage] = None,
                    ai: Optional[AIUsage] = None,
                    workflow_executions: float = 0.0) -> UsageCostSummary:
        """
        Monthly usage costs; omitted categories cost nothing

        Messaging defaults to the configured carrier fee profile and MMS split.
        """
        if messaging is None:
            messaging = MessagingUsage(
                outbound_split=self.config.messaging.mms_outbound_split,
                carrier_fee_profile=self.config.messaging.carrier_fee_profile,
            )

        summary = calculate_usage_summary(
            messaging,
            voice or VoiceUsage(),
            email or EmailUsage(),
            ai or AIUsage(),
            workflow_executions,
        )

        logger.debug("Usage costs calculated", monthly=summary.monthly,
                     sub_accounts=summary.sub_accounts)
        return summary

    def agency_costs(self, plan: Union[Plan, PlanTier, str],
                     usage: Optional[AgencyUsage] = None,
                     add_ons: Optional[AgencyAddOns] = None,
                     sub_accounts: int = 1,
                     is_annual: bool = False) -> AgencyCostBreakdown:
        """Agency monthly cost breakdown for a plan"""
        resolved = self.resolve_plan(plan)
        breakdown = calculate_agency_cost_breakdown(
            resolved,
            usage or AgencyUsage(),
            add_ons or AgencyAddOns(),
            sub_accounts=sub_accounts,
            is_annual=is_annual,
        )

        logger.debug("Agency costs calculated", plan=resolved.id.value,
                     monthly_total=breakdown.monthly_total, is_annual=is_annual)
        return breakdown

    def service_configs(self) -> dict[str, ServiceConfig]:
        """Configured per-client volume and markup for every rebillable service"""
        services = self.config.services
        return {
            name: ServiceConfig(
                volume=getattr(services, f"{name}_volume"),
                markup=getattr(services, f"{name}_markup"),
            )
            for name in REBILLING_SERVICES
        }

    def rebilling(self, plan: Union[Plan, PlanTier, str], num_clients: int,
                  configs: Optional[Mapping[str, ServiceConfig]] = None,
                  include_hosting: bool = True) -> RebillingSummary:
        """
        Rebilling profit for a client base

        Args:
            plan: Active core plan; only markup-capable plans earn markup
            num_clients: Number of clients
            configs: Per-service overrides of the configured volumes and markups
            include_hosting: Add WordPress hosting resale

        Returns:
            RebillingSummary
        """
        resolved = self.resolve_plan(plan)
        service_configs = self.service_configs()
        if configs:
            service_configs.update(configs)

        hosting = None
        if include_hosting:
            hosting = calculate_hosting_rebilling(
                self.config.hosting.sites_per_client,
                self.config.hosting.your_cost,
                self.config.hosting.client_price,
                num_clients,
            )

        summary = calculate_rebilling_summary(resolved, num_clients, service_configs, hosting)

        logger.debug("Rebilling calculated", plan=resolved.id.value, num_clients=num_clients,
                     allows_markup=resolved.allows_markup,
                     monthly_profit=summary.monthly_profit)
        return summary

    def plan_upgrade(self, num_clients: int,
                     configs: Optional[Mapping[str, ServiceConfig]] = None) -> PlanUpgradeAnalysis:
        """Whether the markup-capable plan pays back its price difference"""
        summary = self.rebilling(PlanTier.PRO, num_clients, configs)
        return analyze_plan_upgrade(
            summary,
            plan_difference=self.config.breakeven.plan_difference,
            worth_it_months=self.config.breakeven.worth_it_months,
        )

    def growth_metrics(self) -> GrowthMetrics:
        projection = self.config.projection
        return GrowthMetrics(
            monthly_growth_rate=projection.monthly_growth_rate,
            monthly_churn_rate=projection.monthly_churn_rate,
            projection_period_months=projection.projection_period_months,
        )

    def saas_projection(self, tiers: Sequence[PricingTier],
                        plan: Union[Plan, PlanTier, str] = PlanTier.PRO,
                        growth: Optional[GrowthMetrics] = None,
                        costs: Optional[AgencyCosts] = None,
                        rebilling: Optional[RebillingAssumptions] = None) -> list[MonthlySnapshot]:
        """
        SaaS revenue projection, filling unspecified inputs from configuration

        Args:
            tiers: Client pricing tiers
            plan: Active core plan, gates rebilling markup
            growth: Growth metrics, defaults to the configured projection
            costs: Agency costs, defaults to the configured agency costs
            rebilling: Rebilling assumptions, defaults to the configured ones

        Returns:
            MonthlySnapshot list for months 0..period
        """
        resolved = self.resolve_plan(plan)
        if costs is None:
            agency = self.config.agency_costs
            costs = AgencyCosts(agency.platform_cost, agency.usage_cost_per_client,
                                agency.support_cost_per_client)
        if rebilling is None:
            assumptions = self.config.rebilling
            rebilling = RebillingAssumptions(
                sms_markup=assumptions.sms_markup,
                email_markup=assumptions.email_markup,
                ai_services_markup=assumptions.ai_services_markup,
                usage_volume_per_client=assumptions.usage_volume_per_client,
            )

        snapshots = project_saas_revenue(tiers, growth or self.growth_metrics(), costs,
                                         rebilling, resolved.allows_markup)

        final = snapshots[-1]
        logger.info("SaaS projection calculated", plan=resolved.id.value,
                    months=final.month, final_clients=final.client_count,
                    final_profit=final.profit)
        return snapshots

    def client_value(self, tiers: Sequence[PricingTier],
                     monthly_churn_rate: Optional[float] = None) -> ClientValueSummary:
        """Average client value, lifetime value and acquisition cost ceiling"""
        projection = self.config.projection
        if monthly_churn_rate is None:
            monthly_churn_rate = projection.monthly_churn_rate
        return summarize_saas_clients(
            tiers,
            monthly_churn_rate,
            fallback_months=projection.lifespan_fallback_months,
            cac_ltv_ratio=projection.cac_ltv_ratio,
        )

    def profit_dashboard(self, costs: DashboardCosts, revenue: DashboardRevenue,
                         client_count: int) -> ProfitDashboard:
        """
        Profit dashboard for agency costs, client revenue and client count

        Args:
            costs: Agency platform, usage and add-on costs
            revenue: Subscription, rebilling and setup fee revenue
            client_count: Current clients

        Returns:
            ProfitDashboard with metrics, break-even status and projections
        """
        dashboard = self.config.dashboard
        metrics = calculate_profit_metrics(costs, revenue, client_count)

        result = ProfitDashboard(
            metrics=metrics,
            breakeven=analyze_breakeven(
                costs, client_count, metrics.revenue_per_client,
                assumed_monthly_growth=self.config.breakeven.assumed_monthly_growth,
            ),
            growth_impact=project_client_growth_impact(metrics, client_count),
            margin_trend=project_margin_trend(metrics.profit_margin, dashboard.projection_months),
            profit_trend=project_profit_trend(
                metrics.mrr, metrics.costs, dashboard.projection_months,
                monthly_growth=dashboard.monthly_growth,
                cost_growth_share=dashboard.cost_growth_share,
            ),
            scenarios=compare_growth_scenarios(client_count, metrics.revenue_per_client),
            revenue_breakdown=revenue_breakdown(revenue),
            cost_breakdown=cost_breakdown(costs),
        )

        logger.info("Profit dashboard calculated", client_count=client_count,
                    net_profit=metrics.net_profit, profit_margin=metrics.profit_margin,
                    breakeven_achievable=result.breakeven.achievable)
        return result
