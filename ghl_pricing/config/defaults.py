"""Default configuration parameters for the pricing calculators."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionParams:
    """Client growth projection parameters."""
    monthly_growth_rate: float = 10.0                # % new clients per month
    monthly_churn_rate: float = 5.0                  # % clients lost per month
    projection_period_months: int = 12
    lifespan_fallback_months: float = 24.0           # Used when churn is zero
    cac_ltv_ratio: float = 0.33                      # Max CAC as share of LTV


@dataclass(frozen=True)
class AgencyCostParams:
    """Agency-side costs for SaaS projections."""
    platform_cost: float = 497.0
    usage_cost_per_client: float = 15.0
    support_cost_per_client: float = 25.0


@dataclass(frozen=True)
class RebillingAssumptionParams:
    """Blended markup assumptions used by the SaaS projector."""
    sms_markup: float = 50.0
    email_markup: float = 30.0
    ai_services_markup: float = 40.0
    usage_volume_per_client: float = 50.0


@dataclass(frozen=True)
class ServiceRebillingParams:
    """Per-client monthly volume and markup % for each rebillable service."""
    sms_volume: float = 1000.0
    sms_markup: float = 100.0
    email_volume: float = 5000.0
    email_markup: float = 150.0
    conversation_ai_volume: float = 500.0
    conversation_ai_markup: float = 200.0
    voice_ai_volume: float = 100.0
    voice_ai_markup: float = 150.0
    reviews_ai_volume: float = 50.0
    reviews_ai_markup: float = 300.0
    content_ai_volume: float = 10000.0
    content_ai_markup: float = 200.0
    workflows_volume: float = 2000.0
    workflows_markup: float = 100.0


@dataclass(frozen=True)
class HostingParams:
    """WordPress hosting resale parameters."""
    sites_per_client: int = 1
    your_cost: float = 10.0
    client_price: float = 25.0


@dataclass(frozen=True)
class BreakevenParams:
    """Break-even and plan upgrade analysis parameters."""
    plan_difference: float = 200.0                   # Pro minus Unlimited monthly price
    worth_it_months: float = 12.0                    # Max payback to call an upgrade worthwhile
    assumed_monthly_growth: float = 0.10             # Client growth used for months-to-breakeven


@dataclass(frozen=True)
class MessagingParams:
    """SMS/MMS calculation parameters."""
    carrier_fee_profile: str = "weighted"            # att_tmobile, verizon or weighted
    mms_outbound_split: float = 50.0                 # % of MMS that is outbound


@dataclass(frozen=True)
class DashboardParams:
    """Profit dashboard projection parameters."""
    projection_months: int = 12
    monthly_growth: float = 0.10
    cost_growth_share: float = 0.6                   # Costs grow at 60% of the revenue multiplier


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    projection: ProjectionParams
    agency_costs: AgencyCostParams
    rebilling: RebillingAssumptionParams
    services: ServiceRebillingParams
    hosting: HostingParams
    breakeven: BreakevenParams
    messaging: MessagingParams
    dashboard: DashboardParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        projection=ProjectionParams(),
        agency_costs=AgencyCostParams(),
        rebilling=RebillingAssumptionParams(),
        services=ServiceRebillingParams(),
        hosting=HostingParams(),
        breakeven=BreakevenParams(),
        messaging=MessagingParams(),
        dashboard=DashboardParams(),
    )
