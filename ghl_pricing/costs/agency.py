"""Agency-side monthly cost: platform plan, usage and add-ons"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..rates.models import Plan
from ..rates.table import (
    A2P_CAMPAIGN_FEE,
    AI_EMPLOYEE_SUBSCRIPTION,
    DEFAULT_CARRIER_FEE,
    HIPAA_COMPLIANCE,
    PHONE_NUMBERS,
    WHATSAPP_SERVICE,
    get_addon_by_id,
)
from .ai import VOICE_AI_RATE
from .basic import (
    calculate_addon_cost,
    calculate_email_cost,
    calculate_metered_cost,
    calculate_sms_cost,
)
from .usage import (
    DEDICATED_IP_PRICE,
    EMAIL_RATE_PER_1000,
    SMS_RATE,
    VOICE_INBOUND_RATE,
    VOICE_OUTBOUND_RATE,
)

LOCAL_NUMBER_PRICE = PHONE_NUMBERS[0].monthly_price
TOLL_FREE_NUMBER_PRICE = PHONE_NUMBERS[1].monthly_price

WORDPRESS_OPTIONS = {
    "none": None,
    "basic": "wordpress_standard",
    "standard": "wordpress_25_sites",
    "premium": "wordpress_unlimited",
}


def calculate_platform_cost(plan: Plan, is_annual: bool = False) -> float:
    """Monthly platform cost, the yearly price spread over 12 months when billed annually"""
    return plan.yearly_price / 12 if is_annual else plan.monthly_price


@dataclass(frozen=True)
class AgencyUsage:
    """Monthly usage billed to the agency."""
    sms_segments: float = 0.0
    voice_minutes_outbound: float = 0.0
    voice_minutes_inbound: float = 0.0
    emails_sent: float = 0.0
    local_phone_numbers: int = 0
    toll_free_numbers: int = 0


@dataclass(frozen=True)
class AgencyAddOns:
    """Add-on selections."""
    ai_employee: bool = False
    wordpress_hosting: str = "none"    # none, basic, standard, premium
    hipaa_compliance: bool = False
    whatsapp: bool = False
    online_listings: bool = False
    dedicated_ip: bool = False
    a2p_campaigns: int = 0


@dataclass(frozen=True)
class UsageBreakdown:
    sms: float
    voice: float
    email: float
    phone: float

    @property
    def total(self) -> float:
        return self.sms + self.voice + self.email + self.phone


@dataclass(frozen=True)
class AddOnBreakdown:
    ai_employee: float
    wordpress: float
    hipaa: float
    whatsapp: float
    online_listings: float
    dedicated_ip: float
    a2p: float

    @property
    def total(self) -> float:
        return (self.ai_employee + self.wordpress + self.hipaa + self.whatsapp
                + self.online_listings + self.dedicated_ip + self.a2p)


@dataclass(frozen=True)
class AgencyCostBreakdown:
    """Full agency cost breakdown."""
    platform: float
    usage: UsageBreakdown
    add_ons: AddOnBreakdown
    annual_savings: float

    @property
    def monthly_total(self) -> float:
        return self.platform + self.usage.total + self.add_ons.total

    @property
    def annual_total(self) -> float:
        return self.monthly_total * 12


def calculate_agency_usage(usage: AgencyUsage) -> UsageBreakdown:
    """Usage costs at rate-table prices"""
    return UsageBreakdown(
        sms=calculate_sms_cost(usage.sms_segments, SMS_RATE, DEFAULT_CARRIER_FEE),
        voice=(calculate_metered_cost(usage.voice_minutes_outbound, VOICE_OUTBOUND_RATE)
               + calculate_metered_cost(usage.voice_minutes_inbound, VOICE_INBOUND_RATE)),
        email=calculate_email_cost(usage.emails_sent, EMAIL_RATE_PER_1000),
        phone=(usage.local_phone_numbers * LOCAL_NUMBER_PRICE
               + usage.toll_free_numbers * TOLL_FREE_NUMBER_PRICE),
    )


def calculate_agency_addons(add_ons: AgencyAddOns, sub_accounts: int = 1) -> AddOnBreakdown:
    """
    Monthly add-on costs

    Per-sub-account add-ons (AI Employee, WhatsApp, listings) scale with
    the sub-account count. Unknown WordPress options cost nothing.
    """
    wordpress_id = WORDPRESS_OPTIONS.get(add_ons.wordpress_hosting)
    wordpress_addon = get_addon_by_id(wordpress_id) if wordpress_id else None

    listings = get_addon_by_id("listings_monthly")

    return AddOnBreakdown(
        ai_employee=calculate_addon_cost(AI_EMPLOYEE_SUBSCRIPTION, sub_accounts) if add_ons.ai_employee else 0.0,
        wordpress=calculate_addon_cost(wordpress_addon) if wordpress_addon else 0.0,
        hipaa=calculate_addon_cost(HIPAA_COMPLIANCE) if add_ons.hipaa_compliance else 0.0,
        whatsapp=calculate_addon_cost(WHATSAPP_SERVICE, sub_accounts) if add_ons.whatsapp else 0.0,
        online_listings=calculate_addon_cost(listings, sub_accounts) if add_ons.online_listings else 0.0,
        dedicated_ip=DEDICATED_IP_PRICE if add_ons.dedicated_ip else 0.0,
        a2p=add_ons.a2p_campaigns * A2P_CAMPAIGN_FEE,
    )


def calculate_agency_cost_breakdown(plan: Plan, usage: AgencyUsage, add_ons: AgencyAddOns,
                                    sub_accounts: int = 1,
                                    is_annual: bool = False) -> AgencyCostBreakdown:
    """
    Agency monthly cost for a plan, usage estimate and add-on selection

    Args:
        plan: Selected core plan
        usage: Monthly usage estimate
        add_ons: Selected add-ons
        sub_accounts: Sub-account count (at least 1)
        is_annual: Bill the plan yearly

    Returns:
        AgencyCostBreakdown with platform, usage and add-on subtotals
    """
    annual_savings = (plan.monthly_price * 12 - plan.yearly_price) if is_annual else 0.0

    return AgencyCostBreakdown(
        platform=calculate_platform_cost(plan, is_annual),
        usage=calculate_agency_usage(usage),
        add_ons=calculate_agency_addons(add_ons, sub_accounts),
        annual_savings=annual_savings,
    )


@dataclass(frozen=True)
class UsageEstimate:
    """Coarse monthly usage estimate."""
    emails: float = 0.0
    sms: float = 0.0
    calls: float = 0.0
    ai_agent_minutes: float = 0.0


@dataclass(frozen=True)
class RecurringAddOn:
    """A named recurring charge billed monthly or annually."""
    name: str
    price: float
    billing_cycle: str = "monthly"     # monthly or annual

    @property
    def monthly_price(self) -> float:
        return self.price / 12 if self.billing_cycle == "annual" else self.price


def calculate_agency_cost(plan: Plan, usage: Optional[UsageEstimate] = None,
                          add_ons: Optional[Sequence[RecurringAddOn]] = None,
                          is_annual: bool = False) -> float:
    """
    Total monthly agency cost from a coarse usage estimate

    Args:
        plan: Selected core plan
        usage: Optional usage estimate (emails, SMS, call and AI minutes)
        add_ons: Optional recurring add-on charges
        is_annual: Bill the plan yearly

    Returns:
        Total monthly cost
    """
    total = calculate_platform_cost(plan, is_annual)

    if usage is not None:
        total += calculate_email_cost(usage.emails, EMAIL_RATE_PER_1000)
        total += calculate_sms_cost(usage.sms, SMS_RATE, DEFAULT_CARRIER_FEE)
        total += calculate_metered_cost(usage.calls, VOICE_OUTBOUND_RATE)
        total += calculate_metered_cost(usage.ai_agent_minutes, VOICE_AI_RATE)

    if add_ons:
        total += sum(add_on.monthly_price for add_on in add_ons)

    return total
