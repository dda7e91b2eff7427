"""
Compiled-in price list.

Plans, usage rates, add-ons and tier tables in USD. Lookups return None
for unknown identifiers rather than guessing a rate.
"""

from typing import Optional, Union

from .models import (
    A2PRegistration,
    AddOnService,
    CarrierFee,
    ClientTier,
    Plan,
    PlanTier,
    UsageService,
    UsageUnit,
    WorkflowTier,
)

# ============================================================================
# CORE PLANS
# ============================================================================

CORE_PLANS: tuple[Plan, ...] = (
    Plan(
        id=PlanTier.STARTER,
        name="Starter Account",
        description="Perfect for small agencies or businesses getting started",
        monthly_price=97.0,
        yearly_price=970.0,
        yearly_savings=194.0,
        sub_accounts=3,
        rebilling_at_cost=False,
        rebilling_with_markup=False,
        saas_mode=False,
        features=(
            "Up to 3 sub-accounts",
            "Unlimited contacts",
            "Email & SMS marketing",
            "CRM & Pipeline management",
            "Workflows & Automations",
        ),
    ),
    Plan(
        id=PlanTier.UNLIMITED,
        name="Unlimited Account",
        description="For growing agencies managing multiple clients",
        monthly_price=297.0,
        yearly_price=2970.0,
        yearly_savings=594.0,
        sub_accounts=None,
        rebilling_at_cost=True,
        rebilling_with_markup=False,
        saas_mode=False,
        features=(
            "Unlimited sub-accounts",
            "All Starter features",
            "Rebilling at cost",
            "API access",
        ),
        recommended=True,
    ),
    Plan(
        id=PlanTier.PRO,
        name="Pro / SaaS Account",
        description="For established agencies building their own SaaS platform",
        monthly_price=497.0,
        yearly_price=4970.0,
        yearly_savings=994.0,
        sub_accounts=None,
        rebilling_at_cost=True,
        rebilling_with_markup=True,
        saas_mode=True,
        features=(
            "Unlimited sub-accounts",
            "All Unlimited features",
            "Rebilling with markup",
            "SaaS mode configurator",
        ),
    ),
)

# ============================================================================
# PHONE & MESSAGING
# ============================================================================

PHONE_NUMBERS: tuple[AddOnService, ...] = (
    AddOnService(
        id="local_number",
        name="Local Phone Number",
        category="phone",
        monthly_price=1.15,
        description="Local phone number for US/Canada",
        per_sub_account=False,
    ),
    AddOnService(
        id="toll_free_number",
        name="Toll-Free Phone Number",
        category="phone",
        monthly_price=2.15,
        description="Toll-free phone number (1-800, 1-888, etc.)",
        per_sub_account=False,
    ),
)

MESSAGING_RATES: tuple[UsageService, ...] = (
    UsageService(
        id="sms_outbound",
        name="SMS (Outbound)",
        category="messaging",
        rate=0.0083,
        unit=UsageUnit.PER_SEGMENT,
        description="Outbound SMS messages (160 characters per segment)",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="mms_outbound",
        name="MMS (Outbound)",
        category="messaging",
        rate=0.022,
        unit=UsageUnit.PER_SEGMENT,
        description="Outbound MMS messages with media",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="mms_inbound",
        name="MMS (Inbound)",
        category="messaging",
        rate=0.0165,
        unit=UsageUnit.PER_SEGMENT,
        description="Inbound MMS messages with media",
        rebillable=True,
        markup_allowed=True,
    ),
)

CALL_RATES: tuple[UsageService, ...] = (
    UsageService(
        id="call_outbound",
        name="Outbound Calls",
        category="phone",
        rate=0.0166,
        unit=UsageUnit.PER_MINUTE,
        description="Outbound voice calls",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="call_inbound",
        name="Inbound Calls",
        category="phone",
        rate=0.01165,
        unit=UsageUnit.PER_MINUTE,
        description="Inbound voice calls",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="voicemail_drop",
        name="Voicemail Drops",
        category="phone",
        rate=0.018,
        unit=UsageUnit.PER_MINUTE,
        description="Pre-recorded voicemail delivery",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="call_recording",
        name="Call Recording",
        category="phone",
        rate=0.0025,
        unit=UsageUnit.PER_MINUTE,
        description="Call recording service",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="call_transcription",
        name="Call Transcription",
        category="phone",
        rate=0.024,
        unit=UsageUnit.PER_MINUTE,
        description="AI-powered call transcription",
        rebillable=True,
        markup_allowed=True,
    ),
)

A2P_REGISTRATION: tuple[A2PRegistration, ...] = (
    A2PRegistration(
        type="low_volume",
        name="Low Volume A2P Registration",
        one_time_fee=24.50,
        monthly_campaign_fee=11.025,
        description="For businesses sending fewer messages, standard registration",
    ),
    A2PRegistration(
        type="high_volume",
        name="High Volume A2P Registration",
        one_time_fee=71.91,
        monthly_campaign_fee=11.025,
        description="For high-volume messaging, includes premium features",
    ),
)

CARRIER_FEES: tuple[CarrierFee, ...] = (
    CarrierFee(carrier="AT&T", fee_per_segment=0.003,
               notes="Applied to all messages sent to AT&T numbers"),
    CarrierFee(carrier="T-Mobile", fee_per_segment=0.003,
               notes="Applied to all messages sent to T-Mobile numbers"),
    CarrierFee(carrier="Verizon", fee_per_segment=0.004,
               notes="Base rate for Verizon, may be up to $0.0065 for certain plans"),
)

# Blended per-segment carrier surcharge used by the usage calculator
SMS_CARRIER_FEE_PROFILES: dict[str, float] = {
    "att_tmobile": 0.003,
    "verizon": 0.005,
    "weighted": 0.0038,
}

DEFAULT_CARRIER_FEE = 0.003

# ============================================================================
# EMAIL
# ============================================================================

EMAIL_SERVICES: tuple[UsageService, ...] = (
    UsageService(
        id="lc_email",
        name="LC Email",
        category="email",
        rate=0.675,
        unit=UsageUnit.PER_1000_EMAILS,
        description="Email sending service ($0.000675 per email)",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="email_verification",
        name="Email Verification",
        category="email",
        rate=2.50,
        unit=UsageUnit.PER_1000_VERIFICATIONS,
        description="Email address verification service",
        rebillable=True,
        markup_allowed=True,
    ),
)

EMAIL_ADDONS: tuple[AddOnService, ...] = (
    AddOnService(
        id="dedicated_ip",
        name="Dedicated IP Address",
        category="email",
        monthly_price=59.0,
        description="Dedicated IP for email sending (improves deliverability)",
        per_sub_account=False,
        minimum_plan=PlanTier.PRO,
    ),
)

# ============================================================================
# AI EMPLOYEE
# ============================================================================

AI_SERVICES: tuple[UsageService, ...] = (
    UsageService(
        id="voice_ai_engine",
        name="Voice AI (Engine)",
        category="ai",
        rate=0.06,
        unit=UsageUnit.PER_MINUTE,
        description="Voice AI engine cost (plus LLM token costs)",
        rebillable=True,
        markup_allowed=True,
        notes="Additional LLM token costs apply based on usage",
    ),
    UsageService(
        id="conversation_ai",
        name="Conversation AI",
        category="ai",
        rate=0.02,
        unit=UsageUnit.PER_MESSAGE,
        description="AI-powered conversation responses (promotional pricing)",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="reviews_ai",
        name="Reviews AI",
        category="ai",
        rate=0.01,
        unit=UsageUnit.PER_REVIEW,
        description="AI-generated review responses",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="content_ai_image",
        name="Content AI (Images)",
        category="ai",
        rate=0.063,
        unit=UsageUnit.PER_IMAGE,
        description="AI-generated images",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="content_ai_text",
        name="Content AI (Text)",
        category="ai",
        rate=0.0945,
        unit=UsageUnit.PER_1000_WORDS,
        description="AI-generated text content",
        rebillable=True,
        markup_allowed=True,
    ),
    UsageService(
        id="funnel_ai",
        name="Funnel AI",
        category="ai",
        rate=0.0,
        unit=UsageUnit.PER_EXECUTION,
        description="AI-powered funnel builder (1000 prompts daily limit)",
        rebillable=False,
        markup_allowed=False,
        notes="Free with 1000 prompts per day limit",
    ),
    UsageService(
        id="workflow_ai",
        name="Workflow AI",
        category="ai",
        rate=0.01,
        unit=UsageUnit.PER_EXECUTION,
        description="AI actions within workflows",
        rebillable=True,
        markup_allowed=True,
    ),
)

AI_EMPLOYEE_SUBSCRIPTION = AddOnService(
    id="ai_employee_unlimited",
    name="AI Employee (Unlimited Plan)",
    category="ai",
    monthly_price=97.0,
    description="AI Employee with unlimited features per sub-account",
    per_sub_account=True,
)

# ============================================================================
# OTHER SERVICES
# ============================================================================

WORDPRESS_HOSTING: tuple[AddOnService, ...] = (
    AddOnService(
        id="wordpress_standard",
        name="WordPress Hosting (Standard)",
        category="hosting",
        monthly_price=10.0,
        description="Standard WordPress hosting per site",
        per_sub_account=False,
    ),
    AddOnService(
        id="wordpress_25_sites",
        name="WordPress Hosting (25 Sites)",
        category="hosting",
        monthly_price=220.0,
        description="WordPress hosting for up to 25 sites",
        per_sub_account=False,
    ),
    AddOnService(
        id="wordpress_unlimited",
        name="WordPress Hosting (Unlimited)",
        category="hosting",
        monthly_price=497.0,
        description="Unlimited WordPress hosting",
        per_sub_account=False,
    ),
)

WHATSAPP_SERVICE = AddOnService(
    id="whatsapp",
    name="WhatsApp Business Integration",
    category="messaging",
    monthly_price=10.0,
    description="WhatsApp Business API integration (plus usage fees)",
    per_sub_account=True,
    notes="Additional usage fees apply for messages sent",
)

ONLINE_LISTINGS: tuple[AddOnService, ...] = (
    AddOnService(
        id="listings_monthly",
        name="Online Listings (Monthly)",
        category="marketing",
        monthly_price=30.0,
        description="Yext-powered online listings management",
        per_sub_account=True,
    ),
    AddOnService(
        id="listings_semiannual",
        name="Online Listings (6 Months)",
        category="marketing",
        semi_annual_price=150.0,
        description="Yext-powered online listings management (6 months prepaid)",
        per_sub_account=True,
    ),
    AddOnService(
        id="listings_annual",
        name="Online Listings (Annual)",
        category="marketing",
        yearly_price=300.0,
        description="Yext-powered online listings management (annual prepaid)",
        per_sub_account=True,
    ),
)

HIPAA_COMPLIANCE = AddOnService(
    id="hipaa",
    name="HIPAA Compliance",
    category="compliance",
    monthly_price=297.0,
    description="HIPAA-compliant infrastructure and BAA",
    per_sub_account=False,
)

BRANDED_MOBILE_APP = AddOnService(
    id="branded_app",
    name="Branded Mobile App",
    category="app",
    monthly_price=49.0,
    description="White-label mobile app with your branding",
    per_sub_account=False,
)

# ============================================================================
# WORKFLOW PREMIUM TIERS
# ============================================================================

WORKFLOW_TIERS: tuple[WorkflowTier, ...] = (
    WorkflowTier(id="free", name="Free Tier", monthly_price=0.0,
                 executions_included=100, lifetime=True,
                 description="100 workflow executions (lifetime allocation)"),
    WorkflowTier(id="starter", name="Starter", monthly_price=10.0,
                 executions_included=10000, lifetime=False,
                 description="10,000 workflow executions per month"),
    WorkflowTier(id="growth", name="Growth", monthly_price=25.0,
                 executions_included=30000, lifetime=False,
                 description="30,000 workflow executions per month"),
    WorkflowTier(id="scale", name="Scale", monthly_price=50.0,
                 executions_included=65000, lifetime=False,
                 description="65,000 workflow executions per month"),
)

WORKFLOW_EXECUTION_RATE = 0.01

# ============================================================================
# SAAS CLIENT PRICING TIERS
# ============================================================================

SAAS_CLIENT_TIERS: tuple[ClientTier, ...] = (
    ClientTier(id="basic", name="Basic", suggested_price=197.0, cost=0.0, margin=197.0,
               description="Entry-level package for small businesses"),
    ClientTier(id="professional", name="Professional", suggested_price=297.0, cost=0.0,
               margin=297.0, description="Full-featured package for growing businesses"),
    ClientTier(id="enterprise", name="Enterprise", suggested_price=497.0, cost=0.0,
               margin=497.0, description="Premium package for established businesses"),
)

A2P_CAMPAIGN_FEE = 11.025


# ============================================================================
# LOOKUPS
# ============================================================================

def all_usage_services() -> tuple[UsageService, ...]:
    """Every metered service in the price list."""
    return MESSAGING_RATES + CALL_RATES + EMAIL_SERVICES + AI_SERVICES


def all_addons() -> tuple[AddOnService, ...]:
    """Every fixed-price add-on in the price list."""
    return (
        PHONE_NUMBERS
        + EMAIL_ADDONS
        + (AI_EMPLOYEE_SUBSCRIPTION,)
        + WORDPRESS_HOSTING
        + (WHATSAPP_SERVICE,)
        + ONLINE_LISTINGS
        + (HIPAA_COMPLIANCE, BRANDED_MOBILE_APP)
    )


def get_plan_by_id(plan_id: Union[PlanTier, str]) -> Optional[Plan]:
    """Plan for the given tier, None if unknown."""
    for plan in CORE_PLANS:
        if plan.id == plan_id:
            return plan
    return None


def get_usage_service_by_id(service_id: str) -> Optional[UsageService]:
    """Usage service by id, None if unknown."""
    for service in all_usage_services():
        if service.id == service_id:
            return service
    return None


def get_addon_by_id(addon_id: str) -> Optional[AddOnService]:
    """Add-on by id, None if unknown."""
    for addon in all_addons():
        if addon.id == addon_id:
            return addon
    return None


def get_a2p_registration(registration_type: str) -> Optional[A2PRegistration]:
    """A2P registration option by type, None if unknown."""
    for registration in A2P_REGISTRATION:
        if registration.type == registration_type:
            return registration
    return None


def get_carrier_fee(carrier: str) -> Optional[CarrierFee]:
    """Carrier fee by carrier name (case-insensitive), None if unknown."""
    for fee in CARRIER_FEES:
        if fee.carrier.lower() == carrier.lower():
            return fee
    return None


def get_services_by_category(category: str) -> list[Union[UsageService, AddOnService]]:
    """Usage services followed by add-ons in the given category."""
    services: list[Union[UsageService, AddOnService]] = [
        s for s in all_usage_services() if s.category == category
    ]
    services.extend(a for a in all_addons() if a.category == category)
    return services


def calculate_yearly_savings(monthly_price: float, yearly_price: float) -> float:
    """Savings from paying yearly instead of twelve monthly payments."""
    return (monthly_price * 12) - yearly_price
