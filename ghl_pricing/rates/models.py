"""
Rate table data models.

Immutable records describing plans, metered services, add-ons and the
other price-list entries. Values are compiled-in constants; these models
only check the invariants each record must satisfy.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class PlanTier(str, Enum):
    """Core plan tiers."""
    STARTER = "starter"
    UNLIMITED = "unlimited"
    PRO = "pro"


class BillingFrequency(str, Enum):
    """Billing frequency for plans and services."""
    MONTHLY = "monthly"
    YEARLY = "yearly"
    SEMI_ANNUAL = "semi_annual"
    ONE_TIME = "one_time"
    USAGE = "usage"


class UsageUnit(str, Enum):
    """Unit of measure for usage-based pricing."""
    PER_MONTH = "per_month"
    PER_MINUTE = "per_minute"
    PER_SEGMENT = "per_segment"
    PER_EMAIL = "per_email"
    PER_1000_EMAILS = "per_1000_emails"
    PER_1000_VERIFICATIONS = "per_1000_verifications"
    PER_MESSAGE = "per_message"
    PER_REVIEW = "per_review"
    PER_IMAGE = "per_image"
    PER_1000_WORDS = "per_1000_words"
    PER_EXECUTION = "per_execution"
    ONE_TIME = "one_time"

    @property
    def is_per_thousand(self) -> bool:
        """True when the rate is quoted per 1000 units."""
        return self in (
            UsageUnit.PER_1000_EMAILS,
            UsageUnit.PER_1000_VERIFICATIONS,
            UsageUnit.PER_1000_WORDS,
        )


@dataclass(frozen=True)
class Plan:
    """Core subscription plan."""
    id: PlanTier
    name: str
    description: str
    monthly_price: float
    yearly_price: float
    yearly_savings: float
    sub_accounts: Optional[int]        # None means unlimited
    rebilling_at_cost: bool
    rebilling_with_markup: bool
    saas_mode: bool
    features: tuple[str, ...] = ()
    recommended: bool = False

    def __post_init__(self):
        if self.yearly_price > self.monthly_price * 12:
            raise ValueError(
                f"Plan {self.id.value}: yearly price {self.yearly_price} exceeds "
                f"12 x monthly price {self.monthly_price}"
            )

    @property
    def allows_markup(self) -> bool:
        """Whether usage can be rebilled above cost on this plan."""
        return self.rebilling_with_markup


@dataclass(frozen=True)
class UsageService:
    """Metered service with a fixed unit rate."""
    id: str
    name: str
    category: str                      # phone, email, ai, workflow, messaging
    rate: float
    unit: UsageUnit
    description: str
    rebillable: bool
    markup_allowed: bool
    minimum_plan: Optional[PlanTier] = None
    notes: Optional[str] = None

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError(f"Usage service {self.id}: rate must be non-negative")


@dataclass(frozen=True)
class AddOnService:
    """Fixed-price add-on."""
    id: str
    name: str
    category: str                      # phone, email, compliance, hosting, messaging, marketing, app, ai
    description: str
    per_sub_account: bool
    monthly_price: Optional[float] = None
    yearly_price: Optional[float] = None
    semi_annual_price: Optional[float] = None
    one_time_price: Optional[float] = None
    minimum_plan: Optional[PlanTier] = None
    features: tuple[str, ...] = ()
    notes: Optional[str] = None

    def __post_init__(self):
        prices = (self.monthly_price, self.yearly_price,
                  self.semi_annual_price, self.one_time_price)
        if all(price is None for price in prices):
            raise ValueError(f"Add-on {self.id}: at least one price must be set")


@dataclass(frozen=True)
class CarrierFee:
    """Carrier surcharge per SMS segment."""
    carrier: str
    fee_per_segment: float
    notes: Optional[str] = None


@dataclass(frozen=True)
class A2PRegistration:
    """A2P 10DLC registration option."""
    type: str                          # low_volume or high_volume
    name: str
    one_time_fee: float
    monthly_campaign_fee: float
    description: str


@dataclass(frozen=True)
class WorkflowTier:
    """Premium workflow execution tier."""
    id: str
    name: str
    monthly_price: float
    executions_included: int
    lifetime: bool
    description: str


@dataclass(frozen=True)
class ClientTier:
    """Suggested SaaS resale tier."""
    id: str
    name: str
    suggested_price: float
    cost: float
    margin: float
    description: str
    features: tuple[str, ...] = field(default_factory=tuple)
