"""Primitive cost functions: metered, per-1000 and fixed add-on charges"""

from typing import Optional

from ..rates.models import AddOnService, BillingFrequency, UsageService
from ..rates.table import DEFAULT_CARRIER_FEE, get_a2p_registration


def calculate_metered_cost(volume: float, unit_rate: float) -> float:
    """
    Cost of a metered service

    cost = volume * unit_rate

    Args:
        volume: Units consumed (segments, minutes, messages, executions)
        unit_rate: Price per unit

    Returns:
        Total cost
    """
    return volume * unit_rate


def calculate_per_thousand_cost(volume: float, rate_per_thousand: float) -> float:
    """
    Cost of a service priced per 1000 units

    cost = (volume / 1000) * rate_per_thousand
    """
    return (volume / 1000) * rate_per_thousand


def calculate_email_cost(emails: float, rate_per_thousand: float) -> float:
    """Cost of sending emails at a per-1000 rate"""
    return calculate_per_thousand_cost(emails, rate_per_thousand)


def calculate_sms_cost(segments: float, base_rate: float,
                       carrier_fee: float = DEFAULT_CARRIER_FEE) -> float:
    """
    SMS cost including the carrier surcharge

    cost = segments * (base_rate + carrier_fee)

    Args:
        segments: Number of 160-character segments
        base_rate: Platform rate per segment
        carrier_fee: Carrier surcharge per segment

    Returns:
        Total SMS cost
    """
    return segments * (base_rate + carrier_fee)


def calculate_usage_cost(service: UsageService, quantity: float,
                         included_quantity: float = 0.0) -> float:
    """
    Cost of a usage service for a quantity, after any included allowance

    Per-1000 units (emails, verifications, words) use the per-thousand rule,
    everything else is metered per unit.

    Args:
        service: Usage service from the rate table
        quantity: Units consumed
        included_quantity: Units covered by the plan at no charge

    Returns:
        Cost of the billable quantity
    """
    billable_quantity = max(0.0, quantity - included_quantity)

    if service.unit.is_per_thousand:
        return calculate_per_thousand_cost(billable_quantity, service.rate)

    return calculate_metered_cost(billable_quantity, service.rate)


def _monthly_equivalent(addon: AddOnService) -> Optional[float]:
    if addon.monthly_price is not None:
        return addon.monthly_price
    if addon.yearly_price is not None:
        return addon.yearly_price / 12
    if addon.semi_annual_price is not None:
        return addon.semi_annual_price / 6
    return None


def calculate_addon_cost(addon: AddOnService, sub_accounts: int = 1,
                         frequency: BillingFrequency = BillingFrequency.MONTHLY) -> float:
    """
    Flat charge for an add-on over one billing period

    Recurring frequencies use the price quoted for that frequency, or convert
    from whichever recurring price the add-on has. One-time charges use the
    one-time price only. Per-sub-account add-ons are multiplied by the
    sub-account count.

    Args:
        addon: Add-on from the rate table
        sub_accounts: Number of sub-accounts the add-on is enabled on
        frequency: Billing period to price

    Returns:
        Charge for the period, 0.0 when the add-on has no price for it
    """
    if frequency == BillingFrequency.ONE_TIME:
        price = addon.one_time_price
    elif frequency == BillingFrequency.YEARLY:
        price = addon.yearly_price
        if price is None:
            monthly = _monthly_equivalent(addon)
            price = monthly * 12 if monthly is not None else None
    elif frequency == BillingFrequency.SEMI_ANNUAL:
        price = addon.semi_annual_price
        if price is None:
            monthly = _monthly_equivalent(addon)
            price = monthly * 6 if monthly is not None else None
    else:
        price = _monthly_equivalent(addon)

    if price is None:
        return 0.0

    if addon.per_sub_account:
        return price * sub_accounts

    return price


def calculate_a2p_first_month_cost(registration_type: str) -> float:
    """One-time registration plus first monthly campaign fee, 0.0 for unknown types"""
    registration = get_a2p_registration(registration_type)
    if registration is None:
        return 0.0
    return registration.one_time_fee + registration.monthly_campaign_fee
