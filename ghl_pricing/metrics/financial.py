"""Derived financial metrics: break-even, payback, lifetime value, ROI and discounts"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..errors import InvalidInputError


@dataclass(frozen=True)
class DiscountTier:
    """Volume discount that applies from a quantity threshold."""
    threshold: float
    discount: float                    # fraction, 0.1 = 10% off


@dataclass(frozen=True)
class SaaSTier:
    """Resale tier for revenue totals."""
    tier_name: str
    price: float
    client_count: int


def calculate_breakeven(fixed_costs: float, price_per_client: float,
                        variable_cost_per_client: float = 0.0) -> int:
    """
    Clients needed to cover fixed costs

    breakeven = ceil(fixed_costs / (price_per_client - variable_cost_per_client))

    Args:
        fixed_costs: Monthly fixed costs
        price_per_client: Monthly revenue per client
        variable_cost_per_client: Monthly variable cost per client

    Returns:
        Client count needed to break even

    Raises:
        InvalidInputError: If the contribution margin is not positive
    """
    contribution_margin = price_per_client - variable_cost_per_client
    if contribution_margin <= 0:
        raise InvalidInputError(
            "Price per client must be greater than variable cost per client",
            field="contribution_margin",
            value=contribution_margin,
            context={
                "price_per_client": price_per_client,
                "variable_cost_per_client": variable_cost_per_client,
            },
        )
    return math.ceil(fixed_costs / contribution_margin)


def calculate_cac_payback_period(acquisition_cost: float, monthly_profit: float) -> float:
    """
    Months needed to recover the cost of acquiring one customer

    Raises:
        InvalidInputError: If monthly profit per customer is not positive
    """
    if monthly_profit <= 0:
        raise InvalidInputError(
            "Monthly profit must be greater than zero",
            field="monthly_profit",
            value=monthly_profit,
        )
    return acquisition_cost / monthly_profit


def average_lifespan_months(churn_rate: float, fallback_months: float) -> float:
    """
    Expected customer lifetime from a monthly churn fraction

    1 / churn_rate when churn is positive, otherwise the fallback horizon.
    """
    if churn_rate > 0:
        return 1 / churn_rate
    return fallback_months


def calculate_customer_lifetime_value(avg_monthly_revenue: float,
                                      avg_customer_lifespan_months: float,
                                      profit_margin: float) -> float:
    """CLV = average monthly revenue * lifespan in months * profit margin fraction"""
    return avg_monthly_revenue * avg_customer_lifespan_months * profit_margin


def calculate_roi(initial_investment: float, final_value: float) -> float:
    """ROI as a fraction; 0.0 when nothing was invested"""
    if initial_investment == 0:
        return 0.0
    return (final_value - initial_investment) / initial_investment


def select_discount(quantity: float, discount_tiers: Iterable[DiscountTier]) -> float:
    """Discount of the tier with the highest threshold not exceeding quantity, else 0.0"""
    applicable = [tier for tier in discount_tiers if quantity >= tier.threshold]
    if not applicable:
        return 0.0
    return max(applicable, key=lambda tier: tier.threshold).discount


def calculate_volume_discount_price(base_price: float, quantity: float,
                                    discount_tiers: Sequence[DiscountTier]) -> float:
    """
    Total price after the applicable volume discount

    Args:
        base_price: Undiscounted unit price
        quantity: Units purchased
        discount_tiers: Threshold/discount pairs in any order

    Returns:
        base_price * (1 - discount) * quantity
    """
    discount = select_discount(quantity, discount_tiers)
    return base_price * (1 - discount) * quantity


def calculate_profit_margin(revenue: float, costs: float) -> float:
    """Profit margin as a fraction of revenue; 0.0 when revenue is zero"""
    if revenue == 0:
        return 0.0
    return (revenue - costs) / revenue


def calculate_client_revenue(client_count: float, avg_price: float,
                             churn_rate: float = 0.0) -> float:
    """Monthly recurring revenue after losing the churned fraction"""
    gross_revenue = client_count * avg_price
    return gross_revenue - gross_revenue * churn_rate


def calculate_saas_revenue(tiers: Iterable[SaaSTier]) -> float:
    """Monthly recurring revenue across resale tiers"""
    return math.fsum(tier.price * tier.client_count for tier in tiers)


def calculate_acv(monthly_recurring: float, one_time_fees: float = 0.0) -> float:
    """Annual contract value: twelve months of recurring revenue plus one-time fees"""
    return monthly_recurring * 12 + one_time_fees


def calculate_churn_rate(starting_customers: float, ending_customers: float,
                         new_customers: float) -> float:
    """
    Churn fraction over a period

    churned = starting + new - ending, floored at zero. Returns 0.0 when
    there were no starting customers.
    """
    if starting_customers == 0:
        return 0.0
    churned = starting_customers + new_customers - ending_customers
    return max(0.0, churned / starting_customers)
