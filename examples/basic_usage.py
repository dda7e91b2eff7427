#!/usr/bin/env python3
"""
Basic Usage Example - GoHighLevel Pricing Calculator

This script walks through the pricing calculator with a sample agency:
- Agency platform, usage and add-on costs
- Rebilling profit and whether the markup-capable plan pays for itself
- A 12-month SaaS projection over three client tiers
- The profit dashboard for the current month

Run: python examples/basic_usage.py
"""

from ghl_pricing.calculator import PricingCalculator
from ghl_pricing.costs.agency import AgencyAddOns, AgencyUsage
from ghl_pricing.logging import configure_logging
from ghl_pricing.metrics.dashboard import DashboardCosts, DashboardRevenue
from ghl_pricing.projections.saas import PricingTier
from ghl_pricing.utils import format_currency, format_number, format_percentage


def print_agency_costs(calculator: PricingCalculator) -> None:
    breakdown = calculator.agency_costs(
        "pro",
        AgencyUsage(sms_segments=5000, voice_minutes_outbound=1000, emails_sent=20000,
                    local_phone_numbers=3),
        AgencyAddOns(ai_employee=True, wordpress_hosting="standard", a2p_campaigns=1),
        sub_accounts=5,
    )

    print("1. Agency costs on the Pro plan")
    print(f"   Platform: {format_currency(breakdown.platform)}")
    print(f"   Usage:    {format_currency(breakdown.usage.total)}")
    print(f"   Add-ons:  {format_currency(breakdown.add_ons.total)}")
    print(f"   Monthly:  {format_currency(breakdown.monthly_total)}")
    print()


def print_rebilling(calculator: PricingCalculator, num_clients: int) -> None:
    summary = calculator.rebilling("pro", num_clients)

    print(f"2. Rebilling profit for {num_clients} clients")
    for line in summary.lines:
        print(f"   {line.name:<16} {format_currency(line.monthly_profit):>12}"
              f"  ({format_number(line.effective_markup)}% markup)")
    if summary.hosting:
        print(f"   {'wp_hosting':<16} {format_currency(summary.hosting.monthly_profit):>12}")
    print(f"   Monthly profit: {format_currency(summary.monthly_profit)}")

    upgrade = calculator.plan_upgrade(num_clients)
    if upgrade.achievable:
        print(f"   Pro upgrade pays back in {format_number(upgrade.payback_months)} months"
              f" ({'worth it' if upgrade.is_worth_it else 'not worth it'})")
    else:
        print("   Markup adds no profit, the Pro upgrade never pays back")
    print()


def print_projection(calculator: PricingCalculator, tiers: list[PricingTier]) -> None:
    snapshots = calculator.saas_projection(tiers)

    print("3. SaaS projection")
    for snapshot in snapshots[::3]:
        print(f"   Month {snapshot.month:>2}: {snapshot.client_count:>3} clients, "
              f"MRR {format_currency(snapshot.mrr)}, profit {format_currency(snapshot.profit)}")

    value = calculator.client_value(tiers)
    print(f"   Average client value: {format_currency(value.avg_client_value)}")
    print(f"   Lifetime value:       {format_currency(value.lifetime_value)}")
    print(f"   Max acquisition cost: {format_currency(value.max_acquisition_cost)}")
    print()


def print_dashboard(calculator: PricingCalculator) -> None:
    dashboard = calculator.profit_dashboard(
        DashboardCosts(platform=497.0, usage=150.0, add_ons=100.0),
        DashboardRevenue(subscriptions=2970.0, rebilling=300.0),
        client_count=10,
    )

    metrics = dashboard.metrics
    print("4. Profit dashboard")
    print(f"   MRR:        {format_currency(metrics.mrr)}")
    print(f"   Net profit: {format_currency(metrics.net_profit)}")
    print(f"   Margin:     {format_percentage(metrics.profit_margin / 100)}")

    breakeven = dashboard.breakeven
    if breakeven.achievable:
        print(f"   Break-even at {breakeven.breakeven_clients} clients")
    else:
        print("   Break-even not achievable at the current price")

    for outcome in dashboard.scenarios:
        print(f"   {outcome.scenario.name:<12} 12 months: {outcome.clients[12]} clients, "
              f"MRR {format_currency(outcome.mrr[12])}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("GoHighLevel Pricing Calculator - Basic Usage Demo")
    print("=" * 60)
    print()

    calculator = PricingCalculator()
    tiers = [
        PricingTier("Starter", 297.0, 10, setup_fee=500.0),
        PricingTier("Pro", 497.0, 5, setup_fee=1000.0),
        PricingTier("Enterprise", 997.0, 2, setup_fee=2500.0),
    ]

    print_agency_costs(calculator)
    print_rebilling(calculator, num_clients=17)
    print_projection(calculator, tiers)
    print_dashboard(calculator)


if __name__ == "__main__":
    main()
