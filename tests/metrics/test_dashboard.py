"""Tests for the profit dashboard metrics"""

from unittest.mock import patch

from conftest import money
from ghl_pricing.metrics.dashboard import (
    DashboardCosts,
    DashboardRevenue,
    analyze_breakeven,
    calculate_profit_metrics,
    cost_breakdown,
    project_client_growth_impact,
    project_margin_trend,
    revenue_breakdown,
)


class TestProfitMetrics:
    """Test headline profit metrics"""

    def test_metrics(self, dashboard_costs, dashboard_revenue):
        """Test revenue, cost, profit and per-client figures"""
        metrics = calculate_profit_metrics(dashboard_costs, dashboard_revenue, 10)

        assert metrics.mrr == money(3270.0)
        assert metrics.costs == money(747.0)
        assert metrics.net_profit == money(2523.0)
        assert metrics.profit_margin == money(2523.0 / 3270.0 * 100)
        assert metrics.revenue_per_client == money(327.0)
        assert metrics.cost_per_client == money(74.7)

    def test_setup_fees_count_as_revenue(self, dashboard_costs):
        """Test setup fees collected this month are part of dashboard revenue"""
        revenue = DashboardRevenue(subscriptions=2970.0, rebilling=300.0, setup_fees=500.0)
        metrics = calculate_profit_metrics(dashboard_costs, revenue, 10)

        assert metrics.mrr == money(3770.0)
        assert metrics.net_profit == money(3023.0)
        assert metrics.revenue_per_client == money(377.0)
        assert [item.name for item in revenue_breakdown(revenue)] == [
            "Subscriptions", "Rebilling", "Setup Fees"
        ]

    def test_no_clients_no_revenue(self, dashboard_costs):
        """Test guarded divisions return zero"""
        metrics = calculate_profit_metrics(dashboard_costs, DashboardRevenue(), 0)
        assert metrics.profit_margin == 0.0
        assert metrics.revenue_per_client == 0.0
        assert metrics.cost_per_client == 0.0


class TestBreakevenAnalysis:
    """Test dashboard break-even analysis"""

    def test_currently_profitable(self, dashboard_costs):
        """Test a client base above break-even"""
        analysis = analyze_breakeven(dashboard_costs, 10, 327.0)

        assert analysis.achievable is True
        assert analysis.fixed_costs == money(597.0)
        assert analysis.variable_cost_per_client == money(15.0)
        assert analysis.breakeven_clients == 2
        assert analysis.currently_profitable is True
        assert analysis.months_to_breakeven == 0

    def test_months_to_breakeven(self):
        """Test growth time to reach break-even"""
        costs = DashboardCosts(platform=2500.0, usage=500.0)
        analysis = analyze_breakeven(costs, 10, 297.0)

        assert analysis.breakeven_clients == 11
        assert analysis.currently_profitable is False
        assert analysis.months_to_breakeven == 1

    def test_no_clients_to_grow(self):
        """Test no months estimate without a client base"""
        analysis = analyze_breakeven(DashboardCosts(platform=500.0), 0, 100.0)
        assert analysis.breakeven_clients == 5
        assert analysis.months_to_breakeven is None

    def test_not_achievable(self):
        """Test a non-positive contribution margin is not achievable"""
        costs = DashboardCosts(platform=1000.0, usage=500.0)

        with patch("ghl_pricing.metrics.dashboard.log_guarded_result") as log_result:
            analysis = analyze_breakeven(costs, 10, 50.0)

        assert analysis.achievable is False
        assert analysis.breakeven_clients is None
        assert analysis.currently_profitable is False
        log_result.assert_called_once()
        assert log_result.call_args.args[1:3] == ("breakeven", False)


class TestClientGrowthImpact:
    """Test client growth impact"""

    def test_steps(self, dashboard_costs, dashboard_revenue):
        """Test current plus four growth steps"""
        metrics = calculate_profit_metrics(dashboard_costs, dashboard_revenue, 10)
        impacts = project_client_growth_impact(metrics, 10)

        assert [i.scenario for i in impacts] == [
            "Current", "+10 Clients", "+25 Clients", "+50 Clients", "+100 Clients"
        ]
        assert impacts[0].profit == money(2523.0)
        assert impacts[1].clients == 20
        assert impacts[1].revenue == money(6540.0)
        assert impacts[1].profit == money(20 * (327.0 - 74.7))


class TestMarginTrend:
    """Test margin trend scenarios"""

    def test_first_months(self):
        """Test scenario margins grow from the current margin"""
        points = project_margin_trend(50.0, months=3)

        assert len(points) == 4
        assert points[0].conservative == money(50.0)
        assert points[0].aggressive == money(50.0)
        assert points[1].conservative == money(50.75)
        assert points[1].moderate == money(52.0)
        assert points[1].aggressive == money(55.0)

    def test_caps(self):
        """Test scenario margins are capped"""
        last = project_margin_trend(79.0, months=24)[-1]
        assert last.conservative == 80.0
        assert last.moderate == 85.0
        assert last.aggressive == 90.0


class TestBreakdowns:
    """Test revenue and cost breakdowns"""

    def test_revenue_breakdown_drops_zero_parts(self, dashboard_revenue):
        """Test zero parts are omitted"""
        items = revenue_breakdown(dashboard_revenue)
        assert [item.name for item in items] == ["Subscriptions", "Rebilling"]

    def test_cost_breakdown(self, dashboard_costs):
        """Test all non-zero cost parts"""
        items = cost_breakdown(dashboard_costs)
        assert [(item.name, item.value) for item in items] == [
            ("Platform", 497.0), ("Usage", 150.0), ("Add-ons", 100.0)
        ]

    def test_empty(self):
        """Test nothing to break down"""
        assert revenue_breakdown(DashboardRevenue()) == []
        assert cost_breakdown(DashboardCosts()) == []
