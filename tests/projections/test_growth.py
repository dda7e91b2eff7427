"""Tests for compounding growth projections"""

import pytest

from conftest import money
from ghl_pricing.projections.growth import (
    CostModel,
    GrowthMetrics,
    GrowthScenario,
    compare_growth_scenarios,
    net_growth_rate,
    new_clients,
    project_clients,
    project_growth,
    project_profit_trend,
    project_revenue_growth,
    round_half_up,
)


class TestClientProjection:
    """Test client count growth"""

    def test_net_growth_rate(self):
        """Test net growth is growth minus churn"""
        assert net_growth_rate(10.0, 5.0) == 5.0

    @pytest.mark.parametrize("initial", [0, 1, 17, 250])
    def test_month_zero_is_initial(self, initial):
        """Test month 0 returns the initial count exactly"""
        assert project_clients(initial, 37.5, 0) == initial

    def test_month_zero_keeps_initial_value(self):
        """Test month 0 does not round the initial count"""
        assert project_clients(2.5, 10.0, 0) == 2.5
        assert new_clients(2.5, 10.0, 0) == 2.5

    def test_growth_law(self):
        """Test compounding and rounding"""
        assert project_clients(100, 5.0, 12) == round_half_up(100 * 1.05 ** 12)
        assert project_clients(100, 5.0, 12) == 180

    def test_halves_round_up(self):
        """Test half client counts round up"""
        assert round_half_up(10.5) == 11
        assert round_half_up(2.5) == 3
        assert project_clients(10, 5.0, 1) == 11

    def test_negative_net_growth(self):
        """Test churn above growth shrinks the base"""
        assert project_clients(100, -10.0, 1) == 90

    def test_new_clients(self):
        """Test new clients per month"""
        assert new_clients(10, 5.0, 0) == 10
        assert new_clients(10, 5.0, 1) == 1
        assert new_clients(100, -10.0, 1) == 0


class TestGrowthMetrics:
    """Test growth parameters"""

    @pytest.mark.parametrize("period", [0, -3, 2.5, True])
    def test_invalid_period(self, period):
        """Test the period must be a positive integer"""
        with pytest.raises(ValueError):
            GrowthMetrics(projection_period_months=period)

    def test_arbitrary_period(self):
        """Test periods outside the usual presets are accepted"""
        assert GrowthMetrics(projection_period_months=37).projection_period_months == 37

    @pytest.mark.parametrize("growth, churn", [(0.0, 250.0), (-5.0, 0.0), (150.0, 5.0), (10.0, True)])
    def test_rates_outside_percentage_range(self, growth, churn):
        """Test growth and churn must be percentages between 0 and 100"""
        with pytest.raises(ValueError):
            GrowthMetrics(monthly_growth_rate=growth, monthly_churn_rate=churn)

    def test_full_churn_empties_the_base(self):
        """Test the largest allowed churn never produces negative clients"""
        points = project_growth(10, 100.0, GrowthMetrics(0.0, 100.0, 3), CostModel())
        assert [p.clients for p in points] == [10, 0, 0, 0]


class TestProjectGrowth:
    """Test single-cohort projections"""

    def test_series(self):
        """Test the series covers months 0..N with cost model applied"""
        points = project_growth(10, 300.0, GrowthMetrics(10.0, 5.0, 6),
                                CostModel(fixed=497.0, variable_per_client=40.0), setup_fee=500.0)

        assert [p.month for p in points] == list(range(7))
        first = points[0]
        assert first.clients == 10
        assert first.revenue == money(3000.0)
        assert first.setup_fees == money(5000.0)
        assert first.cost == money(897.0)
        assert first.profit == money(2103.0)
        assert first.profit_margin == money(2103.0 / 3000.0 * 100)
        assert points[1].setup_fees == money(500.0)

    def test_no_revenue_margin(self):
        """Test zero revenue gives a zero margin"""
        points = project_growth(0, 300.0, GrowthMetrics(10.0, 5.0, 3), CostModel(fixed=497.0))
        assert all(p.profit_margin == 0.0 for p in points)


class TestRevenueGrowth:
    """Test revenue compounding"""

    def test_projection(self):
        """Test month 1 is the starting revenue"""
        projections = project_revenue_growth(1000.0, 0.1, 3)
        assert [p.month for p in projections] == [1, 2, 3]
        assert [p.revenue for p in projections] == [money(1000.0), money(1100.0), money(1210.0)]
        assert projections[0].growth == 0.0
        assert projections[2].growth == money(0.1)

    def test_zero_start(self):
        """Test zero revenue reports zero growth"""
        projections = project_revenue_growth(0.0, 0.1, 3)
        assert all(p.growth == 0.0 for p in projections)


class TestGrowthScenarios:
    """Test scenario comparison"""

    def test_default_scenarios(self):
        """Test conservative, moderate and aggressive outcomes"""
        outcomes = compare_growth_scenarios(20, 300.0)
        by_name = {outcome.scenario.name: outcome for outcome in outcomes}

        assert list(by_name) == ["Conservative", "Moderate", "Aggressive"]
        assert by_name["Conservative"].clients == {6: 20, 12: 20, 24: 20}
        assert by_name["Conservative"].mrr[24] == money(6000.0)
        assert by_name["Moderate"].clients[6] == 30
        assert by_name["Aggressive"].clients[6] == 54

    def test_custom_scenario(self):
        """Test caller-supplied scenarios and horizons"""
        outcomes = compare_growth_scenarios(100, 10.0, [GrowthScenario("Flat", 3.0, 3.0)],
                                            horizons=(1, 2))
        assert outcomes[0].clients == {1: 100, 2: 100}


class TestProfitTrend:
    """Test profit trend projections"""

    def test_costs_grow_slower(self):
        """Test costs grow at a share of the revenue multiplier"""
        points = project_profit_trend(10000.0, 6000.0, 2)
        assert points[0].profit == money(4000.0)
        assert points[1].revenue == money(11000.0)
        assert points[1].cost == money(6360.0)
        assert points[1].profit == money(4640.0)
        assert len(points) == 3
