"""
Tests for portfolio metrics and the executive overview payload.

Run: pytest tests/test_metrics_overview.py -v
"""

import pytest

from headcount.metrics_overview import (
    compute_overview,
    compute_portfolio_metrics,
    cost_per_capacity_seat,
    short_school_label,
    top_over_model_schools,
)


class TestPortfolioMetrics:
    """Totals over the whole school list"""

    def test_empty_portfolio_is_all_zeros(self):
        m = compute_portfolio_metrics([])
        assert m.total_schools == 0
        assert m.total_enrolled == 0
        assert m.capacity_utilization == 0.0
        assert m.student_guide_ratio == 0.0
        assert m.over_model_cost == 0

    def test_totals_equal_field_sums(self, schools):
        m = compute_portfolio_metrics(schools)
        assert m.total_enrolled == sum(s.enrolled for s in schools)
        assert m.total_capacity == sum(s.capacity for s in schools)
        assert m.total_guides == sum(s.guides_actual for s in schools)
        assert m.total_model == sum(s.guides_model for s in schools)
        assert m.total_variance == m.total_guides - m.total_model

    def test_status_counts_partition_the_portfolio(self, schools):
        m = compute_portfolio_metrics(schools)
        assert m.total_schools == 33
        assert (m.over_model_schools, m.at_model_schools, m.under_model_schools) == (13, 17, 3)
        assert m.over_model_schools + m.at_model_schools + m.under_model_schools == m.total_schools

    def test_over_model_cost_ignores_negative_costs(self, schools):
        m = compute_portfolio_metrics(schools)
        assert m.over_model_cost == 8_748_000
        assert m.over_model_cost == sum(s.annual_cost for s in schools if s.variance > 0)

    def test_total_variance(self, schools):
        assert compute_portfolio_metrics(schools).total_variance == 47

    def test_active_schools_excludes_empty_sites(self, schools):
        assert compute_portfolio_metrics(schools).active_schools == 27

    def test_idempotent(self, schools):
        assert compute_portfolio_metrics(schools) == compute_portfolio_metrics(schools)

    def test_ratio_and_utilization(self, make_school):
        m = compute_portfolio_metrics([
            make_school("A", enrolled=30, capacity=40, guides_actual=3),
            make_school("B", enrolled=10, capacity=60, guides_actual=2),
        ])
        assert m.capacity_utilization == pytest.approx(40.0)
        assert m.student_guide_ratio == pytest.approx(8.0)

    def test_zero_guides_does_not_divide(self, make_school):
        m = compute_portfolio_metrics([make_school(enrolled=5, guides_actual=0, guides_model=0)])
        assert m.student_guide_ratio == 0.0


class TestTopOverModelSchools:

    def test_limited_to_eight_costliest(self, schools):
        top = top_over_model_schools(schools)
        assert len(top) == 8
        costs = [r["annual_cost"] for r in top]
        assert costs == sorted(costs, reverse=True)
        assert top[0]["name"] == "Alpha School: Austin Spyglass"

    def test_only_over_model_schools(self, make_school):
        rows = top_over_model_schools([
            make_school("Over", guides_actual=3, guides_model=2, annual_cost=100000),
            make_school("Under", guides_actual=1, guides_model=2, annual_cost=-100000),
        ])
        assert [r["name"] for r in rows] == ["Over"]

    @pytest.mark.parametrize("name,label", [
        ("Alpha School: Austin Spyglass", "Austin Spyglass"),
        ("Alpha High School: Austin", "High School: Austin"),
        ("Alpha Scottsdale", "Scottsdale"),
        ("Texas Sports Academy", "Texas Sports"),
        ("Nova Austin", "Nova Austin"),
    ])
    def test_short_label(self, name, label):
        assert short_school_label(name) == label


class TestCostPerSeat:

    def test_rows_skip_zero_capacity_and_non_over(self, make_school):
        result = cost_per_capacity_seat([
            make_school("A", capacity=20, guides_actual=3, guides_model=2, annual_cost=100000),
            make_school("B", capacity=0, guides_actual=3, guides_model=2, annual_cost=100000),
            make_school("C", capacity=50, guides_actual=2, guides_model=2),
        ])
        assert [r["name"] for r in result["rows"]] == ["A"]
        assert result["rows"][0]["cost_per_seat"] == pytest.approx(5000.0)
        assert result["total"]["cost_per_seat"] == pytest.approx(5000.0)

    def test_empty_total_does_not_divide(self):
        result = cost_per_capacity_seat([])
        assert result["rows"] == []
        assert result["total"]["cost_per_seat"] == 0


class TestComputeOverview:

    def test_payload_shape(self, ctx_for):
        state, ctx = ctx_for()
        payload = compute_overview(state, ctx)
        for key in ("kpis", "driver_cost_shares", "top_over_model_schools", "cost_per_seat",
                    "drivers", "driver_totals", "decisions", "charts"):
            assert key in payload
        assert set(payload["charts"]) == {"driver_cost", "top_schools"}
        assert payload["expanded_driver_schools"] == []

    def test_kpis_ignore_status_filter(self, ctx_for):
        state, ctx = ctx_for(status_filter="under")
        payload = compute_overview(state, ctx)
        assert payload["kpis"]["total_schools"] == 33

    def test_expanded_driver_lists_member_schools(self, ctx_for):
        state, ctx = ctx_for(expanded_driver="Training Hub")
        payload = compute_overview(state, ctx)
        names = [s["name"] for s in payload["expanded_driver_schools"]]
        assert names == ["Alpha School: Austin Spyglass", "Alpha High School: Austin"]
