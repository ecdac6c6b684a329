"""
Tests for school filtering, sorting and the grouped detail table.

Run: pytest tests/test_metrics_schools.py -v
"""

from headcount.filters import ViewState
from headcount.metrics_overview import compute_portfolio_metrics
from headcount.metrics_schools import (
    apply_status_filter,
    compute_school_detail,
    filtered_schools,
    group_by_type,
    subtotal,
)


class TestStatusFilter:

    def test_over_matches_portfolio_count(self, schools):
        over = apply_status_filter(schools, "over")
        assert len(over) == compute_portfolio_metrics(schools).over_model_schools
        assert all(s.status == "over" for s in over)

    def test_all_keeps_everything(self, schools):
        assert apply_status_filter(schools, "all") == list(schools)

    def test_under_members(self, schools):
        names = {s.name for s in apply_status_filter(schools, "under")}
        assert names == {"Nova Bastrop", "Alpha Tampa", "Montessorium Brushy Creek"}


class TestSorting:
    """Sort order and tie stability"""

    def test_default_is_variance_descending(self, schools):
        rows = filtered_schools(schools, ViewState())
        assert rows[0].name == "Alpha School: Austin Spyglass"
        variances = [s.variance for s in rows]
        assert variances == sorted(variances, reverse=True)

    def test_name_ascending(self, schools):
        rows = filtered_schools(schools, ViewState(sort_key="name", sort_ascending=True))
        assert [s.name for s in rows] == sorted(s.name for s in schools)

    def test_ties_keep_dataset_order_descending(self, schools):
        rows = filtered_schools(schools, ViewState(status_filter="at", sort_key="guides_actual"))
        threes = [s.name for s in rows if s.guides_actual == 3]
        expected = [s.name for s in schools if s.status == "at" and s.guides_actual == 3]
        assert threes == expected

    def test_ties_keep_dataset_order_ascending(self, schools):
        rows = filtered_schools(schools, ViewState(status_filter="at", sort_key="guides_actual", sort_ascending=True))
        threes = [s.name for s in rows if s.guides_actual == 3]
        expected = [s.name for s in schools if s.status == "at" and s.guides_actual == 3]
        assert threes == expected

    def test_input_not_mutated(self, make_school):
        source = [make_school("B", enrolled=1), make_school("A", enrolled=2)]
        filtered_schools(source, ViewState(sort_key="enrolled", sort_ascending=False))
        assert [s.name for s in source] == ["B", "A"]


class TestGrouping:

    def test_type_groups_follow_declared_order_and_skip_empty(self, schools):
        over = apply_status_filter(schools, "over")
        assert [g["type"] for g in group_by_type(over)] == ["Alpha", "Alpha Microschool", "Non-Alpha"]

    def test_subtotal_counts_only_positive_cost(self, make_school):
        total = subtotal([
            make_school("A", guides_actual=3, guides_model=2, annual_cost=100000),
            make_school("B", guides_actual=1, guides_model=2, annual_cost=-50000),
        ])
        assert total["annual_cost"] == 100000
        assert total["variance"] == 0
        assert total["schools"] == 2


class TestComputeSchoolDetail:

    def test_sections_in_status_order(self, ctx_for):
        state, ctx = ctx_for()
        payload = compute_school_detail(state, ctx)
        assert [s["status"] for s in payload["sections"]] == ["over", "at", "under"]
        assert payload["total"]["schools"] == 33

    def test_filter_limits_sections(self, ctx_for):
        state, ctx = ctx_for(status_filter="under")
        payload = compute_school_detail(state, ctx)
        assert [s["status"] for s in payload["sections"]] == ["under"]
        section = payload["sections"][0]
        assert [g["type"] for g in section["groups"]] == ["Alpha Microschool", "Non-Alpha", "Montessorium"]
        assert section["subtotal"]["annual_cost"] == 0

    def test_sort_echoed(self, ctx_for):
        state, ctx = ctx_for(sort_key="enrolled", sort_ascending=True)
        payload = compute_school_detail(state, ctx)
        assert payload["sort"] == {"key": "enrolled", "ascending": True}
