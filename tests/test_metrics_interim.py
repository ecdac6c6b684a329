"""
Tests for interim assignment grouping.

Run: pytest tests/test_metrics_interim.py -v
"""

from headcount.metrics_interim import compute_interim, deployment_counts, interim_by_campus, interim_overview


class TestInterimByCampus:

    def test_campuses_in_first_seen_order(self, assignments):
        campuses = [c["campus"] for c in interim_by_campus(assignments)]
        assert campuses == ["Houston", "Tampa", "Orlando", "Charlotte", "Raleigh", "Waypoint Academy", "2HL"]

    def test_average_rounds_half_up(self, assignments):
        avg = {c["campus"]: c["avg_pct_deployed"] for c in interim_by_campus(assignments)}
        assert avg["Tampa"] == 88
        assert avg["Houston"] == 47
        assert avg["Raleigh"] == 39
        assert avg["2HL"] == 100

    def test_staff_counts_cover_every_assignment(self, assignments):
        assert sum(len(c["staff"]) for c in interim_by_campus(assignments)) == len(assignments)

    def test_empty(self):
        assert interim_by_campus([]) == []


class TestDeploymentCounts:

    def test_most_common_first(self, assignments):
        counts = deployment_counts(assignments)
        assert counts[0] == {"destination": "Dorado", "guides": 5}

    def test_ties_keep_first_seen_order(self, make_assignment):
        counts = deployment_counts([
            make_assignment("A", deployments=("X", "Y")),
            make_assignment("B", deployments=("Y", "X")),
        ])
        assert [c["destination"] for c in counts] == ["X", "Y"]


class TestInterimOverview:

    def test_kpis(self, assignments):
        kpis = interim_overview(assignments)
        assert kpis["guides_tracked"] == 19
        assert kpis["home_campuses"] == 7
        assert kpis["avg_pct_deployed"] == 67
        assert kpis["top_destination"]["destination"] == "Dorado"

    def test_empty(self):
        kpis = interim_overview([])
        assert kpis["guides_tracked"] == 0
        assert kpis["avg_pct_deployed"] == 0
        assert kpis["top_destination"] is None


class TestComputeInterim:

    def test_expanded_campus(self, ctx_for):
        state, ctx = ctx_for(active_tab="interim", expanded_campus="Raleigh")
        payload = compute_interim(state, ctx)
        expanded = [c for c in payload["campuses"] if c["expanded"]]
        assert [c["campus"] for c in expanded] == ["Raleigh"]
        assert expanded[0]["guides"] == 4
        assert isinstance(expanded[0]["staff"][0]["deployments"], list)
        assert len(payload["receiving_schools"]) == 4
