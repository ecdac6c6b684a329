"""
Tests for the Altair chart builders.

Run: pytest tests/test_charts.py -v
"""

import altair as alt

from headcount.charts import deployment_bar, driver_cost_pie, tier_cost_bar, to_vega_spec, top_schools_bar


def _mark_type(spec):
    mark = spec["mark"]
    return mark["type"] if isinstance(mark, dict) else mark


class TestChartBuilders:

    def test_driver_cost_pie(self):
        chart = driver_cost_pie([
            {"name": "Training Hub", "value": 3_536_000, "color": "#f59e0b"},
            {"name": "Timing", "value": 939_000, "color": "#10b981"},
        ])
        assert isinstance(chart, alt.Chart)
        spec = to_vega_spec(chart)
        assert _mark_type(spec) == "arc"
        assert "$schema" in spec

    def test_top_schools_bar(self):
        spec = to_vega_spec(top_schools_bar([
            {"name": "Alpha School: Austin Spyglass", "label": "Austin Spyglass", "annual_cost": 2_858_000, "variance": 17},
        ]))
        assert _mark_type(spec) == "bar"

    def test_tier_cost_bar(self):
        spec = to_vega_spec(tier_cost_bar([{"tier": "$40K", "guide_pct_revenue": 41.2}]))
        assert _mark_type(spec) == "bar"

    def test_deployment_bar(self):
        spec = to_vega_spec(deployment_bar([{"campus": "Tampa", "avg_pct_deployed": 88}]))
        assert _mark_type(spec) == "bar"
