from __future__ import annotations

from typing import Any, Dict, List

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def driver_cost_pie(shares: List[Dict[str, Any]]) -> alt.Chart:
    """Donut of out-of-model cost by driver; ``shares`` rows carry name/value/color."""
    df = pd.DataFrame(shares, columns=["name", "value", "color"])
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=50, outerRadius=100)
        .encode(
            theta=alt.Theta("value:Q", stack=True),
            color=alt.Color(
                "name:N",
                title="Driver",
                sort=df["name"].tolist(),
                scale=alt.Scale(domain=df["name"].tolist(), range=df["color"].tolist()),
            ),
            tooltip=["name", alt.Tooltip("value:Q", title="Annual Cost", format="$,.0f")],
        )
        .properties(height=260)
    )


def top_schools_bar(rows: List[Dict[str, Any]]) -> alt.Chart:
    df = pd.DataFrame(rows, columns=["label", "annual_cost", "variance"])
    return (
        alt.Chart(df)
        .mark_bar(color="#f59e0b", cornerRadiusEnd=4)
        .encode(
            x=alt.X("annual_cost:Q", title="Annual OOM Cost", axis=alt.Axis(format="$~s")),
            y=alt.Y("label:N", title=None, sort="-x"),
            tooltip=[
                "label",
                alt.Tooltip("annual_cost:Q", title="Annual Cost", format="$,.0f"),
                alt.Tooltip("variance:Q", title="Excess Guides"),
            ],
        )
        .properties(height=280)
    )


def tier_cost_bar(rows: List[Dict[str, Any]]) -> alt.Chart:
    df = pd.DataFrame(rows, columns=["tier", "guide_pct_revenue"])
    return (
        alt.Chart(df)
        .mark_bar(color="#6366f1")
        .encode(
            x=alt.X("tier:N", title="Tuition Tier", sort=None),
            y=alt.Y("guide_pct_revenue:Q", title="Guide Cost % of Revenue"),
            tooltip=["tier", alt.Tooltip("guide_pct_revenue:Q", title="% of Revenue", format=".1f")],
        )
        .properties(height=220)
    )


def deployment_bar(rows: List[Dict[str, Any]]) -> alt.Chart:
    df = pd.DataFrame(rows, columns=["campus", "avg_pct_deployed"])
    return (
        alt.Chart(df)
        .mark_bar(color="#818cf8")
        .encode(
            x=alt.X("avg_pct_deployed:Q", title="Avg % Deployed Elsewhere", scale=alt.Scale(domain=[0, 100])),
            y=alt.Y("campus:N", title="Home Campus", sort=None),
            tooltip=["campus", alt.Tooltip("avg_pct_deployed:Q", title="Avg %")],
        )
        .properties(height=220)
    )
