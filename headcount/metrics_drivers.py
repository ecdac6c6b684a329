from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Sequence

import pandas as pd

from headcount.filters import ViewState
from headcount.frames import schools_frame
from headcount.models import School


@dataclass(frozen=True)
class DriverCategoryInfo:
    nature: str
    color: str


# Fixed category table. "At Model" and "Staffing Gap" are not summarized.
DRIVER_CATEGORIES: Dict[str, DriverCategoryInfo] = {
    "Training Hub": DriverCategoryInfo("Intentional; needs formal approval", "#f59e0b"),
    "Non-Standard Ratio": DriverCategoryInfo("Intentional; needs model update", "#8b5cf6"),
    "Pre-Launch": DriverCategoryInfo("Cost real; labor deployed elsewhere", "#3b82f6"),
    "Temporary": DriverCategoryInfo("Should self-resolve; track it", "#06b6d4"),
    "Timing": DriverCategoryInfo("Will normalize with enrollment", "#10b981"),
    "Underhiring": DriverCategoryInfo("Quality risk", "#6b7280"),
}


@dataclass(frozen=True)
class DriverSummary:
    driver: str
    schools: int
    excess_guides: int
    annual_cost: int
    pct_of_total: float
    nature: str
    color: str


def _positive_cost(df: pd.DataFrame) -> int:
    return int(df.loc[df["variance"] > 0, "annual_cost"].sum())


def _summarize(df: pd.DataFrame, total_positive_cost: int) -> List[DriverSummary]:
    rows = df[df["driver"].isin(list(DRIVER_CATEGORIES)) & (df["variance"] != 0)]
    if rows.empty:
        return []

    grouped = rows.groupby("driver").agg(
        schools=("name", "nunique"),
        excess_guides=("variance", "sum"),
        annual_cost=("annual_cost", "sum"),
    )
    # category table order breaks cost ties
    grouped = (
        grouped.reindex([d for d in DRIVER_CATEGORIES if d in grouped.index])
        .rename_axis("driver")
        .reset_index()
        .sort_values("annual_cost", ascending=False, kind="stable")
    )

    return [
        DriverSummary(
            driver=r["driver"],
            schools=int(r["schools"]),
            excess_guides=int(r["excess_guides"]),
            annual_cost=int(r["annual_cost"]),
            pct_of_total=(int(r["annual_cost"]) / total_positive_cost * 100) if total_positive_cost > 0 else 0.0,
            nature=DRIVER_CATEGORIES[r["driver"]].nature,
            color=DRIVER_CATEGORIES[r["driver"]].color,
        )
        for r in grouped.to_dict(orient="records")
    ]


def compute_driver_summaries(schools: Sequence[School]) -> List[DriverSummary]:
    """Out-of-model schools grouped by driver, costliest first.

    At-model schools never count toward a driver. ``pct_of_total`` is measured
    against the portfolio's positive-variance cost, so Underhiring can go
    negative.
    """
    df = schools_frame(schools)
    return _summarize(df, _positive_cost(df))


def filter_driver_summaries(
    schools: Sequence[School],
    summaries: Sequence[DriverSummary],
    status_filter: str,
) -> List[DriverSummary]:
    """Driver summaries regrouped over the schools matching ``status_filter``.

    Each category keeps the portfolio-wide ``pct_of_total`` from ``summaries``.
    """
    if status_filter == "all":
        return list(summaries)
    df = schools_frame(schools)
    portfolio_pct = {d.driver: d.pct_of_total for d in summaries}
    return [
        replace(d, pct_of_total=portfolio_pct.get(d.driver, 0.0))
        for d in _summarize(df[df["status"] == status_filter], _positive_cost(df))
    ]


def driver_schools(schools: Sequence[School], driver: str) -> List[School]:
    return [s for s in schools if s.driver == driver and s.variance != 0]


def driver_totals(summaries: Sequence[DriverSummary]) -> Dict[str, Any]:
    return {
        "schools": sum(d.schools for d in summaries),
        "excess_guides": sum(max(d.excess_guides, 0) for d in summaries),
        "annual_cost": sum(d.annual_cost for d in summaries),
    }


def driver_cost_shares(summaries: Sequence[DriverSummary]) -> List[Dict[str, Any]]:
    """Pie input; negative categories are drawn as zero."""
    return [{"name": d.driver, "value": max(d.annual_cost, 0), "color": d.color} for d in summaries]


def compute_drivers(state: ViewState, ctx: Dict[str, Any]) -> Dict[str, Any]:
    schools: Sequence[School] = ctx.get("schools", ())
    drivers: List[DriverSummary] = ctx.get("filtered_drivers", ctx.get("drivers", []))
    subset = ctx.get("status_schools", schools)

    sections = []
    for d in drivers:
        members = driver_schools(subset, d.driver)
        sections.append(
            {
                **asdict(d),
                "expanded": state.expanded_driver == d.driver,
                "school_rows": [s.to_dict() for s in members],
            }
        )
    return {
        "state": asdict(state),
        "pct_basis": "portfolio",
        "drivers": sections,
        "totals": driver_totals(drivers),
    }
