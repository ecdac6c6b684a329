from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from headcount.charts import driver_cost_pie, to_vega_spec, top_schools_bar
from headcount.dataset import DECISIONS_OUTSTANDING
from headcount.filters import DISPLAY, ViewState
from headcount.frames import schools_frame
from headcount.metrics_drivers import DriverSummary, driver_cost_shares, driver_schools, driver_totals
from headcount.models import School

_LABEL_PREFIX = re.compile(r"^Alpha (School: )?")


@dataclass(frozen=True)
class PortfolioMetrics:
    total_schools: int
    active_schools: int
    total_enrolled: int
    total_capacity: int
    capacity_utilization: float
    total_guides: int
    total_model: int
    total_variance: int
    student_guide_ratio: float
    over_model_cost: int
    over_model_schools: int
    at_model_schools: int
    under_model_schools: int


def compute_portfolio_metrics(schools: Sequence[School]) -> PortfolioMetrics:
    """Portfolio totals over every school, regardless of the active view.

    Only positive-variance schools feed ``over_model_cost``; under-model
    savings are not netted against it.
    """
    df = schools_frame(schools)
    over = df["variance"] > 0
    total_enrolled = int(df["enrolled"].sum())
    total_capacity = int(df["capacity"].sum())
    total_guides = int(df["guides_actual"].sum())
    return PortfolioMetrics(
        total_schools=len(df),
        active_schools=int(((df["guides_actual"] > 0) | (df["enrolled"] > 0)).sum()),
        total_enrolled=total_enrolled,
        total_capacity=total_capacity,
        capacity_utilization=(total_enrolled / total_capacity * 100) if total_capacity else 0.0,
        total_guides=total_guides,
        total_model=int(df["guides_model"].sum()),
        total_variance=int(df["variance"].sum()),
        student_guide_ratio=(total_enrolled / total_guides) if total_guides else 0.0,
        over_model_cost=int(df.loc[over, "annual_cost"].sum()),
        over_model_schools=int(over.sum()),
        at_model_schools=int((df["variance"] == 0).sum()),
        under_model_schools=int((df["variance"] < 0).sum()),
    )


def short_school_label(name: str) -> str:
    return _LABEL_PREFIX.sub("", name).replace(" Academy", "")


def top_over_model_schools(schools: Sequence[School], limit: int = DISPLAY.top_over_model_schools) -> List[Dict[str, Any]]:
    df = schools_frame(schools)
    top = df[df["variance"] > 0].sort_values("annual_cost", ascending=False, kind="stable").head(limit)
    top = top.assign(label=top["name"].map(short_school_label))
    return top[["name", "label", "annual_cost", "variance"]].to_dict(orient="records")


def cost_per_capacity_seat(schools: Sequence[School]) -> Dict[str, Any]:
    """Out-of-model cost spread over capacity seats, per over-model school."""
    df = schools_frame(schools)
    rows = df.loc[(df["variance"] > 0) & (df["capacity"] > 0), ["name", "capacity", "enrolled", "variance", "annual_cost"]]
    rows = rows.assign(cost_per_seat=rows["annual_cost"] / rows["capacity"])
    rows = rows.sort_values("cost_per_seat", ascending=False, kind="stable")

    total_capacity = int(rows["capacity"].sum())
    total_cost = int(rows["annual_cost"].sum())
    total = {
        "capacity": total_capacity,
        "enrolled": int(rows["enrolled"].sum()),
        "variance": int(rows["variance"].sum()),
        "annual_cost": total_cost,
        "cost_per_seat": total_cost / max(total_capacity, 1),
    }
    return {"rows": rows.to_dict(orient="records"), "total": total}


def compute_overview(state: ViewState, ctx: Dict[str, Any]) -> Dict[str, Any]:
    schools: Sequence[School] = ctx.get("schools", ())
    metrics: PortfolioMetrics = ctx.get("portfolio") or compute_portfolio_metrics(schools)
    drivers: List[DriverSummary] = ctx.get("filtered_drivers", ctx.get("drivers", []))

    shares = driver_cost_shares(drivers)
    top_schools = top_over_model_schools(schools)
    charts: Dict[str, Any] = {}
    if shares:
        charts["driver_cost"] = to_vega_spec(driver_cost_pie(shares))
    if top_schools:
        charts["top_schools"] = to_vega_spec(top_schools_bar(top_schools))

    return {
        "state": asdict(state),
        "kpis": asdict(metrics),
        "driver_cost_shares": shares,
        "top_over_model_schools": top_schools,
        "cost_per_seat": cost_per_capacity_seat(schools),
        "drivers": [asdict(d) for d in drivers],
        "driver_totals": driver_totals(drivers),
        "expanded_driver": state.expanded_driver,
        "expanded_driver_schools": (
            [s.to_dict() for s in driver_schools(ctx.get("status_schools", schools), state.expanded_driver)]
            if state.expanded_driver
            else []
        ),
        "decisions": list(DECISIONS_OUTSTANDING),
        "charts": charts,
    }
