from __future__ import annotations

from collections import Counter
from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from headcount.charts import deployment_bar, to_vega_spec
from headcount.dataset import RECEIVING_SCHOOLS
from headcount.filters import ViewState
from headcount.formatting import round_half_up
from headcount.frames import interim_frame
from headcount.models import InterimAssignment


def _round_pct(mean: float) -> int:
    return int(round_half_up(mean))


def _avg_pct(assignments: Sequence[InterimAssignment]) -> int:
    if not assignments:
        return 0
    return _round_pct(interim_frame(assignments)["pct_deployed_elsewhere"].mean())


def interim_by_campus(assignments: Sequence[InterimAssignment]) -> List[Dict[str, Any]]:
    """Assignments grouped by home campus, campuses in first-seen order."""
    if not assignments:
        return []
    means = interim_frame(assignments).groupby("home_campus", sort=False)["pct_deployed_elsewhere"].mean()
    return [
        {
            "campus": campus,
            "staff": [a for a in assignments if a.home_campus == campus],
            "avg_pct_deployed": _round_pct(mean),
        }
        for campus, mean in means.items()
    ]


def deployment_counts(assignments: Sequence[InterimAssignment]) -> List[Dict[str, Any]]:
    counts = Counter(d for a in assignments for d in a.deployments)
    # most_common keeps first-seen order on ties
    return [{"destination": name, "guides": n} for name, n in counts.most_common()]


def interim_overview(assignments: Sequence[InterimAssignment]) -> Dict[str, Any]:
    destinations = deployment_counts(assignments)
    return {
        "guides_tracked": len(assignments),
        "avg_pct_deployed": _avg_pct(assignments),
        "home_campuses": len({a.home_campus for a in assignments}),
        "top_destination": destinations[0] if destinations else None,
    }


def compute_interim(state: ViewState, ctx: Dict[str, Any]) -> Dict[str, Any]:
    assignments: Sequence[InterimAssignment] = ctx.get("interim_assignments", ())
    campuses = interim_by_campus(assignments)

    charts: Dict[str, Any] = {}
    if campuses:
        charts["deployment"] = to_vega_spec(deployment_bar(campuses))

    return {
        "state": asdict(state),
        "kpis": interim_overview(assignments),
        "campuses": [
            {
                "campus": c["campus"],
                "guides": len(c["staff"]),
                "avg_pct_deployed": c["avg_pct_deployed"],
                "expanded": state.expanded_campus == c["campus"],
                "staff": [a.to_dict() for a in c["staff"]],
            }
            for c in campuses
        ],
        "destinations": deployment_counts(assignments),
        "receiving_schools": list(RECEIVING_SCHOOLS),
        "charts": charts,
    }
