from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, Dict, List, Sequence, Union

from headcount.filters import ViewState
from headcount.models import MODEL_STATUSES, SCHOOL_TYPES, School

SortValue = Union[str, int]

SORT_ACCESSORS: Dict[str, Callable[[School], SortValue]] = {
    "name": lambda s: s.name,
    "enrolled": lambda s: s.enrolled,
    "guides_actual": lambda s: s.guides_actual,
    "variance": lambda s: s.variance,
    "annual_cost": lambda s: s.annual_cost,
}

STATUS_LABELS = {"over": "Over Model", "at": "At Model", "under": "Under Model"}


def apply_status_filter(schools: Sequence[School], status_filter: str) -> List[School]:
    if status_filter == "all":
        return list(schools)
    return [s for s in schools if s.status == status_filter]


def filtered_schools(schools: Sequence[School], state: ViewState) -> List[School]:
    """Status-filtered copy of ``schools`` sorted by ``state.sort_key``.

    Python's sort is stable in both directions, so rows with equal keys keep
    their dataset order.
    """
    accessor = SORT_ACCESSORS[state.sort_key]
    return sorted(
        apply_status_filter(schools, state.status_filter),
        key=accessor,
        reverse=not state.sort_ascending,
    )


def group_by_status(schools: Sequence[School]) -> Dict[str, List[School]]:
    return {status: [s for s in schools if s.status == status] for status in MODEL_STATUSES}


def group_by_type(schools: Sequence[School]) -> List[Dict[str, Any]]:
    groups = []
    for school_type in SCHOOL_TYPES:
        members = [s for s in schools if s.school_type == school_type]
        if members:
            groups.append({"type": school_type, "schools": members})
    return groups


def subtotal(schools: Sequence[School]) -> Dict[str, int]:
    return {
        "schools": len(schools),
        "enrolled": sum(s.enrolled for s in schools),
        "guides_actual": sum(s.guides_actual for s in schools),
        "guides_model": sum(s.guides_model for s in schools),
        "variance": sum(s.variance for s in schools),
        "annual_cost": sum(s.annual_cost for s in schools if s.annual_cost > 0),
    }


def compute_school_detail(state: ViewState, ctx: Dict[str, Any]) -> Dict[str, Any]:
    schools: Sequence[School] = ctx.get("schools", ())
    rows: List[School] = ctx.get("filtered_schools") or filtered_schools(schools, state)

    sections = []
    for status, members in group_by_status(rows).items():
        if not members:
            continue
        sections.append(
            {
                "status": status,
                "label": STATUS_LABELS[status],
                "groups": [
                    {
                        "type": g["type"],
                        "schools": [s.to_dict() for s in g["schools"]],
                        "subtotal": subtotal(g["schools"]),
                    }
                    for g in group_by_type(members)
                ],
                "subtotal": subtotal(members),
            }
        )

    return {
        "state": asdict(state),
        "sort": {"key": state.sort_key, "ascending": state.sort_ascending},
        "sections": sections,
        "total": subtotal(rows),
    }
