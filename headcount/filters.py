from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Optional, Tuple

Tab = Literal["overview", "drivers", "schools", "salaries", "interim"]
StatusFilter = Literal["all", "over", "at", "under"]
SortKey = Literal["name", "enrolled", "guides_actual", "variance", "annual_cost"]
ExpandKind = Literal["driver", "campus"]

TABS: Tuple[str, ...] = ("overview", "drivers", "schools", "salaries", "interim")
TAB_LABELS = {
    "overview": "Executive Overview",
    "drivers": "Driver Analysis",
    "schools": "School Detail",
    "salaries": "Salary vs Model",
    "interim": "Interim Assignments",
}
STATUS_FILTERS: Tuple[str, ...] = ("all", "over", "at", "under")
SORT_KEYS: Tuple[str, ...] = ("name", "enrolled", "guides_actual", "variance", "annual_cost")
EXPAND_KINDS: Tuple[str, ...] = ("driver", "campus")


@dataclass(frozen=True)
class DisplaySettings:
    top_over_model_schools: int = 8
    default_tab: str = "overview"
    default_sort_key: str = "variance"
    default_sort_ascending: bool = False


DISPLAY = DisplaySettings()


@dataclass(frozen=True)
class ViewState:
    active_tab: str = DISPLAY.default_tab
    status_filter: str = "all"
    sort_key: str = DISPLAY.default_sort_key
    sort_ascending: bool = DISPLAY.default_sort_ascending
    expanded_driver: Optional[str] = None
    expanded_campus: Optional[str] = None


def _check(value: str, allowed: Tuple[str, ...], what: str) -> str:
    if value not in allowed:
        raise ValueError(f"Unknown {what}: {value!r} (expected one of {', '.join(allowed)})")
    return value


def select_tab(state: ViewState, tab: str) -> ViewState:
    return replace(state, active_tab=_check(tab, TABS, "tab"))


def set_status_filter(state: ViewState, status_filter: str) -> ViewState:
    """Replace the status filter; sort and expansion are left alone."""
    return replace(state, status_filter=_check(status_filter, STATUS_FILTERS, "status filter"))


def set_sort(state: ViewState, key: str) -> ViewState:
    """Same key flips direction; a new key starts descending."""
    _check(key, SORT_KEYS, "sort key")
    if key == state.sort_key:
        return replace(state, sort_ascending=not state.sort_ascending)
    return replace(state, sort_key=key, sort_ascending=False)


def toggle_expanded(state: ViewState, item_id: str, kind: str) -> ViewState:
    """Open ``item_id`` for ``kind`` (closing any other), or close it if already open."""
    _check(kind, EXPAND_KINDS, "expand kind")
    field_name = f"expanded_{kind}"
    current = getattr(state, field_name)
    return replace(state, **{field_name: None if current == item_id else item_id})


def _pick(value: object, allowed: Tuple[str, ...], default: str) -> str:
    s = str(value).strip() if value is not None else ""
    return s if s in allowed else default


def _opt_str(value: object) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def normalize_view_state(raw: Optional[dict]) -> ViewState:
    raw = raw or {}

    active_tab = _pick(raw.get("active_tab"), TABS, DISPLAY.default_tab)
    status_filter = _pick(raw.get("status_filter"), STATUS_FILTERS, "all")
    sort_key = _pick(raw.get("sort_key"), SORT_KEYS, DISPLAY.default_sort_key)

    sort_ascending = raw.get("sort_ascending", DISPLAY.default_sort_ascending)
    if isinstance(sort_ascending, str):
        sort_ascending = sort_ascending.strip().lower() in {"1", "true", "yes", "asc"}
    sort_ascending = bool(sort_ascending)

    return ViewState(
        active_tab=active_tab,
        status_filter=status_filter,
        sort_key=sort_key,
        sort_ascending=sort_ascending,
        expanded_driver=_opt_str(raw.get("expanded_driver")),
        expanded_campus=_opt_str(raw.get("expanded_campus")),
    )
