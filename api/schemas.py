from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Tab = Literal["overview", "drivers", "schools", "salaries", "interim"]
StatusFilter = Literal["all", "over", "at", "under"]
SortKey = Literal["name", "enrolled", "guides_actual", "variance", "annual_cost"]
ExpandKind = Literal["driver", "campus"]


class ViewStateModel(BaseModel):
    active_tab: Tab = "overview"
    status_filter: StatusFilter = "all"
    sort_key: SortKey = "variance"
    sort_ascending: bool = False
    expanded_driver: Optional[str] = None
    expanded_campus: Optional[str] = None


class SelectTabRequest(BaseModel):
    state: ViewStateModel = Field(default_factory=ViewStateModel)
    tab: Tab


class StatusFilterRequest(BaseModel):
    state: ViewStateModel = Field(default_factory=ViewStateModel)
    status_filter: StatusFilter


class SortRequest(BaseModel):
    state: ViewStateModel = Field(default_factory=ViewStateModel)
    key: SortKey


class ExpandRequest(BaseModel):
    state: ViewStateModel = Field(default_factory=ViewStateModel)
    id: str
    kind: ExpandKind


class MetaOptionsResponse(BaseModel):
    tabs: List[str]
    status_filters: List[str]
    sort_keys: List[str]
    school_types: List[str]
    tuition_tiers: List[str]
