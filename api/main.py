from __future__ import annotations

from dataclasses import asdict
import logging
import math
from typing import Any, Callable, Dict

import numpy as np
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.responses import Response
from fastapi.encoders import jsonable_encoder

from api.schemas import (
    ExpandRequest,
    MetaOptionsResponse,
    SelectTabRequest,
    SortRequest,
    StatusFilterRequest,
    ViewStateModel,
)
from headcount.data import load_dashboard_data, prepare_context
from headcount.frames import interim_frame, salary_flags_frame, schools_frame
from headcount.filters import (
    SORT_KEYS,
    STATUS_FILTERS,
    TABS,
    ViewState,
    normalize_view_state,
    select_tab,
    set_sort,
    set_status_filter,
    toggle_expanded,
)
from headcount.metrics_drivers import compute_drivers
from headcount.metrics_interim import compute_interim
from headcount.metrics_overview import compute_overview
from headcount.metrics_salaries import compute_salaries
from headcount.metrics_schools import compute_school_detail
from headcount.models import SCHOOL_TYPES, TUITION_TIERS


app = FastAPI(title="Headcount Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _state_from_model(model: ViewStateModel) -> ViewState:
    return normalize_view_state(model.model_dump())


def _finite(value: object) -> float | None:
    out = float(value)  # type: ignore[arg-type]
    return out if math.isfinite(out) else None


# Payload numbers are Python or numpy scalars; NaN/inf ratios become null.
_ENCODERS = {np.integer: int, np.floating: _finite, float: _finite}


def _json(data: object) -> JSONResponse:
    return JSONResponse(content=jsonable_encoder(data, custom_encoder=_ENCODERS))


def _error(exc: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


def _page(name: str, compute: Callable[[ViewState, Dict[str, Any]], Dict[str, Any]], model: ViewStateModel) -> JSONResponse:
    try:
        state = _state_from_model(model)
        ctx = prepare_context(state, load_dashboard_data())
        return _json(compute(state, ctx))
    except Exception as exc:
        logger.exception("%s failed", name)
        return _error(exc)


def _transition(name: str, apply: Callable[[ViewState], ViewState], model: ViewStateModel) -> JSONResponse:
    try:
        return _json(asdict(apply(_state_from_model(model))))
    except ValueError as exc:
        logger.warning("%s rejected: %s", name, exc)
        return _error(exc, status_code=400)
    except Exception as exc:
        logger.exception("%s failed", name)
        return _error(exc)


@app.get("/meta/options", response_model=MetaOptionsResponse)
def meta_options():
    return MetaOptionsResponse(
        tabs=list(TABS),
        status_filters=list(STATUS_FILTERS),
        sort_keys=list(SORT_KEYS),
        school_types=list(SCHOOL_TYPES),
        tuition_tiers=list(TUITION_TIERS),
    )


@app.get("/meta/info")
def meta_info():
    try:
        data_ctx = load_dashboard_data()
        return _json({"updated": data_ctx.get("updated"), "sources": data_ctx.get("sources", [])})
    except Exception as exc:
        logger.exception("meta_info failed")
        return _error(exc)


@app.post("/overview")
def overview(state: ViewStateModel):
    return _page("overview", compute_overview, state)


@app.post("/drivers")
def drivers(state: ViewStateModel):
    return _page("drivers", compute_drivers, state)


@app.post("/schools")
def schools(state: ViewStateModel):
    return _page("schools", compute_school_detail, state)


@app.post("/salaries")
def salaries(state: ViewStateModel):
    return _page("salaries", compute_salaries, state)


@app.post("/interim")
def interim(state: ViewStateModel):
    return _page("interim", compute_interim, state)


@app.post("/state/tab")
def state_tab(req: SelectTabRequest):
    return _transition("select_tab", lambda s: select_tab(s, req.tab), req.state)


@app.post("/state/status-filter")
def state_status_filter(req: StatusFilterRequest):
    return _transition("set_status_filter", lambda s: set_status_filter(s, req.status_filter), req.state)


@app.post("/state/sort")
def state_sort(req: SortRequest):
    return _transition("set_sort", lambda s: set_sort(s, req.key), req.state)


@app.post("/state/expand")
def state_expand(req: ExpandRequest):
    return _transition("toggle_expanded", lambda s: toggle_expanded(s, req.id, req.kind), req.state)


@app.post("/export/{dataset}")
def export_dataset(dataset: str, state: ViewStateModel):
    ctx = prepare_context(_state_from_model(state), load_dashboard_data())

    if dataset == "schools":
        export_df = schools_frame(ctx["filtered_schools"])
    elif dataset == "interim":
        export_df = interim_frame(ctx["interim_assignments"])
    elif dataset == "salary-flags":
        export_df = salary_flags_frame(ctx["salary_flags"])
    else:
        return JSONResponse(status_code=404, content={"error": f"Unknown dataset: {dataset}", "type": "NotFound"})

    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    filename = f"{dataset}.csv"
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={filename}"})
