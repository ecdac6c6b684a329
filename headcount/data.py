from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Sequence

from headcount import dataset
from headcount.filters import ViewState, normalize_view_state
from headcount.metrics_drivers import compute_driver_summaries, filter_driver_summaries
from headcount.metrics_overview import compute_portfolio_metrics
from headcount.metrics_salaries import compute_salary_summary_by_school, compute_tuition_tier_summaries
from headcount.metrics_schools import apply_status_filter, filtered_schools
from headcount.models import InterimAssignment, SalaryFlag, School

logger = logging.getLogger(__name__)


# ---------------- Public API (Streamlit + FastAPI use) ----------------
def build_data_context(
    schools: Sequence[School],
    interim_assignments: Sequence[InterimAssignment] = (),
    salary_flags: Sequence[SalaryFlag] = (),
) -> Dict[str, object]:
    """Entity store plus the unfiltered summaries, computed once."""
    return {
        "schools": tuple(schools),
        "interim_assignments": tuple(interim_assignments),
        "salary_flags": tuple(salary_flags),
        "portfolio": compute_portfolio_metrics(schools),
        "drivers": compute_driver_summaries(schools),
        "tuition_tiers": compute_tuition_tier_summaries(schools),
        "salary_by_school": compute_salary_summary_by_school(salary_flags),
        "updated": dataset.DATA_UPDATED,
        "sources": list(dataset.DATA_SOURCES),
    }


@lru_cache(maxsize=1)
def load_dashboard_data() -> Dict[str, object]:
    data_ctx = build_data_context(dataset.SCHOOLS, dataset.INTERIM_ASSIGNMENTS, dataset.SALARY_FLAGS)
    logger.info(
        "Loaded headcount data: %d schools, %d interim assignments, %d salary flags",
        len(dataset.SCHOOLS),
        len(dataset.INTERIM_ASSIGNMENTS),
        len(dataset.SALARY_FLAGS),
    )
    return data_ctx


def prepare_context(state: dict | ViewState, data_ctx: Dict[str, object]) -> Dict[str, object]:
    """Apply the view state to the loaded data."""
    st = state if isinstance(state, ViewState) else normalize_view_state(state)
    schools: Sequence[School] = data_ctx.get("schools", ())

    ctx = dict(data_ctx)
    ctx["state"] = st
    ctx["status_schools"] = apply_status_filter(schools, st.status_filter)
    ctx["filtered_schools"] = filtered_schools(schools, st)
    ctx["filtered_drivers"] = filter_driver_summaries(schools, data_ctx.get("drivers", []), st.status_filter)
    logger.debug(
        "Prepared context: filter=%s sort=%s asc=%s rows=%d",
        st.status_filter,
        st.sort_key,
        st.sort_ascending,
        len(ctx["filtered_schools"]),
    )
    return ctx
