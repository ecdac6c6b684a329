from __future__ import annotations

from typing import Iterable

import pandas as pd

from headcount.models import InterimAssignment, SalaryFlag, School

SCHOOL_COLUMNS = [
    "name",
    "school_type",
    "status",
    "enrolled",
    "confirmed_enrollments",
    "capacity",
    "guides_actual",
    "guides_model",
    "variance",
    "annual_cost",
    "avg_guide_salary",
    "total_guide_cost",
    "student_guide_ratio",
    "model_ratio",
    "tuition_tier",
    "tuition",
    "pricing_model",
    "driver",
    "city",
    "state",
    "grades",
    "head_of_school",
    "opened",
    "location_type",
    "notes",
]
INTERIM_COLUMNS = ["guide_name", "role", "home_campus", "deployments", "pct_deployed_elsewhere"]
SALARY_FLAG_COLUMNS = ["school", "pricing_model", "name", "role", "actual", "benchmark", "delta", "flag"]


def schools_frame(schools: Iterable[School]) -> pd.DataFrame:
    """One row per school, derived ``variance``/``status`` included."""
    return pd.DataFrame([s.to_dict() for s in schools], columns=SCHOOL_COLUMNS)


def interim_frame(assignments: Iterable[InterimAssignment]) -> pd.DataFrame:
    df = pd.DataFrame([a.to_dict() for a in assignments], columns=INTERIM_COLUMNS)
    df["deployments"] = df["deployments"].apply(lambda d: ", ".join(d) if isinstance(d, list) else "")
    return df


def salary_flags_frame(flags: Iterable[SalaryFlag]) -> pd.DataFrame:
    return pd.DataFrame([f.to_dict() for f in flags], columns=SALARY_FLAG_COLUMNS)
