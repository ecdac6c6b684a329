from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Tuple

SchoolType = Literal["Alpha", "Alpha Microschool", "Non-Alpha", "Montessorium"]
TuitionTier = Literal["$40K", "$50K+", "Sub-$40K"]
DriverCategory = Literal[
    "Training Hub",
    "Non-Standard Ratio",
    "Pre-Launch",
    "Temporary",
    "Timing",
    "Underhiring",
    "At Model",
    "Staffing Gap",
]
ModelStatus = Literal["over", "at", "under"]
FlagStatus = Literal["over", "under", "ok", "no-benchmark"]

# Display order for grouping.
SCHOOL_TYPES: Tuple[str, ...] = ("Alpha", "Alpha Microschool", "Non-Alpha", "Montessorium")
# Declaration order; tier summaries keep it.
TUITION_TIERS: Tuple[str, ...] = ("$40K", "$50K+", "Sub-$40K")
MODEL_STATUSES: Tuple[str, ...] = ("over", "at", "under")


def status_for_variance(variance: int) -> str:
    if variance > 0:
        return "over"
    if variance < 0:
        return "under"
    return "at"


@dataclass(frozen=True)
class School:
    """One physical campus.

    ``variance`` and ``status`` are derived from the guide counts and cannot be
    set. ``annual_cost`` is the estimated annualized cost of the variance
    (negative = savings). ``enrolled`` and ``confirmed_enrollments`` come from
    different source sheets and are kept side by side.
    """

    name: str
    enrolled: int
    capacity: int
    guides_actual: int
    guides_model: int
    annual_cost: int
    avg_guide_salary: int
    total_guide_cost: int
    student_guide_ratio: str
    model_ratio: str
    school_type: SchoolType
    tuition_tier: TuitionTier
    driver: DriverCategory
    notes: str = ""
    confirmed_enrollments: int = 0
    state: str = ""
    city: str = ""
    grades: str = ""
    head_of_school: str = ""
    opened: str = ""
    location_type: str = ""
    pricing_model: str = ""
    tuition: int = 0

    @property
    def variance(self) -> int:
        return self.guides_actual - self.guides_model

    @property
    def status(self) -> str:
        return status_for_variance(self.variance)

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["variance"] = self.variance
        out["status"] = self.status
        return out


@dataclass(frozen=True)
class InterimAssignment:
    guide_name: str
    role: str
    home_campus: str
    deployments: Tuple[str, ...]
    pct_deployed_elsewhere: int

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["deployments"] = list(self.deployments)
        return out


@dataclass(frozen=True)
class SalaryFlag:
    """A staff member paid above the approved benchmark for their role."""

    school: str
    pricing_model: str
    name: str
    role: str
    actual: int
    benchmark: int
    flag: FlagStatus = "over"

    @property
    def delta(self) -> int:
        return self.actual - self.benchmark

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["delta"] = self.delta
        return out
