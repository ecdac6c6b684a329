from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from headcount.charts import tier_cost_bar, to_vega_spec
from headcount.filters import ViewState
from headcount.frames import salary_flags_frame, schools_frame
from headcount.models import TUITION_TIERS, SalaryFlag, School


@dataclass(frozen=True)
class TuitionTierSummary:
    tier: str
    schools: int
    enrolled: int
    guides: int
    model_guides: int
    ratio: float
    total_guide_cost: int
    avg_salary: float
    revenue: int
    guide_cost_per_student: float
    guide_pct_revenue: float
    model_cost: int
    excess_cost: int


@dataclass(frozen=True)
class SchoolSalarySummary:
    school: str
    model: str
    count: int
    total_delta: int
    flags: List[SalaryFlag]


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def compute_tuition_tier_summaries(schools: Sequence[School]) -> List[TuitionTierSummary]:
    """Guide cost burden per tuition tier, in tier declaration order.

    Schools with neither guides nor students are left out entirely.
    Revenue is summed per school (enrolled x tuition), not from tier averages.
    """
    df = schools_frame(schools)
    active = df[(df["guides_actual"] > 0) | (df["enrolled"] > 0)].copy()
    if active.empty:
        return []

    active["revenue"] = active["enrolled"] * active["tuition"]
    active["model_cost"] = active["guides_model"] * active["avg_guide_salary"]
    tiers = (
        active.groupby("tuition_tier")
        .agg(
            schools=("name", "count"),
            enrolled=("enrolled", "sum"),
            guides=("guides_actual", "sum"),
            model_guides=("guides_model", "sum"),
            total_guide_cost=("total_guide_cost", "sum"),
            revenue=("revenue", "sum"),
            model_cost=("model_cost", "sum"),
        )
        .reindex(list(TUITION_TIERS))
        .dropna()
        .rename_axis("tier")
        .reset_index()
    )

    out: List[TuitionTierSummary] = []
    for r in tiers.to_dict(orient="records"):
        enrolled = int(r["enrolled"])
        guides = int(r["guides"])
        total_guide_cost = int(r["total_guide_cost"])
        revenue = int(r["revenue"])
        model_cost = int(r["model_cost"])
        out.append(
            TuitionTierSummary(
                tier=r["tier"],
                schools=int(r["schools"]),
                enrolled=enrolled,
                guides=guides,
                model_guides=int(r["model_guides"]),
                ratio=_ratio(enrolled, guides),
                total_guide_cost=total_guide_cost,
                avg_salary=_ratio(total_guide_cost, guides),
                revenue=revenue,
                guide_cost_per_student=_ratio(total_guide_cost, enrolled),
                guide_pct_revenue=_ratio(total_guide_cost, revenue) * 100,
                model_cost=model_cost,
                excess_cost=total_guide_cost - model_cost,
            )
        )
    return out


def compute_salary_summary_by_school(flags: Sequence[SalaryFlag]) -> List[SchoolSalarySummary]:
    """Salary flags grouped by school, largest total overage first.

    ``model`` is the pricing model of the first flag seen for the school.
    Flags of any status count; under-benchmark flags pull the total down.
    """
    if not flags:
        return []

    by_school = (
        salary_flags_frame(flags)
        .groupby("school", sort=False)
        .agg(model=("pricing_model", "first"), count=("name", "count"), total_delta=("delta", "sum"))
        .reset_index()
        .sort_values("total_delta", ascending=False, kind="stable")
    )
    return [
        SchoolSalarySummary(
            school=r["school"],
            model=r["model"],
            count=int(r["count"]),
            total_delta=int(r["total_delta"]),
            flags=[f for f in flags if f.school == r["school"]],
        )
        for r in by_school.to_dict(orient="records")
    ]


def salary_overview(flags: Sequence[SalaryFlag], schools: Sequence[School]) -> Dict[str, Any]:
    total_delta = sum(f.delta for f in flags)
    return {
        "flagged_staff": len(flags),
        "total_delta": total_delta,
        "schools_affected": len({f.school for f in flags}),
        "schools_with_staff": sum(1 for s in schools if s.guides_actual > 0),
        "avg_overage": total_delta / max(len(flags), 1),
    }


def compute_salaries(state: ViewState, ctx: Dict[str, Any]) -> Dict[str, Any]:
    schools: Sequence[School] = ctx.get("schools", ())
    flags: Sequence[SalaryFlag] = ctx.get("salary_flags", ())
    tiers: List[TuitionTierSummary] = ctx.get("tuition_tiers") or compute_tuition_tier_summaries(schools)
    by_school: List[SchoolSalarySummary] = ctx.get("salary_by_school") or compute_salary_summary_by_school(flags)

    tier_rows = [asdict(t) for t in tiers]
    charts: Dict[str, Any] = {}
    if tier_rows:
        charts["tier_cost"] = to_vega_spec(tier_cost_bar(tier_rows))

    return {
        "state": asdict(state),
        "kpis": salary_overview(flags, schools),
        "tuition_tiers": tier_rows,
        "schools": [
            {
                "school": s.school,
                "model": s.model,
                "count": s.count,
                "total_delta": s.total_delta,
                # display order only
                "flags": [f.to_dict() for f in sorted(s.flags, key=lambda f: f.delta, reverse=True)],
            }
            for s in by_school
        ],
        "charts": charts,
    }
