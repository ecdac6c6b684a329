"""
Shared fixtures for the headcount dashboard tests.

Usage:
    pytest tests/ -v
"""

import pytest

from headcount import dataset
from headcount.data import build_data_context, prepare_context
from headcount.filters import ViewState
from headcount.models import InterimAssignment, SalaryFlag, School


@pytest.fixture
def make_school():
    """
    Factory for School records with neutral defaults.

    Usage:
        def test_something(make_school):
            s = make_school(name="A", guides_actual=5, guides_model=3, annual_cost=300000)
    """
    def factory(name="Test School", **overrides):
        fields = dict(
            name=name,
            enrolled=10,
            capacity=25,
            guides_actual=2,
            guides_model=2,
            annual_cost=0,
            avg_guide_salary=100000,
            total_guide_cost=200000,
            student_guide_ratio="5:1",
            model_ratio="8:1",
            school_type="Alpha Microschool",
            tuition_tier="$40K",
            driver="At Model",
            tuition=40000,
        )
        fields.update(overrides)
        return School(**fields)
    return factory


@pytest.fixture
def make_flag():
    def factory(school="Test School", actual=100000, benchmark=75000, **overrides):
        fields = dict(
            school=school,
            pricing_model="Low-Cost (Sub-$40K)",
            name="Staff",
            role="Guide",
            actual=actual,
            benchmark=benchmark,
        )
        fields.update(overrides)
        return SalaryFlag(**fields)
    return factory


@pytest.fixture
def make_assignment():
    def factory(guide_name="Guide", home_campus="Campus", deployments=("Elsewhere",), pct=50, role="Guide"):
        return InterimAssignment(guide_name, role, home_campus, tuple(deployments), pct)
    return factory


@pytest.fixture
def schools():
    return dataset.SCHOOLS


@pytest.fixture
def flags():
    return dataset.SALARY_FLAGS


@pytest.fixture
def assignments():
    return dataset.INTERIM_ASSIGNMENTS


@pytest.fixture
def data_ctx():
    return build_data_context(dataset.SCHOOLS, dataset.INTERIM_ASSIGNMENTS, dataset.SALARY_FLAGS)


@pytest.fixture
def ctx_for(data_ctx):
    """
    Build a prepared context for a view state.

    Usage:
        def test_view(ctx_for):
            state, ctx = ctx_for(status_filter="over")
    """
    def factory(**state_fields):
        state = ViewState(**state_fields)
        return state, prepare_context(state, data_ctx)
    return factory


def by_name(schools, name):
    for s in schools:
        if s.name == name:
            return s
    raise KeyError(name)
