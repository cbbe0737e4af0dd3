"""Tests for case descriptors and their display strings."""

import pytest

from bench_order.running.case import (
    DEFAULT_JOB_ID,
    Case,
    Job,
    ParameterInstance,
    ParameterInstances,
    Target,
)


class TestDisplayInfo:
    """Display strings are derived deterministically from the descriptors."""

    def test_target_display_includes_type(self):
        assert Target("Bench", "Foo").display_info == "Bench.Foo"

    def test_target_display_without_type(self):
        assert Target("", "Foo").display_info == "Foo"

    def test_job_display_prefers_id(self):
        job = Job(id="Job1", characteristics=(("Runtime", "Core"),))
        assert job.display_info == "Job1"

    def test_job_display_falls_back_to_characteristics(self):
        job = Job(characteristics=(("Runtime", "Core"), ("Platform", "X64")))
        assert job.display_info == "Runtime=Core, Platform=X64"

    def test_job_display_default(self):
        assert Job().display_info == DEFAULT_JOB_ID

    def test_parameters_display(self):
        params = ParameterInstances((
            ParameterInstance("A", 1),
            ParameterInstance("B", None),
            ParameterInstance("C", [1, 2], display="Array[2]"),
        ))
        assert params.display_info == "A=1, B=null, C=Array[2]"

    def test_empty_parameters_display(self):
        assert ParameterInstances().display_info == ""

    def test_case_display_with_params(self):
        case = Case(Target("Bench", "Foo"), Job(id="Job1"), ParameterInstances.from_values(N=10))
        assert case.display_info == "Bench.Foo: Job1 [N=10]"

    def test_case_display_without_params(self):
        case = Case(Target("Bench", "Foo"), Job(id="Job1"))
        assert case.display_info == "Bench.Foo: Job1"


class TestParameterInstances:
    """Parameter sets behave as small ordered collections."""

    def test_lookup_by_name(self):
        params = ParameterInstances.from_values(N=10, Mode="fast")
        assert params["N"] == 10
        assert params["Mode"] == "fast"
        assert len(params) == 2
        assert [item.name for item in params] == ["N", "Mode"]

    def test_missing_name_raises(self):
        with pytest.raises(KeyError):
            ParameterInstances.from_values(N=10)["M"]


def test_cases_are_hashable_and_compare_by_value(make_case):
    a = make_case(method="Foo", N=1)
    b = make_case(method="Foo", N=1)
    assert a == b
    assert len({a, b}) == 1
