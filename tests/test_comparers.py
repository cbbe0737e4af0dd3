"""Tests for the key comparers and the composite case comparer."""

import random

import pytest

from bench_order.errors import PreconditionViolation
from bench_order.ordering.comparers import (
    CaseComparer,
    JobComparer,
    ParameterComparer,
    TargetComparer,
    compare_ordinal,
)
from bench_order.ordering.policies import MethodOrderPolicy
from bench_order.running.case import Job, ParameterInstances, Target


def sign(value):
    return (value > 0) - (value < 0)


class TestKeyComparers:
    """Each key comparer orders a single dimension."""

    def test_ordinal_is_case_sensitive(self):
        # Upper case sorts before lower case in code point order
        assert compare_ordinal("Zeta", "alpha") < 0
        assert compare_ordinal("a", "a") == 0

    def test_parameters_compare_by_display_string(self):
        comparer = ParameterComparer()
        ten = ParameterInstances.from_values(N=10)
        two = ParameterInstances.from_values(N=2)
        # Lexicographic, not numeric
        assert comparer(ten, two) < 0
        assert comparer(two, ten) > 0
        assert comparer(two, ParameterInstances.from_values(N=2)) == 0

    def test_jobs_compare_by_declared_order_first(self):
        comparer = JobComparer()
        first = Job(id="Zulu", order=0)
        second = Job(id="Alpha", order=1)
        assert comparer(first, second) < 0

    def test_jobs_with_same_order_compare_by_dimensions(self):
        comparer = JobComparer()
        a = Job(order=0, characteristics=(("Runtime", "Clr"),))
        b = Job(order=0, characteristics=(("Runtime", "Core"),))
        assert comparer(a, b) < 0

    def test_jobs_with_mixed_value_types_do_not_raise(self):
        comparer = JobComparer()
        a = Job(order=0, characteristics=(("Launches", 3),))
        b = Job(order=0, characteristics=(("Launches", "auto"),))
        assert sign(comparer(a, b)) == -sign(comparer(b, a))

    def test_targets_declared_order(self):
        comparer = TargetComparer(MethodOrderPolicy.DECLARED)
        zeta = Target("Bench", "Zeta", method_index=0)
        alpha = Target("Bench", "Alpha", method_index=1)
        assert comparer(zeta, alpha) < 0

    def test_targets_alphabetical_order(self):
        comparer = TargetComparer("Alphabetical")
        zeta = Target("Bench", "Zeta", method_index=0)
        alpha = Target("Bench", "Alpha", method_index=1)
        assert comparer(zeta, alpha) > 0

    def test_unknown_method_policy_raises(self):
        with pytest.raises(ValueError):
            TargetComparer("random")


class TestCaseComparer:
    """The composite comparer applies params, job, target, then display string."""

    def test_parameters_take_precedence_over_job_and_target(self, make_case):
        comparer = CaseComparer.for_method_order()
        a = make_case(method="Foo", index=9, job="Job2", job_order=1, N=1)
        b = make_case(method="Bar", index=0, job="Job1", job_order=0, N=2)
        assert comparer(a, b) < 0

    def test_job_takes_precedence_over_target(self, make_case):
        comparer = CaseComparer.for_method_order()
        a = make_case(method="Foo", index=9, job="Job1", job_order=0)
        b = make_case(method="Bar", index=0, job="Job2", job_order=1)
        assert comparer(a, b) < 0

    def test_target_decides_when_params_and_job_equal(self, make_case):
        comparer = CaseComparer.for_method_order(MethodOrderPolicy.ALPHABETICAL)
        a = make_case(method="Bar", index=5)
        b = make_case(method="Foo", index=0)
        assert comparer(a, b) < 0

    def test_display_string_breaks_remaining_ties(self, make_case):
        comparer = CaseComparer.for_method_order()
        # Same index, different type name: only the display string differs
        a = make_case(method="Foo", type_name="Alpha")
        b = make_case(method="Foo", type_name="Beta")
        assert comparer(a, b) < 0
        assert comparer(b, a) > 0

    def test_identical_cases_are_equal(self, make_case):
        comparer = CaseComparer.for_method_order()
        assert comparer(make_case(N=1), make_case(N=1)) == 0

    def test_none_comparers_contribute_nothing(self, make_case):
        comparer = CaseComparer(None, None, None)
        a = make_case(method="Bar", job="Job2", job_order=1, N=2)
        b = make_case(method="Foo", job="Job1", job_order=0, N=1)
        # Falls straight through to the display string
        assert comparer(a, b) == compare_ordinal(a.display_info, b.display_info)

    def test_non_callable_comparer_is_rejected(self):
        with pytest.raises(PreconditionViolation):
            CaseComparer(ParameterComparer(), "job", TargetComparer())

    def test_order_is_antisymmetric_and_sorting_is_idempotent(self, baseline_matrix):
        comparer = CaseComparer.for_method_order()
        for a in baseline_matrix:
            for b in baseline_matrix:
                assert sign(comparer(a, b)) == -sign(comparer(b, a))

        shuffled = list(baseline_matrix)
        random.Random(7).shuffle(shuffled)
        once = sorted(shuffled, key=comparer.sort_key)
        twice = sorted(once, key=comparer.sort_key)
        assert once == twice
        assert sorted(reversed(once), key=comparer.sort_key) == once
