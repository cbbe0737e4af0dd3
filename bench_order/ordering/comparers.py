"""
Comparers used to order benchmark cases.

Every comparer is a callable taking two values and returning a negative,
zero or positive int. Cases are compared by parameters first, then job,
then target, and finally by ordinal comparison of their display strings.
"""

from functools import cmp_to_key
from typing import Any, Callable, List, Optional

from bench_order.errors import PreconditionViolation
from bench_order.ordering.policies import MethodOrderPolicy, parse_policy
from bench_order.running.case import Case, Job, ParameterInstances, Target

Comparer = Callable[[Any, Any], int]


def compare_values(x: Any, y: Any) -> int:
    """Three-way comparison of two values of the same type."""
    return (x > y) - (x < y)


def compare_ordinal(x: str, y: str) -> int:
    """Ordinal (code point) string comparison, independent of locale."""
    return compare_values(x, y)


class ParameterComparer:
    """Orders parameter sets by their rendered display string."""

    def __call__(self, x: ParameterInstances, y: ParameterInstances) -> int:
        return compare_ordinal(x.display_info, y.display_info)


class JobComparer:
    """Orders jobs by declared position, then by their other dimensions."""

    @staticmethod
    def sort_key(job: Job) -> tuple:
        # Values are rendered so that mixed value types stay comparable
        return (job.order, job.characteristics_info, job.display_info)

    def __call__(self, x: Job, y: Job) -> int:
        return compare_values(self.sort_key(x), self.sort_key(y))


class TargetComparer:
    """Orders targets by declaration position or by method name."""

    def __init__(self, method_order_policy=MethodOrderPolicy.DECLARED):
        self.method_order_policy = parse_policy(MethodOrderPolicy, method_order_policy)

    def __call__(self, x: Target, y: Target) -> int:
        if self.method_order_policy == MethodOrderPolicy.ALPHABETICAL:
            return compare_ordinal(x.method_name, y.method_name)
        return compare_values(x.method_index, y.method_index)


PARAMETER_COMPARER = ParameterComparer()
JOB_COMPARER = JobComparer()


def _always_equal(x: Case, y: Case) -> int:
    return 0


def _dimension_step(comparer: Optional[Comparer], dimension: str) -> Callable[[Case, Case], int]:
    """Lift a comparer over one case attribute into a case comparison step."""
    if comparer is None:
        return _always_equal
    if not callable(comparer):
        raise PreconditionViolation(
            f"Comparer for '{dimension}' must be callable, got {type(comparer).__name__}"
        )

    def step(x: Case, y: Case) -> int:
        return comparer(getattr(x, dimension), getattr(y, dimension))

    return step


def _display_step(x: Case, y: Case) -> int:
    return compare_ordinal(x.display_info, y.display_info)


class CaseComparer:
    """
    Total order over cases.

    Steps are evaluated in order and the first non-zero result wins:
    1. parameters
    2. job
    3. target
    4. ordinal comparison of Case.display_info

    A comparer given as None contributes no ordering (its step always
    reports equal).
    """

    def __init__(
        self,
        params_comparer: Optional[Comparer],
        job_comparer: Optional[Comparer],
        target_comparer: Optional[Comparer],
    ):
        self._steps: List[Callable[[Case, Case], int]] = [
            _dimension_step(params_comparer, "parameters"),
            _dimension_step(job_comparer, "job"),
            _dimension_step(target_comparer, "target"),
            _display_step,
        ]
        self.sort_key = cmp_to_key(self.compare)

    @classmethod
    def for_method_order(cls, method_order_policy=MethodOrderPolicy.DECLARED) -> "CaseComparer":
        """Build the standard comparer for a method ordering policy."""
        return cls(PARAMETER_COMPARER, JOB_COMPARER, TargetComparer(method_order_policy))

    def compare(self, x: Case, y: Case) -> int:
        for step in self._steps:
            result = step(x, y)
            if result != 0:
                return result
        return 0

    __call__ = compare
