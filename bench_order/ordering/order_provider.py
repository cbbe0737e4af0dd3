"""
Order provider - execution and summary ordering of benchmark cases.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from bench_order.errors import PreconditionViolation
from bench_order.ordering import grouping
from bench_order.ordering.comparers import CaseComparer
from bench_order.ordering.policies import MethodOrderPolicy, SummaryOrderPolicy, parse_policy
from bench_order.reports.summary import Summary
from bench_order.running.case import Case

logger = logging.getLogger(__name__)


class DefaultOrderProvider:
    """
    Decides run order and report order of benchmark cases.

    Execution order sorts by parameters, job, target and display string.
    Summary order groups cases logically, emits groups in key order and
    orders each group according to the summary order policy:

    - default: execution order
    - fastest_to_slowest: ascending mean
    - slowest_to_fastest: descending mean

    Both policies are fixed at construction.
    """

    def __init__(
        self,
        summary_order_policy=SummaryOrderPolicy.DEFAULT,
        method_order_policy=MethodOrderPolicy.DECLARED,
    ):
        self._summary_order_policy = parse_policy(SummaryOrderPolicy, summary_order_policy)
        self._method_order_policy = parse_policy(MethodOrderPolicy, method_order_policy)
        self._case_comparer = CaseComparer.for_method_order(self._method_order_policy)

    @classmethod
    def from_config(cls, config) -> "DefaultOrderProvider":
        """Create a provider from a BenchOrderConfig."""
        return cls(
            summary_order_policy=config.ordering.summary_order_policy,
            method_order_policy=config.ordering.method_order_policy,
        )

    @property
    def summary_order_policy(self) -> SummaryOrderPolicy:
        return self._summary_order_policy

    @property
    def method_order_policy(self) -> MethodOrderPolicy:
        return self._method_order_policy

    @property
    def separate_logical_groups(self) -> bool:
        """Logical groups are always visually separated in reports."""
        return True

    def get_execution_order(self, cases: Iterable[Case]) -> List[Case]:
        """Return a new list with the cases in run order."""
        if cases is None:
            raise PreconditionViolation("Case collection must not be None")
        return sorted(cases, key=self._case_comparer.sort_key)

    def get_summary_order(self, cases: Iterable[Case], summary: Summary) -> Iterator[Case]:
        """
        Yield cases grouped and ordered for a report.

        Group keys are derived over the whole input collection. The result
        is a one-shot iterator; call again to regenerate it.

        Args:
            cases: Cases to order
            summary: Holds the report config and the result statistics

        Yields:
            Each input case exactly once
        """
        if cases is None:
            raise PreconditionViolation("Case collection must not be None")
        if summary is None:
            raise PreconditionViolation("Summary must not be None")

        groups = grouping.group_cases(summary.config, cases)
        logger.debug(
            f"Summary order: {len(groups)} groups, policy={self._summary_order_policy.value}"
        )
        for _, group in groups:
            yield from self._get_summary_order_for_group(group, summary)

    def _get_summary_order_for_group(self, cases: List[Case], summary: Summary) -> List[Case]:
        if self._summary_order_policy == SummaryOrderPolicy.DEFAULT:
            return self.get_execution_order(cases)

        means = np.array([summary[case].mean for case in cases], dtype=float)
        nan = np.isnan(means)
        values = np.where(nan, 0.0, means)
        # NaN ranks below every number: first when ascending, last when descending
        if self._summary_order_policy == SummaryOrderPolicy.SLOWEST_TO_FASTEST:
            values, nan_rank = -values, nan
        else:
            nan_rank = ~nan
        # Two stable passes, so equal means keep input order
        indices = np.argsort(values, kind="stable")
        indices = indices[np.argsort(nan_rank[indices], kind="stable")]
        return [cases[i] for i in indices]

    def get_highlight_group_key(self, case: Case) -> Optional[str]:
        """Parameter display string under the default policy, else None."""
        if self._summary_order_policy == SummaryOrderPolicy.DEFAULT:
            return case.parameters.display_info
        return None

    def get_logical_group_key(self, config: Any, all_cases: Sequence[Case], case: Case) -> str:
        return grouping.get_logical_group_key(config, all_cases, case)

    def get_logical_group_order(self, keys: Iterable[str]) -> List[str]:
        return grouping.get_logical_group_order(keys)


DEFAULT_ORDER_PROVIDER = DefaultOrderProvider()
