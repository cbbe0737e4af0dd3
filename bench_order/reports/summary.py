"""
Result statistics consumed by summary ordering.

Statistics are computed elsewhere; this module only carries them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping

from bench_order.errors import MissingStatisticsError, PreconditionViolation
from bench_order.running.case import Case


@dataclass(frozen=True)
class ResultStatistics:
    """Aggregated measurements of one case."""
    mean: float
    standard_deviation: float = 0.0
    n: int = 0

    def to_dict(self) -> dict:
        return {
            "mean": self.mean,
            "stddev": self.standard_deviation,
            "n": self.n,
        }


@dataclass
class Summary:
    """
    The outcome of a benchmark run as seen by the ordering core.

    Args:
        config: Object exposing get_logical_group_rules()
        statistics: Mapping of case to its result statistics
    """
    config: Any
    statistics: Mapping[Case, ResultStatistics] = field(default_factory=dict)

    def __post_init__(self):
        if self.config is None:
            raise PreconditionViolation("Summary requires a config")
        self.statistics = dict(self.statistics)

    def __getitem__(self, case: Case) -> ResultStatistics:
        try:
            return self.statistics[case]
        except KeyError:
            raise MissingStatisticsError(case) from None

    def __contains__(self, case: object) -> bool:
        return case in self.statistics

    def __iter__(self) -> Iterator[Case]:
        return iter(self.statistics)

    def __len__(self) -> int:
        return len(self.statistics)

    def to_dict(self) -> Dict[str, Any]:
        return {case.display_info: stats.to_dict() for case, stats in self.statistics.items()}
