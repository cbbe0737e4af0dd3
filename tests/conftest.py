import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for `import bench_order.*`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bench_order.config import BenchOrderConfig, GroupingSettings
from bench_order.reports.summary import ResultStatistics
from bench_order.running.case import Case, Job, ParameterInstances, Target


def _make_case(
    method="Foo",
    index=0,
    job="Job1",
    job_order=0,
    job_baseline=False,
    target_baseline=False,
    categories=(),
    type_name="Bench",
    **params,
):
    return Case(
        target=Target(type_name, method, index, target_baseline, tuple(categories)),
        job=Job(id=job, is_baseline=job_baseline, order=job_order),
        parameters=ParameterInstances.from_values(**params),
    )


@pytest.fixture
def make_case():
    """Factory building a Case from a few keyword arguments."""
    return _make_case


@pytest.fixture
def make_config():
    """Factory building a config with explicit logical group rules."""
    def factory(*rules):
        return BenchOrderConfig(grouping=GroupingSettings(logical_group_rules=list(rules)))
    return factory


@pytest.fixture
def baseline_matrix():
    """
    3 methods x 2 jobs x 2 params with Job1 marked as baseline.

    Methods are declared in the order Base, Bar, Foo.
    """
    cases = []
    for index, method in enumerate(["Base", "Bar", "Foo"]):
        for job_order, job in enumerate(["Job1", "Job2"]):
            for param in (1, 2):
                cases.append(_make_case(
                    method=method,
                    index=index,
                    job=job,
                    job_order=job_order,
                    job_baseline=(job == "Job1"),
                    Param=param,
                ))
    return cases


@pytest.fixture
def matrix_statistics(baseline_matrix):
    """Means chosen so that Job2 is faster than Job1 for every method."""
    statistics = {}
    for case in baseline_matrix:
        mean = 100.0 if case.job.id == "Job1" else 10.0
        mean += case.target.method_index + case.parameters["Param"]
        statistics[case] = ResultStatistics(mean=mean, standard_deviation=1.0, n=10)
    return statistics
