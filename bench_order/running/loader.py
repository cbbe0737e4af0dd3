"""
Load benchmark cases and their result statistics from JSON.

Expected layout:

    {
      "cases": [
        {
          "target": {"type": "Bench", "method": "Foo", "index": 0,
                     "baseline": false, "categories": ["fast"]},
          "job": {"id": "Job1", "baseline": true, "order": 0,
                  "characteristics": {"Runtime": "Core"}},
          "parameters": {"Size": 10},
          "statistics": {"mean": 12.5, "stddev": 0.4, "n": 15}
        }
      ]
    }

"parameters" may also be a list of {"name", "value", "display"} objects.
"statistics" is optional per case.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from bench_order.reports.summary import ResultStatistics
from bench_order.running.case import Case, Job, ParameterInstance, ParameterInstances, Target

logger = logging.getLogger(__name__)


def target_from_dict(data: Dict[str, Any]) -> Target:
    return Target(
        type_name=data.get("type", ""),
        method_name=data["method"],
        method_index=int(data.get("index", 0)),
        is_baseline=bool(data.get("baseline", False)),
        categories=tuple(data.get("categories", ())),
    )


def job_from_dict(data: Dict[str, Any]) -> Job:
    characteristics = data.get("characteristics", {})
    if isinstance(characteristics, dict):
        characteristics = characteristics.items()
    return Job(
        id=data.get("id", ""),
        is_baseline=bool(data.get("baseline", False)),
        order=int(data.get("order", 0)),
        characteristics=tuple((name, _hashable(value)) for name, value in characteristics),
    )


def _hashable(value: Any) -> Any:
    # Cases key the statistics lookup, so JSON arrays and objects become tuples
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, dict):
        return tuple(sorted((name, _hashable(item)) for name, item in value.items()))
    return value


def _display(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    return None


def parameters_from_data(data: Union[Dict[str, Any], List[Dict[str, Any]], None]) -> ParameterInstances:
    if not data:
        return ParameterInstances()
    if isinstance(data, dict):
        return ParameterInstances(tuple(
            ParameterInstance(name, _hashable(value), _display(value))
            for name, value in data.items()
        ))
    return ParameterInstances(tuple(
        ParameterInstance(
            item["name"],
            _hashable(item.get("value")),
            item.get("display", _display(item.get("value"))),
        )
        for item in data
    ))


def case_from_dict(data: Dict[str, Any]) -> Case:
    """Build a Case from its JSON representation."""
    return Case(
        target=target_from_dict(data["target"]),
        job=job_from_dict(data.get("job", {})),
        parameters=parameters_from_data(data.get("parameters")),
    )


def statistics_from_dict(data: Dict[str, Any]) -> ResultStatistics:
    return ResultStatistics(
        mean=float(data["mean"]),
        standard_deviation=float(data.get("stddev", 0.0)),
        n=int(data.get("n", 0)),
    )


def cases_from_dict(data: Dict[str, Any]) -> Tuple[List[Case], Dict[Case, ResultStatistics]]:
    """
    Parse a case document.

    Returns:
        Tuple of (cases in input order, statistics by case)

    Raises:
        ValueError: If a case entry is malformed
    """
    cases = []
    statistics = {}
    for index, entry in enumerate(data.get("cases", [])):
        try:
            case = case_from_dict(entry)
            if "statistics" in entry:
                statistics[case] = statistics_from_dict(entry["statistics"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid case at index {index}: {e!r}") from e
        cases.append(case)
    return cases, statistics


def load_cases(path: Union[str, Path]) -> Tuple[List[Case], Dict[Case, ResultStatistics]]:
    """Load cases and statistics from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Cases file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    cases, statistics = cases_from_dict(data)
    logger.info(f"Loaded {len(cases)} cases ({len(statistics)} with statistics) from {path}")
    return cases, statistics
