"""
Logical grouping of benchmark cases for reports.

A case's group key is built from the grouping rules that are active for a
report. The active rules are the configured ones plus rules inferred from
baselines found anywhere in the full case collection:

- a baseline job adds ByMethod and ByParams
- a baseline target adds ByJob and ByParams

Groups are ordered by ordinal comparison of their keys.
"""

import logging
from typing import AbstractSet, Any, Dict, FrozenSet, Iterable, List, Sequence, Tuple

from bench_order.errors import PreconditionViolation
from bench_order.ordering.policies import LOGICAL_GROUP_RULE_ORDER, LogicalGroupRule, parse_policy
from bench_order.running.case import Case

logger = logging.getLogger(__name__)

GROUP_KEY_SEPARATOR = "-"
CATEGORY_SEPARATOR = ","
UNGROUPED_KEY = "*"

JOB_BASELINE_RULES = frozenset({LogicalGroupRule.BY_METHOD, LogicalGroupRule.BY_PARAMS})
TARGET_BASELINE_RULES = frozenset({LogicalGroupRule.BY_JOB, LogicalGroupRule.BY_PARAMS})


def _require_cases(cases: Any) -> List[Case]:
    if cases is None:
        raise PreconditionViolation("Case collection must not be None")
    return list(cases)


def _configured_rules(config: Any) -> FrozenSet[LogicalGroupRule]:
    if config is None:
        raise PreconditionViolation("A config exposing get_logical_group_rules() is required")
    return frozenset(parse_policy(LogicalGroupRule, rule) for rule in config.get_logical_group_rules())


def infer_logical_group_rules(cases: Iterable[Case]) -> FrozenSet[LogicalGroupRule]:
    """
    Rules implied by baselines present in the collection.

    Args:
        cases: The full case collection of the report (not a filtered subset)

    Returns:
        Frozen set of inferred rules (possibly empty)
    """
    cases = _require_cases(cases)
    inferred = frozenset()
    if any(case.job.is_baseline for case in cases):
        inferred |= JOB_BASELINE_RULES
    if any(case.target.is_baseline for case in cases):
        inferred |= TARGET_BASELINE_RULES
    return inferred


def get_effective_logical_group_rules(
    configured: Iterable[LogicalGroupRule],
    cases: Iterable[Case],
) -> FrozenSet[LogicalGroupRule]:
    """Union of the configured rules and the rules inferred from cases."""
    configured = frozenset(parse_policy(LogicalGroupRule, rule) for rule in configured)
    inferred = infer_logical_group_rules(cases)
    if inferred - configured:
        logger.debug(f"Inferred logical group rules: {sorted(rule.value for rule in inferred - configured)}")
    return configured | inferred


def build_logical_group_key(case: Case, rules: AbstractSet[LogicalGroupRule]) -> str:
    """
    Build the group key of a case under an effective rule set.

    Components are taken in the fixed order method, job, params, category.
    Empty components are skipped. An empty key becomes "*".
    """
    components = {
        LogicalGroupRule.BY_METHOD: lambda: case.target.display_info,
        LogicalGroupRule.BY_JOB: lambda: case.job.display_info,
        LogicalGroupRule.BY_PARAMS: lambda: case.parameters.display_info,
        LogicalGroupRule.BY_CATEGORY: lambda: CATEGORY_SEPARATOR.join(case.target.categories),
    }
    keys = [components[rule]() for rule in LOGICAL_GROUP_RULE_ORDER if rule in rules]
    key = GROUP_KEY_SEPARATOR.join(key for key in keys if key != "")
    return key or UNGROUPED_KEY


def get_logical_group_key(config: Any, all_cases: Sequence[Case], case: Case) -> str:
    """
    Group key of one case.

    Args:
        config: Object exposing get_logical_group_rules()
        all_cases: Every case of the report, used for rule inference
        case: The case to key
    """
    rules = get_effective_logical_group_rules(_configured_rules(config), all_cases)
    return build_logical_group_key(case, rules)


def get_logical_group_order(keys: Iterable[str]) -> List[str]:
    """Distinct group keys in ordinal order."""
    return sorted(set(keys))


def group_cases(config: Any, cases: Iterable[Case]) -> List[Tuple[str, List[Case]]]:
    """
    Partition cases into logical groups.

    Rules are inferred once from the whole collection. Each group keeps
    the input order of its cases.

    Returns:
        List of (group_key, cases) tuples in group order
    """
    cases = _require_cases(cases)
    rules = get_effective_logical_group_rules(_configured_rules(config), cases)

    groups: Dict[str, List[Case]] = {}
    for case in cases:
        groups.setdefault(build_logical_group_key(case, rules), []).append(case)

    logger.debug(f"Partitioned {len(cases)} cases into {len(groups)} logical groups")
    return [(key, groups[key]) for key in get_logical_group_order(groups)]
