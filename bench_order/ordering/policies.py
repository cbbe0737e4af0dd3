"""
Ordering and grouping policies.
"""

from enum import Enum
from typing import Type, TypeVar, Union


class SummaryOrderPolicy(str, Enum):
    """How cases are ordered inside a logical group of a summary."""
    DEFAULT = "default"  # same as execution order
    FASTEST_TO_SLOWEST = "fastest_to_slowest"
    SLOWEST_TO_FASTEST = "slowest_to_fastest"


class MethodOrderPolicy(str, Enum):
    """How benchmark methods are ordered against each other."""
    DECLARED = "declared"
    ALPHABETICAL = "alphabetical"


class LogicalGroupRule(str, Enum):
    """Dimensions a summary can be grouped by."""
    BY_METHOD = "by_method"
    BY_JOB = "by_job"
    BY_PARAMS = "by_params"
    BY_CATEGORY = "by_category"


# Order in which rule components are joined into a group key
LOGICAL_GROUP_RULE_ORDER = (
    LogicalGroupRule.BY_METHOD,
    LogicalGroupRule.BY_JOB,
    LogicalGroupRule.BY_PARAMS,
    LogicalGroupRule.BY_CATEGORY,
)

E = TypeVar("E", bound=Enum)


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def parse_policy(enum_cls: Type[E], value: Union[E, str]) -> E:
    """
    Resolve a policy from an enum member, its value or its CamelCase name.

    "fastest_to_slowest", "FastestToSlowest" and "FASTEST_TO_SLOWEST" all
    resolve to SummaryOrderPolicy.FASTEST_TO_SLOWEST.

    Raises:
        ValueError: If the value matches no member of enum_cls
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{enum_cls.__name__} must be a string, got {type(value).__name__}")

    wanted = _normalize(value)
    for member in enum_cls:
        if wanted in (_normalize(member.value), _normalize(member.name)):
            return member

    choices = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"Unknown {enum_cls.__name__} '{value}', expected one of: {choices}")
