"""
Configuration schema and utilities for bench_order.
"""

import json
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, FrozenSet

from bench_order.ordering.policies import (
    LogicalGroupRule,
    MethodOrderPolicy,
    SummaryOrderPolicy,
    parse_policy,
)

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class OrderingSettings:
    """Policies used to order cases."""
    summary_order_policy: str = "default"  # "default", "fastest_to_slowest" or "slowest_to_fastest"
    method_order_policy: str = "declared"  # "declared" or "alphabetical"

    def __post_init__(self):
        self.summary_order_policy = parse_policy(SummaryOrderPolicy, self.summary_order_policy).value
        self.method_order_policy = parse_policy(MethodOrderPolicy, self.method_order_policy).value


@dataclass
class GroupingSettings:
    """Explicitly requested logical grouping rules."""
    # Any of "by_method", "by_job", "by_params", "by_category"
    logical_group_rules: List[str] = field(default_factory=list)

    def __post_init__(self):
        rules = []
        for rule in self.logical_group_rules:
            value = parse_policy(LogicalGroupRule, rule).value
            if value not in rules:
                rules.append(value)
        self.logical_group_rules = rules


@dataclass
class ExecutionSettings:
    """Settings for execution control."""
    log_level: str = "info"  # "debug", "info", "warning", "error"

    def __post_init__(self):
        if self.log_level.lower() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")
        self.log_level = self.log_level.lower()


@dataclass
class BenchOrderConfig:
    """Complete bench_order configuration."""
    ordering: OrderingSettings = field(default_factory=OrderingSettings)
    grouping: GroupingSettings = field(default_factory=GroupingSettings)
    execution: ExecutionSettings = field(default_factory=ExecutionSettings)

    def get_logical_group_rules(self) -> FrozenSet[LogicalGroupRule]:
        """Configured grouping rules (inferred rules are not included)."""
        return frozenset(LogicalGroupRule(rule) for rule in self.grouping.logical_group_rules)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: str) -> None:
        """Save configuration to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchOrderConfig":
        """Create from dictionary."""
        data = dict(data)

        if "ordering" in data and isinstance(data["ordering"], dict):
            data["ordering"] = OrderingSettings(**data["ordering"])

        if "grouping" in data and isinstance(data["grouping"], dict):
            data["grouping"] = GroupingSettings(**data["grouping"])

        if "execution" in data and isinstance(data["execution"], dict):
            data["execution"] = ExecutionSettings(**data["execution"])

        return cls(**data)

    @classmethod
    def load(cls, path: str) -> "BenchOrderConfig":
        """Load configuration from JSON file."""
        with open(path) as f:
            data = json.load(f)
        return cls.from_dict(data.get("bench_order", data))


def get_default_config() -> BenchOrderConfig:
    """Get default bench_order configuration."""
    return BenchOrderConfig()


def merge_configs(base: BenchOrderConfig, override: Dict[str, Any]) -> BenchOrderConfig:
    """Merge override dictionary into base configuration."""
    base_dict = base.to_dict()
    _deep_merge(base_dict, override)
    return BenchOrderConfig.from_dict(base_dict)


def _deep_merge(base: Dict, override: Dict) -> None:
    """Recursively merge override into base dictionary."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
