"""
Benchmark case descriptors.

A case is one runnable benchmark configuration: a target method, a job and a
set of parameter values. All descriptors are immutable and hashable so they
can key statistics lookups.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

DEFAULT_JOB_ID = "DefaultJob"


def _display_value(value: Any) -> str:
    return "null" if value is None else str(value)


@dataclass(frozen=True)
class Target:
    """The benchmarked method."""
    type_name: str
    method_name: str
    method_index: int = 0  # position of the method in its declaring source
    is_baseline: bool = False
    categories: Tuple[str, ...] = ()

    @property
    def display_info(self) -> str:
        if not self.type_name:
            return self.method_name
        return f"{self.type_name}.{self.method_name}"


@dataclass(frozen=True)
class Job:
    """
    Execution environment configuration.

    `characteristics` holds the arbitrary job dimensions as (name, value)
    pairs in declared order, e.g. (("Runtime", "Core"), ("Platform", "X64")).
    """
    id: str = ""
    is_baseline: bool = False
    order: int = 0
    characteristics: Tuple[Tuple[str, Any], ...] = ()

    @property
    def characteristics_info(self) -> str:
        return ", ".join(f"{name}={_display_value(value)}" for name, value in self.characteristics)

    @property
    def display_info(self) -> str:
        return self.id or self.characteristics_info or DEFAULT_JOB_ID


@dataclass(frozen=True)
class ParameterInstance:
    """A single named parameter value."""
    name: str
    value: Any
    display: Optional[str] = None

    def to_display_text(self) -> str:
        if self.display is not None:
            return self.display
        return _display_value(self.value)


@dataclass(frozen=True)
class ParameterInstances:
    """The parameter values of a case, in declared order."""
    items: Tuple[ParameterInstance, ...] = ()

    @classmethod
    def from_values(cls, **values: Any) -> "ParameterInstances":
        return cls(tuple(ParameterInstance(name, value) for name, value in values.items()))

    def __iter__(self) -> Iterator[ParameterInstance]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, name: str) -> Any:
        for item in self.items:
            if item.name == name:
                return item.value
        raise KeyError(name)

    @property
    def display_info(self) -> str:
        return ", ".join(f"{item.name}={item.to_display_text()}" for item in self.items)


@dataclass(frozen=True)
class Case:
    """One executable benchmark: target x job x parameters."""
    target: Target
    job: Job
    parameters: ParameterInstances = ParameterInstances()

    @property
    def display_info(self) -> str:
        info = f"{self.target.display_info}: {self.job.display_info}"
        params = self.parameters.display_info
        if params:
            info += f" [{params}]"
        return info

    def __repr__(self) -> str:
        return f"Case({self.display_info})"
