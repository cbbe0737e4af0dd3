"""Benchmark case descriptors and input loading."""

from .case import Case, Job, ParameterInstance, ParameterInstances, Target

__all__ = ["Case", "Job", "ParameterInstance", "ParameterInstances", "Target"]
