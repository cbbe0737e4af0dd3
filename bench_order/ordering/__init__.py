"""Case ordering and logical grouping."""

from .policies import LogicalGroupRule, MethodOrderPolicy, SummaryOrderPolicy
from .comparers import CaseComparer, JobComparer, ParameterComparer, TargetComparer
from .order_provider import DEFAULT_ORDER_PROVIDER, DefaultOrderProvider

__all__ = [
    "LogicalGroupRule",
    "MethodOrderPolicy",
    "SummaryOrderPolicy",
    "CaseComparer",
    "JobComparer",
    "ParameterComparer",
    "TargetComparer",
    "DEFAULT_ORDER_PROVIDER",
    "DefaultOrderProvider",
]
