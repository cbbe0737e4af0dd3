"""
Exception types raised by the ordering core.
"""


class OrderingError(Exception):
    """Base class for errors raised by bench_order."""


class PreconditionViolation(OrderingError, ValueError):
    """The caller broke a contract of the ordering API (misuse, not a transient failure)."""


class MissingStatisticsError(PreconditionViolation):
    """A case has no result statistics while ordering a summary by them."""

    def __init__(self, case):
        self.case = case
        super().__init__(f"No result statistics for case '{case.display_info}'")
