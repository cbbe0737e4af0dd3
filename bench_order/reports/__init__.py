"""Result statistics consumed by summary ordering."""

from .summary import ResultStatistics, Summary

__all__ = ["ResultStatistics", "Summary"]
