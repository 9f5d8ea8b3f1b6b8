"""Comparison of parsed genhtml reports."""

from .differ import ReportDiffer, diff, exact_delta

__all__ = [
    'ReportDiffer',
    'diff',
    'exact_delta',
]
