"""Exceptions raised while locating and parsing genhtml reports."""

from typing import Optional


class GenhtmlReportError(Exception):
    """Base class for report parsing errors."""


class ReportNotFoundError(GenhtmlReportError, FileNotFoundError):
    """A report document (root or per-directory index) does not exist."""


class StatisticParseError(GenhtmlReportError, ValueError):
    """A statistic cell holds text that is not a number or percentage."""

    def __init__(self, text: str, category: Optional[str] = None):
        self.text = text
        self.category = category
        where = f" for {category}" if category else ""
        super().__init__(f"Cannot parse statistic{where}: {text!r}")
