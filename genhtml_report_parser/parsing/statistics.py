"""
Summary statistics extraction.

genhtml prints a summary table at the top of every index.html: a header
row naming the categories (Coverage, Total, Hit and, for differential
reports, UNC, LBC, ...) and a "Lines:" row with their values. The header
row is the schema used later to read the listing rows.
"""

import logging
import math
from typing import Dict, Optional

from genhtml_report_parser.exceptions import StatisticParseError
from genhtml_report_parser.models.report import MANDATORY_CATEGORIES
from .constants import PERCENT_SUFFIX, SUMMARY_HEADER_SELECTOR, SUMMARY_VALUE_SELECTOR
from .document import ReportDocument

logger = logging.getLogger(__name__)


def parse_statistic(text: str, category: Optional[str] = None) -> float:
    """
    Parse a statistic cell: ``"92.5 %"`` -> 92.5, ``"100"`` -> 100.0.

    A single trailing ``" %"`` is stripped; anything else must be a plain
    finite number.

    Raises:
        StatisticParseError: If the text is not a number or percentage
    """
    value = text.replace("\xa0", " ").strip()
    if value.endswith(PERCENT_SUFFIX):
        value = value[:-len(PERCENT_SUFFIX)]
    try:
        number = float(value)
    except ValueError as exc:
        raise StatisticParseError(text, category) from exc
    if not math.isfinite(number):
        raise StatisticParseError(text, category)
    return number


def coerce_statistic(text: str, category: Optional[str] = None, strict: bool = False) -> float:
    """
    parse_statistic, or NaN with a warning when not *strict*.

    NaN propagates through every later delta, so lenient callers should
    check results with math.isnan before trusting them.
    """
    try:
        return parse_statistic(text, category)
    except StatisticParseError:
        if strict:
            raise
        logger.warning("Unparseable %s value %r, using NaN", category or "statistic", text)
        return math.nan


def extract_statistics(document: ReportDocument, strict: bool = False) -> Optional[Dict[str, float]]:
    """
    Read the summary table of *document*.

    Args:
        document: Parsed report document
        strict: Raise on malformed numbers instead of yielding NaN

    Returns:
        Mapping of category name to value in header order, or None if the
        document has no summary table (or one without Coverage/Total/Hit).

    Raises:
        StatisticParseError: If strict and a value cannot be parsed
    """
    headers = document.select(SUMMARY_HEADER_SELECTOR)
    values = document.select(SUMMARY_VALUE_SELECTOR)
    if not headers or not values:
        logger.debug("No summary table in %r", document)
        return None

    summary: Dict[str, float] = {}
    for header, value in zip(headers, values):
        category = document.text(header)
        summary[category] = coerce_statistic(document.text(value), category, strict)

    missing = [name for name in MANDATORY_CATEGORIES if name not in summary]
    if missing:
        logger.warning("Summary of %r lacks %s", document, ", ".join(missing))
        return None
    return summary
