"""
Listing table extraction.

Below its summary, every genhtml index.html lists either its
subdirectories (a "Directory" table) or its source files (a "Filename"
table), one row per entry:

    name | coverage bar | percentage | Total | Hit | [UNC | LBC | ...] | ...

Numbered cells are matched to categories by position, using the summary
header row of the same document as the schema.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import Tag

from genhtml_report_parser.models.report import NodeKind
from .constants import (
    COVERAGE_TIER_CLASSES,
    DIRECTORY_NAME_CLASS,
    FILE_NAME_CLASS,
    FIRST_NUMBER_COLUMN,
    LISTING_HEADING_CLASS,
    LISTING_TABLE_SELECTOR,
)
from .document import ReportDocument
from .statistics import coerce_statistic, extract_statistics

logger = logging.getLogger(__name__)

_COVERAGE = "Coverage"

_TIER_CELL_SELECTOR = ":scope > td:is({})".format(
    ", ".join(f'[class*="{tier}"]' for tier in COVERAGE_TIER_CLASSES)
)


@dataclass(frozen=True)
class ReportEntry:
    """
    One listing row.

    Attributes:
        name: Entry name as printed, relative to the listing document's directory
        kind: File or Directory, from the table heading
        statistics: Category name -> value; always has Coverage and the
            summary header's other categories
    """
    name: str
    kind: NodeKind
    statistics: Dict[str, float] = field(default_factory=dict)


def detect_table_kind(document: ReportDocument) -> Optional[NodeKind]:
    """
    Kind of the listing table, from the first heading cell's first word.

    Returns None when the document has no listing table, which is normal
    for source file pages.
    """
    table = document.select_one(LISTING_TABLE_SELECTOR)
    if table is None:
        return None

    headings = document.find_by_class(LISTING_HEADING_CLASS, root=table)
    if not headings:
        return None

    words = document.text(headings[0]).split()
    if not words:
        return None
    if words[0] == "Directory":
        return NodeKind.DIRECTORY
    # "Filename" in genhtml output, "File" in some versions
    if words[0].startswith("File"):
        return NodeKind.FILE

    logger.warning("Unknown listing table heading %r in %r", words[0], document)
    return None


def extract_entries(
    document: ReportDocument,
    header_rows: Optional[int] = None,
    strict: bool = False,
) -> List[ReportEntry]:
    """
    Read every entry row of the listing table, in row order.

    Args:
        document: Parsed report document
        header_rows: Rows to skip at the top of the table
            (default: settings.parser.listing_header_rows)
        strict: Raise on malformed numbers instead of yielding NaN

    Returns:
        One ReportEntry per row that has a name cell; empty if the document
        has no listing table or no summary to read the columns by.

    Raises:
        StatisticParseError: If strict and a cell cannot be parsed
    """
    if header_rows is None:
        from genhtml_report_parser.config import settings  # pylint: disable=import-outside-toplevel
        header_rows = settings.parser.listing_header_rows

    kind = detect_table_kind(document)
    if kind is None:
        return []

    summary = extract_statistics(document, strict=strict)
    if summary is None:
        logger.warning("Listing in %r has no summary header to read columns by", document)
        return []
    columns = [category for category in summary if category != _COVERAGE]

    name_class = DIRECTORY_NAME_CLASS if kind == NodeKind.DIRECTORY else FILE_NAME_CLASS
    table = document.select_one(LISTING_TABLE_SELECTOR)

    entries = []
    for row in document.select(":scope > tr", root=table)[header_rows:]:
        name_cells = document.find_by_class(name_class, root=row, recursive=False)
        if not name_cells:
            continue
        name = document.text(name_cells[0])
        if not name:
            continue

        statistics = {_COVERAGE: _row_coverage(document, row, strict)}
        numbers = document.select(":scope > td", root=row)[FIRST_NUMBER_COLUMN:]
        for index, category in enumerate(columns):
            text = document.text(numbers[index]) if index < len(numbers) else ""
            statistics[category] = coerce_statistic(text, category, strict) if text else 0.0

        entries.append(ReportEntry(name=name, kind=kind, statistics=statistics))

    logger.debug("Read %d %s entries from %r", len(entries), kind.value, document)
    return entries


def _row_coverage(document: ReportDocument, row: Tag, strict: bool) -> float:
    # First tier cell in row order; later tier cells belong to the
    # function and branch column groups
    cell = document.select_one(_TIER_CELL_SELECTOR, root=row)
    text = document.text(cell) if cell is not None else ""
    return coerce_statistic(text, _COVERAGE, strict)
