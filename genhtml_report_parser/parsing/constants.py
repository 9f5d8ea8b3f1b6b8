"""
Structural constants of genhtml's index.html layout.

These describe the fixed layout genhtml writes (not user-tunable; kept as
module constants). Paths assume tbody/thead/tfoot wrappers have been
removed, which ReportDocument does at load time.
"""

from typing import Tuple

# Summary table: outer header table, third row, nested table
_SUMMARY_TABLE = "body > table:nth-of-type(1) > tr:nth-of-type(3) > td > table"

SUMMARY_HEADER_SELECTOR = (
    f"{_SUMMARY_TABLE} > tr:nth-of-type(1) > td[class*=\"headerCovTableHead\"]"
)
SUMMARY_VALUE_SELECTOR = (
    f"{_SUMMARY_TABLE} > tr:nth-of-type(2) > td[class*=\"headerCovTableEntry\"]"
)

# Listing table: one row per child file or subdirectory
LISTING_TABLE_SELECTOR = "body > center > table:nth-of-type(1)"
LISTING_HEADING_CLASS = "tableHead"

# Name cell class per table kind
DIRECTORY_NAME_CLASS = "coverDirectory"
FILE_NAME_CLASS = "coverFile"

# Coverage tier classes of the percentage cell; exactly one per row
COVERAGE_TIER_CLASSES: Tuple[str, ...] = ("coverPerHi", "coverPerMed", "coverPerLo")

# Name, bar graph, percentage; numbered cells follow
FIRST_NUMBER_COLUMN = 3

PERCENT_SUFFIX = " %"
