"""Parsing of genhtml HTML reports into report trees

Pipeline Flow:
    1. Locate  → find_root_index_file → IndexLocation
    2. Load    → load_document → ReportDocument
    3. Extract → extract_statistics / extract_entries
    4. Build   → ReportTreeBuilder → ReportTree

Quick Start:
    >>> from genhtml_report_parser.parsing import find_root_index_file, parse_root_index_file
    >>> location = find_root_index_file("build/coverage")
    >>> tree = parse_root_index_file(location.absolute_path)
"""

from .document import ReportDocument, load_document
from .statistics import parse_statistic, coerce_statistic, extract_statistics
from .entries import ReportEntry, detect_table_kind, extract_entries
from .locator import IndexLocation, find_root_index_file, locate_subdirectory_report
from .builder import ReportTreeBuilder, parse_root_index_file

__all__ = [
    # Document
    'ReportDocument',
    'load_document',
    # Statistics
    'parse_statistic',
    'coerce_statistic',
    'extract_statistics',
    # Entries
    'ReportEntry',
    'detect_table_kind',
    'extract_entries',
    # Locator
    'IndexLocation',
    'find_root_index_file',
    'locate_subdirectory_report',
    # Builder
    'ReportTreeBuilder',
    'parse_root_index_file',
]
