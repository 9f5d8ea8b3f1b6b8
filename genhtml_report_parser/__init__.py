"""genhtml report parser

Parses genhtml (LCOV) HTML coverage reports into typed trees and diffs two
of them.

Quick Start:
    >>> from genhtml_report_parser import find_root_index_file, parse_root_index_file, diff
    >>> report_a = parse_root_index_file(find_root_index_file("reportA").absolute_path)
    >>> report_b = parse_root_index_file(find_root_index_file("reportB.zip").absolute_path)
    >>> print(diff(report_a, report_b).to_dict())
"""

from .exceptions import GenhtmlReportError, ReportNotFoundError, StatisticParseError
from .models import (
    NodeKind,
    FilePath,
    CoverageStats,
    FileNode,
    DirectoryNode,
    ReportNode,
    ReportTree,
    ChangeType,
    DiffStats,
    DiffNode,
    DiffRoot,
)
from .parsing import (
    ReportDocument,
    load_document,
    extract_statistics,
    extract_entries,
    IndexLocation,
    find_root_index_file,
    locate_subdirectory_report,
    ReportTreeBuilder,
    parse_root_index_file,
)
from .analysis import ReportDiffer, diff

__version__ = "0.1.0"

__all__ = [
    # Errors
    'GenhtmlReportError',
    'ReportNotFoundError',
    'StatisticParseError',
    # Models
    'NodeKind',
    'FilePath',
    'CoverageStats',
    'FileNode',
    'DirectoryNode',
    'ReportNode',
    'ReportTree',
    'ChangeType',
    'DiffStats',
    'DiffNode',
    'DiffRoot',
    # Parsing
    'ReportDocument',
    'load_document',
    'extract_statistics',
    'extract_entries',
    'IndexLocation',
    'find_root_index_file',
    'locate_subdirectory_report',
    'ReportTreeBuilder',
    'parse_root_index_file',
    # Analysis
    'ReportDiffer',
    'diff',
]
