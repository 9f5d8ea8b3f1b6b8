"""
Pydantic data models for genhtml reports and their differences.

Organized by stage:
- report: FilePath, CoverageStats, FileNode, DirectoryNode, ReportTree
- diff: ChangeType, DiffStats, DiffNode, DiffRoot
"""
from .report import (
    MANDATORY_CATEGORIES,
    OPTIONAL_CATEGORIES,
    NodeKind,
    FilePath,
    CoverageStats,
    FileNode,
    DirectoryNode,
    ReportNode,
    ReportTree,
    dumps_json,
)
from .diff import ChangeType, DiffStats, DiffNode, DiffRoot

__all__ = [
    'MANDATORY_CATEGORIES',
    'OPTIONAL_CATEGORIES',
    'NodeKind',
    'FilePath',
    'CoverageStats',
    'FileNode',
    'DirectoryNode',
    'ReportNode',
    'ReportTree',
    'dumps_json',
    'ChangeType',
    'DiffStats',
    'DiffNode',
    'DiffRoot',
]
