"""
Recursive report tree construction.

Starting from the root index.html, every "Directory" listing entry is
followed into that directory's own index.html, producing one tree whose
relative paths are all expressed against the root report directory.

Usage:
    >>> from genhtml_report_parser.parsing import ReportTreeBuilder, find_root_index_file
    >>> location = find_root_index_file("build/coverage")
    >>> tree = ReportTreeBuilder().build(location.absolute_path)
    >>> print(tree.root.stats.coverage)
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from genhtml_report_parser.models.report import (
    CoverageStats,
    DirectoryNode,
    FileNode,
    FilePath,
    NodeKind,
    ReportNode,
    ReportTree,
)
from .document import ReportDocument, load_document
from .entries import ReportEntry, extract_entries
from .locator import locate_subdirectory_report
from .statistics import extract_statistics

logger = logging.getLogger(__name__)

# Directory -> its index file; raises ReportNotFoundError when absent
Locator = Callable[[Path], Path]
# Index file -> parsed document
Loader = Callable[[Path], ReportDocument]


class ReportTreeBuilder:
    """
    Builds a ReportTree from a root index file.

    Document lookup and loading are injected so trees can be built from an
    in-memory document set.

    Args:
        locator: Finds a subdirectory's index file (default: on disk)
        loader: Parses an index file (default: read and parse from disk)
        strict_numbers: Raise on malformed numbers instead of yielding NaN
            (default: settings.parser.strict_numbers)
        header_rows: Listing rows to skip (default: settings.parser.listing_header_rows)
    """

    def __init__(
        self,
        locator: Optional[Locator] = None,
        loader: Optional[Loader] = None,
        strict_numbers: Optional[bool] = None,
        header_rows: Optional[int] = None,
    ):
        from genhtml_report_parser.config import settings  # pylint: disable=import-outside-toplevel
        self._locate = locator or locate_subdirectory_report
        self._load = loader or load_document
        self._strict = (
            settings.parser.strict_numbers if strict_numbers is None else strict_numbers
        )
        self._header_rows = (
            settings.parser.listing_header_rows if header_rows is None else header_rows
        )

    def build(self, index_file: Union[str, Path]) -> Optional[ReportTree]:
        """
        Parse the report rooted at *index_file*.

        Returns:
            The full tree, or None if the root document has no summary table

        Raises:
            ReportNotFoundError: If a nested directory has no index file
            StatisticParseError: If strict and a statistic cannot be parsed
        """
        index_file = Path(os.path.abspath(index_file))
        base_dir = index_file.parent

        document = self._load(index_file)
        summary = extract_statistics(document, strict=self._strict)
        if summary is None:
            logger.warning("No summary table found in %s", index_file)
            return None

        root = DirectoryNode(
            path=FilePath(absolute=str(base_dir), relative="."),
            stats=CoverageStats.from_mapping(summary),
            children=self._build_children(document, base_dir, base_dir),
        )
        tree = ReportTree(directory=str(base_dir), root=root)
        logger.info(
            "Parsed %s: %d directories, %d files",
            index_file,
            tree.count(NodeKind.DIRECTORY),
            tree.count(NodeKind.FILE),
        )
        return tree

    def _build_children(
        self,
        document: ReportDocument,
        current_dir: Path,
        base_dir: Path,
    ) -> List[ReportNode]:
        children: List[ReportNode] = []
        for entry in extract_entries(document, header_rows=self._header_rows, strict=self._strict):
            absolute = _resolve_entry(entry, current_dir)
            path = FilePath(absolute=str(absolute), relative=_relative_to(absolute, base_dir))
            stats = CoverageStats.from_mapping(entry.statistics)

            if entry.kind == NodeKind.FILE:
                children.append(FileNode(path=path, stats=stats))
                continue

            subdocument = self._load(self._locate(absolute))
            logger.debug("Descending into %s", path.relative)
            children.append(DirectoryNode(
                path=path,
                stats=stats,
                children=self._build_children(subdocument, absolute, base_dir),
            ))
        return children


def _resolve_entry(entry: ReportEntry, current_dir: Path) -> Path:
    name = Path(entry.name)
    absolute = name if name.is_absolute() else current_dir / name
    return Path(os.path.normpath(absolute))


def _relative_to(absolute: Path, base_dir: Path) -> str:
    return Path(os.path.relpath(absolute, base_dir)).as_posix()


def parse_root_index_file(index_file: Union[str, Path]) -> Optional[ReportTree]:
    """
    Parse a report from disk with default settings.

    Convenience wrapper around ReportTreeBuilder().build().
    """
    return ReportTreeBuilder().build(index_file)
