"""
Structural diff of two genhtml report trees.

Nodes are matched by their path relative to each report's root directory.
Only differences are reported: a path whose presence, kind, Coverage,
Total, Hit and descendants are the same on both sides has no DiffNode.

Usage:
    >>> from genhtml_report_parser.analysis import diff
    >>> result = diff(before_tree, after_tree)
    >>> for node in result.walk():
    ...     print(node.change.value, node.path)
"""

import logging
import math
from fractions import Fraction
from typing import Dict, List, Optional, Sequence

from genhtml_report_parser.models.diff import ChangeType, DiffNode, DiffRoot, DiffStats
from genhtml_report_parser.models.report import (
    OPTIONAL_CATEGORIES,
    CoverageStats,
    NodeKind,
    ReportNode,
    ReportTree,
)

logger = logging.getLogger(__name__)


def exact_delta(before: float, after: float) -> float:
    """
    ``after - before`` computed on the decimal values the report printed.

    Each float is converted through its shortest repr, so 85.8 - 85.7 is
    exactly 0.1 and equal percentages always give exactly 0.

    Two NaN values (unparseable on both sides) count as equal and give 0;
    NaN on one side only gives NaN.
    """
    if math.isnan(before) and math.isnan(after):
        return 0.0
    if not (math.isfinite(before) and math.isfinite(after)):
        return after - before
    return float(Fraction(repr(after)) - Fraction(repr(before)))


class ReportDiffer:
    """
    Computes DiffRoot values from pairs of report trees.

    Args:
        include_category_deltas: Report non-zero deltas of the optional
            differential categories alongside Coverage/Total/Hit
            (default: settings.diff.include_category_deltas)
    """

    def __init__(self, include_category_deltas: Optional[bool] = None):
        if include_category_deltas is None:
            from genhtml_report_parser.config import settings  # pylint: disable=import-outside-toplevel
            include_category_deltas = settings.diff.include_category_deltas
        self.include_category_deltas = include_category_deltas

    def diff(self, before: ReportTree, after: ReportTree) -> DiffRoot:
        """Difference from *before* to *after*."""
        result = DiffRoot(
            stats=self.stats_delta(before.root.stats, after.root.stats),
            children=self.diff_children(before.root.children, after.root.children),
        )
        logger.info(
            "Diff %s -> %s: %d added, %d removed, %d changed",
            before.directory,
            after.directory,
            result.count(ChangeType.ADDED),
            result.count(ChangeType.REMOVED),
            result.count(ChangeType.CHANGED),
        )
        return result

    def stats_delta(self, before: CoverageStats, after: CoverageStats) -> Optional[DiffStats]:
        """Delta of two stats, or None when Coverage, Total and Hit all match."""
        coverage_delta = exact_delta(before.coverage, after.coverage)
        total_delta = exact_delta(before.total, after.total)
        hit_delta = exact_delta(before.hit, after.hit)
        if coverage_delta == 0 and total_delta == 0 and hit_delta == 0:
            return None

        return DiffStats(
            coverage=after.coverage,
            total=after.total,
            hit=after.hit,
            coverage_delta=coverage_delta,
            total_delta=total_delta,
            hit_delta=hit_delta,
            category_deltas=self._category_deltas(before, after),
        )

    def diff_children(
        self,
        before: Sequence[ReportNode],
        after: Sequence[ReportNode],
    ) -> List[DiffNode]:
        """
        Differences between two child collections.

        Output order: paths of *before* in their order, then paths found only
        in *after* in their order.
        """
        before_map = {child.path.relative: child for child in before}
        after_map = {child.path.relative: child for child in after}

        diffs: List[DiffNode] = []
        for key in dict.fromkeys([*before_map, *after_map]):
            old = before_map.get(key)
            new = after_map.get(key)

            if new is None:
                diffs.append(DiffNode(change=ChangeType.REMOVED, kind=old.kind, path=key))
            elif old is None:
                diffs.append(self._added(new))
            elif old.kind != new.kind:
                # Same path, different kind: treated as a replacement
                diffs.append(DiffNode(change=ChangeType.REMOVED, kind=old.kind, path=key))
                diffs.append(self._added(new))
            elif new.kind == NodeKind.FILE:
                stats = self.stats_delta(old.stats, new.stats)
                if stats is not None:
                    diffs.append(DiffNode(
                        change=ChangeType.CHANGED, kind=NodeKind.FILE, path=key, stats=stats,
                    ))
            else:
                stats = self.stats_delta(old.stats, new.stats)
                children = self.diff_children(old.children, new.children)
                if stats is not None or children:
                    diffs.append(DiffNode(
                        change=ChangeType.CHANGED,
                        kind=NodeKind.DIRECTORY,
                        path=key,
                        stats=stats,
                        children=children,
                    ))
        return diffs

    def _added(self, node: ReportNode) -> DiffNode:
        stats = DiffStats(
            coverage=node.stats.coverage,
            total=node.stats.total,
            hit=node.stats.hit,
            coverage_delta=node.stats.coverage,
            total_delta=node.stats.total,
            hit_delta=node.stats.hit,
            category_deltas=self._category_deltas(CoverageStats.zero(), node.stats),
        )
        children = None
        if node.kind == NodeKind.DIRECTORY:
            children = self.diff_children([], node.children) or None
        return DiffNode(
            change=ChangeType.ADDED,
            kind=node.kind,
            path=node.path.relative,
            stats=stats,
            children=children,
        )

    def _category_deltas(self, before: CoverageStats, after: CoverageStats) -> Dict[str, float]:
        if not self.include_category_deltas:
            return {}
        old = before.categories()
        new = after.categories()
        deltas = {}
        for name in OPTIONAL_CATEGORIES:
            if name not in old and name not in new:
                continue
            delta = exact_delta(old.get(name, 0.0), new.get(name, 0.0))
            if delta != 0:
                deltas[name] = delta
        return deltas


def diff(before: ReportTree, after: ReportTree) -> DiffRoot:
    """Difference from *before* to *after* with default settings."""
    return ReportDiffer().diff(before, after)
