"""
CLI entry point: diff two genhtml coverage reports.

Each report may be the directory genhtml wrote to or a zip archive of it.
The diff is printed as JSON, or written to a file with --output.

Usage:
    python -m genhtml_report_parser coverage-before/ coverage-after/
    python -m genhtml_report_parser before.zip after.zip --output diff.json
    python -m genhtml_report_parser before/ after/ --strict --log-level DEBUG

Exit codes:
    0  diff produced
    1  a report has no summary table
    2  a report could not be located or parsed, or the output exists
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from genhtml_report_parser.analysis import ReportDiffer
from genhtml_report_parser.config import settings
from genhtml_report_parser.exceptions import GenhtmlReportError
from genhtml_report_parser.models.report import ReportTree, dumps_json
from genhtml_report_parser.parsing import ReportTreeBuilder, find_root_index_file

logger = logging.getLogger(__name__)


def _parse_report(path: Path, extract_dir: Path, strict: bool) -> Optional[ReportTree]:
    location = find_root_index_file(path, extract_dir=extract_dir)
    return ReportTreeBuilder(strict_numbers=strict).build(location.absolute_path)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="genhtml-diff",
        description="Diff two genhtml (LCOV) HTML coverage reports",
    )
    ap.add_argument('before', type=Path, help='Report directory or .zip (before)')
    ap.add_argument('after', type=Path, help='Report directory or .zip (after)')
    ap.add_argument('-o', '--output', type=Path, default=None,
                    help='Write the diff JSON to this file instead of stdout')
    ap.add_argument('--overwrite', action='store_true',
                    help='Replace --output if it already exists')
    ap.add_argument('--indent', type=int, default=None,
                    help=f'JSON indentation (default: {settings.diff.json_indent})')
    ap.add_argument('--strict', action='store_true',
                    help='Fail on malformed numbers instead of treating them as NaN')
    ap.add_argument('--log-level', type=str.upper, default=None, dest='log_level',
                    choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                    help=f'Logging level (default: {settings.logging.level})')
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or settings.logging.level,
        format=settings.logging.format,
    )
    indent = settings.diff.json_indent if args.indent is None else args.indent
    strict = args.strict or settings.parser.strict_numbers

    # Archives are unpacked here; trees are built before it is removed
    with tempfile.TemporaryDirectory(prefix="genhtml-diff-") as scratch:
        try:
            before = _parse_report(args.before, Path(scratch) / "before", strict)
            after = _parse_report(args.after, Path(scratch) / "after", strict)
        except (GenhtmlReportError, ValueError, OSError) as exc:
            logger.error("%s", exc)
            return 2

    for label, path, tree in (("before", args.before, before), ("after", args.after, after)):
        if tree is None:
            logger.error("No summary table in %s report: %s", label, path)
            return 1

    result = ReportDiffer().diff(before, after)

    if args.output is None:
        print(dumps_json(result.to_dict(), indent=indent))
        return 0

    try:
        saved = result.save_to_json(args.output, overwrite=args.overwrite, indent=indent)
    except FileExistsError as exc:
        logger.error("%s", exc)
        return 2
    logger.info("Diff written to %s", saved)
    return 0


if __name__ == '__main__':
    sys.exit(main())
