"""
Locating report documents on disk.

A report is given either as the directory genhtml wrote to or as a zip
archive of that directory. Nested directory pages are found next to their
listing entries: ``<directory>/index.html``.
"""

import logging
import tempfile
import zipfile
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from genhtml_report_parser.exceptions import ReportNotFoundError

logger = logging.getLogger(__name__)


class IndexLocation(BaseModel):
    """
    Location of a root index file.

    Attributes:
        absolute_path: Absolute path of the root index.html
        root: Directory holding the report (the extraction directory for archives)
        relative_path: index.html path relative to root
    """
    model_config = ConfigDict(frozen=True)

    absolute_path: Path
    root: Path
    relative_path: str


def _index_file_name() -> str:
    from genhtml_report_parser.config import settings  # pylint: disable=import-outside-toplevel
    return settings.parser.index_file_name


def find_root_index_file(
    path: Union[str, Path],
    extract_dir: Optional[Union[str, Path]] = None,
) -> IndexLocation:
    """
    Find the root index.html of a report directory or zip archive.

    Args:
        path: Report directory or .zip archive
        extract_dir: Where to unpack an archive (default: a new temporary
            directory, left for the caller to remove)

    Returns:
        IndexLocation of the root index file

    Raises:
        ReportNotFoundError: If path does not exist or holds no index.html
        ValueError: If path is neither a directory nor a zip archive, or the
            archive cannot be read
    """
    path = Path(path)
    index_name = _index_file_name()

    if not path.exists():
        raise ReportNotFoundError(f"Path does not exist: {path}")

    if path.is_dir():
        index_file = path.resolve() / index_name
        if index_file.is_file():
            return IndexLocation(
                absolute_path=index_file,
                root=path.resolve(),
                relative_path=index_name,
            )
        raise ReportNotFoundError(f"No {index_name} file found in directory: {path}")

    if path.suffix.lower() == ".zip":
        return _find_in_archive(path, extract_dir, index_name)

    raise ValueError(f"Path is not a directory or a zip file: {path}")


def _find_in_archive(archive: Path, extract_dir: Optional[Union[str, Path]], index_name: str) -> IndexLocation:
    if extract_dir is None:
        target = Path(tempfile.mkdtemp(prefix="genhtml-report-"))
    else:
        target = Path(extract_dir)
        target.mkdir(parents=True, exist_ok=True)
    target = target.resolve()

    try:
        with zipfile.ZipFile(archive) as zf:
            zf.extractall(target)
    except zipfile.BadZipFile as exc:
        raise ValueError(f"Failed to unzip file: {archive}") from exc
    logger.info("Extracted %s to %s", archive, target)

    # Archives made from the parent directory nest the report one level
    # down; take the shallowest index file
    candidates = sorted(target.rglob(index_name), key=lambda p: (len(p.parts), str(p)))
    if not candidates:
        raise ReportNotFoundError(f"No {index_name} file found in zip: {archive}")

    index_file = candidates[0]
    return IndexLocation(
        absolute_path=index_file,
        root=target,
        relative_path=index_file.relative_to(target).as_posix(),
    )


def locate_subdirectory_report(directory: Union[str, Path]) -> Path:
    """
    Index file of a nested directory page.

    Raises:
        ReportNotFoundError: If the directory has no index file
    """
    index_file = Path(directory) / _index_file_name()
    if not index_file.is_file():
        raise ReportNotFoundError(f"No report document for directory: {directory}")
    return index_file
