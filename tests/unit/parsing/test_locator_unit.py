"""
Unit tests for genhtml_report_parser/parsing/locator.py

Tests root index lookup in directories and zip archives, and nested
directory page lookup.
"""

import shutil
import zipfile
from pathlib import Path

import pytest

from genhtml_report_parser.config import settings
from genhtml_report_parser.exceptions import ReportNotFoundError
from genhtml_report_parser.parsing.locator import (
    IndexLocation,
    find_root_index_file,
    locate_subdirectory_report,
)


def _zip(archive: Path, members: dict) -> Path:
    with zipfile.ZipFile(archive, "w") as zf:
        for name, content in members.items():
            zf.writestr(name, content)
    return archive


class TestFindRootIndexFileDirectory:
    """Tests for find_root_index_file() with directories."""

    def test_directory_with_index(self, tmp_path):
        (tmp_path / "index.html").write_text("<html></html>")
        location = find_root_index_file(tmp_path)
        assert isinstance(location, IndexLocation)
        assert location.absolute_path == tmp_path.resolve() / "index.html"
        assert location.absolute_path.is_absolute()
        assert location.root == tmp_path.resolve()
        assert location.relative_path == "index.html"

    def test_accepts_string_path(self, tmp_path):
        (tmp_path / "index.html").write_text("<html></html>")
        assert find_root_index_file(str(tmp_path)).relative_path == "index.html"

    def test_directory_without_index(self, tmp_path):
        with pytest.raises(ReportNotFoundError, match="index.html"):
            find_root_index_file(tmp_path)

    def test_nested_index_not_searched(self, tmp_path):
        """Plain directories must hold index.html at the top."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "index.html").write_text("<html></html>")
        with pytest.raises(ReportNotFoundError):
            find_root_index_file(tmp_path)

    def test_missing_path(self, tmp_path):
        with pytest.raises(ReportNotFoundError, match="does not exist"):
            find_root_index_file(tmp_path / "nope")

    def test_regular_file_rejected(self, tmp_path):
        path = tmp_path / "report.tar"
        path.write_bytes(b"data")
        with pytest.raises(ValueError, match="not a directory or a zip"):
            find_root_index_file(path)

    def test_custom_index_name(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings.parser, "index_file_name", "main.html")
        (tmp_path / "main.html").write_text("<html></html>")
        assert find_root_index_file(tmp_path).relative_path == "main.html"


class TestFindRootIndexFileArchive:
    """Tests for find_root_index_file() with zip archives."""

    def test_top_level_index(self, tmp_path):
        archive = _zip(tmp_path / "report.zip", {
            "index.html": "<html></html>",
            "src/index.html": "<html></html>",
        })
        location = find_root_index_file(archive, extract_dir=tmp_path / "out")
        assert location.root == (tmp_path / "out").resolve()
        assert location.relative_path == "index.html"
        assert location.absolute_path.is_file()

    def test_shallowest_index_wins(self, tmp_path):
        archive = _zip(tmp_path / "report.zip", {
            "coverage/src/lib/index.html": "<html></html>",
            "coverage/index.html": "<html></html>",
            "coverage/src/index.html": "<html></html>",
        })
        location = find_root_index_file(archive, extract_dir=tmp_path / "out")
        assert location.relative_path == "coverage/index.html"

    def test_uppercase_suffix(self, tmp_path):
        archive = _zip(tmp_path / "REPORT.ZIP", {"index.html": "<html></html>"})
        location = find_root_index_file(archive, extract_dir=tmp_path / "out")
        assert location.relative_path == "index.html"

    def test_default_extract_dir_is_temporary(self, tmp_path):
        archive = _zip(tmp_path / "report.zip", {"index.html": "<html></html>"})
        location = find_root_index_file(archive)
        try:
            assert location.root.name.startswith("genhtml-report-")
            assert location.absolute_path.is_file()
        finally:
            shutil.rmtree(location.root)

    def test_archive_without_index(self, tmp_path):
        archive = _zip(tmp_path / "report.zip", {"readme.txt": "nothing"})
        with pytest.raises(ReportNotFoundError, match="zip"):
            find_root_index_file(archive, extract_dir=tmp_path / "out")

    def test_corrupt_archive(self, tmp_path):
        archive = tmp_path / "report.zip"
        archive.write_bytes(b"not a zip file")
        with pytest.raises(ValueError, match="unzip"):
            find_root_index_file(archive, extract_dir=tmp_path / "out")


class TestLocateSubdirectoryReport:
    """Tests for locate_subdirectory_report()."""

    def test_found(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "index.html").write_text("<html></html>")
        assert locate_subdirectory_report(tmp_path / "src") == tmp_path / "src" / "index.html"

    def test_missing(self, tmp_path):
        (tmp_path / "src").mkdir()
        with pytest.raises(ReportNotFoundError):
            locate_subdirectory_report(tmp_path / "src")
