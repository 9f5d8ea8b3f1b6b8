"""
Queryable view of one genhtml HTML document.

Wraps a BeautifulSoup (lxml) tree and exposes the three capabilities the
extractors need: structural CSS-path queries, class-substring queries and
trimmed element text.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from genhtml_report_parser.exceptions import ReportNotFoundError

logger = logging.getLogger(__name__)

# Wrappers some serialisers add and others omit; removed so structural
# paths are the same for every source
_TABLE_SECTION_TAGS = ["tbody", "thead", "tfoot"]


class ReportDocument:
    """
    Parsed report document.

    Attributes:
        source: Location the document was read from, if any
    """

    def __init__(self, html: Union[str, bytes], source: Optional[Path] = None):
        if isinstance(html, bytes):
            html = _decode_bytes(html)
        self.source = source
        self._soup = BeautifulSoup(html, "lxml")
        for section in self._soup.find_all(_TABLE_SECTION_TAGS):
            section.unwrap()

    def select(self, selector: str, root: Optional[Tag] = None) -> List[Tag]:
        """All elements matching a CSS selector, in document order."""
        scope = self._soup if root is None else root
        return list(scope.select(selector))

    def select_one(self, selector: str, root: Optional[Tag] = None) -> Optional[Tag]:
        scope = self._soup if root is None else root
        return scope.select_one(selector)

    def find_by_class(
        self,
        fragment: str,
        root: Optional[Tag] = None,
        tag: str = "td",
        recursive: bool = True,
    ) -> List[Tag]:
        """
        Elements whose class attribute contains *fragment*.

        With ``recursive=False`` only direct children of *root* are matched,
        which keeps cells of tables nested inside a row out of the result.
        """
        selector = f'{tag}[class*="{fragment}"]'
        if not recursive:
            if root is None:
                raise ValueError("recursive=False requires a root element")
            selector = f":scope > {selector}"
        return self.select(selector, root)

    @staticmethod
    def text(element: Tag) -> str:
        """Trimmed text content, with non-breaking spaces as plain spaces."""
        return element.get_text().replace("\xa0", " ").strip()

    def __repr__(self) -> str:
        return f"ReportDocument(source={self.source!r})"


def load_document(path: Union[str, Path]) -> ReportDocument:
    """
    Read and parse a report document from disk.

    Raises:
        ReportNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise ReportNotFoundError(f"Report document not found: {path}")

    logger.debug("Loading report document %s", path)
    return ReportDocument(path.read_bytes(), source=path)


def _decode_bytes(raw: bytes) -> str:
    """
    Decode report bytes with an encoding fallback chain.

    genhtml writes UTF-8, but source file names in older reports may carry
    windows-1252 bytes. latin-1 is a last resort: it never throws.
    """
    for encoding in ('utf-8', 'windows-1252'):
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode('latin-1')
