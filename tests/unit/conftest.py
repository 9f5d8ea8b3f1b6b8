"""
Lightweight fixtures for unit tests - NO real report dependencies.
All fixtures build synthetic genhtml pages that mirror genhtml's layout.
"""

from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

import pytest


# =============================================================================
# HTML builders
# =============================================================================

def _cell_text(value: str) -> str:
    """genhtml separates the percent sign with a non-breaking space."""
    return value.replace(" %", "&nbsp;%")


def _rows(rows: Sequence[str], tbody: bool) -> str:
    body = "\n".join(rows)
    return f"<tbody>\n{body}\n</tbody>" if tbody else body


def _summary_table(headers: Sequence[str], values: Sequence[str], tbody: bool) -> str:
    head_cells = "".join(
        f'<td width="5%" class="headerCovTableHead">{header}</td>' for header in headers
    )
    value_cells = "".join(
        f'<td class="{"headerCovTableEntryHi" if i == 0 else "headerCovTableEntry"}">'
        f'{_cell_text(value)}</td>'
        for i, value in enumerate(values)
    )
    inner = _rows([
        '<tr><td width="10%" class="headerItem">Current view:</td>'
        '<td width="10%" class="headerValue">top level</td>'
        f'<td width="5%"></td><td width="5%"></td>{head_cells}</tr>',
        '<tr><td class="headerItem">Test:</td><td class="headerValue">coverage.info</td>'
        f'<td></td><td class="headerItem">Lines:</td>{value_cells}</tr>',
        '<tr><td class="headerItem">Test Date:</td>'
        '<td class="headerValue">2024-01-01 00:00:00</td><td></td>'
        '<td class="headerItem">Functions:</td>'
        '<td class="headerCovTableEntryHi">100.0&nbsp;%</td>'
        '<td class="headerCovTableEntry">2</td><td class="headerCovTableEntry">2</td></tr>',
    ], tbody)
    outer = _rows([
        '<tr><td class="title">LCOV - code coverage report</td></tr>',
        '<tr><td class="ruler"><img src="glass.png" width="3" height="3" alt=""></td></tr>',
        '<tr><td width="100%">'
        f'<table cellpadding="1" border="0" width="100%">{inner}</table>'
        '</td></tr>',
        '<tr><td class="ruler"><img src="glass.png" width="3" height="3" alt=""></td></tr>',
    ], tbody)
    return f'<table width="100%" border="0" cellspacing="0" cellpadding="0">\n{outer}\n</table>'


def _listing_row(row: Dict, name_class: str) -> str:
    name = row["name"]
    tier = row.get("tier", "coverPerHi")
    coverage_class = tier if tier else "coverNumDflt"
    numbers = "".join(f'<td class="coverNumDflt">{n}</td>' for n in row.get("numbers", ()))
    return (
        f'<tr><td class="{name_class}"><a href="{name}/index.html">{name}</a></td>'
        '<td class="coverBar" align="center">'
        '<table border="0" cellspacing="0" cellpadding="1"><tr>'
        '<td class="coverBarOutline"><img src="emerald.png" width="50" height="10" alt=""></td>'
        '</tr></table></td>'
        f'<td class="{coverage_class}">{_cell_text(row["coverage"])}</td>'
        f'{numbers}</tr>'
    )


def _listing_table(kind: str, rows: Sequence[Dict], footer: bool, tbody: bool) -> str:
    name_class = "coverDirectory" if kind == "Directory" else "coverFile"
    lines = [
        '<tr><td width="40%"><br></td><td width="15%"></td><td width="15%"></td>'
        '<td width="15%"></td><td width="15%"></td></tr>',
        f'<tr><td class="tableHead">{kind} <span class="tableHeadSort">'
        '<a href="index-sort-f.html"><img src="updown.png" width="10" height="14" '
        'alt="Sort by name" border="0"></a></span></td>'
        '<td class="tableHead" colspan="4">Line Coverage</td></tr>',
    ]
    lines.extend(_listing_row(row, name_class) for row in rows)
    if footer:
        lines.append('<tr><td colspan="5" class="footnote">Generated by: LCOV</td></tr>')
    return (
        '<center>\n<table width="80%" cellpadding="1" cellspacing="1" border="0">\n'
        f'{_rows(lines, tbody)}\n</table>\n</center>'
    )


def make_index_html(
    headers: Sequence[str] = ("Coverage", "Total", "Hit"),
    values: Sequence[str] = ("62.5 %", "8", "5"),
    kind: Optional[str] = "Directory",
    rows: Sequence[Dict] = (),
    footer: bool = False,
    tbody: bool = False,
) -> str:
    """
    Build a genhtml-style index.html.

    Args:
        headers: Summary header names ([] for a page without summary)
        values: Summary values, same order as headers
        kind: Listing heading ("Directory", "Filename") or None for no listing
        rows: Dicts with name, coverage, numbers and optional tier
            (None for a row without a coverage tier cell)
        footer: Append a listing row without a name cell
        tbody: Wrap table rows in <tbody> like browsers serialise them
    """
    summary = _summary_table(headers, values, tbody) if headers else ""
    listing = _listing_table(kind, rows, footer, tbody) if kind else ""
    return f"""<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN">
<html lang="en">
<head>
  <meta http-equiv="Content-Type" content="text/html; charset=UTF-8">
  <title>LCOV - coverage.info</title>
</head>
<body>
{summary}
{listing}
<table width="100%" border="0" cellspacing="0" cellpadding="0">
  <tr><td class="versionInfo">Generated by: LCOV version 2.0-1</td></tr>
</table>
</body>
</html>
"""


def row(name: str, coverage: str, *numbers: str, tier: Optional[str] = "coverPerHi") -> Dict:
    """Listing row dict for make_index_html."""
    return {"name": name, "coverage": coverage, "numbers": numbers, "tier": tier}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def index_html() -> Callable[..., str]:
    """Factory building genhtml-style index.html text."""
    return make_index_html


@pytest.fixture
def listing_row() -> Callable[..., Dict]:
    """Factory building listing row dicts."""
    return row


@pytest.fixture
def write_report(tmp_path: Path) -> Callable[[Dict[str, str], str], Path]:
    """
    Write a report to disk.

    Takes {relative directory: index.html text} ("" is the root) and an
    optional report directory name; returns the report root.
    """
    def _write(pages: Dict[str, str], name: str = "report") -> Path:
        root = tmp_path / name
        for directory, html in pages.items():
            page_dir = root / directory if directory else root
            page_dir.mkdir(parents=True, exist_ok=True)
            (page_dir / "index.html").write_text(html, encoding="utf-8")
        return root
    return _write


@pytest.fixture
def sample_report_pages(index_html, listing_row) -> Dict[str, str]:
    """
    Two-level report: root lists src and src/lib; src/lib nests util.

    Root totals 20/14, src 8/5 (two files), src/lib 12/9 (one file plus util).
    """
    return {
        "": index_html(
            values=("70.0 %", "20", "14"),
            rows=[
                listing_row("src", "62.5 %", "8", "5", tier="coverPerLo"),
                listing_row("src/lib", "75.0 %", "12", "9", tier="coverPerMed"),
            ],
        ),
        "src": index_html(
            values=("62.5 %", "8", "5"),
            kind="Filename",
            rows=[
                listing_row("main.c", "50.0 %", "4", "2", tier="coverPerLo"),
                listing_row("util.c", "75.0 %", "4", "3", tier="coverPerMed"),
            ],
        ),
        "src/lib": index_html(
            values=("75.0 %", "12", "9"),
            rows=[listing_row("util", "100.0 %", "4", "4")],
        ),
        "src/lib/util": index_html(
            values=("100.0 %", "4", "4"),
            kind="Filename",
            rows=[listing_row("str.c", "100.0 %", "4", "4")],
        ),
    }
