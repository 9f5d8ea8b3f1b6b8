"""
Pydantic models for parsed genhtml coverage reports.

A report is a tree of directories and files, each annotated with the
statistics genhtml printed for it. Nodes are a discriminated union on
``kind`` rather than a class hierarchy, so consumers branch on the tag.
"""

import json
import math
from enum import Enum
from pathlib import Path
from typing import Annotated, Dict, Iterator, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Always present whenever a summary is present
MANDATORY_CATEGORIES = ("Coverage", "Total", "Hit")

# Present only when declared in the summary header row
OPTIONAL_CATEGORIES = (
    "UNC", "LBC", "UIC", "UBC", "GBC", "GIC",
    "GNC", "CBC", "EUB", "ECB", "DUB", "DCB",
)


def null_to_nan(value):
    """JSON null (a NaN statistic written by dumps_json) reads back as NaN."""
    return math.nan if value is None else value


class NodeKind(str, Enum):
    """Kind of a report node, as named in the listing table heading."""
    FILE = "File"
    DIRECTORY = "Directory"


class FilePath(BaseModel):
    """A node location, absolute and relative to the root report directory."""
    model_config = ConfigDict(frozen=True)

    absolute: str
    relative: str   # always against the root base directory, '/'-separated


class CoverageStats(BaseModel):
    """
    Line coverage statistics of one node.

    Field aliases are the genhtml header names, so the mapping returned by
    the statistics extractor validates directly::

        CoverageStats.from_mapping({"Coverage": 62.5, "Total": 8, "Hit": 5})

    Categories (see https://arxiv.org/pdf/2008.07947):
        coverage: Coverage in percentage
        total: Covered + uncovered code (not including EUB, ECB, DUB, DCB)
        hit: Exercised code only (CBC + GBC + GNC + GIC)
        unc .. dcb: Differential categories, present only when the report
            was generated with a baseline
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    coverage: float = Field(alias="Coverage")
    total: float = Field(alias="Total")
    hit: float = Field(alias="Hit")

    unc: Optional[float] = Field(default=None, alias="UNC")  # Uncovered New Code
    lbc: Optional[float] = Field(default=None, alias="LBC")  # Lost Baseline Coverage
    uic: Optional[float] = Field(default=None, alias="UIC")  # Uncovered Included Code
    ubc: Optional[float] = Field(default=None, alias="UBC")  # Uncovered Baseline Code
    gbc: Optional[float] = Field(default=None, alias="GBC")  # Gained Baseline Coverage
    gic: Optional[float] = Field(default=None, alias="GIC")  # Gained coverage Included Code
    gnc: Optional[float] = Field(default=None, alias="GNC")  # Gained coverage New Code
    cbc: Optional[float] = Field(default=None, alias="CBC")  # Covered Baseline Code
    eub: Optional[float] = Field(default=None, alias="EUB")  # Excluded Uncovered Baseline
    ecb: Optional[float] = Field(default=None, alias="ECB")  # Excluded Covered Baseline
    dub: Optional[float] = Field(default=None, alias="DUB")  # Deleted Uncovered Baseline
    dcb: Optional[float] = Field(default=None, alias="DCB")  # Deleted Covered Baseline

    @field_validator("coverage", "total", "hit", mode="before")
    @classmethod
    def nan_from_null(cls, value):
        return null_to_nan(value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "CoverageStats":
        """Build from a header-name keyed mapping; unknown names are ignored."""
        return cls.model_validate(dict(mapping))

    @classmethod
    def zero(cls) -> "CoverageStats":
        return cls(coverage=0.0, total=0.0, hit=0.0)

    def categories(self) -> Dict[str, float]:
        """Optional categories present on this node, keyed by header name."""
        present = {}
        for name in OPTIONAL_CATEGORIES:
            value = getattr(self, name.lower())
            if value is not None:
                present[name] = value
        return present


class FileNode(BaseModel):
    """Leaf node: one source file row of a listing table."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["File"] = "File"
    path: FilePath
    stats: CoverageStats


class DirectoryNode(BaseModel):
    """
    Directory node.

    ``stats`` come from the parent's listing row for this directory; the
    directory's own summary table is not consulted.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["Directory"] = "Directory"
    path: FilePath
    stats: CoverageStats
    children: List["ReportNode"] = Field(default_factory=list)


ReportNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()


class ReportTree(BaseModel):
    """
    Fully materialised genhtml report.

    Attributes:
        directory: Absolute base directory of the root report
        root: Root directory node; its stats are the root summary totals
    """
    model_config = ConfigDict(frozen=True)

    directory: str
    root: DirectoryNode

    def walk(self) -> Iterator[Union[FileNode, DirectoryNode]]:
        """Yield every node below the root, depth first, in row order."""
        stack = list(reversed(self.root.children))
        while stack:
            node = stack.pop()
            yield node
            if node.kind == NodeKind.DIRECTORY:
                stack.extend(reversed(node.children))

    def count(self, kind: NodeKind) -> int:
        return sum(1 for node in self.walk() if node.kind == kind)

    def to_dict(self) -> Dict:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)

    def save_to_json(self, output_path: Union[str, Path], overwrite: bool = False) -> Path:
        """
        Save the tree as JSON (header-name stats keys, absent categories omitted).

        Raises:
            FileExistsError: If the file exists and overwrite is False
        """
        return write_json(self.to_dict(), output_path, overwrite=overwrite)

    @classmethod
    def load_from_json(cls, file_path: Union[str, Path]) -> "ReportTree":
        return cls.model_validate(read_json(file_path, "Report tree"))


def write_json(
    data: Dict,
    output_path: Union[str, Path],
    overwrite: bool = False,
    indent: int = 2,
) -> Path:
    """
    Write *data* to a .json file, creating parent directories.

    The suffix is forced to .json.

    Raises:
        FileExistsError: If the file exists and overwrite is False
    """
    output_path = Path(output_path).with_suffix('.json')
    if output_path.exists() and not overwrite:
        raise FileExistsError(f"File exists: {output_path}. Set overwrite=True.")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(dumps_json(data, indent=indent))
    return output_path


def read_json(file_path: Union[str, Path], label: str) -> Dict:
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"{label} file not found: {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def dumps_json(data: Dict, indent: int = 2) -> str:
    """
    Serialise *data* as strict JSON.

    Non-finite floats (unparseable statistics read leniently) are written
    as null, since JSON has no NaN.
    """
    return json.dumps(_finite_or_none(data), indent=indent, ensure_ascii=False, allow_nan=False)


def _finite_or_none(value):
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: _finite_or_none(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite_or_none(item) for item in value]
    return value
