"""
Pydantic models for the difference between two genhtml reports.

Only paths that differ are represented; an unchanged subtree has no node.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .report import NodeKind, null_to_nan, read_json, write_json


class ChangeType(str, Enum):
    """
    Type of difference between two nodes.

    - added: node exists only in the after report
    - removed: node exists only in the before report
    - changed: node exists in both but has changed stats or children
    """
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class DiffStats(BaseModel):
    """
    Coverage statistics of the after node and their change from the before node.

    For an added node the before side is an all-zero baseline, so each delta
    equals the value itself.
    """
    model_config = ConfigDict(frozen=True)

    coverage: float
    total: float
    hit: float
    coverage_delta: float
    total_delta: float
    hit_delta: float
    category_deltas: Dict[str, float] = Field(default_factory=dict)

    @field_validator(
        "coverage", "total", "hit", "coverage_delta", "total_delta", "hit_delta", mode="before",
    )
    @classmethod
    def nan_from_null(cls, value):
        return null_to_nan(value)

    @field_validator("category_deltas", mode="before")
    @classmethod
    def category_nan_from_null(cls, value):
        if isinstance(value, dict):
            return {name: null_to_nan(delta) for name, delta in value.items()}
        return value


class DiffNode(BaseModel):
    """
    One differing path.

    Attributes:
        change: Type of difference
        kind: File or Directory
        path: Relative path key shared by both reports
        stats: Statistics delta (absent for removed nodes)
        children: Differing descendants (directories only)
    """
    model_config = ConfigDict(frozen=True)

    change: ChangeType
    kind: NodeKind
    path: str
    stats: Optional[DiffStats] = None
    children: Optional[List["DiffNode"]] = None


DiffNode.model_rebuild()


class DiffRoot(BaseModel):
    """Root stats delta plus the differences among the root's children."""
    model_config = ConfigDict(frozen=True)

    stats: Optional[DiffStats] = None
    children: List[DiffNode] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.stats is None and not self.children

    def walk(self) -> Iterator[DiffNode]:
        """Yield every diff node, depth first, parents before children."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def count(self, change: ChangeType) -> int:
        return sum(1 for node in self.walk() if node.change == change)

    def to_dict(self) -> Dict:
        return self.model_dump(mode='json', exclude_none=True)

    def save_to_json(
        self,
        output_path: Union[str, Path],
        overwrite: bool = False,
        indent: int = 2,
    ) -> Path:
        """
        Save the diff as JSON; absent stats and children are omitted.

        Raises:
            FileExistsError: If the file exists and overwrite is False
        """
        return write_json(self.to_dict(), output_path, overwrite=overwrite, indent=indent)

    @classmethod
    def load_from_json(cls, file_path: Union[str, Path]) -> "DiffRoot":
        return cls.model_validate(read_json(file_path, "Diff"))
