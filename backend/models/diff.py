"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """Source languages with known comment syntax"""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    CPP = "cpp"
    JAVA = "java"
    GO = "go"
    RUST = "rust"


class DiffLineType(str, Enum):
    """Tag of a single aligned line"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class DiffLine(BaseModel):
    """One line of aligned output"""

    model_config = ConfigDict(frozen=True)

    type: DiffLineType
    content: str


class DiffGroup(BaseModel):
    """Contiguous run of diff lines sharing the same type"""

    type: DiffLineType
    lines: list[DiffLine]


class DiffStats(BaseModel):
    """Line counts taken from an aligned diff"""

    model_config = ConfigDict(populate_by_name=True)

    lines_added: int = Field(0, alias="linesAdded")
    lines_removed: int = Field(0, alias="linesRemoved")
    lines_unchanged: int = Field(0, alias="linesUnchanged")


class DifferenceSummary(BaseModel):
    """Trimmed-line summary of what changed between two listings"""

    added: list[str] = []
    removed: list[str] = []
    modified: list[str] = []  # "old → new"


class DiffComparison(BaseModel):
    """Brute force vs optimized narrative, immutable once built"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    brute_force_name: str = Field(alias="bruteForceName")
    brute_force_points: tuple[str, ...] = Field(alias="bruteForcePoints")
    optimized_name: str = Field(alias="optimizedName")
    optimized_points: tuple[str, ...] = Field(alias="optimizedPoints")
