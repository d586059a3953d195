"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class MarkKind(str, Enum):
    """How a segment is highlighted"""

    NONE = "none"
    DELETION = "deletion"
    INSERTION = "insertion"


class RowKind(str, Enum):
    """Classification of a side-by-side row"""

    UNCHANGED = "unchanged"
    CHANGED = "changed"
    OLD_ONLY = "old-only"
    NEW_ONLY = "new-only"


class LinePairing(str, Enum):
    """Strategy used to pair old lines with new lines"""

    POSITIONAL = "positional"
    LCS = "lcs"


class Segment(BaseModel):
    """A run of raw (unescaped) text from one line"""

    text: str
    marked: bool = False
    mark_kind: MarkKind = MarkKind.NONE

    @classmethod
    def plain(cls, text: str) -> "Segment":
        return cls(text=text)

    @classmethod
    def deletion(cls, text: str) -> "Segment":
        return cls(text=text, marked=True, mark_kind=MarkKind.DELETION)

    @classmethod
    def insertion(cls, text: str) -> "Segment":
        return cls(text=text, marked=True, mark_kind=MarkKind.INSERTION)


class DiffRow(BaseModel):
    """One row of the side-by-side comparison"""

    kind: RowKind
    left: list[Segment] = []
    right: list[Segment] = []
    old_line_no: int | None = None  # 1-indexed
    new_line_no: int | None = None  # 1-indexed


class DiffStats(BaseModel):
    """Row and character counts for a comparison"""

    total_rows: int = 0
    unchanged: int = 0
    changed: int = 0
    old_only: int = 0
    new_only: int = 0
    deleted_chars: int = 0
    inserted_chars: int = 0


class DiffResult(BaseModel):
    """Complete side-by-side diff of two line sequences"""

    old_name: str
    new_name: str
    pairing: LinePairing = LinePairing.POSITIONAL
    rows: list[DiffRow]
    stats: DiffStats


class CompareRequest(BaseModel):
    """Request to compare two texts"""

    old_text: str
    new_text: str
    old_name: str = "old"
    new_name: str = "new"
    pairing: LinePairing | None = None  # falls back to configured pairing


class LineDiffRequest(BaseModel):
    """Request to compare a single pair of lines"""

    old_line: str
    new_line: str


class LineDiffResponse(BaseModel):
    """Character-level comparison of a single pair of lines"""

    matches: list[tuple[int, int]] = Field(default_factory=list)
    lcs_length: int
    left: list[Segment]
    right: list[Segment]
    left_html: str
    right_html: str
