"""Models module - Pydantic data models"""

from .diff import (
    CompareRequest,
    DiffResult,
    DiffRow,
    DiffStats,
    LineDiffRequest,
    LineDiffResponse,
    LinePairing,
    MarkKind,
    RowKind,
    Segment,
)

__all__ = [
    "CompareRequest",
    "DiffResult",
    "DiffRow",
    "DiffStats",
    "LineDiffRequest",
    "LineDiffResponse",
    "LinePairing",
    "MarkKind",
    "RowKind",
    "Segment",
]
