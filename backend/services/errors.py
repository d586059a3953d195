"""Diff error types shared by the services, routers and CLI"""

from __future__ import annotations


class DiffError(Exception):
    """Base class for diff failures"""


class UsageError(DiffError):
    """Command line invoked with the wrong arguments"""


class ResourceExhausted(DiffError):
    """Alignment table would not fit within the configured limit"""

    def __init__(self, rows: int, cols: int, limit: int | None = None):
        self.rows = rows
        self.cols = cols
        self.limit = limit
        if limit is None:
            message = f"Out of memory building a {rows}x{cols} alignment table"
        else:
            message = (
                f"Alignment table of {rows}x{cols} cells exceeds the limit of {limit} cells"
            )
        super().__init__(message)
