"""
Diff Generator Service - Pair lines and build side-by-side row records
"""

from __future__ import annotations

from pathlib import Path

from models.diff import (
    DiffResult,
    DiffRow,
    DiffStats,
    LinePairing,
    MarkKind,
    RowKind,
    Segment,
)

from .char_aligner import DEFAULT_MAX_TABLE_CELLS, lcs_matches
from .line_renderer import render_line_pair


class DiffGenerator:
    """Generate side-by-side diffs with character-level highlighting"""

    def __init__(
        self,
        pairing: LinePairing | str = LinePairing.POSITIONAL,
        max_table_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
        encoding: str = "utf-8",
    ):
        self.pairing = LinePairing(pairing)
        self.max_table_cells = max_table_cells
        self.encoding = encoding

    @classmethod
    def from_config(cls, config_manager) -> "DiffGenerator":
        """Build a generator from ConfigManager settings"""
        return cls(
            pairing=config_manager.get_pairing(),
            max_table_cells=config_manager.get_max_table_cells(),
            encoding=config_manager.get_encoding(),
        )

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """
        Split text on newlines only.

        A carriage return stays part of its line, and a trailing newline
        does not produce an extra empty line.
        """
        if not text:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def read_lines(self, path: str | Path) -> list[str]:
        """Read a file into lines. Raises OSError when it cannot be opened."""
        with open(path, encoding=self.encoding, errors="surrogateescape", newline="") as f:
            return self.split_lines(f.read())

    def compare_files(
        self,
        old_path: str | Path,
        new_path: str | Path,
        pairing: LinePairing | str | None = None,
    ) -> DiffResult:
        """Compare two files, named by their paths"""
        old_lines = self.read_lines(old_path)
        new_lines = self.read_lines(new_path)
        return self.compare_lines(
            old_lines, new_lines, str(old_path), str(new_path), pairing=pairing
        )

    def compare_text(
        self,
        old_text: str,
        new_text: str,
        old_name: str = "old",
        new_name: str = "new",
        pairing: LinePairing | str | None = None,
    ) -> DiffResult:
        """Compare two blocks of text"""
        return self.compare_lines(
            self.split_lines(old_text),
            self.split_lines(new_text),
            old_name,
            new_name,
            pairing=pairing,
        )

    def compare_lines(
        self,
        old_lines: list[str],
        new_lines: list[str],
        old_name: str = "old",
        new_name: str = "new",
        pairing: LinePairing | str | None = None,
    ) -> DiffResult:
        """Compare two line sequences and collect row records with statistics"""
        pairing = LinePairing(pairing) if pairing is not None else self.pairing

        if pairing is LinePairing.LCS:
            rows = self._pair_by_lcs(old_lines, new_lines)
        else:
            rows = self._pair_positionally(old_lines, new_lines, 0, 0)

        return DiffResult(
            old_name=old_name,
            new_name=new_name,
            pairing=pairing,
            rows=rows,
            stats=self._compute_stats(rows),
        )

    def _pair_positionally(
        self,
        old_lines: list[str],
        new_lines: list[str],
        old_offset: int,
        new_offset: int,
    ) -> list[DiffRow]:
        """Pair line i with line i; leftovers become one-sided rows"""
        rows = []
        for index in range(max(len(old_lines), len(new_lines))):
            old_no = old_offset + index + 1
            new_no = new_offset + index + 1
            if index < len(old_lines) and index < len(new_lines):
                rows.append(self._line_pair_row(old_lines[index], new_lines[index], old_no, new_no))
            elif index < len(old_lines):
                rows.append(self._old_only_row(old_lines[index], old_no))
            else:
                rows.append(self._new_only_row(new_lines[index], new_no))
        return rows

    def _pair_by_lcs(self, old_lines: list[str], new_lines: list[str]) -> list[DiffRow]:
        """Align whole lines first, then pair the gaps between matched lines positionally"""
        rows = []
        i = j = 0
        matches = lcs_matches(old_lines, new_lines, self.max_table_cells)
        for match_i, match_j in matches + [(len(old_lines), len(new_lines))]:
            rows.extend(
                self._pair_positionally(old_lines[i:match_i], new_lines[j:match_j], i, j)
            )
            if match_i < len(old_lines):
                rows.append(self._unchanged_row(old_lines[match_i], match_i + 1, match_j + 1))
            i, j = match_i + 1, match_j + 1
        return rows

    def _line_pair_row(self, old_line: str, new_line: str, old_no: int, new_no: int) -> DiffRow:
        if old_line == new_line:
            return self._unchanged_row(old_line, old_no, new_no)

        left, right = render_line_pair(old_line, new_line, self.max_table_cells)
        return DiffRow(
            kind=RowKind.CHANGED,
            left=left,
            right=right,
            old_line_no=old_no,
            new_line_no=new_no,
        )

    def _unchanged_row(self, line: str, old_no: int, new_no: int) -> DiffRow:
        return DiffRow(
            kind=RowKind.UNCHANGED,
            left=[Segment.plain(line)] if line else [],
            right=[Segment.plain(line)] if line else [],
            old_line_no=old_no,
            new_line_no=new_no,
        )

    def _old_only_row(self, line: str, old_no: int) -> DiffRow:
        return DiffRow(
            kind=RowKind.OLD_ONLY,
            left=[Segment.deletion(line)] if line else [],
            old_line_no=old_no,
        )

    def _new_only_row(self, line: str, new_no: int) -> DiffRow:
        return DiffRow(
            kind=RowKind.NEW_ONLY,
            right=[Segment.insertion(line)] if line else [],
            new_line_no=new_no,
        )

    def _compute_stats(self, rows: list[DiffRow]) -> DiffStats:
        stats = DiffStats(total_rows=len(rows))
        counters = {
            RowKind.UNCHANGED: "unchanged",
            RowKind.CHANGED: "changed",
            RowKind.OLD_ONLY: "old_only",
            RowKind.NEW_ONLY: "new_only",
        }
        for row in rows:
            field = counters[row.kind]
            setattr(stats, field, getattr(stats, field) + 1)
            for segment in row.left:
                if segment.mark_kind is MarkKind.DELETION:
                    stats.deleted_chars += len(segment.text)
            for segment in row.right:
                if segment.mark_kind is MarkKind.INSERTION:
                    stats.inserted_chars += len(segment.text)
        return stats
