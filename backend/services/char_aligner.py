"""
Char Aligner - Longest common subsequence alignment between two sequences

Works on any pair of sequences whose items compare with ==, so the same code
aligns characters within a line and whole lines within a file.
"""

from __future__ import annotations

from typing import Any, Sequence

from .errors import ResourceExhausted

DEFAULT_MAX_TABLE_CELLS = 4_000_000

Match = tuple[int, int]


def lcs_table(
    old: Sequence[Any],
    new: Sequence[Any],
    max_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> list[list[int]]:
    """
    Build the suffix LCS table.

    score[i][j] is the LCS length of old[i:] and new[j:]. The extra last row
    and column stay zero.
    """
    n, m = len(old), len(new)
    if max_cells is not None and n * m > max_cells:
        raise ResourceExhausted(n, m, max_cells)

    try:
        score = [[0] * (m + 1) for _ in range(n + 1)]
    except MemoryError:
        raise ResourceExhausted(n, m) from None

    for i in range(n - 1, -1, -1):
        row = score[i]
        below = score[i + 1]
        item = old[i]
        for j in range(m - 1, -1, -1):
            if item == new[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return score


def lcs_length(
    old: Sequence[Any],
    new: Sequence[Any],
    max_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> int:
    """Length of the longest common subsequence"""
    return lcs_table(old, new, max_cells)[0][0]


def lcs_matches(
    old: Sequence[Any],
    new: Sequence[Any],
    max_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> list[Match]:
    """
    Backtrack the LCS table into an ordered list of (old_index, new_index).

    On a tie the old index advances first, which picks one canonical
    alignment out of all optimal ones.
    """
    score = lcs_table(old, new, max_cells)
    n, m = len(old), len(new)

    matches: list[Match] = []
    i = j = 0
    while i < n and j < m:
        if old[i] == new[j]:
            matches.append((i, j))
            i += 1
            j += 1
        elif score[i + 1][j] >= score[i][j + 1]:
            i += 1
        else:
            j += 1
    return matches
