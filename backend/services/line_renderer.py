"""
Line Renderer - Annotate a pair of lines with character deletions and insertions
"""

from __future__ import annotations

from models.diff import MarkKind, Segment

from .char_aligner import DEFAULT_MAX_TABLE_CELLS, Match, lcs_matches

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)

_SPAN_CLASSES = {
    MarkKind.DELETION: "del",
    MarkKind.INSERTION: "ins",
}


def escape_html(text: str) -> str:
    """Escape &, <, > and double quotes. Single quotes are left alone."""
    return text.translate(_ESCAPES)


def _render_side(
    line: str,
    positions: list[int],
    make_marked,
) -> list[Segment]:
    """Split line into plain and marked runs given its matched positions"""
    segments: list[Segment] = []
    plain: list[str] = []
    cursor = 0

    def flush_plain():
        if plain:
            segments.append(Segment.plain("".join(plain)))
            plain.clear()

    for pos in positions:
        if cursor < pos:
            flush_plain()
            segments.append(make_marked(line[cursor:pos]))
        plain.append(line[pos])
        cursor = pos + 1

    flush_plain()
    if cursor < len(line):
        segments.append(make_marked(line[cursor:]))
    return segments


def render_old_segments(
    old_line: str,
    new_line: str,
    matches: list[Match] | None = None,
    max_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> list[Segment]:
    """Old line with every unmatched run marked as a deletion"""
    if matches is None:
        matches = lcs_matches(old_line, new_line, max_cells)
    return _render_side(old_line, [i for i, _ in matches], Segment.deletion)


def render_new_segments(
    old_line: str,
    new_line: str,
    matches: list[Match] | None = None,
    max_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> list[Segment]:
    """New line with every unmatched run marked as an insertion"""
    if matches is None:
        matches = lcs_matches(old_line, new_line, max_cells)
    return _render_side(new_line, [j for _, j in matches], Segment.insertion)


def render_line_pair(
    old_line: str,
    new_line: str,
    max_cells: int | None = DEFAULT_MAX_TABLE_CELLS,
) -> tuple[list[Segment], list[Segment]]:
    """Render both sides from a single alignment"""
    matches = lcs_matches(old_line, new_line, max_cells)
    return (
        render_old_segments(old_line, new_line, matches),
        render_new_segments(old_line, new_line, matches),
    )


def segments_to_html(segments: list[Segment]) -> str:
    """Escape segments and wrap marked runs in del/ins spans"""
    parts = []
    for segment in segments:
        text = escape_html(segment.text)
        if segment.marked:
            parts.append(f"<span class='{_SPAN_CLASSES[segment.mark_kind]}'>{text}</span>")
        else:
            parts.append(text)
    return "".join(parts)


def segments_text(segments: list[Segment]) -> str:
    """Raw text of the segments with all markers dropped"""
    return "".join(segment.text for segment in segments)
