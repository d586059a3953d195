"""
Document Assembler - Render a DiffResult as a standalone two-column HTML page
"""

from __future__ import annotations

from pathlib import Path

from models.diff import DiffResult, DiffRow, RowKind

from .line_renderer import escape_html, segments_text, segments_to_html

STYLE = (
    "body { font-family: monospace; }\n"
    "table { width: 100%; border-collapse: collapse; }\n"
    "td { vertical-align: top; padding: 2px 8px; }\n"
    "th { background: #f0f0f0; padding: 4px; }\n"
    ".del { background:#ffecec; text-decoration:line-through; color:#a33; }\n"
    ".ins { background:#eaffea; color:#070; }\n"
    ".removed { background:#ffeeee; }\n"
    ".added { background:#eeffee; }\n"
)


def render_row(row: DiffRow) -> str:
    """One <tr> line for a row record"""
    if row.kind is RowKind.UNCHANGED:
        left = escape_html(segments_text(row.left))
        right = escape_html(segments_text(row.right))
        return f"<tr><td>{left}</td><td>{right}</td></tr>\n"

    if row.kind is RowKind.CHANGED:
        left = segments_to_html(row.left)
        right = segments_to_html(row.right)
        return f"<tr><td class='removed'>{left}</td><td class='added'>{right}</td></tr>\n"

    # One-sided rows are styled by the cell class alone
    if row.kind is RowKind.OLD_ONLY:
        left = escape_html(segments_text(row.left))
        return f"<tr><td class='removed'>{left}</td><td></td></tr>\n"

    right = escape_html(segments_text(row.right))
    return f"<tr><td></td><td class='added'>{right}</td></tr>\n"


def render_document(result: DiffResult) -> str:
    """Full HTML page: style block, heading, header row, then one row per record"""
    old_name = escape_html(result.old_name)
    new_name = escape_html(result.new_name)

    parts = [
        "<html><head><meta charset='UTF-8'><style>\n",
        STYLE,
        "</style></head><body>\n",
        f"<h2>Diff between: {old_name} (old) and {new_name} (new)</h2>\n",
        "<table border='1'>\n",
        f"<tr><th>{old_name} (old)</th><th>{new_name} (new)</th></tr>\n",
    ]
    parts.extend(render_row(row) for row in result.rows)
    parts.append("</table></body></html>")
    return "".join(parts)


def write_document(result: DiffResult, path: str | Path, encoding: str = "utf-8") -> Path:
    """Write the rendered page. Raises OSError when the path cannot be opened."""
    path = Path(path)
    with open(path, "w", encoding=encoding, errors="surrogateescape", newline="") as f:
        f.write(render_document(result))
    return path
