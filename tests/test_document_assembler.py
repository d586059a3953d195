"""Tests for the HTML document shell."""

from __future__ import annotations

from services.diff_generator import DiffGenerator
from services.document_assembler import render_document, render_row, write_document

HEAD = (
    "<html><head><meta charset='UTF-8'><style>\n"
    "body { font-family: monospace; }\n"
    "table { width: 100%; border-collapse: collapse; }\n"
    "td { vertical-align: top; padding: 2px 8px; }\n"
    "th { background: #f0f0f0; padding: 4px; }\n"
    ".del { background:#ffecec; text-decoration:line-through; color:#a33; }\n"
    ".ins { background:#eaffea; color:#070; }\n"
    ".removed { background:#ffeeee; }\n"
    ".added { background:#eeffee; }\n"
    "</style></head><body>\n"
)


def test_full_document():
    result = DiffGenerator().compare_lines(["a", "b"], ["a", "c", "d"], "old.txt", "new.txt")
    expected = (
        HEAD
        + "<h2>Diff between: old.txt (old) and new.txt (new)</h2>\n"
        + "<table border='1'>\n"
        + "<tr><th>old.txt (old)</th><th>new.txt (new)</th></tr>\n"
        + "<tr><td>a</td><td>a</td></tr>\n"
        + "<tr><td class='removed'><span class='del'>b</span></td>"
        + "<td class='added'><span class='ins'>c</span></td></tr>\n"
        + "<tr><td></td><td class='added'>d</td></tr>\n"
        + "</table></body></html>"
    )
    assert render_document(result) == expected


def test_old_only_row_has_no_span():
    result = DiffGenerator().compare_lines(["x", "<gone>"], ["x"])
    assert render_row(result.rows[1]) == "<tr><td class='removed'>&lt;gone&gt;</td><td></td></tr>\n"


def test_changed_row_escapes_matched_characters():
    result = DiffGenerator().compare_lines(['a "b"'], ['a "c"'])
    assert render_row(result.rows[0]) == (
        "<tr><td class='removed'>a &quot;<span class='del'>b</span>&quot;</td>"
        "<td class='added'>a &quot;<span class='ins'>c</span>&quot;</td></tr>\n"
    )


def test_names_are_escaped():
    result = DiffGenerator().compare_lines([], [], "a&b", "<c>")
    document = render_document(result)
    assert "<h2>Diff between: a&amp;b (old) and &lt;c&gt; (new)</h2>\n" in document
    assert document.endswith("</table></body></html>")


def test_write_document(tmp_path):
    result = DiffGenerator().compare_lines(["é"], ["e"])
    path = write_document(result, tmp_path / "out.html")
    assert path.read_text(encoding="utf-8") == render_document(result)
