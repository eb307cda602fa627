"""HTML ``<table>`` rendering."""

from __future__ import annotations

from .base import TableView

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)


def html_escape(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def render_html(view: TableView) -> str:
    header = "".join(f"<th>{html_escape(name)}</th>" for name in view.field_names)
    lines = ['<table border="1">', f"<tr>{header}</tr>"]
    for row in view.text_rows():
        cells = "".join(f"<td>{html_escape(cell)}</td>" for cell in row)
        lines.append(f"<tr>{cells}</tr>")
    lines.append("</table>")
    return "\n".join(lines)
