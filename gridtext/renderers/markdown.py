"""GitHub-flavoured Markdown tables."""

from __future__ import annotations

from typing import Sequence

from .base import TableView, empty_table_text


def _md_line(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_markdown(view: TableView) -> str:
    """Render ``view`` as a Markdown table.

    Cells are not padded and alignment is not reflected in the separator.
    """

    if not view.field_names:
        return empty_table_text()
    lines = [
        _md_line(view.field_names),
        _md_line(["---"] * len(view.field_names)),
    ]
    lines.extend(_md_line(row) for row in view.text_rows())
    return "\n".join(lines)
