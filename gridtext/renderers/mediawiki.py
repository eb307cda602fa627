"""MediaWiki table markup. Cell text is emitted verbatim."""

from __future__ import annotations

from .base import TableView


def render_mediawiki(view: TableView) -> str:
    lines = ['{| class="wikitable"']
    if view.field_names:
        lines.append("|-")
        lines.append("! " + " !! ".join(view.field_names))
    for row in view.text_rows():
        lines.append("|-")
        lines.append("| " + " || ".join(row))
    lines.append("|}")
    return "\n".join(lines)
