"""Box-drawn tables: ASCII (byte widths) and Unicode (code-point widths)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from gridtext.formatting.layout import (
    WidthMeasure,
    byte_width,
    codepoint_width,
    compute_layout,
)

from .base import TableView, empty_table_text


@dataclass(frozen=True)
class BoxChars:
    """Characters used to draw one family of borders."""

    horizontal: str
    vertical: str
    top: tuple[str, str, str]
    middle: tuple[str, str, str]
    bottom: tuple[str, str, str]


ASCII_BOX = BoxChars(
    horizontal="-",
    vertical="|",
    top=("+", "+", "+"),
    middle=("+", "+", "+"),
    bottom=("+", "+", "+"),
)

UNICODE_BOX = BoxChars(
    horizontal="─",
    vertical="│",
    top=("┌", "┬", "┐"),
    middle=("├", "┼", "┤"),
    bottom=("└", "┴", "┘"),
)


def _rule(widths: Sequence[int], fill: str, junctions: tuple[str, str, str]) -> str:
    left, mid, right = junctions
    return left + mid.join(fill * (width + 2) for width in widths) + right


def _line(cells: Sequence[str], vertical: str) -> str:
    return vertical + "".join(f" {cell} {vertical}" for cell in cells)


def render_box(view: TableView, chars: BoxChars, measure: WidthMeasure) -> str:
    """Render ``view`` as a framed table drawn with ``chars``."""

    if not view.field_names:
        return empty_table_text()

    layout = compute_layout(view.field_names, view.rows, view.alignments, measure)
    lines = [
        _rule(layout.widths, chars.horizontal, chars.top),
        _line(layout.padded_header(), chars.vertical),
        _rule(layout.widths, chars.horizontal, chars.middle),
    ]
    lines.extend(_line(row, chars.vertical) for row in layout.padded_rows())
    lines.append(_rule(layout.widths, chars.horizontal, chars.bottom))
    return "\n".join(lines)


def render_ascii(view: TableView) -> str:
    return render_box(view, ASCII_BOX, byte_width)


def render_unicode(view: TableView) -> str:
    return render_box(view, UNICODE_BOX, codepoint_width)
