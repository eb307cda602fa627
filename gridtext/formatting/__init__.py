"""Cell formatting and layout helpers shared by the renderers."""

from .cells import format_cell, format_row
from .layout import (
    Layout,
    WidthMeasure,
    byte_width,
    codepoint_width,
    compute_layout,
    pad,
)

__all__ = [
    "Layout",
    "WidthMeasure",
    "byte_width",
    "codepoint_width",
    "compute_layout",
    "format_cell",
    "format_row",
    "pad",
]
