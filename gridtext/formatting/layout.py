from __future__ import annotations

"""Column width computation and cell padding."""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from gridtext.formatting.cells import format_cell
from gridtext.models import Alignment

WidthMeasure = Callable[[str], int]


def byte_width(text: str) -> int:
    """Width of ``text`` in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def codepoint_width(text: str) -> int:
    """Width of ``text`` in Unicode code points.

    Wide East-Asian characters count once, so they misalign in terminals.
    """
    return len(text)


def pad(
    text: str,
    width: int,
    align: Alignment = Alignment.LEFT,
    measure: WidthMeasure = byte_width,
) -> str:
    """Pad ``text`` with spaces up to ``width`` units. Never truncates."""

    missing = width - measure(text)
    if missing <= 0:
        return text
    if align is Alignment.RIGHT:
        return " " * missing + text
    if align is Alignment.CENTER:
        left = missing // 2
        return " " * left + text + " " * (missing - left)
    return text + " " * missing


@dataclass(frozen=True)
class Layout:
    """Formatted cells plus the per-column widths and alignments."""

    headers: tuple[str, ...]
    cells: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]
    aligns: tuple[Alignment, ...]
    measure: WidthMeasure = byte_width

    def padded_header(self) -> list[str]:
        return self._pad_line(self.headers)

    def padded_rows(self) -> list[list[str]]:
        return [self._pad_line(row) for row in self.cells]

    def _pad_line(self, line: Sequence[str]) -> list[str]:
        return [
            pad(text, width, align, self.measure)
            for text, width, align in zip(line, self.widths, self.aligns)
        ]


def _fit_row(row: Sequence[Any], count: int) -> tuple[str, ...]:
    cells = [format_cell(value) for value in row[:count]]
    cells.extend("" for _ in range(count - len(cells)))
    return tuple(cells)


def compute_layout(
    field_names: Sequence[str],
    rows: Sequence[Sequence[Any]],
    alignments: Mapping[str, Alignment] | None = None,
    measure: WidthMeasure = byte_width,
) -> Layout:
    """Return the :class:`Layout` for ``rows`` under ``field_names``.

    Rows are fitted to the field count: missing cells render empty and
    surplus cells are dropped.
    """

    alignments = alignments or {}
    headers = tuple(field_names)
    count = len(headers)
    cells = tuple(_fit_row(row, count) for row in rows)

    widths = [measure(name) for name in headers]
    for row in cells:
        for index, text in enumerate(row):
            widths[index] = max(widths[index], measure(text))

    aligns = tuple(alignments.get(name, Alignment.LEFT) for name in headers)
    return Layout(
        headers=headers,
        cells=cells,
        widths=tuple(widths),
        aligns=aligns,
        measure=measure,
    )
