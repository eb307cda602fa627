"""Filter and sort a snapshot of table rows for rendering."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from gridtext.formatting.cells import format_cell
from gridtext.logutils import logger

Row = list[Any]
RowFilter = Callable[[Row], bool]


def find_field(field_names: Sequence[str], name: str) -> int:
    """Return the index of the first field called ``name`` or ``-1``."""
    for index, field in enumerate(field_names):
        if field == name:
            return index
    return -1


def filter_rows(rows: Sequence[Sequence[Any]], row_filter: RowFilter) -> list[Row]:
    """Keep the rows accepted by ``row_filter`` in their original order."""
    return [list(row) for row in rows if row_filter(list(row))]


def sort_rows(rows: Sequence[Sequence[Any]], index: int, reverse: bool = False) -> list[Row]:
    """Return ``rows`` stably sorted by the display text of column ``index``."""

    def _key(row: Sequence[Any]) -> str:
        # code-point order of str equals UTF-8 byte order
        return format_cell(row[index]) if index < len(row) else ""

    return [list(row) for row in sorted(rows, key=_key, reverse=reverse)]


def apply_query(
    field_names: Sequence[str],
    rows: Sequence[Sequence[Any]],
    row_filter: RowFilter | None = None,
    sort_by: str | None = None,
    reverse: bool = False,
) -> list[Row]:
    """Return the working row set: ``rows`` filtered, then sorted.

    The input rows are never reordered or mutated. An unknown ``sort_by``
    leaves the filtered rows in table order.
    """

    working = filter_rows(rows, row_filter) if row_filter is not None else [list(r) for r in rows]
    if not sort_by:
        return working

    index = find_field(field_names, sort_by)
    if index == -1:
        logger.debug(f"sort key {sort_by!r} matches no field, rows left unsorted")
        return working
    return sort_rows(working, index, reverse)
