"""Errors raised by table mutation and import."""

from __future__ import annotations


class TableError(Exception):
    """Base error for table operations."""


class ColumnCountMismatch(TableError, ValueError):
    """Raised when a row or column length disagrees with the table shape."""

    def __init__(self, kind: str, actual: int, expected: int) -> None:
        self.kind = kind
        self.actual = actual
        self.expected = expected
        noun = "columns" if kind == "row" else "rows"
        super().__init__(f"{kind} has {actual} {noun}, expected {expected}")


class IndexOutOfRange(TableError, IndexError):
    """Raised when a row index is outside the current bounds."""

    def __init__(self, index: int, row_count: int) -> None:
        self.index = index
        self.row_count = row_count
        super().__init__(f"row index {index} out of range (table has {row_count} rows)")


class ColumnNotFound(TableError, LookupError):
    """Raised when no field carries the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"column {name!r} not found")


class EmptySource(TableError, ValueError):
    """Raised when an import source holds no records."""
