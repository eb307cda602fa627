"""Render tabular data as text, markup and data formats.

The central type is :class:`Table`; the import helpers build one from CSV
text, generic column/row results or a DB-API cursor.
"""

from .errors import (
    ColumnCountMismatch,
    ColumnNotFound,
    EmptySource,
    IndexOutOfRange,
    TableError,
)
from .formatting import format_cell
from .importers import from_csv, from_db_cursor, from_rows
from .models import Alignment, TableStyle
from .table import Table

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "ColumnCountMismatch",
    "ColumnNotFound",
    "EmptySource",
    "IndexOutOfRange",
    "Table",
    "TableError",
    "TableStyle",
    "format_cell",
    "from_csv",
    "from_db_cursor",
    "from_rows",
]
