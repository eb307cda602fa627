"""Build tables from CSV text, column/row results and DB-API cursors."""

from __future__ import annotations

import csv
import io
from typing import Any, Iterable, Sequence, TextIO

from gridtext import config as cfg
from gridtext.errors import EmptySource
from gridtext.logutils import logger
from gridtext.table import Table

DELIMITER_CANDIDATES = (",", ";", "\t", "|")


def detect_delimiter(sample: str) -> str:
    """Return the candidate delimiter occurring most often in ``sample``."""

    best = cfg.get("CSV_FALLBACK_DELIMITER", ";")
    best_count = 0
    for candidate in DELIMITER_CANDIDATES:
        count = sample.count(candidate)
        if count > best_count:
            best, best_count = candidate, count
    return best


def from_csv(source: TextIO | str, delimiter: str | None = None) -> Table:
    """Read CSV from ``source`` into a new :class:`Table`.

    The first record supplies the field names, the remaining records become
    rows of strings. Without ``delimiter`` it is detected from the start of
    the stream.
    """

    stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
    if delimiter is None:
        head = stream.read(cfg.get("CSV_SNIFF_BYTES", 4096))
        delimiter = detect_delimiter(head)
        logger.debug(f"detected CSV delimiter {delimiter!r}")
        stream = io.StringIO(head + stream.read())

    records = [record for record in csv.reader(stream, delimiter=delimiter) if record]
    if not records:
        raise EmptySource("CSV source holds no records")

    table = Table(records[0])
    for record in records[1:]:
        table.add_row(record)
    logger.debug(f"imported {table.row_count} CSV rows")
    return table


def _as_text(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return value


def from_rows(columns: Sequence[str], rows: Iterable[Sequence[Any]]) -> Table:
    """Build a table from column names and an iterable of value rows."""

    table = Table(columns)
    for row in rows:
        table.add_row([_as_text(value) for value in row])
    return table


def from_db_cursor(cursor: Any) -> Table:
    """Build a table from an executed DB-API 2.0 cursor."""

    description = cursor.description
    if description is None:
        raise EmptySource("cursor has no result set")
    columns = [column[0] for column in description]
    return from_rows(columns, cursor)
