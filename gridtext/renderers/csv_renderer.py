"""CSV rendering of the header and working rows."""

from __future__ import annotations

import csv
import io

from .base import TableView


def render_csv(view: TableView) -> str:
    """Return ``view`` as CSV text, one ``\\n``-terminated record per line."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(view.field_names)
    writer.writerows(view.text_rows())
    return buffer.getvalue()
