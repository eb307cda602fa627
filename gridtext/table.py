from __future__ import annotations

"""In-memory table with mutation, alignment, sort and filter state."""

from typing import Any, Iterable, Mapping, Sequence

from gridtext import config as cfg
from gridtext.errors import ColumnCountMismatch, ColumnNotFound, IndexOutOfRange
from gridtext.logutils import logger
from gridtext.models import Alignment, TableStyle
from gridtext.query import RowFilter, apply_query, find_field
from gridtext import renderers


class Table:
    """Field names plus rows of scalar values.

    The column count is enforced once a non-empty list of field names has
    been assigned; before that ``add_row`` accepts rows of any length.
    Alignment and sort state are keyed by field name, so renaming a field
    drops its alignment.
    """

    def __init__(self, field_names: Iterable[str] | None = None) -> None:
        self._field_names: list[str] = []
        self._rows: list[list[Any]] = []
        self._schema_established = False
        self._alignments: dict[str, Alignment] = {}
        self._sort_by: str | None = None
        self._reverse_sort = False
        self._row_filter: RowFilter | None = None
        self._style = TableStyle()
        if field_names is not None:
            self.set_field_names(field_names)

    # Schema -----------------------------------------------------------

    @property
    def field_names(self) -> list[str]:
        return list(self._field_names)

    @field_names.setter
    def field_names(self, names: Iterable[str]) -> None:
        self.set_field_names(names)

    def set_field_names(self, names: Iterable[str]) -> None:
        """Replace the field names without checking existing rows."""
        self._field_names = [str(name) for name in names]
        self._schema_established = bool(self._field_names)

    @property
    def schema_established(self) -> bool:
        return self._schema_established

    @property
    def rows(self) -> list[list[Any]]:
        return [list(row) for row in self._rows]

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    # Mutation ---------------------------------------------------------

    def add_row(self, values: Sequence[Any]) -> None:
        row = list(values)
        if self._schema_established and len(row) != len(self._field_names):
            raise ColumnCountMismatch("row", len(row), len(self._field_names))
        self._rows.append(row)
        logger.debug(f"added row {len(self._rows) - 1} with {len(row)} cells")

    def add_column(self, name: str, values: Sequence[Any]) -> None:
        """Append a column called ``name`` holding ``values``.

        On a table without rows one row is created per value; cells for the
        fields that already exist are left as ``None``.
        """

        column = list(values)
        if self._rows and len(column) != len(self._rows):
            raise ColumnCountMismatch("column", len(column), len(self._rows))
        existing = len(self._field_names)
        self._field_names.append(str(name))
        self._schema_established = True
        if not self._rows:
            self._rows = [[None] * existing + [value] for value in column]
        else:
            for row, value in zip(self._rows, column):
                row.append(value)
        logger.debug(f"added column {name!r} with {len(column)} values")

    def del_row(self, index: int) -> None:
        if not 0 <= index < len(self._rows):
            raise IndexOutOfRange(index, len(self._rows))
        del self._rows[index]
        logger.debug(f"deleted row {index}")

    def del_column(self, name: str) -> None:
        index = find_field(self._field_names, name)
        if index == -1:
            raise ColumnNotFound(name)
        del self._field_names[index]
        for row in self._rows:
            if index < len(row):
                del row[index]
        if not self._field_names:
            self._schema_established = False
        logger.debug(f"deleted column {name!r}")

    def clear_rows(self) -> None:
        self._rows = []

    def clear(self) -> None:
        self._rows = []
        self._field_names = []
        self._schema_established = False

    # Presentation state -----------------------------------------------

    @property
    def alignments(self) -> dict[str, Alignment]:
        return dict(self._alignments)

    def set_align(self, field: str, align: Alignment | str) -> None:
        self._alignments[field] = Alignment.parse(align)

    def set_align_all(self, align: Alignment | str) -> None:
        """Bind ``align`` to every current field name."""
        alignment = Alignment.parse(align)
        for name in self._field_names:
            self._alignments[name] = alignment

    @property
    def sort_by(self) -> str | None:
        return self._sort_by

    @property
    def reverse_sort(self) -> bool:
        return self._reverse_sort

    def set_sort_by(self, field: str | None, reverse: bool = False) -> None:
        """Sort rendered rows by ``field``; ``None`` disables sorting."""
        self._sort_by = field
        self._reverse_sort = reverse

    @property
    def row_filter(self) -> RowFilter | None:
        return self._row_filter

    def set_row_filter(self, row_filter: RowFilter | None) -> None:
        self._row_filter = row_filter

    @property
    def style(self) -> TableStyle:
        return self._style

    def set_style(self, style: TableStyle | Mapping[str, Any]) -> None:
        if not isinstance(style, TableStyle):
            style = TableStyle(**style)
        self._style = style

    # Rendering --------------------------------------------------------

    def working_rows(self) -> list[list[Any]]:
        """Return the filtered then sorted rows used for rendering."""
        return apply_query(
            self._field_names,
            self._rows,
            row_filter=self._row_filter,
            sort_by=self._sort_by,
            reverse=self._reverse_sort,
        )

    def view(self) -> renderers.TableView:
        return renderers.TableView.build(
            self._field_names, self.working_rows(), self._alignments
        )

    def render_ascii(self) -> str:
        return renderers.render_ascii(self.view())

    def render_text(self) -> str:
        return self.render_ascii()

    def render_unicode(self) -> str:
        return renderers.render_unicode(self.view())

    def render_markdown(self) -> str:
        return renderers.render_markdown(self.view())

    def render_csv(self) -> str:
        return renderers.render_csv(self.view())

    def render_json(self) -> str:
        return renderers.render_json(self.view())

    def render_html(self) -> str:
        return renderers.render_html(self.view())

    def render_latex(self) -> str:
        return renderers.render_latex(self.view())

    def render_mediawiki(self) -> str:
        return renderers.render_mediawiki(self.view())

    def get_formatted_string(self, fmt: str | None = None) -> str:
        """Render in the format named ``fmt`` (case-insensitive).

        ``None`` uses the configured ``DEFAULT_FORMAT``; unknown names
        render as ASCII.
        """
        if fmt is None:
            fmt = cfg.get("DEFAULT_FORMAT", "ascii")
        return renderers.render(self.view(), fmt)

    def __str__(self) -> str:
        return self.render_ascii()

    def __repr__(self) -> str:
        return f"Table(field_names={self._field_names!r}, rows={len(self._rows)})"
