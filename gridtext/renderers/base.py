from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from gridtext import config as cfg
from gridtext.formatting.cells import format_cell
from gridtext.models import Alignment


@dataclass(frozen=True)
class TableView:
    """Snapshot of a table prepared for a single render call."""

    field_names: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()
    alignments: Mapping[str, Alignment] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        field_names,
        rows=(),
        alignments: Mapping[str, Alignment] | None = None,
    ) -> "TableView":
        return cls(
            field_names=tuple(field_names),
            rows=tuple(tuple(row) for row in rows),
            alignments=dict(alignments or {}),
        )

    def text_rows(self) -> list[list[str]]:
        """Rows as display strings, each row keeping its own length."""
        return [[format_cell(value) for value in row] for row in self.rows]


Renderer = Callable[[TableView], str]


def empty_table_text() -> str:
    return cfg.get("EMPTY_TABLE_TEXT", "(no fields)")
