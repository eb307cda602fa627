"""JSON rendering: one object per row keyed by field name."""

from __future__ import annotations

import json
from typing import Any

from gridtext import config as cfg

from .base import TableView


def row_objects(view: TableView) -> list[dict[str, Any]]:
    """Map every row to ``{field: raw value}`` for the fields it has."""

    objects: list[dict[str, Any]] = []
    for row in view.rows:
        objects.append(
            {name: value for name, value in zip(view.field_names, row)}
        )
    return objects


def render_json(view: TableView) -> str:
    return json.dumps(
        row_objects(view),
        ensure_ascii=False,
        indent=cfg.get("JSON_INDENT", 2),
        default=_json_default,
    )


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if hasattr(value, "isoformat"):
        try:
            return value.isoformat()
        except TypeError:
            pass
    return str(value)
