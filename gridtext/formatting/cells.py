from __future__ import annotations

"""Conversion of arbitrary cell values to display text."""

from typing import Any


def format_cell(value: Any) -> str:
    """Return the display string for ``value``.

    Strings pass through, booleans render as ``true``/``false``, numbers use
    their plain ``str`` form and ``None`` renders empty. Never raises.
    """

    if isinstance(value, str):
        return value
    if value is None:
        return ""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception:
        return repr(value)


def format_row(row: Any) -> list[str]:
    return [format_cell(value) for value in row]
