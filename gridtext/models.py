from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Alignment(str, Enum):
    """Horizontal placement of text inside a padded cell."""

    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"

    @classmethod
    def parse(cls, value: "Alignment | str") -> "Alignment":
        """Return the alignment named by ``value``.

        Accepts an :class:`Alignment` or one of ``l``/``c``/``r`` and
        ``left``/``center``/``right`` in any case.
        """
        if isinstance(value, Alignment):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in {member.value, member.name.lower()}:
                return member
        raise ValueError(f"unknown alignment: {value!r}")


CellFormatter = Callable[[str, Any], str]


class TableStyle(BaseModel):
    """Appearance options for box-drawn tables.

    Every field is optional; ``None`` means the renderer default. The style
    is validated and kept on the table but renderers do not read it yet.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    border: Optional[bool] = None
    preserve_internal_border: Optional[bool] = None
    header: Optional[bool] = None
    hrules: Optional[Literal["FRAME", "HEADER", "ALL", "NONE"]] = None
    vrules: Optional[Literal["FRAME", "ALL", "NONE"]] = None
    int_format: Optional[str] = None  # e.g. ",d" or "03d"
    float_format: Optional[str] = None  # e.g. ".2f"
    custom_format: Dict[str, CellFormatter] = {}

    padding_width: Optional[int] = None
    left_padding_width: Optional[int] = None
    right_padding_width: Optional[int] = None

    vertical_char: Optional[str] = None
    horizontal_char: Optional[str] = None
    horizontal_align_char: Optional[str] = None
    junction_char: Optional[str] = None
    top_junction_char: Optional[str] = None
    bottom_junction_char: Optional[str] = None
    right_junction_char: Optional[str] = None
    left_junction_char: Optional[str] = None
    top_right_junction_char: Optional[str] = None
    top_left_junction_char: Optional[str] = None
    bottom_right_junction_char: Optional[str] = None
    bottom_left_junction_char: Optional[str] = None

    min_table_width: Optional[int] = None
    max_table_width: Optional[int] = None
    max_width: Optional[int] = None
    min_width: Optional[int] = None
    use_header_width: Optional[bool] = None
    break_on_hyphens: Optional[bool] = None

    @field_validator("hrules", "vrules", mode="before")
    @classmethod
    def _upper_rule(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator(
        "padding_width",
        "left_padding_width",
        "right_padding_width",
        "min_table_width",
        "max_table_width",
        "max_width",
        "min_width",
    )
    @classmethod
    def _non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("widths must not be negative")
        return value
