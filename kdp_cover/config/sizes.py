# KDP cover reference data. Geometry is computed in inches;
# renderers convert to points (72 points = 1 inch).

from enum import Enum
from typing import Any, Dict, Tuple, Type, TypeVar

from kdp_cover.errors import InvalidArgument

INCH = 72.0

# (width, height) in inches
_TRIM_DIMENSIONS: Dict[str, Tuple[float, float]] = {
    "6x9": (6.0, 9.0),
    "8.5x11": (8.5, 11.0),
    "8x10": (8.0, 10.0),
    "7x10": (7.0, 10.0),
    "5.5x8.5": (5.5, 8.5),
    "5x8": (5.0, 8.0),
}


class TrimSize(str, Enum):
    """Final cut size of the book"""
    TRIM_6X9 = "6x9"
    TRIM_8_5X11 = "8.5x11"
    TRIM_8X10 = "8x10"
    TRIM_7X10 = "7x10"
    TRIM_5_5X8_5 = "5.5x8.5"
    TRIM_5X8 = "5x8"

    @property
    def width(self) -> float:
        return _TRIM_DIMENSIONS[self.value][0]

    @property
    def height(self) -> float:
        return _TRIM_DIMENSIONS[self.value][1]


class PaperColor(str, Enum):
    """Interior paper color class"""
    WHITE = "white"
    CREAM = "cream"


class BindingType(str, Enum):
    """Cover binding class"""
    PAPERBACK = "paperback"
    HARDCOVER = "hardcover"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Any, name: str) -> E:
    """Return `value` as a member of `enum_cls`, accepting the member or its string value."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    raise InvalidArgument(name, value, f"use one of {[m.value for m in enum_cls]}")
