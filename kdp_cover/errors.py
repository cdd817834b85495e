"""Errors raised by the cover geometry code.

Both derive from ValueError so callers that already catch ValueError for a
bad trim key or paper type keep working.
"""

from typing import Any, Optional


class CoverError(ValueError):
    """Base class for cover geometry errors"""


class InvalidArgument(CoverError):
    """An input is outside its allowed range or enumeration."""

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} {value!r}: {reason}")


class DegenerateGeometry(CoverError):
    """A computed safe zone has no usable area."""

    def __init__(self, panel: str, rect: Optional[Any] = None, message: str = ""):
        self.panel = panel
        self.rect = rect
        if not message:
            message = f"{panel} safe zone is degenerate"
            if rect is not None:
                message += f" ({rect.width:.4f} x {rect.height:.4f} in)"
        super().__init__(message)
