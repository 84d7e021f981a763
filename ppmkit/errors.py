from __future__ import annotations

from typing import Optional


class PpmError(Exception):
    """Base class for all errors raised by ppmkit."""


class FormatError(PpmError, ValueError):
    """Malformed or truncated image data."""

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class PixelIndexError(PpmError, IndexError):
    """Read access outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside the {width}x{height} canvas")
        self.x = x
        self.y = y


class InvalidArgument(PpmError, ValueError):
    """Argument rejected before any state was touched."""
