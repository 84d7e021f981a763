from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidArgument, PixelIndexError
from .types import BLACK, BilevelRaster, Color, Encoding, GrayRaster

logger = logging.getLogger(__name__)

Rows = List[List[Color]]

_GRAY_METHODS = ("average", "luma")


def _check_max_intensity(value: int) -> None:
    if not 1 <= value <= 255:
        raise InvalidArgument(f"Max intensity must be in 1..255, got {value}")


class PixelBuffer:
    """
    Row-major grid of RGB pixels with a declared max intensity.

    Writes outside the canvas are ignored so shapes may hang off the edge;
    reads outside the canvas raise ``PixelIndexError``. Every stored channel
    is clamped to ``max_intensity`` on the way in. Whole-buffer
    transforms (rotate, resize) build a fresh grid and swap it in.
    """

    def __init__(
        self,
        width: int,
        height: int,
        max_intensity: int = 255,
        encoding: Encoding = Encoding.BINARY,
        fill: Color = BLACK,
    ) -> None:
        if width <= 0 or height <= 0:
            raise InvalidArgument(f"Canvas dimensions must be positive, got {width}x{height}")
        _check_max_intensity(max_intensity)
        self._width = width
        self._height = height
        self._max = max_intensity
        self._encoding = encoding
        self._rows: Rows = [[self.clamp(fill)] * width for _ in range(height)]

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Color]],
        max_intensity: int = 255,
        encoding: Encoding = Encoding.BINARY,
    ) -> "PixelBuffer":
        """Build a buffer from an existing grid (the grid is copied)."""
        if not rows or not rows[0]:
            raise InvalidArgument("Pixel grid must have at least one row and one column")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidArgument(f"Row {index} has {len(row)} pixels, expected {width}")
        buffer = cls(width, len(rows), max_intensity, encoding)
        buffer._rows = [[buffer.clamp(p) for p in row] for row in rows]
        return buffer

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int: return self._width

    @property
    def height(self) -> int: return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def max_intensity(self) -> int: return self._max

    @property
    def encoding(self) -> Encoding: return self._encoding

    def set_encoding(self, encoding: Encoding) -> None:
        self._encoding = encoding

    def rows(self) -> Rows:
        """Return a copy of the pixel grid."""
        return [list(row) for row in self._rows]

    def iter_rows(self) -> Iterable[List[Color]]:
        return iter(self._rows)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer.from_rows(self._rows, self._max, self._encoding)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._max == other._max
            and self._encoding == other._encoding
            and self._rows == other._rows
        )

    def __repr__(self) -> str:
        return (
            f"PixelBuffer({self._width}x{self._height}, max={self._max}, "
            f"encoding={self._encoding.magic})"
        )

    # =========================================================================
    # Pixel access
    # =========================================================================

    def clamp(self, color: Color) -> Color:
        """Return ``color`` with each channel limited to ``max_intensity``."""
        top = self._max
        if color.r <= top and color.g <= top and color.b <= top:
            return color
        return Color(min(color.r, top), min(color.g, top), min(color.b, top))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise PixelIndexError(x, y, self._width, self._height)
        return self._rows[y][x]

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a pixel; coordinates outside the canvas are ignored."""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._rows[y][x] = self.clamp(color)

    def fill(self, color: Color) -> None:
        color = self.clamp(color)
        for row in self._rows:
            row[:] = [color] * self._width

    def replace_rows(self, rows: Rows) -> None:
        """Swap in a freshly built grid and take its dimensions."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if height <= 0 or width <= 0 or any(len(row) != width for row in rows):
            raise InvalidArgument("Replacement grid must be a non-empty rectangle")
        self._rows = rows
        self._width = width
        self._height = height

    # =========================================================================
    # Whole-buffer transforms
    # =========================================================================

    def invert(self) -> None:
        top = self._max
        self._rows = [
            [Color(top - p.r, top - p.g, top - p.b) for p in row] for row in self._rows
        ]

    def flip(self) -> None:
        """Mirror left to right."""
        for row in self._rows:
            row.reverse()

    def flop(self) -> None:
        """Mirror top to bottom."""
        self._rows.reverse()

    def rotate_90_cw(self) -> None:
        old_h = self._height
        rotated = [
            [self._rows[old_h - 1 - y][x] for y in range(old_h)] for x in range(self._width)
        ]
        self.replace_rows(rotated)
        logger.debug("Rotated buffer to %dx%d", self._width, self._height)

    def set_max_intensity(self, value: int) -> None:
        """Rescale every channel to a new max intensity."""
        _check_max_intensity(value)
        old = self._max
        self._rows = [
            [
                Color(p.r * value // old, p.g * value // old, p.b * value // old)
                for p in row
            ]
            for row in self._rows
        ]
        self._max = value

    # =========================================================================
    # Format conversion boundary
    # =========================================================================

    def to_gray(self, method: str = "average") -> GrayRaster:
        if method not in _GRAY_METHODS:
            raise InvalidArgument(f"Unknown grayscale method '{method}'")
        if method == "luma":
            values = [
                [int(0.299 * p.r + 0.587 * p.g + 0.114 * p.b) for p in row]
                for row in self._rows
            ]
        else:
            values = [[(p.r + p.g + p.b) // 3 for p in row] for row in self._rows]
        return GrayRaster(self._width, self._height, self._max, values)

    def to_bilevel(self, threshold: Optional[int] = None) -> BilevelRaster:
        """Pixels whose average intensity exceeds ``max_intensity // 2`` are on."""
        if threshold is None:
            threshold = self._max // 2
        values = [[(p.r + p.g + p.b) // 3 > threshold for p in row] for row in self._rows]
        return BilevelRaster(self._width, self._height, values)
