from __future__ import annotations

import logging
from typing import List

from ..buffer import PixelBuffer
from ..errors import InvalidArgument
from ..types import Color

logger = logging.getLogger(__name__)


def neighborhood(buffer: PixelBuffer, x: int, y: int) -> List[Color]:
    """The 3x3 block around ``(x, y)``, clipped to the canvas."""
    pixels = []
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            nx, ny = x + dx, y + dy
            if buffer.in_bounds(nx, ny):
                pixels.append(buffer.get(nx, ny))
    return pixels


def average_color(pixels: List[Color]) -> Color:
    count = len(pixels)
    return Color(
        sum(p.r for p in pixels) // count,
        sum(p.g for p in pixels) // count,
        sum(p.b for p in pixels) // count,
    )


def resize(buffer: PixelBuffer, new_width: int, new_height: int) -> None:
    """
    Resample in place: each destination pixel is the mean of the 3x3
    neighbourhood around its source coordinate.

    Raises ``InvalidArgument`` without touching the buffer when either
    target dimension is not positive.
    """
    if new_width <= 0 or new_height <= 0:
        raise InvalidArgument(f"Resize target must be positive, got {new_width}x{new_height}")
    scale_x = buffer.width / new_width
    scale_y = buffer.height / new_height
    rows = []
    for y in range(new_height):
        source_y = int(y * scale_y)
        rows.append(
            [
                average_color(neighborhood(buffer, int(x * scale_x), source_y))
                for x in range(new_width)
            ]
        )
    logger.debug(
        "Resized %dx%d -> %dx%d", buffer.width, buffer.height, new_width, new_height
    )
    buffer.replace_rows(rows)
