"""
Shape drawing primitives.

Every function writes through ``PixelBuffer.set``, so any part of a shape
that falls outside the canvas is silently clipped.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence

from ..buffer import PixelBuffer
from ..errors import InvalidArgument
from ..settings import RenderSettings
from ..types import Color, Point


def _require_points(points: Sequence[Point]) -> None:
    if not points:
        raise InvalidArgument("A polygon needs at least one vertex")


# =============================================================================
# Line
# =============================================================================

def draw_line(buffer: PixelBuffer, p1: Point, p2: Point, color: Color) -> None:
    """Bresenham line from ``p1`` to ``p2``, both endpoints included."""
    x, y = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    dx = abs(x2 - x)
    dy = abs(y2 - y)
    sx = 1 if x < x2 else -1
    sy = 1 if y < y2 else -1
    err = dx - dy

    while True:
        buffer.set(x, y, color)
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


# =============================================================================
# Triangle
# =============================================================================

def draw_triangle(buffer: PixelBuffer, p1: Point, p2: Point, p3: Point, color: Color) -> None:
    draw_line(buffer, p1, p2, color)
    draw_line(buffer, p2, p3, color)
    draw_line(buffer, p3, p1, color)


def _edge_x(start: Point, end: Point, y: int) -> int:
    # Callers guarantee start.y != end.y.
    return int(start.x + (y - start.y) * (end.x - start.x) / (end.y - start.y))


def _fill_span(buffer: PixelBuffer, x1: int, x2: int, y: int, color: Color) -> None:
    left = max(min(x1, x2), 0)
    right = min(max(x1, x2), buffer.width - 1)
    for x in range(left, right + 1):
        buffer.set(x, y, color)


def draw_filled_triangle(buffer: PixelBuffer, p1: Point, p2: Point, p3: Point, color: Color) -> None:
    """
    Scanline fill between the long edge and the two short edges.

    Rows above the middle vertex follow top->mid and rows below it follow
    mid->bottom. Renderers that pair top->bottom with mid->bottom on every row
    produce different pixels, and so does the Sierpinski triangle built on
    this fill. Scanlines are clipped to the canvas before any edge is
    walked.
    """
    top, mid, bottom = sorted((p1, p2, p3), key=lambda p: p.y)

    if top.y == bottom.y:  # Degenerate: all three on one row
        xs = (top.x, mid.x, bottom.x)
        if 0 <= top.y < buffer.height:
            _fill_span(buffer, min(xs), max(xs), top.y, color)
        return

    for y in range(max(top.y, 0), min(bottom.y, buffer.height - 1) + 1):
        x_long = _edge_x(top, bottom, y)
        if y < mid.y:
            x_short = _edge_x(top, mid, y)
        elif mid.y == bottom.y:
            x_short = mid.x
        else:
            x_short = _edge_x(mid, bottom, y)
        _fill_span(buffer, x_long, x_short, y, color)


# =============================================================================
# Rectangle
# =============================================================================

def draw_rectangle(buffer: PixelBuffer, origin: Point, width: int, height: int, color: Color) -> None:
    """Outline with corners at ``origin`` and ``origin + (width, height)``."""
    top_right = Point(origin.x + width, origin.y)
    bottom_left = Point(origin.x, origin.y + height)
    bottom_right = Point(origin.x + width, origin.y + height)
    draw_line(buffer, origin, top_right, color)
    draw_line(buffer, top_right, bottom_right, color)
    draw_line(buffer, bottom_right, bottom_left, color)
    draw_line(buffer, bottom_left, origin, color)


def draw_filled_rectangle(buffer: PixelBuffer, origin: Point, width: int, height: int, color: Color) -> None:
    """Fill ``[x, x+width) x [y, y+height)`` intersected with the canvas."""
    x0 = max(origin.x, 0)
    y0 = max(origin.y, 0)
    x1 = min(origin.x + width, buffer.width)
    y1 = min(origin.y + height, buffer.height)
    if x1 <= x0 or y1 <= y0:
        return
    for y in range(y0, y1):
        for x in range(x0, x1):
            buffer.set(x, y, color)


# =============================================================================
# Circle
# =============================================================================

def draw_circle(
    buffer: PixelBuffer,
    center: Point,
    radius: int,
    color: Color,
    settings: Optional[RenderSettings] = None,
) -> None:
    """
    Plot every pixel whose distance from ``center`` lies within
    ``circle_tolerance`` of ``radius * circle_radius_scale``.

    With the default settings (0.85 and 0.5) the ring is smaller than
    ``radius``.
    """
    settings = settings or RenderSettings()
    target = radius * settings.circle_radius_scale
    tolerance = settings.circle_tolerance
    for y in range(buffer.height):
        dy = y - center.y
        for x in range(buffer.width):
            dx = x - center.x
            if abs(math.sqrt(dx * dx + dy * dy) - target) < tolerance:
                buffer.set(x, y, color)


def draw_filled_circle(
    buffer: PixelBuffer,
    center: Point,
    radius: int,
    color: Color,
    settings: Optional[RenderSettings] = None,
) -> None:
    """Concentric rings from ``radius`` down to 0."""
    settings = settings or RenderSettings()
    for r in range(radius, -1, -1):
        draw_circle(buffer, center, r, color, settings)


# =============================================================================
# Polygon
# =============================================================================

def draw_polygon(buffer: PixelBuffer, points: Sequence[Point], color: Color) -> None:
    _require_points(points)
    for start, end in zip(points, points[1:]):
        draw_line(buffer, start, end, color)
    draw_line(buffer, points[-1], points[0], color)


def draw_filled_polygon(buffer: PixelBuffer, points: Sequence[Point], color: Color) -> None:
    """
    Draw the outline, then fill each row between the first and last pixel
    already painted in ``color``.

    Precondition: no pixel outside the polygon may already hold ``color``;
    otherwise the fill bleeds to it. Use ``draw_filled_polygon_even_odd``
    when that cannot be guaranteed.
    """
    draw_polygon(buffer, points, color)
    stored = buffer.clamp(color)
    for y in range(buffer.height):
        positions = [x for x in range(buffer.width) if buffer.get(x, y) == stored]
        if len(positions) > 1:
            for x in range(positions[0] + 1, positions[-1]):
                buffer.set(x, y, color)


def _scanline_crossings(points: Sequence[Point], y: int) -> List[float]:
    crossings = []
    count = len(points)
    for index in range(count):
        a = points[index]
        b = points[(index + 1) % count]
        if a.y == b.y:
            continue
        # Half-open span so a shared vertex is counted once.
        if (a.y <= y < b.y) or (b.y <= y < a.y):
            crossings.append(a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y))
    crossings.sort()
    return crossings


def draw_filled_polygon_even_odd(buffer: PixelBuffer, points: Sequence[Point], color: Color) -> None:
    """Outline plus an even-odd scanline fill computed from the edge list."""
    draw_polygon(buffer, points, color)
    y_min = max(min(p.y for p in points), 0)
    y_max = min(max(p.y for p in points), buffer.height - 1)
    for y in range(y_min, y_max + 1):
        crossings = _scanline_crossings(points, y)
        for left, right in zip(crossings[0::2], crossings[1::2]):
            x_start = max(math.ceil(left), 0)
            x_end = min(math.floor(right), buffer.width - 1)
            for x in range(x_start, x_end + 1):
                buffer.set(x, y, color)
