"""
Koch snowflake and Sierpinski triangle.

Both expand their subdivision with an explicit work stack. ``depth`` is
capped by ``RenderSettings.max_fractal_depth``.
"""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..buffer import PixelBuffer
from ..errors import InvalidArgument
from ..settings import RenderSettings
from ..types import Color, Point
from .primitives import draw_filled_triangle, draw_line

_COS_60 = math.cos(math.pi / 3)
_SIN_60 = math.sin(math.pi / 3)


def _div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _check_depth(depth: int, settings: RenderSettings) -> None:
    if depth < 0:
        raise InvalidArgument(f"Fractal depth must not be negative, got {depth}")
    if depth > settings.max_fractal_depth:
        raise InvalidArgument(
            f"Fractal depth {depth} exceeds the limit of {settings.max_fractal_depth}"
        )


def _equilateral(start: Point, size: int) -> Tuple[Point, Point, Point]:
    height = int(math.sqrt(3) * size / 2)
    return (
        start,
        Point(start.x + size, start.y),
        Point(start.x + _div(size, 2), start.y + height),
    )


def koch_points(start: Point, end: Point) -> Tuple[Point, Point, Point]:
    """Return the one-third point, the apex and the two-thirds point of a segment."""
    dx = end.x - start.x
    dy = end.y - start.y
    first = Point(start.x + _div(dx, 3), start.y + _div(dy, 3))
    second = Point(start.x + _div(2 * dx, 3), start.y + _div(2 * dy, 3))
    # Rotate ``first`` by 60 degrees around ``second``.
    rx = first.x - second.x
    ry = first.y - second.y
    apex = Point(
        int(rx * _COS_60 - ry * _SIN_60) + second.x,
        int(rx * _SIN_60 + ry * _COS_60) + second.y,
    )
    return first, apex, second


def draw_koch_curve(
    buffer: PixelBuffer,
    depth: int,
    start: Point,
    end: Point,
    color: Color,
    settings: Optional[RenderSettings] = None,
) -> None:
    settings = settings or RenderSettings()
    _check_depth(depth, settings)
    stack: List[Tuple[int, Point, Point]] = [(depth, start, end)]
    while stack:
        level, a, b = stack.pop()
        if level == 0:
            draw_line(buffer, a, b, color)
            continue
        first, apex, second = koch_points(a, b)
        # Pushed in reverse so segments are drawn start to end.
        stack.append((level - 1, second, b))
        stack.append((level - 1, apex, second))
        stack.append((level - 1, first, apex))
        stack.append((level - 1, a, first))


def draw_koch_snowflake(
    buffer: PixelBuffer,
    depth: int,
    start: Point,
    size: int,
    color: Color,
    settings: Optional[RenderSettings] = None,
) -> None:
    """Koch curves on the three edges of the triangle based at ``start``."""
    settings = settings or RenderSettings()
    _check_depth(depth, settings)
    p1, p2, p3 = _equilateral(start, size)
    draw_koch_curve(buffer, depth, p1, p2, color, settings)
    draw_koch_curve(buffer, depth, p2, p3, color, settings)
    draw_koch_curve(buffer, depth, p3, p1, color, settings)


def _midpoint(a: Point, b: Point) -> Point:
    return Point(_div(a.x + b.x, 2), _div(a.y + b.y, 2))


def draw_sierpinski_triangle(
    buffer: PixelBuffer,
    depth: int,
    start: Point,
    width: int,
    color: Color,
    settings: Optional[RenderSettings] = None,
) -> None:
    """Fill the three corner sub-triangles at each level, leaving the centre open."""
    settings = settings or RenderSettings()
    _check_depth(depth, settings)
    stack: List[Tuple[int, Point, Point, Point]] = [(depth, *_equilateral(start, width))]
    while stack:
        level, p1, p2, p3 = stack.pop()
        if level == 0:
            draw_filled_triangle(buffer, p1, p2, p3, color)
            continue
        mid12 = _midpoint(p1, p2)
        mid23 = _midpoint(p2, p3)
        mid31 = _midpoint(p3, p1)
        stack.append((level - 1, mid12, p1, mid31))
        stack.append((level - 1, mid23, mid12, p2))
        stack.append((level - 1, p3, mid23, mid31))
