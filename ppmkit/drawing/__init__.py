from .fractals import draw_koch_curve, draw_koch_snowflake, draw_sierpinski_triangle, koch_points
from .noise import blend, draw_perlin_noise, hash_noise
from .primitives import (
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_polygon_even_odd,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
)
from .resample import resize

__all__ = [
    "blend",
    "draw_circle",
    "draw_filled_circle",
    "draw_filled_polygon",
    "draw_filled_polygon_even_odd",
    "draw_filled_rectangle",
    "draw_filled_triangle",
    "draw_koch_curve",
    "draw_koch_snowflake",
    "draw_line",
    "draw_perlin_noise",
    "draw_polygon",
    "draw_rectangle",
    "draw_sierpinski_triangle",
    "draw_triangle",
    "hash_noise",
    "koch_points",
    "resize",
]
