import pytest

from ppmkit import BLACK, Color, InvalidArgument, PixelBuffer, Point
from ppmkit.drawing import (
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

from .helper import RED, painted

SQUARE = [Point(1, 1), Point(3, 1), Point(3, 3), Point(1, 3)]


def test_line_single_point():
    buffer = PixelBuffer(5, 5)
    draw_line(buffer, Point(2, 3), Point(2, 3), RED)
    assert painted(buffer) == {(2, 3)}


def test_line_horizontal_and_diagonal():
    buffer = PixelBuffer(5, 5)
    draw_line(buffer, Point(0, 0), Point(4, 0), RED)
    assert painted(buffer) == {(x, 0) for x in range(5)}

    buffer = PixelBuffer(5, 5)
    draw_line(buffer, Point(3, 3), Point(0, 0), RED)
    assert painted(buffer) == {(i, i) for i in range(4)}


def test_line_steep_includes_endpoints():
    buffer = PixelBuffer(5, 5)
    draw_line(buffer, Point(1, 0), Point(2, 4), RED)
    pixels = painted(buffer)
    assert (1, 0) in pixels and (2, 4) in pixels
    assert {y for _, y in pixels} == set(range(5))
    assert len(pixels) == 5


def test_line_clips_off_canvas():
    buffer = PixelBuffer(5, 5)
    draw_line(buffer, Point(-5, 2), Point(10, 2), RED)
    assert painted(buffer) == {(x, 2) for x in range(5)}


def test_line_entirely_off_canvas():
    buffer = PixelBuffer(5, 5)
    draw_line(buffer, Point(-10, -10), Point(-2, -8), RED)
    assert painted(buffer) == set()


def test_triangle_outline_touches_vertices():
    buffer = PixelBuffer(6, 6)
    draw_triangle(buffer, Point(0, 0), Point(5, 0), Point(0, 5), RED)
    pixels = painted(buffer)
    assert {(0, 0), (5, 0), (0, 5)} <= pixels
    assert (1, 1) not in pixels


def test_filled_triangle():
    buffer = PixelBuffer(5, 5)
    draw_filled_triangle(buffer, Point(0, 0), Point(4, 0), Point(0, 4), RED)
    assert painted(buffer) == {(x, y) for y in range(5) for x in range(5) if x + y <= 4}


def test_filled_triangle_vertex_order_does_not_matter():
    a = PixelBuffer(8, 8)
    b = PixelBuffer(8, 8)
    draw_filled_triangle(a, Point(1, 1), Point(6, 3), Point(2, 7), RED)
    draw_filled_triangle(b, Point(2, 7), Point(1, 1), Point(6, 3), RED)
    assert a == b


def test_filled_triangle_flat_row():
    buffer = PixelBuffer(5, 5)
    draw_filled_triangle(buffer, Point(0, 2), Point(4, 2), Point(2, 2), RED)
    assert painted(buffer) == {(x, 2) for x in range(5)}


def test_filled_triangle_flat_bottom():
    buffer = PixelBuffer(7, 4)
    draw_filled_triangle(buffer, Point(3, 0), Point(0, 3), Point(6, 3), RED)
    pixels = painted(buffer)
    assert {(x, 3) for x in range(7)} <= pixels
    assert (3, 0) in pixels
    assert (0, 0) not in pixels


def test_filled_triangle_off_canvas():
    buffer = PixelBuffer(4, 4)
    draw_filled_triangle(buffer, Point(-10, -10), Point(20, -10), Point(-10, 20), RED)
    assert (0, 0) in painted(buffer)


def test_filled_triangle_far_off_canvas_only_walks_visible_rows():
    buffer = PixelBuffer(4, 4)
    far = 10 ** 7
    draw_filled_triangle(buffer, Point(-far, -far), Point(far, -far), Point(-far, far), RED)
    assert painted(buffer) == {(x, y) for y in range(4) for x in range(4)}


def test_filled_triangle_entirely_below_canvas():
    buffer = PixelBuffer(4, 4)
    draw_filled_triangle(buffer, Point(0, 10), Point(3, 10), Point(1, 10 ** 7), RED)
    assert painted(buffer) == set()


def test_filled_polygon_on_low_max_intensity_buffer():
    buffer = PixelBuffer(5, 5, max_intensity=15)
    draw_filled_polygon(buffer, SQUARE, RED)
    assert buffer.get(2, 2) == Color(15, 0, 0)
    assert painted(buffer) == {(x, y) for y in range(1, 4) for x in range(1, 4)}


def test_rectangle_outline():
    buffer = PixelBuffer(5, 5)
    draw_rectangle(buffer, Point(1, 1), 2, 2, RED)
    pixels = painted(buffer)
    assert {(1, 1), (3, 1), (1, 3), (3, 3), (2, 1), (1, 2)} <= pixels
    assert (2, 2) not in pixels
    assert len(pixels) == 8


def test_filled_rectangle_clipped_to_canvas():
    buffer = PixelBuffer(4, 4)
    draw_filled_rectangle(buffer, Point(2, 2), 10, 10, RED)
    assert painted(buffer) == {(2, 2), (3, 2), (2, 3), (3, 3)}


def test_filled_rectangle_negative_origin():
    buffer = PixelBuffer(4, 4)
    draw_filled_rectangle(buffer, Point(-1, -1), 2, 2, RED)
    assert painted(buffer) == {(0, 0)}


def test_filled_rectangle_outside_canvas_is_noop():
    buffer = PixelBuffer(4, 4)
    draw_filled_rectangle(buffer, Point(5, 5), 3, 3, RED)
    draw_filled_rectangle(buffer, Point(1, 1), 0, 3, RED)
    assert painted(buffer) == set()


def test_circle_band():
    buffer = PixelBuffer(41, 41)
    draw_circle(buffer, Point(20, 20), 20, RED)
    pixels = painted(buffer)
    # Ring radius is 20 * 0.85 = 17.
    assert (37, 20) in pixels
    assert (20, 3) in pixels
    assert (20, 20) not in pixels
    assert (40, 20) not in pixels


def test_circle_center_off_canvas():
    buffer = PixelBuffer(10, 10)
    draw_circle(buffer, Point(-20, -20), 5, RED)
    assert painted(buffer) == set()


def test_filled_circle():
    buffer = PixelBuffer(41, 41)
    draw_filled_circle(buffer, Point(20, 20), 20, RED)
    pixels = painted(buffer)
    assert (20, 20) in pixels
    assert (30, 20) in pixels
    assert (39, 20) not in pixels


def test_polygon_closes_loop():
    buffer = PixelBuffer(5, 5)
    draw_polygon(buffer, SQUARE, RED)
    pixels = painted(buffer)
    assert (1, 2) in pixels
    assert (2, 2) not in pixels


def test_polygon_requires_vertices():
    with pytest.raises(InvalidArgument):
        draw_polygon(PixelBuffer(2, 2), [], RED)


def test_filled_polygon():
    buffer = PixelBuffer(5, 5)
    draw_filled_polygon(buffer, SQUARE, RED)
    assert painted(buffer) == {(x, y) for y in range(1, 4) for x in range(1, 4)}


def test_filled_polygon_bleeds_to_matching_pixels():
    buffer = PixelBuffer(6, 5)
    buffer.set(5, 2, RED)
    draw_filled_polygon(buffer, SQUARE, RED)
    assert buffer.get(4, 2) == RED


def test_even_odd_fill_ignores_existing_pixels():
    buffer = PixelBuffer(6, 5)
    buffer.set(5, 2, RED)
    draw_filled_polygon_even_odd(buffer, SQUARE, RED)
    assert buffer.get(4, 2) == BLACK
    assert painted(buffer) == {(x, y) for y in range(1, 4) for x in range(1, 4)} | {(5, 2)}


def test_even_odd_fill_concave():
    buffer = PixelBuffer(9, 9)
    notch = [Point(0, 0), Point(8, 0), Point(8, 8), Point(4, 4), Point(0, 8)]
    draw_filled_polygon_even_odd(buffer, notch, RED)
    pixels = painted(buffer)
    assert (4, 2) in pixels
    assert (4, 7) not in pixels
    assert (1, 6) in pixels
