"""
ppmkit
======
Color raster toolkit for the P3 (textual) and P6 (binary) Netpbm formats.

Layers:

    codec       bytes <-> PixelBuffer
    buffer      PixelBuffer: pixel grid, whole-image transforms
    drawing     lines, shapes, fractals, noise, resampling
    imaging     Pillow interop (PNG, JPEG, ...)
    app.cli     command-line front end

Quick start::

    from ppmkit import Color, Point, codec, drawing

    buffer = codec.read_file("in.ppm")
    drawing.draw_line(buffer, Point(0, 0), Point(10, 10), Color(255, 0, 0))
    codec.write_file("out.ppm", buffer)
"""
from . import codec, drawing
from .buffer import PixelBuffer
from .errors import FormatError, InvalidArgument, PixelIndexError, PpmError
from .settings import RenderSettings
from .types import BLACK, WHITE, BilevelRaster, Color, Encoding, GrayRaster, Point

__all__ = [
    "BilevelRaster",
    "BLACK",
    "codec",
    "Color",
    "drawing",
    "Encoding",
    "FormatError",
    "GrayRaster",
    "InvalidArgument",
    "PixelBuffer",
    "PixelIndexError",
    "Point",
    "PpmError",
    "RenderSettings",
    "WHITE",
]

__version__ = "0.1.0"
