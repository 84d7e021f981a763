from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple, Union

from PIL import Image, ImageOps

from .buffer import PixelBuffer
from .types import Color, Encoding


def load_image(path: Union[str, Path]) -> Image.Image:
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def normalize_image(img: Image.Image) -> Image.Image:
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


def from_image(
    img: Image.Image,
    max_intensity: int = 255,
    encoding: Encoding = Encoding.BINARY,
) -> PixelBuffer:
    """Build a buffer from any Pillow image, rescaling channels to ``max_intensity``."""
    img = normalize_image(img)
    width, height = img.size
    raw = img.tobytes()
    if max_intensity != 255:
        raw = bytes(value * max_intensity // 255 for value in raw)
    palette: Dict[Tuple[int, int, int], Color] = {}
    rows = []
    row_bytes = width * 3
    for y in range(height):
        line = raw[y * row_bytes : (y + 1) * row_bytes]
        row = []
        for offset in range(0, row_bytes, 3):
            key = (line[offset], line[offset + 1], line[offset + 2])
            color = palette.get(key)
            if color is None:
                color = palette[key] = Color(*key)
            row.append(color)
        rows.append(row)
    return PixelBuffer.from_rows(rows, max_intensity, encoding)


def to_image(buffer: PixelBuffer) -> Image.Image:
    """Return an RGB Pillow image with channels stretched to 0..255."""
    top = buffer.max_intensity
    out = bytearray()
    for row in buffer.iter_rows():
        for p in row:
            out += bytes((p.r, p.g, p.b))
    if top != 255:
        out = bytearray(min(255, value * 255 // top) for value in out)
    return Image.frombytes("RGB", buffer.size, bytes(out))


def open_any(path: Union[str, Path], encoding: Encoding = Encoding.BINARY) -> PixelBuffer:
    """Open a file Pillow understands (PNG, JPEG, PPM, ...) as a buffer."""
    return from_image(load_image(path), encoding=encoding)


def save_image(buffer: PixelBuffer, path: Union[str, Path]) -> None:
    to_image(buffer).save(path)
