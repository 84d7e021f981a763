from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Union

from ..buffer import PixelBuffer
from ..types import Encoding
from .header import Header


def encode_header(buffer: PixelBuffer) -> bytes:
    header = Header(buffer.encoding, buffer.width, buffer.height, buffer.max_intensity, 0)
    return header.render()


def encode_text_pixels(buffer: PixelBuffer) -> bytes:
    """One line per row, channels separated by single spaces."""
    lines = []
    for row in buffer.iter_rows():
        lines.append(" ".join(f"{p.r} {p.g} {p.b}" for p in row) + "\n")
    return "".join(lines).encode("ascii")


def encode_binary_pixels(buffer: PixelBuffer) -> bytes:
    out = bytearray()
    for row in buffer.iter_rows():
        for p in row:
            out += bytes((p.r, p.g, p.b))
    return bytes(out)


def encode(buffer: PixelBuffer) -> bytes:
    if buffer.encoding is Encoding.TEXT:
        pixels = encode_text_pixels(buffer)
    else:
        pixels = encode_binary_pixels(buffer)
    return encode_header(buffer) + pixels


def dump(buffer: PixelBuffer, fp: BinaryIO) -> None:
    fp.write(encode(buffer))


def write_file(path: Union[str, Path], buffer: PixelBuffer) -> None:
    Path(path).write_bytes(encode(buffer))
