from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Dict, List, Tuple, Union

from ..buffer import PixelBuffer
from ..errors import FormatError
from ..types import Color, Encoding
from .header import Header, read_header

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 3


def _make_color(palette: Dict[Tuple[int, int, int], Color], r: int, g: int, b: int) -> Color:
    key = (r, g, b)
    color = palette.get(key)
    if color is None:
        color = Color(r, g, b)
        palette[key] = color
    return color


def _check_channels(header: Header, y: int, x: int, r: int, g: int, b: int) -> None:
    if r > header.max_intensity or g > header.max_intensity or b > header.max_intensity:
        raise FormatError(
            f"Pixel ({r}, {g}, {b}) at row {y}, column {x} exceeds max intensity {header.max_intensity}",
            row=y,
        )


def _decode_text(data: bytes, header: Header) -> List[List[Color]]:
    tokens = data[header.data_offset :].split()
    width = header.width
    row_tokens = width * BYTES_PER_PIXEL
    palette: Dict[Tuple[int, int, int], Color] = {}
    rows: List[List[Color]] = []
    for y in range(header.height):
        start = y * row_tokens
        chunk = tokens[start : start + row_tokens]
        if len(chunk) < row_tokens:
            triples = len(chunk) // BYTES_PER_PIXEL
            raise FormatError(
                f"Unexpected end of pixel data at row {y}: expected {width} color triples, got {triples}",
                row=y,
                expected=width,
                actual=triples,
            )
        row: List[Color] = []
        for x in range(width):
            values = []
            for token in chunk[x * 3 : x * 3 + 3]:
                if not token.isdigit():
                    raise FormatError(
                        f"Invalid channel value {token.decode('ascii', errors='replace')!r} "
                        f"at row {y}, column {x}",
                        row=y,
                    )
                values.append(int(token))
            r, g, b = values
            _check_channels(header, y, x, r, g, b)
            row.append(_make_color(palette, r, g, b))
        rows.append(row)
    extra = len(tokens) - header.height * row_tokens
    if extra:
        logger.debug("Ignoring %d trailing token(s) after pixel data", extra)
    return rows


def _decode_binary(data: bytes, header: Header) -> List[List[Color]]:
    # Pixel data starts at an exact byte offset; newline bytes are ordinary samples.
    payload = memoryview(data)[header.data_offset :]
    row_bytes = header.width * BYTES_PER_PIXEL
    palette: Dict[Tuple[int, int, int], Color] = {}
    rows: List[List[Color]] = []
    for y in range(header.height):
        chunk = payload[y * row_bytes : (y + 1) * row_bytes]
        if len(chunk) < row_bytes:
            raise FormatError(
                f"Unexpected end of pixel data at row {y}: expected {row_bytes} bytes, got {len(chunk)}",
                row=y,
                expected=row_bytes,
                actual=len(chunk),
            )
        row: List[Color] = []
        for x in range(header.width):
            offset = x * BYTES_PER_PIXEL
            r, g, b = chunk[offset], chunk[offset + 1], chunk[offset + 2]
            _check_channels(header, y, x, r, g, b)
            row.append(_make_color(palette, r, g, b))
        rows.append(row)
    extra = len(payload) - header.height * row_bytes
    if extra:
        logger.debug("Ignoring %d trailing byte(s) after pixel data", extra)
    return rows


def decode(data: bytes) -> PixelBuffer:
    """Parse a P3 or P6 image. Raises ``FormatError`` on malformed input."""
    header = read_header(data)
    logger.debug(
        "Parsed %s header: %dx%d, max %d, data at byte %d",
        header.encoding.magic,
        header.width,
        header.height,
        header.max_intensity,
        header.data_offset,
    )
    if header.encoding is Encoding.TEXT:
        rows = _decode_text(data, header)
    else:
        rows = _decode_binary(data, header)
    return PixelBuffer.from_rows(rows, header.max_intensity, header.encoding)


def load(fp: BinaryIO) -> PixelBuffer:
    return decode(fp.read())


def read_file(path: Union[str, Path]) -> PixelBuffer:
    return decode(Path(path).read_bytes())
