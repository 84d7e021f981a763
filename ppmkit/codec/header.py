from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..errors import FormatError
from ..types import Encoding

COMMENT_PREFIX = b"#"


@dataclass(frozen=True)
class Header:
    encoding: Encoding
    width: int
    height: int
    max_intensity: int
    data_offset: int

    def render(self) -> bytes:
        text = f"{self.encoding.magic}\n{self.width} {self.height}\n{self.max_intensity}\n"
        return text.encode("ascii")


def next_header_line(data: bytes, offset: int, what: str) -> Tuple[List[bytes], int]:
    """Return the tokens of the next non-comment line and the offset after it."""
    size = len(data)
    while offset < size:
        end = data.find(b"\n", offset)
        next_offset = size if end == -1 else end + 1
        line = data[offset:next_offset].strip()
        offset = next_offset
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        return line.split(), offset
    raise FormatError(f"Missing {what} in header")


def parse_unsigned(token: bytes, what: str) -> int:
    if not token.isdigit():
        raise FormatError(f"Invalid {what}: {token.decode('ascii', errors='replace')!r}")
    return int(token)


def read_header(data: bytes) -> Header:
    """Parse magic, size and max intensity; ``data_offset`` points at the pixel data."""
    tokens, offset = next_header_line(data, 0, "magic token")
    magic = tokens[0].decode("ascii", errors="replace")
    if len(tokens) != 1:
        raise FormatError(f"Unexpected data after magic token {magic!r}")
    try:
        encoding = Encoding.from_magic(magic)
    except ValueError as exc:
        raise FormatError(f"Invalid magic token: {magic!r}") from exc

    tokens, offset = next_header_line(data, offset, "image dimensions")
    if len(tokens) != 2:
        raise FormatError(f"Expected width and height, got {len(tokens)} field(s)")
    width = parse_unsigned(tokens[0], "width")
    height = parse_unsigned(tokens[1], "height")
    if width <= 0 or height <= 0:
        raise FormatError(f"Image dimensions must be positive, got {width}x{height}")

    tokens, offset = next_header_line(data, offset, "max intensity")
    if len(tokens) != 1:
        raise FormatError(f"Expected a single max intensity, got {len(tokens)} field(s)")
    max_intensity = parse_unsigned(tokens[0], "max intensity")
    if not 1 <= max_intensity <= 255:
        raise FormatError(f"Max intensity must be in 1..255, got {max_intensity}")

    return Header(encoding, width, height, max_intensity, offset)
