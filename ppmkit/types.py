from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Tuple

from .errors import InvalidArgument


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Color:
    """RGB triple with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise InvalidArgument(f"Channel {name} must be in 0..255, got {value}")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse an ``R,G,B`` string."""
        parts = text.split(",")
        if len(parts) != 3:
            raise InvalidArgument(f"Color must be R,G,B, got '{text}'")
        try:
            r, g, b = (int(part.strip()) for part in parts)
        except ValueError as exc:
            raise InvalidArgument(f"Color must be R,G,B, got '{text}'") from exc
        return cls(r, g, b)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class Encoding(enum.Enum):
    TEXT = "P3"
    BINARY = "P6"

    @property
    def magic(self) -> str:
        return self.value

    @classmethod
    def from_magic(cls, token: str) -> "Encoding":
        for member in cls:
            if member.value == token:
                return member
        raise ValueError(f"Unknown magic token: {token!r}")


@dataclass(frozen=True)
class GrayRaster:
    """Row-major single-channel grid handed to grayscale consumers."""

    width: int
    height: int
    max_intensity: int
    values: List[List[int]]

    def validate(self) -> None:
        if len(self.values) != self.height:
            raise InvalidArgument("Row count does not match height")
        for row in self.values:
            if len(row) != self.width:
                raise InvalidArgument("Row length does not match width")


@dataclass(frozen=True)
class BilevelRaster:
    """Row-major on/off grid handed to bi-level consumers."""

    width: int
    height: int
    values: List[List[bool]]

    def validate(self) -> None:
        if len(self.values) != self.height:
            raise InvalidArgument("Row count does not match height")
        for row in self.values:
            if len(row) != self.width:
                raise InvalidArgument("Row length does not match width")
