from __future__ import annotations

from typing import Optional

from ..buffer import PixelBuffer
from ..settings import RenderSettings
from ..types import Color

_HASH_MASK = 0x7FFFFFFF
_HASH_SCALE = 1073741824.0


def hash_noise(x: float, y: float) -> float:
    """
    Deterministic lattice hash in (-0.5, 0.5].

    Only the low 31 bits of the product are kept, so Python's unbounded
    integers give the same result as 64-bit wrapping arithmetic.
    """
    n = int(x) + int(y) * 57
    n = (n << 13) ^ n
    value = (n * (n * n * 15731 + 789221) + 1376312589) & _HASH_MASK
    return 1.0 - (value / _HASH_SCALE + 1.0) / 2.0


def blend(color1: Color, color2: Color, t: float) -> Color:
    """Linear interpolation per channel, truncated."""
    t = min(max(t, 0.0), 1.0)
    return Color(
        int(color1.r * (1 - t) + color2.r * t),
        int(color1.g * (1 - t) + color2.g * t),
        int(color1.b * (1 - t) + color2.b * t),
    )


def noise_factor(x: int, y: int, settings: RenderSettings) -> float:
    frequency = settings.noise_frequency
    amplitude = settings.noise_amplitude
    value = hash_noise(x * frequency, y * frequency) * amplitude
    return (value + amplitude) / (2 * amplitude)


def draw_perlin_noise(
    buffer: PixelBuffer,
    color1: Color,
    color2: Color,
    settings: Optional[RenderSettings] = None,
) -> None:
    """Paint every pixel with a noise-weighted blend of two colors."""
    settings = settings or RenderSettings()
    for y in range(buffer.height):
        for x in range(buffer.width):
            buffer.set(x, y, blend(color1, color2, noise_factor(x, y, settings)))
