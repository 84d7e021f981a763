from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, ClassVar, Dict

from .errors import InvalidArgument
from .types import Encoding

logger = logging.getLogger(__name__)

DEFAULT_MAX_FRACTAL_DEPTH = 10
DEFAULT_NOISE_FREQUENCY = 0.02
DEFAULT_NOISE_AMPLITUDE = 50.0
DEFAULT_CIRCLE_RADIUS_SCALE = 0.85
DEFAULT_CIRCLE_TOLERANCE = 0.5

# Hard ceiling for a configured max_fractal_depth.
FRACTAL_DEPTH_LIMIT = 16


@dataclass
class RenderSettings:
    max_fractal_depth: int = DEFAULT_MAX_FRACTAL_DEPTH
    noise_frequency: float = DEFAULT_NOISE_FREQUENCY
    noise_amplitude: float = DEFAULT_NOISE_AMPLITUDE
    circle_radius_scale: float = DEFAULT_CIRCLE_RADIUS_SCALE
    circle_tolerance: float = DEFAULT_CIRCLE_TOLERANCE
    default_encoding: Encoding = field(default=Encoding.BINARY)

    _cache: ClassVar[Dict[Path, "RenderSettings"]] = {}

    def validate(self) -> None:
        if not 0 <= self.max_fractal_depth <= FRACTAL_DEPTH_LIMIT:
            raise InvalidArgument(
                f"max_fractal_depth must be in 0..{FRACTAL_DEPTH_LIMIT}, got {self.max_fractal_depth}"
            )
        if self.noise_frequency <= 0:
            raise InvalidArgument("noise_frequency must be greater than zero")
        if self.noise_amplitude <= 0:
            raise InvalidArgument("noise_amplitude must be greater than zero")
        if self.circle_radius_scale <= 0:
            raise InvalidArgument("circle_radius_scale must be greater than zero")
        if self.circle_tolerance <= 0:
            raise InvalidArgument("circle_tolerance must be greater than zero")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RenderSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise InvalidArgument("Unknown settings: " + ", ".join(unknown))
        values = dict(raw)
        if "default_encoding" in values:
            try:
                values["default_encoding"] = Encoding.from_magic(str(values["default_encoding"]))
            except ValueError as exc:
                raise InvalidArgument(str(exc)) from exc
        settings = cls(**values)
        settings.validate()
        return settings

    @classmethod
    def load(cls, path: Path) -> "RenderSettings":
        """Load settings from a JSON file. Each call returns a fresh copy."""
        key = Path(path).resolve()
        cached = cls._cache.get(key)
        if cached is not None:
            return replace(cached)
        try:
            raw = json.loads(key.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InvalidArgument(f"Invalid settings file {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise InvalidArgument(f"Settings file {path} must contain a JSON object")
        settings = cls.from_dict(raw)
        logger.debug("Loaded render settings from %s: %s", key, settings)
        cls._cache[key] = settings
        return replace(settings)
