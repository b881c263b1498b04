"""Configuration structures for acrylic material generation."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .blur import BlurAlgorithmKind, create_blur
from .buffer import PixelBuffer
from .errors import AcrylicError, InvalidArgument, MissingConfiguration
from .io import BufferSource, resolve_buffer
from .noise import default_noise_texture
from .utils import RGBA, ColorLike, parse_color

LOGGER = logging.getLogger(__name__)

DEFAULT_SCALE_FACTOR = 0.85
DEFAULT_STACK_RADIUS = 80
DEFAULT_SATURATION = 2.0


@dataclass(frozen=True)
class BlurConfig:
    """Blur algorithm selection and its radius."""

    algorithm: BlurAlgorithmKind
    radius: float

    @classmethod
    def gaussian(cls, radius: float = 25.0) -> "BlurConfig":
        return cls(algorithm=BlurAlgorithmKind.GAUSSIAN, radius=float(radius))

    @classmethod
    def stack(cls, radius: float) -> "BlurConfig":
        if isinstance(radius, float) and radius.is_integer():
            radius = int(radius)
        return cls(algorithm=BlurAlgorithmKind.STACK, radius=radius)

    def validate(self) -> None:
        create_blur(self.algorithm).validate_radius(self.radius)


@dataclass(frozen=True)
class AcrylicConfig:
    """Everything a single generation needs, fixed before it starts."""

    background: Optional[PixelBuffer] = None
    scale_factor: float = 1.0
    blur: Optional[BlurConfig] = None
    saturation: float = 1.0
    tint: Optional[RGBA] = None
    noise: Optional[PixelBuffer] = None

    def validate(self) -> None:
        if self.background is None:
            raise MissingConfiguration("No background set.")
        if self.blur is None:
            raise MissingConfiguration("No blur algorithm specified.")
        validate_scale_factor(self.scale_factor)
        self.blur.validate()

    def with_defaults(self) -> "AcrylicConfig":
        """Return a copy using the stock acrylic look (scale, stack blur, saturation, noise)."""

        return replace(
            self,
            scale_factor=DEFAULT_SCALE_FACTOR,
            blur=BlurConfig.stack(DEFAULT_STACK_RADIUS),
            saturation=DEFAULT_SATURATION,
            noise=default_noise_texture(),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, base_path: Optional[Path] = None) -> "AcrylicConfig":
        """Construct an :class:`AcrylicConfig` from a dictionary.

        Image entries are paths resolved against ``base_path``. A noise
        texture that cannot be loaded is skipped with a warning.
        """

        config = cls()
        if data.get("defaults"):
            config = config.with_defaults()

        background = data.get("background")
        if background is not None:
            config = replace(config, background=resolve_buffer(background, base_path=base_path))

        if "scale" in data:
            config = replace(config, scale_factor=validate_scale_factor(float(data["scale"])))

        blur_data = data.get("blur")
        if blur_data is not None:
            if not isinstance(blur_data, dict):
                raise InvalidArgument("'blur' must be a mapping with 'algorithm' and 'radius'")
            algorithm = BlurAlgorithmKind.parse(blur_data.get("algorithm", "stack"))
            default_radius = 25.0 if algorithm is BlurAlgorithmKind.GAUSSIAN else DEFAULT_STACK_RADIUS
            try:
                radius = float(blur_data.get("radius", default_radius))
            except (TypeError, ValueError) as exc:
                raise InvalidArgument(f"Blur radius must be a number, got {blur_data.get('radius')!r}") from exc
            blur = (
                BlurConfig.gaussian(radius)
                if algorithm is BlurAlgorithmKind.GAUSSIAN
                else BlurConfig.stack(radius)
            )
            blur.validate()
            config = replace(config, blur=blur)

        if "saturation" in data:
            config = replace(config, saturation=float(data["saturation"]))

        tint = data.get("tint")
        if tint is not None:
            config = replace(config, tint=parse_color(tint))

        if "noise" in data:
            noise_source = data["noise"]
            config = replace(
                config,
                noise=resolve_noise(noise_source, base_path=base_path) if noise_source else None,
            )
        return config

    @classmethod
    def load(cls, path: Union[Path, str]) -> "AcrylicConfig":
        """Load configuration from a YAML file."""

        text = Path(path).read_text(encoding="utf8")
        data = yaml.safe_load(text)
        if not isinstance(data, dict):
            raise InvalidArgument("Configuration root must be a mapping")
        return cls.from_dict(data, base_path=Path(path).parent)


def validate_scale_factor(factor: float) -> float:
    if not (0.0 < factor <= 1.0):
        raise InvalidArgument(f"scaleFactor must be in (0, 1], got {factor!r}")
    return factor


def resolve_noise(source: BufferSource, *, base_path: Optional[Path] = None) -> Optional[PixelBuffer]:
    """Resolve a noise texture, or return ``None`` if it is unavailable."""

    try:
        return resolve_buffer(source, base_path=base_path)
    except AcrylicError as exc:
        LOGGER.warning("Unable to set noise layer, continuing without it: %s", exc)
        return None


def resolve_tint(color: Optional[ColorLike]) -> Optional[RGBA]:
    return None if color is None else parse_color(color)


__all__ = [
    "DEFAULT_SCALE_FACTOR",
    "DEFAULT_STACK_RADIUS",
    "DEFAULT_SATURATION",
    "BlurConfig",
    "AcrylicConfig",
    "validate_scale_factor",
    "resolve_noise",
    "resolve_tint",
]
