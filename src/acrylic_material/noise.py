"""Procedural noise texture used as the topmost acrylic layer."""
from __future__ import annotations

import random

from .buffer import PixelBuffer

DEFAULT_NOISE_SIZE = 128
DEFAULT_NOISE_SEED = 1729


def dot_noise(
    width: int,
    height: int,
    rng: random.Random,
    *,
    density: float = 0.35,
    gray_range: tuple[int, int] = (170, 235),
    alpha_range: tuple[int, int] = (12, 48),
) -> PixelBuffer:
    """Scatter faint light-grey dots over a transparent canvas."""

    data = bytearray(width * height * 4)
    lo_gray, hi_gray = gray_range
    lo_alpha, hi_alpha = alpha_range
    for offset in range(0, len(data), 4):
        if rng.random() >= density:
            continue
        gray = rng.randint(lo_gray, hi_gray)
        data[offset] = gray
        data[offset + 1] = gray
        data[offset + 2] = gray
        data[offset + 3] = rng.randint(lo_alpha, hi_alpha)
    return PixelBuffer(width=width, height=height, data=bytes(data))


def default_noise_texture(
    width: int = DEFAULT_NOISE_SIZE,
    height: int = DEFAULT_NOISE_SIZE,
    seed: int = DEFAULT_NOISE_SEED,
) -> PixelBuffer:
    """Return the bundled noise tile; identical for identical arguments."""

    return dot_noise(width, height, random.Random(seed))


__all__ = ["DEFAULT_NOISE_SIZE", "DEFAULT_NOISE_SEED", "dot_noise", "default_noise_texture"]
