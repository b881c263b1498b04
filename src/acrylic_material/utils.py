"""Utility helpers shared across the acrylic material modules."""
from __future__ import annotations

from typing import Sequence, Tuple, Union

from .errors import InvalidArgument

RGBA = Tuple[int, int, int, int]
ColorLike = Union[int, str, Sequence[int]]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` between ``lo`` and ``hi``."""

    return max(lo, min(hi, value))


def to_byte(value: float) -> int:
    """Round ``value`` half-up and clamp it to an 8-bit channel; NaN maps to 0."""

    if value != value or value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value + 0.5)


def round_half_up(value: float) -> int:
    return int(value + 0.5)


def argb_to_rgba(argb: int) -> RGBA:
    """Unpack a 32-bit ``0xAARRGGBB`` integer into an ``(r, g, b, a)`` tuple."""

    argb &= 0xFFFFFFFF
    return (
        (argb >> 16) & 0xFF,
        (argb >> 8) & 0xFF,
        argb & 0xFF,
        (argb >> 24) & 0xFF,
    )


def parse_color(color: ColorLike) -> RGBA:
    """Normalise a packed ARGB int, hex string or RGB(A) sequence to RGBA.

    Hex strings follow the Android convention: ``#RRGGBB`` is opaque and
    ``#AARRGGBB`` carries the alpha first.
    """

    if isinstance(color, bool):
        raise InvalidArgument(f"Unsupported color value: {color!r}")
    if isinstance(color, int):
        return argb_to_rgba(color)
    if isinstance(color, str):
        value = color.strip()
        if value.startswith("#"):
            value = value[1:]
        elif value.lower().startswith("0x"):
            value = value[2:]
        if len(value) == 3:
            value = "".join(ch * 2 for ch in value)
        try:
            if len(value) == 6:
                return argb_to_rgba(0xFF000000 | int(value, 16))
            if len(value) == 8:
                return argb_to_rgba(int(value, 16))
        except ValueError as exc:
            raise InvalidArgument(f"Unsupported color format: {color!r}") from exc
        raise InvalidArgument(f"Unsupported color format: {color!r}")
    channels = list(color)
    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise InvalidArgument(f"Expected an RGB or RGBA color, got {color!r}")
    return tuple(int(clamp(int(c), 0, 255)) for c in channels)  # type: ignore[return-value]


__all__ = ["RGBA", "ColorLike", "clamp", "to_byte", "round_half_up", "argb_to_rgba", "parse_color"]
