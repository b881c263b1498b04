"""Luminance-weighted saturation adjustment."""
from __future__ import annotations

from .buffer import CHANNELS, PixelBuffer
from .utils import to_byte

LUMA_R = 0.213
LUMA_G = 0.715
LUMA_B = 0.072


def saturate(buffer: PixelBuffer, amount: float) -> PixelBuffer:
    """Interpolate each pixel between its luminance and its colour.

    ``amount`` 0 yields grayscale, 1 is the identity and larger values
    push colours away from gray. Alpha is copied unchanged.
    """

    if amount == 1.0:
        return PixelBuffer(width=buffer.width, height=buffer.height, data=buffer.data)

    source = buffer.data
    result = bytearray(source)
    for offset in range(0, len(source), CHANNELS):
        r = source[offset]
        g = source[offset + 1]
        b = source[offset + 2]
        luma = LUMA_R * r + LUMA_G * g + LUMA_B * b
        result[offset] = _channel(luma, r, amount)
        result[offset + 1] = _channel(luma, g, amount)
        result[offset + 2] = _channel(luma, b, amount)
    return PixelBuffer(width=buffer.width, height=buffer.height, data=bytes(result))


def _channel(luma: float, value: int, amount: float) -> int:
    delta = value - luma
    if delta == 0:
        return to_byte(luma)
    return to_byte(luma + delta * amount)


__all__ = ["LUMA_R", "LUMA_G", "LUMA_B", "saturate"]
