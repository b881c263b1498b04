"""Back-to-front alpha compositing of layer stacks."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .buffer import CHANNELS, PixelBuffer, resize
from .errors import DimensionMismatch, InvalidArgument
from .utils import RGBA, ColorLike, parse_color, to_byte

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolidColor:
    """A layer that fills the whole canvas with one RGBA colour."""

    rgba: RGBA

    @classmethod
    def of(cls, color: ColorLike) -> "SolidColor":
        return cls(rgba=parse_color(color))

    def fill(self, width: int, height: int) -> PixelBuffer:
        return PixelBuffer.solid(width, height, self.rgba)


Layer = Union[PixelBuffer, SolidColor]


def composite(layers: Sequence[Layer], *, strict: bool = False) -> PixelBuffer:
    """Flatten ``layers`` with the "over" operator, index 0 at the bottom.

    Layers are aligned to the first one: solid colours are expanded to its
    size and buffers of another size are resized, or rejected with
    :class:`DimensionMismatch` when ``strict`` is set.
    """

    if not layers:
        raise InvalidArgument("At least one layer is required to composite")
    base = layers[0]
    if isinstance(base, SolidColor):
        raise InvalidArgument("The base layer must be a pixel buffer")

    width, height = base.size
    result = base
    for index, layer in enumerate(layers[1:], start=1):
        top = _align(layer, width, height, index, strict)
        result = _over(top, result)
    return result


def _align(layer: Layer, width: int, height: int, index: int, strict: bool) -> PixelBuffer:
    if isinstance(layer, SolidColor):
        return layer.fill(width, height)
    if layer.size == (width, height):
        return layer
    if strict:
        raise DimensionMismatch(
            f"Layer {index} is {layer.width}x{layer.height}, base is {width}x{height}"
        )
    LOGGER.debug("Resizing layer %d from %dx%d to %dx%d", index, layer.width, layer.height, width, height)
    return resize(layer, width, height)


def _over(top: PixelBuffer, bottom: PixelBuffer) -> PixelBuffer:
    top_data = top.data
    result = bytearray(bottom.data)
    for offset in range(0, len(result), CHANNELS):
        top_alpha = top_data[offset + 3]
        if top_alpha == 0:
            continue
        if top_alpha == 255:
            result[offset : offset + CHANNELS] = top_data[offset : offset + CHANNELS]
            continue
        ta = top_alpha / 255.0
        ba = result[offset + 3] / 255.0
        keep = ba * (1.0 - ta)
        out_alpha = ta + keep
        for channel in range(3):
            value = (top_data[offset + channel] * ta + result[offset + channel] * keep) / out_alpha
            result[offset + channel] = to_byte(value)
        result[offset + 3] = to_byte(out_alpha * 255.0)
    return PixelBuffer(width=bottom.width, height=bottom.height, data=bytes(result))


__all__ = ["SolidColor", "Layer", "composite"]
