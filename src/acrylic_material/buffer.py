"""RGBA pixel buffers and the uniform downscaler."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from PIL import Image

from .errors import InvalidArgument
from .utils import RGBA, round_half_up

CHANNELS = 4


@dataclass(frozen=True, repr=False)
class PixelBuffer:
    """Immutable RGBA raster stored as flat, row-major bytes."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidArgument(f"Negative buffer size {self.width}x{self.height}")
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise InvalidArgument(
                f"Buffer data has {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def solid(cls, width: int, height: int, rgba: Sequence[int]) -> "PixelBuffer":
        pixel = bytes(rgba)
        if len(pixel) != CHANNELS:
            raise InvalidArgument(f"Expected an RGBA color, got {tuple(rgba)!r}")
        return cls(width=width, height=height, data=pixel * (width * height))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        """Decode a Pillow image of any mode into an RGBA buffer."""

        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, data=rgba.tobytes())

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.data)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def pixel(self, x: int, y: int) -> RGBA:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        offset = (y * self.width + x) * CHANNELS
        r, g, b, a = self.data[offset : offset + CHANNELS]
        return r, g, b, a

    def pixels(self) -> Iterator[RGBA]:
        data = self.data
        for offset in range(0, len(data), CHANNELS):
            yield data[offset], data[offset + 1], data[offset + 2], data[offset + 3]


def scaled_size(width: int, height: int, factor: float) -> Tuple[int, int]:
    """Return the ``round(size * factor)`` dimensions, never below one pixel."""

    return (
        max(1, round_half_up(width * factor)),
        max(1, round_half_up(height * factor)),
    )


def resize(buffer: PixelBuffer, width: int, height: int, resample: int = Image.Resampling.BILINEAR) -> PixelBuffer:
    if buffer.size == (width, height):
        return buffer
    resized = buffer.to_image().resize((width, height), resample=resample)
    return PixelBuffer.from_image(resized)


def scale(buffer: PixelBuffer, factor: float) -> PixelBuffer:
    """Downscale ``buffer`` uniformly by ``factor`` in ``(0, 1]``.

    A factor of exactly ``1.0``, or an empty buffer, hands back the same
    buffer object; otherwise nearest-neighbour sampling is used.
    """

    if not (0.0 < factor <= 1.0):
        raise InvalidArgument(f"scale factor must be in (0, 1], got {factor!r}")
    if factor == 1.0 or buffer.is_empty:
        return buffer
    width, height = scaled_size(buffer.width, buffer.height, factor)
    return resize(buffer, width, height, resample=Image.Resampling.NEAREST)


__all__ = ["CHANNELS", "PixelBuffer", "scaled_size", "resize", "scale"]
