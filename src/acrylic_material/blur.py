"""Blur algorithms operating on RGBA pixel buffers.

Both variants blur every channel independently, alpha included, and treat
pixels beyond the border as copies of the nearest edge pixel.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Sequence, Union

from PIL import ImageFilter

from .buffer import CHANNELS, PixelBuffer
from .errors import BlurFailed, InvalidArgument

Plane = List[int]

MAX_GAUSSIAN_RADIUS = 25.0


class BlurAlgorithmKind(str, Enum):
    GAUSSIAN = "gaussian"
    STACK = "stack"

    @classmethod
    def parse(cls, value: Union[str, "BlurAlgorithmKind"]) -> "BlurAlgorithmKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            options = ", ".join(kind.value for kind in cls)
            raise InvalidArgument(f"Unknown blur algorithm {value!r}; expected one of {options}") from exc


class BlurAlgorithm(ABC):
    """A blur capability: produce a blurred copy of a buffer for a radius."""

    kind: BlurAlgorithmKind

    @abstractmethod
    def validate_radius(self, radius: float) -> None:
        """Raise :class:`InvalidArgument` when ``radius`` is outside the domain."""

    @abstractmethod
    def _blur(self, buffer: PixelBuffer, radius: float) -> PixelBuffer:
        ...

    def apply(self, buffer: PixelBuffer, radius: float) -> PixelBuffer:
        """Return a blurred buffer with the same dimensions as ``buffer``."""

        self.validate_radius(radius)
        if buffer.is_empty:
            raise BlurFailed(
                f"{self.kind.value} blur cannot process an empty {buffer.width}x{buffer.height} buffer"
            )
        return self._blur(buffer, radius)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GaussianBlur(BlurAlgorithm):
    """Gaussian blur for radii in ``(0, 25]`` backed by Pillow's filter."""

    kind = BlurAlgorithmKind.GAUSSIAN

    def validate_radius(self, radius: float) -> None:
        if not (_is_finite(radius) and 0.0 < radius <= MAX_GAUSSIAN_RADIUS):
            raise InvalidArgument(
                f"Gaussian blur radius must be in (0, {MAX_GAUSSIAN_RADIUS:g}], got {radius!r}"
            )

    def _blur(self, buffer: PixelBuffer, radius: float) -> PixelBuffer:
        blurred = buffer.to_image().filter(ImageFilter.GaussianBlur(radius=gaussian_sigma(radius)))
        return PixelBuffer.from_image(blurred)


class StackBlur(BlurAlgorithm):
    """Stack blur approximation of a Gaussian for integer radii ``>= 1``.

    See http://www.quasimondo.com/StackBlurForCanvas/StackBlurDemo.html for
    a description of the algorithm.
    """

    kind = BlurAlgorithmKind.STACK

    def validate_radius(self, radius: float) -> None:
        if not _is_finite(radius) or radius < 1 or int(radius) != radius:
            raise InvalidArgument(f"Stack blur radius must be an integer >= 1, got {radius!r}")

    @staticmethod
    def effective_radius(radius: float, width: int, height: int) -> int:
        return max(1, min(int(radius), min(width, height) // 2))

    def _blur(self, buffer: PixelBuffer, radius: float) -> PixelBuffer:
        width, height = buffer.width, buffer.height
        reach = self.effective_radius(radius, width, height)
        planes = split_planes(buffer)
        for plane in planes:
            for y in range(height):
                start = y * width
                plane[start : start + width] = _stack_blur_line(plane[start : start + width], reach)
            for x in range(width):
                plane[x::width] = _stack_blur_line(plane[x::width], reach)
        return join_planes(width, height, planes)


def gaussian_sigma(radius: float) -> float:
    """Standard deviation used for a Gaussian blur ``radius``."""

    return 0.4 * radius + 0.6


def _is_finite(radius: float) -> bool:
    try:
        return math.isfinite(radius)
    except TypeError:
        return False


def _stack_blur_line(line: Sequence[int], radius: int) -> Plane:
    """Blur one row or column with the stack blur sliding window."""

    last = len(line) - 1
    div = 2 * radius + 1
    divisor = (radius + 1) * (radius + 1)
    half = divisor // 2

    stack = [0] * div
    total = sum_in = sum_out = 0
    for i in range(-radius, radius + 1):
        value = line[min(last, max(i, 0))]
        stack[i + radius] = value
        total += value * (radius + 1 - abs(i))
        if i > 0:
            sum_in += value
        else:
            sum_out += value

    out = [0] * len(line)
    pointer = radius
    for x in range(len(line)):
        out[x] = (total + half) // divisor
        total -= sum_out

        start = (pointer - radius + div) % div
        sum_out -= stack[start]
        value = line[min(last, x + radius + 1)]
        stack[start] = value
        sum_in += value
        total += sum_in

        pointer = (pointer + 1) % div
        value = stack[pointer]
        sum_out += value
        sum_in -= value
    return out


def split_planes(buffer: PixelBuffer) -> List[Plane]:
    return [list(buffer.data[channel::CHANNELS]) for channel in range(CHANNELS)]


def join_planes(width: int, height: int, planes: Sequence[Sequence[int]]) -> PixelBuffer:
    data = bytearray(width * height * CHANNELS)
    for channel, plane in enumerate(planes):
        data[channel::CHANNELS] = bytes(plane)
    return PixelBuffer(width=width, height=height, data=bytes(data))


def create_blur(kind: Union[str, BlurAlgorithmKind]) -> BlurAlgorithm:
    """Return the blur implementation registered for ``kind``."""

    kind = BlurAlgorithmKind.parse(kind)
    if kind is BlurAlgorithmKind.GAUSSIAN:
        return GaussianBlur()
    return StackBlur()


__all__ = [
    "MAX_GAUSSIAN_RADIUS",
    "BlurAlgorithmKind",
    "BlurAlgorithm",
    "GaussianBlur",
    "StackBlur",
    "gaussian_sigma",
    "split_planes",
    "join_planes",
    "create_blur",
]
