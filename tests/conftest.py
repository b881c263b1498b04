from __future__ import annotations

import pytest

from acrylic_material import PixelBuffer


def make_gradient(width: int, height: int) -> PixelBuffer:
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data.extend(
                (
                    (x * 255) // max(1, width - 1),
                    (y * 255) // max(1, height - 1),
                    ((x + y) * 97) % 256,
                    255,
                )
            )
    return PixelBuffer(width=width, height=height, data=bytes(data))


def make_checkerboard(width: int, height: int, cell: int = 2) -> PixelBuffer:
    data = bytearray()
    for y in range(height):
        for x in range(width):
            value = 255 if ((x // cell) + (y // cell)) % 2 == 0 else 0
            data.extend((value, value, value, 255))
    return PixelBuffer(width=width, height=height, data=bytes(data))


def channel_variance(buffer: PixelBuffer, channel: int = 0) -> float:
    values = list(buffer.data[channel::4])
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


@pytest.fixture
def gradient() -> PixelBuffer:
    return make_gradient(24, 18)


@pytest.fixture
def checkerboard() -> PixelBuffer:
    return make_checkerboard(16, 16)
