from __future__ import annotations

import math

import pytest

from acrylic_material import PixelBuffer, saturate


def test_saturation_of_one_is_identity(gradient):
    assert saturate(gradient, 1.0) == gradient


def test_saturation_of_zero_is_grayscale(gradient):
    result = saturate(gradient, 0.0)
    for r, g, b, _ in result.pixels():
        assert r == g == b


def test_grayscale_uses_luminance_weights():
    red = PixelBuffer.solid(2, 2, (255, 0, 0, 255))
    assert saturate(red, 0.0).pixel(0, 0) == (54, 54, 54, 255)
    green = PixelBuffer.solid(1, 1, (0, 255, 0, 255))
    assert saturate(green, 0.0).pixel(0, 0) == (182, 182, 182, 255)


def test_alpha_is_untouched(gradient):
    translucent = PixelBuffer(
        width=gradient.width,
        height=gradient.height,
        data=bytes(v if i % 4 != 3 else 77 for i, v in enumerate(gradient.data)),
    )
    result = saturate(translucent, 2.5)
    assert set(result.data[3::4]) == {77}


def test_oversaturation_is_clamped():
    buffer = PixelBuffer.solid(1, 1, (250, 120, 10, 255))
    r, g, b, a = saturate(buffer, 5.0).pixel(0, 0)
    assert r == 255
    assert b == 0
    assert a == 255


def test_negative_saturation_inverts_around_gray():
    buffer = PixelBuffer.solid(1, 1, (200, 100, 100, 255))
    r, g, b, _ = saturate(buffer, -1.0).pixel(0, 0)
    assert r < g
    assert g == b


@pytest.mark.parametrize("amount", [0.0, 0.5, 2.0])
def test_gray_pixels_are_fixed_points(amount):
    gray = PixelBuffer.solid(3, 3, (90, 90, 90, 255))
    assert saturate(gray, amount) == gray


def test_infinite_saturation_keeps_black_black():
    black = PixelBuffer.solid(2, 2, (0, 0, 0, 255))
    assert saturate(black, math.inf) == black


@pytest.mark.parametrize("amount", [math.inf, -math.inf, math.nan])
def test_non_finite_saturation_stays_in_byte_range(gradient, amount):
    result = saturate(gradient, amount)
    assert result.size == gradient.size
    assert result.data[3::4] == gradient.data[3::4]
    assert all(0 <= value <= 255 for value in result.data)
