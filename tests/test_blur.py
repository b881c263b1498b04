from __future__ import annotations

import math

import pytest

from acrylic_material import (
    BlurAlgorithmKind,
    BlurFailed,
    GaussianBlur,
    InvalidArgument,
    PixelBuffer,
    StackBlur,
    create_blur,
)
from acrylic_material.blur import gaussian_sigma

from conftest import channel_variance


BLURS = [(GaussianBlur(), 3.0), (GaussianBlur(), 25.0), (StackBlur(), 1), (StackBlur(), 6)]


@pytest.mark.parametrize("blur, radius", BLURS)
def test_blur_keeps_dimensions(blur, radius, gradient):
    result = blur.apply(gradient, radius)
    assert result.size == gradient.size


@pytest.mark.parametrize("blur, radius", BLURS)
def test_blurring_a_uniform_buffer_changes_nothing(blur, radius):
    buffer = PixelBuffer.solid(13, 9, (200, 40, 90, 180))
    assert blur.apply(buffer, radius) == buffer


@pytest.mark.parametrize("blur, radius", BLURS)
def test_blur_does_not_increase_variance(blur, radius, checkerboard):
    result = blur.apply(checkerboard, radius)
    assert channel_variance(result) < channel_variance(checkerboard)


@pytest.mark.parametrize("blur, radius", BLURS)
def test_blur_leaves_input_untouched(blur, radius, gradient):
    snapshot = bytes(gradient.data)
    result = blur.apply(gradient, radius)
    assert gradient.data == snapshot
    assert result is not gradient


def test_alpha_channel_is_blurred_too():
    data = bytearray(PixelBuffer.solid(9, 1, (0, 0, 0, 0)).data)
    data[4 * 4 + 3] = 255
    buffer = PixelBuffer(width=9, height=1, data=bytes(data))
    result = StackBlur().apply(buffer, 2)
    alphas = list(result.data[3::4])
    assert alphas[4] < 255
    assert alphas[3] > 0 and alphas[5] > 0


@pytest.mark.parametrize("radius", [0.0, -1.0, 25.5, 100.0])
def test_gaussian_rejects_radius_outside_domain(radius, gradient):
    with pytest.raises(InvalidArgument):
        GaussianBlur().apply(gradient, radius)


@pytest.mark.parametrize("radius", [0, -3, 2.5])
def test_stack_rejects_non_positive_or_fractional_radius(radius, gradient):
    with pytest.raises(InvalidArgument):
        StackBlur().apply(gradient, radius)


@pytest.mark.parametrize("blur, radius", [(GaussianBlur(), 5.0), (StackBlur(), 5)])
def test_empty_buffer_fails(blur, radius):
    with pytest.raises(BlurFailed):
        blur.apply(PixelBuffer(width=0, height=0, data=b""), radius)


def test_stack_radius_is_clamped_to_half_the_smaller_side():
    assert StackBlur.effective_radius(80, 85, 200) == 42
    assert StackBlur.effective_radius(3, 85, 200) == 3
    assert StackBlur.effective_radius(10, 1, 1) == 1


def test_stack_blur_with_huge_radius_still_produces_output(checkerboard):
    result = StackBlur().apply(checkerboard, 10_000)
    assert result.size == checkerboard.size


def test_gaussian_sigma_grows_with_radius():
    assert gaussian_sigma(1.0) == pytest.approx(1.0)
    assert gaussian_sigma(25.0) == pytest.approx(10.6)
    assert gaussian_sigma(5.0) < gaussian_sigma(10.0)


@pytest.mark.parametrize("blur", [GaussianBlur(), StackBlur()])
@pytest.mark.parametrize("radius", [math.inf, -math.inf, math.nan, "3"])
def test_non_finite_or_non_numeric_radius_is_invalid(blur, radius, gradient):
    with pytest.raises(InvalidArgument):
        blur.apply(gradient, radius)


def test_gaussian_and_stack_blur_look_alike_at_moderate_radius(checkerboard):
    gaussian = GaussianBlur().apply(checkerboard, 6.0)
    stack = StackBlur().apply(checkerboard, 6)
    diffs = [abs(a - b) for a, b in zip(gaussian.data, stack.data)]
    assert sum(diffs) / len(diffs) < 20


def test_create_blur_selects_variant():
    assert isinstance(create_blur("gaussian"), GaussianBlur)
    assert isinstance(create_blur(BlurAlgorithmKind.STACK), StackBlur)
    assert isinstance(create_blur(" Stack "), StackBlur)
    with pytest.raises(InvalidArgument):
        create_blur("box")
