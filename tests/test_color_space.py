"""Tests for sRGB <-> linear conversion."""

import numpy as np
import pytest
from engines.color_space import (
    srgb_to_linear,
    linear_to_srgb,
    rgba_to_linear,
    SRGB_TO_LINEAR_LUT,
)


def test_srgb_to_linear_endpoints():
    assert srgb_to_linear(0) == 0.0
    assert srgb_to_linear(255) == 1.0
    assert abs(srgb_to_linear(188) - 0.5) < 0.01


def test_srgb_to_linear_threshold():
    """Samples at or below 0.04045 use the linear segment."""
    assert srgb_to_linear(10) == pytest.approx(10 / 255 / 12.92)
    assert srgb_to_linear(11) == pytest.approx(((11 / 255 + 0.055) / 1.055) ** 2.4)


def test_linear_to_srgb_endpoints():
    assert linear_to_srgb(0.0) == 0
    assert linear_to_srgb(1.0) == 255
    assert linear_to_srgb(0.5) == 188


def test_linear_to_srgb_clamps():
    assert linear_to_srgb(-3.0) == 0
    assert linear_to_srgb(7.5) == 255


def test_round_trip_all_samples():
    """linear_to_srgb inverts srgb_to_linear to within one step."""
    for s in range(256):
        assert abs(linear_to_srgb(srgb_to_linear(s)) - s) <= 1


def test_lookup_table_matches_scalar():
    assert SRGB_TO_LINEAR_LUT.shape == (256,)
    for s in range(256):
        assert SRGB_TO_LINEAR_LUT[s] == srgb_to_linear(s)


def test_rgba_to_linear_layout():
    """Pixel (x, y) channel c sits at 4*x + c + y*4*width; alpha is dropped."""
    width, height = 3, 2
    pixels = bytearray(width * height * 4)
    offset = 4 * 2 + 1 * 4 * width
    pixels[offset:offset + 4] = bytes([255, 0, 188, 7])
    
    linear = rgba_to_linear(bytes(pixels), width, height)
    assert linear.shape == (height, width, 3)
    assert linear[1, 2, 0] == 1.0
    assert linear[1, 2, 1] == 0.0
    assert linear[1, 2, 2] == srgb_to_linear(188)
    assert np.count_nonzero(linear) == 2


def test_rgba_to_linear_accepts_arrays():
    image = np.random.randint(0, 256, (5, 4, 4), dtype=np.uint8)
    from_array = rgba_to_linear(image, 4, 5)
    from_bytes = rgba_to_linear(image.tobytes(), 4, 5)
    assert np.array_equal(from_array, from_bytes)
