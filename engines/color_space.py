"""sRGB <-> linear-light conversion."""

import numpy as np

from utils.constants import BYTES_PER_PIXEL


def srgb_to_linear(value: int) -> float:
    """8-bit sRGB sample to linear light in [0, 1]."""
    v = value / 255.0
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> int:
    """Linear light to 8-bit sRGB, clamped, rounded half up."""
    v = max(0.0, min(1.0, value))
    if v <= 0.0031308:
        return int(v * 12.92 * 255.0 + 0.5)
    return int((1.055 * v ** (1.0 / 2.4) - 0.055) * 255.0 + 0.5)


# Every 8-bit sample maps through the scalar function exactly once
SRGB_TO_LINEAR_LUT = np.array([srgb_to_linear(i) for i in range(256)], dtype=np.float64)


def rgba_view(pixels, width: int, height: int) -> np.ndarray:
    """
    View an RGBA8 buffer as an (height, width, 4) uint8 array.

    Accepts bytes, bytearray, memoryview or any uint8 numpy array holding
    width * height * 4 samples. No copy is made for those inputs.
    """
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels, dtype=np.uint8).reshape(-1)
    return flat.reshape(height, width, BYTES_PER_PIXEL)


def rgba_to_linear(pixels, width: int, height: int) -> np.ndarray:
    """RGBA8 buffer to an (height, width, 3) linear-light array. Alpha is dropped."""
    return SRGB_TO_LINEAR_LUT[rgba_view(pixels, width, height)[:, :, :3]]
