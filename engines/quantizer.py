"""Quantization of BlurHash factors into base83-sized integers."""

import math
from typing import Sequence, Tuple

from engines.color_space import linear_to_srgb
from utils.constants import (
    AC_LEVELS,
    AC_MAX_QUANT,
    AC_MAX_SCALE,
    AC_QUANT_MAX,
    MAX_COMPONENTS,
)


def sign_pow(value: float, exp: float) -> float:
    """|value| ** exp carrying the sign of value."""
    return math.copysign(abs(value) ** exp, value)


def size_flag(components_x: int, components_y: int) -> int:
    """Pack the component grid into one digit (0-80)."""
    return (components_x - 1) + (components_y - 1) * MAX_COMPONENTS


def decode_size_flag(flag: int) -> Tuple[int, int]:
    """Inverse of size_flag: (components_x, components_y)."""
    return flag % MAX_COMPONENTS + 1, flag // MAX_COMPONENTS + 1


def quantize_max_value(ac: Sequence[Sequence[float]]) -> Tuple[int, float]:
    """
    Quantized AC maximum and the normalisation magnitude derived from it.

    Returns (0, 1.0) when there are no AC factors.
    """
    if not ac:
        return 0, 1.0

    actual_maximum = max(abs(c) for factor in ac for c in factor)
    quantized = int(math.floor(actual_maximum * AC_MAX_SCALE - 0.5))
    quantized = max(0, min(AC_MAX_QUANT, quantized))
    return quantized, (quantized + 1) / AC_MAX_SCALE


def encode_dc(value: Sequence[float]) -> int:
    """DC factor as a 24-bit sRGB integer."""
    r = linear_to_srgb(value[0])
    g = linear_to_srgb(value[1])
    b = linear_to_srgb(value[2])
    return (r << 16) + (g << 8) + b


def _quantize_ac_channel(value: float, maximum_value: float) -> int:
    q = math.floor(sign_pow(value / maximum_value, 0.5) * 9.0 + 9.5)
    return int(math.floor(max(0.0, min(float(AC_QUANT_MAX), q))))


def encode_ac(value: Sequence[float], maximum_value: float) -> int:
    """AC factor as three base-19 digits (0-6858)."""
    quant_r = _quantize_ac_channel(value[0], maximum_value)
    quant_g = _quantize_ac_channel(value[1], maximum_value)
    quant_b = _quantize_ac_channel(value[2], maximum_value)
    return quant_r * AC_LEVELS * AC_LEVELS + quant_g * AC_LEVELS + quant_b
