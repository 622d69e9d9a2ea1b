"""BlurHash encode pipeline."""

import numpy as np
from typing import Optional, Tuple

from models.encoding_params import EncodingParams
from models.errors import (
    BytesPerPixelMismatch,
    ComponentsNumberInvalid,
    EncodingError,
    ImageDimensionsInvalid,
)
from engines.color_space import rgba_view
from engines.dct_engine import compute_components
from engines.quantizer import (
    decode_size_flag,
    encode_ac,
    encode_dc,
    quantize_max_value,
    size_flag,
)
from engines.base83 import decode_base83, encode_base83
from utils.constants import (
    AC_DIGITS,
    BYTES_PER_PIXEL,
    DC_DIGITS,
    MAX_COMPONENTS,
    MAX_VALUE_DIGITS,
    MIN_COMPONENTS,
    SIZE_FLAG_DIGITS,
)


def _buffer_length(pixels) -> int:
    if isinstance(pixels, np.ndarray):
        return int(pixels.size)
    return len(pixels)


def encode(pixels, components_x: int, components_y: int, width: int, height: int) -> str:
    """
    Encode an RGBA8 pixel buffer as a BlurHash string.

    pixels holds width * height * 4 bytes, row-major, pixel (x, y) channel c
    at 4*x + c + y*4*width. Raises ComponentsNumberInvalid,
    BytesPerPixelMismatch or ImageDimensionsInvalid before any computation.
    """
    if not (MIN_COMPONENTS <= components_x <= MAX_COMPONENTS
            and MIN_COMPONENTS <= components_y <= MAX_COMPONENTS):
        raise ComponentsNumberInvalid(components_x, components_y)

    length = _buffer_length(pixels)
    if width * height * BYTES_PER_PIXEL != length:
        raise BytesPerPixelMismatch(length, width, height)

    if width <= 0 or height <= 0:
        raise ImageDimensionsInvalid(width, height)

    # === TRANSFORM ===
    rgba = rgba_view(pixels, width, height)
    dc, ac = compute_components(rgba, components_x, components_y)

    # === QUANTIZE + PACK ===
    quantized_max, maximum_value = quantize_max_value(ac)

    parts = [
        encode_base83(size_flag(components_x, components_y), SIZE_FLAG_DIGITS),
        encode_base83(quantized_max, MAX_VALUE_DIGITS),
        encode_base83(encode_dc(dc), DC_DIGITS),
    ]
    for factor in ac:
        parts.append(encode_base83(encode_ac(factor, maximum_value), AC_DIGITS))

    return ''.join(parts)


def encode_image(image: np.ndarray, params: Optional[EncodingParams] = None) -> str:
    """Encode an (H, W, 4) uint8 RGBA array."""
    if params is None:
        params = EncodingParams()
    if image.ndim != 3 or image.shape[2] != BYTES_PER_PIXEL:
        raise ValueError(f"Expected an (H, W, 4) RGBA array, got shape {image.shape}")
    height, width = image.shape[:2]
    return encode(
        np.ascontiguousarray(image, dtype=np.uint8),
        params.components_x,
        params.components_y,
        width,
        height,
    )


def components_from_hash(blurhash: str) -> Tuple[int, int]:
    """Recover (components_x, components_y) from a hash's size flag."""
    if len(blurhash) < 6:
        raise EncodingError(f"BlurHash must be at least 6 characters, got {len(blurhash)}")

    try:
        flag = decode_base83(blurhash[0])
    except ValueError as e:
        raise EncodingError(str(e)) from e

    components_x, components_y = decode_size_flag(flag)
    if components_y > MAX_COMPONENTS:
        raise EncodingError(f"Size flag {flag} does not describe a valid grid")

    expected = 6 + 2 * (components_x * components_y - 1)
    if len(blurhash) != expected:
        raise EncodingError(
            f"BlurHash for {components_x}x{components_y} must be {expected} "
            f"characters, got {len(blurhash)}"
        )
    return components_x, components_y
