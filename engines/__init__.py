"""BlurHash engines - pure computation, no I/O."""

from .color_space import (
    srgb_to_linear,
    linear_to_srgb,
    rgba_view,
    rgba_to_linear,
    SRGB_TO_LINEAR_LUT,
)
from .dct_engine import basis_vectors, multiply_basis_function, compute_components
from .quantizer import (
    sign_pow,
    size_flag,
    decode_size_flag,
    quantize_max_value,
    encode_dc,
    encode_ac,
)
from .base83 import encode_base83, decode_base83
from .pipeline import encode, encode_image, components_from_hash

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'rgba_view',
    'rgba_to_linear',
    'SRGB_TO_LINEAR_LUT',
    'basis_vectors',
    'multiply_basis_function',
    'compute_components',
    'sign_pow',
    'size_flag',
    'decode_size_flag',
    'quantize_max_value',
    'encode_dc',
    'encode_ac',
    'encode_base83',
    'decode_base83',
    'encode',
    'encode_image',
    'components_from_hash',
]
