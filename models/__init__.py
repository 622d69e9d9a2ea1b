"""Data models for encoding parameters, results and errors."""

from .errors import (
    EncodingError,
    ComponentsNumberInvalid,
    BytesPerPixelMismatch,
    ImageDimensionsInvalid,
)
from .encoding_params import EncodingParams
from .encoding_result import EncodingResult

__all__ = [
    'EncodingError',
    'ComponentsNumberInvalid',
    'BytesPerPixelMismatch',
    'ImageDimensionsInvalid',
    'EncodingParams',
    'EncodingResult',
]
