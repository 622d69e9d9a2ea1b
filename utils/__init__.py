"""Shared utilities."""

from .constants import BASE83_ALPHABET, DEFAULT_COMPONENTS_X, DEFAULT_COMPONENTS_Y
from .timing import Timer
from .test_images import generate_solid, generate_quad, generate_demo_image
from .image_io import load_image_rgba, save_image

__all__ = [
    'BASE83_ALPHABET',
    'DEFAULT_COMPONENTS_X',
    'DEFAULT_COMPONENTS_Y',
    'Timer',
    'generate_solid',
    'generate_quad',
    'generate_demo_image',
    'load_image_rgba',
    'save_image',
]
