"""Cosine basis projection for BlurHash components."""

import numpy as np
from typing import List, Optional, Tuple

from engines.color_space import SRGB_TO_LINEAR_LUT
from utils.constants import BAND_PIXELS


Factor = Tuple[float, float, float]


def basis_vectors(bx: int, by: int, width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    """Per-axis cosine terms cos(pi*bx*x/width) and cos(pi*by*y/height)."""
    cos_x = np.cos(np.pi * bx * np.arange(width, dtype=np.float64) / width)
    cos_y = np.cos(np.pi * by * np.arange(height, dtype=np.float64) / height)
    return cos_x, cos_y


def _normalisation(bx: int, by: int) -> float:
    return 1.0 if bx == 0 and by == 0 else 2.0


def _weighted_sum(linear: np.ndarray, cos_x: np.ndarray, cos_y: np.ndarray,
                  normalisation: float) -> np.ndarray:
    # normalisation * cos_x * cos_y, evaluated left to right per pixel
    basis = (normalisation * cos_x)[np.newaxis, :] * cos_y[:, np.newaxis]
    return np.einsum('yx,yxc->c', basis, linear)


def multiply_basis_function(linear: np.ndarray, bx: int, by: int) -> Factor:
    """
    Average linear-light RGB weighted by the (bx, by) cosine basis.

    linear is the (height, width, 3) output of rgba_to_linear. The DC term
    (0, 0) uses normalisation 1, every other term 2.
    """
    height, width = linear.shape[:2]
    cos_x, cos_y = basis_vectors(bx, by, width, height)
    sums = _weighted_sum(linear, cos_x, cos_y, _normalisation(bx, by))

    scale = 1.0 / (width * height)
    return float(sums[0] * scale), float(sums[1] * scale), float(sums[2] * scale)


def compute_components(
    rgba: np.ndarray,
    components_x: int,
    components_y: int,
    rows_per_band: Optional[int] = None
) -> Tuple[Factor, List[Factor]]:
    """
    DC factor and row-major AC factors (y outer, x inner) of an RGBA8 image.

    rgba is an (height, width, 4) uint8 array. Rows are linearized and
    projected one band at a time, so working memory stays bounded by the
    band size rather than the image size.
    """
    height, width = rgba.shape[:2]
    if rows_per_band is None:
        rows_per_band = max(1, BAND_PIXELS // width)

    cos_x = [basis_vectors(bx, 0, width, 1)[0] for bx in range(components_x)]
    cos_y = [basis_vectors(0, by, 1, height)[1] for by in range(components_y)]

    sums = np.zeros((components_y, components_x, 3), dtype=np.float64)
    for y0 in range(0, height, rows_per_band):
        y1 = min(y0 + rows_per_band, height)
        linear = SRGB_TO_LINEAR_LUT[rgba[y0:y1, :, :3]]
        for by in range(components_y):
            band_cos_y = cos_y[by][y0:y1]
            for bx in range(components_x):
                sums[by, bx] += _weighted_sum(
                    linear, cos_x[bx], band_cos_y, _normalisation(bx, by)
                )

    scale = 1.0 / (width * height)
    dc = None
    ac = []
    for by in range(components_y):
        for bx in range(components_x):
            s = sums[by, bx]
            factor = (float(s[0] * scale), float(s[1] * scale), float(s[2] * scale))
            if bx == 0 and by == 0:
                dc = factor
            else:
                ac.append(factor)
    return dc, ac
