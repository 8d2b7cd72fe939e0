"""YCbCr conversions with ITU-R BT.601 coefficients, full 0-255 range."""
import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp_channel
from ..types.space_format import RGB_MAX

KR, KG, KB = 0.299, 0.587, 0.114
CB_SCALE = 0.564
CR_SCALE = 0.713
CHROMA_OFFSET = 128

# Largest distance of Cb / Cr from the offset (reached by blue / red and their complements)
CB_MAX = CB_SCALE * RGB_MAX * (1 - KB)
CR_MAX = CR_SCALE * RGB_MAX * (1 - KR)


def rgb_to_ycbcr(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 255] to YCbCr.

    Y is in [0, 255]; Cb and Cr are centered on 128 and reach
    ``128 ± CB_MAX`` / ``128 ± CR_MAX``.
    Yellow (255, 255, 0) gives roughly (225.93, 0.5755, 148.7269).
    """
    y = KR * r + KG * g + KB * b
    cb = CHROMA_OFFSET + CB_SCALE * (b - y)
    cr = CHROMA_OFFSET + CR_SCALE * (r - y)
    return y, cb, cr

def ycbcr_to_rgb(y: float, cb: float, cr: float) -> tuple[float, float, float]:
    """
    Convert YCbCr to RGB in [0, 255], saturating channels that overshoot.

    Exact inverse of ``rgb_to_ycbcr`` inside the gamut.
    """
    r = y + (cr - CHROMA_OFFSET) / CR_SCALE
    b = y + (cb - CHROMA_OFFSET) / CB_SCALE
    g = (y - KR * r - KB * b) / KG
    return clamp_channel(r), clamp_channel(g), clamp_channel(b)

def np_rgb_to_ycbcr(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_ycbcr``; returns an array of shape (..., 3)."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    y = KR * r + KG * g + KB * b
    return np.stack([
        y,
        CHROMA_OFFSET + CB_SCALE * (b - y),
        CHROMA_OFFSET + CR_SCALE * (r - y),
    ], axis=-1)

def np_ycbcr_to_rgb(y: NDArray, cb: NDArray, cr: NDArray) -> NDArray:
    """Vectorized ``ycbcr_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    y, cb, cr = np.broadcast_arrays(
        np.asarray(y, dtype=float),
        np.asarray(cb, dtype=float),
        np.asarray(cr, dtype=float),
    )
    r = y + (cr - CHROMA_OFFSET) / CR_SCALE
    b = y + (cb - CHROMA_OFFSET) / CB_SCALE
    g = (y - KR * r - KB * b) / KG
    return np.clip(np.stack([r, g, b], axis=-1), 0, RGB_MAX)
