import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp_channel, normalize_channel
from .ycbcr import KR, KG, KB
from ..types.space_format import RGB_MAX

U_SCALE = 0.492
V_SCALE = 0.877
U_MAX = 0.436
V_MAX = 0.615


def rgb_to_yuv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 255] to analog YUV (BT.601).

    Returns:
        (y [0,1], u [-0.436,0.436], v [-0.615,0.615])
    """
    r, g, b = normalize_channel(r), normalize_channel(g), normalize_channel(b)
    y = KR * r + KG * g + KB * b
    return y, U_SCALE * (b - y), V_SCALE * (r - y)

def yuv_to_rgb(y: float, u: float, v: float) -> tuple[float, float, float]:
    """Convert YUV to RGB in [0, 255], saturating channels that overshoot."""
    r = y + v / V_SCALE
    b = y + u / U_SCALE
    g = (y - KR * r - KB * b) / KG
    return (
        clamp_channel(r * RGB_MAX),
        clamp_channel(g * RGB_MAX),
        clamp_channel(b * RGB_MAX),
    )

def np_rgb_to_yuv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_yuv``; returns an array of shape (..., 3)."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float) / RGB_MAX,
        np.asarray(g, dtype=float) / RGB_MAX,
        np.asarray(b, dtype=float) / RGB_MAX,
    )
    y = KR * r + KG * g + KB * b
    return np.stack([y, U_SCALE * (b - y), V_SCALE * (r - y)], axis=-1)

def np_yuv_to_rgb(y: NDArray, u: NDArray, v: NDArray) -> NDArray:
    """Vectorized ``yuv_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    y, u, v = np.broadcast_arrays(
        np.asarray(y, dtype=float),
        np.asarray(u, dtype=float),
        np.asarray(v, dtype=float),
    )
    r = y + v / V_SCALE
    b = y + u / U_SCALE
    g = (y - KR * r - KB * b) / KG
    return np.clip(np.stack([r, g, b], axis=-1) * RGB_MAX, 0, RGB_MAX)
