import numpy as np
from numpy import ndarray as NDArray

from .hue import rgb_hue, chroma_to_rgb, np_rgb_hue, np_chroma_to_rgb
from .numbers import UnitFloat, normalize_channel
from ..types.space_format import RGB_MAX


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSV.

    Input:
        r, g, b ∈ [0, 255]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    r, g, b = normalize_channel(r), normalize_channel(g), normalize_channel(b)
    v = max(r, g, b)
    delta = v - min(r, g, b)
    s = 0.0 if v == 0 else delta / v
    return rgb_hue(r, g, b), UnitFloat(s), UnitFloat(v)

def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float) / RGB_MAX
    g = np.asarray(g, dtype=float) / RGB_MAX
    b = np.asarray(b, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    V = np.maximum.reduce([r, g, b])
    delta = V - np.minimum.reduce([r, g, b])

    S = np.zeros(out_shape)
    mask = V > 0
    S[mask] = delta[mask] / V[mask]

    return np.stack([np_rgb_hue(r, g, b), S, V], axis=-1)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]
    """
    chroma = v * s
    return chroma_to_rgb(h, chroma, v - chroma)

def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to RGB.

    Args:
        h: array-like or scalar, [0,360) hue
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] value

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    chroma = v * s
    return np_chroma_to_rgb(h, chroma, v - chroma)
