import numpy as np
from numpy import ndarray as NDArray

from .hsv import hsv_to_rgb, np_hsv_to_rgb
from .hue import rgb_hue, np_rgb_hue, check_hue, np_check_hue
from .numbers import UnitFloat, normalize_channel
from ..types.space_format import RGB_MAX


def rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB in [0, 255] to HWB: (hue [0,360), whiteness [0,1], blackness [0,1]).
    """
    r, g, b = normalize_channel(r), normalize_channel(g), normalize_channel(b)
    return rgb_hue(r, g, b), UnitFloat(min(r, g, b)), UnitFloat(1 - max(r, g, b))

def hwb_to_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    Convert HWB to RGB in [0, 255].

    Whiteness and blackness summing to 1 or more give the gray ``w / (w + b)``.
    """
    check_hue(h)
    if w + b >= 1:
        gray = w / (w + b) * RGB_MAX
        return gray, gray, gray
    v = 1 - b
    return hsv_to_rgb(h, 1 - w / v, v)

def np_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_hwb``; returns an array of shape (..., 3)."""
    r = np.asarray(r, dtype=float) / RGB_MAX
    g = np.asarray(g, dtype=float) / RGB_MAX
    b = np.asarray(b, dtype=float) / RGB_MAX

    hue = np_rgb_hue(r, g, b)
    whiteness = np.broadcast_to(np.minimum.reduce([r, g, b]), hue.shape)
    blackness = np.broadcast_to(1 - np.maximum.reduce([r, g, b]), hue.shape)
    return np.stack([hue, whiteness, blackness], axis=-1)

def np_hwb_to_rgb(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``hwb_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    h = np_check_hue(h)
    w = np.asarray(w, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(h, w, b).shape
    h = np.broadcast_to(h, out_shape)
    w = np.broadcast_to(w, out_shape)
    b = np.broadcast_to(b, out_shape)

    total = w + b
    gray_mask = total >= 1

    v = 1 - b
    s = np.zeros(out_shape)
    colored = ~gray_mask
    s[colored] = 1 - w[colored] / v[colored]
    rgb = np_hsv_to_rgb(h, s, v)

    gray = np.zeros(out_shape)
    gray[gray_mask] = w[gray_mask] / total[gray_mask] * RGB_MAX
    return np.where(gray_mask[..., np.newaxis], gray[..., np.newaxis], rgb)
