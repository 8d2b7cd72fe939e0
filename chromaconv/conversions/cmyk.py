import numpy as np
from numpy import ndarray as NDArray

from .numbers import UnitFloat, normalize_channel
from ..types.space_format import RGB_MAX


def rgb_to_cmyk(r: float, g: float, b: float) -> tuple[UnitFloat, UnitFloat, UnitFloat, UnitFloat]:
    """
    Convert RGB in [0, 255] to CMYK, every component in [0, 1].

    Pure black has no chromatic ink: (0, 0, 0, 1).
    """
    r, g, b = normalize_channel(r), normalize_channel(g), normalize_channel(b)
    k = 1 - max(r, g, b)
    if k == 1:
        return UnitFloat(0.0), UnitFloat(0.0), UnitFloat(0.0), UnitFloat(1.0)
    return (
        UnitFloat((1 - r - k) / (1 - k)),
        UnitFloat((1 - g - k) / (1 - k)),
        UnitFloat((1 - b - k) / (1 - k)),
        UnitFloat(k),
    )

def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """Convert CMYK in [0, 1] to RGB in [0, 255]."""
    return (
        RGB_MAX * (1 - c) * (1 - k),
        RGB_MAX * (1 - m) * (1 - k),
        RGB_MAX * (1 - y) * (1 - k),
    )

def np_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_cmyk``; returns an array of shape (..., 4)."""
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1) / RGB_MAX

    k = 1 - rgb.max(axis=-1)
    cmy = np.zeros(rgb.shape)
    inked = k < 1
    cmy[inked] = (1 - rgb[inked] - k[inked][..., np.newaxis]) / (1 - k[inked])[..., np.newaxis]
    return np.concatenate([cmy, k[..., np.newaxis]], axis=-1)

def np_cmyk_to_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized ``cmyk_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    cmy = np.stack(np.broadcast_arrays(
        np.asarray(c, dtype=float),
        np.asarray(m, dtype=float),
        np.asarray(y, dtype=float),
    ), axis=-1)
    k = np.asarray(k, dtype=float)[..., np.newaxis]
    return RGB_MAX * (1 - cmy) * (1 - k)
