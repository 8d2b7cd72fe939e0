import numpy as np
from numpy import ndarray as NDArray

from .xyz import rgb_to_xyz, xyz_to_rgb, np_rgb_to_xyz, np_xyz_to_rgb


def rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 255] to CIELAB (D65).

    Returns:
        (l [0,100], a, b)
    """
    x, y, z = rgb_to_xyz(r, g, b)
    l = 116 * y - 16
    return max(l, 0.0), 500 * (x - y), 200 * (y - z)

def lab_to_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert CIELAB (D65) to RGB in [0, 255], saturating out-of-gamut channels."""
    y = (l + 16) / 116
    return xyz_to_rgb(y + a / 500, y, y - b / 200)

def np_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_lab``; returns an array of shape (..., 3)."""
    xyz = np_rgb_to_xyz(r, g, b)
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    return np.stack([np.maximum(116 * y - 16, 0), 500 * (x - y), 200 * (y - z)], axis=-1)

def np_lab_to_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``lab_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    y = (np.asarray(l, dtype=float) + 16) / 116
    return np_xyz_to_rgb(y + np.asarray(a, dtype=float) / 500, y, y - np.asarray(b, dtype=float) / 200)
