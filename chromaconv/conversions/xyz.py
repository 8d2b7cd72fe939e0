"""
CIE XYZ conversions.

The XYZ tuple produced here is relative to the D65 reference white and already
passed through the CIELAB companding function f(t), so white maps to (1, 1, 1)
and black to (4/29, 4/29, 4/29). LAB is a linear map of this tuple.
"""
import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp_channel
from ..types.space_format import RGB_MAX

# D65 reference white
LAB_XN = 0.950470
LAB_YN = 1.0
LAB_ZN = 1.088830

# CIELAB companding constants
LAB_T0 = 0.137931034  # 4 / 29
LAB_T1 = 0.206896552  # 6 / 29
LAB_T2 = 0.12841855   # 3 * t1 ** 2
LAB_T3 = 0.008856452  # t1 ** 3

SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.00304
SRGB_GAMMA = 2.4

M_SRGB_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# Exact inverse of M_SRGB_XYZ, close to the published
# [[3.2404542, -1.5371385, -0.4985314], ...]
M_XYZ_SRGB = np.linalg.inv(M_SRGB_XYZ)

WHITE = np.array([LAB_XN, LAB_YN, LAB_ZN])


def srgb_to_linear(c: float) -> float:
    """Convert a 0-255 sRGB channel to linear light in [0, 1]."""
    c = c / RGB_MAX
    if c <= SRGB_TO_LINEAR_TH:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** SRGB_GAMMA

def linear_to_srgb(c: float) -> float:
    """Convert linear light back to a 0-255 sRGB channel, saturating at the bounds."""
    if c <= LINEAR_TO_SRGB_TH:
        value = 12.92 * c
    else:
        value = 1.055 * (c ** (1 / SRGB_GAMMA)) - 0.055
    return clamp_channel(value * RGB_MAX)

def xyz_compand(t: float) -> float:
    if t > LAB_T3:
        return t ** (1 / 3)
    return t / LAB_T2 + LAB_T0

def xyz_expand(t: float) -> float:
    if t > LAB_T1:
        return t * t * t
    return LAB_T2 * (t - LAB_T0)


def rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB in [0, 255] to companded XYZ.

    >>> tuple(round(v, 6) for v in rgb_to_xyz(255, 0, 0))
    (0.757088, 0.596903, 0.260887)
    """
    linear = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    x, y, z = (
        sum(coef * c for coef, c in zip(row, linear)) / white
        for row, white in zip(M_SRGB_XYZ.tolist(), (LAB_XN, LAB_YN, LAB_ZN))
    )
    return xyz_compand(x), xyz_compand(y), xyz_compand(z)

def xyz_to_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Convert companded XYZ back to RGB in [0, 255]."""
    xyz = (xyz_expand(x) * LAB_XN, xyz_expand(y) * LAB_YN, xyz_expand(z) * LAB_ZN)
    r, g, b = (
        linear_to_srgb(sum(coef * c for coef, c in zip(row, xyz)))
        for row in M_XYZ_SRGB.tolist()
    )
    return r, g, b


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: 0-255 sRGB to linear light."""
    c = np.asarray(c, dtype=float) / RGB_MAX
    return np.where(
        c <= SRGB_TO_LINEAR_TH,
        c / 12.92,
        ((c + 0.055) / 1.055) ** SRGB_GAMMA
    )

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: linear light to 0-255 sRGB."""
    c = np.asarray(c, dtype=float)
    value = np.where(
        c <= LINEAR_TO_SRGB_TH,
        12.92 * c,
        1.055 * (np.maximum(c, 0) ** (1 / SRGB_GAMMA)) - 0.055
    )
    return np.clip(value * RGB_MAX, 0, RGB_MAX)

def np_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_xyz``; returns an array of shape (..., 3)."""
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    xyz = np_srgb_to_linear(rgb) @ M_SRGB_XYZ.T / WHITE
    return np.where(xyz > LAB_T3, np.cbrt(xyz), xyz / LAB_T2 + LAB_T0)

def np_xyz_to_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized ``xyz_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    xyz = np.stack(np.broadcast_arrays(
        np.asarray(x, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(z, dtype=float),
    ), axis=-1)
    xyz = np.where(xyz > LAB_T1, xyz ** 3, LAB_T2 * (xyz - LAB_T0)) * WHITE
    return np_linear_to_srgb(xyz @ M_XYZ_SRGB.T)
