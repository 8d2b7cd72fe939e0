"""Hue helpers shared by the HSL, HSV and HWB converters."""
import math
import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp_channel
from ..types.space_format import HUE_360, RGB_MAX

# Position of (chroma, x, 0) in (r, g, b) for each 60° sector.
SECTOR_ORDER = (
    (0, 1, 2),  # [0, 60):    (c, x, 0)
    (1, 0, 2),  # [60, 120):  (x, c, 0)
    (2, 0, 1),  # [120, 180): (0, c, x)
    (2, 1, 0),  # [180, 240): (0, x, c)
    (1, 2, 0),  # [240, 300): (x, 0, c)
    (0, 2, 1),  # [300, 360): (c, 0, x)
)
_NP_SECTOR_ORDER = np.array(SECTOR_ORDER)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360


def check_hue(h: float) -> float:
    """Reject a hue outside [0, 360). NaN is rejected too."""
    if not 0 <= h < HUE_360:
        raise ValueError(f"hue must be in [0, {HUE_360}), got {h}")
    return h


def np_check_hue(h: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float)
    if not np.all((h >= 0) & (h < HUE_360)):
        raise ValueError(f"hue must be in [0, {HUE_360})")
    return h


def hue_sector(h: float) -> int:
    return int(math.floor(h / 60)) % 6


def rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees of a normalized RGB triple, 0 for achromatic input.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        float: hue in [0, 360)
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    if delta == 0:
        return 0.0

    if max_c == r:
        hue = 60 * math.fmod((g - b) / delta, 6)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)

    if hue < 0:
        hue += HUE_360
    # -1e-15 + 360 rounds to 360.0
    return hue if hue < HUE_360 else hue - HUE_360


def chroma_to_rgb(h: float, chroma: float, m: float) -> tuple[float, float, float]:
    """Place chroma and its secondary component by sector, shift by ``m`` and scale to 0-255.

    Results are clamped so float error never leaves a channel just past a bound.
    """
    check_hue(h)
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    parts = (chroma, x, 0.0)
    i_r, i_g, i_b = SECTOR_ORDER[hue_sector(h)]
    return (
        clamp_channel((parts[i_r] + m) * RGB_MAX),
        clamp_channel((parts[i_g] + m) * RGB_MAX),
        clamp_channel((parts[i_b] + m) * RGB_MAX),
    )


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: hue in degrees of normalized RGB arrays."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    delta = max_c - np.minimum.reduce([r, g, b])

    hue = np.zeros(out_shape)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = 60 * np.fmod((g[mask_r] - b[mask_r]) / delta[mask_r], 6)
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2)
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4)

    hue = np.where(hue < 0, hue + HUE_360, hue)
    return np.where(hue >= HUE_360, hue - HUE_360, hue)


def np_chroma_to_rgb(h: NDArray, chroma: NDArray, m: NDArray) -> NDArray:
    """Vectorized ``chroma_to_rgb``; returns an array of shape (..., 3) in 0-255."""
    h = np_check_hue(h)
    chroma = np.asarray(chroma, dtype=float)
    m = np.asarray(m, dtype=float)

    out_shape = np.broadcast(h, chroma, m).shape
    h = np.broadcast_to(h, out_shape)
    chroma = np.broadcast_to(chroma, out_shape)
    m = np.broadcast_to(m, out_shape)

    x = chroma * (1 - np.abs((h / 60) % 2 - 1))
    parts = np.stack([chroma, x, np.zeros(out_shape)], axis=-1)

    sector = np.floor(h / 60).astype(int) % 6
    order = _NP_SECTOR_ORDER[sector]
    rgb = np.take_along_axis(parts, order, axis=-1)
    return np.clip((rgb + m[..., np.newaxis]) * RGB_MAX, 0, RGB_MAX)
