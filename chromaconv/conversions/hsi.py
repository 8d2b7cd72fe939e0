import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

from .hue import check_hue, np_check_hue
from .numbers import UnitFloat, normalize_channel
from ..types.space_format import HUE_360, RGB_MAX

# Position of (main, rest, low) in (r, g, b) for each 120° sector.
HSI_SECTOR_ORDER = (
    (0, 1, 2),  # [0, 120)
    (2, 0, 1),  # [120, 240)
    (1, 2, 0),  # [240, 360)
)
_NP_HSI_SECTOR_ORDER = np.array(HSI_SECTOR_ORDER)

# Below this the RGB spread is float noise and the color counts as gray
GRAY_EPSILON = 1e-12


def rgb_to_hsi(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB in [0, 255] to HSI: (hue [0,360), saturation [0,1], intensity [0,1]).

    The hue comes from the arccos form, so it differs slightly from the
    hexagonal hue used by HSL/HSV away from the primaries.
    """
    r, g, b = normalize_channel(r), normalize_channel(g), normalize_channel(b)
    intensity = (r + g + b) / 3
    saturation = 0.0 if intensity == 0 else 1 - min(r, g, b) / intensity

    numerator = 0.5 * ((r - g) + (r - b))
    denominator = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    if denominator < GRAY_EPSILON:
        return 0.0, UnitFloat(saturation), UnitFloat(intensity)

    theta = math.degrees(math.acos(clamp(numerator / denominator, -1.0, 1.0)))
    hue = HUE_360 - theta if b > g else theta
    return (hue if hue < HUE_360 else hue - HUE_360), UnitFloat(saturation), UnitFloat(intensity)

def hsi_to_rgb(h: float, s: float, i: float) -> tuple[float, float, float]:
    """
    Convert HSI to RGB in [0, 255], saturating channels that overshoot.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        i: Intensity in [0, 1]
    """
    check_hue(h)
    if s == 0:
        gray = clamp(i * RGB_MAX, 0.0, float(RGB_MAX))
        return gray, gray, gray

    sector = int(h // 120)
    offset = math.radians(h - sector * 120)

    low = i * (1 - s)
    main = i * (1 + s * math.cos(offset) / math.cos(math.pi / 3 - offset))
    rest = 3 * i - (main + low)

    parts = (main, rest, low)
    i_r, i_g, i_b = HSI_SECTOR_ORDER[sector]
    return (
        clamp(parts[i_r] * RGB_MAX, 0.0, float(RGB_MAX)),
        clamp(parts[i_g] * RGB_MAX, 0.0, float(RGB_MAX)),
        clamp(parts[i_b] * RGB_MAX, 0.0, float(RGB_MAX)),
    )

def np_rgb_to_hsi(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``rgb_to_hsi``; returns an array of shape (..., 3)."""
    r = np.asarray(r, dtype=float) / RGB_MAX
    g = np.asarray(g, dtype=float) / RGB_MAX
    b = np.asarray(b, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    intensity = (r + g + b) / 3
    saturation = np.zeros(out_shape)
    lit = intensity > 0
    saturation[lit] = 1 - np.minimum.reduce([r, g, b])[lit] / intensity[lit]

    numerator = 0.5 * ((r - g) + (r - b))
    denominator = np.sqrt((r - g) ** 2 + (r - b) * (g - b))

    hue = np.zeros(out_shape)
    chromatic = denominator >= GRAY_EPSILON
    hue[chromatic] = np.degrees(np.arccos(np.clip(numerator[chromatic] / denominator[chromatic], -1, 1)))
    hue = np.where(b > g, HUE_360 - hue, hue)
    hue = np.where(hue >= HUE_360, hue - HUE_360, hue)
    return np.stack([hue, saturation, intensity], axis=-1)

def np_hsi_to_rgb(h: NDArray, s: NDArray, i: NDArray) -> NDArray:
    """Vectorized ``hsi_to_rgb``; returns an array of shape (..., 3) in [0, 255]."""
    h = np_check_hue(h)
    s = np.asarray(s, dtype=float)
    i = np.asarray(i, dtype=float)

    out_shape = np.broadcast(h, s, i).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    i = np.broadcast_to(i, out_shape)

    sector = (h // 120).astype(int)
    offset = np.radians(h - sector * 120)

    low = i * (1 - s)
    main = i * (1 + s * np.cos(offset) / np.cos(np.pi / 3 - offset))
    rest = 3 * i - (main + low)

    parts = np.stack([main, rest, low], axis=-1)
    parts = np.where((s == 0)[..., np.newaxis], i[..., np.newaxis], parts)
    rgb = np.take_along_axis(parts, _NP_HSI_SECTOR_ORDER[sector], axis=-1)
    return np.clip(rgb * RGB_MAX, 0, RGB_MAX)
