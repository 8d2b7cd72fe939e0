import numpy as np
from numpy import ndarray as NDArray

from .hue import rgb_hue, chroma_to_rgb, np_rgb_hue, np_chroma_to_rgb
from .numbers import UnitFloat, normalize_channel
from ..types.space_format import RGB_MAX

## HSL to RGB conversions

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://www.rapidtables.com/convert/color/hsl-to-rgb.html

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 255]

    Raises:
        ValueError: if the hue is outside [0, 360)
    """
    chroma = (1 - abs(2 * l - 1)) * s
    m = l - chroma / 2
    return chroma_to_rgb(h, chroma, m)

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    chroma = (1 - np.abs(2 * l - 1)) * s
    m = l - chroma / 2
    return np_chroma_to_rgb(h, chroma, m)

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSL.
    Based on: https://www.rapidtables.com/convert/color/rgb-to-hsl.html

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = normalize_channel(r), normalize_channel(g), normalize_channel(b)
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, UnitFloat(0.0), UnitFloat(lightness)

    saturation = delta / (1 - abs(2 * lightness - 1))
    return rgb_hue(r, g, b), UnitFloat(saturation), UnitFloat(lightness)

def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float) / RGB_MAX
    g = np.asarray(g, dtype=float) / RGB_MAX
    b = np.asarray(b, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros(out_shape)
    mask = delta > 0
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))

    hue = np_rgb_hue(r, g, b)
    return np.stack([hue, np.clip(saturation, 0, 1), lightness], axis=-1)
