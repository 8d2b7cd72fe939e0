import numpy as np
from typing import Callable, Dict, Sequence, Union

from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .hsv import rgb_to_hsv, hsv_to_rgb, np_rgb_to_hsv, np_hsv_to_rgb
from .hsi import rgb_to_hsi, hsi_to_rgb, np_rgb_to_hsi, np_hsi_to_rgb
from .hwb import rgb_to_hwb, hwb_to_rgb, np_rgb_to_hwb, np_hwb_to_rgb
from .cmyk import rgb_to_cmyk, cmyk_to_rgb, np_rgb_to_cmyk, np_cmyk_to_rgb
from .xyz import rgb_to_xyz, xyz_to_rgb, np_rgb_to_xyz, np_xyz_to_rgb
from .lab import rgb_to_lab, lab_to_rgb, np_rgb_to_lab, np_lab_to_rgb
from .ycbcr import rgb_to_ycbcr, ycbcr_to_rgb, np_rgb_to_ycbcr, np_ycbcr_to_rgb
from .yuv import rgb_to_yuv, yuv_to_rgb, np_rgb_to_yuv, np_yuv_to_rgb
from .hex import rgb_to_hex, rgba_to_hex, hex_to_rgba

from ..types.color_types import ColorSpace, RGBATuple, SpaceTuple, SpaceValue, to_color_space

CONVERT_FROM_RGB: Dict[ColorSpace, Callable[[float, float, float], SpaceTuple]] = {
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.HSV: rgb_to_hsv,
    ColorSpace.HSI: rgb_to_hsi,
    ColorSpace.HWB: rgb_to_hwb,
    ColorSpace.CMYK: rgb_to_cmyk,
    ColorSpace.XYZ: rgb_to_xyz,
    ColorSpace.LAB: rgb_to_lab,
    ColorSpace.YCBCR: rgb_to_ycbcr,
    ColorSpace.YUV: rgb_to_yuv,
}

CONVERT_TO_RGB: Dict[ColorSpace, Callable[..., SpaceTuple]] = {
    ColorSpace.HSL: hsl_to_rgb,
    ColorSpace.HSV: hsv_to_rgb,
    ColorSpace.HSI: hsi_to_rgb,
    ColorSpace.HWB: hwb_to_rgb,
    ColorSpace.CMYK: cmyk_to_rgb,
    ColorSpace.XYZ: xyz_to_rgb,
    ColorSpace.LAB: lab_to_rgb,
    ColorSpace.YCBCR: ycbcr_to_rgb,
    ColorSpace.YUV: yuv_to_rgb,
}

CONVERT_NUMPY_FROM_RGB: Dict[ColorSpace, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ColorSpace.HSL: np_rgb_to_hsl,
    ColorSpace.HSV: np_rgb_to_hsv,
    ColorSpace.HSI: np_rgb_to_hsi,
    ColorSpace.HWB: np_rgb_to_hwb,
    ColorSpace.CMYK: np_rgb_to_cmyk,
    ColorSpace.XYZ: np_rgb_to_xyz,
    ColorSpace.LAB: np_rgb_to_lab,
    ColorSpace.YCBCR: np_rgb_to_ycbcr,
    ColorSpace.YUV: np_rgb_to_yuv,
}

CONVERT_NUMPY_TO_RGB: Dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSL: np_hsl_to_rgb,
    ColorSpace.HSV: np_hsv_to_rgb,
    ColorSpace.HSI: np_hsi_to_rgb,
    ColorSpace.HWB: np_hwb_to_rgb,
    ColorSpace.CMYK: np_cmyk_to_rgb,
    ColorSpace.XYZ: np_xyz_to_rgb,
    ColorSpace.LAB: np_lab_to_rgb,
    ColorSpace.YCBCR: np_ycbcr_to_rgb,
    ColorSpace.YUV: np_yuv_to_rgb,
}

# Alpha-carrying spaces and the base space they extend
ALPHA_BASE = {
    ColorSpace.RGBA: ColorSpace.RGB,
    ColorSpace.HSLA: ColorSpace.HSL,
}


def convert(
    color: Sequence[float],
    to_space: Union[ColorSpace, str],
) -> SpaceValue:
    """
    Convert canonical ``(r, g, b)`` or ``(r, g, b, alpha)`` to ``to_space``.

    Alpha spaces append alpha (1.0 when the input has none); ``hex`` returns
    the long-form string, with an alpha byte only when alpha is not 1.

    Raises:
        ValueError: for an unknown space
    """
    space = to_color_space(to_space)
    r, g, b = color[0], color[1], color[2]
    alpha = color[3] if len(color) > 3 else 1.0

    if space == ColorSpace.HEX:
        return rgb_to_hex(r, g, b) if alpha == 1.0 else rgba_to_hex(r, g, b, alpha)
    if space in ALPHA_BASE:
        return tuple(convert((r, g, b), ALPHA_BASE[space])) + (alpha,)
    if space == ColorSpace.RGB:
        return (r, g, b)
    return tuple(CONVERT_FROM_RGB[space](r, g, b))


def to_canonical(
    value: SpaceValue,
    from_space: Union[ColorSpace, str],
) -> RGBATuple:
    """
    Convert a space tuple (or hex string) to canonical ``(r, g, b, alpha)``.

    Raises:
        ValueError: for an unknown space or a hue outside [0, 360)
    """
    space = to_color_space(from_space)

    if space == ColorSpace.HEX:
        return hex_to_rgba(value)  # type: ignore[arg-type]
    if space in ALPHA_BASE:
        *base, alpha = value
        r, g, b, _ = to_canonical(tuple(base), ALPHA_BASE[space])
        return r, g, b, alpha
    if space == ColorSpace.RGB:
        r, g, b = value
        return r, g, b, 1.0
    r, g, b = CONVERT_TO_RGB[space](*value)
    return r, g, b, 1.0


def np_convert(rgb: np.ndarray, to_space: Union[ColorSpace, str]) -> np.ndarray:
    """
    Vectorized: convert an RGB array of shape (..., 3) to ``to_space``.

    Alpha spaces and hex are not supported for arrays.
    """
    space = to_color_space(to_space)
    rgb = np.asarray(rgb, dtype=float)
    if space == ColorSpace.RGB:
        return rgb
    if space not in CONVERT_NUMPY_FROM_RGB:
        raise ValueError(f"Array conversion to {space.value!r} is not supported")
    return CONVERT_NUMPY_FROM_RGB[space](rgb[..., 0], rgb[..., 1], rgb[..., 2])


def np_convert_to_rgb(values: np.ndarray, from_space: Union[ColorSpace, str]) -> np.ndarray:
    """Vectorized: convert an array of ``from_space`` tuples to RGB of shape (..., 3)."""
    space = to_color_space(from_space)
    values = np.asarray(values, dtype=float)
    if space == ColorSpace.RGB:
        return values
    if space not in CONVERT_NUMPY_TO_RGB:
        raise ValueError(f"Array conversion from {space.value!r} is not supported")
    channels = [values[..., i] for i in range(values.shape[-1])]
    return CONVERT_NUMPY_TO_RGB[space](*channels)
