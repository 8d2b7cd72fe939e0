"""
Chromaconv Color Space Conversions
==================================

Pure conversion functions between canonical RGB and every supported color
space, with scalar and vectorized (numpy) implementations.

Features
--------
- RGB is the hub: every space converts to and from RGB in [0, 255]
- Scalar functions for single color conversions
- Vectorized numpy functions for batch processing
- Inverse conversions saturate at the RGB channel bounds

Conversion Functions
--------------------

Hue spaces (hue in degrees [0, 360), other channels in [0, 1]):
    rgb_to_hsl / hsl_to_rgb
    rgb_to_hsv / hsv_to_rgb
    rgb_to_hsi / hsi_to_rgb
    rgb_to_hwb / hwb_to_rgb

    A hue outside [0, 360) raises ValueError; normalize it first.

Subtractive:
    rgb_to_cmyk / cmyk_to_rgb

CIE (D65 reference white):
    rgb_to_xyz / xyz_to_rgb
        XYZ relative to the white point, companded with the CIELAB f(t)
    rgb_to_lab / lab_to_rgb

Luma/chroma (BT.601):
    rgb_to_ycbcr / ycbcr_to_rgb
    rgb_to_yuv / yuv_to_rgb

Hex:
    rgb_to_hex, rgba_to_hex, hex_to_rgba, simplify_hex, expand_hex

Every pair has an ``np_`` vectorized twin returning a stacked (..., N) array.

High-Level API
--------------
    convert(color, to_space)
        Canonical (r, g, b[, alpha]) to any space
    to_canonical(value, from_space)
        Any space to canonical (r, g, b, alpha)
    np_convert(rgb, to_space) / np_convert_to_rgb(values, from_space)
        Vectorized equivalents

Examples
--------
>>> from chromaconv.conversions import rgb_to_hsl, hsl_to_rgb
>>>
>>> h, s, l = rgb_to_hsl(0, 128, 128)
>>> print(f"Hue: {h}°, Saturation: {s}, Lightness: {l}")
>>>
>>> r, g, b = hsl_to_rgb(h, s, l)
>>>
>>> import numpy as np
>>> from chromaconv.conversions import np_rgb_to_hsl
>>> rgb_array = np.array([[255, 128, 0], [0, 255, 128]])
>>> hsl_array = np_rgb_to_hsl(rgb_array[..., 0], rgb_array[..., 1], rgb_array[..., 2])
"""

from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .hsv import rgb_to_hsv, hsv_to_rgb, np_rgb_to_hsv, np_hsv_to_rgb
from .hsi import rgb_to_hsi, hsi_to_rgb, np_rgb_to_hsi, np_hsi_to_rgb
from .hwb import rgb_to_hwb, hwb_to_rgb, np_rgb_to_hwb, np_hwb_to_rgb
from .cmyk import rgb_to_cmyk, cmyk_to_rgb, np_rgb_to_cmyk, np_cmyk_to_rgb
from .xyz import rgb_to_xyz, xyz_to_rgb, np_rgb_to_xyz, np_xyz_to_rgb
from .lab import rgb_to_lab, lab_to_rgb, np_rgb_to_lab, np_lab_to_rgb
from .ycbcr import rgb_to_ycbcr, ycbcr_to_rgb, np_rgb_to_ycbcr, np_ycbcr_to_rgb
from .yuv import rgb_to_yuv, yuv_to_rgb, np_rgb_to_yuv, np_yuv_to_rgb
from .hex import rgb_to_hex, rgba_to_hex, hex_to_rgba, simplify_hex, expand_hex

# High-level API
from .wrapper import convert, to_canonical, np_convert, np_convert_to_rgb

# Types and enums
from ..types.color_types import ColorSpace

__all__ = [
    # Hue spaces
    'rgb_to_hsl', 'hsl_to_rgb', 'np_rgb_to_hsl', 'np_hsl_to_rgb',
    'rgb_to_hsv', 'hsv_to_rgb', 'np_rgb_to_hsv', 'np_hsv_to_rgb',
    'rgb_to_hsi', 'hsi_to_rgb', 'np_rgb_to_hsi', 'np_hsi_to_rgb',
    'rgb_to_hwb', 'hwb_to_rgb', 'np_rgb_to_hwb', 'np_hwb_to_rgb',

    # Subtractive
    'rgb_to_cmyk', 'cmyk_to_rgb', 'np_rgb_to_cmyk', 'np_cmyk_to_rgb',

    # CIE
    'rgb_to_xyz', 'xyz_to_rgb', 'np_rgb_to_xyz', 'np_xyz_to_rgb',
    'rgb_to_lab', 'lab_to_rgb', 'np_rgb_to_lab', 'np_lab_to_rgb',

    # Luma/chroma
    'rgb_to_ycbcr', 'ycbcr_to_rgb', 'np_rgb_to_ycbcr', 'np_ycbcr_to_rgb',
    'rgb_to_yuv', 'yuv_to_rgb', 'np_rgb_to_yuv', 'np_yuv_to_rgb',

    # Hex
    'rgb_to_hex', 'rgba_to_hex', 'hex_to_rgba', 'simplify_hex', 'expand_hex',

    # High-level API
    'convert',
    'to_canonical',
    'np_convert',
    'np_convert_to_rgb',

    # Types
    'ColorSpace',
]
