"""
Chromaconv - Color Conversion and Canonicalization
==================================================

Parse color text in any common notation, convert it through one canonical
RGB+alpha value into ten+ color spaces, and write it back out with each
space's rounding rules.

Key Features
------------
- Parsing of hex, rgb/rgba, hsl/hsla, hsv, hsi, hwb, cmyk, xyz, lab, yuv,
  YCbCr and CSS color names, with typed errors
- Scalar and vectorized (numpy) converters with RGB as the hub
- Per-space string formatting with shortest hex output
- Named color lookup
- Aggregate operations (average, mix)
- Immutable color instances for safe sharing

Quick Start
-----------
>>> from chromaconv import Color, parse
>>>
>>> color = parse("hsl(180, 100%, 25%)")
>>> color.hex()
'#008080'
>>> color.name()
'teal'
>>> Color(255, 255, 0).lab()
'lab(97.14, -21.55, 94.48)'

Modules
-------
- colors: the Color entity, stringifiers and aggregates
- conversions: color space conversion functions
- parser: textual parser and its errors
- data: named color table
"""

from .colors import Color, ChannelClampWarning, average, mix, to_string
from .parser import (
    parse,
    ColorParseError,
    ColorSyntaxError,
    ChannelValueError,
    ChannelRangeError,
)
from .conversions import (
    convert,
    to_canonical,
    np_convert,
    np_convert_to_rgb,
    simplify_hex,
)
from .data.named_colors import name_of_hex, hex_of_name
from .types.color_types import ColorSpace

__version__ = "1.0.0"

__all__ = [
    # Color entity
    "Color",
    "ChannelClampWarning",
    "average",
    "mix",
    "to_string",

    # Parsing
    "parse",
    "ColorParseError",
    "ColorSyntaxError",
    "ChannelValueError",
    "ChannelRangeError",

    # Conversions
    "convert",
    "to_canonical",
    "np_convert",
    "np_convert_to_rgb",
    "simplify_hex",
    "ColorSpace",

    # Named colors
    "name_of_hex",
    "hex_of_name",

    # Version
    "__version__",
]
