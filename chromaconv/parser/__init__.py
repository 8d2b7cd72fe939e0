"""
Chromaconv Textual Parser
=========================

Reads every supported color syntax into the canonical (r, g, b, alpha) value.

Accepted input (case-insensitive, whitespace-insensitive):
    - ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` (``#`` optional)
    - ``rgb(r, g, b)``, ``rgba(r, g, b, a)``
    - ``hsl(h, s%, l%)``, ``hsla(h, s%, l%, a)``, ``hsv(...)``, ``hsi(...)``, ``hwb(...)``
    - ``cmyk(c%, m%, y%, k%)``
    - ``xyz(x, y, z)``, ``lab(l, a, b)``, ``yuv(y, u, v)``, ``ycbcr(y, cb, cr)``
    - CSS color keywords (``white``, ``rebeccapurple`` ...)

Errors
------
Every failure raises a ``ColorParseError`` (a ``ValueError``):
    - ColorSyntaxError: wrapper, token or arity problems
    - ChannelValueError: a field is not a number
    - ChannelRangeError: a field is outside its legal range

>>> from chromaconv.parser import parse
>>> parse("hsl(180, 100%, 25%)").hex()
'#008080'
"""
from __future__ import annotations
from typing import TYPE_CHECKING

from .errors import ColorParseError, ColorSyntaxError, ChannelValueError, ChannelRangeError
from .functional import parse_functional
from .hex import parse_hex, is_hex
from .named import parse_named
from ..conversions.wrapper import to_canonical
from ..types.color_types import RGBATuple

if TYPE_CHECKING:
    from ..colors.color import Color


def parse_to_canonical(text: str) -> RGBATuple:
    """
    Parse color text into canonical ``(r, g, b, alpha)``.

    Raises:
        TypeError: if ``text`` is not a string
        ColorParseError: if the text is not a valid color
    """
    if not isinstance(text, str):
        raise TypeError(f"color text must be a str, got {type(text).__name__}")

    compact = "".join(text.split()).lower()
    if not compact:
        raise ColorSyntaxError("empty color string", text)

    if compact.startswith("#"):
        return parse_hex(compact, text)
    if "(" in compact or ")" in compact:
        space, values = parse_functional(compact, text)
        return to_canonical(values, space)

    named = parse_named(compact)
    if named is not None:
        return named
    if is_hex(compact):
        return parse_hex(compact, text)
    raise ColorSyntaxError(f"unrecognized color: {text!r}", text)


def parse(text: str) -> Color:
    """Parse color text into a ``Color``."""
    from ..colors.color import Color  # local import to avoid cycles
    return Color(*parse_to_canonical(text))


__all__ = [
    "parse",
    "parse_to_canonical",
    "ColorParseError",
    "ColorSyntaxError",
    "ChannelValueError",
    "ChannelRangeError",
]
