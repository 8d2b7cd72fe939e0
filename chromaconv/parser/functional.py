"""
Functional notations: ``rgb(...)``, ``hsl(...)``, ``cmyk(...)`` and friends.

Parsing is split in two stages: the text is validated into a space tuple here,
then the matching converter turns that tuple into canonical RGB.
"""
import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .errors import ColorSyntaxError, ChannelValueError, ChannelRangeError
from ..conversions.hue import normalize_hue
from ..conversions.ycbcr import CB_MAX, CR_MAX, CHROMA_OFFSET
from ..conversions.yuv import U_MAX, V_MAX
from ..types.color_types import ColorSpace, SpaceTuple, is_hue_space
from ..types.space_format import HUE_360, RGB_MAX

FUNCTION_RE = re.compile(r"([a-z]+)\((.*)\)")
NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


@dataclass(frozen=True)
class Field:
    """One argument of a color function and its legal range.

    A ``percent`` field takes ``N%`` with N in [0, 100] or a bare fraction in
    [lower, upper].
    """
    name: str
    lower: float
    upper: float
    percent: bool = False


def _channel(name: str) -> Field:
    return Field(name, 0, RGB_MAX)

def _percent(name: str) -> Field:
    return Field(name, 0, 1, percent=True)


HUE = Field("h", 0, HUE_360)
ALPHA = Field("a", 0, 1)

FUNCTIONS: Dict[str, Tuple[ColorSpace, Tuple[Field, ...]]] = {
    "rgb": (ColorSpace.RGB, (_channel("r"), _channel("g"), _channel("b"))),
    "rgba": (ColorSpace.RGBA, (_channel("r"), _channel("g"), _channel("b"), ALPHA)),
    "hsl": (ColorSpace.HSL, (HUE, _percent("s"), _percent("l"))),
    "hsla": (ColorSpace.HSLA, (HUE, _percent("s"), _percent("l"), ALPHA)),
    "hsv": (ColorSpace.HSV, (HUE, _percent("s"), _percent("v"))),
    "hsi": (ColorSpace.HSI, (HUE, _percent("s"), _percent("i"))),
    "hwb": (ColorSpace.HWB, (HUE, _percent("w"), _percent("b"))),
    "cmyk": (ColorSpace.CMYK, (_percent("c"), _percent("m"), _percent("y"), _percent("k"))),
    "xyz": (ColorSpace.XYZ, (Field("x", 0, 1), Field("y", 0, 1), Field("z", 0, 1))),
    "lab": (ColorSpace.LAB, (Field("l", 0, 100), Field("a", -128, 128), Field("b", -128, 128))),
    "yuv": (ColorSpace.YUV, (Field("y", 0, 1), Field("u", -U_MAX, U_MAX), Field("v", -V_MAX, V_MAX))),
    "ycbcr": (ColorSpace.YCBCR, (
        _channel("y"),
        Field("cb", CHROMA_OFFSET - CB_MAX, CHROMA_OFFSET + CB_MAX),
        Field("cr", CHROMA_OFFSET - CR_MAX, CHROMA_OFFSET + CR_MAX),
    )),
}


def parse_field(field: Field, raw: str, text: Optional[str] = None) -> float:
    """
    Read one argument.

    Raises:
        ChannelValueError: if ``raw`` is not a decimal number (or carries a
            ``%`` the field does not accept)
        ChannelRangeError: if the number is outside the field's range
    """
    is_percent = raw.endswith("%")
    number = raw[:-1] if is_percent else raw
    if (is_percent and not field.percent) or not NUMBER_RE.fullmatch(number):
        raise ChannelValueError(field.name, raw, text)

    value = float(number)
    if is_percent:
        if not 0 <= value <= 100:
            raise ChannelRangeError(field.name, value, 0, 100, text, unit="%")
        return value / 100

    if not field.lower <= value <= field.upper:
        raise ChannelRangeError(field.name, value, field.lower, field.upper, text)
    return value


def parse_functional(compact: str, text: Optional[str] = None) -> Tuple[ColorSpace, SpaceTuple]:
    """
    Validate a functional notation into its space and space tuple.

    Args:
        compact: lowercase text with all whitespace removed
        text: the original input, kept on raised errors

    Returns:
        (space, values), hue already normalized to [0, 360)

    Raises:
        ColorSyntaxError: malformed wrapper, unknown function, wrong arity
    """
    match = FUNCTION_RE.fullmatch(compact)
    if match is None:
        raise ColorSyntaxError(f"malformed color function: {text or compact!r}", text)

    name, body = match.groups()
    if name not in FUNCTIONS:
        raise ColorSyntaxError(f"unknown color function {name!r}", text)

    space, fields = FUNCTIONS[name]
    raw_values = body.split(",")
    if len(raw_values) != len(fields):
        raise ColorSyntaxError(
            f"{name}() expects {len(fields)} values, got {len(raw_values)}", text
        )

    values = tuple(parse_field(field, raw, text) for field, raw in zip(fields, raw_values))
    if is_hue_space(space):
        values = (normalize_hue(values[0]),) + values[1:]
    return space, values
