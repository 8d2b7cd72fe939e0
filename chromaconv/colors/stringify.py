"""Canonical color → text, one template per space (see ``types.space_format``)."""
from __future__ import annotations
from typing import TYPE_CHECKING, List, Sequence, Union

from ..conversions import convert, rgb_to_hex, rgba_to_hex, simplify_hex
from ..conversions.numbers import format_number, round_to
from ..data.named_colors import name_of_hex
from ..types.color_types import ColorSpace, to_color_space
from ..types.space_format import SPACE_FORMATS, ALPHA_FORMATS, HUE_360, SpaceFormat

if TYPE_CHECKING:
    from .color import Color


def format_values(values: Sequence[float], fmt: SpaceFormat) -> List[str]:
    """Round each channel to its precision (percent channels scaled by 100 first)."""
    rounded = [
        round_to(value * 100 if percent else value, precision)
        for value, precision, percent in zip(values, fmt.precision, fmt.percent)
    ]
    # 359.5 and up round to 360, which is hue 0
    if fmt.hue and rounded[0] >= HUE_360:
        rounded[0] -= HUE_360
    return [format_number(value) for value in rounded]


def hex_string(color: Color) -> str:
    """Shortest hex; the alpha byte is present only when alpha is not exactly 1."""
    r, g, b, alpha = color.value
    if alpha == 1.0:
        return simplify_hex(rgb_to_hex(r, g, b))
    return simplify_hex(rgba_to_hex(r, g, b, alpha))


def color_name(color: Color) -> str:
    """
    Table name of an opaque color, else its long hex.

    Translucent colors are never looked up; they name as ``hex_string``.
    """
    if not color.is_opaque:
        return hex_string(color)
    long_hex = rgb_to_hex(*color.channels)
    return name_of_hex(long_hex) or long_hex


def to_string(color: Color, space: Union[ColorSpace, str]) -> str:
    """
    Format ``color`` in ``space``.

    Raises:
        ValueError: for an unknown space
    """
    space = to_color_space(space)

    if space == ColorSpace.HEX:
        return hex_string(color)

    if space in ALPHA_FORMATS:
        base, template = ALPHA_FORMATS[space]
        values = convert(color.channels, base)
        return template.format(*format_values(values, SPACE_FORMATS[base]), format_number(color.alpha))

    fmt = SPACE_FORMATS[space]
    return fmt.template.format(*format_values(convert(color.channels, space), fmt))
