import math
from boundednumbers.functions import clamp

from ..types.space_format import RGB_MAX
from ..types.color_types import Scalar


class UnitFloat(float):
    """A floating-point number clamped to the inclusive range ``[0, 1]``."""

    def __new__(cls, value: Scalar):
        if not 0.0 <= value <= 1.0:
            value = clamp(value, 0.0, 1.0)
        return super().__new__(cls, value)

    def __repr__(self):
        return f"UnitFloat({float(self)})"


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` decimals, ties away from zero."""
    factor = 10 ** precision
    return round_half_away(value * factor) / factor


def normalize_channel(c: float) -> float:
    """Map a 0-255 channel onto [0, 1]."""
    return c / RGB_MAX


def clamp_channel(c: float) -> float:
    return clamp(c, 0.0, float(RGB_MAX))


def format_number(value: float) -> str:
    """
    Print a number the shortest way: ``1.0`` -> ``"1"``, ``0.75`` -> ``"0.75"``.

    Negative zero prints as ``"0"``.
    """
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)
