from __future__ import annotations
import math
import warnings
from typing import Callable, ClassVar, Iterable, Sequence, Tuple, Union

from boundednumbers.functions import clamp

from . import stringify
from ..conversions import convert as space_convert, to_canonical
from ..conversions.numbers import format_number
from ..parser import parse_to_canonical
from ..types.color_types import ALPHA_SPACES, ColorSpace, RGBATuple, RGBTuple, Scalar, SpaceValue, to_color_space
from ..types.space_format import RGB_MAX


class ChannelClampWarning(UserWarning):
    """A channel passed to ``Color`` was outside its range and got clamped."""


class Color:
    """
    Canonical color: red, green, blue in [0, 255] (floats) and alpha in [0, 1].

    Instances are immutable; every operation returns a new value.

    >>> Color(0, 128, 128).hsl()
    'hsl(180, 100%, 25%)'
    >>> Color.from_str("#0003").rgba()
    'rgba(0, 0, 0, 0.2)'
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    maxima: ClassVar[RGBATuple] = (float(RGB_MAX), float(RGB_MAX), float(RGB_MAX), 1.0)

    # Injected by .aggregate
    average: ClassVar[Callable[[Iterable[Color]], Color]]
    mix: Callable[[Color, Color, float], Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, alpha: Scalar = 1.0) -> None:
        channels = []
        for name, value, maximum in zip(self.channel_names, (r, g, b, alpha), self.maxima):
            value = float(value)
            if math.isnan(value):
                raise ValueError(f"{name} must be a number, got nan")
            if not 0.0 <= value <= maximum:
                warnings.warn(
                    f"{name} {value:g} is outside [0, {maximum:g}]; clamped",
                    ChannelClampWarning,
                    stacklevel=2,
                )
                value = clamp(value, 0.0, maximum)
            channels.append(value)

        self._value = tuple(channels)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_str(cls, text: str) -> Color:
        """
        Parse any supported color text.

        Raises:
            ColorParseError: if the text is not a valid color
        """
        return cls(*parse_to_canonical(text))

    @classmethod
    def from_space(
        cls,
        space: Union[ColorSpace, str],
        values: Union[Sequence[float], str],
        alpha: Scalar = 1.0,
    ) -> Color:
        """
        Build a color from a space tuple, e.g. ``Color.from_space("hsl", (180, 1, 0.25))``.

        ``alpha`` is ignored when the space carries its own (``rgba``, ``hsla``,
        8-digit hex).
        """
        space = to_color_space(space)
        r, g, b, own_alpha = to_canonical(values, space)
        carries_alpha = space in ALPHA_SPACES or (
            space == ColorSpace.HEX and own_alpha != 1.0
        )
        return cls(r, g, b, own_alpha if carries_alpha else alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def channels(self) -> RGBTuple:
        return self._value[:3]

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def is_opaque(self) -> bool:
        return self._value[3] == 1.0

    def with_alpha(self, alpha: Scalar) -> Color:
        """Return a new color with the same channels and a new alpha."""
        r, g, b = self.channels
        return self.__class__(r, g, b, alpha)

    def convert(self, space: Union[ColorSpace, str]) -> SpaceValue:
        """Numeric tuple of this color in ``space`` (a string for ``hex``)."""
        return space_convert(self._value, space)

    # ------------------ STRINGIFIERS ------------------
    def to_string(self, space: Union[ColorSpace, str]) -> str:
        return stringify.to_string(self, space)

    def hex(self) -> str:
        return stringify.hex_string(self)

    def rgb(self) -> str:
        return stringify.to_string(self, ColorSpace.RGB)

    def rgba(self) -> str:
        return stringify.to_string(self, ColorSpace.RGBA)

    def hsl(self) -> str:
        return stringify.to_string(self, ColorSpace.HSL)

    def hsla(self) -> str:
        return stringify.to_string(self, ColorSpace.HSLA)

    def hsv(self) -> str:
        return stringify.to_string(self, ColorSpace.HSV)

    def hsi(self) -> str:
        return stringify.to_string(self, ColorSpace.HSI)

    def hwb(self) -> str:
        return stringify.to_string(self, ColorSpace.HWB)

    def cmyk(self) -> str:
        return stringify.to_string(self, ColorSpace.CMYK)

    def xyz(self) -> str:
        return stringify.to_string(self, ColorSpace.XYZ)

    def lab(self) -> str:
        return stringify.to_string(self, ColorSpace.LAB)

    def yuv(self) -> str:
        return stringify.to_string(self, ColorSpace.YUV)

    def ycbcr(self) -> str:
        return stringify.to_string(self, ColorSpace.YCBCR)

    def name(self) -> str:
        """CSS name of an opaque color; its hex string otherwise."""
        return stringify.color_name(self)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(format_number(v) for v in self._value)})"

    def __str__(self) -> str:
        return self.hex()
