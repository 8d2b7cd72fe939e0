from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = int | float
RGBTuple = Tuple[float, float, float]
RGBATuple = Tuple[float, float, float, float]
SpaceTuple = Tuple[float, ...]
SpaceValue = Union[SpaceTuple, str]


class ColorSpace(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSI = "hsi"
    HWB = "hwb"
    CMYK = "cmyk"
    XYZ = "xyz"
    LAB = "lab"
    YCBCR = "ycbcr"
    YUV = "yuv"


HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSLA, ColorSpace.HSV, ColorSpace.HSI, ColorSpace.HWB}
ALPHA_SPACES = {ColorSpace.RGBA, ColorSpace.HSLA}


def to_color_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Resolve a space name (any case) to its ColorSpace member.

    Raises:
        ValueError: if the name is not a supported color space.
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(space.lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def is_hue_space(color_space: Union[ColorSpace, str]) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: Color space name or member
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
