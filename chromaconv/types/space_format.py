# No dependencies
from dataclasses import dataclass
from typing import Tuple

from .color_types import ColorSpace


@dataclass(frozen=True)
class SpaceFormat:
    """How a space tuple is written out.

    ``precision`` holds the number of decimals kept for each channel and
    ``percent`` flags the channels printed as ``N%`` (scaled by 100 first).
    ``hue`` marks a leading hue channel, which wraps to 0 once rounded to 360.
    """
    template: str
    precision: Tuple[int, ...]
    percent: Tuple[bool, ...]
    hue: bool = False


SPACE_FORMATS = {
    ColorSpace.RGB: SpaceFormat("rgb({}, {}, {})", (0, 0, 0), (False, False, False)),
    ColorSpace.HSL: SpaceFormat("hsl({}, {}%, {}%)", (0, 0, 0), (False, True, True), hue=True),
    ColorSpace.HSV: SpaceFormat("hsv({}, {}%, {}%)", (0, 0, 0), (False, True, True), hue=True),
    ColorSpace.HSI: SpaceFormat("hsi({}, {}%, {}%)", (0, 2, 2), (False, True, True), hue=True),
    ColorSpace.HWB: SpaceFormat("hwb({}, {}%, {}%)", (0, 0, 0), (False, True, True), hue=True),
    ColorSpace.CMYK: SpaceFormat("cmyk({}%, {}%, {}%, {}%)", (0, 0, 0, 0), (True, True, True, True)),
    ColorSpace.XYZ: SpaceFormat("xyz({}, {}, {})", (6, 6, 6), (False, False, False)),
    ColorSpace.LAB: SpaceFormat("lab({}, {}, {})", (2, 2, 2), (False, False, False)),
    ColorSpace.YUV: SpaceFormat("yuv({}, {}, {})", (4, 4, 4), (False, False, False)),
    ColorSpace.YCBCR: SpaceFormat("YCbCr({}, {}, {})", (4, 4, 4), (False, False, False)),
}

# Templates for the alpha-carrying variants; alpha is appended unrounded.
ALPHA_FORMATS = {
    ColorSpace.RGBA: (ColorSpace.RGB, "rgba({}, {}, {}, {})"),
    ColorSpace.HSLA: (ColorSpace.HSL, "hsla({}, {}%, {}%, {})"),
}

HUE_360 = 360
RGB_MAX = 255
