import numpy as np
from typing import Iterable

from .color import Color
from ..types.space_format import RGB_MAX


def average(colors: Iterable[Color]) -> Color:
    """
    Channel-wise arithmetic mean of red, green, blue and alpha.

    No weighting and no gamma correction: the mean is taken directly on the
    0-255 / 0-1 channels. An empty input gives opaque black.

    >>> average([Color.from_str("#ff6600"), Color.from_str("#0000ff")]).hex()
    '#803380'
    """
    values = np.array([color.value for color in colors], dtype=float)
    if values.size == 0:
        return Color(0.0, 0.0, 0.0, 1.0)
    r, g, b, alpha = values.mean(axis=0)
    return Color(r, g, b, alpha)


def mix(color1: Color, color2: Color, weight: float = 0.5) -> Color:
    """
    Mix two colors the way Sass does.

    ``weight`` is the share of ``color1``; alpha differences shift the channel
    weights toward the more opaque color.

    Raises:
        ValueError: if ``weight`` is outside [0, 1]
    """
    if not 0 <= weight <= 1:
        raise ValueError(f"weight must be in [0, 1], got {weight}")

    w = weight * 2 - 1
    a = color1.alpha - color2.alpha
    w1 = ((w if w * a == -1 else (w + a) / (1 + w * a)) + 1) / 2
    w2 = 1 - w1

    c1 = np.asarray(color1.channels, dtype=float)
    c2 = np.asarray(color2.channels, dtype=float)
    r, g, b = np.clip(c1 * w1 + c2 * w2, 0, RGB_MAX)
    alpha = color1.alpha * weight + color2.alpha * (1 - weight)
    return Color(r, g, b, alpha)


# Attach to Color
Color.average = staticmethod(average)
Color.mix = mix
