from .numbers import round_half_away
from ..types.space_format import RGB_MAX


def _byte(value: float) -> str:
    return f"{int(round_half_away(value)):02x}"

def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Long-form ``#rrggbb``, channels rounded half away from zero."""
    return "#" + "".join(_byte(c) for c in (r, g, b))

def rgba_to_hex(r: float, g: float, b: float, alpha: float) -> str:
    """Long-form ``#rrggbbaa``; alpha in [0, 1] is scaled to one byte."""
    return rgb_to_hex(r, g, b) + _byte(alpha * RGB_MAX)

def simplify_hex(hex_str: str) -> str:
    """
    Shorten ``#rrggbb(aa)`` to ``#rgb(a)`` when every byte repeats its digit.

    >>> simplify_hex("#ffffff")
    '#fff'
    >>> simplify_hex("#00000033")
    '#0003'
    >>> simplify_hex("#008080")
    '#008080'
    """
    digits = hex_str.lstrip("#").lower()
    if len(digits) not in (6, 8):
        return "#" + digits
    pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    if all(p[0] == p[1] for p in pairs):
        return "#" + "".join(p[0] for p in pairs)
    return "#" + digits

def expand_hex(hex_str: str) -> str:
    """Inverse of ``simplify_hex``: ``#abc`` -> ``#aabbcc``, ``#abcd`` -> ``#aabbccdd``."""
    digits = hex_str.lstrip("#").lower()
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    return "#" + digits

def hex_to_rgba(hex_str: str) -> tuple[float, float, float, float]:
    """
    Decode a 3, 4, 6 or 8 digit hex string to (r, g, b, alpha).

    The caller is expected to have validated the digits.
    """
    digits = expand_hex(hex_str)[1:]
    r, g, b = (float(int(digits[i:i + 2], 16)) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / RGB_MAX if len(digits) == 8 else 1.0
    return r, g, b, alpha
