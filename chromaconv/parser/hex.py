import re
from typing import Optional

from .errors import ColorSyntaxError
from ..conversions.hex import hex_to_rgba
from ..types.color_types import RGBATuple

HEX_RE = re.compile(r"#?([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})")


def is_hex(compact: str) -> bool:
    return HEX_RE.fullmatch(compact) is not None


def parse_hex(compact: str, text: Optional[str] = None) -> RGBATuple:
    """
    Read ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional).

    Raises:
        ColorSyntaxError: if the digits do not form one of those lengths
    """
    if not is_hex(compact):
        raise ColorSyntaxError(f"invalid hex color: {text or compact!r}", text)
    return hex_to_rgba(compact)
