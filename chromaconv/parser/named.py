from typing import Optional

from ..conversions.hex import hex_to_rgba
from ..data.named_colors import hex_of_name
from ..types.color_types import RGBATuple


def parse_named(compact: str) -> Optional[RGBATuple]:
    """Canonical value of a color keyword, or None when the name is unknown."""
    hex_str = hex_of_name(compact)
    if hex_str is None:
        return None
    return hex_to_rgba(hex_str)
