"""
Chinese traditional color names (中国传统色彩), a selection of the yellows.

Keyed the same way as ``CSS_COLORS``; ``named_colors`` merges both tables,
CSS first, so a hex shared with a CSS keyword keeps its CSS name.
"""
from typing import Tuple

CHINESE_COLORS: Tuple[Tuple[str, str], ...] = (
    ("乳白", "#f9f4dc"),
    ("杏仁黄", "#f7e8aa"),
    ("茉莉黄", "#f8df72"),
    ("麦秆黄", "#f8df70"),
    ("油菜花黄", "#fbda41"),
    ("佛手黄", "#fed71a"),
    ("篾黄", "#f7de98"),
    ("葵扇黄", "#f8d86a"),
    ("柠檬黄", "#fcd337"),
    ("金瓜黄", "#fcd217"),
    ("藤黄", "#ffd111"),
    ("酪黄", "#f6dead"),
    ("香水玫瑰黄", "#f7da94"),
    ("淡密黄", "#f9d367"),
    ("大豆黄", "#fbcd31"),
    ("素馨黄", "#fccb16"),
    ("向日葵黄", "#fecc11"),
    ("雅梨黄", "#fbc82f"),
    ("黄连黄", "#fcc515"),
    ("金盏黄", "#fcc307"),
    ("蛋壳黄", "#f8c387"),
    ("肉色", "#f7c173"),
    ("鹅掌黄", "#fbb929"),
    ("鸡蛋黄", "#fbb612"),
    ("鼬黄", "#fcb70a"),
    ("榴萼黄", "#f9a633"),
    ("淡橘橙", "#fba414"),
    ("枇杷黄", "#fca106"),
    ("橙皮黄", "#fca104"),
    ("北瓜黄", "#fc8c23"),
    ("杏黄", "#f28e16"),
    ("雄黄", "#ff9900"),
    ("万寿菊黄", "#fb8b05"),
)
