from typing import Optional


class ColorParseError(ValueError):
    """Base class for every failure to read a color from text."""

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text


class ColorSyntaxError(ColorParseError):
    """Malformed wrapper, unknown function or name, or wrong argument count."""


class ChannelValueError(ColorParseError):
    """A field is not a finite decimal number."""

    def __init__(self, field: str, raw: str, text: Optional[str] = None) -> None:
        super().__init__(f"{field} must be a number, got {raw!r}", text)
        self.field = field
        self.raw = raw


class ChannelRangeError(ColorParseError):
    """A field parsed as a number but lies outside its space's legal range."""

    def __init__(
        self,
        field: str,
        value: float,
        lower: float,
        upper: float,
        text: Optional[str] = None,
        unit: str = "",
    ) -> None:
        super().__init__(
            f"{field} must be between {lower:g}{unit} and {upper:g}{unit}, got {value:g}{unit}",
            text,
        )
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
