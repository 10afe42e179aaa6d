"""Color values, color string parsing and ANSI rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from prompt_theme.errors import InvalidColorValue, InvalidHexDigit, NumericOverflow

HEX_DIGITS = "0123456789abcdef"

RESET = "\033[0m"


class NamedColor(Enum):
    """The nine named terminal colors."""

    DEFAULT = "default"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def code(self) -> int:
        """ANSI color offset (0-7), or 9 for the terminal default."""
        if self is NamedColor.DEFAULT:
            return 9
        return ANSI_OFFSETS[self]


ANSI_OFFSETS: dict[NamedColor, int] = {
    NamedColor.BLACK: 0,
    NamedColor.RED: 1,
    NamedColor.GREEN: 2,
    NamedColor.YELLOW: 3,
    NamedColor.BLUE: 4,
    NamedColor.MAGENTA: 5,
    NamedColor.CYAN: 6,
    NamedColor.WHITE: 7,
}


@dataclass(frozen=True)
class Fixed:
    """An ANSI 256-color palette index."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"palette index out of range: {self.index}")


@dataclass(frozen=True)
class Rgb:
    """A truecolor value."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


Color = NamedColor | Fixed | Rgb

NAMED_COLORS: dict[str, NamedColor] = {color.value: color for color in NamedColor}

EXPECTED_HEX_LENGTH = "a string with 4 or 7 characters including the `#`"
EXPECTED_HEX_DIGITS = "hexadecimal digits (0-9, a-f) after the `#`"
EXPECTED_NUMBER = "an ANSI color number between 0 and 255"
EXPECTED_COLOR = (
    "a hex color beginning with `#`, an ANSI color number, or one of "
    + ", ".join(f"`{name}`" for name in NAMED_COLORS)
)


def _parse_hex(digits: str, original: str, field: str) -> int:
    if any(c not in HEX_DIGITS for c in digits):
        raise InvalidHexDigit(original, EXPECTED_HEX_DIGITS, field=field)
    return int(digits, 16)


def deserialize_color(value: str, field: str = "") -> Color:
    """Parse a color string.

    Accepted forms, tried in order on the lowercased string: one of the nine
    color names, ``#rgb`` or ``#rrggbb`` hex, or an ANSI palette number.

    Args:
        value: Raw color string, e.g. "Red", "#f00", "#ff0000" or "208"
        field: Field name used in error messages

    Returns:
        The parsed color

    Raises:
        InvalidColorValue: Not a recognized form, or a hex string of the wrong length
        InvalidHexDigit: Hex string contains a non-hex digit
        NumericOverflow: Palette number above 255

    Examples:
        >>> deserialize_color("#ABC")
        Rgb(red=170, green=187, blue=204)
        >>> deserialize_color("208")
        Fixed(index=208)
    """
    lowered = value.lower()

    if lowered in NAMED_COLORS:
        return NAMED_COLORS[lowered]

    if lowered.startswith("#"):
        match len(lowered):
            case 4:
                r, g, b = (_parse_hex(c, value, field) for c in lowered[1:4])
                return Rgb(r * 16 + r, g * 16 + g, b * 16 + b)
            case 7:
                r, g, b = (
                    _parse_hex(lowered[i : i + 2], value, field) for i in (1, 3, 5)
                )
                return Rgb(r, g, b)
            case _:
                raise InvalidColorValue(value, EXPECTED_HEX_LENGTH, field=field)

    if lowered.isascii() and lowered.isdigit():
        index = int(lowered)
        if index > 255:
            raise NumericOverflow(value, EXPECTED_NUMBER, field=field)
        return Fixed(index)

    raise InvalidColorValue(value, EXPECTED_COLOR, field=field)


def format_color(color: Color) -> str:
    """Format a color back into a string accepted by ``deserialize_color``."""
    if isinstance(color, NamedColor):
        return color.value
    if isinstance(color, Fixed):
        return str(color.index)
    return color.hex


def to_ansi(color: Color, foreground: bool = True) -> str:
    """Convert a color to an ANSI SGR escape sequence.

    Args:
        color: Color to render
        foreground: Foreground (38/3x) or background (48/4x) sequence

    Returns:
        Escape sequence such as "\\033[34m" or "\\033[38;2;255;0;0m"
    """
    if isinstance(color, NamedColor):
        base = 30 if foreground else 40
        return f"\033[{base + color.code}m"

    extended = 38 if foreground else 48
    if isinstance(color, Fixed):
        return f"\033[{extended};5;{color.index}m"
    return f"\033[{extended};2;{color.red};{color.green};{color.blue}m"


def paint(text: str, color: Color) -> str:
    """Wrap text in the foreground escape for ``color`` and a reset."""
    return f"{to_ansi(color)}{text}{RESET}"


# prompt_toolkit names for palette entries 0-15
ANSI_NAMES = [
    "ansiblack", "ansired", "ansigreen", "ansiyellow",
    "ansiblue", "ansimagenta", "ansicyan", "ansigray",
    "ansibrightblack", "ansibrightred", "ansibrightgreen", "ansibrightyellow",
    "ansibrightblue", "ansibrightmagenta", "ansibrightcyan", "ansiwhite",
]

# Channel levels of the xterm 6x6x6 color cube (indices 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def fixed_to_rgb(index: int) -> Rgb:
    """Approximate an xterm 256-color palette entry (16-255) as RGB."""
    if index >= 232:
        level = 8 + (index - 232) * 10
        return Rgb(level, level, level)
    offset = index - 16
    return Rgb(
        CUBE_LEVELS[offset // 36],
        CUBE_LEVELS[(offset // 6) % 6],
        CUBE_LEVELS[offset % 6],
    )


def to_prompt_toolkit_style(color: Color) -> str:
    """Convert a color to a prompt_toolkit color name."""
    if isinstance(color, NamedColor):
        if color is NamedColor.DEFAULT:
            return "default"
        return ANSI_NAMES[color.code]

    if isinstance(color, Fixed):
        if color.index < 16:
            return ANSI_NAMES[color.index]
        return fixed_to_rgb(color.index).hex

    return color.hex
