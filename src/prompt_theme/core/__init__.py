"""Core functionality: color values, parsing and rendering."""

from prompt_theme.core.color import (
    Color,
    Fixed,
    NamedColor,
    Rgb,
    deserialize_color,
    format_color,
    paint,
    to_ansi,
    to_prompt_toolkit_style,
)

__all__ = [
    "Color",
    "Fixed",
    "NamedColor",
    "Rgb",
    "deserialize_color",
    "format_color",
    "paint",
    "to_ansi",
    "to_prompt_toolkit_style",
]
