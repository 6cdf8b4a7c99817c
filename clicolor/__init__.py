"""clicolor

Console color pairs and the 16 color console palette.

Convert between palette indexes and rgb, quantize rgb to the palette, and
parse colors from hex digits, color names, `#rrggbb` literals and
`forecolor:NAME; backcolor:NAME;` style strings.
"""
from .errors import ColorError, FormatError, RangeError
from .palette import (
    Palette,
    Rgb,
    index_to_rgb,
    rgb_to_index_approx,
    rgb_to_index_nearest,
    char_to_index,
    name_to_index,
)
from .parse import parse, parse_strict
from .console import ConsoleService, MemoryConsole, system_console
from .pair import (
    ColorPair,
    RgbColorPair,
    ColorContext,
    parse_style_string,
    get_context,
    set_context,
    use_context,
)
from .config import Settings

__all__ = [
    "ColorError",
    "FormatError",
    "RangeError",
    "Palette",
    "Rgb",
    "index_to_rgb",
    "rgb_to_index_approx",
    "rgb_to_index_nearest",
    "char_to_index",
    "name_to_index",
    "parse",
    "parse_strict",
    "ConsoleService",
    "MemoryConsole",
    "system_console",
    "ColorPair",
    "RgbColorPair",
    "ColorContext",
    "parse_style_string",
    "get_context",
    "set_context",
    "use_context",
    "Settings",
]
