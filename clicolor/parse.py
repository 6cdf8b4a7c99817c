"""Parse console colors from text.

`parse` tries each strategy in `STRATEGIES` in order and returns the first
result. Strategies raise `FormatError` when they don't understand the text,
`parse` itself never does: anything it can't read becomes the default color.

Supported notations, in the order they are tried:
    - A single hex digit: `7`, `c`
    - A color name: palette names like `DarkCyan` and css names like `purple`
    - An html literal: `#ff8800`
    - A common english synonym: `lightred`, `neongreen`
"""
from __future__ import annotations
from collections.abc import Callable, Iterable
import logging
import re

import webcolors

from .errors import FormatError
from .palette import (
    Palette,
    char_to_index,
    name_to_index,
    rgb_to_index_nearest,
)

__all__ = [
    "parse",
    "parse_strict",
    "first_match",
    "from_hex_digit",
    "from_color_name",
    "from_html",
    "from_synonym",
    "STRATEGIES",
]

logger = logging.getLogger(__name__)

HTML_COLOR = re.compile(
    r"#(?P<red>[0-9a-f]{2})(?P<green>[0-9a-f]{2})(?P<blue>[0-9a-f]{2})",
    re.IGNORECASE,
)

PALETTE_NAMES: dict[str, Palette] = {
    name.lower(): member for name, member in Palette.__members__.items()
}

Strategy = Callable[[str], Palette]


def from_hex_digit(text: str) -> Palette:
    return Palette(char_to_index(text))


def from_color_name(text: str) -> Palette:
    """Resolve a palette member name, then a css color name.

    Css colors are quantized to the nearest palette entry.
    """
    key = text.lower().replace("grey", "gray")
    if key in PALETTE_NAMES:
        return PALETTE_NAMES[key]

    try:
        rgb = webcolors.name_to_rgb(key)
    except ValueError as error:
        raise FormatError(f"Unknown color name: {text!r}") from error
    return Palette(rgb_to_index_nearest(rgb.red, rgb.green, rgb.blue))


def from_html(text: str) -> Palette:
    if (match := HTML_COLOR.fullmatch(text)) is None:
        raise FormatError(f"Expected an html color literal (#rrggbb): {text!r}")
    red, green, blue = (int(value, 16) for value in match.group("red", "green", "blue"))
    return Palette(rgb_to_index_nearest(red, green, blue))


def from_synonym(text: str) -> Palette:
    return Palette(name_to_index(text))


STRATEGIES: tuple[Strategy, ...] = (
    from_hex_digit,
    from_color_name,
    from_html,
    from_synonym,
)


def first_match(text: str, strategies: Iterable[Strategy], default: Palette | None) -> Palette | None:
    """Return the result of the first strategy that understands `text`.

    Falls back to `default` when every strategy raises `FormatError`.
    """
    for strategy in strategies:
        try:
            return strategy(text)
        except FormatError:
            continue

    logger.debug("Could not interpret %r as a color, using %s", text, default)
    return default


def parse(text: str | None, default: Palette = Palette.Gray) -> Palette:
    """Parse a console color from text. Never raises on bad input.

    Args:
        text: The text to interpret. Surrounding whitespace is ignored.
        default: Returned for empty text or text no strategy understands.
            Defaults to Gray.
    """
    if text is None or not isinstance(text, str) or text.strip() == "":
        return default
    return first_match(text.strip(), STRATEGIES, default)


def parse_strict(text: str) -> Palette:
    """Parse a console color from text.

    Raises:
        FormatError: When no strategy understands the text
    """
    color = first_match(text.strip(), STRATEGIES, None) if isinstance(text, str) else None
    if color is None:
        raise FormatError(f"Not a color: {text!r}")
    return color
