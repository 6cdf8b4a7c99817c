"""The 16 color console palette.

Every console color has a 4-bit index and a canonical rgb value. This module
translates between the two and quantizes arbitrary rgb values down to the
palette, either with a cheap bit pattern heuristic or with an exhaustive
nearest neighbor search.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple
import re

from .errors import FormatError, RangeError

__all__ = [
    "Palette",
    "Rgb",
    "index_to_rgb",
    "rgb_to_index_approx",
    "rgb_to_index_nearest",
    "char_to_index",
    "name_to_index",
]

HEX_DIGIT = re.compile(r"[0-9a-f]", re.IGNORECASE)


class Rgb(NamedTuple):
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        """The color as an html style `#RRGGBB` literal."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


class Palette(Enum):
    """Console colors. The value of each member is its 4-bit index."""
    Black = 0
    DarkBlue = 1
    DarkGreen = 2
    DarkCyan = 3
    DarkRed = 4
    DarkMagenta = 5
    DarkYellow = 6
    Brown = 6
    Gray = 7
    DarkGray = 8
    Blue = 9
    Green = 10
    Cyan = 11
    Red = 12
    Magenta = 13
    Yellow = 14
    White = 15

    @property
    def index(self) -> int:
        return self.value

    @property
    def rgb(self) -> Rgb:
        return RGB_TABLE[self.value]

    @staticmethod
    def from_index(index: int) -> Palette:
        """Get the palette entry for a 4-bit index.

        Raises:
            RangeError: When the index is not in 0..15
        """
        _check_index_(index)
        return Palette(index)

    @staticmethod
    def nearest(r: int, g: int, b: int) -> Palette:
        return Palette(rgb_to_index_nearest(r, g, b))

    @staticmethod
    def approx(r: int, g: int, b: int) -> Palette:
        return Palette(rgb_to_index_approx(r, g, b))


RGB_TABLE: tuple[Rgb, ...] = (
    Rgb(0x00, 0x00, 0x00),  # Black
    Rgb(0x00, 0x00, 0x80),  # DarkBlue
    Rgb(0x00, 0x80, 0x00),  # DarkGreen
    Rgb(0x00, 0x80, 0x80),  # DarkCyan
    Rgb(0x80, 0x00, 0x00),  # DarkRed
    Rgb(0x80, 0x00, 0x80),  # DarkMagenta
    Rgb(0x80, 0x80, 0x00),  # DarkYellow
    Rgb(0xC0, 0xC0, 0xC0),  # Gray
    Rgb(0x80, 0x80, 0x80),  # DarkGray
    Rgb(0x00, 0x00, 0xFF),  # Blue
    Rgb(0x00, 0xFF, 0x00),  # Green
    Rgb(0x00, 0xFF, 0xFF),  # Cyan
    Rgb(0xFF, 0x00, 0x00),  # Red
    Rgb(0xFF, 0x00, 0xFF),  # Magenta
    Rgb(0xFF, 0xFF, 0x00),  # Yellow
    Rgb(0xFF, 0xFF, 0xFF),  # White
)

ORANGE = Rgb(0xFF, 0xA5, 0x00)

# Reference points for the nearest neighbor search. DarkYellow renders as
# brown/orange on most consoles so it also answers for orange.
NEAREST_TABLE: tuple[tuple[Rgb, ...], ...] = tuple(
    (rgb, ORANGE) if index == Palette.DarkYellow.value else (rgb,)
    for index, rgb in enumerate(RGB_TABLE)
)

SYNONYMS: dict[str, Palette] = {
    "blue": Palette.DarkBlue,
    "darkblue": Palette.DarkBlue,
    "green": Palette.DarkGreen,
    "forestgreen": Palette.DarkGreen,
    "darkgreen": Palette.DarkGreen,
    "aqua": Palette.DarkCyan,
    "cyan": Palette.DarkCyan,
    "darkcyan": Palette.DarkCyan,
    "red": Palette.DarkRed,
    "darkred": Palette.DarkRed,
    "purple": Palette.DarkMagenta,
    "darkmagenta": Palette.DarkMagenta,
    "brown": Palette.DarkYellow,
    "orange": Palette.DarkYellow,
    "darkyellow": Palette.DarkYellow,
    "gray": Palette.Gray,
    "grey": Palette.Gray,
    "lightgray": Palette.Gray,
    "lightgrey": Palette.Gray,
    "darkgray": Palette.DarkGray,
    "darkgrey": Palette.DarkGray,
    "lightblue": Palette.Blue,
    "royalblue": Palette.Blue,
    "lightgreen": Palette.Green,
    "neongreen": Palette.Green,
    "lightcyan": Palette.Cyan,
    "lightred": Palette.Red,
    "coral": Palette.Red,
    "pink": Palette.Magenta,
    "black": Palette.Black,
    "yellow": Palette.Yellow,
    "magenta": Palette.Magenta,
    "white": Palette.White,
}


def _check_index_(index: int):
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index <= 15:
        raise RangeError(f"Palette index must be in 0..15: {index!r}")


def _check_channels_(r: int, g: int, b: int):
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise RangeError(f"Rgb channels must be in 0..255: {(r, g, b)}")


def index_to_rgb(index: int) -> Rgb:
    """Get the canonical rgb value of a palette index.

    Raises:
        RangeError: When the index is not in 0..15
    """
    _check_index_(index)
    return RGB_TABLE[index]


def rgb_to_index_approx(r: int, g: int, b: int) -> int:
    """Derive a palette index from the bit pattern of an rgb value.

    The bright bit is set when any channel is above 128 and each color bit is
    set when its channel is above 64. This is fast but not exact; use
    `rgb_to_index_nearest` when accuracy matters.
    """
    _check_channels_(r, g, b)
    index = 8 if r > 128 or g > 128 or b > 128 else 0
    if r > 64:
        index |= 4
    if g > 64:
        index |= 2
    if b > 64:
        index |= 1
    return index


def rgb_to_index_nearest(r: int, g: int, b: int) -> int:
    """Find the palette index closest to an rgb value.

    Distance is squared euclidean distance in rgb space. Ties go to the
    lowest index.
    """
    _check_channels_(r, g, b)
    result = 0
    spread = None
    for index, references in enumerate(NEAREST_TABLE):
        for ref in references:
            compare = (ref.r - r) ** 2 + (ref.g - g) ** 2 + (ref.b - b) ** 2
            if compare == 0:
                return index
            if spread is None or compare < spread:
                spread = compare
                result = index
    return result


def char_to_index(char: str) -> int:
    """Parse a single hex digit into a palette index.

    Raises:
        FormatError: When `char` is not exactly one hex digit
    """
    if not isinstance(char, str) or HEX_DIGIT.fullmatch(char) is None:
        raise FormatError(f"Expected a single hex digit: {char!r}")
    return int(char, 16)


def name_to_index(name: str) -> int:
    """Look up a common english color word, case insensitive.

    Raises:
        FormatError: When the word is not a known synonym
    """
    key = name.strip().lower() if isinstance(name, str) else ""
    if key not in SYNONYMS:
        raise FormatError(f"Unknown color name: {name!r}")
    return SYNONYMS[key].value
