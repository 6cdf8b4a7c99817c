"""Foreground/background color pairs.

A `ColorPair` holds two palette colors and knows how to build itself from
text, rgb values or the console's current colors, and how to write itself out
as a two digit hex code or a style string.

Ambient state (the console service and the process default pair) lives on a
`ColorContext`. One context is created on first use and used whenever a call
doesn't pass its own; swap it with `set_context` or `use_context`.
"""
from __future__ import annotations
from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Union
import logging
import re

from .console import ConsoleService, system_console
from .errors import FormatError, RangeError
from .palette import Palette, Rgb, char_to_index, rgb_to_index_approx, rgb_to_index_nearest
from .parse import parse

if TYPE_CHECKING:
    from .config import Settings

__all__ = [
    "ColorPair",
    "RgbColorPair",
    "ColorContext",
    "parse_style_string",
    "get_context",
    "set_context",
    "use_context",
]

logger = logging.getLogger(__name__)

ColorLike = Union[Palette, int, tuple[int, int, int]]

SHORT_PAIR = re.compile(r"[0-9a-f*]{1,2}", re.IGNORECASE)
SEPARATORS = re.compile(r"[;, ]")
HEX_PAIR = re.compile(r"[0-9a-f]{2}", re.IGNORECASE)

# Marks an omitted constructor color
AMBIENT = object()


def _to_palette_(color: ColorLike) -> Palette:
    if isinstance(color, Palette):
        return color
    if isinstance(color, tuple):
        r, g, b = color
        return Palette(rgb_to_index_nearest(r, g, b))
    return Palette.from_index(color)


class ColorPair:
    """A console foreground and background color, managed together."""

    __slots__ = ("_fore_", "_back_")

    def __init__(self, fore: ColorLike = AMBIENT, back: ColorLike = AMBIENT) -> None:  # type: ignore[assignment]
        """
        Args:
            fore: Foreground color. Defaults to Gray.
            back: Background color. Defaults to Black.

        With no arguments at all the pair takes the current console colors of
        the active context.
        """
        if fore is AMBIENT and back is AMBIENT:
            context = get_context()
            fore, back = context.current_fore(), context.current_back()
        self._fore_ = Palette.Gray if fore is AMBIENT else _to_palette_(fore)
        self._back_ = Palette.Black if back is AMBIENT else _to_palette_(back)

    @property
    def fore(self) -> Palette:
        return self._fore_

    @fore.setter
    def fore(self, color: ColorLike):
        self._fore_ = _to_palette_(color)

    @property
    def back(self) -> Palette:
        return self._back_

    @back.setter
    def back(self, color: ColorLike):
        self._back_ = _to_palette_(color)

    @property
    def colors(self) -> tuple[Palette, Palette]:
        return (self._fore_, self._back_)

    @property
    def inverse(self):
        """A new pair with the foreground and background swapped."""
        return type(self)(self._back_, self._fore_)

    def alt(self, fore: ColorLike | None = None, back: ColorLike | None = None):
        """Derive a new pair using this one as the template.

        Args:
            fore: The new foreground. When None this pair's foreground is used.
            back: The new background. When None this pair's background is used.
        """
        return type(self)(
            self._fore_ if fore is None else _to_palette_(fore),
            self._back_ if back is None else _to_palette_(back),
        )

    def copy(self):
        return type(self)(self._fore_, self._back_)

    def to_hex_pair(self) -> str:
        """Encode as two uppercase hex digits: foreground then background."""
        return f"{self._fore_.value * 16 + self._back_.value:02X}"

    def to_style_string(self) -> str:
        """Format for embedding in help text styles. See `parse_style_string`."""
        return f"foreGround:{self._fore_.name}; backGround:{self._back_.name};"

    def to_console(self, context: ColorContext | None = None) -> bool:
        """Write this pair to the console service of the context."""
        return (context or get_context()).apply(self)

    @classmethod
    def from_text(cls, fore: str, back: str = "", context: ColorContext | None = None):
        """Build a pair from two short text tokens.

        When the tokens together are one or two of `0-9`, `a-f` and `*`, each
        character is a palette index and `*` keeps the current console color.
        Otherwise each token goes through `parse`; an empty `back` keeps the
        current console background.
        """
        context = context or get_context()
        short = SEPARATORS.sub("", f"{fore or ''}{back or ''}")
        if SHORT_PAIR.fullmatch(short):
            short = short.ljust(2, "*")
            return cls(
                context.current_fore() if short[0] == "*" else Palette(char_to_index(short[0])),
                context.current_back() if short[1] == "*" else Palette(char_to_index(short[1])),
            )

        return cls(
            parse(fore, context.default.fore),
            context.current_back() if back is None or back.strip() == "" else parse(back, context.default.back),
        )

    @classmethod
    def current(cls, context: ColorContext | None = None):
        """A pair holding the colors the console is currently using."""
        return cls.normalize(context=context)

    @classmethod
    def normalize(
        cls,
        fore: ColorLike | None = None,
        back: ColorLike | None = None,
        context: ColorContext | None = None,
    ):
        """Build a pair, taking omitted colors from the console."""
        context = context or get_context()
        return cls(
            context.current_fore() if fore is None else fore,
            context.current_back() if back is None else back,
        )

    @classmethod
    def from_rgb(cls, fore: tuple[int, int, int], back: tuple[int, int, int], approximate: bool = False):
        """Quantize two rgb values to a pair.

        Args:
            approximate: Use the bit pattern heuristic instead of the nearest
                color search.
        """
        convert = rgb_to_index_approx if approximate else rgb_to_index_nearest
        return cls(Palette(convert(*fore)), Palette(convert(*back)))

    @classmethod
    def from_hex_pair(cls, code: str | int):
        """Decode the two hex digit form written by `to_hex_pair`.

        Raises:
            FormatError: When `code` is text that isn't exactly two hex digits
            RangeError: When `code` is a number outside of 0x00..0xFF
        """
        if isinstance(code, str):
            if HEX_PAIR.fullmatch(code.strip()) is None:
                raise FormatError(f"Expected two hex digits: {code!r}")
            code = int(code.strip(), 16)

        if not 0 <= code <= 0xFF:
            raise RangeError(f"Hex pair must be in 0x00..0xFF: {code!r}")
        return cls(Palette(code // 16), Palette(code % 16))

    @classmethod
    def parse_style_string(
        cls,
        text: str | None,
        default: ColorPair | None = None,
        context: ColorContext | None = None,
    ):
        return parse_style_string(text, default, context, factory=cls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPair):
            return NotImplemented
        return self._fore_ is other._fore_ and self._back_ is other._back_

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"( {self._fore_.name}, {self._back_.name} )"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fore_.name}, {self._back_.name})"


class RgbColorPair(ColorPair):
    """A color pair whose accessors speak rgb.

    Reads give the canonical rgb of the palette color, writes are quantized to
    the nearest palette color.
    """

    __slots__ = ()

    @property
    def fore(self) -> Rgb:
        return self._fore_.rgb

    @fore.setter
    def fore(self, color: ColorLike):
        self._fore_ = _to_palette_(color)

    @property
    def back(self) -> Rgb:
        return self._back_.rgb

    @back.setter
    def back(self, color: ColorLike):
        self._back_ = _to_palette_(color)

    @property
    def palette(self) -> ColorPair:
        return ColorPair(self._fore_, self._back_)


def parse_style_string(
    text: str | None,
    default: ColorPair | None = None,
    context: ColorContext | None = None,
    factory: type[ColorPair] = ColorPair,
) -> ColorPair:
    """Read the colors out of a `KEY:VALUE;KEY:VALUE;` style string.

    `forecolor`/`foreground` set the foreground and `backcolor`/`background`
    set the background, keys are case insensitive. Values go through `parse`
    with the matching side of `default` as fallback. Anything else is ignored.

    Args:
        text: The style text.
        default: Starting colors. Defaults to the context's default pair.
    """
    if default is None:
        default = (context or get_context()).default

    result = factory(default.colors[0], default.colors[1])
    if text is None or ":" not in text:
        return result

    for clause in f"{text};".split(";"):
        if clause.find(":") <= 0:
            continue

        key, value = clause.split(":", 1)
        match key.strip().upper():
            case "FORECOLOR" | "FOREGROUND":
                result.fore = parse(value, default.colors[0])
            case "BACKCOLOR" | "BACKGROUND":
                result.back = parse(value, default.colors[1])
            case _:
                logger.debug("Ignoring unknown style key %r", key.strip())
    return result


class ColorContext:
    """Ambient color state: a console service and the default pair.

    The default pair answers for the console when there is no console service,
    or when the service can't report its colors.
    """

    def __init__(self, console: ConsoleService | None = None, default: ColorPair | None = None) -> None:
        self.console = console
        self._default_ = ColorPair(Palette.Gray, Palette.Black) if default is None else ColorPair(*default.colors)

    @staticmethod
    def from_settings(settings: Settings, console: ConsoleService | None = None) -> ColorContext:
        return ColorContext(console, settings.default_pair())

    @property
    def default(self) -> ColorPair:
        return self._default_

    @default.setter
    def default(self, pair: ColorPair):
        self._default_ = ColorPair(*pair.colors)

    def current_fore(self) -> Palette:
        if self.console is not None and (color := self.console.get_foreground()) is not None:
            return color
        return self._default_.fore

    def current_back(self) -> Palette:
        if self.console is not None and (color := self.console.get_background()) is not None:
            return color
        return self._default_.back

    def capture(self) -> ColorPair:
        """Snapshot the colors the console is currently using."""
        return ColorPair(self.current_fore(), self.current_back())

    def apply(self, pair: ColorPair) -> bool:
        """Set the console colors to `pair`.

        Returns:
            False when there is no console service to write to, or it failed.
        """
        if self.console is None:
            logger.debug("No console service, not applying %s", pair)
            return False

        fore, back = pair.colors
        try:
            self.console.set_foreground(fore)
            self.console.set_background(back)
        except OSError as error:
            logger.warning("Could not apply %s to the console: %s", pair, error)
            return False
        return True

    def __repr__(self) -> str:
        return f"ColorContext(console={self.console!r}, default={self._default_!r})"


_context_: ColorContext | None = None


def get_context() -> ColorContext:
    """The active color context. Created from the environment on first use."""
    global _context_

    if _context_ is None:
        from .config import Settings

        _context_ = ColorContext.from_settings(Settings.from_env(), system_console())
    return _context_


def set_context(context: ColorContext) -> ColorContext | None:
    """Replace the active context. Returns the previous one."""
    global _context_

    previous = _context_
    _context_ = context
    return previous


@contextmanager
def use_context(context: ColorContext) -> Generator[ColorContext, None, None]:
    """Make `context` the active context for the body of a with block."""
    previous = set_context(context)
    try:
        yield context
    finally:
        set_context(previous)
