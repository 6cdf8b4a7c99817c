from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os

from .errors import ColorError
from .palette import Palette

__all__ = ["Settings"]

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    # Startup default pair: a style string or a two digit hex pair
    DEFAULT: str = field(default_factory=lambda: os.environ.get("CLICOLOR_DEFAULT", ""))
    LOG_LEVEL: str = field(default_factory=lambda: os.environ.get("CLICOLOR_LOG_LEVEL", "WARNING"))

    @classmethod
    def from_env(cls) -> Settings:
        return cls()

    def default_pair(self):
        """The pair described by `DEFAULT`. Gray on Black when unset or invalid."""
        from .pair import ColorPair, parse_style_string

        text = self.DEFAULT.strip()
        if text == "":
            return ColorPair(Palette.Gray, Palette.Black)
        if ":" in text:
            return parse_style_string(text, ColorPair(Palette.Gray, Palette.Black))

        try:
            return ColorPair.from_hex_pair(text)
        except ColorError as error:
            logger.warning("Ignoring CLICOLOR_DEFAULT=%r: %s", self.DEFAULT, error)
            return ColorPair(Palette.Gray, Palette.Black)
