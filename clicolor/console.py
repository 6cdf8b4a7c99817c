"""Ambient console color services.

A console service reports and changes the colors the host console is currently
writing with. clicolor only talks to the console through this protocol so that
any backend, or none at all, can be plugged into a `ColorContext`.
"""
from __future__ import annotations
from typing import Protocol, runtime_checkable
import logging
import sys

from .palette import Palette

__all__ = ["ConsoleService", "MemoryConsole", "system_console"]

logger = logging.getLogger(__name__)


@runtime_checkable
class ConsoleService(Protocol):
    def get_foreground(self) -> Palette | None:
        """Current foreground color. None when it can't be read."""
        ...

    def get_background(self) -> Palette | None:
        """Current background color. None when it can't be read."""
        ...

    def set_foreground(self, color: Palette):
        ...

    def set_background(self, color: Palette):
        ...


class MemoryConsole:
    """Console service that only remembers the colors it is given."""

    __slots__ = ("_fore_", "_back_")

    def __init__(self, fore: Palette = Palette.Gray, back: Palette = Palette.Black) -> None:
        self._fore_ = fore
        self._back_ = back

    def get_foreground(self) -> Palette | None:
        return self._fore_

    def get_background(self) -> Palette | None:
        return self._back_

    def set_foreground(self, color: Palette):
        self._fore_ = color

    def set_background(self, color: Palette):
        self._back_ = color

    def __repr__(self) -> str:
        return f"MemoryConsole({self._fore_.name}, {self._back_.name})"


def system_console() -> ConsoleService | None:
    """The console service for the running platform.

    Only windows consoles expose their current colors. Everywhere else there
    is no service and the context default is used instead.
    """
    if sys.platform != "win32":
        return None

    from .win.console import WindowsConsole

    try:
        return WindowsConsole()
    except OSError as error:
        logger.warning("Windows console is not available: %s", error)
        return None
