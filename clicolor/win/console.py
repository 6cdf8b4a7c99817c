from ctypes import WinError, byref
from enum import Enum
from typing import cast

from clicolor.palette import Palette

from .structs import CONSOLE_SCREEN_BUFFER_INFO, HANDLE
from .signatures import _GetStdHandle, _GetConsoleScreenBufferInfo, _SetConsoleTextAttribute

__all__ = [
    "WindowsConsole",
    "GetConsoleAttributes",
    "SetConsoleAttributes",
]

INVALID_HANDLE_VALUE = HANDLE(-1).value


class StdDevice(Enum):
    """The available standard devices for windows."""
    IN = -10
    OUT = -11
    ERR = -12


def GetStdHandle(handle: StdDevice = StdDevice.OUT) -> HANDLE:
    """Retrieves a handle to the specified standard device (stdin, stdout, stderr)

    Args:
        handle (int): Indentifier for the standard device. Defaults to -11 (stdout).

    Returns:
        wintypes.HANDLE: Handle to the standard device
    """
    return cast(HANDLE, _GetStdHandle(handle.value))


def GetConsoleAttributes(std: HANDLE) -> int | None:
    """Retrieves the character attributes the console is writing with.

    The low nibble is the foreground palette index and the next nibble is the
    background palette index.

    Returns:
        int | None: The attribute word, None when `std` is not a console
    """
    info = CONSOLE_SCREEN_BUFFER_INFO()
    if _GetConsoleScreenBufferInfo(std, byref(info)) == 0:
        return None
    return int(info.wAttributes)


def SetConsoleAttributes(std: HANDLE, attributes: int) -> bool:
    return _SetConsoleTextAttribute(std, attributes) != 0


class WindowsConsole:
    """Console service backed by the win32 console text attributes."""

    __slots__ = ("_handle_",)

    def __init__(self, device: StdDevice = StdDevice.OUT) -> None:
        handle = GetStdHandle(device)
        if handle is None or handle == INVALID_HANDLE_VALUE:
            raise WinError()
        self._handle_ = handle

    def get_foreground(self) -> Palette | None:
        attributes = GetConsoleAttributes(self._handle_)
        return None if attributes is None else Palette(attributes & 0x0F)

    def get_background(self) -> Palette | None:
        attributes = GetConsoleAttributes(self._handle_)
        return None if attributes is None else Palette((attributes >> 4) & 0x0F)

    def set_foreground(self, color: Palette):
        self._update_(0x0F, color.value)

    def set_background(self, color: Palette):
        self._update_(0xF0, color.value << 4)

    def _update_(self, mask: int, bits: int):
        attributes = GetConsoleAttributes(self._handle_)
        if attributes is None:
            raise WinError()
        if not SetConsoleAttributes(self._handle_, (attributes & ~mask) | bits):
            raise WinError()
