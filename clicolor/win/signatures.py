from ctypes import POINTER
from ctypes.wintypes import BOOL, DWORD, HANDLE, WORD

from . import windll
from .structs import CONSOLE_SCREEN_BUFFER_INFO

_GetStdHandle = windll.kernel32.GetStdHandle
_GetStdHandle.argtypes = [DWORD]
_GetStdHandle.restype = HANDLE

_GetConsoleScreenBufferInfo = windll.kernel32.GetConsoleScreenBufferInfo
_GetConsoleScreenBufferInfo.argtypes = [
    HANDLE,
    POINTER(CONSOLE_SCREEN_BUFFER_INFO),
]
_GetConsoleScreenBufferInfo.restype = BOOL

_SetConsoleTextAttribute = windll.kernel32.SetConsoleTextAttribute
_SetConsoleTextAttribute.argtypes = [HANDLE, WORD]
_SetConsoleTextAttribute.restype = BOOL
