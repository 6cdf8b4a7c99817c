from typing import Any
from ctypes import LibraryLoader, WinDLL
import sys

windll: Any = None
if sys.platform == "win32":
    windll = LibraryLoader(WinDLL)
else:
    raise ImportError(f"{__name__} can only be imported on Windows systems")
