"""Errors raised by clicolor.

Both error kinds derive from `ValueError` so callers that already guard
color input with `except ValueError` keep working.
"""

__all__ = ["ColorError", "FormatError", "RangeError"]


class ColorError(ValueError):
    """Base class for every color conversion error."""


class FormatError(ColorError):
    """Text could not be interpreted as a supported color notation."""


class RangeError(ColorError):
    """A palette index, rgb channel, or encoded value is out of range."""
