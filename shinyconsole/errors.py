"""Exceptions raised by shinyconsole.

Both concrete errors also subclass ValueError, since each one reports a bad
argument value, so callers that already guard with `except ValueError` keep
working.
"""


class ShinyError(Exception):
    """Base class for all shinyconsole errors."""


class InvalidPaletteError(ShinyError, ValueError):
    """The palette is missing, empty, names an unknown palette or holds a non-color entry."""


class UnsupportedScopeError(ShinyError, ValueError):
    """The scope is not one of the supported segmentation scopes."""
