"""Errors raised for invalid color input.

All of them derive from :class:`ValueError` so callers that already guard
with ``except ValueError`` keep working.
"""


class ColorError(ValueError):
    """Base class for every invalid-input error in chromavalue."""


class InvalidComponent(ColorError):
    """A numeric channel or fraction is outside its declared range."""


class InvalidHex(ColorError):
    """A hex string has a bad length or non-hex characters."""


class InvalidName(ColorError):
    """A color keyword is not in the CSS name table."""


class InvalidColorString(ColorError):
    """A string is neither a hex color nor a known color keyword."""


class EmptyInput(ColorError):
    """An operation needing at least one color received none."""
