"""Fake translation of UI strings, for checking string extraction, markup, and substitution markers."""

__version__ = "0.2.0"
__license__ = "MIT"

from gobbledygook.translator import translate

__all__ = ["translate"]
