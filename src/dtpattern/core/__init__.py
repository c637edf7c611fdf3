"""Core utilities shared across syntax, localization and runtime layers.

This package isolates the lazy Babel import layer so that the pattern
grammar can be used without loading CLDR data:

    core <- localization <- runtime

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    get_babel_dates: Lazy accessor for babel.dates
    is_babel_available: Cached availability check
    require_babel: Fail-fast guard for Babel-backed entry points

Python 3.13+.
"""

from .babel_compat import (
    BabelImportError,
    get_babel_dates,
    is_babel_available,
    require_babel,
)

__all__ = ["BabelImportError", "get_babel_dates", "is_babel_available", "require_babel"]
