"""Locale data collaborators.

Exports:
    LocaleDataProvider: Protocol required by the formatter
    BabelLocaleDataProvider: CLDR data via Babel, supports format-to-parts
    StaticLocaleDataProvider: Fixed name tables, no format-to-parts
    DatePart: Labelled component returned by format_to_parts()
    LocaleNames: Name table for one locale

Python 3.13+.
"""

from .provider import (
    BabelLocaleDataProvider,
    DatePart,
    LocaleDataProvider,
    StaticLocaleDataProvider,
)
from .tables import (
    BUILTIN_COMPOSITE_PATTERNS,
    BUILTIN_NAMES,
    ENGLISH_NAMES,
    LocaleNames,
)

__all__ = [
    "BUILTIN_COMPOSITE_PATTERNS",
    "BUILTIN_NAMES",
    "ENGLISH_NAMES",
    "BabelLocaleDataProvider",
    "DatePart",
    "LocaleDataProvider",
    "LocaleNames",
    "StaticLocaleDataProvider",
]
