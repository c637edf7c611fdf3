"""dtpattern - Locale-aware date/time pattern formatting.

Renders a point in time through a pattern of repeated letter tokens
(e.g. ``yyyy-MM-ddThh:mm:ss.SSSZ``) for a target locale, with an optional
UTC offset override. Names and composite patterns (L, LL, LT, ...) come from
an injectable LocaleDataProvider; the default one reads CLDR data via Babel.

Public API:
    Formatter - Pattern bound to a locale; .format(value, offset_minutes)
    format_datetime - One-shot formatting
    Locale - Immutable locale identifier
    FormatterConfig - Formatter options
    BabelLocaleDataProvider - CLDR-backed provider with format-to-parts
    StaticLocaleDataProvider - Table-backed provider
    format_offset - Render a UTC offset as +HH:MM / +HHMM

Exceptions:
    DateFormatError - Base exception class
    InvalidDateError - Input is not a valid point in time
    LocaleDataMissingError - Missing names or composite patterns
    CompositePatternError - Composite sub-pattern references a composite token

Submodules:
    dtpattern.syntax - Tokenizer and composite expander
    dtpattern.localization - Provider protocol, providers and tables
    dtpattern.runtime - Field extraction, rendering, orchestration
    dtpattern.diagnostics - Error types and diagnostic formatting
"""

from .diagnostics import (
    CompositePatternError,
    DateFormatError,
    InvalidDateError,
    LocaleDataMissingError,
)
from .localization import (
    BabelLocaleDataProvider,
    LocaleDataProvider,
    StaticLocaleDataProvider,
)
from .runtime import (
    Formatter,
    FormatterConfig,
    Locale,
    format_datetime,
    format_offset,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("dtpattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelLocaleDataProvider",
    "CompositePatternError",
    "DateFormatError",
    "Formatter",
    "FormatterConfig",
    "InvalidDateError",
    "Locale",
    "LocaleDataMissingError",
    "LocaleDataProvider",
    "StaticLocaleDataProvider",
    "__version__",
    "format_datetime",
    "format_offset",
]
