"""Babel compatibility layer for lazy dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    The pattern grammar, the static name tables and the offset/field logic
    work without Babel. Only BabelLocaleDataProvider and
    StaticLocaleDataProvider.from_babel() need CLDR data. This module ensures:
    1. Importing dtpattern never triggers a Babel (and CLDR) import
    2. Babel-dependent code paths get consistent, helpful error messages
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    # At function call site (for runtime use):
    from dtpattern.core.babel_compat import get_babel_dates

    def my_function(locale_code: str) -> None:
        dates = get_babel_dates()  # Raises BabelImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from datetime import date, datetime, time
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Literal, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelDateTimeFormatProtocol(Protocol):
    """Protocol for babel.dates.DateTimeFormat instances.

    Indexing with a field (e.g. ``fmt["MMM"]``) renders that single field.
    """

    def __getitem__(self, name: str) -> str:
        """Render one pattern field for the bound value."""
        ...


class BabelDatesProtocol(Protocol):
    """Protocol for Babel dates module interface.

    Defines the subset of babel.dates API actually used by dtpattern.
    Provides type safety without requiring full Babel type stubs.
    """

    def DateTimeFormat(  # noqa: N802 - mirrors the Babel class name
        self,
        value: date | datetime | time,
        locale: Locale | str,
    ) -> BabelDateTimeFormatProtocol:
        """Bind a value and locale for field-by-field formatting."""
        ...

    def tokenize_pattern(self, pattern: str) -> list[tuple[str, Any]]:
        """Split a CLDR pattern into ('chars', text) and ('field', (char, num))."""
        ...

    def get_month_names(
        self,
        width: Literal["abbreviated", "narrow", "wide"] = "wide",
        context: Literal["format", "stand-alone"] = "format",
        locale: Locale | str | None = None,
    ) -> Any:
        """Return month names keyed 1..12."""
        ...

    def get_day_names(
        self,
        width: Literal["abbreviated", "narrow", "short", "wide"] = "wide",
        context: Literal["format", "stand-alone"] = "format",
        locale: Locale | str | None = None,
    ) -> Any:
        """Return weekday names keyed 0 (Monday)..6 (Sunday)."""
        ...

    def get_period_names(
        self,
        width: Literal["abbreviated", "narrow", "wide"] = "wide",
        context: Literal["format", "stand-alone"] = "stand-alone",
        locale: Locale | str | None = None,
    ) -> Any:
        """Return day period names keyed 'am', 'pm', ..."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelDatesProtocol",
    "BabelDateTimeFormatProtocol",
    "BabelImportError",
    "get_babel_dates",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install dtpattern"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_dates() -> BabelDatesProtocol:
    """Get the Babel dates module.

    Returns:
        The babel.dates module (typed via BabelDatesProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates  # type: ignore[return-value]
