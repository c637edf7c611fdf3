"""Locale data providers.

A LocaleDataProvider supplies everything locale-specific the formatter
needs: month, weekday and day period names, composite pattern definitions,
and a capability flag telling whether it can decompose a formatted date
into labelled parts.

Implementations:
    BabelLocaleDataProvider: CLDR data through Babel. Can decompose into
        parts for every locale Babel knows; names then come straight from
        Babel's own date formatter.
    StaticLocaleDataProvider: Plain name tables (built-in English, or a
        snapshot taken from Babel). Never decomposes into parts.

Missing data is always reported as LocaleDataMissingError. Neither provider
substitutes English names for a locale it does not cover.

Thread Safety:
    Providers are frozen dataclasses holding read-only mappings. They can be
    shared by any number of formatters and threads.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal, Protocol

from dtpattern.core.babel_compat import (
    get_babel_dates,
    get_unknown_locale_error,
    is_babel_available,
)
from dtpattern.diagnostics import ErrorTemplate, LocaleDataMissingError
from dtpattern.enums import NameStyle, PartType
from dtpattern.locale_utils import get_babel_locale, normalize_locale

from .tables import BUILTIN_COMPOSITE_PATTERNS, BUILTIN_NAMES, LocaleNames, lookup

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

    from dtpattern.runtime.locale_context import Locale

__all__ = [
    "BabelLocaleDataProvider",
    "DatePart",
    "LocaleDataProvider",
    "StaticLocaleDataProvider",
]

logger = logging.getLogger(__name__)

# CLDR field letter -> part label, as reported by format_to_parts()
_FIELD_PARTS: Mapping[str, PartType] = MappingProxyType(
    {
        "G": PartType.ERA,
        "y": PartType.YEAR,
        "Y": PartType.YEAR,
        "u": PartType.YEAR,
        "Q": PartType.QUARTER,
        "q": PartType.QUARTER,
        "M": PartType.MONTH,
        "L": PartType.MONTH,
        "w": PartType.WEEK,
        "W": PartType.WEEK,
        "d": PartType.DAY,
        "D": PartType.DAY_OF_YEAR,
        "E": PartType.WEEKDAY,
        "e": PartType.WEEKDAY,
        "c": PartType.WEEKDAY,
        "a": PartType.DAY_PERIOD,
        "b": PartType.DAY_PERIOD,
        "B": PartType.DAY_PERIOD,
        "h": PartType.HOUR,
        "H": PartType.HOUR,
        "K": PartType.HOUR,
        "k": PartType.HOUR,
        "m": PartType.MINUTE,
        "s": PartType.SECOND,
        "S": PartType.FRACTIONAL_SECOND,
        "z": PartType.TIME_ZONE_NAME,
        "Z": PartType.TIME_ZONE_NAME,
        "O": PartType.TIME_ZONE_NAME,
        "v": PartType.TIME_ZONE_NAME,
        "V": PartType.TIME_ZONE_NAME,
        "x": PartType.TIME_ZONE_NAME,
        "X": PartType.TIME_ZONE_NAME,
    }
)

_BABEL_WIDTHS: Mapping[NameStyle, Literal["abbreviated", "wide"]] = MappingProxyType(
    {NameStyle.SHORT: "abbreviated", NameStyle.LONG: "wide"}
)


@dataclass(frozen=True, slots=True)
class DatePart:
    """One labelled component of a formatted date.

    Attributes:
        type: What the component represents (month, weekday, literal, ...)
        value: Rendered text of the component
    """

    type: PartType
    value: str


# pylint: disable=unnecessary-ellipsis
class LocaleDataProvider(Protocol):
    """Interface the formatter requires from the localization service."""

    def can_decompose_into_parts(self, locale: Locale) -> bool:
        """Whether format_to_parts() is available for the locale."""
        ...

    def format_to_parts(
        self, locale: Locale, value: datetime, pattern: str
    ) -> tuple[DatePart, ...]:
        """Format a value under a CLDR pattern and return labelled parts."""
        ...

    def month_name(self, locale: Locale, index: int, style: NameStyle) -> str:
        """Month name for index 0 (January) .. 11 (December)."""
        ...

    def weekday_name(self, locale: Locale, iso_weekday: int, style: NameStyle) -> str:
        """Weekday name for ISO number 1 (Monday) .. 7 (Sunday)."""
        ...

    def day_period_name(self, locale: Locale, is_am: bool) -> str:
        """AM or PM marker."""
        ...

    def composite_pattern(self, locale: Locale, token: str) -> str:
        """Sub-pattern for a composite token (L, ll, LT, ...)."""
        ...
# pylint: enable=unnecessary-ellipsis


def _composite_pattern(
    table: Mapping[str, Mapping[str, str]], locale: Locale, token: str
) -> str:
    """Shared composite lookup for the exact locale code."""
    patterns = lookup(table, locale.code)
    if patterns is None or token not in patterns:
        raise LocaleDataMissingError(
            ErrorTemplate.composite_pattern_missing(token, locale.code),
            locale_code=locale.code,
            key=token,
        )
    return patterns[token]


@dataclass(frozen=True, slots=True)
class BabelLocaleDataProvider:
    """CLDR-backed provider using Babel as the host date formatter.

    Names are read from Babel's CLDR tables; format_to_parts() renders each
    pattern field through ``babel.dates.DateTimeFormat`` so that names match
    Babel's native output exactly.

    Attributes:
        composite_patterns: Composite token table keyed by POSIX locale code

    Example:
        >>> provider = BabelLocaleDataProvider()
        >>> provider.month_name(Locale("de-DE"), 9, NameStyle.LONG)
        'Oktober'
    """

    composite_patterns: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: BUILTIN_COMPOSITE_PATTERNS
    )

    def _babel_locale(self, locale: Locale) -> BabelLocale:
        unknown_locale_error = get_unknown_locale_error()
        try:
            return get_babel_locale(locale.code)
        except (unknown_locale_error, ValueError) as e:
            raise LocaleDataMissingError(
                ErrorTemplate.locale_data_missing("CLDR", locale.code),
                locale_code=locale.code,
                key="locale",
            ) from e

    def can_decompose_into_parts(self, locale: Locale) -> bool:
        """Check that Babel is installed and knows the locale.

        Args:
            locale: Locale to check

        Returns:
            True if format_to_parts() will succeed for this locale
        """
        if not is_babel_available():
            logger.debug("Babel unavailable; no parts decomposition for %s", locale.code)
            return False
        try:
            self._babel_locale(locale)
        except LocaleDataMissingError:
            logger.debug("Babel has no data for %s; no parts decomposition", locale.code)
            return False
        return True

    def format_to_parts(
        self, locale: Locale, value: datetime, pattern: str
    ) -> tuple[DatePart, ...]:
        """Format a value under a CLDR pattern and label each component.

        Args:
            locale: Locale for names and numbering
            value: Wall-clock value to format (tzinfo is ignored by name fields)
            pattern: CLDR date pattern, e.g. "MMM" or "EEEE"

        Returns:
            Tuple of DatePart in pattern order; literal text is labelled
            PartType.LITERAL

        Raises:
            LocaleDataMissingError: If Babel does not know the locale
        """
        dates = get_babel_dates()
        formatter = dates.DateTimeFormat(value, self._babel_locale(locale))
        parts: list[DatePart] = []
        for kind, data in dates.tokenize_pattern(pattern):
            if kind == "chars":
                parts.append(DatePart(PartType.LITERAL, data))
            else:
                char, num = data
                parts.append(
                    DatePart(_FIELD_PARTS.get(char, PartType.UNKNOWN), formatter[char * num])
                )
        return tuple(parts)

    def month_name(self, locale: Locale, index: int, style: NameStyle) -> str:
        """Get CLDR month name.

        Args:
            locale: Locale for the name
            index: Month index 0 (January) .. 11 (December)
            style: SHORT (abbreviated) or LONG (wide)

        Raises:
            LocaleDataMissingError: If the locale has no such name
        """
        names = get_babel_dates().get_month_names(
            _BABEL_WIDTHS[style], "format", self._babel_locale(locale)
        )
        try:
            return str(names[index + 1])
        except KeyError as e:
            raise LocaleDataMissingError(
                ErrorTemplate.locale_data_missing("month", locale.code),
                locale_code=locale.code,
                key="month",
            ) from e

    def weekday_name(self, locale: Locale, iso_weekday: int, style: NameStyle) -> str:
        """Get CLDR weekday name for ISO weekday 1 (Monday) .. 7 (Sunday)."""
        names = get_babel_dates().get_day_names(
            _BABEL_WIDTHS[style], "format", self._babel_locale(locale)
        )
        try:
            return str(names[iso_weekday - 1])
        except KeyError as e:
            raise LocaleDataMissingError(
                ErrorTemplate.locale_data_missing("weekday", locale.code),
                locale_code=locale.code,
                key="weekday",
            ) from e

    def day_period_name(self, locale: Locale, is_am: bool) -> str:
        """Get CLDR AM/PM marker (abbreviated, format context)."""
        names = get_babel_dates().get_period_names(
            "abbreviated", "format", self._babel_locale(locale)
        )
        try:
            return str(names["am" if is_am else "pm"])
        except KeyError as e:
            raise LocaleDataMissingError(
                ErrorTemplate.locale_data_missing("day period", locale.code),
                locale_code=locale.code,
                key="day period",
            ) from e

    def composite_pattern(self, locale: Locale, token: str) -> str:
        """Get composite sub-pattern from the composite table."""
        return _composite_pattern(self.composite_patterns, locale, token)


@dataclass(frozen=True, slots=True)
class StaticLocaleDataProvider:
    """Provider backed by fixed name tables.

    Tables are matched on the exact locale code, so "en_GB" does not borrow
    the "en" table. A locale with no table raises LocaleDataMissingError;
    there is no implicit English default beyond what ``names`` contains.

    Attributes:
        names: Name tables keyed by POSIX locale code (default: en and en_US)
        composite_patterns: Composite token table keyed by POSIX locale code

    Example:
        >>> provider = StaticLocaleDataProvider()
        >>> provider.weekday_name(Locale("en-US"), 4, NameStyle.SHORT)
        'Thu'
    """

    names: Mapping[str, LocaleNames] = field(default_factory=lambda: BUILTIN_NAMES)
    composite_patterns: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: BUILTIN_COMPOSITE_PATTERNS
    )

    @classmethod
    def from_babel(
        cls,
        *locale_codes: str,
        composite_patterns: Mapping[str, Mapping[str, str]] = BUILTIN_COMPOSITE_PATTERNS,
    ) -> StaticLocaleDataProvider:
        """Snapshot CLDR name tables for the given locales.

        The snapshot uses the same CLDR widths and context as
        BabelLocaleDataProvider, so both render identical names.

        Args:
            *locale_codes: BCP-47 or POSIX locale codes to snapshot
            composite_patterns: Composite token table to attach

        Returns:
            Provider holding one LocaleNames entry per locale code

        Raises:
            BabelImportError: If Babel is not installed
            babel.core.UnknownLocaleError: If Babel does not know a locale
        """
        dates = get_babel_dates()
        tables: dict[str, LocaleNames] = {}
        for code in locale_codes:
            babel_locale = get_babel_locale(code)
            months_long = dates.get_month_names("wide", "format", babel_locale)
            months_short = dates.get_month_names("abbreviated", "format", babel_locale)
            days_long = dates.get_day_names("wide", "format", babel_locale)
            days_short = dates.get_day_names("abbreviated", "format", babel_locale)
            periods = dates.get_period_names("abbreviated", "format", babel_locale)
            tables[normalize_locale(code)] = LocaleNames(
                months_long=tuple(str(months_long[i]) for i in range(1, 13)),
                months_short=tuple(str(months_short[i]) for i in range(1, 13)),
                weekdays_long=tuple(str(days_long[i]) for i in range(7)),
                weekdays_short=tuple(str(days_short[i]) for i in range(7)),
                am=str(periods["am"]),
                pm=str(periods["pm"]),
            )
        return cls(names=MappingProxyType(tables), composite_patterns=composite_patterns)

    def _names(self, locale: Locale, kind: str) -> LocaleNames:
        names = lookup(self.names, locale.code)
        if names is None:
            raise LocaleDataMissingError(
                ErrorTemplate.locale_data_missing(kind, locale.code),
                locale_code=locale.code,
                key=kind,
            )
        return names

    def can_decompose_into_parts(self, locale: Locale) -> bool:  # noqa: ARG002
        """Static tables never decompose into parts."""
        return False

    def format_to_parts(
        self, locale: Locale, value: datetime, pattern: str  # noqa: ARG002
    ) -> tuple[DatePart, ...]:
        """Not supported; can_decompose_into_parts() is always False.

        Raises:
            LocaleDataMissingError: Always, keyed "parts"
        """
        raise LocaleDataMissingError(
            ErrorTemplate.parts_unavailable(pattern, locale.code),
            locale_code=locale.code,
            key="parts",
        )

    def month_name(self, locale: Locale, index: int, style: NameStyle) -> str:
        """Look up month name by index 0 (January) .. 11 (December)."""
        names = self._names(locale, "month")
        table = names.months_long if style is NameStyle.LONG else names.months_short
        return table[index]

    def weekday_name(self, locale: Locale, iso_weekday: int, style: NameStyle) -> str:
        """Look up weekday name by ISO number 1 (Monday) .. 7 (Sunday)."""
        names = self._names(locale, "weekday")
        table = names.weekdays_long if style is NameStyle.LONG else names.weekdays_short
        return table[iso_weekday - 1]

    def day_period_name(self, locale: Locale, is_am: bool) -> str:
        """Look up AM/PM marker."""
        names = self._names(locale, "day period")
        return names.am if is_am else names.pm

    def composite_pattern(self, locale: Locale, token: str) -> str:
        """Look up composite sub-pattern."""
        return _composite_pattern(self.composite_patterns, locale, token)
