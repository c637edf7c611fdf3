"""Enumerations for dtpattern type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Closed set of pattern token kinds.

    Each member's value is the pattern letter that produces it, so
    ``TokenKind("M") is TokenKind.MONTH``.
    """

    YEAR = "y"
    """Calendar year: y, yy, yyy, yyyy"""

    MONTH = "M"
    """Month number or name: M, MM, MMM, MMMM"""

    DAY = "d"
    """Day of month: d, dd"""

    DAY_OF_YEAR = "D"
    """Day of year (1-366): D, DDD"""

    WEEKDAY = "E"
    """ISO weekday number or name: E, EEE, EEEE"""

    HOUR_24 = "H"
    """Hour in 0-23 cycle: H, HH"""

    HOUR_12 = "h"
    """Hour in 1-12 cycle: h, hh"""

    HOUR_K = "k"
    """Hour in 1-24 cycle: k, kk"""

    MINUTE = "m"
    """Minute: m, mm"""

    SECOND = "s"
    """Second: s, ss"""

    FRACTION = "S"
    """Fractional second from milliseconds: S, SS, SSS, ..."""

    DAY_PERIOD = "a"
    """AM/PM marker: a"""

    OFFSET = "Z"
    """UTC offset: Z (+HH:MM), ZZ (+HHMM)"""

    WEEK = "w"
    """Week of year, ceil(day_of_year / 7): w, ww"""

    QUARTER = "Q"
    """Quarter, ceil(month / 3): Q"""


class NameStyle(StrEnum):
    """Width of a localized month or weekday name.

    StrEnum provides automatic string conversion: str(NameStyle.SHORT) == "short"
    """

    SHORT = "short"
    """Abbreviated name: Oct, Thu"""

    LONG = "long"
    """Full name: October, Thursday"""


class PartType(StrEnum):
    """Label of a component produced by format-to-parts decomposition.

    Values follow the part types of ECMA-402 ``formatToParts``.
    """

    LITERAL = "literal"
    ERA = "era"
    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    DAY_OF_YEAR = "dayOfYear"
    WEEKDAY = "weekday"
    DAY_PERIOD = "dayPeriod"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    FRACTIONAL_SECOND = "fractionalSecond"
    TIME_ZONE_NAME = "timeZoneName"
    UNKNOWN = "unknown"


__all__ = [
    "NameStyle",
    "PartType",
    "TokenKind",
]
