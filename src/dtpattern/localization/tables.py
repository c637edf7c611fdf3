"""Static locale tables.

Built-in name tables and composite pattern definitions. Tables are keyed by
POSIX locale code and matched exactly: an entry is listed only under the codes
whose CLDR data it reproduces. Regional variants are not inferred from the
language entry because CLDR regions differ ("Sept" and "pm" in en_GB).

Composite sub-patterns are written in dtpattern's own grammar (not CLDR):
"yyyy" is the full year and letters outside the token set are literal.
They must not contain L or l.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from dtpattern.locale_utils import normalize_locale

__all__ = [
    "BUILTIN_COMPOSITE_PATTERNS",
    "BUILTIN_NAMES",
    "ENGLISH_NAMES",
    "LocaleNames",
    "lookup",
]


@dataclass(frozen=True, slots=True)
class LocaleNames:
    """Month, weekday and day period names for one locale.

    Attributes:
        months_long: Full month names, January first (12 entries)
        months_short: Abbreviated month names, January first (12 entries)
        weekdays_long: Full weekday names, Monday first (7 entries)
        weekdays_short: Abbreviated weekday names, Monday first (7 entries)
        am: Day period marker before noon
        pm: Day period marker from noon
    """

    months_long: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays_long: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    am: str
    pm: str

    def __post_init__(self) -> None:
        """Validate table sizes.

        Raises:
            ValueError: If a month table does not have 12 entries or a
                weekday table does not have 7 entries.
        """
        for name in ("months_long", "months_short"):
            if len(getattr(self, name)) != 12:
                msg = f"{name} must have 12 entries, got {len(getattr(self, name))}"
                raise ValueError(msg)
        for name in ("weekdays_long", "weekdays_short"):
            if len(getattr(self, name)) != 7:
                msg = f"{name} must have 7 entries, got {len(getattr(self, name))}"
                raise ValueError(msg)


ENGLISH_NAMES = LocaleNames(
    months_long=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays_long=(
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
    weekdays_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    am="AM",
    pm="PM",
)  # fmt: skip

BUILTIN_NAMES: Mapping[str, LocaleNames] = MappingProxyType(
    {"en": ENGLISH_NAMES, "en_US": ENGLISH_NAMES}
)

_EN_US = {
    "L": "MM/dd/yyyy",
    "l": "M/d/yyyy",
    "LL": "MMMM dd, yyyy",
    "ll": "MMM d, yyyy",
    "LLL": "MMMM dd, yyyy, h:mm a",
    "lll": "MMM d, yyyy, h:mm a",
    "LLLL": "EEEE, MMMM dd, yyyy, h:mm a",
    "llll": "EEE, MMM d, yyyy, h:mm a",
    "LT": "h:mm a",
    "LTS": "h:mm:ss a",
}

_EN_GB = {
    "L": "dd/MM/yyyy",
    "l": "d/M/yyyy",
    "LL": "dd MMMM yyyy",
    "ll": "d MMM yyyy",
    "LLL": "dd MMMM yyyy, HH:mm",
    "lll": "d MMM yyyy, HH:mm",
    "LLLL": "EEEE, dd MMMM yyyy, HH:mm",
    "llll": "EEE, d MMM yyyy, HH:mm",
    "LT": "HH:mm",
    "LTS": "HH:mm:ss",
}

_DE = {
    "L": "dd.MM.yyyy",
    "l": "d.M.yyyy",
    "LL": "dd. MMMM yyyy",
    "ll": "d. MMM yyyy",
    "LLL": "dd. MMMM yyyy, HH:mm",
    "lll": "d. MMM yyyy, HH:mm",
    "LLLL": "EEEE, dd. MMMM yyyy, HH:mm",
    "llll": "EEE, d. MMM yyyy, HH:mm",
    "LT": "HH:mm",
    "LTS": "HH:mm:ss",
}

_FR = {
    "L": "dd/MM/yyyy",
    "l": "d/M/yyyy",
    "LL": "dd MMMM yyyy",
    "ll": "d MMM yyyy",
    "LLL": "dd MMMM yyyy HH:mm",
    "lll": "d MMM yyyy HH:mm",
    "LLLL": "EEEE dd MMMM yyyy HH:mm",
    "llll": "EEE d MMM yyyy HH:mm",
    "LT": "HH:mm",
    "LTS": "HH:mm:ss",
}

_JA = {
    "L": "yyyy/MM/dd",
    "l": "yyyy/M/d",
    "LL": "yyyy年M月d日",
    "ll": "yyyy年M月d日",
    "LLL": "yyyy年M月d日 H:mm",
    "lll": "yyyy年M月d日 H:mm",
    "LLLL": "yyyy年M月d日 EEEE H:mm",
    "llll": "yyyy年M月d日(EEE) H:mm",
    "LT": "H:mm",
    "LTS": "H:mm:ss",
}

BUILTIN_COMPOSITE_PATTERNS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        code: MappingProxyType(patterns)
        for patterns, codes in (
            (_EN_US, ("en", "en_US")),
            (_EN_GB, ("en_GB",)),
            (_DE, ("de", "de_DE", "de_AT")),
            (_FR, ("fr", "fr_FR")),
            (_JA, ("ja", "ja_JP")),
        )
        for code in codes
    }
)


T = TypeVar("T")


def lookup(table: Mapping[str, T], locale_code: str) -> T | None:
    """Find the table entry for exactly this locale.

    Args:
        table: Mapping keyed by POSIX locale code
        locale_code: BCP-47 or POSIX locale code

    Returns:
        The entry stored under the normalized code, or None

    Example:
        >>> lookup(BUILTIN_COMPOSITE_PATTERNS, "de-AT")["L"]
        'dd.MM.yyyy'
        >>> lookup(BUILTIN_NAMES, "en-GB") is None
        True
    """
    return table.get(normalize_locale(locale_code))
