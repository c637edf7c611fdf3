"""Calendar field extraction.

Turns an input value into the wall-clock reading the pattern renders, and
derives every calendar field tokens need from it.

Offset Semantics:
    - Aware datetime, offset given: converted to the fixed-offset zone first,
      i.e. rendered as observed at that offset from UTC.
    - Aware datetime, no offset: rendered in its own zone; Z/ZZ show its
      utcoffset().
    - Naive datetime: already a wall-clock reading and never shifted. A given
      offset only labels it (Z/ZZ); without one, the configured default
      (UTC+0) is shown.
    - date: midnight of that day, treated like a naive datetime.
    - str: ISO 8601, parsed with datetime.fromisoformat().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from dtpattern.constants import DEFAULT_OFFSET_MINUTES
from dtpattern.diagnostics import ErrorTemplate, InvalidDateError

from .offset import fixed_offset_zone, offset_minutes_of, validate_offset

__all__ = [
    "DateFields",
    "coerce_datetime",
    "extract_fields",
    "fields_from_wall_clock",
    "observe",
]


@dataclass(frozen=True, slots=True)
class DateFields:
    """Calendar fields of one wall-clock reading.

    Attributes:
        year: Gregorian year (1-9999)
        month: 1-12
        day: 1-31
        hour24: 0-23
        hour12: 1-12 (hours 0 and 12 both read 12)
        hour_k: 1-24 (hour 0 reads 24)
        minute: 0-59
        second: 0-59
        millisecond: 0-999
        weekday_iso: 1 (Monday) .. 7 (Sunday)
        day_of_year: 1-366
    """

    year: int
    month: int
    day: int
    hour24: int
    hour12: int
    hour_k: int
    minute: int
    second: int
    millisecond: int
    weekday_iso: int
    day_of_year: int

    @property
    def is_am(self) -> bool:
        """True before noon."""
        return self.hour24 < 12

    @property
    def week_of_year(self) -> int:
        """ceil(day_of_year / 7); not ISO-8601 week numbering."""
        return (self.day_of_year + 6) // 7

    @property
    def quarter(self) -> int:
        """ceil(month / 3)."""
        return (self.month + 2) // 3


def coerce_datetime(value: object) -> datetime:
    """Normalize a supported input to a datetime.

    Args:
        value: datetime, date or ISO 8601 string

    Returns:
        datetime (aware only if the input carried an offset)

    Raises:
        InvalidDateError: For any other type or an unparseable string
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidDateError(
                ErrorTemplate.invalid_date_string(value), input_value=repr(value)
            ) from e
    raise InvalidDateError(ErrorTemplate.invalid_date_type(value), input_value=repr(value))


def observe(
    value: object,
    offset_minutes: int | None = None,
    *,
    default_offset_minutes: int = DEFAULT_OFFSET_MINUTES,
) -> tuple[datetime, int]:
    """Resolve the naive wall-clock reading and the offset it is labelled with.

    Args:
        value: datetime, date or ISO 8601 string
        offset_minutes: Optional override in signed minutes east of UTC
        default_offset_minutes: Label for naive values without override

    Returns:
        (naive wall-clock datetime, offset minutes for Z/ZZ)

    Raises:
        InvalidDateError: If the value is invalid or leaves the year range
        ValueError: If the offset is out of range
    """
    dt = coerce_datetime(value)

    if offset_minutes is None:
        if dt.tzinfo is None:
            return dt, default_offset_minutes
        return dt.replace(tzinfo=None), offset_minutes_of(dt.utcoffset())

    validate_offset(offset_minutes)
    if dt.tzinfo is None:
        return dt, offset_minutes

    try:
        shifted = dt.astimezone(fixed_offset_zone(offset_minutes))
    except OverflowError as e:
        raise InvalidDateError(
            ErrorTemplate.date_out_of_range(value, offset_minutes), input_value=repr(value)
        ) from e
    return shifted.replace(tzinfo=None), offset_minutes


def fields_from_wall_clock(dt: datetime) -> DateFields:
    """Derive calendar fields from a wall-clock datetime (tzinfo ignored)."""
    hour = dt.hour
    return DateFields(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour24=hour,
        hour12=hour % 12 or 12,
        hour_k=hour or 24,
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
        weekday_iso=dt.isoweekday(),
        day_of_year=dt.timetuple().tm_yday,
    )


def extract_fields(value: object, offset_minutes: int | None = None) -> DateFields:
    """Compute DateFields for a value, shifted by the offset where applicable.

    Examples:
        >>> fields = extract_fields(datetime(2014, 10, 23, 0, 30))
        >>> fields.hour24, fields.hour12, fields.hour_k, fields.day_of_year
        (0, 12, 24, 296)
    """
    wall_clock, _ = observe(value, offset_minutes)
    return fields_from_wall_clock(wall_clock)
