"""UTC offset rendering.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import timedelta, timezone

from dtpattern.constants import MAX_OFFSET_MINUTES
from dtpattern.diagnostics import ErrorTemplate

__all__ = ["fixed_offset_zone", "format_offset", "offset_minutes_of", "validate_offset"]


def validate_offset(offset_minutes: int) -> int:
    """Check an offset override.

    Args:
        offset_minutes: Signed minutes east of UTC

    Returns:
        The offset unchanged

    Raises:
        TypeError: If the offset is not an int (bool is rejected)
        ValueError: If the offset is 24 hours or more in either direction
    """
    if isinstance(offset_minutes, bool) or not isinstance(offset_minutes, int):
        msg = f"offset_minutes must be int, got {type(offset_minutes).__name__}"
        raise TypeError(msg)
    if abs(offset_minutes) > MAX_OFFSET_MINUTES:
        raise ValueError(ErrorTemplate.offset_out_of_range(offset_minutes).message)
    return offset_minutes


def fixed_offset_zone(offset_minutes: int) -> timezone:
    """Build a fixed-offset tzinfo; offset 0 is ``timezone.utc``."""
    if offset_minutes == 0:
        return timezone.utc
    return timezone(timedelta(minutes=offset_minutes))


def offset_minutes_of(delta: timedelta | None) -> int:
    """Convert a utcoffset() result to whole minutes (None means UTC).

    Seconds are truncated toward zero, so -00:00:30 is 0 minutes.
    """
    if delta is None:
        return 0
    return int(delta.total_seconds() / 60)


def format_offset(offset_minutes: int, *, delimited: bool = True) -> str:
    """Render a signed offset as ``+HH:MM`` or ``+HHMM``.

    The sign is always present: ``+`` for zero and east of UTC, ``-`` west.

    Args:
        offset_minutes: Signed minutes east of UTC
        delimited: Separate hours and minutes with a colon (Z) or not (ZZ)

    Returns:
        Offset string

    Examples:
        >>> format_offset(-420)
        '-07:00'
        >>> format_offset(0, delimited=False)
        '+0000'
        >>> format_offset(330)
        '+05:30'
    """
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    separator = ":" if delimited else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"
