"""Formatter configuration.

Provides a single frozen dataclass for the knobs a Formatter accepts,
instead of a growing list of constructor parameters.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from dtpattern.constants import DEFAULT_OFFSET_MINUTES

from .offset import validate_offset

__all__ = ["FormatterConfig"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable configuration for Formatter.

    All fields have sensible defaults; ``FormatterConfig()`` is the behavior
    of a Formatter constructed without a config.

    Attributes:
        prefer_host_names: Resolve month/weekday/day period names through the
            provider's format-to-parts decomposition when it supports the
            locale (default: True). False always uses the name tables.
        default_offset_minutes: Offset shown by Z/ZZ for naive values when
            format() gets no override (default: 0, i.e. UTC).

    Example:
        >>> config = FormatterConfig(default_offset_minutes=60)
        >>> Formatter("HH:mm Z", Locale("de-DE"), config=config).format(
        ...     datetime(2024, 1, 1, 9, 0)
        ... )
        '09:00 +01:00'
    """

    prefer_host_names: bool = True
    default_offset_minutes: int = DEFAULT_OFFSET_MINUTES

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If default_offset_minutes is not an int
            ValueError: If default_offset_minutes is 24 hours or more
        """
        validate_offset(self.default_offset_minutes)
