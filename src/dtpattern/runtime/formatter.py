"""Pattern formatter orchestration.

Formatter binds a pattern to a locale and a LocaleDataProvider:

    expand composite tokens -> tokenize -> (per call) extract fields
    -> render each segment -> concatenate

Expansion and tokenization depend only on the pattern, the locale and the
provider, so they run once at construction. The parts-decomposition
capability is also resolved once there and never changes afterwards.

Thread Safety:
    A Formatter holds no mutable state. One instance can serve any number of
    concurrent format() calls.

Python 3.13+.
"""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING

from dtpattern.localization.provider import BabelLocaleDataProvider, LocaleDataProvider
from dtpattern.syntax.expander import expand_composites
from dtpattern.syntax.tokenizer import Segment, tokenize

from .config import FormatterConfig
from .fields import fields_from_wall_clock, observe
from .locale_context import Locale
from .renderer import FormatContext, render

if TYPE_CHECKING:
    from datetime import date, datetime

__all__ = ["Formatter", "format_datetime", "get_default_provider"]

logger = logging.getLogger(__name__)


@cache
def get_default_provider() -> LocaleDataProvider:
    """Shared BabelLocaleDataProvider used when none is injected."""
    return BabelLocaleDataProvider()


class Formatter:
    """Locale-bound date/time pattern formatter.

    Examples:
        >>> from datetime import datetime
        >>> fmt = Formatter("MMM dd, yyyy h:mm:ss a", Locale("en-US"))
        >>> fmt.format(datetime(2014, 10, 23, 16, 30, 45))
        'Oct 23, 2014 4:30:45 PM'

        >>> Formatter("yyyy-MM-ddThh:mm:ssZ", "en-US").format(
        ...     datetime(2014, 10, 23, 16, 30, 45), -420
        ... )
        '2014-10-23T04:30:45-07:00'

    Raises (at construction):
        TypeError: If pattern is not a string
        LocaleDataMissingError: If a composite token has no sub-pattern
        CompositePatternError: If a sub-pattern references a composite token
    """

    __slots__ = ("_config", "_locale", "_pattern", "_provider", "_segments", "_use_parts")

    def __init__(
        self,
        pattern: str,
        locale: Locale | str,
        *,
        provider: LocaleDataProvider | None = None,
        config: FormatterConfig | None = None,
    ) -> None:
        """Bind a pattern to a locale.

        Args:
            pattern: Format pattern, e.g. "yyyy-MM-dd HH:mm" or "LLL"
            locale: Locale, or an identifier passed to Locale.create()
            provider: Locale data source (default: shared Babel provider)
            config: Formatter options (default: FormatterConfig())
        """
        if not isinstance(pattern, str):
            msg = f"pattern must be str, got {type(pattern).__name__}"
            raise TypeError(msg)

        self._pattern = pattern
        self._locale = locale if isinstance(locale, Locale) else Locale.create(locale)
        self._provider = provider if provider is not None else get_default_provider()
        self._config = config if config is not None else FormatterConfig()
        self._use_parts = self._config.prefer_host_names and bool(
            self._provider.can_decompose_into_parts(self._locale)
        )
        self._segments = tokenize(expand_composites(pattern, self._locale, self._provider))

        logger.debug(
            "Formatter %r bound to %s (parts decomposition: %s)",
            pattern,
            self._locale.code,
            self._use_parts,
        )

    @property
    def pattern(self) -> str:
        """Pattern as supplied by the caller."""
        return self._pattern

    @property
    def locale(self) -> Locale:
        """Bound locale."""
        return self._locale

    @property
    def provider(self) -> LocaleDataProvider:
        """Locale data provider."""
        return self._provider

    @property
    def config(self) -> FormatterConfig:
        """Formatter configuration."""
        return self._config

    @property
    def uses_parts(self) -> bool:
        """Whether names are resolved through format-to-parts decomposition."""
        return self._use_parts

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Expanded and tokenized pattern."""
        return self._segments

    def format(self, value: datetime | date | str, offset_minutes: int | None = None) -> str:
        """Render a value.

        Args:
            value: datetime, date or ISO 8601 string
            offset_minutes: Optional UTC offset override in signed minutes.
                Aware values are converted to this offset; naive values are
                taken as already observed at it. Z/ZZ render this offset.

        Returns:
            Formatted string

        Raises:
            InvalidDateError: If value is not a valid point in time
            LocaleDataMissingError: If a name lookup has no data
            TypeError, ValueError: If offset_minutes is not a valid offset
        """
        wall_clock, offset = observe(
            value,
            offset_minutes,
            default_offset_minutes=self._config.default_offset_minutes,
        )
        ctx = FormatContext(
            fields=fields_from_wall_clock(wall_clock),
            wall_clock=wall_clock,
            offset_minutes=offset,
            locale=self._locale,
            provider=self._provider,
            use_parts=self._use_parts,
        )
        return render(self._segments, ctx)

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"Formatter(pattern={self._pattern!r}, locale={self._locale.identifier!r})"


def format_datetime(
    pattern: str,
    value: datetime | date | str,
    locale: Locale | str,
    offset_minutes: int | None = None,
    *,
    provider: LocaleDataProvider | None = None,
    config: FormatterConfig | None = None,
) -> str:
    """Format a value in one call.

    Equivalent to ``Formatter(pattern, locale, ...).format(value, offset_minutes)``.

    Example:
        >>> format_datetime("H:m", datetime(2014, 10, 23), "en-US")
        '0:0'
    """
    formatter = Formatter(pattern, locale, provider=provider, config=config)
    return formatter.format(value, offset_minutes)
