"""Locale handle for thread-safe, formatter-scoped rendering.

Architecture:
    - Locale: Immutable identifier container (frozen dataclass)
    - Locale data is not held here; a LocaleDataProvider resolves names and
      composite patterns for a Locale
    - No dependency on Python's locale module (avoids global state)

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state outside the guarded cache)

Python 3.13+. Babel is consulted only by create_or_raise().
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar

from dtpattern.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from dtpattern.core.babel_compat import get_unknown_locale_error
from dtpattern.diagnostics import ErrorTemplate
from dtpattern.locale_utils import get_babel_locale, normalize_locale

__all__ = ["Locale"]

logger = logging.getLogger(__name__)

# language[-script][-region][-variant...], separators "-" or "_"
_LOCALE_RE = re.compile(r"^[A-Za-z]{2,8}(?:[-_][A-Za-z0-9]{1,8})*$")


@dataclass(frozen=True, slots=True)
class Locale:
    """Immutable locale identifier.

    Construct directly for strict validation, or through Locale.create() for
    cached instances with graceful fallback.

    Cache Management:
        Locale uses an internal LRU cache for instance reuse:
        - Locale.clear_cache(): Clear all cached instances
        - Locale.cache_size(): Get current cache size
        - Locale.cache_info(): Get detailed cache statistics

    Examples:
        >>> Locale("en-US").code
        'en_US'

        >>> Locale.create("en-US") is Locale.create("en_US")
        True

        >>> loc = Locale.create("not a locale")  # Falls back, warning logged
        >>> loc.identifier, loc.code, loc.is_fallback
        ('not a locale', 'en_US', True)

    Thread Safety:
        Locale is immutable and thread-safe. Cache operations are protected
        by RLock.
    """

    _cache: ClassVar[OrderedDict[str, Locale]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    identifier: str
    is_fallback: bool = False

    def __post_init__(self) -> None:
        """Validate the identifier.

        Raises:
            ValueError: If the identifier is not a language tag
        """
        if self.is_fallback:
            return
        if not isinstance(self.identifier, str):
            msg = ErrorTemplate.locale_invalid(repr(self.identifier), "not a string").message
            raise TypeError(msg)
        if not _LOCALE_RE.match(self.identifier):
            msg = ErrorTemplate.locale_invalid(self.identifier, "malformed language tag").message
            raise ValueError(msg)

    @classmethod
    def create(cls, identifier: str) -> Locale:
        """Create Locale with caching and graceful fallback.

        Malformed identifiers log a warning and resolve to en_US while the
        original identifier is preserved for debugging.

        Args:
            identifier: BCP-47 locale identifier (e.g., 'en-US', 'de')

        Returns:
            Cached Locale instance
        """
        cache_key = (
            normalize_locale(identifier) if isinstance(identifier, str) else repr(identifier)
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        try:
            locale = cls(identifier)
        except (TypeError, ValueError) as e:
            logger.warning(
                "Invalid locale '%s': %s. Falling back to %s", identifier, e, DEFAULT_LOCALE
            )
            locale = cls(str(identifier), is_fallback=True)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = locale
            return locale

    @classmethod
    def create_or_raise(cls, identifier: str) -> Locale:
        """Create Locale or raise on validation failure.

        Strict validation method: the identifier must be well formed and
        known to CLDR. Use this when silent fallback is not acceptable.
        Instances are not cached.

        Args:
            identifier: BCP-47 locale identifier (e.g., 'en-US', 'de')

        Returns:
            Locale instance for a locale Babel has data for

        Raises:
            TypeError: If identifier is not a string
            ValueError: If identifier is malformed or unknown
            BabelImportError: If Babel is not installed

        Examples:
            >>> Locale.create_or_raise("de-AT").code
            'de_AT'

            >>> Locale.create_or_raise("xx-YY")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
                ...
            ValueError: Invalid locale identifier 'xx-YY': unknown to CLDR
        """
        locale = cls(identifier)
        unknown_locale_error = get_unknown_locale_error()
        try:
            get_babel_locale(locale.code)
        except (unknown_locale_error, ValueError) as e:
            msg = ErrorTemplate.locale_invalid(identifier, f"unknown to CLDR ({e})").message
            raise ValueError(msg) from None
        return locale

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the Locale cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached Locale instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @property
    def code(self) -> str:
        """POSIX locale code used for data lookups (e.g. 'en_US')."""
        if self.is_fallback:
            return DEFAULT_LOCALE
        return normalize_locale(self.identifier)

    def __str__(self) -> str:
        """Return the locale identifier as given."""
        return self.identifier
