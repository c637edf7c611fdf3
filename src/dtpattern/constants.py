"""Shared constants for dtpattern.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern grammar: Token letters and composite tokens
- Cache limits: Memory bounds for the Locale identity cache
- Locale defaults: Fallback locale and offset

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern grammar
    "TOKEN_LETTERS",
    "COMPOSITE_TOKENS",
    "COMPOSITE_LETTERS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_OFFSET_MINUTES",
    "MAX_OFFSET_MINUTES",
    "MILLISECOND_DIGITS",
]

# ============================================================================
# PATTERN GRAMMAR
# ============================================================================
#
# Any character outside TOKEN_LETTERS is copied to the output verbatim.
# There is no quoting syntax: a letter is either a token or a literal.
#
#   y  year            M  month           d  day of month
#   D  day of year     E  weekday         H  hour 0-23
#   h  hour 1-12       k  hour 1-24       m  minute
#   s  second          S  fraction        a  AM/PM marker
#   Z  UTC offset      w  week of year    Q  quarter
#
# ============================================================================

TOKEN_LETTERS: frozenset[str] = frozenset("yMdDEHhkmsSaZwQ")

# Composite tokens are rewritten from locale data before tokenization.
# Order matters: longer alternatives first (LTS before LT before L).
COMPOSITE_TOKENS: tuple[str, ...] = (
    "LTS",
    "LT",
    "LLLL",
    "LLL",
    "LL",
    "L",
    "llll",
    "lll",
    "ll",
    "l",
)

# Letters reserved for composite tokens. A composite sub-pattern containing
# either letter would re-reference a composite token.
COMPOSITE_LETTERS: frozenset[str] = frozenset("Ll")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Locale instances.
# Prevents unbounded memory growth in multi-locale applications.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale code used by Locale.create() when an identifier is malformed.
DEFAULT_LOCALE: str = "en_US"

# Offset rendered by Z/ZZ when no override is supplied and the value is naive.
DEFAULT_OFFSET_MINUTES: int = 0

# datetime.timezone accepts offsets strictly inside +/-24h.
MAX_OFFSET_MINUTES: int = 24 * 60 - 1

# Natural width of the millisecond field rendered by S tokens.
MILLISECOND_DIGITS: int = 3
