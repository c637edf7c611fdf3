"""Composite pattern expansion.

Rewrites locale-composite tokens into the sub-patterns the locale defines
for them, before tokenization:

    Token | Meaning (en-US sub-pattern)
    ------|-----------------------------------------------
    L     | numeric date, padded        MM/dd/yyyy
    l     | numeric date, unpadded      M/d/yyyy
    LL    | long month name             MMMM dd, yyyy
    ll    | abbreviated month name      MMM d, yyyy
    LLL   | LL plus short time          MMMM dd, yyyy, h:mm a
    lll   | ll plus short time          MMM d, yyyy, h:mm a
    LLLL  | LLL plus long weekday       EEEE, MMMM dd, yyyy, h:mm a
    llll  | lll plus short weekday      EEE, MMM d, yyyy, h:mm a
    LT    | short time                  h:mm a
    LTS   | short time with seconds     h:mm:ss a

Matching is leftmost with the longest alternative first, so "LTS" is never
read as "LT" + "S" and "LLLLL" is "LLLL" followed by "L".

Expansion is a single substitution pass. Sub-patterns must not contain
composite letters; one that does is reported as CompositePatternError
instead of being expanded again.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dtpattern.constants import COMPOSITE_LETTERS, COMPOSITE_TOKENS
from dtpattern.diagnostics import CompositePatternError, ErrorTemplate

if TYPE_CHECKING:
    from dtpattern.localization.provider import LocaleDataProvider
    from dtpattern.runtime.locale_context import Locale

__all__ = ["contains_composite", "expand_composites"]

_COMPOSITE_RE = re.compile("|".join(re.escape(token) for token in COMPOSITE_TOKENS))


def contains_composite(pattern: str) -> bool:
    """Check whether a pattern contains any composite token letter."""
    return not COMPOSITE_LETTERS.isdisjoint(pattern)


def expand_composites(
    pattern: str,
    locale: Locale,
    provider: LocaleDataProvider,
) -> str:
    """Substitute every composite token in a pattern.

    Literals and atomic tokens around composite tokens are preserved, so
    "foo LLL bar" expands to "foo MMMM dd, yyyy, h:mm a bar" for en-US.

    Args:
        pattern: Caller-supplied pattern
        locale: Locale whose composite patterns are used
        provider: Source of composite pattern definitions

    Returns:
        Pattern containing only atomic tokens and literal text

    Raises:
        LocaleDataMissingError: If the provider has no sub-pattern for a token
        CompositePatternError: If a sub-pattern contains a composite token
    """
    if not contains_composite(pattern):
        return pattern

    expansions: dict[str, str] = {}

    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        if token not in expansions:
            sub_pattern = provider.composite_pattern(locale, token)
            if contains_composite(sub_pattern):
                raise CompositePatternError(
                    ErrorTemplate.composite_pattern_recursive(token, sub_pattern, locale.code),
                    locale_code=locale.code,
                    key=token,
                )
            expansions[token] = sub_pattern
        return expansions[token]

    return _COMPOSITE_RE.sub(substitute, pattern)
