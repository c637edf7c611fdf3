"""Pattern tokenizer.

Splits an (already expanded) pattern string into literal runs and token runs.

Grammar:
    A token is a maximal run of one recognized letter (see TOKEN_LETTERS);
    its width is the run length exactly as written, so "MM" and "M" are
    different tokens. Every other character, including letters outside the
    recognized set, is literal text. Adjacent literal characters merge into
    one Literal segment.

The tokenizer never raises: malformed patterns degrade to literal text.

Examples:
    "yyyy-MM-dd" -> [Token(y, 4), Literal("-"), Token(M, 2), Literal("-"), Token(d, 2)]
    "ddThh"      -> [Token(d, 2), Literal("T"), Token(h, 2)]
    "HHmm"       -> [Token(H, 2), Token(m, 2)]

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from dtpattern.constants import TOKEN_LETTERS
from dtpattern.enums import TokenKind

__all__ = ["Literal", "Segment", "Token", "tokenize"]


@dataclass(frozen=True, slots=True)
class Literal:
    """Text copied verbatim to the output."""

    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """A run of one token letter.

    Attributes:
        kind: Which field the token renders
        width: Number of consecutive letters in the pattern (>= 1)
    """

    kind: TokenKind
    width: int

    def __post_init__(self) -> None:
        """Validate token width.

        Raises:
            ValueError: If width is less than 1
        """
        if self.width < 1:
            msg = f"Token width must be >= 1, got {self.width}"
            raise ValueError(msg)

    @property
    def letter(self) -> str:
        """Pattern letter of this token."""
        return self.kind.value

    def __str__(self) -> str:
        """Return the token as written in a pattern."""
        return self.kind.value * self.width


Segment: TypeAlias = Literal | Token


def tokenize(pattern: str) -> tuple[Segment, ...]:
    """Split a pattern into ordered Literal and Token segments.

    Args:
        pattern: Expanded pattern (composite tokens already substituted)

    Returns:
        Tuple of segments; concatenating str() of tokens and literal text
        reproduces the input pattern exactly.
    """
    segments: list[Segment] = []
    literal_chars: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char not in TOKEN_LETTERS:
            literal_chars.append(char)
            i += 1
            continue

        # Close the pending literal run before the token
        if literal_chars:
            segments.append(Literal("".join(literal_chars)))
            literal_chars = []

        j = i + 1
        while j < n and pattern[j] == char:
            j += 1
        segments.append(Token(TokenKind(char), j - i))
        i = j

    if literal_chars:
        segments.append(Literal("".join(literal_chars)))

    return tuple(segments)
