"""Pattern grammar: composite expansion and tokenization.

Python 3.13+. Zero external dependencies.
"""

from .expander import contains_composite, expand_composites
from .tokenizer import Literal, Segment, Token, tokenize

__all__ = [
    "Literal",
    "Segment",
    "Token",
    "contains_composite",
    "expand_composites",
    "tokenize",
]
