"""Diagnostic system for dtpattern errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CompositePatternError,
    DateFormatError,
    InvalidDateError,
    LocaleDataMissingError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CompositePatternError",
    "DateFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidDateError",
    "LocaleDataMissingError",
    "OutputFormat",
]
