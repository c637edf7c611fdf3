"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (values that are not a point in time)
        2000-2999: Locale data errors (missing names, composite patterns)
        3000-3999: Configuration errors (locale identifiers, offsets)
    """

    # Input errors (1000-1999)
    INVALID_DATE = 1001
    DATE_OUT_OF_RANGE = 1002

    # Locale data errors (2000-2999)
    LOCALE_DATA_MISSING = 2001
    COMPOSITE_PATTERN_MISSING = 2002
    COMPOSITE_PATTERN_RECURSIVE = 2003
    PART_NOT_FOUND = 2004

    # Configuration errors (3000-3999)
    LOCALE_INVALID = 3001
    OFFSET_OUT_OF_RANGE = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale the failing lookup was made for
        input_value: repr() of the input that triggered the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[LOCALE_DATA_MISSING]: No month names for locale 'xx_YY'
              = locale: xx_YY
              = help: Register a name table for this locale

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
