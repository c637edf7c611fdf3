"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from dtpattern.constants import MAX_OFFSET_MINUTES

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every error case.
    """

    @staticmethod
    def invalid_date_type(value: object) -> Diagnostic:
        """Value is neither a date, a datetime nor an ISO 8601 string.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INVALID_DATE
        """
        msg = f"Cannot format value of type {type(value).__name__} as a date"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=msg,
            hint="Pass a datetime.datetime, datetime.date or ISO 8601 string",
            input_value=repr(value),
        )

    @staticmethod
    def invalid_date_string(value: str) -> Diagnostic:
        """String value is not ISO 8601.

        Args:
            value: The rejected string

        Returns:
            Diagnostic for INVALID_DATE
        """
        msg = f"Invalid datetime string {value!r}: not ISO 8601 format"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=msg,
            hint="Use a form accepted by datetime.fromisoformat, e.g. 2014-10-23T16:30:45",
            input_value=repr(value),
        )

    @staticmethod
    def date_out_of_range(value: object, offset_minutes: int) -> Diagnostic:
        """Shifting the value by the offset leaves the supported year range.

        Args:
            value: The value being shifted
            offset_minutes: The requested UTC offset

        Returns:
            Diagnostic for DATE_OUT_OF_RANGE
        """
        msg = f"Value {value!r} is out of range at UTC offset {offset_minutes} minutes"
        return Diagnostic(
            code=DiagnosticCode.DATE_OUT_OF_RANGE,
            message=msg,
            hint="Years must stay within 1..9999 after the offset is applied",
            input_value=repr(value),
        )

    @staticmethod
    def locale_data_missing(kind: str, locale_code: str) -> Diagnostic:
        """Name table missing for a locale.

        Args:
            kind: Which table was requested ("month", "weekday", "day period")
            locale_code: Locale the lookup was made for

        Returns:
            Diagnostic for LOCALE_DATA_MISSING
        """
        msg = f"No {kind} names for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MISSING,
            message=msg,
            hint="Register a name table for this locale or use a provider that covers it",
            locale_code=locale_code,
        )

    @staticmethod
    def composite_pattern_missing(token: str, locale_code: str) -> Diagnostic:
        """Composite token has no sub-pattern for a locale.

        Args:
            token: The composite token (L, LL, LT, ...)
            locale_code: Locale the lookup was made for

        Returns:
            Diagnostic for COMPOSITE_PATTERN_MISSING
        """
        msg = f"No pattern for composite token '{token}' in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.COMPOSITE_PATTERN_MISSING,
            message=msg,
            hint="Add the token to the locale's composite pattern table",
            locale_code=locale_code,
        )

    @staticmethod
    def composite_pattern_recursive(token: str, sub_pattern: str, locale_code: str) -> Diagnostic:
        """Composite sub-pattern contains another composite token.

        Args:
            token: The composite token being expanded
            sub_pattern: The offending sub-pattern
            locale_code: Locale the lookup was made for

        Returns:
            Diagnostic for COMPOSITE_PATTERN_RECURSIVE
        """
        msg = (
            f"Pattern {sub_pattern!r} for composite token '{token}' in locale "
            f"'{locale_code}' references a composite token"
        )
        return Diagnostic(
            code=DiagnosticCode.COMPOSITE_PATTERN_RECURSIVE,
            message=msg,
            hint="Composite sub-patterns must only use atomic tokens (no L or l)",
            locale_code=locale_code,
        )

    @staticmethod
    def part_not_found(part_type: str, pattern: str, locale_code: str) -> Diagnostic:
        """Format-to-parts output lacks the requested part.

        Args:
            part_type: Part label that was expected
            pattern: Pattern handed to the host formatter
            locale_code: Locale the lookup was made for

        Returns:
            Diagnostic for PART_NOT_FOUND
        """
        msg = f"No '{part_type}' part when formatting {pattern!r} for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PART_NOT_FOUND,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def parts_unavailable(pattern: str, locale_code: str) -> Diagnostic:
        """Provider has no host formatter to decompose a pattern into parts."""
        msg = f"No format-to-parts data for {pattern!r} in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_MISSING,
            message=msg,
            hint="Check can_decompose_into_parts() before calling format_to_parts()",
            locale_code=locale_code,
        )

    @staticmethod
    def locale_invalid(identifier: str, reason: str) -> Diagnostic:
        """Locale identifier is malformed or unknown.

        Args:
            identifier: The rejected identifier
            reason: Why it was rejected

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale identifier '{identifier}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a BCP-47 language tag such as 'en-US' or 'de'",
            input_value=repr(identifier),
        )

    @staticmethod
    def offset_out_of_range(offset_minutes: int) -> Diagnostic:
        """UTC offset outside what a fixed-offset zone can express.

        Args:
            offset_minutes: The rejected offset

        Returns:
            Diagnostic for OFFSET_OUT_OF_RANGE
        """
        msg = (
            f"UTC offset {offset_minutes} minutes is outside "
            f"-{MAX_OFFSET_MINUTES}..{MAX_OFFSET_MINUTES}"
        )
        return Diagnostic(
            code=DiagnosticCode.OFFSET_OUT_OF_RANGE,
            message=msg,
            input_value=repr(offset_minutes),
        )


__all__ = ["ErrorTemplate"]
