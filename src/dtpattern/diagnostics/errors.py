"""dtpattern exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateFormatError(Exception):
    """Base exception for all dtpattern errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidDateError(DateFormatError, ValueError):
    """Input value is not a well-formed point in time.

    Raised for unsupported types, unparseable ISO 8601 strings and values
    that leave the representable range once the offset is applied.

    Attributes:
        input_value: repr() of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize InvalidDateError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: repr() of the rejected value
        """
        super().__init__(message)
        self.input_value = input_value


class LocaleDataMissingError(DateFormatError, LookupError):
    """A name table or composite pattern has no entry for the locale.

    Raised by LocaleDataProvider implementations and propagated unchanged
    through the formatter. Names are never silently defaulted to English.

    Attributes:
        locale_code: Locale the lookup was made for
        key: What was looked up (e.g. "month", "weekday", "LLL")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        key: str = "",
    ) -> None:
        """Initialize LocaleDataMissingError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: Locale the lookup was made for
            key: What was looked up
        """
        super().__init__(message)
        self.locale_code = locale_code
        self.key = key


class CompositePatternError(LocaleDataMissingError):
    """Composite sub-pattern refers back to a composite token.

    Locale data is expected to expand in a single pass. A sub-pattern that
    contains L or l is rejected instead of being expanded again.
    """


__all__ = [
    "CompositePatternError",
    "DateFormatError",
    "InvalidDateError",
    "LocaleDataMissingError",
]
