"""Runtime formatting: fields, offsets, rendering and orchestration.

Python 3.13+.
"""

from .config import FormatterConfig
from .fields import DateFields, extract_fields
from .formatter import Formatter, format_datetime, get_default_provider
from .locale_context import Locale
from .offset import format_offset
from .renderer import FormatContext

__all__ = [
    "DateFields",
    "FormatContext",
    "Formatter",
    "FormatterConfig",
    "Locale",
    "extract_fields",
    "format_datetime",
    "format_offset",
    "get_default_provider",
]
