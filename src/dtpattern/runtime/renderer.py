"""Token rendering.

Maps each (TokenKind, width) to its textual form. Dispatch is a single
``match`` over the closed TokenKind enum.

Width Rules:
    Token | 1                 | 2                 | 3            | 4+
    ------|-------------------|-------------------|--------------|-------------------
    y     | year % 100        | year % 100, 2 dig | full year    | full year, padded
    M     | month             | month, 2 digits   | short name   | long name
    E     | ISO weekday 1-7   | short name        | short name   | long name
    S     | millisecond digits truncated or zero-filled on the right to width
    a     | AM/PM marker (every width)
    Z     | +HH:MM            | +HHMM (every width from 2)
    other | natural decimal   | zero-padded to width, never truncated

Name Resolution:
    With parts decomposition (FormatContext.use_parts), month, weekday and
    day period names are taken from the provider's format_to_parts() output
    for a single-field CLDR pattern (MMM, MMMM, EEE, EEEE, a). Otherwise the
    provider's name tables are used, indexed by month (0-11) or ISO weekday.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, assert_never

from dtpattern.constants import MILLISECOND_DIGITS
from dtpattern.diagnostics import ErrorTemplate, LocaleDataMissingError
from dtpattern.enums import NameStyle, PartType, TokenKind
from dtpattern.syntax.tokenizer import Literal, Segment, Token

from .fields import DateFields
from .offset import format_offset

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dtpattern.localization.provider import LocaleDataProvider

    from .locale_context import Locale

__all__ = ["FormatContext", "pad", "render", "render_token"]


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Everything one format() call renders from.

    Created per call and discarded afterwards; never shared or mutated.

    Attributes:
        fields: Calendar fields of the wall-clock reading
        wall_clock: Naive wall-clock datetime the fields were derived from
        offset_minutes: Offset rendered by Z/ZZ
        locale: Target locale
        provider: Source of names
        use_parts: Resolve names through format_to_parts()
    """

    fields: DateFields
    wall_clock: datetime
    offset_minutes: int
    locale: Locale
    provider: LocaleDataProvider
    use_parts: bool


def pad(value: int, width: int) -> str:
    """Render a number, zero-padded to width when width >= 2.

    Longer values are never truncated.

    Examples:
        >>> pad(7, 1), pad(7, 2), pad(16, 1), pad(123, 2)
        ('7', '07', '16', '123')
    """
    if width == 1:
        return str(value)
    return f"{value:0{width}d}"


def _fraction(millisecond: int, width: int) -> str:
    digits = f"{millisecond:0{MILLISECOND_DIGITS}d}"
    if width <= MILLISECOND_DIGITS:
        return digits[:width]
    return digits.ljust(width, "0")


def _part(ctx: FormatContext, part_type: PartType, pattern: str) -> str:
    for part in ctx.provider.format_to_parts(ctx.locale, ctx.wall_clock, pattern):
        if part.type is part_type:
            return part.value
    raise LocaleDataMissingError(
        ErrorTemplate.part_not_found(part_type, pattern, ctx.locale.code),
        locale_code=ctx.locale.code,
        key=str(part_type),
    )


def _month_name(ctx: FormatContext, style: NameStyle) -> str:
    if ctx.use_parts:
        return _part(ctx, PartType.MONTH, "MMMM" if style is NameStyle.LONG else "MMM")
    return ctx.provider.month_name(ctx.locale, ctx.fields.month - 1, style)


def _weekday_name(ctx: FormatContext, style: NameStyle) -> str:
    if ctx.use_parts:
        return _part(ctx, PartType.WEEKDAY, "EEEE" if style is NameStyle.LONG else "EEE")
    return ctx.provider.weekday_name(ctx.locale, ctx.fields.weekday_iso, style)


def _day_period(ctx: FormatContext) -> str:
    if ctx.use_parts:
        return _part(ctx, PartType.DAY_PERIOD, "a")
    return ctx.provider.day_period_name(ctx.locale, ctx.fields.is_am)


def render_token(token: Token, ctx: FormatContext) -> str:
    """Render one token against a format context.

    Raises:
        LocaleDataMissingError: If a name lookup has no data for the locale
    """
    fields = ctx.fields
    width = token.width

    match token.kind:
        case TokenKind.YEAR:
            if width <= 2:
                return pad(fields.year % 100, width)
            return pad(fields.year, 1 if width == 3 else width)
        case TokenKind.MONTH:
            if width <= 2:
                return pad(fields.month, width)
            return _month_name(ctx, NameStyle.SHORT if width == 3 else NameStyle.LONG)
        case TokenKind.DAY:
            return pad(fields.day, width)
        case TokenKind.DAY_OF_YEAR:
            return pad(fields.day_of_year, width)
        case TokenKind.WEEKDAY:
            if width == 1:
                return str(fields.weekday_iso)
            return _weekday_name(ctx, NameStyle.LONG if width >= 4 else NameStyle.SHORT)
        case TokenKind.HOUR_24:
            return pad(fields.hour24, width)
        case TokenKind.HOUR_12:
            return pad(fields.hour12, width)
        case TokenKind.HOUR_K:
            return pad(fields.hour_k, width)
        case TokenKind.MINUTE:
            return pad(fields.minute, width)
        case TokenKind.SECOND:
            return pad(fields.second, width)
        case TokenKind.FRACTION:
            return _fraction(fields.millisecond, width)
        case TokenKind.DAY_PERIOD:
            return _day_period(ctx)
        case TokenKind.OFFSET:
            return format_offset(ctx.offset_minutes, delimited=width == 1)
        case TokenKind.WEEK:
            return pad(fields.week_of_year, width)
        case TokenKind.QUARTER:
            return pad(fields.quarter, width)
        case _:
            assert_never(token.kind)


def render(segments: Iterable[Segment], ctx: FormatContext) -> str:
    """Render segments in order and concatenate."""
    out: list[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            out.append(segment.text)
        else:
            out.append(render_token(segment, ctx))
    return "".join(out)
