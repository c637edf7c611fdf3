"""Tests for localization providers and static tables."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from unittest.mock import patch

import pytest

from dtpattern import Locale, LocaleDataMissingError
from dtpattern.diagnostics import DiagnosticCode
from dtpattern.enums import NameStyle, PartType
from dtpattern.localization import (
    BUILTIN_COMPOSITE_PATTERNS,
    ENGLISH_NAMES,
    BabelLocaleDataProvider,
    DatePart,
    LocaleNames,
    StaticLocaleDataProvider,
)
from dtpattern.localization.tables import lookup


class TestBabelLocaleDataProvider:
    """CLDR-backed provider."""

    def test_can_decompose_known_locale(self, babel_provider: BabelLocaleDataProvider) -> None:
        """Locales Babel knows support format-to-parts."""
        assert babel_provider.can_decompose_into_parts(Locale("en-US")) is True
        assert babel_provider.can_decompose_into_parts(Locale("ja")) is True

    def test_cannot_decompose_unknown_locale(
        self, babel_provider: BabelLocaleDataProvider
    ) -> None:
        """Unknown locales report no capability instead of raising."""
        assert babel_provider.can_decompose_into_parts(Locale("xx-YY")) is False

    def test_cannot_decompose_without_babel(
        self, babel_provider: BabelLocaleDataProvider
    ) -> None:
        """Missing Babel installation reports no capability."""
        with patch("dtpattern.localization.provider.is_babel_available", return_value=False):
            assert babel_provider.can_decompose_into_parts(Locale("en-US")) is False

    def test_format_to_parts_labels(self, babel_provider: BabelLocaleDataProvider) -> None:
        """Fields are labelled by kind; separators are literals."""
        parts = babel_provider.format_to_parts(
            Locale("en-US"), datetime(2014, 10, 23, 16, 30), "EEEE, MMM d"
        )
        assert parts == (
            DatePart(PartType.WEEKDAY, "Thursday"),
            DatePart(PartType.LITERAL, ", "),
            DatePart(PartType.MONTH, "Oct"),
            DatePart(PartType.LITERAL, " "),
            DatePart(PartType.DAY, "23"),
        )

    def test_format_to_parts_day_period(self, babel_provider: BabelLocaleDataProvider) -> None:
        """The a field is labelled dayPeriod."""
        parts = babel_provider.format_to_parts(
            Locale("en-US"), datetime(2014, 10, 23, 9, 0), "a"
        )
        assert parts == (DatePart(PartType.DAY_PERIOD, "AM"),)

    def test_format_to_parts_unknown_locale(
        self, babel_provider: BabelLocaleDataProvider
    ) -> None:
        """Unknown locales raise LocaleDataMissingError."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            babel_provider.format_to_parts(Locale("xx-YY"), datetime(2014, 1, 1), "MMM")
        assert exc_info.value.locale_code == "xx_YY"

    @pytest.mark.parametrize(
        ("locale", "index", "style", "expected"),
        [
            ("en-US", 0, NameStyle.LONG, "January"),
            ("en-US", 8, NameStyle.SHORT, "Sep"),
            ("de-DE", 9, NameStyle.LONG, "Oktober"),
            ("fr-FR", 11, NameStyle.LONG, "décembre"),
        ],
    )
    def test_month_name(
        self,
        babel_provider: BabelLocaleDataProvider,
        locale: str,
        index: int,
        style: NameStyle,
        expected: str,
    ) -> None:
        """Month names come from CLDR format-context tables."""
        assert babel_provider.month_name(Locale(locale), index, style) == expected

    def test_weekday_name(self, babel_provider: BabelLocaleDataProvider) -> None:
        """ISO weekday 1 is Monday, 7 is Sunday."""
        en = Locale("en-US")
        assert babel_provider.weekday_name(en, 1, NameStyle.LONG) == "Monday"
        assert babel_provider.weekday_name(en, 7, NameStyle.SHORT) == "Sun"
        assert babel_provider.weekday_name(Locale("de"), 4, NameStyle.LONG) == "Donnerstag"

    def test_day_period_name(self, babel_provider: BabelLocaleDataProvider) -> None:
        """AM and PM markers."""
        en = Locale("en-US")
        assert babel_provider.day_period_name(en, True) == "AM"
        assert babel_provider.day_period_name(en, False) == "PM"

    def test_names_for_unknown_locale_raise(
        self, babel_provider: BabelLocaleDataProvider
    ) -> None:
        """Unknown locales are never given English names."""
        with pytest.raises(LocaleDataMissingError):
            babel_provider.month_name(Locale("xx"), 0, NameStyle.LONG)

    def test_composite_pattern(self, babel_provider: BabelLocaleDataProvider) -> None:
        """Composite patterns come from the composite table."""
        assert babel_provider.composite_pattern(Locale("de-AT"), "LT") == "HH:mm"

    def test_custom_composite_table(self) -> None:
        """A custom table replaces the built-in one."""
        provider = BabelLocaleDataProvider(
            composite_patterns=MappingProxyType({"en_US": {"L": "yyyy-MM-dd"}})
        )
        assert provider.composite_pattern(Locale("en-US"), "L") == "yyyy-MM-dd"
        with pytest.raises(LocaleDataMissingError):
            provider.composite_pattern(Locale("en-US"), "LL")


class TestStaticLocaleDataProvider:
    """Table-backed provider."""

    def test_never_decomposes(self, static_provider: StaticLocaleDataProvider) -> None:
        """Static tables have no format-to-parts."""
        assert static_provider.can_decompose_into_parts(Locale("en-US")) is False

    def test_format_to_parts_not_supported(
        self, static_provider: StaticLocaleDataProvider
    ) -> None:
        """Calling format_to_parts anyway reports missing locale data."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            static_provider.format_to_parts(Locale("en-US"), datetime(2014, 1, 1), "MMM")
        error = exc_info.value
        assert error.key == "parts"
        assert error.locale_code == "en_US"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.LOCALE_DATA_MISSING
        assert "'MMM'" in str(error)

    def test_english_names(self, static_provider: StaticLocaleDataProvider) -> None:
        """en_US has its own entry in the built-in table."""
        en = Locale("en-US")
        assert static_provider.month_name(en, 9, NameStyle.SHORT) == "Oct"
        assert static_provider.month_name(en, 9, NameStyle.LONG) == "October"
        assert static_provider.weekday_name(en, 4, NameStyle.SHORT) == "Thu"
        assert static_provider.weekday_name(en, 7, NameStyle.LONG) == "Sunday"
        assert static_provider.day_period_name(en, True) == "AM"

    @pytest.mark.parametrize("kind", ["month", "weekday", "day period"])
    def test_missing_locale_raises(
        self, static_provider: StaticLocaleDataProvider, kind: str
    ) -> None:
        """A locale with no table raises, naming what was asked for."""
        de = Locale("de-DE")
        with pytest.raises(LocaleDataMissingError) as exc_info:
            match kind:
                case "month":
                    static_provider.month_name(de, 0, NameStyle.LONG)
                case "weekday":
                    static_provider.weekday_name(de, 1, NameStyle.LONG)
                case _:
                    static_provider.day_period_name(de, True)
        error = exc_info.value
        assert error.key == kind
        assert error.locale_code == "de_DE"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.LOCALE_DATA_MISSING
        assert f"No {kind} names for locale 'de_DE'" in str(error)

    @pytest.mark.parametrize("code", ["en-GB", "en-CA", "en-AU"])
    def test_regional_english_raises(
        self, static_provider: StaticLocaleDataProvider, code: str
    ) -> None:
        """Regional English is not answered with the US names."""
        with pytest.raises(LocaleDataMissingError) as exc_info:
            static_provider.month_name(Locale(code), 8, NameStyle.SHORT)
        assert exc_info.value.locale_code == code.replace("-", "_")

    def test_from_babel_snapshot(self) -> None:
        """from_babel captures CLDR tables for the requested locales."""
        provider = StaticLocaleDataProvider.from_babel("de-DE", "fr")
        assert provider.month_name(Locale("de-DE"), 2, NameStyle.LONG) == "März"
        assert provider.weekday_name(Locale("fr"), 1, NameStyle.LONG) == "lundi"
        with pytest.raises(LocaleDataMissingError):
            provider.month_name(Locale("en-US"), 0, NameStyle.LONG)
        with pytest.raises(LocaleDataMissingError):
            provider.weekday_name(Locale("fr-CA"), 1, NameStyle.LONG)

    @pytest.mark.parametrize("code", ["en-US", "en-GB", "de-DE", "ja"])
    def test_from_babel_matches_babel_provider(self, code: str) -> None:
        """Snapshot names equal live Babel names for every index and style."""
        live = BabelLocaleDataProvider()
        snapshot = StaticLocaleDataProvider.from_babel(code)
        locale = Locale(code)
        for style in NameStyle:
            for index in range(12):
                assert snapshot.month_name(locale, index, style) == live.month_name(
                    locale, index, style
                )
            for iso in range(1, 8):
                assert snapshot.weekday_name(locale, iso, style) == live.weekday_name(
                    locale, iso, style
                )
        for is_am in (True, False):
            assert snapshot.day_period_name(locale, is_am) == live.day_period_name(locale, is_am)

    def test_builtin_english_matches_babel(self) -> None:
        """Built-in English entries equal CLDR en and en_US names."""
        snapshot = StaticLocaleDataProvider.from_babel("en", "en-US")
        assert snapshot.names["en"] == ENGLISH_NAMES
        assert snapshot.names["en_US"] == ENGLISH_NAMES


class TestTables:
    """LocaleNames and lookup."""

    def test_locale_names_validates_lengths(self) -> None:
        """Month tables need 12 entries, weekday tables 7."""
        with pytest.raises(ValueError, match="months_short"):
            LocaleNames(
                months_long=ENGLISH_NAMES.months_long,
                months_short=ENGLISH_NAMES.months_short[:11],
                weekdays_long=ENGLISH_NAMES.weekdays_long,
                weekdays_short=ENGLISH_NAMES.weekdays_short,
                am="AM",
                pm="PM",
            )
        with pytest.raises(ValueError, match="weekdays_long"):
            LocaleNames(
                months_long=ENGLISH_NAMES.months_long,
                months_short=ENGLISH_NAMES.months_short,
                weekdays_long=(*ENGLISH_NAMES.weekdays_long, "Extra"),
                weekdays_short=ENGLISH_NAMES.weekdays_short,
                am="AM",
                pm="PM",
            )

    def test_lookup_is_exact(self) -> None:
        """Regional codes never borrow the language entry."""
        table = {"en": 1, "en_GB": 2}
        assert lookup(table, "en-GB") == 2
        assert lookup(table, "en") == 1
        assert lookup(table, "en-AU") is None
        assert lookup(table, "de") is None

    def test_builtin_composites_are_complete_and_atomic(self) -> None:
        """Every built-in locale defines all ten tokens without L or l."""
        tokens = {"L", "l", "LL", "ll", "LLL", "lll", "LLLL", "llll", "LT", "LTS"}
        for code, patterns in BUILTIN_COMPOSITE_PATTERNS.items():
            assert set(patterns) == tokens, code
            for sub_pattern in patterns.values():
                assert "L" not in sub_pattern
                assert "l" not in sub_pattern
