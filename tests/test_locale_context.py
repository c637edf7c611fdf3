"""Tests for runtime.locale_context.Locale: validation, caching, POSIX code."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from dtpattern import Locale
from dtpattern.constants import MAX_LOCALE_CACHE_SIZE


class TestLocaleValidation:
    """Strict construction."""

    @pytest.mark.parametrize("identifier", ["en", "en-US", "en_US", "zh-Hant-TW", "es-419"])
    def test_accepts_language_tags(self, identifier: str) -> None:
        """BCP-47 and POSIX style identifiers are accepted."""
        assert Locale(identifier).identifier == identifier

    @pytest.mark.parametrize("identifier", ["", "e", "en--US", "en US", "123", "en-", "-en"])
    def test_rejects_malformed(self, identifier: str) -> None:
        """Malformed tags raise ValueError."""
        with pytest.raises(ValueError, match="Invalid locale identifier"):
            Locale(identifier)

    def test_rejects_non_string(self) -> None:
        """Non-string identifiers raise TypeError."""
        with pytest.raises(TypeError, match="not a string"):
            Locale(42)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        """Locale instances are immutable."""
        locale = Locale("en-US")
        with pytest.raises(AttributeError):
            locale.identifier = "de"  # type: ignore[misc]


class TestLocaleProperties:
    """Derived codes."""

    def test_code_is_posix(self) -> None:
        """Hyphens become underscores."""
        assert Locale("pt-BR").code == "pt_BR"

    def test_str_is_identifier(self) -> None:
        """str() returns the identifier as given."""
        assert str(Locale("en-US")) == "en-US"


class TestLocaleCache:
    """Locale.create() caching and fallback."""

    def setup_method(self) -> None:
        """Start every test with an empty cache."""
        Locale.clear_cache()

    def test_create_returns_cached_instance(self) -> None:
        """Equivalent identifiers share one instance."""
        assert Locale.create("en-US") is Locale.create("en_US")
        assert Locale.cache_size() == 1

    def test_invalid_identifier_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Malformed identifiers log a warning and resolve to en_US."""
        with caplog.at_level(logging.WARNING, logger="dtpattern.runtime.locale_context"):
            locale = Locale.create("not a locale")
        assert locale.is_fallback is True
        assert locale.identifier == "not a locale"
        assert locale.code == "en_US"
        assert "Invalid locale 'not a locale'" in caplog.text

    def test_clear_cache(self) -> None:
        """clear_cache empties the cache."""
        Locale.create("de")
        Locale.create("fr")
        assert Locale.cache_size() == 2
        Locale.clear_cache()
        assert Locale.cache_size() == 0

    def test_cache_info(self) -> None:
        """cache_info reports size, bound and LRU order."""
        Locale.create("de")
        Locale.create("fr")
        Locale.create("de")
        info = Locale.cache_info()
        assert info["size"] == 2
        assert info["max_size"] == MAX_LOCALE_CACHE_SIZE
        assert info["locales"] == ("fr", "de")

    def test_cache_is_bounded(self) -> None:
        """Oldest entries are evicted beyond the maximum size."""
        # Letters only: "qaaa", "qaab", ... (digits mapped to a-j)
        codes = [
            "q" + "".join(chr(ord("a") + int(digit)) for digit in f"{i:03d}")
            for i in range(MAX_LOCALE_CACHE_SIZE + 5)
        ]
        for code in codes:
            Locale.create(code)
        assert Locale.cache_size() == MAX_LOCALE_CACHE_SIZE
        locales = Locale.cache_info()["locales"]
        assert isinstance(locales, tuple)
        assert codes[0] not in locales
        assert codes[-1] in locales

    def test_concurrent_create(self) -> None:
        """Concurrent creation yields a single instance per identifier."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(Locale.create, ["ja-JP"] * 64))
        assert all(result is results[0] for result in results)

    def test_create_or_raise_known(self) -> None:
        """Known locales are returned without touching the cache."""
        assert Locale.create_or_raise("de-AT").code == "de_AT"
        assert Locale.cache_size() == 0

    def test_create_or_raise_unknown(self) -> None:
        """Well-formed but unknown locales raise ValueError."""
        with pytest.raises(ValueError, match="unknown to CLDR"):
            Locale.create_or_raise("xx-YY")

    def test_create_or_raise_malformed(self) -> None:
        """Malformed identifiers raise instead of falling back."""
        with pytest.raises(ValueError, match="malformed language tag"):
            Locale.create_or_raise("not a locale")
