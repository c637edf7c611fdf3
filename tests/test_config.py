"""Tests for FormatterConfig."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from dtpattern import FormatterConfig


class TestFormatterConfig:
    """Defaults and validation."""

    def test_defaults(self) -> None:
        """Parts decomposition preferred, UTC default offset."""
        config = FormatterConfig()
        assert config.prefer_host_names is True
        assert config.default_offset_minutes == 0

    def test_is_frozen(self) -> None:
        """Configuration cannot change after construction."""
        config = FormatterConfig()
        with pytest.raises(FrozenInstanceError):
            config.prefer_host_names = False  # type: ignore[misc]

    def test_rejects_out_of_range_offset(self) -> None:
        """Default offset obeys the same bounds as overrides."""
        with pytest.raises(ValueError, match="outside"):
            FormatterConfig(default_offset_minutes=-1440)

    def test_rejects_non_int_offset(self) -> None:
        """Default offset must be an int."""
        with pytest.raises(TypeError):
            FormatterConfig(default_offset_minutes=1.5)  # type: ignore[arg-type]
