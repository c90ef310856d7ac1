"""Tests for format_unit()."""

from __future__ import annotations

import logging

import pytest

from localefmt import format_unit


class TestFormatUnit:
    """CLDR unit patterns by display width."""

    def test_default_unit(self) -> None:
        """kilogram, short."""
        assert format_unit(12) == "12 kg"

    @pytest.mark.parametrize(
        ("unit", "display", "expected"),
        [
            ("minute", "long", "12 minutes"),
            ("year", None, "12 yrs"),
            ("kilogram", "long", "12 kilograms"),
            ("mass-kilogram", None, "12 kg"),
        ],
    )
    def test_units(self, unit: str, display: str | None, expected: str) -> None:
        """Short identifiers and qualified identifiers."""
        assert format_unit(12, unit, display) == expected  # type: ignore[arg-type]

    def test_singular(self) -> None:
        """Plural rules pick the singular form."""
        assert format_unit(1, "minute", "long") == "1 minute"

    def test_unknown_unit(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown units render value and unit with a warning."""
        with caplog.at_level(logging.WARNING):
            assert format_unit(12, "parsec-of-doom") == "12 parsec-of-doom"
        assert any("[format_unit]" in r.getMessage() for r in caplog.records)

    def test_invalid_value(self, caplog: pytest.LogCaptureFixture) -> None:
        """Non-numeric quantities format as 0."""
        with caplog.at_level(logging.WARNING):
            assert format_unit("heavy") == "0 kg"

    def test_invalid_display(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown display widths use "short"."""
        with caplog.at_level(logging.WARNING):
            assert format_unit(12, "kilogram", "huge") == "12 kg"  # type: ignore[arg-type]
        assert caplog.records

    def test_locale(self) -> None:
        """Units are localized."""
        assert format_unit(12, "minute", "long", "de-DE") == "12 Minuten"
