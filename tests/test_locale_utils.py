"""Tests for localefmt.locale_utils."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localefmt.locale_utils import locale_territory, normalize_locale


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", "en_US"),
            ("en_CA", "en_CA"),
            (" pt-BR ", "pt_BR"),
            ("zh-Hant-TW", "zh_Hant_TW"),
        ],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        """Hyphens become underscores and whitespace is stripped."""
        assert normalize_locale(code) == expected

    @given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz-_", max_size=12))
    def test_idempotent(self, code: str) -> None:
        """Normalizing twice changes nothing."""
        assert normalize_locale(normalize_locale(code)) == normalize_locale(code)


class TestLocaleTerritory:
    """Syntactic territory extraction."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("fr-CA", "CA"),
            ("en_gb", "GB"),
            ("zh-Hant-TW", "TW"),
            ("es-419", "419"),
            ("fr", None),
            ("", None),
        ],
    )
    def test_territory(self, code: str, expected: str | None) -> None:
        """Alpha-2 and UN M.49 regions are recognized; scripts are skipped."""
        assert locale_territory(code) == expected
