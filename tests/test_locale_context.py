"""Tests for LocaleContext - Babel-backed formatting without global state.

Covers the instance cache, locale fallback, and each format_* method's
success and FormattingError paths.
"""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime
from decimal import Decimal

import pytest
from babel.numbers import NumberPattern
from hypothesis import given
from hypothesis import strategies as st

from localefmt.constants import MAX_LOCALE_CACHE_SIZE
from localefmt.core.errors import FormattingError
from localefmt.runtime.locale_context import LocaleContext

MOMENT = datetime(2012, 12, 20, 3, 0, tzinfo=UTC)

# ============================================================================
# Cache Management Tests
# ============================================================================


class TestLocaleContextCache:
    """Instance caching keyed by normalized locale code."""

    def test_same_locale_returns_same_instance(self) -> None:
        """Hyphen and underscore forms share one cached instance."""
        assert LocaleContext.create("en-US") is LocaleContext.create("en_US")
        assert LocaleContext.cache_size() == 1

    def test_cache_info_lists_normalized_keys(self) -> None:
        """cache_info() reports size, bound and keys in LRU order."""
        LocaleContext.create("en-US")
        LocaleContext.create("de-DE")
        info = LocaleContext.cache_info()
        assert info == {
            "size": 2,
            "max_size": MAX_LOCALE_CACHE_SIZE,
            "locales": ("en_US", "de_DE"),
        }

    def test_clear_cache(self) -> None:
        """clear_cache() empties the cache."""
        LocaleContext.create("fr-FR")
        LocaleContext.clear_cache()
        assert LocaleContext.cache_size() == 0

    def test_cache_is_bounded(self) -> None:
        """The least recently used entry is evicted at the bound."""
        first = LocaleContext.create("en-US")
        for index in range(MAX_LOCALE_CACHE_SIZE):
            LocaleContext.create(f"en-US-x-{index}")
        assert LocaleContext.cache_size() == MAX_LOCALE_CACHE_SIZE
        assert LocaleContext.create("en-US") is not first

    def test_concurrent_create_returns_one_instance(self) -> None:
        """Threads racing on one locale observe the same cached instance."""
        results: list[LocaleContext] = []

        def worker() -> None:
            results.append(LocaleContext.create("ja-JP"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(ctx) for ctx in results}) == 1


class TestLocaleFallback:
    """Unknown locales fall back to en_US with a warning."""

    @pytest.mark.parametrize("code", ["zz-ZZ", "not a locale", "xx_UNKNOWN"])
    def test_unknown_locale_falls_back(
        self, code: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """create() never raises; it flags the fallback and logs it."""
        with caplog.at_level(logging.WARNING):
            ctx = LocaleContext.create(code)

        assert ctx.is_fallback
        assert ctx.locale_code == code
        assert str(ctx.babel_locale) == "en_US"
        assert any("Falling back" in r.getMessage() for r in caplog.records)

    def test_known_locale_is_not_fallback(self) -> None:
        """Valid locales are used as-is."""
        ctx = LocaleContext.create("fr-CA")
        assert not ctx.is_fallback
        assert ctx.babel_locale.territory == "CA"


# ============================================================================
# Numbers
# ============================================================================


class TestFormatNumber:
    """Locale separators with fraction-digit bounds."""

    def test_default_bounds(self) -> None:
        """Up to three fraction digits, grouping on."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(1234.5) == "1,234.5"
        assert ctx.format_number(1234.5678) == "1,234.568"
        assert ctx.format_number(1000) == "1,000"

    def test_fixed_digits(self) -> None:
        """min == max pads with zeros."""
        ctx = LocaleContext.create("de-DE")
        assert (
            ctx.format_number(1234.5, minimum_fraction_digits=2, maximum_fraction_digits=2)
            == "1.234,50"
        )

    def test_no_grouping(self) -> None:
        """use_grouping=False drops separators."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_number(1234567, use_grouping=False) == "1234567"

    def test_locale_grouping_layout_is_kept(self) -> None:
        """Indian grouping comes from the locale pattern."""
        assert LocaleContext.create("en-IN").format_number(10_000_000) == "1,00,00,000"

    @given(
        st.decimals(min_value=-10**9, max_value=10**9, allow_nan=False, places=6),
        st.integers(min_value=0, max_value=8),
    )
    def test_fixed_digits_property(self, value: Decimal, digits: int) -> None:
        """Exactly ``digits`` digits follow the decimal separator."""
        ctx = LocaleContext.create("en-US")
        result = ctx.format_number(
            value, minimum_fraction_digits=digits, maximum_fraction_digits=digits
        )
        if digits == 0:
            assert "." not in result
        else:
            assert len(result.rsplit(".", 1)[1]) == digits


class TestFormatCompact:
    """CLDR compact patterns with Intl-style rounding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (999, "999"),
            (1000, "1K"),
            (1234, "1.2K"),
            (12345, "12K"),
            (123456, "123K"),
            (1_500_000, "1.5M"),
            (1_000_000_000, "1B"),
            (-2500, "-2.5K"),
        ],
    )
    def test_short(self, value: int, expected: str) -> None:
        """Short display in en-US."""
        assert LocaleContext.create("en-US").format_compact(value) == expected

    def test_long(self) -> None:
        """Long display spells the magnitude."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_compact(1500, compact_display="long") == "1.5 thousand"
        assert ctx.format_compact(2_000_000, compact_display="long") == "2 million"


# ============================================================================
# Currency
# ============================================================================


class TestFormatCurrency:
    """Currency symbol, code and name display."""

    def test_symbol(self) -> None:
        """Default display uses the locale's symbol."""
        assert LocaleContext.create("en-US").format_currency(1500, currency="USD") == "$1,500.00"

    def test_currency_digits(self) -> None:
        """JPY has no minor units."""
        result = LocaleContext.create("ja-JP").format_currency(12345, currency="JPY")
        assert "12,345" in result
        assert "." not in result

    def test_code(self) -> None:
        """Code display shows the ISO code instead of the symbol."""
        result = LocaleContext.create("en-US").format_currency(
            1500, currency="EUR", currency_display="code"
        )
        assert "EUR" in result
        assert "€" not in result
        assert "1,500.00" in result

    def test_name(self) -> None:
        """Name display spells the currency."""
        result = LocaleContext.create("en-US").format_currency(
            1500, currency="USD", currency_display="name"
        )
        assert result == "1,500.00 US dollars"

    def test_currency_pattern_is_parsed(self) -> None:
        """currency_pattern() returns the standard NumberPattern."""
        pattern = LocaleContext.create("en-US").currency_pattern()
        assert isinstance(pattern, NumberPattern)
        assert "\xa4" in pattern.pattern

    def test_explicit_pattern(self) -> None:
        """A supplied pattern overrides the display option."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_currency(
            1500, currency="USD", pattern=ctx.currency_pattern()
        ) == "$1,500.00"


# ============================================================================
# Units
# ============================================================================


class TestFormatUnit:
    """CLDR unit patterns."""

    def test_short_and_long(self) -> None:
        """Short and qualified unit identifiers both resolve."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_unit(12, unit="kilogram") == "12 kg"
        assert ctx.format_unit(12, unit="mass-kilogram") == "12 kg"
        assert ctx.format_unit(12, unit="minute", unit_display="long") == "12 minutes"

    def test_unknown_unit_raises_formatting_error(self) -> None:
        """Unknown units carry a readable fallback."""
        with pytest.raises(FormattingError) as exc_info:
            LocaleContext.create("en-US").format_unit(12, unit="furlong-per-fortnight")
        assert exc_info.value.fallback_value == "12 furlong-per-fortnight"


# ============================================================================
# Dates and times
# ============================================================================


class TestFormatDateTime:
    """Options bags translated to CLDR skeletons."""

    def test_numeric_two_digit_date(self) -> None:
        """2-digit fields are widened in the matched pattern."""
        ctx = LocaleContext.create("en-US")
        options = {"year": "2-digit", "month": "2-digit", "day": "2-digit"}
        assert ctx.format_datetime(MOMENT, options=options) == "12/20/12"

    def test_empty_options_imply_numeric_date(self) -> None:
        """No component fields -> year/month/day numeric."""
        assert LocaleContext.create("en-US").format_datetime(MOMENT, options={}) == "12/20/2012"

    def test_long_month_and_weekday(self) -> None:
        """Text fields are resized to the requested width."""
        ctx = LocaleContext.create("en-US")
        options = {"weekday": "long", "year": "numeric", "month": "long", "day": "numeric"}
        assert ctx.format_datetime(MOMENT, options=options) == "Thursday, December 20, 2012"

    def test_24_hour_clock(self) -> None:
        """hour12=False selects the H field."""
        ctx = LocaleContext.create("en-US")
        value = datetime(2012, 12, 20, 15, 5, tzinfo=UTC)
        options = {"hour": "numeric", "minute": "numeric", "hour12": False}
        assert ctx.format_datetime(value, options=options) == "15:05"

    def test_date_style(self) -> None:
        """date_style uses the locale's predefined format."""
        ctx = LocaleContext.create("de-DE")
        assert ctx.format_datetime(MOMENT, options={"date_style": "short"}) == "20.12.12"

    def test_time_zone_conversion(self) -> None:
        """time_zone converts before formatting."""
        ctx = LocaleContext.create("en-US")
        options = {"time_zone": "America/New_York"}
        assert ctx.format_datetime(MOMENT, options=options) == "12/19/2012"

    def test_naive_datetime_is_utc(self) -> None:
        """Naive values are taken as UTC when converting."""
        ctx = LocaleContext.create("en-US")
        naive = MOMENT.replace(tzinfo=None)
        options = {"time_zone": "America/New_York"}
        assert ctx.format_datetime(naive, options=options) == "12/19/2012"

    def test_unknown_time_zone(self) -> None:
        """Unknown zones raise FormattingError with the ISO fallback."""
        with pytest.raises(FormattingError) as exc_info:
            LocaleContext.create("en-US").format_datetime(
                MOMENT, options={"time_zone": "Mars/Olympus_Mons"}
            )
        assert exc_info.value.fallback_value == MOMENT.isoformat()

    def test_unknown_style(self) -> None:
        """Styles outside short/medium/long/full are rejected."""
        with pytest.raises(FormattingError):
            LocaleContext.create("en-US").format_datetime(MOMENT, options={"date_style": "yyyy"})


# ============================================================================
# Relative time and lists
# ============================================================================


class TestFormatRelativeTime:
    """Relative time pinned to one unit."""

    @pytest.mark.parametrize(
        ("value", "unit", "expected"),
        [
            (3, "day", "in 3 days"),
            (-2, "week", "2 weeks ago"),
            (1, "day", "in 1 day"),
            (0, "day", "in 0 days"),
            (3, "year", "in 3 years"),
            (-5, "minute", "5 minutes ago"),
            (1500, "day", "in 1,500 days"),
        ],
    )
    def test_long(self, value: int, unit: str, expected: str) -> None:
        """Long style in en-US."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_relative_time(value, unit=unit) == expected  # type: ignore[arg-type]

    def test_unknown_unit_raises(self) -> None:
        """Units outside the supported set raise FormattingError."""
        with pytest.raises(FormattingError):
            LocaleContext.create("en-US").format_relative_time(1, unit="quarter")  # type: ignore[arg-type]


class TestFormatList:
    """CLDR list patterns."""

    def test_conjunction(self) -> None:
        """Default list type joins with "and"."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_list(["a", "b", "c"]) == "a, b, and c"

    def test_disjunction(self) -> None:
        """Disjunction joins with "or"."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_list(["a", "b", "c"], list_type="disjunction") == "a, b, or c"

    def test_unit(self) -> None:
        """Unit lists have no conjunction word."""
        ctx = LocaleContext.create("en-US")
        assert ctx.format_list(["5 ft", "2 in"], list_type="unit") == "5 ft, 2 in"

    def test_unknown_combination_raises(self) -> None:
        """Unknown style/type pairs raise FormattingError with a joined fallback."""
        with pytest.raises(FormattingError) as exc_info:
            LocaleContext.create("en-US").format_list(["a", "b"], style="tiny")  # type: ignore[arg-type]
        assert exc_info.value.fallback_value == "a, b"
