"""Locale context for thread-safe, locale-scoped formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant number, currency, unit, date, relative-time
and list formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Entry points in localefmt.formatters obtain contexts via create()

Every format_* method raises FormattingError carrying a fallback string on
failure; entry points log the error and return the fallback.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from threading import RLock
from typing import Any, ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import lists as babel_lists
from babel import numbers as babel_numbers
from babel import units as babel_units
from babel.numbers import NumberPattern

from localefmt.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE
from localefmt.core.errors import FormattingError
from localefmt.enums import (
    CompactDisplay,
    CurrencyDisplay,
    ListStyle,
    ListType,
    RelativeTimeStyle,
    RelativeTimeUnit,
    UnitDisplay,
)
from localefmt.locale_utils import normalize_locale
from localefmt.runtime.skeletons import DateTimeSkeleton, build_skeleton, resolve_pattern

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

type DateTimeStyle = Literal["short", "medium", "long", "full"]

_DATETIME_STYLES: frozenset[str] = frozenset({"short", "medium", "long", "full"})

# (list type, style) -> CLDR listPattern key understood by babel.lists
_LIST_PATTERN_KEYS: Mapping[tuple[str, str], str] = {
    ("conjunction", "long"): "standard",
    ("conjunction", "short"): "standard-short",
    ("conjunction", "narrow"): "standard-narrow",
    ("disjunction", "long"): "or",
    ("disjunction", "short"): "or-short",
    ("disjunction", "narrow"): "or-narrow",
    ("unit", "long"): "unit",
    ("unit", "short"): "unit-short",
    ("unit", "narrow"): "unit-narrow",
}

# Seconds per relative-time unit, as babel.dates measures them
_UNIT_SECONDS: Mapping[str, int] = dict(babel_dates.TIMEDELTA_UNITS)

# Relative-time counts at or above this are regrouped with locale separators
_GROUPING_THRESHOLD = 1000


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Provides thread-safe, locale-specific formatting without mutating global
    state. Instances are shared through a class-level LRU cache.

    Use LocaleContext.create() factory to construct instances with proper validation.
    Direct construction via __init__ is not recommended (bypasses validation).

    Cache Management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_number(1234.5, minimum_fraction_digits=2, maximum_fraction_digits=2)
        '1.234,50'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Example:
            >>> LocaleContext.create('en-US')  # Cached
            >>> LocaleContext.clear_cache()
            >>> LocaleContext.cache_size()
            0
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> LocaleContext.create('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'fr-CA')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            rules while preserving the original locale_code for debugging.

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.locale_code
            'en-US'

            >>> ctx = LocaleContext.create('xx_UNKNOWN')
            >>> ctx.locale_code  # Preserved for debugging
            'xx_UNKNOWN'
        """
        # "en-US", "en_US" and " en-US " all share one cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = Locale.parse(FALLBACK_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have populated the entry meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _integer_pattern(self, use_grouping: bool) -> str:
        """Integer part of the locale's decimal pattern ("#,##0", "#,##,##0")."""
        if not use_grouping:
            return "0"
        standard = self.babel_locale.decimal_formats.get(None)
        raw = getattr(standard, "pattern", "") or "#,##0"
        integer = raw.split(";", 1)[0].split(".", 1)[0]
        return integer if "0" in integer else "#,##0"

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 3,
        use_grouping: bool = True,
    ) -> str:
        """Format number with locale-specific separators.

        The grouping layout comes from the locale's own decimal pattern, so
        Indian-style grouping is kept for hi-IN and en-IN.

        Args:
            value: Number to format (int, float, or Decimal)
            minimum_fraction_digits: Minimum decimal places (default: 0)
            maximum_fraction_digits: Maximum decimal places (default: 3)
            use_grouping: Use thousands separator (default: True)

        Returns:
            Formatted number string according to locale rules

        Examples:
            >>> LocaleContext.create('en-US').format_number(1234.5)
            '1,234.5'

            >>> LocaleContext.create('de-DE').format_number(1234.5)
            '1.234,5'

            >>> LocaleContext.create('en-IN').format_number(100000)
            '1,00,000'
        """
        try:
            integer_part = self._integer_pattern(use_grouping)

            if maximum_fraction_digits == 0:
                format_pattern = integer_part
            elif minimum_fraction_digits == maximum_fraction_digits:
                format_pattern = f"{integer_part}.{'0' * minimum_fraction_digits}"
            else:
                required = "0" * minimum_fraction_digits
                optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
                format_pattern = f"{integer_part}.{required}{optional}"

            return str(
                babel_numbers.format_decimal(
                    value,
                    format=format_pattern,
                    locale=self.babel_locale,
                )
            )

        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = str(value)
            msg = f"Number formatting failed for '{value}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    def _compact_rounding(
        self, value: int | float | Decimal, format_type: str
    ) -> tuple[int | float | Decimal, int]:
        """Fraction digits for Intl-style compact rounding, and the value to format.

        Intl keeps two significant digits but never fewer than the integer
        digits: 1234 -> 1.2K, 12345 -> 12K. When rounding carries into the
        next magnitude (999_999 -> 1000K) the rounded value is returned
        instead so that the larger pattern is chosen (1M).
        """
        formats = self.babel_locale.compact_decimal_formats.get(format_type, {}).get("other", {})
        magnitudes = sorted((int(m) for m in formats), reverse=True)
        number = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        for index, magnitude in enumerate(magnitudes):
            if abs(number) < magnitude:
                continue
            pattern = babel_numbers.parse_pattern(formats[str(magnitude)]).pattern
            if pattern == "0":
                break
            divisor = magnitude // 10 ** (pattern.count("0") - 1)
            digits = 1 if abs(number) / divisor < 10 else 0  # noqa: PLR2004
            if index == 0:
                return value, digits
            scaled = (number / divisor).quantize(Decimal(1).scaleb(-digits), ROUND_HALF_EVEN)
            rounded = scaled * divisor
            if abs(rounded) >= magnitudes[index - 1]:
                return self._compact_rounding(rounded, format_type)
            return value, digits
        else:
            # Below the smallest magnitude: 999.7 rounds up to 1K
            whole = number.quantize(Decimal(1), ROUND_HALF_EVEN)
            if magnitudes and abs(whole) >= magnitudes[-1]:
                return self._compact_rounding(whole, format_type)
        return value, 0

    def format_compact(
        self,
        value: int | float | Decimal,
        *,
        compact_display: CompactDisplay = "short",
    ) -> str:
        """Format number in CLDR compact notation.

        Args:
            value: Number to format
            compact_display: "short" (1.5K) or "long" (1.5 thousand)

        Returns:
            Compact number string

        Examples:
            >>> LocaleContext.create('en-US').format_compact(1500)
            '1.5K'
            >>> LocaleContext.create('en-US').format_compact(2_000_000, compact_display="long")
            '2 million'
            >>> LocaleContext.create('en-US').format_compact(999_999)
            '1M'
        """
        try:
            rounded, digits = self._compact_rounding(value, compact_display)
            return str(
                babel_numbers.format_compact_decimal(
                    rounded,
                    format_type=compact_display,
                    locale=self.babel_locale,
                    fraction_digits=digits,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = str(value)
            msg = f"Compact formatting failed for '{value}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    def currency_pattern(self) -> NumberPattern:
        """Locale's standard currency pattern, parsed once for reuse.

        Raises:
            FormattingError: If the locale has no standard currency pattern
        """
        standard = self.babel_locale.currency_formats.get("standard")
        if standard is None:
            msg = f"Locale '{self.locale_code}' has no standard currency pattern"
            raise FormattingError(msg, fallback_value="")
        return babel_numbers.parse_pattern(standard)

    def format_currency(
        self,
        value: int | float | Decimal,
        *,
        currency: str,
        currency_display: CurrencyDisplay = "symbol",
        pattern: NumberPattern | str | None = None,
    ) -> str:
        """Format currency with locale-specific rules.

        Args:
            value: Monetary amount (int, float, or Decimal)
            currency: ISO 4217 currency code (EUR, USD, JPY, BHD, etc.)
            currency_display: Display style for currency
                - "symbol": Use currency symbol (default)
                - "code": Use currency code (EUR, USD, JPY)
                - "name": Use currency name (euros, dollars, yen)
            pattern: Pre-parsed or custom currency pattern (overrides
                currency_display)

        Returns:
            Formatted currency string according to locale rules

        Examples:
            >>> LocaleContext.create('en-US').format_currency(1500, currency='USD')
            '$1,500.00'

            >>> LocaleContext.create('en-NG').format_currency(1500, currency='NGN')
            '₦1,500.00'

            >>> LocaleContext.create('ja-JP').format_currency(12345, currency='JPY')
            '￥12,345'

        CLDR Compliance:
            Currency-specific decimal places are applied automatically:
            JPY has 0, BHD/KWD/OMR have 3, most others 2.
        """
        try:
            if pattern is not None:
                return str(
                    babel_numbers.format_currency(
                        value,
                        currency,
                        format=pattern,
                        locale=self.babel_locale,
                        currency_digits=True,
                    )
                )

            if currency_display == "name":
                return str(
                    babel_numbers.format_currency(
                        value,
                        currency,
                        locale=self.babel_locale,
                        currency_digits=True,
                        format_type="name",
                    )
                )

            if currency_display == "code":
                standard = self.babel_locale.currency_formats.get("standard")
                raw_pattern = getattr(standard, "pattern", "")
                # Single U+00A4 = symbol, double U+00A4 = ISO code per CLDR
                if "\xa4" in raw_pattern:
                    return str(
                        babel_numbers.format_currency(
                            value,
                            currency,
                            format=raw_pattern.replace("\xa4", "\xa4\xa4"),
                            locale=self.babel_locale,
                            currency_digits=True,
                        )
                    )
                logger.debug(
                    "Currency pattern for locale %s lacks placeholder", self.locale_code
                )

            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    locale=self.babel_locale,
                    currency_digits=True,
                    format_type="standard",
                )
            )

        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = f"{currency} {value}"
            msg = f"Currency formatting failed for '{currency} {value}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def format_unit(
        self,
        value: int | float | Decimal,
        *,
        unit: str,
        unit_display: UnitDisplay = "short",
    ) -> str:
        """Format a measurement with a CLDR unit.

        Units may be given by their short identifier ("kilogram", "minute")
        or qualified CLDR identifier ("mass-kilogram").

        Args:
            value: Measured quantity
            unit: CLDR unit identifier
            unit_display: "long" (12 kilograms), "short" (12 kg) or "narrow" (12kg)

        Returns:
            Formatted measurement

        Raises:
            FormattingError: If the unit is unknown to CLDR

        Examples:
            >>> LocaleContext.create('en-US').format_unit(12, unit='minute', unit_display='long')
            '12 minutes'
            >>> LocaleContext.create('en-US').format_unit(12, unit='kilogram')
            '12 kg'
        """
        try:
            return str(
                babel_units.format_unit(
                    value,
                    unit,
                    length=unit_display,
                    locale=self.babel_locale,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            # babel.units.UnknownUnitError is a ValueError
            fallback = f"{value} {unit}"
            msg = f"Unit formatting failed for '{value} {unit}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    # ------------------------------------------------------------------
    # Dates and times
    # ------------------------------------------------------------------

    def _combine(self, date_str: str, time_str: str, width: str) -> str:
        """Join date and time with the locale's dateTimeFormat ({1} date, {0} time)."""
        formats = self.babel_locale.datetime_formats
        template = formats.get(width) or formats.get("medium") or "{1} {0}"
        # CLDR quotes literal text ("{1} 'at' {0}")
        return str(template).replace("'", "").replace("{1}", date_str).replace("{0}", time_str)

    def _format_skeleton_part(self, value: datetime, skeleton: str) -> str:
        pattern = resolve_pattern(skeleton, self.babel_locale)
        if pattern is None:
            msg = f"no CLDR pattern matches skeleton '{skeleton}'"
            raise ValueError(msg)
        return str(babel_dates.format_datetime(value, pattern, locale=self.babel_locale))

    def _format_skeleton(self, value: datetime, skeleton: DateTimeSkeleton) -> str:
        date_str = self._format_skeleton_part(value, skeleton.date) if skeleton.date else ""
        time_str = self._format_skeleton_part(value, skeleton.time) if skeleton.time else ""
        width = skeleton.width

        if skeleton.zone:
            zone_str = str(
                babel_dates.format_datetime(value, skeleton.zone, locale=self.babel_locale)
            )
            if time_str:
                time_str = f"{time_str} {zone_str}"
            else:
                time_str, width = zone_str, "short"

        if date_str and time_str:
            return self._combine(date_str, time_str, width)
        return date_str or time_str

    def _format_styles(
        self,
        value: datetime,
        date_style: DateTimeStyle | None,
        time_style: DateTimeStyle | None,
    ) -> str:
        for style in (date_style, time_style):
            # Babel treats any other string as a raw pattern
            if style is not None and style not in _DATETIME_STYLES:
                msg = f"unknown style '{style}'"
                raise ValueError(msg)

        if time_style is None:
            return str(
                babel_dates.format_date(
                    value, format=date_style or "medium", locale=self.babel_locale
                )
            )
        time_str = str(babel_dates.format_time(value, format=time_style, locale=self.babel_locale))
        if date_style is None:
            return time_str
        date_str = str(babel_dates.format_date(value, format=date_style, locale=self.babel_locale))
        return self._combine(date_str, time_str, date_style)

    @staticmethod
    def _localize(value: datetime, time_zone: object) -> datetime:
        """Convert to the requested IANA zone; naive values are taken as UTC."""
        if time_zone is None:
            return value
        if not isinstance(time_zone, str):
            msg = f"time_zone must be an IANA name, got {type(time_zone).__name__}"
            raise TypeError(msg)
        tz = babel_dates.get_timezone(time_zone)
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(tz)

    def format_datetime(
        self,
        value: datetime,
        *,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Format datetime from an Intl-style options bag.

        Component options (year, month, day, weekday, era, hour, minute,
        second, hour12, hour_cycle, time_zone_name) select CLDR skeletons;
        date_style / time_style select the locale's predefined formats.
        time_zone converts the value before formatting.

        Args:
            value: datetime to format. Naive values are treated as UTC.
            options: snake_case options; empty means year/month/day numeric

        Returns:
            Formatted datetime string according to locale rules

        Raises:
            FormattingError: If an option cannot be honored (unknown time
                zone, unknown style); fallback is the ISO 8601 string

        Examples:
            >>> from datetime import datetime, UTC
            >>> ctx = LocaleContext.create('en-US')
            >>> dt = datetime(2012, 12, 20, 3, 0, tzinfo=UTC)
            >>> ctx.format_datetime(dt, options={"year": "2-digit", "month": "2-digit",
            ...                                  "day": "2-digit"})
            '12/20/12'
            >>> ctx.format_datetime(dt, options={"date_style": "short"})
            '12/20/12'
        """
        opts = dict(options or {})
        try:
            dt_value = self._localize(value, opts.get("time_zone"))
            date_style = opts.get("date_style")
            time_style = opts.get("time_style")
            if date_style is not None or time_style is not None:
                return self._format_styles(dt_value, date_style, time_style)
            skeleton = build_skeleton(opts, self.babel_locale)
            return self._format_skeleton(dt_value, skeleton)

        except (ValueError, TypeError, LookupError, OverflowError, AttributeError) as e:
            fallback = value.isoformat()
            msg = f"DateTime formatting failed for '{value}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    # ------------------------------------------------------------------
    # Relative time
    # ------------------------------------------------------------------

    def format_relative_time(
        self,
        value: int | float | Decimal,
        *,
        unit: RelativeTimeUnit,
        style: RelativeTimeStyle = "long",
    ) -> str:
        """Format a signed offset from now ("in 3 days", "2 weeks ago").

        Counts are rounded to whole units; zero renders as a future offset.

        Args:
            value: Signed count of units (negative = past)
            unit: Singular unit name (year ... second)
            style: "long", "short" or "narrow"

        Returns:
            Relative time phrase

        Examples:
            >>> LocaleContext.create('en-US').format_relative_time(3, unit='day')
            'in 3 days'
            >>> LocaleContext.create('en-US').format_relative_time(-2, unit='week')
            '2 weeks ago'
        """
        try:
            seconds_per_unit = _UNIT_SECONDS[unit]
            text = str(
                babel_dates.format_timedelta(
                    value * seconds_per_unit,
                    granularity=unit,
                    threshold=float("inf"),
                    add_direction=True,
                    format=style,
                    locale=self.babel_locale,
                )
            )
            count = round(abs(value))
            if count >= _GROUPING_THRESHOLD:
                grouped = self.format_number(count, maximum_fraction_digits=0)
                text = text.replace(str(count), grouped, 1)
            return text
        except (
            ValueError, TypeError, InvalidOperation, AttributeError, KeyError, OverflowError
        ) as e:
            fallback = f"{value} {unit}"
            msg = f"Relative time formatting failed for '{value} {unit}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def format_list(
        self,
        items: Sequence[str],
        *,
        style: ListStyle = "long",
        list_type: ListType = "conjunction",
    ) -> str:
        """Join strings with the locale's list pattern.

        Args:
            items: Strings to join
            style: "long", "short" or "narrow"
            list_type: "conjunction" (and), "disjunction" (or) or "unit"

        Returns:
            Joined list

        Examples:
            >>> LocaleContext.create('en-US').format_list(['a', 'b', 'c'])
            'a, b, and c'
            >>> LocaleContext.create('en-US').format_list(['a', 'b'], list_type='disjunction')
            'a or b'
        """
        try:
            pattern_key = _LIST_PATTERN_KEYS[list_type, style]
            return str(
                babel_lists.format_list(list(items), style=pattern_key, locale=self.babel_locale)
            )
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            fallback = ", ".join(items)
            msg = f"List formatting failed for {list(items)!r}: {e}"
            raise FormattingError(msg, fallback_value=fallback) from e
