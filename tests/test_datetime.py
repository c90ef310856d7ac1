"""Tests for format_datetime(), coerce_datetime() and the skeleton builder."""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest
from babel import Locale

from localefmt import format_datetime
from localefmt.formatters import coerce_datetime
from localefmt.runtime import DateTimeSkeleton, build_skeleton, resolve_pattern

MOMENT = datetime(2012, 12, 20, 3, 0, tzinfo=UTC)
EN = Locale.parse("en_US")


# ============================================================================
# Input coercion
# ============================================================================


class TestCoerceDateTime:
    """Accepted input shapes."""

    def test_datetime_passes_through(self) -> None:
        """datetime values are returned as-is."""
        assert coerce_datetime(MOMENT) is MOMENT

    def test_date_is_midnight(self) -> None:
        """A date becomes midnight of that day."""
        assert coerce_datetime(date(2012, 12, 20)) == datetime(2012, 12, 20)

    def test_iso_string_with_z(self) -> None:
        """ISO 8601 with a trailing Z is UTC."""
        assert coerce_datetime("2012-12-20T03:00:00Z") == MOMENT

    @pytest.mark.parametrize("value", [1355972400000, 1355972400000.0, Decimal(1355972400000)])
    def test_epoch_milliseconds(self, value: object) -> None:
        """Numbers are milliseconds since the epoch, in UTC."""
        assert coerce_datetime(value) == MOMENT

    def test_none_warns_missing(self, caplog: pytest.LogCaptureFixture) -> None:
        """None is reported as missing."""
        with caplog.at_level(logging.WARNING):
            assert coerce_datetime(None) is None
        assert any("[format_datetime]" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize("value", ["abc", "", True, float("nan"), 1e300, object()])
    def test_invalid(self, value: object, caplog: pytest.LogCaptureFixture) -> None:
        """Unusable values warn and yield None."""
        with caplog.at_level(logging.WARNING):
            assert coerce_datetime(value) is None
        assert len(caplog.records) == 1

    @pytest.mark.parametrize("value", ["July 15, 2025", "07/15/2025", "15 Jul 2025"])
    def test_non_iso_strings_are_rejected(self, value: str) -> None:
        """Only ISO 8601 text is parsed; prose dates are not."""
        assert coerce_datetime(value) is None
        assert format_datetime(value) == ""


# ============================================================================
# Presets
# ============================================================================


class TestPresets:
    """Named option presets in en-US."""

    def test_date_only(self) -> None:
        """dateOnly: abbreviated month."""
        assert format_datetime(MOMENT, options="dateOnly") == "Dec 20, 2012"

    def test_short(self) -> None:
        """short: two-digit fields with the locale's 12-hour clock."""
        result = format_datetime(MOMENT, options="short")
        assert re.fullmatch(r"12/20/12, 03:00\s?AM", result)

    def test_full_is_default(self) -> None:
        """full: long month, 24-hour time with seconds."""
        result = format_datetime(MOMENT)
        assert "December 20, 2012" in result
        assert "03:00:00" in result
        assert "AM" not in result

    def test_long(self) -> None:
        """long: long month and 12-hour time."""
        result = format_datetime(MOMENT, options="long")
        assert result.startswith("December 20, 2012")
        assert re.search(r"3:00\sAM$", result)

    def test_time_only(self) -> None:
        """timeOnly: hour, minute and second."""
        assert re.fullmatch(r"3:00:00\sAM", format_datetime(MOMENT, options="timeOnly"))

    def test_unknown_preset_means_numeric_date(self) -> None:
        """Unknown presets fall through to year/month/day numeric."""
        assert format_datetime(MOMENT, options="weekly") == "12/20/2012"


# ============================================================================
# Options bags
# ============================================================================


class TestOptionsBags:
    """Intl-style component options."""

    def test_long_month(self) -> None:
        """Component options select a matching pattern."""
        options = {"year": "numeric", "month": "long", "day": "numeric"}
        assert format_datetime(MOMENT, options=options) == "December 20, 2012"

    def test_weekday(self) -> None:
        """A long weekday is widened from the abbreviated pattern."""
        options = {"weekday": "long", "year": "numeric", "month": "long", "day": "numeric"}
        assert format_datetime(MOMENT, options=options) == "Thursday, December 20, 2012"

    def test_hour12_false(self) -> None:
        """hour12=False uses a 24-hour clock."""
        value = datetime(2012, 12, 20, 15, 5, tzinfo=UTC)
        options = {"hour": "numeric", "minute": "numeric", "hour12": False}
        assert format_datetime(value, options=options) == "15:05"

    def test_hour_cycle(self) -> None:
        """hour_cycle is honored when hour12 is absent."""
        value = datetime(2012, 12, 20, 15, 5, tzinfo=UTC)
        options = {"hour": "numeric", "minute": "numeric", "hourCycle": "h23"}
        assert format_datetime(value, options=options) == "15:05"

    def test_time_zone(self) -> None:
        """timeZone converts before formatting."""
        options = {"year": "numeric", "month": "numeric", "day": "numeric",
                   "timeZone": "America/New_York"}
        assert format_datetime(MOMENT, options=options) == "12/19/2012"

    def test_time_zone_name(self) -> None:
        """timeZoneName appends the zone to the time."""
        options = {"hour": "numeric", "minute": "numeric", "timeZoneName": "short"}
        result = format_datetime(MOMENT, options=options)
        assert result.startswith("3:00")
        assert "UTC" in result or "GMT" in result

    def test_date_style(self) -> None:
        """dateStyle uses the predefined formats."""
        assert format_datetime(MOMENT, options={"dateStyle": "short"}) == "12/20/12"
        assert format_datetime(MOMENT, options={"dateStyle": "long"}) == "December 20, 2012"

    def test_locale(self) -> None:
        """Patterns come from the requested locale."""
        options = {"year": "numeric", "month": "2-digit", "day": "2-digit"}
        assert format_datetime(MOMENT, "de-DE", options) == "20.12.2012"

    def test_invalid_component_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Invalid component values warn and are ignored."""
        options = {"year": "numeric", "month": "loud"}
        with caplog.at_level(logging.WARNING):
            result = format_datetime(MOMENT, options=options)
        assert result == "2012"
        assert caplog.records


# ============================================================================
# Input shapes and failure modes
# ============================================================================


class TestInputsAndFailures:
    """format_datetime() never raises."""

    @pytest.mark.parametrize(
        "value", ["2012-12-20T03:00:00Z", 1355972400000, date(2012, 12, 20)]
    )
    def test_accepted_inputs(self, value: object) -> None:
        """Strings, epoch milliseconds and dates are formatted."""
        assert format_datetime(value, options="dateOnly") == "Dec 20, 2012"

    @pytest.mark.parametrize("value", [None, "abc", True])
    def test_invalid_input_is_empty(
        self, value: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Missing or invalid input yields "" and a warning."""
        with caplog.at_level(logging.WARNING):
            assert format_datetime(value) == ""
        assert caplog.records

    def test_unknown_time_zone_uses_iso(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unknown zone falls back to the ISO 8601 string."""
        with caplog.at_level(logging.WARNING):
            result = format_datetime(MOMENT, options={"timeZone": "Mars/Olympus_Mons"})
        assert result == "2012-12-20T03:00:00+00:00"
        assert any("[format_datetime]" in r.getMessage() for r in caplog.records)


# ============================================================================
# Skeletons
# ============================================================================


class TestSkeletons:
    """Options bag to CLDR skeleton translation."""

    def test_date_fields(self) -> None:
        """Date components map to skeleton letters."""
        skeleton = build_skeleton({"year": "numeric", "month": "long", "day": "numeric"}, EN)
        assert skeleton == DateTimeSkeleton(date="yMMMMd", time="", zone="")
        assert skeleton.width == "long"

    def test_empty_bag(self) -> None:
        """No components -> numeric year/month/day."""
        assert build_skeleton({}, EN).date == "yMd"

    def test_locale_hour_cycle(self) -> None:
        """The locale decides 12 vs 24 hours when not specified."""
        options = {"hour": "numeric", "minute": "numeric"}
        assert build_skeleton(options, EN).time == "hm"
        assert build_skeleton(options, Locale.parse("de_DE")).time == "Hm"

    def test_widths(self) -> None:
        """Widths follow the richest date field."""
        assert DateTimeSkeleton("yMMMMEEEEd", "", "").width == "full"
        assert DateTimeSkeleton("yMMMd", "", "").width == "medium"
        assert DateTimeSkeleton("yMd", "Hm", "").width == "short"

    def test_resolve_pattern_widens_numeric_fields(self) -> None:
        """2-digit requests widen the matched pattern."""
        assert resolve_pattern("yyMMdd", EN) == "MM/dd/yy"

    def test_resolve_pattern_exact_key(self) -> None:
        """Exact availableFormats keys are used directly."""
        assert resolve_pattern("yMMMd", EN) == "MMM d, y"
