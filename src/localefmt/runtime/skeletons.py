"""Translation of date/time option bags into CLDR skeletons and patterns.

An options bag (year="numeric", month="long", hour12=False, ...) is turned
into a date skeleton and a time skeleton. Each skeleton is matched against
the locale's CLDR availableFormats, and the matched pattern's numeric field
widths are widened to the requested widths ("M/d/y" -> "MM/dd/yy").

Python 3.13+. Uses Babel for CLDR skeleton data and pattern tokenizing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from babel.dates import match_skeleton, tokenize_pattern, untokenize_pattern

from localefmt.diagnostics import DiagnosticTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["DateTimeSkeleton", "build_skeleton", "resolve_pattern"]

logger = logging.getLogger(__name__)

_ERA = {"narrow": "GGGGG", "short": "G", "long": "GGGG"}
_YEAR = {"numeric": "y", "2-digit": "yy"}
_MONTH = {"numeric": "M", "2-digit": "MM", "short": "MMM", "long": "MMMM", "narrow": "MMMMM"}
_WEEKDAY = {"narrow": "EEEEE", "short": "EEE", "long": "EEEE"}
_NUMERIC = {"numeric": 1, "2-digit": 2}
_TIME_ZONE_NAME = {
    "short": "z",
    "long": "zzzz",
    "shortOffset": "O",
    "longOffset": "OOOO",
    "shortGeneric": "v",
    "longGeneric": "vvvv",
}
_HOUR_CYCLES = {"h11": "h", "h12": "h", "h23": "H", "h24": "H"}

_COMPONENT_KEYS = ("era", "year", "month", "day", "weekday", "hour", "minute", "second")

# Field letters folded to one field type for matching and width adjustment.
_FIELD_TYPE = {
    "G": "G", "y": "y", "M": "M", "L": "M", "d": "d", "E": "E", "c": "E",
    "h": "h", "H": "h", "K": "h", "k": "h", "m": "m", "s": "s",
}

# Fields whose width is purely numeric padding.
_NUMERIC_FIELDS = frozenset("ydhms")

# Width at which a month field switches from digits to text.
_MONTH_TEXT_WIDTH = 3


@dataclass(frozen=True, slots=True)
class DateTimeSkeleton:
    """Skeletons derived from one options bag.

    Attributes:
        date: CLDR date skeleton ("yMMMMd"), empty when no date fields
        time: CLDR time skeleton ("Hms"), empty when no time fields
        zone: Time zone pattern ("z"), empty when no zone name requested
    """

    date: str
    time: str
    zone: str

    @property
    def width(self) -> str:
        """datetime_formats key used to join the date and time parts."""
        if "EEEE" in self.date:
            return "full"
        if "MMMM" in self.date and "MMMMM" not in self.date:
            return "long"
        if "MMM" in self.date:
            return "medium"
        return "short"


def _warn_invalid(option: str, value: Any) -> None:
    diagnostic = DiagnosticTemplate.option_invalid(option, value, None, "format_datetime")
    logger.warning("%s", diagnostic.format_warning())


def _lookup(table: Mapping[str, str], option: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str) and value in table:
        return table[value]
    _warn_invalid(option, value)
    return ""


def _numeric(char: str, option: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str) and value in _NUMERIC:
        return char * _NUMERIC[value]
    _warn_invalid(option, value)
    return ""


def _uses_12_hour_clock(locale: Locale) -> bool:
    """Return True when the locale's short time pattern uses a 12-hour field."""
    short = locale.time_formats.get("short")
    pattern = getattr(short, "pattern", str(short or ""))
    return any(
        kind == "field" and value[0] in "hK"
        for kind, value in tokenize_pattern(pattern)
    )


def build_skeleton(options: Mapping[str, Any], locale: Locale) -> DateTimeSkeleton:
    """Build date, time and zone skeletons from a snake_case options bag.

    With no date or time component at all, year/month/day "numeric" are
    implied, as Intl.DateTimeFormat does.

    Args:
        options: Resolved options (year, month, day, weekday, era, hour,
            minute, second, hour12, hour_cycle, time_zone_name)
        locale: Babel locale used for the default hour cycle

    Returns:
        DateTimeSkeleton

    Examples:
        >>> build_skeleton({"year": "numeric", "month": "long", "day": "numeric"}, en)
        DateTimeSkeleton(date='yMMMMd', time='', zone='')
    """
    if not any(options.get(key) is not None for key in _COMPONENT_KEYS):
        options = {**options, "year": "numeric", "month": "numeric", "day": "numeric"}

    date = "".join((
        _lookup(_ERA, "era", options.get("era")),
        _lookup(_YEAR, "year", options.get("year")),
        _lookup(_MONTH, "month", options.get("month")),
        _lookup(_WEEKDAY, "weekday", options.get("weekday")),
        _numeric("d", "day", options.get("day")),
    ))

    hour12 = options.get("hour12")
    if isinstance(hour12, bool):
        hour_char = "h" if hour12 else "H"
    elif options.get("hour_cycle") in _HOUR_CYCLES:
        hour_char = _HOUR_CYCLES[options["hour_cycle"]]
    else:
        hour_char = "h" if _uses_12_hour_clock(locale) else "H"

    time = "".join((
        _numeric(hour_char, "hour", options.get("hour")),
        _numeric("m", "minute", options.get("minute")),
        _numeric("s", "second", options.get("second")),
    ))
    zone = _lookup(_TIME_ZONE_NAME, "time_zone_name", options.get("time_zone_name"))
    return DateTimeSkeleton(date=date, time=time, zone=zone)


def _field_widths(pattern: str) -> dict[str, int]:
    """Map each field type in a pattern or skeleton to its width."""
    widths: dict[str, int] = {}
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, width = value
            widths[_FIELD_TYPE.get(char, char)] = width
    return widths


def _distance(requested: Mapping[str, int], candidate: Mapping[str, int]) -> int:
    distance = 0
    for field, width in requested.items():
        other = candidate[field]
        if field == "M" and (width >= _MONTH_TEXT_WIDTH) != (other >= _MONTH_TEXT_WIDTH):
            # text month <-> numeric month
            distance += 0x100
        else:
            distance += abs(width - other)
    return distance


def _match(skeleton: str, locale: Locale) -> str | None:
    """Find the availableFormats key with exactly the requested fields."""
    available = locale.datetime_skeletons
    if skeleton in available:
        return skeleton

    requested = _field_widths(skeleton)
    hour_char = next((c for c in skeleton if c in "hHKk"), None)
    best: str | None = None
    best_distance = 0
    for key in sorted(available):
        if hour_char is not None and hour_char not in key:
            continue
        candidate = _field_widths(key)
        if candidate.keys() != requested.keys():
            continue
        distance = _distance(requested, candidate)
        if best is None or distance < best_distance:
            best, best_distance = key, distance
    if best is not None:
        return best
    return match_skeleton(skeleton, available, allow_different_fields=True)


def _adjust_widths(pattern: str, skeleton: str) -> str:
    """Widen numeric fields and resize text fields to the requested widths."""
    requested = _field_widths(skeleton)
    tokens = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, width = value
            field = _FIELD_TYPE.get(char)
            wanted = requested.get(field) if field else None
            if wanted is not None:
                if field in _NUMERIC_FIELDS:
                    width = max(width, wanted)
                elif field == "M":
                    if (width >= _MONTH_TEXT_WIDTH) == (wanted >= _MONTH_TEXT_WIDTH):
                        width = wanted
                elif field == "E" and width >= _MONTH_TEXT_WIDTH:
                    width = max(wanted, _MONTH_TEXT_WIDTH)
            value = (char, width)
        tokens.append((kind, value))
    return untokenize_pattern(tokens)


def resolve_pattern(skeleton: str, locale: Locale) -> str | None:
    """Resolve a skeleton to a locale pattern with adjusted field widths.

    Args:
        skeleton: CLDR skeleton ("yyMMdd", "hm")
        locale: Babel locale providing availableFormats

    Returns:
        Date/time pattern string, or None if the locale has no usable format
    """
    key = _match(skeleton, locale)
    if key is None:
        return None
    matched = locale.datetime_skeletons[key]
    pattern = getattr(matched, "pattern", str(matched))
    return _adjust_widths(pattern, skeleton)
