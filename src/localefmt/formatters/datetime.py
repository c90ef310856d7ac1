"""Date and time formatting from presets or Intl-style option bags.

Accepted inputs:
    - datetime (naive values are treated as UTC)
    - date (midnight UTC)
    - ISO 8601 strings, including a trailing "Z"
    - int / float epoch timestamps in milliseconds

Other date strings, such as "July 15, 2025" or "07/15/2025", are not
parsed. Missing or unparseable input yields "" and a warning; it never
raises.

Python 3.13+. Uses Babel (via LocaleContext) for CLDR date patterns.
"""

import logging
import math
from collections.abc import Mapping
from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import Any

from localefmt.constants import FALLBACK_EMPTY
from localefmt.core.errors import FormattingError
from localefmt.diagnostics import DiagnosticTemplate
from localefmt.enums import DateTimePreset, FormatDomain
from localefmt.options import resolve_datetime_options, resolve_options

from ._common import context_for, recover

__all__ = ["coerce_datetime", "format_datetime"]

logger = logging.getLogger(__name__)

_MS_PER_SECOND = 1000


def _from_timestamp(value: float) -> datetime | None:
    if not math.isfinite(value):
        return None
    try:
        return datetime.fromtimestamp(value / _MS_PER_SECOND, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def _from_string(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def coerce_datetime(value: object, function_name: str = "format_datetime") -> datetime | None:
    """Interpret a value as a point in time.

    Args:
        value: datetime, date, ISO 8601 string or epoch milliseconds
        function_name: Entry point name for diagnostics

    Returns:
        datetime, or None (after logging a warning) when the value is
        missing or cannot be interpreted

    Examples:
        >>> coerce_datetime("2024-03-01T12:00:00Z")
        datetime.datetime(2024, 3, 1, 12, 0, tzinfo=datetime.timezone.utc)
        >>> coerce_datetime(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if value is None:
        logger.warning("%s", DiagnosticTemplate.date_missing(function_name).format_warning())
        return None

    result: datetime | None
    match value:
        case bool():
            result = None
        case datetime():
            result = value
        case date():
            result = datetime.combine(value, time())
        case int() | float() | Decimal():
            result = _from_timestamp(float(value))
        case str():
            result = _from_string(value)
        case _:
            result = None

    if result is None:
        diagnostic = DiagnosticTemplate.date_invalid(value, function_name)
        logger.warning("%s", diagnostic.format_warning())
    return result


def format_datetime(
    date: object,
    locale: str | None = None,
    options: Mapping[str, Any] | DateTimePreset | str | None = None,
) -> str:
    """Format a date/time value.

    Args:
        date: Value to format (see module docstring for accepted types)
        locale: Locale tag (default en-US)
        options: Preset name ("short", "long", "dateOnly", "timeOnly",
            "full"; default "full") or an options bag with keys such as
            year, month, day, weekday, hour, minute, second, hour12,
            time_zone, time_zone_name, date_style, time_style. camelCase
            keys (timeZone, dateStyle) are accepted.

    Returns:
        Formatted string, or "" for missing/invalid input

    Examples:
        >>> from datetime import datetime, UTC
        >>> moment = datetime(2012, 12, 20, 3, 0, tzinfo=UTC)
        >>> format_datetime(moment, options="dateOnly")
        'Dec 20, 2012'
        >>> format_datetime(moment, options={"year": "numeric", "month": "long",
        ...                                  "day": "numeric"})
        'December 20, 2012'
        >>> format_datetime(None)
        ''
    """
    function_name = "format_datetime"
    value = coerce_datetime(date, function_name)
    if value is None:
        return FALLBACK_EMPTY

    opts = resolve_options(FormatDomain.DATETIME, locale=locale, options=options)
    bag = resolve_datetime_options(opts["options"])
    try:
        return context_for(opts["locale"], function_name).format_datetime(value, options=bag)
    except FormattingError as e:
        return recover(e, function_name)
