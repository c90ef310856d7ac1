"""Relative time formatting ("in 3 days", "2 weeks ago").

Python 3.13+. Uses Babel (via LocaleContext) for CLDR relative-time data.
"""

import logging
import re
from typing import get_args

from localefmt.constants import FALLBACK_EMPTY
from localefmt.core.errors import FormattingError
from localefmt.diagnostics import DiagnosticTemplate
from localefmt.enums import (
    FormatDomain,
    NumericMode,
    RelativeTimeStyle,
    RelativeTimeUnit,
)
from localefmt.normalization import ensure_number, normalize_number
from localefmt.options import DEFAULT_OPTIONS, coerce_choice, resolve_options

from ._common import context_for, recover

__all__ = ["format_relative_time", "strip_direction"]

logger = logging.getLogger(__name__)

_UNITS: tuple[RelativeTimeUnit, ...] = get_args(RelativeTimeUnit)
_STYLES: tuple[RelativeTimeStyle, ...] = get_args(RelativeTimeStyle)
_NUMERIC_MODES: tuple[NumericMode, ...] = get_args(NumericMode)

_LEADING_IN = re.compile(r"^in\s+", re.IGNORECASE)
_TRAILING_AGO = re.compile(r"\s+ago$", re.IGNORECASE)
_NO_BREAK_SPACES = str.maketrans({"\u00a0": " ", "\u202f": " "})


def _resolve_unit(unit: object) -> RelativeTimeUnit | None:
    """Singular unit name for "day" / "days" / " Days "; None if unsupported."""
    if not isinstance(unit, str):
        return None
    name = unit.strip().lower()
    if name not in _UNITS and name.endswith("s"):
        name = name[:-1]
    for candidate in _UNITS:
        if candidate == name:
            return candidate
    return None


def strip_direction(text: str) -> str:
    """Remove a leading "in" and a trailing "ago"; no-break spaces become spaces.

    Only whole words at the very start or end are removed, so "in" and
    "ago" inside a phrase survive.

    Examples:
        >>> strip_direction("in 3 days")
        '3 days'
        >>> strip_direction("2 weeks ago")
        '2 weeks'
    """
    text = text.translate(_NO_BREAK_SPACES)
    text = _LEADING_IN.sub("", text)
    text = _TRAILING_AGO.sub("", text)
    return text.strip()


def format_relative_time(
    value: object,
    unit: RelativeTimeUnit | str | None = None,
    locale: str | None = None,
    plain: bool | None = None,
    numeric: NumericMode | None = None,
    style: RelativeTimeStyle | None = None,
) -> str:
    """Format a signed offset from now.

    Args:
        value: Signed count of units; negative is past. Anything other
            than a number warns and formats as 0.
        unit: year, month, week, day (default), hour, minute or second;
            plural forms are accepted
        locale: Locale tag (default en-US)
        plain: Drop the direction words ("in", "ago")
        numeric: "always" (default) or "auto". Phrases such as "tomorrow"
            are not available, so "auto" renders numerically.
        style: "long" (default), "short" or "narrow"

    Returns:
        Relative time phrase, or "" for an unsupported unit

    Examples:
        >>> format_relative_time(3)
        'in 3 days'
        >>> format_relative_time(-2, "week", plain=True)
        '2 weeks'
    """
    function_name = "format_relative_time"
    defaults = DEFAULT_OPTIONS[FormatDomain.RELATIVE_TIME]
    opts = resolve_options(
        FormatDomain.RELATIVE_TIME,
        unit=unit,
        locale=locale,
        plain=plain,
        numeric=numeric,
        style=style,
    )

    resolved_unit = _resolve_unit(opts["unit"])
    if resolved_unit is None:
        diagnostic = DiagnosticTemplate.unit_unsupported(opts["unit"], _UNITS, function_name)
        logger.warning("%s", diagnostic.format_warning())
        return FALLBACK_EMPTY

    coerce_choice("numeric", opts["numeric"], _NUMERIC_MODES, defaults["numeric"], function_name)
    resolved_style = coerce_choice(
        "style", opts["style"], _STYLES, defaults["style"], function_name
    )

    ensure_number(value, function_name)
    number = normalize_number(value)
    try:
        text = context_for(opts["locale"], function_name).format_relative_time(
            number, unit=resolved_unit, style=resolved_style
        )
    except FormattingError as e:
        return recover(e, function_name)
    return strip_direction(text) if opts["plain"] else text
