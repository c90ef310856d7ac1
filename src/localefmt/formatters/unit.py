"""Measurement unit formatting (12 kg, 12 minutes).

Python 3.13+. Uses Babel (via LocaleContext) for CLDR unit patterns.
"""

from localefmt.core.errors import FormattingError
from localefmt.enums import FormatDomain, UnitDisplay
from localefmt.normalization import ensure_number_or_string, normalize_number
from localefmt.options import DEFAULT_OPTIONS, coerce_choice, resolve_options

from ._common import context_for, recover, text_option

__all__ = ["format_unit"]

_DISPLAYS: tuple[UnitDisplay, ...] = ("short", "long", "narrow")


def format_unit(
    value: object,
    unit: str | None = None,
    unit_display: UnitDisplay | None = None,
    locale: str | None = None,
) -> str:
    """Format a measurement.

    Args:
        value: Quantity; non-numeric input formats as 0
        unit: CLDR unit, short ("kilogram") or qualified ("mass-kilogram");
            default "kilogram"
        unit_display: "short" (default), "long" or "narrow"
        locale: Locale tag (default en-US)

    Returns:
        Formatted measurement. A unit CLDR does not know yields
        "<value> <unit>" and a warning.

    Examples:
        >>> format_unit(12)
        '12 kg'
        >>> format_unit(12, "minute", "long")
        '12 minutes'
        >>> format_unit(12, "year")
        '12 yrs'
    """
    function_name = "format_unit"
    defaults = DEFAULT_OPTIONS[FormatDomain.UNIT]
    opts = resolve_options(
        FormatDomain.UNIT, unit=unit, unit_display=unit_display, locale=locale
    )
    resolved_unit = text_option("unit", opts["unit"], defaults["unit"], function_name)
    display = coerce_choice(
        "unit_display", opts["unit_display"], _DISPLAYS, defaults["unit_display"], function_name
    )
    ensure_number_or_string(value, function_name)
    number = normalize_number(value)
    try:
        return context_for(opts["locale"], function_name).format_unit(
            number, unit=resolved_unit.strip(), unit_display=display
        )
    except FormattingError as e:
        return recover(e, function_name)
