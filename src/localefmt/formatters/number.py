"""Plain and fixed-precision number formatting.

Python 3.13+. Uses Babel (via LocaleContext) for locale separators.
"""

from localefmt.core.errors import FormattingError
from localefmt.enums import FormatDomain
from localefmt.normalization import ensure_number_or_string, normalize_number
from localefmt.options import DEFAULT_OPTIONS, coerce_digits, resolve_options

from ._common import context_for, recover

__all__ = ["format_decimal", "format_number"]


def format_number(value: object, locale: str | None = None) -> str:
    """Format a number with the locale's default decimal pattern.

    Up to three fraction digits are shown; trailing zeros are dropped.

    Examples:
        >>> format_number(1000)
        '1,000'
        >>> format_number("1234.5678", "de-DE")
        '1.234,568'
        >>> format_number("abc")
        '0'
    """
    function_name = "format_number"
    opts = resolve_options(FormatDomain.NUMBER, locale=locale)
    ensure_number_or_string(value, function_name)
    number = normalize_number(value)
    try:
        return context_for(opts["locale"], function_name).format_number(number)
    except FormattingError as e:
        return recover(e, function_name)


def format_decimal(
    value: object,
    decimals: int | None = None,
    locale: str | None = None,
) -> str:
    """Format a number with exactly ``decimals`` fraction digits.

    Args:
        value: Number or numeric string; anything else formats as 0
        decimals: Fraction digits, 0..20 (default 2)
        locale: Locale tag (default en-US)

    Returns:
        Formatted number

    Examples:
        >>> format_decimal(1000)
        '1,000.00'
        >>> format_decimal(3.14159, 3, "fr-FR")
        '3,142'
    """
    function_name = "format_decimal"
    opts = resolve_options(FormatDomain.DECIMAL, decimals=decimals, locale=locale)
    digits = coerce_digits(
        "decimals", opts["decimals"], DEFAULT_OPTIONS[FormatDomain.DECIMAL]["decimals"],
        function_name,
    )
    ensure_number_or_string(value, function_name)
    number = normalize_number(value)
    try:
        return context_for(opts["locale"], function_name).format_number(
            number,
            minimum_fraction_digits=digits,
            maximum_fraction_digits=digits,
        )
    except FormattingError as e:
        return recover(e, function_name)
