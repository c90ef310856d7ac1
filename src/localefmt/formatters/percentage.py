"""Percentage formatting.

The ratio is scaled by 100 and rendered with a fixed number of fraction
digits and a literal "%" suffix. No locale grouping or localized percent
sign is applied: format_percentage(12.3456) is "1234.56%" in every locale.

Python 3.13+.
"""

from localefmt.enums import FormatDomain
from localefmt.normalization import ensure_number_or_string, normalize_number
from localefmt.options import DEFAULT_OPTIONS, coerce_digits, resolve_options

__all__ = ["format_percentage"]


def format_percentage(value: object, fraction_digits: int | None = None) -> str:
    """Format a ratio as a percentage.

    Args:
        value: Ratio (0.25 -> 25%); non-numeric input formats as 0
        fraction_digits: Digits after the decimal point, 0..20 (default 2)

    Returns:
        Percentage string

    Examples:
        >>> format_percentage(0.1234)
        '12.34%'
        >>> format_percentage(0.037, 1)
        '3.7%'
    """
    function_name = "format_percentage"
    opts = resolve_options(FormatDomain.PERCENTAGE, fraction_digits=fraction_digits)
    digits = coerce_digits(
        "fraction_digits",
        opts["fraction_digits"],
        DEFAULT_OPTIONS[FormatDomain.PERCENTAGE]["fraction_digits"],
        function_name,
    )
    ensure_number_or_string(value, function_name)
    # Scaling can overflow the float range: 1e307 -> 0%
    percent = normalize_number(normalize_number(value) * 100)
    text = f"{percent:.{digits}f}"
    # "-0.00" -> "0.00"
    if text.lstrip("-").strip("0.") == "":
        text = text.lstrip("-")
    return f"{text}%"
