"""Compact number formatting (1K, 2.5 million).

Python 3.13+. Uses Babel (via LocaleContext) for CLDR compact patterns.
"""

from localefmt.core.errors import FormattingError
from localefmt.enums import CompactDisplay, FormatDomain, Notation
from localefmt.normalization import ensure_number_or_string, normalize_number
from localefmt.options import (
    CompactNotation,
    StandardNotation,
    resolve_compact_notation,
    resolve_options,
)

from ._common import context_for, recover

__all__ = ["format_compact_number"]


def format_compact_number(
    value: object,
    locale: str | None = None,
    notation: Notation | None = None,
    compact_display: CompactDisplay | None = None,
) -> str:
    """Format a number in compact or standard notation.

    compact_display only applies to compact notation; under standard
    notation it is ignored.

    Args:
        value: Number or numeric string; anything else formats as 0
        locale: Locale tag (default en-US)
        notation: "compact" (default) or "standard"
        compact_display: "short" (default, 1K) or "long" (1 thousand)

    Returns:
        Formatted number

    Examples:
        >>> format_compact_number(1000)
        '1K'
        >>> format_compact_number(2500)
        '2.5K'
        >>> format_compact_number(1000, notation="standard", compact_display="long")
        '1,000'
    """
    function_name = "format_compact_number"
    opts = resolve_options(FormatDomain.COMPACT, locale=locale)
    variant = resolve_compact_notation(notation, compact_display, function_name)
    ensure_number_or_string(value, function_name)
    number = normalize_number(value)
    ctx = context_for(opts["locale"], function_name)
    try:
        match variant:
            case CompactNotation(compact_display=display):
                return ctx.format_compact(number, compact_display=display)
            case StandardNotation():
                return ctx.format_number(number)
    except FormattingError as e:
        return recover(e, function_name)
