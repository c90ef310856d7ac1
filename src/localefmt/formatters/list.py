"""List formatting ("a, b, and c", "a or b").

Python 3.13+. Uses Babel (via LocaleContext) for CLDR list patterns.
"""

import logging
from collections.abc import Sequence
from typing import get_args

from localefmt.constants import FALLBACK_EMPTY
from localefmt.core.errors import FormattingError
from localefmt.diagnostics import DiagnosticTemplate
from localefmt.enums import FormatDomain, ListStyle, ListType
from localefmt.options import DEFAULT_OPTIONS, coerce_choice, resolve_options

from ._common import context_for, recover

__all__ = ["format_list"]

logger = logging.getLogger(__name__)

_STYLES: tuple[ListStyle, ...] = get_args(ListStyle)
_TYPES: tuple[ListType, ...] = get_args(ListType)


def _checked_items(items: object, function_name: str) -> list[str] | None:
    """Return the items as a list, or None after logging why they are unusable."""
    if isinstance(items, str | bytes) or not isinstance(items, Sequence):
        diagnostic = DiagnosticTemplate.list_not_sequence(items, function_name)
        logger.warning("%s", diagnostic.format_warning())
        return None
    for item in items:
        if not isinstance(item, str):
            diagnostic = DiagnosticTemplate.list_item_not_string(item, function_name)
            logger.warning("%s", diagnostic.format_warning())
            return None
    if not any(item.strip() for item in items):
        diagnostic = DiagnosticTemplate.list_empty(items, function_name)
        logger.warning("%s", diagnostic.format_warning())
        return None
    return list(items)


def format_list(
    items: object,
    locale: str | None = None,
    style: ListStyle | None = None,
    type: ListType | None = None,  # noqa: A002 - public option name
) -> str:
    """Join strings with the locale's list pattern.

    Args:
        items: Sequence of strings; at least one must be non-blank
        locale: Locale tag (default en-US)
        style: "long" (default), "short" or "narrow"
        type: "conjunction" (default, "and"), "disjunction" ("or") or "unit"

    Returns:
        Joined list, or "" when items is not a usable sequence of strings

    Examples:
        >>> format_list(["apples", "bananas", "oranges"])
        'apples, bananas, and oranges'
        >>> format_list(["tea", "coffee"], type="disjunction")
        'tea or coffee'
        >>> format_list([])
        ''
    """
    function_name = "format_list"
    checked = _checked_items(items, function_name)
    if checked is None:
        return FALLBACK_EMPTY

    defaults = DEFAULT_OPTIONS[FormatDomain.LIST]
    opts = resolve_options(FormatDomain.LIST, locale=locale, style=style, type=type)
    resolved_style = coerce_choice(
        "style", opts["style"], _STYLES, defaults["style"], function_name
    )
    resolved_type = coerce_choice("type", opts["type"], _TYPES, defaults["type"], function_name)
    try:
        return context_for(opts["locale"], function_name).format_list(
            checked, style=resolved_style, list_type=resolved_type
        )
    except FormattingError as e:
        return recover(e, function_name)
