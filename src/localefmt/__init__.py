"""localefmt - input-tolerant, locale-aware formatting on top of Babel.

A small set of formatting functions for money, numbers, percentages, units,
dates, relative times and lists. Values may be loosely typed (numeric
strings, missing dates); invalid input degrades to a safe fallback with a
logged warning instead of raising.

Public API:
    format_currency - Amount in a currency (currency derived from locale)
    format_currency_match - Amount for a pre-approved locale/currency pair
    create_currency_formatter - Reusable formatter bound to currency and locale
    format_number - Locale default number format
    format_decimal - Fixed fraction digits
    format_percentage - Ratio as "12.34%"
    format_compact_number - Compact notation ("1K")
    format_unit - Measurement ("12 kg")
    format_datetime - Date/time from a preset or options bag
    format_relative_time - Offset from now ("in 3 days")
    format_list - Joined list ("a, b, and c")

Exceptions:
    LocaleFormatError - Base exception class
    CurrencyPairError - Locale/currency pair rejected by format_currency_match

Submodules:
    localefmt.options - Defaults, presets and currency tables
    localefmt.normalization - Value coercion helpers
    localefmt.diagnostics - Diagnostic codes and records
    localefmt.runtime.locale_context - Thread-safe LocaleContext over Babel
"""

from .diagnostics import CurrencyPairError, LocaleFormatError
from .enums import DateTimePreset
from .formatters import (
    CurrencyFormatter,
    create_currency_formatter,
    format_compact_number,
    format_currency,
    format_currency_match,
    format_datetime,
    format_decimal,
    format_list,
    format_number,
    format_percentage,
    format_relative_time,
    format_unit,
)
from .options import STRICT_LOCALE_CURRENCY_PAIRS, StrictCurrency, StrictLocale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localefmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "STRICT_LOCALE_CURRENCY_PAIRS",
    "CurrencyFormatter",
    "CurrencyPairError",
    "DateTimePreset",
    "LocaleFormatError",
    "StrictCurrency",
    "StrictLocale",
    "__version__",
    "create_currency_formatter",
    "format_compact_number",
    "format_currency",
    "format_currency_match",
    "format_datetime",
    "format_decimal",
    "format_list",
    "format_number",
    "format_percentage",
    "format_relative_time",
    "format_unit",
]
