"""Formatter entry points, one module per formatting domain.

Every function accepts loosely typed input and degrades instead of raising:
numeric domains format invalid values as 0, date/time and list domains
return "" and log a warning. format_currency_match() is the one exception;
it raises CurrencyPairError for a pair outside the strict set.

Python 3.13+.
"""

from .compact import format_compact_number
from .currency import (
    CurrencyFormatter,
    create_currency_formatter,
    format_currency,
    format_currency_match,
)
from .datetime import coerce_datetime, format_datetime
from .list import format_list
from .number import format_decimal, format_number
from .percentage import format_percentage
from .relative_time import format_relative_time, strip_direction
from .unit import format_unit

__all__ = [
    "CurrencyFormatter",
    "coerce_datetime",
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
    "strip_direction",
]
