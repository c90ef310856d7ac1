"""Enumerations and option literals for localefmt.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so callers may pass either the
member or its plain string value to any formatting function.

Python 3.13+.
"""

from enum import StrEnum
from typing import Literal

__all__ = [
    "CompactDisplay",
    "CurrencyDisplay",
    "DateTimePreset",
    "FormatDomain",
    "ListStyle",
    "ListType",
    "Notation",
    "NumericMode",
    "RelativeTimeStyle",
    "RelativeTimeUnit",
    "UnitDisplay",
]

CurrencyDisplay = Literal["symbol", "code", "name"]
UnitDisplay = Literal["short", "long", "narrow"]
Notation = Literal["compact", "standard"]
CompactDisplay = Literal["short", "long"]
NumericMode = Literal["always", "auto"]
RelativeTimeStyle = Literal["long", "short", "narrow"]
RelativeTimeUnit = Literal["year", "month", "week", "day", "hour", "minute", "second"]
ListStyle = Literal["long", "short", "narrow"]
ListType = Literal["conjunction", "disjunction", "unit"]


class FormatDomain(StrEnum):
    """Formatting domain served by one entry point.

    StrEnum provides automatic string conversion: str(FormatDomain.UNIT) == "unit"
    """

    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    DECIMAL = "decimal"
    NUMBER = "number"
    COMPACT = "compact"
    UNIT = "unit"
    DATETIME = "datetime"
    RELATIVE_TIME = "relative_time"
    LIST = "list"


class DateTimePreset(StrEnum):
    """Named shorthand for a fixed date/time options bag.

    StrEnum provides automatic string conversion: str(DateTimePreset.SHORT) == "short"
    """

    SHORT = "short"
    """07/15/25, 10:04 AM"""

    LONG = "long"
    """July 15, 2025 at 10:04 AM"""

    DATE_ONLY = "dateOnly"
    """Jul 15, 2025"""

    TIME_ONLY = "timeOnly"
    """10:04:00 AM"""

    FULL = "full"
    """July 15, 2025 at 10:04:00 (24-hour clock)"""
