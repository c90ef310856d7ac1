"""Diagnostic codes and data structures.

Defines diagnostic codes and the immutable Diagnostic record produced by
advisory validation. Diagnostics describe invalid input that was recovered
locally; they are logged and returned, never raised.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (values that cannot be interpreted)
        2000-2999: Option errors (unsupported or out-of-range options)
        3000-3999: Formatting errors (locale primitive failures, strict pairs)
    """

    # Input errors (1000-1999)
    INVALID_NUMBER_OR_STRING = 1001
    INVALID_NUMBER = 1002
    DATE_MISSING = 1003
    DATE_INVALID = 1004
    LIST_NOT_SEQUENCE = 1005
    LIST_EMPTY = 1006
    LIST_ITEM_NOT_STRING = 1007

    # Option errors (2000-2999)
    OPTION_INVALID = 2001
    UNIT_UNSUPPORTED = 2002
    PRESET_UNKNOWN = 2003

    # Formatting errors (3000-3999)
    FORMATTING_FAILED = 3001
    CURRENCY_PAIR_INVALID = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        function_name: Entry point that received the input (log context tag)
        received_value: repr() of the offending input, truncated
        hint: Suggestion for fixing the input
        severity: "warning" for recovered input, "error" for rejected calls
    """

    code: DiagnosticCode
    message: str
    function_name: str = ""
    received_value: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "warning"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_warning(self) -> str:
        """Format diagnostic as a single log line.

        Example output:
            [format_list] "items" must contain at least one non-blank string

        Returns:
            Formatted message tagged with the calling function's name
        """
        if self.function_name:
            return f"[{self.function_name}] {self.message}"
        return self.message
