"""Value normalization for numeric formatting domains.

- to_number() and normalize_number() are total functions: they never raise
- ensure_*() helpers are advisory: they log a warning and return the
  Diagnostic, but never alter the caller's control flow

Every numeric entry point runs its input through normalize_number() before
formatting, so non-numeric and non-finite values format as 0.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import TypeIs

from localefmt.diagnostics import Diagnostic, DiagnosticTemplate

__all__ = [
    "Number",
    "ensure_number",
    "ensure_number_or_string",
    "is_finite_number",
    "is_number",
    "is_numeric",
    "normalize_number",
    "to_number",
]

logger = logging.getLogger(__name__)

type Number = int | float | Decimal

_NAN = float("nan")


def _is_numeric_type(value: object) -> TypeIs[Number]:
    # bool is an int subclass but never a meaningful amount
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _is_nan(value: Number) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def to_number(value: object) -> Number:
    """Convert a value to a number without raising.

    Numbers pass through unchanged. Strings are stripped and parsed with
    Decimal, which keeps full precision and accepts exponent notation and
    the special values "Infinity" / "NaN". A blank string is 0. Everything
    else becomes NaN.

    Args:
        value: Any input

    Returns:
        int, float or Decimal; float("nan") when the input is not numeric

    Examples:
        >>> to_number(12)
        12
        >>> to_number(" 1e3 ")
        Decimal('1E+3')
        >>> to_number("  ")
        0
        >>> to_number("abc")
        nan
    """
    if _is_numeric_type(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return Decimal(text)
        except InvalidOperation:
            return _NAN
    return _NAN


def is_finite_number(value: Number) -> bool:
    """Return True for numbers that are neither NaN nor infinite.

    Magnitudes beyond the float range count as infinite, so "1e400" and
    10**400 are not finite even though Decimal and int can hold them.
    """
    if isinstance(value, Decimal):
        return value.is_finite() and math.isfinite(float(value))
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def normalize_number(value: object) -> Number:
    """Coerce a value to a finite number, falling back to 0.

    Args:
        value: Any input (number, numeric string, or anything else)

    Returns:
        The numeric value, or 0 when the input is non-numeric, NaN or infinite

    Examples:
        >>> normalize_number("12.5")
        Decimal('12.5')
        >>> normalize_number(float("inf"))
        0
        >>> normalize_number(None)
        0
    """
    number = to_number(value)
    return number if is_finite_number(number) else 0


def is_numeric(value: object) -> bool:
    """Return True for numbers and numeric strings that are not NaN."""
    return not _is_nan(to_number(value))


def is_number(value: object) -> TypeIs[Number]:
    """Return True for genuine numeric types that are not NaN.

    Numeric strings are rejected, and so is NaN even though it is a float.
    """
    return _is_numeric_type(value) and not _is_nan(value)


def ensure_number_or_string(value: object, function_name: str) -> Diagnostic | None:
    """Warn when a value is neither a number nor a numeric string.

    Args:
        value: The value to validate
        function_name: Name of the calling entry point (log context tag)

    Returns:
        The emitted Diagnostic, or None when the value is valid
    """
    if is_numeric(value):
        return None
    diagnostic = DiagnosticTemplate.invalid_number_or_string(value, function_name)
    logger.warning("%s", diagnostic.format_warning())
    return diagnostic


def ensure_number(value: object, function_name: str) -> Diagnostic | None:
    """Warn when a value is not a genuine, non-NaN number.

    Stricter than ensure_number_or_string(): numeric strings and NaN are
    both reported.

    Args:
        value: The value to validate
        function_name: Name of the calling entry point (log context tag)

    Returns:
        The emitted Diagnostic, or None when the value is valid
    """
    if is_number(value):
        return None
    diagnostic = DiagnosticTemplate.invalid_number(value, function_name)
    logger.warning("%s", diagnostic.format_warning())
    return diagnostic
