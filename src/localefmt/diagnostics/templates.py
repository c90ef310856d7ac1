"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["DiagnosticTemplate"]

# Longest repr() of a received value kept in a diagnostic.
_MAX_VALUE_REPR = 80


def _describe(value: object) -> str:
    """Return a bounded repr() for log output."""
    text = repr(value)
    if len(text) > _MAX_VALUE_REPR:
        return text[: _MAX_VALUE_REPR - 3] + "..."
    return text


class DiagnosticTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here so that tests can assert on
    codes instead of free text, and log output stays uniform across entry
    points.
    """

    @staticmethod
    def invalid_number_or_string(value: object, function_name: str) -> Diagnostic:
        """Value is neither a number nor a numeric string.

        Args:
            value: The rejected input
            function_name: Entry point that received it

        Returns:
            Diagnostic for INVALID_NUMBER_OR_STRING
        """
        shown = _describe(value)
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER_OR_STRING,
            message=f"Invalid value passed: {shown}. Expected a number or numeric string.",
            function_name=function_name,
            received_value=shown,
        )

    @staticmethod
    def invalid_number(value: object, function_name: str) -> Diagnostic:
        """Value is not a genuine number (or is NaN).

        Args:
            value: The rejected input
            function_name: Entry point that received it

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        shown = _describe(value)
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=f"Invalid numeric value: {shown}. Expected a number.",
            function_name=function_name,
            received_value=shown,
        )

    @staticmethod
    def date_missing(function_name: str) -> Diagnostic:
        """Date input is None."""
        return Diagnostic(
            code=DiagnosticCode.DATE_MISSING,
            message="Received None instead of a date",
            function_name=function_name,
            received_value="None",
        )

    @staticmethod
    def date_invalid(value: object, function_name: str) -> Diagnostic:
        """Date input cannot be interpreted as a point in time.

        Args:
            value: The rejected input
            function_name: Entry point that received it

        Returns:
            Diagnostic for DATE_INVALID
        """
        shown = _describe(value)
        return Diagnostic(
            code=DiagnosticCode.DATE_INVALID,
            message=f"Invalid date input: {shown}",
            function_name=function_name,
            received_value=shown,
            hint="Pass a datetime, a date, an ISO 8601 string or a millisecond timestamp",
        )

    @staticmethod
    def list_not_sequence(value: object, function_name: str) -> Diagnostic:
        """List input is not a sequence."""
        shown = _describe(value)
        return Diagnostic(
            code=DiagnosticCode.LIST_NOT_SEQUENCE,
            message='"items" must be a list of strings.',
            function_name=function_name,
            received_value=shown,
        )

    @staticmethod
    def list_empty(value: object, function_name: str) -> Diagnostic:
        """List input has no non-blank string."""
        shown = _describe(value)
        return Diagnostic(
            code=DiagnosticCode.LIST_EMPTY,
            message='"items" must contain at least one non-blank string.',
            function_name=function_name,
            received_value=shown,
        )

    @staticmethod
    def list_item_not_string(item: object, function_name: str) -> Diagnostic:
        """List input contains a non-string element."""
        shown = _describe(item)
        return Diagnostic(
            code=DiagnosticCode.LIST_ITEM_NOT_STRING,
            message=f'"items" must only contain strings, got {shown}.',
            function_name=function_name,
            received_value=shown,
        )

    @staticmethod
    def option_invalid(
        option: str,
        value: object,
        default: object,
        function_name: str,
    ) -> Diagnostic:
        """Option value is out of range; the default is used instead.

        Args:
            option: Option name (snake_case)
            value: The rejected option value
            default: The value used instead
            function_name: Entry point that received it

        Returns:
            Diagnostic for OPTION_INVALID
        """
        shown = _describe(value)
        return Diagnostic(
            code=DiagnosticCode.OPTION_INVALID,
            message=f"Invalid {option} {shown}; using {default!r}",
            function_name=function_name,
            received_value=shown,
        )

    @staticmethod
    def unit_unsupported(
        unit: object, supported: tuple[str, ...], function_name: str
    ) -> Diagnostic:
        """Relative-time unit is not supported."""
        shown = _describe(unit)
        return Diagnostic(
            code=DiagnosticCode.UNIT_UNSUPPORTED,
            message=f"Unsupported unit {shown}",
            function_name=function_name,
            received_value=shown,
            hint=f"Use one of: {', '.join(supported)}",
        )

    @staticmethod
    def preset_unknown(name: str) -> Diagnostic:
        """Date/time preset name is not in the preset table."""
        return Diagnostic(
            code=DiagnosticCode.PRESET_UNKNOWN,
            message=f"Unknown date/time preset '{name}'; using locale defaults",
            function_name="format_datetime",
            received_value=repr(name),
        )

    @staticmethod
    def formatting_failed(reason: str, function_name: str, fallback: str) -> Diagnostic:
        """Locale primitive rejected the request; fallback output is used."""
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"{reason}; returning {fallback!r}",
            function_name=function_name,
        )

    @staticmethod
    def currency_pair_invalid(locale: str, currency: str) -> Diagnostic:
        """Locale/currency pair is not in the strict pair set.

        Args:
            locale: Locale tag supplied by the caller
            currency: Currency code supplied by the caller

        Returns:
            Diagnostic for CURRENCY_PAIR_INVALID (severity error)
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_PAIR_INVALID,
            message=f"'{currency}' is not a valid currency for locale '{locale}'",
            function_name="format_currency_match",
            received_value=repr((locale, currency)),
            hint="Use format_currency() for unrestricted locale/currency combinations",
            severity="error",
        )
