"""Core error types shared across runtime and formatter layers.

Provides error types that need to be importable from both the runtime and
formatters packages without creating circular dependencies.

Python 3.13+.
"""

from localefmt.diagnostics import Diagnostic, LocaleFormatError

__all__ = ["FormattingError"]


class FormattingError(LocaleFormatError):
    """Raised when locale-aware formatting fails.

    This error indicates a failure in number, unit, date, relative-time, list
    or currency formatting inside LocaleContext. Entry points catch it, log
    it, and return its fallback_value, so it never reaches their callers.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
