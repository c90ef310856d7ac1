"""localefmt exception hierarchy with structured diagnostics.

Only the strict currency path raises to callers; every other failure is
recovered inside the entry points. Exceptions may carry a Diagnostic for
rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["CurrencyPairError", "LocaleFormatError"]


class LocaleFormatError(Exception):
    """Base exception for all localefmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class CurrencyPairError(LocaleFormatError, ValueError):
    """Locale/currency pair rejected by strict currency formatting.

    Raised by format_currency_match() when the pair is not a member of
    STRICT_LOCALE_CURRENCY_PAIRS. Never recovered with a substitute currency.

    Attributes:
        locale: Locale tag supplied by the caller
        currency: Currency code supplied by the caller
    """

    def __init__(self, message: str | Diagnostic, *, locale: str, currency: str) -> None:
        """Initialize CurrencyPairError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Locale tag supplied by the caller
            currency: Currency code supplied by the caller
        """
        super().__init__(message)
        self.locale = locale
        self.currency = currency
