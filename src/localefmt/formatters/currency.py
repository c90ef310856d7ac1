"""Currency formatting entry points and the reusable currency formatter.

format_currency() is permissive: any locale/currency combination is
formatted, and a missing currency is derived from the locale.
format_currency_match() is strict: the pair must be in
STRICT_LOCALE_CURRENCY_PAIRS or CurrencyPairError is raised.

create_currency_formatter() resolves the locale and CLDR currency pattern
once and returns a callable that only coerces and applies them.

Python 3.13+. Uses Babel (via LocaleContext) for CLDR currency data.
"""

from dataclasses import dataclass, field

from babel.numbers import NumberPattern, get_currency_symbol

from localefmt.constants import DEFAULT_CURRENCY, DEFAULT_LOCALE
from localefmt.core.errors import FormattingError
from localefmt.enums import CurrencyDisplay, FormatDomain
from localefmt.normalization import (
    Number,
    ensure_number_or_string,
    is_finite_number,
    is_numeric,
    normalize_number,
    to_number,
)
from localefmt.options import (
    DEFAULT_OPTIONS,
    coerce_choice,
    resolve_currency,
    validate_currency_pair,
)
from localefmt.runtime.locale_context import LocaleContext

from ._common import context_for, recover, text_option

__all__ = [
    "CurrencyFormatter",
    "create_currency_formatter",
    "format_currency",
    "format_currency_match",
]

_DISPLAYS: tuple[CurrencyDisplay, ...] = ("symbol", "code", "name")


def _format(
    value: object,
    locale: str,
    currency: str,
    currency_display: object,
    function_name: str,
) -> str:
    ensure_number_or_string(value, function_name)
    amount = normalize_number(value)
    default_display = DEFAULT_OPTIONS[FormatDomain.CURRENCY]["currency_display"]
    display = coerce_choice(
        "currency_display",
        currency_display if currency_display is not None else default_display,
        _DISPLAYS,
        default_display,
        function_name,
    )
    ctx = context_for(locale, function_name)
    try:
        return ctx.format_currency(
            amount, currency=currency.strip().upper(), currency_display=display
        )
    except FormattingError as e:
        return recover(e, function_name)


def format_currency(
    value: object,
    currency: str | None = None,
    locale: str | None = None,
    currency_display: CurrencyDisplay | None = None,
) -> str:
    """Format a monetary amount.

    When only the locale is given, the currency is the locale's own
    (en-GB -> GBP); with neither, en-US and USD are used. Non-numeric
    amounts format as 0 with a warning.

    Args:
        value: Amount (number or numeric string)
        currency: ISO 4217 code; derived from the locale when omitted
        locale: Locale tag (default en-US)
        currency_display: "symbol" (default), "code" or "name"

    Returns:
        Formatted amount, never raises

    Examples:
        >>> format_currency(1500, "USD", "en-US")
        '$1,500.00'
        >>> format_currency(1500, locale="en-NG")
        '₦1,500.00'
        >>> format_currency(2, "EUR", "en-US", currency_display="name")
        '2.00 euros'
    """
    function_name = "format_currency"
    if locale is not None:
        locale = text_option("locale", locale, DEFAULT_LOCALE, function_name)
    if currency is not None:
        currency = text_option("currency", currency, DEFAULT_CURRENCY, function_name)
    resolved_locale, resolved_currency = resolve_currency(locale, currency)
    return _format(value, resolved_locale, resolved_currency, currency_display, function_name)


def format_currency_match(
    value: object,
    locale: str,
    currency: str,
    currency_display: CurrencyDisplay | None = None,
) -> str:
    """Format a monetary amount for a pre-approved locale/currency pair.

    Args:
        value: Amount (number or numeric string)
        locale: Locale tag, one of StrictLocale
        currency: ISO 4217 code paired with the locale
        currency_display: "symbol" (default), "code" or "name"

    Returns:
        Formatted amount

    Raises:
        CurrencyPairError: If (locale, currency) is not a strict pair

    Examples:
        >>> format_currency_match(3000, "en-GB", "GBP")
        '£3,000.00'
        >>> format_currency_match(3000, "en-GB", "JPY")
        Traceback (most recent call last):
            ...
        localefmt.diagnostics.errors.CurrencyPairError: ...
    """
    function_name = "format_currency_match"
    checked_locale, checked_currency = validate_currency_pair(locale, currency)
    return _format(value, checked_locale, checked_currency, currency_display, function_name)


@dataclass(frozen=True, slots=True)
class CurrencyFormatter:
    """Callable bound to one currency and locale.

    The LocaleContext and the locale's standard currency pattern are
    resolved once by create_currency_formatter(); calls reuse them.

    Attributes:
        currency: ISO 4217 code (uppercase)
        locale: Locale tag as supplied
        context: LocaleContext for the locale
        pattern: Parsed CLDR standard currency pattern
    """

    currency: str
    locale: str
    context: LocaleContext = field(repr=False)
    pattern: NumberPattern = field(repr=False)

    def __call__(self, value: object) -> str:
        """Format value; non-numeric input warns and renders as "$NaN"."""
        amount = to_number(value)
        ensure_number_or_string(value, "currency_formatter")
        if not is_finite_number(amount):
            return self._render_non_finite(amount)
        try:
            return self.context.format_currency(
                amount, currency=self.currency, pattern=self.pattern
            )
        except FormattingError as e:
            return recover(e, "currency_formatter")

    def _render_non_finite(self, amount: Number) -> str:
        # The pattern's affixes around the bare NaN / infinity text: "$NaN"
        infinite = is_numeric(amount)
        text = "∞" if infinite else "NaN"
        negative = infinite and amount < 0
        symbol = get_currency_symbol(self.currency, self.context.babel_locale)
        index = 1 if negative else 0
        rendered = f"{self.pattern.prefix[index]}{text}{self.pattern.suffix[index]}"
        return rendered.replace("\xa4", symbol)


def create_currency_formatter(currency: str, locale: str) -> CurrencyFormatter:
    """Build a reusable formatter for one currency and locale.

    Args:
        currency: ISO 4217 code
        locale: Locale tag

    Returns:
        CurrencyFormatter; call it with amounts

    Examples:
        >>> format_ngn = create_currency_formatter("NGN", "en-NG")
        >>> format_ngn(1_000_000)
        '₦1,000,000.00'
    """
    ctx = LocaleContext.create(locale)
    return CurrencyFormatter(
        currency=currency.strip().upper(),
        locale=locale,
        context=ctx,
        pattern=ctx.currency_pattern(),
    )
