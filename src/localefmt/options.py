"""Options resolution: domain defaults, presets and currency tables.

Every entry point resolves its options here before delegating to
LocaleContext. Resolution is a shallow, order-independent merge of caller
overrides over a read-only default bag; option values outside their allowed
set are replaced by the default with a logged warning.

Static tables:
    DEFAULT_OPTIONS: Default option bag per FormatDomain
    DATETIME_PRESETS: DateTimePreset -> date/time options bag
    LOCALE_CURRENCIES: Locale -> currencies considered valid for it
    STRICT_LOCALE_CURRENCY_PAIRS: Closed set of (locale, currency) pairs

All tables are immutable (MappingProxyType, tuple, frozenset) and safe to
share across threads.

Python 3.13+. Uses Babel for CLDR territory currencies.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Literal

from babel.numbers import get_territory_currencies

from localefmt.constants import DEFAULT_CURRENCY, DEFAULT_LOCALE, MAX_FRACTION_DIGITS
from localefmt.diagnostics import CurrencyPairError, DiagnosticTemplate
from localefmt.enums import CompactDisplay, DateTimePreset, FormatDomain
from localefmt.locale_utils import locale_territory, normalize_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_OPTIONS",
    "resolve_options",
    "coerce_choice",
    "coerce_digits",
    # Date/time presets
    "DATETIME_PRESETS",
    "resolve_datetime_options",
    # Compact notation
    "CompactNotation",
    "StandardNotation",
    "resolve_compact_notation",
    # Currency tables
    "LOCALE_CURRENCIES",
    "STRICT_LOCALE_CURRENCY_PAIRS",
    "StrictCurrency",
    "StrictLocale",
    "resolve_currency",
    "validate_currency_pair",
]

logger = logging.getLogger(__name__)

# ============================================================================
# DOMAIN DEFAULTS
# ============================================================================

DEFAULT_OPTIONS: Mapping[FormatDomain, Mapping[str, Any]] = MappingProxyType({
    FormatDomain.CURRENCY: MappingProxyType({
        "locale": DEFAULT_LOCALE,
        "currency": DEFAULT_CURRENCY,
        "currency_display": "symbol",
    }),
    FormatDomain.PERCENTAGE: MappingProxyType({"fraction_digits": 2}),
    FormatDomain.DECIMAL: MappingProxyType({"decimals": 2, "locale": DEFAULT_LOCALE}),
    FormatDomain.NUMBER: MappingProxyType({"locale": DEFAULT_LOCALE}),
    FormatDomain.COMPACT: MappingProxyType({
        "locale": DEFAULT_LOCALE,
        "notation": "compact",
        "compact_display": "short",
    }),
    FormatDomain.UNIT: MappingProxyType({
        "unit": "kilogram",
        "unit_display": "short",
        "locale": DEFAULT_LOCALE,
    }),
    FormatDomain.DATETIME: MappingProxyType({
        "locale": DEFAULT_LOCALE,
        "options": DateTimePreset.FULL.value,
    }),
    FormatDomain.RELATIVE_TIME: MappingProxyType({
        "unit": "day",
        "locale": DEFAULT_LOCALE,
        "numeric": "always",
        "style": "long",
        "plain": False,
    }),
    FormatDomain.LIST: MappingProxyType({
        "locale": DEFAULT_LOCALE,
        "style": "long",
        "type": "conjunction",
    }),
})


def resolve_options(
    domain: FormatDomain | str,
    overrides: Mapping[str, Any] | None = None,
    /,
    **kwargs: Any,
) -> dict[str, Any]:
    """Merge caller overrides over a domain's default options.

    The merge is shallow: a key present in the overrides replaces the default,
    absent keys keep the default. A None value counts as absent, matching the
    None defaults of the entry-point signatures. Keys unknown to the domain are
    carried through unchanged.

    Args:
        domain: Formatting domain (FormatDomain member or its value)
        overrides: Optional mapping of overrides
        **kwargs: Additional overrides; these win over the mapping

    Returns:
        New dict with the resolved options

    Raises:
        KeyError: If domain is not a known FormatDomain (programming error)

    Examples:
        >>> resolve_options(FormatDomain.DECIMAL, decimals=4)
        {'decimals': 4, 'locale': 'en-US'}
        >>> resolve_options("unit", {"unit": "liter"}, locale=None)
        {'unit': 'liter', 'unit_display': 'short', 'locale': 'en-US'}
    """
    try:
        key = FormatDomain(domain)
    except ValueError:
        raise KeyError(domain) from None
    resolved = dict(DEFAULT_OPTIONS[key])
    for source in (overrides or {}, kwargs):
        resolved.update({key: value for key, value in source.items() if value is not None})
    return resolved


def coerce_choice[T](
    option: str,
    value: T,
    choices: tuple[T, ...],
    default: T,
    function_name: str,
) -> T:
    """Return value if it is one of choices, else warn and return default."""
    if value in choices:
        return value
    diagnostic = DiagnosticTemplate.option_invalid(option, value, default, function_name)
    logger.warning("%s", diagnostic.format_warning())
    return default


def coerce_digits(option: str, value: object, default: int, function_name: str) -> int:
    """Validate a fraction-digit option.

    Args:
        option: Option name for diagnostics
        value: Caller-supplied value
        default: Value used when the caller's value is rejected
        function_name: Entry point name for diagnostics

    Returns:
        value when it is an int in 0..MAX_FRACTION_DIGITS, otherwise default
    """
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_FRACTION_DIGITS
    ):
        return value
    diagnostic = DiagnosticTemplate.option_invalid(option, value, default, function_name)
    logger.warning("%s", diagnostic.format_warning())
    return default


# ============================================================================
# DATE/TIME PRESETS
# ============================================================================

DATETIME_PRESETS: Mapping[str, Mapping[str, str | bool]] = MappingProxyType({
    DateTimePreset.SHORT: MappingProxyType({
        "year": "2-digit",
        "month": "2-digit",
        "day": "2-digit",
        "hour": "2-digit",
        "minute": "2-digit",
    }),
    DateTimePreset.LONG: MappingProxyType({
        "year": "numeric",
        "month": "long",
        "day": "numeric",
        "hour": "numeric",
        "minute": "numeric",
    }),
    DateTimePreset.FULL: MappingProxyType({
        "year": "numeric",
        "month": "long",
        "day": "numeric",
        "hour": "numeric",
        "minute": "numeric",
        "second": "numeric",
        "hour12": False,
    }),
    DateTimePreset.DATE_ONLY: MappingProxyType({
        "year": "numeric",
        "month": "short",
        "day": "numeric",
    }),
    DateTimePreset.TIME_ONLY: MappingProxyType({
        "hour": "numeric",
        "minute": "numeric",
        "second": "numeric",
    }),
})

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(key: str) -> str:
    """Convert an Intl-style camelCase option name to snake_case.

    Examples:
        >>> _to_snake_case("timeZoneName")
        'time_zone_name'
        >>> _to_snake_case("hour12")
        'hour12'
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def resolve_datetime_options(options: Mapping[str, Any] | str | None) -> dict[str, Any]:
    """Resolve a preset name or literal options bag to a date/time options bag.

    A preset name is looked up in DATETIME_PRESETS; an unknown name yields an
    empty bag so formatting proceeds with locale defaults. A mapping bypasses
    the preset table entirely; its keys may be snake_case or Intl-style
    camelCase (timeZone, hour12, dateStyle).

    Args:
        options: Preset name, options mapping, or None for the "full" preset

    Returns:
        New dict with snake_case option names

    Examples:
        >>> resolve_datetime_options("dateOnly")
        {'year': 'numeric', 'month': 'short', 'day': 'numeric'}
        >>> resolve_datetime_options("nope")
        {}
        >>> resolve_datetime_options({"timeZone": "UTC", "hour12": True})
        {'time_zone': 'UTC', 'hour12': True}
    """
    if options is None:
        return dict(DATETIME_PRESETS[DateTimePreset.FULL])
    if isinstance(options, str):
        preset = DATETIME_PRESETS.get(options)
        if preset is None:
            logger.debug("%s", DiagnosticTemplate.preset_unknown(options).format_warning())
            return {}
        return dict(preset)
    if isinstance(options, Mapping):
        return {_to_snake_case(str(key)): value for key, value in options.items()}
    diagnostic = DiagnosticTemplate.option_invalid("options", options, {}, "format_datetime")
    logger.warning("%s", diagnostic.format_warning())
    return {}


# ============================================================================
# COMPACT NOTATION
# ============================================================================


@dataclass(frozen=True, slots=True)
class CompactNotation:
    """Abbreviated notation (1K, 6.5 thousand).

    Attributes:
        compact_display: "short" (1K) or "long" (1 thousand)
    """

    notation: ClassVar[Literal["compact"]] = "compact"

    compact_display: CompactDisplay = "short"


@dataclass(frozen=True, slots=True)
class StandardNotation:
    """Regular locale notation (1,000). Carries no compact display."""

    notation: ClassVar[Literal["standard"]] = "standard"


def resolve_compact_notation(
    notation: str | None,
    compact_display: str | None,
    function_name: str = "format_compact_number",
) -> CompactNotation | StandardNotation:
    """Build the notation variant for compact number formatting.

    compact_display only exists on the compact variant; under standard
    notation it is dropped silently.

    Examples:
        >>> resolve_compact_notation(None, "long")
        CompactNotation(compact_display='long')
        >>> resolve_compact_notation("standard", "long")
        StandardNotation()
    """
    defaults = DEFAULT_OPTIONS[FormatDomain.COMPACT]
    resolved = coerce_choice(
        "notation",
        notation if notation is not None else defaults["notation"],
        ("compact", "standard"),
        defaults["notation"],
        function_name,
    )
    if resolved == "standard":
        return StandardNotation()
    display = coerce_choice(
        "compact_display",
        compact_display if compact_display is not None else defaults["compact_display"],
        ("short", "long"),
        defaults["compact_display"],
        function_name,
    )
    return CompactNotation(compact_display=display)


# ============================================================================
# CURRENCY TABLES
# ============================================================================

# Locale -> currencies valid for it; the first entry is the locale default.
# Every currency is legal tender in the locale's territory per CLDR.
LOCALE_CURRENCIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # North America
    "en_US": ("USD",),
    "en_CA": ("CAD",),
    "fr_CA": ("CAD",),
    "es_MX": ("MXN",),
    # Europe - Eurozone
    "de_DE": ("EUR",),
    "fr_FR": ("EUR",),
    "es_ES": ("EUR",),
    "it_IT": ("EUR",),
    "nl_NL": ("EUR",),
    "pt_PT": ("EUR",),
    # Europe - Non-Eurozone
    "en_GB": ("GBP",),
    "de_CH": ("CHF",),
    "fr_CH": ("CHF",),
    "sv_SE": ("SEK",),
    "pl_PL": ("PLN",),
    # Asia-Pacific
    "ja_JP": ("JPY",),
    "zh_CN": ("CNY",),
    "ko_KR": ("KRW",),
    "hi_IN": ("INR",),
    "en_IN": ("INR",),
    "en_AU": ("AUD",),
    "en_NZ": ("NZD",),
    # Africa / South America
    "en_NG": ("NGN",),
    "en_ZA": ("ZAR",),
    "pt_BR": ("BRL",),
})

STRICT_LOCALE_CURRENCY_PAIRS: frozenset[tuple[str, str]] = frozenset(
    (locale, currency)
    for locale, currencies in LOCALE_CURRENCIES.items()
    for currency in currencies
)

# Static-checker view of the strict pairs; kept in sync with LOCALE_CURRENCIES.
type StrictLocale = Literal[
    "en-US", "en-CA", "fr-CA", "es-MX",
    "de-DE", "fr-FR", "es-ES", "it-IT", "nl-NL", "pt-PT",
    "en-GB", "de-CH", "fr-CH", "sv-SE", "pl-PL",
    "ja-JP", "zh-CN", "ko-KR", "hi-IN", "en-IN", "en-AU", "en-NZ",
    "en-NG", "en-ZA", "pt-BR",
]
type StrictCurrency = Literal[
    "USD", "CAD", "MXN", "EUR", "GBP", "CHF", "SEK", "PLN",
    "JPY", "CNY", "KRW", "INR", "AUD", "NZD", "NGN", "ZAR", "BRL",
]


def _locale_key(locale_code: str) -> str:
    """Canonical table key: lowercase language, uppercase region.

    Example:
        >>> _locale_key("EN-gb")
        'en_GB'
    """
    language, *rest = normalize_locale(locale_code).split("_")
    subtags = [language.lower()]
    for part in rest:
        subtags.append(part.title() if len(part) == 4 else part.upper())  # noqa: PLR2004 - script
    return "_".join(subtags)


def resolve_currency(locale: str | None, currency: str | None) -> tuple[str, str]:
    """Resolve the (locale, currency) pair for permissive currency formatting.

    Resolution order when currency is absent:
    1. First entry of LOCALE_CURRENCIES for the locale
    2. First CLDR legal-tender currency of the locale's territory
    3. DEFAULT_CURRENCY

    When both are supplied, the pair passes through verbatim.

    Args:
        locale: Locale tag or None for DEFAULT_LOCALE
        currency: ISO 4217 code or None

    Returns:
        Tuple of (locale, currency)

    Examples:
        >>> resolve_currency("en-GB", None)
        ('en-GB', 'GBP')
        >>> resolve_currency("en-GB", "JPY")
        ('en-GB', 'JPY')
        >>> resolve_currency(None, None)
        ('en-US', 'USD')
    """
    resolved_locale = locale if locale is not None else DEFAULT_LOCALE
    if currency is not None:
        return resolved_locale, currency
    if locale is None:
        return resolved_locale, DEFAULT_CURRENCY

    known = LOCALE_CURRENCIES.get(_locale_key(locale))
    if known:
        return resolved_locale, known[0]

    territory = locale_territory(locale)
    if territory is not None:
        territory_currencies = get_territory_currencies(territory)
        if territory_currencies:
            return resolved_locale, territory_currencies[0]

    logger.debug("No currency known for locale '%s'; using %s", locale, DEFAULT_CURRENCY)
    return resolved_locale, DEFAULT_CURRENCY


def validate_currency_pair(locale: str, currency: str) -> tuple[str, str]:
    """Reject locale/currency pairs outside STRICT_LOCALE_CURRENCY_PAIRS.

    Matching ignores locale separator style and letter case ("en-GB",
    "en_gb") and currency letter case. Never substitutes a currency.

    Args:
        locale: Locale tag
        currency: ISO 4217 code

    Returns:
        Tuple of (locale, currency) with the currency code uppercased

    Raises:
        CurrencyPairError: If the pair is not in the strict set
    """
    if (
        isinstance(locale, str)
        and isinstance(currency, str)
        and (_locale_key(locale), currency.strip().upper()) in STRICT_LOCALE_CURRENCY_PAIRS
    ):
        return locale, currency.strip().upper()
    diagnostic = DiagnosticTemplate.currency_pair_invalid(str(locale), str(currency))
    raise CurrencyPairError(diagnostic, locale=str(locale), currency=str(currency))
