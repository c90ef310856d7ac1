"""Shared constants for localefmt.

This module provides centralized configuration constants used across the
normalization, options, and runtime layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Locale and currency used when callers omit them
- Cache limits: Memory bounds for the LocaleContext cache
- Option limits: Bounds for caller-supplied numeric options
- Fallback strings: Output used when formatting cannot proceed

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    "FALLBACK_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Option limits
    "MAX_FRACTION_DIGITS",
    # Fallback strings
    "FALLBACK_EMPTY",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used by every entry point when the caller passes none.
# BCP-47 form; normalized to POSIX (en_US) at the Babel boundary.
DEFAULT_LOCALE: str = "en-US"

# Currency used by format_currency() when neither currency nor a known
# locale is supplied.
DEFAULT_CURRENCY: str = "USD"

# Locale Babel falls back to when a locale tag is unknown or malformed.
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# Prevents unbounded memory growth in multi-locale applications.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# OPTION LIMITS
# ============================================================================

# Upper bound for fraction digit options (decimals, fraction_digits).
# Matches the historical Intl.NumberFormat limit; larger values are rejected
# with a warning and the domain default is used instead.
MAX_FRACTION_DIGITS: int = 20

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by date/time, list and relative-time formatting on invalid input.
FALLBACK_EMPTY: str = ""
