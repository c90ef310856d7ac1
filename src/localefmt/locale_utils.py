"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

__all__ = [
    "locale_territory",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling normalizes at the Babel boundary with this function
    and uses the normalized form for cache keys and table lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en_CA")  # Already normalized
        'en_CA'
    """
    return locale_code.strip().replace("-", "_")


def locale_territory(locale_code: str) -> str | None:
    """Return the territory part of a locale code, if any.

    Purely syntactic: no CLDR lookup, never raises.

    Example:
        >>> locale_territory("fr-CA")
        'CA'
        >>> locale_territory("fr") is None
        True
    """
    parts = normalize_locale(locale_code).split("_")
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():  # noqa: PLR2004 - ISO 3166 alpha-2
            return part.upper()
        if len(part) == 3 and part.isdigit():  # noqa: PLR2004 - UN M.49 region
            return part
    return None
