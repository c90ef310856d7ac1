"""Helpers shared by the formatter entry points.

Python 3.13+.
"""

import logging

from localefmt.constants import DEFAULT_LOCALE
from localefmt.core.errors import FormattingError
from localefmt.diagnostics import DiagnosticTemplate
from localefmt.runtime.locale_context import LocaleContext

__all__ = ["context_for", "recover", "text_option"]

logger = logging.getLogger("localefmt.formatters")


def text_option(option: str, value: object, default: str, function_name: str) -> str:
    """Return a non-blank string option, or warn and return default."""
    if isinstance(value, str) and value.strip():
        return value
    diagnostic = DiagnosticTemplate.option_invalid(option, value, default, function_name)
    logger.warning("%s", diagnostic.format_warning())
    return default


def context_for(locale: object, function_name: str) -> LocaleContext:
    """LocaleContext for a caller-supplied locale; non-strings use DEFAULT_LOCALE."""
    return LocaleContext.create(text_option("locale", locale, DEFAULT_LOCALE, function_name))


def recover(error: FormattingError, function_name: str) -> str:
    """Log a FormattingError raised by LocaleContext and return its fallback."""
    diagnostic = DiagnosticTemplate.formatting_failed(
        str(error), function_name, error.fallback_value
    )
    logger.warning("%s", diagnostic.format_warning())
    return error.fallback_value
