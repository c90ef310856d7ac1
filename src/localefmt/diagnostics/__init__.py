"""Diagnostic system for localefmt.

Provides structured diagnostics for recovered input errors and the
exception hierarchy for the few errors that are not recovered.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CurrencyPairError, LocaleFormatError
from .templates import DiagnosticTemplate

__all__ = [
    "CurrencyPairError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticTemplate",
    "LocaleFormatError",
]
