"""Core utilities shared across runtime and formatter layers.

Exports:
    FormattingError: Exception raised when locale formatting fails

Python 3.13+.
"""

from .errors import FormattingError

__all__ = ["FormattingError"]
