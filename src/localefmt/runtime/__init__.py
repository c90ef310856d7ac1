"""Locale formatting runtime.

Wraps Babel behind LocaleContext, the single point where CLDR data is read.

Python 3.13+.
"""

from .locale_context import LocaleContext
from .skeletons import DateTimeSkeleton, build_skeleton, resolve_pattern

__all__ = [
    "DateTimeSkeleton",
    "LocaleContext",
    "build_skeleton",
    "resolve_pattern",
]
