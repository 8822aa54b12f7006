"""Locale data and resolution."""

from .models import LocaleData
from .resolver import (
    FALLBACK_LOCALE,
    available_locales,
    register_locale,
    reset_locales,
    resolve_locale,
)

__all__ = [
    "FALLBACK_LOCALE",
    "LocaleData",
    "available_locales",
    "register_locale",
    "reset_locales",
    "resolve_locale",
]
