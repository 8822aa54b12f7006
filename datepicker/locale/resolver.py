"""Locale resolution: identifier -> LocaleData, never failing the caller."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import LocaleDataError
from .models import LocaleData

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"
_LOCALE_TABLE_PATH = Path(__file__).with_name("locales.yaml")

_registry: dict[str, LocaleData] = {}


def _normalize(identifier: str) -> str:
    return identifier.strip().replace("_", "-").lower()


def _load_builtin_locales() -> dict[str, LocaleData]:
    """Load the packaged locale table."""
    with _LOCALE_TABLE_PATH.open(encoding="utf-8") as f:
        raw_table = yaml.safe_load(f) or {}

    table = {}
    for identifier, data in raw_table.items():
        table[_normalize(identifier)] = LocaleData(**data)
    logger.debug(f"Loaded {len(table)} built-in locales from {_LOCALE_TABLE_PATH.name}")
    return table


def _ensure_loaded() -> dict[str, LocaleData]:
    if not _registry:
        _registry.update(_load_builtin_locales())
    return _registry


def available_locales() -> list[str]:
    """Return the normalized identifiers of every known locale."""
    return sorted(_ensure_loaded())


def register_locale(identifier: str, data: Union[LocaleData, dict[str, Any]]) -> LocaleData:
    """Add or replace a locale.

    Args:
        identifier: Locale identifier such as ``"de-AT"``
        data: LocaleData instance or a mapping of its fields

    Returns:
        The registered LocaleData

    Raises:
        LocaleDataError: If the data violates the locale invariants
    """
    if not identifier or not identifier.strip():
        raise LocaleDataError("Locale identifier cannot be empty")

    locale_data = data if isinstance(data, LocaleData) else LocaleData(**data)
    key = _normalize(identifier)
    _ensure_loaded()[key] = locale_data
    logger.debug(f"Registered locale: {key}")
    return locale_data


def reset_locales() -> None:
    """Drop runtime registrations and reload the built-in table (primarily for testing)."""
    _registry.clear()


def resolve_locale(identifier: Optional[str] = None, default: Optional[str] = None) -> LocaleData:
    """Resolve a locale identifier to its LocaleData.

    Lookup order: exact (normalized) identifier, language prefix (``de-AT`` ->
    ``de``), the ``default`` identifier, then English.

    Args:
        identifier: Locale identifier, may be None or unknown
        default: Identifier used when ``identifier`` does not resolve

    Returns:
        LocaleData for the best matching locale
    """
    table = _ensure_loaded()

    for candidate in (identifier, default):
        if not candidate or not candidate.strip():
            continue
        key = _normalize(candidate)
        if key in table:
            return table[key]
        language = key.split("-", 1)[0]
        if language in table:
            logger.debug(f"Locale {candidate!r} resolved by language prefix {language!r}")
            return table[language]

    if identifier:
        logger.debug(f"Unknown locale {identifier!r}, falling back to {FALLBACK_LOCALE!r}")
    return table[FALLBACK_LOCALE]
