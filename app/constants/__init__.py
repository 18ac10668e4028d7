"""Shared constants for the application."""

from app.constants.languages import (
    DEFAULT_LANGUAGE,
    LANGUAGE_MAP,
    DEFAULT_LANGUAGES,
    normalize_language,
    provider_code,
)

__all__ = [
    'DEFAULT_LANGUAGE',
    'LANGUAGE_MAP',
    'DEFAULT_LANGUAGES',
    'normalize_language',
    'provider_code',
]
