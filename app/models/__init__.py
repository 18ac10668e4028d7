"""Database models for the translation backend."""

from .kv_entry import KeyValueEntry
from .language import LanguageSetting, UiTranslation, seed_default_languages

__all__ = ['KeyValueEntry', 'LanguageSetting', 'UiTranslation', 'seed_default_languages']
