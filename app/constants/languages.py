"""Language constants — single source of truth for the backend.

Must stay in sync with the language_settings rows seeded by init_db.py.
"""

DEFAULT_LANGUAGE = 'en'

# App language code -> code expected by the MyMemory API.
# Unknown codes are passed through unchanged.
LANGUAGE_MAP = {
    'en': 'en',
    'ml': 'ml',
    'ta': 'ta',
    'kn': 'kn',
    'te': 'te',
    'hi': 'hi',
}

# (code, English name, native name) in display order
DEFAULT_LANGUAGES = [
    ('en', 'English', 'English'),
    ('ml', 'Malayalam', 'മലയാളം'),
    ('ta', 'Tamil', 'தமிழ்'),
    ('kn', 'Kannada', 'ಕನ್ನಡ'),
    ('te', 'Telugu', 'తెలుగు'),
    ('hi', 'Hindi', 'हिन्दी'),
]


def normalize_language(code: str | None) -> str:
    """Normalize a language code.

    - Lowercases and strips whitespace
    - Empty or missing codes fall back to DEFAULT_LANGUAGE
    """
    return (code or DEFAULT_LANGUAGE).strip().lower() or DEFAULT_LANGUAGE


def provider_code(code: str | None) -> str:
    """Normalize a language code and map it to the provider's code."""
    key = normalize_language(code)
    return LANGUAGE_MAP.get(key, key)
