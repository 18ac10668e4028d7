"""Visitor-facing localization helpers.

A Localizer binds the translation service to the visitor's language.
Static interface labels come from ui_translations; site content is
machine-translated from the default language on demand.
"""

from app.constants.languages import DEFAULT_LANGUAGE, normalize_language


class Localizer:
    """Translate content into one visitor language."""
    
    def __init__(self, service, language, default_language=DEFAULT_LANGUAGE, strings=None):
        self.service = service
        self.language = normalize_language(language)
        self.default_language = normalize_language(default_language)
        self.strings = strings or {}
    
    @classmethod
    def for_language(cls, service, language):
        """Build a Localizer from the language tables. Needs an app context."""
        from app.models import LanguageSetting, UiTranslation
        
        code = normalize_language(language)
        return cls(
            service,
            code,
            default_language=LanguageSetting.default_code(),
            strings=UiTranslation.as_map(code)
        )
    
    @property
    def is_default(self) -> bool:
        return self.language == self.default_language
    
    def t(self, key, fallback=None):
        """Look up a static label: stored string, then fallback, then the key itself."""
        return self.strings.get(key) or fallback or key
    
    def translate(self, text):
        if self.is_default:
            return text
        return self.service.translate(text, self.language, self.default_language)
    
    def translate_content(self, record, fields):
        if self.is_default:
            return record
        return self.service.translate_fields(record, fields, self.language, self.default_language)
    
    def translate_list(self, records, fields):
        if self.is_default:
            return records
        return self.service.translate_fields_for_each(
            records, fields, self.language, self.default_language
        )
