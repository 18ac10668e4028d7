"""Language models: active site languages and static UI strings."""

from datetime import datetime
from app import db
from app.constants.languages import DEFAULT_LANGUAGE, DEFAULT_LANGUAGES


class LanguageSetting(db.Model):
    """A language the public site can be viewed in."""
    
    __tablename__ = 'language_settings'
    
    id = db.Column(db.Integer, primary_key=True)
    language_code = db.Column(db.String(10), nullable=False, unique=True)
    language_name = db.Column(db.String(100), nullable=False)
    native_name = db.Column(db.String(100), nullable=False)
    is_default = db.Column(db.Boolean, default=False, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)
    
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def to_dict(self):
        """Convert language setting to dictionary."""
        return {
            'language_code': self.language_code,
            'language_name': self.language_name,
            'native_name': self.native_name,
            'is_default': self.is_default,
            'display_order': self.display_order
        }
    
    @classmethod
    def active_languages(cls):
        """Get active languages in display order."""
        return cls.query.filter_by(is_active=True).order_by(cls.display_order.asc()).all()
    
    @classmethod
    def default_code(cls):
        """Get the default active language code, falling back to English."""
        default = cls.query.filter_by(is_active=True, is_default=True).first()
        return default.language_code if default else DEFAULT_LANGUAGE


class UiTranslation(db.Model):
    """A static interface string in one language."""
    
    __tablename__ = 'ui_translations'
    
    id = db.Column(db.Integer, primary_key=True)
    language_code = db.Column(db.String(10), nullable=False, index=True)
    translation_key = db.Column(db.String(255), nullable=False)
    translation_value = db.Column(db.Text, nullable=False)
    
    __table_args__ = (
        db.UniqueConstraint('language_code', 'translation_key', name='unique_ui_translation'),
    )
    
    def to_dict(self):
        """Convert UI translation to dictionary."""
        return {
            'language_code': self.language_code,
            'translation_key': self.translation_key,
            'translation_value': self.translation_value
        }
    
    @classmethod
    def as_map(cls, language_code):
        """Get all strings for a language as {key: value}."""
        rows = cls.query.filter_by(language_code=language_code).all()
        return {row.translation_key: row.translation_value for row in rows}


def seed_default_languages():
    """Insert the default languages when none exist. Returns the number added."""
    if LanguageSetting.query.count() > 0:
        return 0
    
    for order, (code, name, native) in enumerate(DEFAULT_LANGUAGES):
        db.session.add(LanguageSetting(
            language_code=code,
            language_name=name,
            native_name=native,
            is_default=(code == DEFAULT_LANGUAGE),
            is_active=True,
            display_order=order
        ))
    db.session.commit()
    return len(DEFAULT_LANGUAGES)
