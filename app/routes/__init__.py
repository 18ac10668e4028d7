"""Routes package for the translation backend."""

from flask import current_app


def get_translation_service():
    """Get the TranslationService attached to the current app."""
    return current_app.extensions['translation_service']


def register_routes(app):
    """Register all route blueprints with the application."""
    from .translate import translate_bp
    from .languages import languages_bp
    
    app.register_blueprint(translate_bp, url_prefix='/api/translate')
    app.register_blueprint(languages_bp, url_prefix='/api')
