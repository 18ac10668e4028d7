"""Language routes - site languages, static UI strings and localized content."""

from flask import Blueprint, request, jsonify
from app.models import LanguageSetting, UiTranslation
from app.constants.languages import normalize_language
from app.routes import get_translation_service
from app.services.localization import Localizer

languages_bp = Blueprint('languages', __name__)


@languages_bp.route('/languages', methods=['GET'])
def get_languages():
    """Get active site languages in display order."""
    try:
        languages = LanguageSetting.active_languages()
        return jsonify({
            'languages': [language.to_dict() for language in languages],
            'default': LanguageSetting.default_code()
        }), 200
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@languages_bp.route('/translations/<string:language_code>', methods=['GET'])
def get_ui_translations(language_code):
    """Get static interface strings for a language as {key: value}."""
    try:
        code = normalize_language(language_code)
        return jsonify({
            'language_code': code,
            'translations': UiTranslation.as_map(code)
        }), 200
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@languages_bp.route('/localize', methods=['POST'])
def localize_content():
    """Translate content from the site default language into a visitor language.
    
    Body:
    - language: Visitor language code
    - fields: Field names to translate
    - records: List of records (or record: a single record)
    
    Records are returned untouched when the visitor uses the default language.
    """
    data = request.get_json(silent=True) or {}
    
    language = data.get('language')
    fields = data.get('fields')
    if not isinstance(language, str) or not language.strip():
        return jsonify({'error': 'language is required'}), 400
    if not isinstance(fields, list) or not all(isinstance(f, str) for f in fields):
        return jsonify({'error': 'fields must be a list of strings'}), 400
    
    try:
        localizer = Localizer.for_language(get_translation_service(), language)
        
        if isinstance(data.get('record'), dict):
            return jsonify({
                'language': localizer.language,
                'record': localizer.translate_content(data['record'], fields)
            }), 200
        
        records = data.get('records')
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            return jsonify({'error': 'record or records is required'}), 400
        
        return jsonify({
            'language': localizer.language,
            'records': localizer.translate_list(records, fields)
        }), 200
    except Exception as e:
        return jsonify({'error': str(e)}), 500
