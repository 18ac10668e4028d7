"""Translation routes - machine translation of site content."""

from flask import Blueprint, request, jsonify
from app.constants.languages import DEFAULT_LANGUAGE
from app.routes import get_translation_service
from app.utils.auth import admin_required
import logging

logger = logging.getLogger(__name__)

translate_bp = Blueprint('translate', __name__)


def _language_args(data):
    """Return (target, source, error) from a request body."""
    target = data.get('target')
    source = data.get('source', DEFAULT_LANGUAGE)
    if not isinstance(target, str) or not target.strip():
        return None, None, 'target is required'
    if not isinstance(source, str):
        return None, None, 'source must be a string'
    return target, source, None


def _fields_arg(data):
    fields = data.get('fields')
    if not isinstance(fields, list) or not all(isinstance(f, str) for f in fields):
        return None
    return fields


@translate_bp.route('', methods=['POST'])
def translate_text():
    """Translate a single text.
    
    Body:
    - text: Text to translate (may contain HTML)
    - target: Target language code
    - source: Source language code (default: en)
    """
    data = request.get_json(silent=True) or {}
    
    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({'error': 'text is required'}), 400
    
    target, source, error = _language_args(data)
    if error:
        return jsonify({'error': error}), 400
    
    try:
        outcome = get_translation_service().translate_with_outcome(text, target, source)
        return jsonify({
            'translated_text': outcome.text,
            'status': outcome.status.value
        }), 200
    except Exception as e:
        logger.error(f"Translate endpoint error: {e}")
        # Degrade to the original text, never to an error page
        return jsonify({'translated_text': text, 'status': 'failed'}), 200


@translate_bp.route('/record', methods=['POST'])
def translate_record():
    """Translate named string fields of one record.
    
    Body:
    - record: Object to translate
    - fields: List of field names
    - target / source: Language codes
    """
    data = request.get_json(silent=True) or {}
    
    record = data.get('record')
    fields = _fields_arg(data)
    if not isinstance(record, dict) or fields is None:
        return jsonify({'error': 'record (object) and fields (list of strings) are required'}), 400
    
    target, source, error = _language_args(data)
    if error:
        return jsonify({'error': error}), 400
    
    try:
        translated = get_translation_service().translate_fields(record, fields, target, source)
        return jsonify({'record': translated}), 200
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@translate_bp.route('/records', methods=['POST'])
def translate_records():
    """Translate named string fields of each record in a list, in order."""
    data = request.get_json(silent=True) or {}
    
    records = data.get('records')
    fields = _fields_arg(data)
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records) or fields is None:
        return jsonify({'error': 'records (list of objects) and fields (list of strings) are required'}), 400
    
    target, source, error = _language_args(data)
    if error:
        return jsonify({'error': error}), 400
    
    try:
        translated = get_translation_service().translate_fields_for_each(records, fields, target, source)
        return jsonify({'records': translated}), 200
    except Exception as e:
        return jsonify({'error': str(e)}), 500


# ============================================================================
# ADMIN
# ============================================================================

@translate_bp.route('/status', methods=['GET'])
@admin_required
def translation_status():
    """Get cache, breaker and queue state."""
    return jsonify(get_translation_service().stats()), 200


@translate_bp.route('/reset', methods=['POST'])
@admin_required
def reset_translation_state():
    """Clear the memory cache and the rate-limit breaker."""
    service = get_translation_service()
    service.reset_translation_state()
    logger.info("Translation state reset by admin")
    return jsonify({'message': 'Translation state reset', 'stats': service.stats()}), 200
