"""Shared authentication utilities.

This module provides the admin decorator used by the translation
management endpoints. Admin requests carry the shared secret in the
X-Admin-Secret header.
"""

from functools import wraps
from flask import request, jsonify, current_app
import hmac


def check_admin_secret():
    """Check if request has valid admin secret via header only.
    
    Uses hmac.compare_digest for timing-safe comparison.
    """
    admin_secret = current_app.config.get('ADMIN_SECRET')
    if not admin_secret:
        # If ADMIN_SECRET is not set, admin endpoints are disabled
        return False
    secret = request.headers.get('X-Admin-Secret', '')
    return hmac.compare_digest(secret, admin_secret)


def admin_required(f):
    """
    Decorator to require the admin secret.
    
    Usage:
        @bp.route('/reset', methods=['POST'])
        @admin_required
        def reset():
            ...
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        if not check_admin_secret():
            return jsonify({'error': 'Admin access required'}), 403
        return f(*args, **kwargs)
    return decorated
