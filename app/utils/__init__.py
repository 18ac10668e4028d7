"""Shared utilities for the translation backend.

This package contains reusable helpers that are shared across
services and route files.
"""

from app.utils.auth import admin_required, check_admin_secret
from app.utils.text import strip_markup, derive_key, persistent_key

__all__ = [
    'admin_required',
    'check_admin_secret',
    'strip_markup',
    'derive_key',
    'persistent_key',
]
