"""Shared text helpers for translation.

The cache key is always derived from the stripped text, so a rich HTML
field and its plain-text equivalent share one cache entry.
"""

import re

from app.constants.languages import provider_code

_TAG_RE = re.compile(r'<[^>]*>')
_WHITESPACE_RE = re.compile(r'\s+')

# Namespace for per-string entries in the durable store
PERSISTENT_PREFIX = 'tr_'


def strip_markup(text):
    """
    Remove markup tags and collapse whitespace.
    
    Every tag is replaced by a single space, runs of whitespace collapse
    to one space and the result is trimmed.
    
    Usage:
        strip_markup('<p>Hello   <b>world</b></p>')  # 'Hello world'
    """
    text = _TAG_RE.sub(' ', text or '')
    return _WHITESPACE_RE.sub(' ', text).strip()


def derive_key(text: str, source_lang: str, target_lang: str) -> str:
    """Build the cache key for a (source, target, stripped text) triple."""
    return f"{provider_code(source_lang)}-{provider_code(target_lang)}-{strip_markup(text)}"


def persistent_key(key: str) -> str:
    """Namespace a cache key for the durable store."""
    return f"{PERSISTENT_PREFIX}{key}"
