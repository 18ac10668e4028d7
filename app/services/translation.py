"""Translation service with two-tier caching, a global rate-limit breaker
and a single-flight request queue.

Translation is a presentation enhancement: nothing here raises to the
caller. Every failure degrades to the original text, and the typed
outcome records why.
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from app.constants.languages import DEFAULT_LANGUAGE, normalize_language, provider_code
from app.services.kv_store import build_store
from app.services.mymemory import (
    MyMemoryClient,
    TranslationProviderError,
    extract_translation,
)
from app.services.rate_limit import RateLimitBreaker, DEFAULT_COOLDOWN_SECONDS
from app.services.request_queue import SingleFlightQueue
from app.services.translation_cache import TranslationCache
from app.utils.text import derive_key, strip_markup

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 2
DEFAULT_BACKOFF_SECONDS = 1.2

# Exceptions treated as transient and retried with backoff
RETRYABLE_ERRORS = (TranslationProviderError, requests.RequestException, ValueError)


class OutcomeStatus(str, Enum):
    UNCHANGED = 'unchanged'        # short-circuit, nothing to translate
    CACHED = 'cached'
    TRANSLATED = 'translated'
    RATE_LIMITED = 'rate_limited'
    FAILED = 'failed'


@dataclass
class TranslationOutcome:
    """The text handed back to the caller and why it is that text."""
    
    text: str
    status: OutcomeStatus
    reason: Optional[str] = None
    
    @property
    def is_translated(self) -> bool:
        return self.status in (OutcomeStatus.CACHED, OutcomeStatus.TRANSLATED)


class TranslationService:
    """
    Translate site content through the provider with caching and throttling.
    
    One instance holds all process-wide translation state: the memory
    cache, the breaker and the request queue. Create it once per app and
    share it.
    """
    
    def __init__(
        self,
        client,
        store,
        cache=None,
        breaker=None,
        queue=None,
        max_attempts=DEFAULT_MAX_ATTEMPTS,
        backoff_seconds=DEFAULT_BACKOFF_SECONDS,
        sleep=time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError('max_attempts must be at least 1')
        self.client = client
        self.store = store
        self.cache = cache if cache is not None else TranslationCache(store)
        self.breaker = breaker if breaker is not None else RateLimitBreaker(store)
        self.queue = queue if queue is not None else SingleFlightQueue(max_concurrent=1)
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.sleep = sleep
    
    def translate_with_outcome(
        self, text: str, target_lang: str, source_lang: str = DEFAULT_LANGUAGE
    ) -> TranslationOutcome:
        """
        Translate text and report how the result was obtained.
        
        FAST PATHS (no API call):
        - Empty or whitespace-only text
        - Source and target language are the same
        - Nothing left after stripping markup
        - Rate-limit breaker open
        - Cached translation exists (memory, then durable store)
        
        Otherwise the request waits its turn in the single-flight queue.
        """
        if not text or not text.strip():
            return TranslationOutcome(text, OutcomeStatus.UNCHANGED, 'empty')
        
        source = normalize_language(source_lang)
        target = normalize_language(target_lang)
        if source == target:
            return TranslationOutcome(text, OutcomeStatus.UNCHANGED, 'same_language')
        
        clean = strip_markup(text)
        if not clean:
            return TranslationOutcome(text, OutcomeStatus.UNCHANGED, 'no_text')
        
        if self.breaker.is_open():
            return TranslationOutcome(text, OutcomeStatus.RATE_LIMITED, 'breaker_open')
        
        key = derive_key(clean, source, target)
        cached = self.cache.lookup(key)
        if cached:
            return TranslationOutcome(cached, OutcomeStatus.CACHED)
        
        return self.queue.run_exclusive(
            self._fetch_translation, text, clean, key,
            provider_code(source), provider_code(target)
        )
    
    def _fetch_translation(self, text, clean, key, source_code, target_code):
        """Call the provider with retries. Runs inside the queue."""
        # Another queued call may have tripped the breaker while we waited
        if self.breaker.is_open():
            return TranslationOutcome(text, OutcomeStatus.RATE_LIMITED, 'breaker_open')
        
        # ...or translated the same text
        cached = self.cache.lookup(key)
        if cached:
            return TranslationOutcome(cached, OutcomeStatus.CACHED)
        
        delay = self.backoff_seconds
        last_error = None
        
        for attempt in range(1, self.max_attempts + 1):
            try:
                response = self.client.fetch(clean, source_code, target_code)
            except RETRYABLE_ERRORS as e:
                last_error = e
                logger.warning(
                    f"Translation attempt {attempt}/{self.max_attempts} failed: {e}"
                )
                if attempt < self.max_attempts:
                    self.sleep(delay)
                    delay *= 2
                continue
            
            if response.rate_limited:
                self.breaker.trip()
                return TranslationOutcome(text, OutcomeStatus.RATE_LIMITED, 'http_429')
            
            if not response.ok:
                logger.warning(f"Translation provider returned HTTP {response.status_code}")
                return TranslationOutcome(
                    text, OutcomeStatus.FAILED, f'http_{response.status_code}'
                )
            
            translated = extract_translation(response.payload)
            if translated:
                self.cache.populate(key, translated)
                return TranslationOutcome(translated, OutcomeStatus.TRANSLATED)
            
            logger.warning("Translation provider returned an unexpected response format")
            return TranslationOutcome(text, OutcomeStatus.FAILED, 'malformed_response')
        
        return TranslationOutcome(text, OutcomeStatus.FAILED, f'network_error: {last_error}')
    
    def translate(self, text: str, target_lang: str, source_lang: str = DEFAULT_LANGUAGE) -> str:
        """
        Translate text to the target language.
        
        Args:
            text: Text to translate, may contain markup
            target_lang: Target language code
            source_lang: Source language code (default: en)
        
        Returns:
            Translated text (or original if translation fails/skipped)
        """
        try:
            return self.translate_with_outcome(text, target_lang, source_lang).text
        except Exception as e:
            logger.error(f"Unexpected translation error: {e}")
            return text
    
    def translate_fields(self, record: dict, fields, target_lang: str,
                         source_lang: str = DEFAULT_LANGUAGE) -> dict:
        """Translate the named string fields of a record. Returns a shallow copy."""
        if normalize_language(source_lang) == normalize_language(target_lang):
            return record
        
        translated = dict(record)
        for field in fields:
            value = record.get(field)
            if isinstance(value, str):
                translated[field] = self.translate(value, target_lang, source_lang)
        return translated
    
    def translate_fields_for_each(self, records: list, fields, target_lang: str,
                                  source_lang: str = DEFAULT_LANGUAGE) -> list:
        """Translate the named fields of each record, one record at a time."""
        if normalize_language(source_lang) == normalize_language(target_lang):
            return records
        
        results = []
        for record in records:
            results.append(self.translate_fields(record, fields, target_lang, source_lang))
        return results
    
    def reset_translation_state(self):
        """Clear the memory cache and close the breaker. Durable entries stay."""
        self.cache.clear_memory()
        self.breaker.reset()
    
    def stats(self) -> dict:
        """Snapshot of the service state for diagnostics."""
        return {
            'memory_entries': len(self.cache),
            'rate_limited': self.breaker.is_open(),
            'rate_limited_until': self.breaker.limited_until or None,
            'queue_active': self.queue.active,
            'queue_waiting': self.queue.waiting,
        }


def create_translation_service(config) -> TranslationService:
    """Build the service from a Flask config mapping."""
    store = build_store(config.get('TRANSLATION_STORE'), config.get('REDIS_URL'))
    client = MyMemoryClient(
        base_url=config.get('TRANSLATION_API_URL'),
        timeout=config.get('TRANSLATION_TIMEOUT'),
        email=config.get('TRANSLATION_CONTACT_EMAIL') or None,
    )
    breaker = RateLimitBreaker(
        store, cooldown_seconds=config.get('TRANSLATION_COOLDOWN_SECONDS', DEFAULT_COOLDOWN_SECONDS)
    )
    service = TranslationService(
        client,
        store,
        breaker=breaker,
        max_attempts=config.get('TRANSLATION_MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS),
        backoff_seconds=config.get('TRANSLATION_BACKOFF_SECONDS', DEFAULT_BACKOFF_SECONDS),
    )
    logger.info(
        f"Translation service ready (store={type(store).__name__}, "
        f"max_attempts={service.max_attempts}, backoff={service.backoff_seconds}s)"
    )
    return service
