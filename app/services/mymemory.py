"""MyMemory translation API client.

GET <base_url>?q=<text>&langpair=<source>|<target>

Success body:
    {"responseStatus": 200, "responseData": {"translatedText": "..."}}
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

MYMEMORY_API = 'https://api.mymemory.translated.net/get'
DEFAULT_TIMEOUT = 10.0


class TranslationProviderError(Exception):
    """Network failure or unreadable response from the provider. Retryable."""


@dataclass
class ProviderResponse:
    """HTTP status plus decoded JSON body (None for non-2xx responses)."""
    
    status_code: int
    payload: Optional[dict] = None
    
    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
    
    @property
    def rate_limited(self) -> bool:
        return self.status_code == 429


def extract_translation(payload) -> Optional[str]:
    """Return the translated text from a MyMemory body, or None if malformed."""
    if not isinstance(payload, dict):
        return None
    if str(payload.get('responseStatus')) != '200':
        return None
    data = payload.get('responseData')
    if not isinstance(data, dict):
        return None
    translated = data.get('translatedText')
    if isinstance(translated, str) and translated:
        return translated
    return None


class MyMemoryClient:
    """Thin requests wrapper around the MyMemory /get endpoint."""
    
    def __init__(self, base_url=MYMEMORY_API, timeout=DEFAULT_TIMEOUT, email=None, session=None):
        self.base_url = base_url
        self.timeout = timeout
        # A contact email raises MyMemory's free daily quota
        self.email = email
        self.session = session or requests.Session()
    
    def fetch(self, text: str, source_code: str, target_code: str) -> ProviderResponse:
        """
        Send one translation request.
        
        Raises:
            TranslationProviderError: on network errors or an undecodable 2xx body.
        """
        params = {
            'q': text,
            'langpair': f'{source_code}|{target_code}',
        }
        if self.email:
            params['de'] = self.email
        
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TranslationProviderError(f"MyMemory request failed: {e}") from e
        
        result = ProviderResponse(status_code=response.status_code)
        if not result.ok:
            return result
        
        try:
            result.payload = response.json()
        except ValueError as e:
            raise TranslationProviderError(f"MyMemory returned invalid JSON: {e}") from e
        return result
