"""
Pytest configuration and fixtures for testing the translation backend.
"""

import os
import sys
import threading
import time
from collections import deque

import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app, db
from app.services.kv_store import MemoryStore
from app.services.mymemory import ProviderResponse
from app.services.rate_limit import RateLimitBreaker
from app.services.translation import TranslationService

fake = Faker()

ADMIN_SECRET = 'test-admin-secret'


def ok_response(translated):
    """A successful MyMemory response body."""
    return ProviderResponse(200, {
        'responseStatus': 200,
        'responseData': {'translatedText': translated}
    })


class FakeTranslationClient:
    """Stands in for MyMemoryClient and records every call.
    
    Scripted items (ProviderResponse or Exception) are consumed first;
    afterwards every text translates to '[<target>] <text>'.
    """
    
    def __init__(self, *scripted):
        self.calls = []
        self.scripted = deque(scripted)
    
    def script(self, *items):
        self.scripted.extend(items)
    
    def fetch(self, text, source_code, target_code):
        self.calls.append((text, source_code, target_code))
        if self.scripted:
            item = self.scripted.popleft()
            if isinstance(item, Exception):
                raise item
            return item
        return ok_response(f'[{target_code}] {text}')
    
    @property
    def texts(self):
        return [call[0] for call in self.calls]


class FakeClock:
    """Controllable replacement for time.time."""
    
    def __init__(self, start=1_700_000_000.0):
        self.now = start
    
    def __call__(self):
        return self.now
    
    def advance(self, seconds):
        self.now += seconds


class CountingStore(MemoryStore):
    """MemoryStore that counts reads and writes."""
    
    def __init__(self, initial=None):
        super().__init__(initial)
        self.reads = 0
        self.writes = 0
    
    def get(self, key):
        self.reads += 1
        return super().get(key)
    
    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


class BrokenStore:
    """Store whose backend is unavailable."""
    
    def get(self, key):
        raise OSError('storage unavailable')
    
    def set(self, key, value):
        raise OSError('quota exceeded')
    
    def delete(self, key):
        raise OSError('storage unavailable')


def wait_until(condition, timeout=5.0):
    """Poll condition until it holds; fail the test on timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return
        time.sleep(0.005)
    raise AssertionError('condition not met before timeout')


@pytest.fixture
def fake_client():
    return FakeTranslationClient()


@pytest.fixture
def store():
    return CountingStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeps():
    """Records backoff delays instead of sleeping."""
    return []


@pytest.fixture
def service(fake_client, store, clock, sleeps):
    """TranslationService wired to fakes: no network, no real sleeping."""
    return TranslationService(
        fake_client,
        store,
        breaker=RateLimitBreaker(store, clock=clock),
        sleep=sleeps.append,
    )


@pytest.fixture
def app(service):
    """Create application for testing."""
    app = create_app('testing', overrides={
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'ADMIN_SECRET': ADMIN_SECRET,
        'TRANSLATION_SERVICE': service,
    })
    
    yield app
    
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Application context with a clean database session."""
    with app.app_context():
        yield db.session
        db.session.rollback()


@pytest.fixture
def admin_headers():
    return {'X-Admin-Secret': ADMIN_SECRET}


@pytest.fixture
def sample_programs():
    """Program records as the site would send them."""
    return [
        {
            'id': index,
            'title': fake.sentence(nb_words=3),
            'description': f'<p>{fake.paragraph()}</p>',
            'duration_weeks': index + 4,
            'is_featured': index == 1,
        }
        for index in range(1, 4)
    ]
