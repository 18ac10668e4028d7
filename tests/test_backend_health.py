"""
Backend Health Test Suite
=========================
Tests all API endpoints to verify the backend is working correctly.

Run with:
    pytest tests/test_backend_health.py -v
"""

import pytest
from app import db
from app.models import LanguageSetting, UiTranslation, seed_default_languages
from app.services.mymemory import ProviderResponse


# ============================================================
#  HEALTH & SMOKE TESTS
# ============================================================

class TestHealthEndpoints:
    """Verify the server boots and responds."""

    def test_root_health(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        assert resp.get_json()['status'] == 'ok'

    def test_service_attached_to_app(self, app, service):
        assert app.extensions['translation_service'] is service


# ============================================================
#  TRANSLATE TESTS
# ============================================================

class TestTranslate:
    """POST /api/translate"""

    def test_translate_text(self, client, fake_client):
        resp = client.post('/api/translate', json={'text': '<b>Welcome</b>', 'target': 'ml'})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data == {'translated_text': '[ml] Welcome', 'status': 'translated'}
        assert fake_client.calls == [('Welcome', 'en', 'ml')]

    def test_second_request_is_cached(self, client):
        client.post('/api/translate', json={'text': 'Welcome', 'target': 'ta'})
        resp = client.post('/api/translate', json={'text': 'Welcome', 'target': 'ta'})
        assert resp.get_json()['status'] == 'cached'

    def test_same_language(self, client, fake_client):
        resp = client.post('/api/translate', json={'text': 'Welcome', 'target': 'hi', 'source': 'HI'})
        assert resp.get_json() == {'translated_text': 'Welcome', 'status': 'unchanged'}
        assert fake_client.calls == []

    def test_rate_limited_returns_original(self, client, fake_client):
        fake_client.script(ProviderResponse(429))
        resp = client.post('/api/translate', json={'text': 'Welcome', 'target': 'ml'})
        assert resp.status_code == 200
        assert resp.get_json() == {'translated_text': 'Welcome', 'status': 'rate_limited'}

    @pytest.mark.parametrize('body', [
        {},
        {'target': 'ml'},
        {'text': 42, 'target': 'ml'},
        {'text': 'Welcome'},
        {'text': 'Welcome', 'target': '  '},
        {'text': 'Welcome', 'target': 'ml', 'source': 5},
    ])
    def test_invalid_body(self, client, body):
        resp = client.post('/api/translate', json=body)
        assert resp.status_code == 400
        assert 'error' in resp.get_json()

    def test_non_json_body(self, client):
        resp = client.post('/api/translate', data='text=hello')
        assert resp.status_code == 400


class TestTranslateRecords:
    """POST /api/translate/record and /api/translate/records"""

    def test_translate_record(self, client):
        resp = client.post('/api/translate/record', json={
            'record': {'id': 5, 'title': 'Hi', 'count': 3},
            'fields': ['title'],
            'target': 'ml',
        })
        assert resp.status_code == 200
        assert resp.get_json()['record'] == {'id': 5, 'title': '[ml] Hi', 'count': 3}

    def test_translate_records_in_order(self, client, fake_client, sample_programs):
        resp = client.post('/api/translate/records', json={
            'records': sample_programs,
            'fields': ['title', 'description'],
            'target': 'kn',
        })
        assert resp.status_code == 200
        records = resp.get_json()['records']
        assert [r['id'] for r in records] == [1, 2, 3]
        assert all(r['title'].startswith('[kn] ') for r in records)
        assert all(not r['description'].startswith('<p>') for r in records)
        assert len(fake_client.calls) == 6

    def test_record_requires_fields(self, client):
        resp = client.post('/api/translate/record', json={'record': {'title': 'Hi'}, 'target': 'ml'})
        assert resp.status_code == 400

    def test_records_must_be_objects(self, client):
        resp = client.post('/api/translate/records', json={
            'records': ['Hi'], 'fields': ['title'], 'target': 'ml'
        })
        assert resp.status_code == 400


# ============================================================
#  ADMIN TESTS
# ============================================================

class TestTranslationAdmin:
    """Status and reset endpoints require X-Admin-Secret."""

    def test_status_requires_secret(self, client):
        resp = client.get('/api/translate/status')
        assert resp.status_code == 403

    def test_wrong_secret(self, client):
        resp = client.post('/api/translate/reset', headers={'X-Admin-Secret': 'nope'})
        assert resp.status_code == 403

    def test_status(self, client, admin_headers):
        client.post('/api/translate', json={'text': 'Welcome', 'target': 'ml'})
        resp = client.get('/api/translate/status', headers=admin_headers)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['memory_entries'] == 1
        assert data['rate_limited'] is False

    def test_reset_closes_breaker(self, client, fake_client, service, admin_headers):
        fake_client.script(ProviderResponse(429))
        client.post('/api/translate', json={'text': 'Welcome', 'target': 'ml'})
        assert service.breaker.is_open()

        resp = client.post('/api/translate/reset', headers=admin_headers)

        assert resp.status_code == 200
        assert resp.get_json()['stats']['rate_limited'] is False
        again = client.post('/api/translate', json={'text': 'Welcome', 'target': 'ml'})
        assert again.get_json()['status'] == 'translated'

    def test_admin_disabled_without_configured_secret(self, client, app, admin_headers):
        app.config['ADMIN_SECRET'] = None
        resp = client.get('/api/translate/status', headers=admin_headers)
        assert resp.status_code == 403


# ============================================================
#  LANGUAGE TESTS
# ============================================================

class TestLanguages:
    """GET /api/languages and /api/translations/<code>"""

    def test_languages_empty(self, client, db_session):
        resp = client.get('/api/languages')
        assert resp.status_code == 200
        assert resp.get_json() == {'languages': [], 'default': 'en'}

    def test_languages_seeded(self, client, db_session):
        seed_default_languages()
        resp = client.get('/api/languages')
        data = resp.get_json()
        assert [l['language_code'] for l in data['languages']] == ['en', 'ml', 'ta', 'kn', 'te', 'hi']
        assert data['default'] == 'en'

    def test_inactive_language_hidden(self, client, db_session):
        seed_default_languages()
        LanguageSetting.query.filter_by(language_code='te').first().is_active = False
        db.session.commit()
        codes = [l['language_code'] for l in client.get('/api/languages').get_json()['languages']]
        assert 'te' not in codes

    def test_ui_translations(self, client, db_session):
        db.session.add(UiTranslation(language_code='ml', translation_key='nav.home',
                                     translation_value='ഹോം'))
        db.session.commit()
        resp = client.get('/api/translations/ML')
        assert resp.get_json() == {'language_code': 'ml', 'translations': {'nav.home': 'ഹോം'}}


class TestLocalize:
    """POST /api/localize"""

    def test_default_language_untouched(self, client, fake_client, db_session):
        seed_default_languages()
        resp = client.post('/api/localize', json={
            'language': 'en', 'fields': ['title'], 'records': [{'title': 'Yoga'}]
        })
        assert resp.get_json()['records'] == [{'title': 'Yoga'}]
        assert fake_client.calls == []

    def test_visitor_language(self, client, db_session):
        seed_default_languages()
        resp = client.post('/api/localize', json={
            'language': 'TA', 'fields': ['title'], 'record': {'title': 'Yoga', 'id': 1}
        })
        assert resp.status_code == 200
        assert resp.get_json() == {'language': 'ta', 'record': {'title': '[ta] Yoga', 'id': 1}}

    def test_requires_language(self, client, db_session):
        resp = client.post('/api/localize', json={'fields': ['title'], 'records': []})
        assert resp.status_code == 400

    def test_requires_content(self, client, db_session):
        resp = client.post('/api/localize', json={'language': 'ml', 'fields': ['title']})
        assert resp.status_code == 400
