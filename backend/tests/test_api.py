"""API integration smoke tests using FastAPI TestClient."""

from fastapi.testclient import TestClient

from backend.app.main import app

client = TestClient(app)


def test_health():
    r = client.get('/health')
    assert r.status_code == 200
    assert r.json() == {'status': 'ok'}


def test_run_returns_output_and_code():
    r = client.post('/run', json={'code': "x = 12\nif x > 10:\n    print('bada hai')"})
    assert r.status_code == 200
    body = r.json()
    assert body['output'] == 'bada hai'
    assert body['error'] is None
    assert body['code'].startswith('x = 12')
    assert isinstance(body['duration_ms'], int)


def test_run_lowers_loop_cap_from_settings():
    r = client.post('/run', json={'code': 'n = 0\nwhile 1:\n    n = n + 1\nprint(n)', 'settings': {'max_loop': 5}})
    assert r.status_code == 200
    assert r.json()['output'] == '5'


def test_run_cannot_raise_loop_cap():
    r = client.post('/run', json={'code': 'n = 0\nwhile 1:\n    n = n + 1\nprint(n)', 'settings': {'max_loop': 10 ** 9}})
    assert r.status_code == 200
    assert r.json()['output'] == '1000'


def test_bad_settings_return_error_payload():
    r = client.post('/run', json={'code': 'print(1)', 'settings': {'max_loop': 'many'}})
    assert r.status_code == 200
    body = r.json()
    assert body['error']
    assert body['output'] == ''
    assert 'duration_ms' in body


def test_missing_code_is_rejected():
    r = client.post('/run', json={})
    assert r.status_code == 422
