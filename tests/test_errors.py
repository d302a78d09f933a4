import importlib
import sys
import pytest
from nearfood.exceptions import GENERIC_MESSAGE


def load_app(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'testing')
    for module in ['main', 'nearfood.config']:
        if module in sys.modules:
            del sys.modules[module]
    main = importlib.import_module('main')
    return main.app


@pytest.fixture()
def test_client(monkeypatch):
    app = load_app(monkeypatch)
    app.config.update(TESTING=True)
    return app.test_client()


def test_404_json_envelope(test_client):
    resp = test_client.get('/no/such/route')
    assert resp.status_code == 404
    data = resp.get_json()
    assert list(data) == ['error']
    assert isinstance(data['error'], str)


def test_405_json_envelope(test_client):
    resp = test_client.put('/api/restaurants')
    assert resp.status_code == 405
    assert 'error' in resp.get_json()


def test_unexpected_500_json_envelope(test_client):
    resp = test_client.get('/__boom')
    assert resp.status_code == 500
    assert resp.get_json() == {'error': GENERIC_MESSAGE}


def test_data_access_error_uses_operation_message(test_client):
    resp = test_client.get('/__store_down')
    assert resp.status_code == 500
    assert resp.get_json() == {'error': 'Failed to fetch cart'}


def test_ok_helper_endpoint(test_client):
    resp = test_client.get('/__ok')
    assert resp.status_code == 200
    assert resp.get_json() == {'ping': 'pong'}


def test_unauthenticated_protected_routes(test_client):
    for method, path in [
        ('get', '/api/cart'),
        ('post', '/api/orders'),
        ('get', '/api/addresses'),
        ('post', '/api/payments/verify'),
        ('get', '/api/seed'),
    ]:
        resp = getattr(test_client, method)(path, headers={'Authorization': 'Bearer not-a-token'})
        assert resp.status_code == 401, path
        assert resp.get_json() == {'error': 'Unauthorized'}
