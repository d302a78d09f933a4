from models.restaurant import Restaurant, MenuItem
from nearfood.services.seed import RESTAURANTS, MENU_ITEMS, seed_catalog


def test_seed_requires_authentication(client):
    assert client.get('/api/seed').status_code == 401


def test_seed_inserts_then_updates(client, app, user):
    resp = client.get('/api/seed', headers=user['headers'])
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['success'] is True
    assert {r['status'] for r in body['results']} == {'inserted'}
    assert Restaurant.query.count() == len(RESTAURANTS)
    item_count = MenuItem.query.count()
    assert item_count == sum(len(v) for v in MENU_ITEMS.values())

    body = client.get('/api/seed', headers=user['headers']).get_json()
    assert {r['status'] for r in body['results']} == {'updated'}
    assert Restaurant.query.count() == len(RESTAURANTS)
    assert MenuItem.query.count() == item_count


def test_seed_is_rate_limited_per_user(client, app, user, other_user, monkeypatch):
    small = [dict(RESTAURANTS[0])]
    menu = {small[0]['name']: MENU_ITEMS[small[0]['name']]}
    monkeypatch.setattr('nearfood.routes.seed.seed_catalog', lambda: seed_catalog(small, menu))

    statuses = [client.get('/api/seed', headers=user['headers']).status_code for _ in range(6)]
    assert statuses == [200] * 5 + [429]
    resp = client.get('/api/seed', headers=user['headers'])
    assert resp.get_json() == {'error': 'Too many requests. Please try again later.'}
    # Another user has a separate window
    assert client.get('/api/seed', headers=other_user['headers']).status_code == 200


def test_seed_skips_failing_restaurant(app, monkeypatch):
    from nearfood.exceptions import DataAccessError
    import nearfood.services.seed as seed

    real_upsert = seed._upsert_menu

    def flaky_upsert(restaurant, items):
        if restaurant.name == 'Spice Route':
            raise DataAccessError('Failed to upsert menu for Spice Route')
        return real_upsert(restaurant, items)

    monkeypatch.setattr(seed, '_upsert_menu', flaky_upsert)
    results = seed.seed_catalog()
    assert 'Spice Route' not in [r['restaurant'] for r in results]
    assert len(results) == len(RESTAURANTS) - 1


def test_seed_catalog_cli(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-catalog'])
    assert result.exit_code == 0
    assert 'Italian Delight: inserted' in result.output
    assert f'Seeded {len(RESTAURANTS)} restaurants.' in result.output
