from models.address import UserAddress

ADDRESS = {
    'address_line1': '12 MG Road',
    'city': 'Bengaluru',
    'state': 'Karnataka',
    'postal_code': '560001',
    'phone': '9876543210',
}


def _create(client, headers, **overrides):
    return client.post('/api/addresses', json=dict(ADDRESS, **overrides), headers=headers)


def _defaults(user_id):
    return UserAddress.query.filter_by(user_id=user_id, is_default=True).count()


def test_create_and_get_address(client, app, user):
    resp = _create(client, user['headers'], address_line2='Near the metro')
    assert resp.status_code == 201
    body = resp.get_json()
    assert body['country'] == 'India'
    assert body['is_default'] is False

    resp = client.get(f"/api/addresses/{body['id']}", headers=user['headers'])
    assert resp.status_code == 200
    assert resp.get_json()['address_line2'] == 'Near the metro'


def test_required_fields_are_named(client, user):
    resp = _create(client, user['headers'], city='  ')
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'City is required'}

    resp = _create(client, user['headers'], phone='12345')
    assert resp.get_json() == {'error': 'Phone number must be at least 10 digits'}


def test_new_default_replaces_previous_default(client, app, user):
    first = _create(client, user['headers'], is_default=True).get_json()
    second = _create(client, user['headers'], is_default=True).get_json()

    assert _defaults(user['id']) == 1
    listed = client.get('/api/addresses', headers=user['headers']).get_json()
    assert listed[0]['id'] == second['id']
    assert listed[0]['is_default'] is True
    assert {a['id'] for a in listed} == {first['id'], second['id']}


def test_update_to_default_keeps_single_default(client, app, user):
    first = _create(client, user['headers'], is_default=True).get_json()
    second = _create(client, user['headers']).get_json()

    resp = client.patch(f"/api/addresses/{second['id']}", json={'is_default': True}, headers=user['headers'])
    assert resp.status_code == 200
    assert _defaults(user['id']) == 1
    resp = client.get(f"/api/addresses/{first['id']}", headers=user['headers'])
    assert resp.get_json()['is_default'] is False


def test_defaults_are_per_user(client, app, user, other_user):
    _create(client, user['headers'], is_default=True)
    _create(client, other_user['headers'], is_default=True)
    assert _defaults(user['id']) == 1
    assert _defaults(other_user['id']) == 1


def test_partial_update(client, app, user):
    created = _create(client, user['headers']).get_json()
    resp = client.patch(f"/api/addresses/{created['id']}", json={'city': 'Mysuru'}, headers=user['headers'])
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['city'] == 'Mysuru'
    assert body['address_line1'] == '12 MG Road'


def test_other_users_address_is_not_found(client, app, user, other_user):
    created = _create(client, user['headers']).get_json()
    resp = client.delete(f"/api/addresses/{created['id']}", headers=other_user['headers'])
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Address not found'}


def test_delete_address(client, app, user):
    created = _create(client, user['headers']).get_json()
    resp = client.delete(f"/api/addresses/{created['id']}", headers=user['headers'])
    assert resp.status_code == 200
    assert UserAddress.query.count() == 0
