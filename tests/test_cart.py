from models import db
from models.cart import Cart, CartItem
from models.restaurant import MenuItem
from conftest import add_to_cart, create_restaurant


def test_cart_requires_authentication(client):
    resp = client.get('/api/cart')
    assert resp.status_code == 401
    assert resp.get_json() == {'error': 'Unauthorized'}


def test_empty_cart_view(client, user):
    resp = client.get('/api/cart', headers=user['headers'])
    assert resp.status_code == 200
    assert resp.get_json() == {'items': []}


def test_adding_same_item_twice_accumulates(client, app, user, restaurant):
    item_id = restaurant['items'][0]
    assert add_to_cart(client, user['headers'], restaurant['id'], item_id, 2).status_code == 200
    assert add_to_cart(client, user['headers'], restaurant['id'], item_id, 3).status_code == 200

    lines = CartItem.query.filter_by(menu_item_id=item_id).all()
    assert len(lines) == 1
    assert lines[0].quantity == 5

    body = client.get('/api/cart', headers=user['headers']).get_json()
    assert body['restaurant_id'] == restaurant['id']
    assert body['items'][0]['menu_item']['name'] == 'Margherita'
    assert body['pricing']['subtotal'] == 50.0


def test_quantity_cap_rejects_and_keeps_existing(client, app, user, restaurant):
    item_id = restaurant['items'][0]
    add_to_cart(client, user['headers'], restaurant['id'], item_id, 98)
    resp = add_to_cart(client, user['headers'], restaurant['id'], item_id, 2)
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Maximum quantity exceeded'
    db.session.expire_all()
    assert CartItem.query.filter_by(menu_item_id=item_id).one().quantity == 98


def test_single_addition_above_limit_fails_validation(client, user, restaurant):
    resp = add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][0], 100)
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Quantity cannot exceed 99'


def test_invalid_ids_are_rejected(client, user, restaurant):
    resp = add_to_cart(client, user['headers'], 'not-a-uuid', restaurant['items'][0])
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Invalid restaurant ID'


def test_switching_restaurant_clears_previous_items(client, app, user, restaurant):
    other = create_restaurant(name='Other Place', items=(('Ramen', '12.00'),))
    add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][0], 1)
    add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][1], 1)

    resp = add_to_cart(client, user['headers'], other['id'], other['items'][0], 1)
    assert resp.status_code == 200

    db.session.expire_all()
    cart = Cart.query.filter_by(user_id=user['id']).one()
    assert cart.restaurant_id == other['id']
    assert [line.menu_item_id for line in cart.items] == [other['items'][0]]


def test_item_must_belong_to_restaurant_and_be_available(client, app, user, restaurant):
    other = create_restaurant(name='Other Place', items=(('Ramen', '12.00'),))
    resp = add_to_cart(client, user['headers'], restaurant['id'], other['items'][0])
    assert resp.status_code == 404
    assert resp.get_json()['error'] == 'Menu item not found'

    item = db.session.get(MenuItem, restaurant['items'][0])
    item.is_available = False
    db.session.commit()
    resp = add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][0])
    assert resp.status_code == 404


def test_update_and_remove_line(client, app, user, restaurant):
    add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][0], 1)
    line_id = client.get('/api/cart', headers=user['headers']).get_json()['items'][0]['id']

    resp = client.patch(f'/api/cart/items/{line_id}', json={'quantity': 7}, headers=user['headers'])
    assert resp.status_code == 200
    assert resp.get_json()['quantity'] == 7

    resp = client.delete(f'/api/cart/items/{line_id}', headers=user['headers'])
    assert resp.status_code == 200
    assert client.get('/api/cart', headers=user['headers']).get_json()['items'] == []


def test_other_users_line_is_not_found(client, app, user, other_user, restaurant):
    add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][0], 1)
    line_id = client.get('/api/cart', headers=user['headers']).get_json()['items'][0]['id']

    resp = client.patch(f'/api/cart/items/{line_id}', json={'quantity': 2}, headers=other_user['headers'])
    assert resp.status_code == 404
    assert resp.get_json()['error'] == 'Item not found in cart'


def test_clear_cart_removes_lines(client, app, user, restaurant):
    add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][0], 1)
    add_to_cart(client, user['headers'], restaurant['id'], restaurant['items'][1], 1)

    resp = client.delete('/api/cart', headers=user['headers'])
    assert resp.status_code == 200
    assert resp.get_json() == {'success': True}
    assert CartItem.query.count() == 0


def test_clear_without_cart_is_noop(client, user):
    assert client.delete('/api/cart', headers=user['headers']).status_code == 200
