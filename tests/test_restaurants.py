from models import db
from models.restaurant import MenuItem
from conftest import create_restaurant


def test_lists_open_restaurants_best_rated_first(client, app):
    create_restaurant(name='Okay Diner', rating=3.9)
    create_restaurant(name='Unrated', rating=None)
    create_restaurant(name='Top Spot', rating=4.9)
    create_restaurant(name='Closed Shop', rating=5.0, is_open=False)

    resp = client.get('/api/restaurants')
    assert resp.status_code == 200
    body = resp.get_json()
    assert [r['name'] for r in body['data']] == ['Top Spot', 'Okay Diner', 'Unrated']
    assert body['pagination'] == {'page': 1, 'limit': 20, 'total': 3, 'total_pages': 1}


def test_pagination(client, app):
    for i in range(5):
        create_restaurant(name=f'Place {i}', rating=float(i))
    body = client.get('/api/restaurants?page=2&limit=2').get_json()
    assert [r['name'] for r in body['data']] == ['Place 2', 'Place 1']
    assert body['pagination'] == {'page': 2, 'limit': 2, 'total': 5, 'total_pages': 3}


def test_location_params_are_accepted(client, app):
    create_restaurant()
    resp = client.get('/api/restaurants?lat=12.97&lng=77.59')
    assert resp.status_code == 200
    assert len(resp.get_json()['data']) == 1


def test_bad_paging_params(client):
    assert client.get('/api/restaurants?page=0').status_code == 400
    assert client.get('/api/restaurants?limit=101').status_code == 400


def test_menu_lists_available_items_with_category(client, app):
    restaurant = create_restaurant()
    item = db.session.get(MenuItem, restaurant['items'][1])
    item.is_available = False
    db.session.commit()

    resp = client.get(f"/api/restaurants/{restaurant['id']}/menu")
    assert resp.status_code == 200
    body = resp.get_json()
    assert [i['name'] for i in body['data']] == ['Margherita']
    assert body['data'][0]['menu_category'] == {'name': 'Mains', 'display_order': 1}
    assert body['pagination']['limit'] == 50


def test_menu_of_unknown_restaurant(client, app):
    resp = client.get('/api/restaurants/00000000-0000-0000-0000-000000000000/menu')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Restaurant not found'}
