import os
import sys
from decimal import Decimal
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from models import db

PASSWORD = 'Passw0rd!'


@pytest.fixture(scope='session')
def app_instance():
    os.environ.setdefault('APP_ENV', 'testing')
    os.environ.setdefault('TEST_DATABASE_URL', 'sqlite:///:memory:')
    from nearfood import create_app
    from nearfood.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        STRIPE_SECRET_KEY=None,
    )
    return app


@pytest.fixture(scope='function')
def app(app_instance):
    from extensions import limiter
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        limiter.reset()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


def signup(client, email='diner@example.com', password=PASSWORD):
    resp = client.post('/api/auth/signup', json={'email': email, 'password': password})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture()
def user(client):
    """A signed-up user: ``{"id", "email", "headers"}``."""
    data = signup(client)
    return {
        'id': data['user']['id'],
        'email': data['user']['email'],
        'headers': bearer(data['access_token']),
    }


@pytest.fixture()
def other_user(client):
    data = signup(client, email='someone.else@example.com')
    return {
        'id': data['user']['id'],
        'email': data['user']['email'],
        'headers': bearer(data['access_token']),
    }


def create_restaurant(name='Test Kitchen', items=(('Margherita', '10.00'), ('Garlic Bread', '5.00')), rating=4.5, is_open=True):
    """Insert a restaurant with one category and the given (name, price) items."""
    from models.restaurant import Restaurant, MenuCategory, MenuItem
    restaurant = Restaurant(name=name, address='1 Test St', lat=40.0, lng=-74.0, rating=rating, is_open=is_open)
    db.session.add(restaurant)
    db.session.flush()
    category = MenuCategory(restaurant_id=restaurant.id, name='Mains', display_order=1)
    db.session.add(category)
    db.session.flush()
    menu = []
    for item_name, price in items:
        item = MenuItem(
            restaurant_id=restaurant.id,
            category_id=category.id,
            name=item_name,
            price=Decimal(price),
            is_available=True,
        )
        db.session.add(item)
        menu.append(item)
    db.session.commit()
    return {'id': restaurant.id, 'items': [m.id for m in menu]}


@pytest.fixture()
def restaurant(app):
    return create_restaurant()


def add_to_cart(client, headers, restaurant_id, menu_item_id, quantity=1):
    return client.post(
        '/api/cart',
        json={'restaurant_id': restaurant_id, 'menu_item_id': menu_item_id, 'quantity': quantity},
        headers=headers,
    )


DELIVERY = {
    'delivery_address': '221B Baker Street, London',
    'delivery_phone': '+44 20 7946 0000',
    'delivery_name': 'Sherlock',
}
