from .auth import auth_bp
from .cart import cart_bp
from .orders import order_bp
from .addresses import address_bp
from .restaurants import restaurant_bp
from .payments import payment_bp
from .seed import seed_bp


__all__ = [
    'auth_bp',
    'cart_bp',
    'order_bp',
    'address_bp',
    'restaurant_bp',
    'payment_bp',
    'seed_bp',
]
