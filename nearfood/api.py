from nearfood.routes import (
    auth_bp,
    cart_bp,
    order_bp,
    address_bp,
    restaurant_bp,
    payment_bp,
    seed_bp,
)


def register_api_v1(app):
    """Register blueprint routes under the API prefix."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(restaurant_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(order_bp)
    app.register_blueprint(address_bp)
    app.register_blueprint(payment_bp)
    app.register_blueprint(seed_bp)
