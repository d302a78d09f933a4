import uuid
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id() -> str:
    """Primary keys are UUID strings so ids are safe to expose in URLs."""
    return str(uuid.uuid4())


# Re-export common models for convenience
from .user import User  # noqa: F401,E402
from .restaurant import Restaurant, MenuCategory, MenuItem  # noqa: F401,E402
from .cart import Cart, CartItem  # noqa: F401,E402
from .order import Order, OrderItem  # noqa: F401,E402
from .address import UserAddress  # noqa: F401,E402
