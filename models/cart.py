from models import db, new_id
from datetime import datetime


class Cart(db.Model):
    __tablename__ = "carts"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), unique=True, nullable=False)
    # Set when the first item is added, reset to NULL after checkout
    restaurant_id = db.Column(db.String(36), db.ForeignKey("restaurants.id"), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    items = db.relationship(
        "CartItem",
        backref="cart",
        lazy="selectin",
        order_by="CartItem.created_at",
        cascade="all, delete-orphan",
    )


class CartItem(db.Model):
    __tablename__ = "cart_items"
    __table_args__ = (
        db.UniqueConstraint("cart_id", "menu_item_id", name="uq_cart_item_cart_menu_item"),
        db.CheckConstraint("quantity >= 1 AND quantity <= 99", name="ck_cart_item_quantity"),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    cart_id = db.Column(db.String(36), db.ForeignKey("carts.id"), nullable=False)
    menu_item_id = db.Column(db.String(36), db.ForeignKey("menu_items.id", ondelete="SET NULL"), nullable=True)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    menu_item = db.relationship("MenuItem", lazy="joined")
