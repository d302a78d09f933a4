from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from models import db, new_id

ORDER_STATUSES = ("PLACED", "PREPARING", "OUT_FOR_DELIVERY", "DELIVERED", "CANCELLED")
PAYMENT_STATUSES = ("pending", "paid", "failed", "refunded")


class Order(db.Model):
    __tablename__ = "orders"
    __table_args__ = (
        db.Index("ix_orders_user_created", "user_id", "created_at"),
    )
    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=True)
    status = Column(String(30), nullable=False, default="PLACED")
    total_amount = Column(Numeric(10, 2), nullable=False)
    delivery_fee = Column(Numeric(10, 2), nullable=True)
    tax_amount = Column(Numeric(10, 2), nullable=True)
    delivery_address = Column(Text, nullable=True)
    delivery_phone = Column(String(30), nullable=True)
    delivery_name = Column(String(120), nullable=True)
    payment_id = Column(String(255), nullable=True)
    payment_status = Column(String(20), default="pending")
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    items = db.relationship("OrderItem", backref="order", cascade="all, delete-orphan", lazy=True)

    def to_dict(self, with_items=True):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "restaurant_id": self.restaurant_id,
            "status": self.status,
            "total_amount": float(self.total_amount),
            "delivery_fee": float(self.delivery_fee) if self.delivery_fee is not None else None,
            "tax_amount": float(self.tax_amount) if self.tax_amount is not None else None,
            "delivery_address": self.delivery_address,
            "delivery_phone": self.delivery_phone,
            "delivery_name": self.delivery_name,
            "payment_id": self.payment_id,
            "payment_status": self.payment_status,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if with_items:
            data["order_items"] = [oi.to_dict() for oi in self.items]
        return data


class OrderItem(db.Model):
    __tablename__ = "order_items"
    id = db.Column(String(36), primary_key=True, default=new_id)
    order_id = db.Column(String(36), db.ForeignKey("orders.id"), nullable=False)
    # Snapshot of the menu item at order time; later menu edits do not apply
    menu_item_id = db.Column(String(36), nullable=True)
    name = db.Column(String(120), nullable=False)
    price = db.Column(Numeric(10, 2), nullable=False)
    quantity = db.Column(Integer, nullable=False)
    created_at = db.Column(DateTime, default=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "order_id": self.order_id,
            "menu_item_id": self.menu_item_id,
            "name": self.name,
            "price": float(self.price),
            "quantity": self.quantity,
        }
