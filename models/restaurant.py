from models import db, new_id
from datetime import datetime


class Restaurant(db.Model):
    __tablename__ = "restaurants"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(120), unique=True, nullable=False)
    address = db.Column(db.String(255), nullable=False)
    image_url = db.Column(db.String(500), nullable=True)
    lat = db.Column(db.Float, nullable=False)
    lng = db.Column(db.Float, nullable=False)
    cuisine = db.Column(db.String(50), nullable=True)
    rating = db.Column(db.Float, nullable=True)
    delivery_time_min = db.Column(db.Integer, nullable=True)
    price_range = db.Column(db.String(3), nullable=True)  # $, $$, $$$
    is_open = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "image_url": self.image_url,
            "lat": self.lat,
            "lng": self.lng,
            "cuisine": self.cuisine,
            "rating": self.rating,
            "delivery_time_min": self.delivery_time_min,
            "price_range": self.price_range,
            "is_open": self.is_open,
            "created_at": self.created_at,
        }


class MenuCategory(db.Model):
    __tablename__ = "menu_categories"
    __table_args__ = (
        db.UniqueConstraint("restaurant_id", "name", name="uq_menu_category_restaurant_name"),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    restaurant_id = db.Column(db.String(36), db.ForeignKey("restaurants.id"), nullable=False)
    name = db.Column(db.String(80), nullable=False)
    display_order = db.Column(db.Integer, default=1)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class MenuItem(db.Model):
    __tablename__ = "menu_items"
    __table_args__ = (
        db.UniqueConstraint("restaurant_id", "name", name="uq_menu_item_restaurant_name"),
        db.CheckConstraint("price > 0", name="ck_menu_item_price_positive"),
        db.Index("ix_menu_items_restaurant_available", "restaurant_id", "is_available"),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    restaurant_id = db.Column(db.String(36), db.ForeignKey("restaurants.id"), nullable=False)
    category_id = db.Column(db.String(36), db.ForeignKey("menu_categories.id"), nullable=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    image_url = db.Column(db.String(500), nullable=True)
    is_veg = db.Column(db.Boolean, nullable=True)
    is_available = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    restaurant = db.relationship("Restaurant", backref=db.backref("menu_items", lazy=True))
    category = db.relationship("MenuCategory", lazy="joined")

    def to_dict(self):
        category = None
        if self.category:
            category = {
                "name": self.category.name,
                "display_order": self.category.display_order,
            }
        return {
            "id": self.id,
            "restaurant_id": self.restaurant_id,
            "category_id": self.category_id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "image_url": self.image_url,
            "is_veg": self.is_veg,
            "is_available": self.is_available,
            "menu_category": category,
        }
