"""Idempotent demo catalog seeding.

Restaurants are matched by name, categories by (restaurant, name) and
menu items by (restaurant, name), so running the seeder twice updates
rows instead of duplicating them.
"""
import logging
from decimal import Decimal
from urllib.parse import quote

from models import db
from models.restaurant import Restaurant, MenuCategory, MenuItem
from nearfood.exceptions import DataAccessError
from nearfood.utils.db import transactional

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w=800&q=80"

RESTAURANTS = [
    {"name": "Italian Delight", "address": "123 Pasta Lane, Foodville", "image_url": _UNSPLASH.format("photo-1555396273-367ea4eb4db5"),
     "lat": 40.7128, "lng": -74.0060, "cuisine": "Italian", "rating": 4.8, "delivery_time_min": 30, "price_range": "$$", "is_open": True},
    {"name": "Spice Route", "address": "45 Curry Ave, Flavor Town", "image_url": _UNSPLASH.format("photo-1585937421612-70a008356f36"),
     "lat": 40.7138, "lng": -74.0070, "cuisine": "Indian", "rating": 4.9, "delivery_time_min": 45, "price_range": "$$", "is_open": True},
    {"name": "Dragon Wok", "address": "88 Dumpling St, Chinatown", "image_url": _UNSPLASH.format("photo-1525755662778-989d0524087e"),
     "lat": 40.7148, "lng": -74.0080, "cuisine": "Chinese", "rating": 4.5, "delivery_time_min": 25, "price_range": "$", "is_open": True},
    {"name": "Burger King", "address": "99 Burger Blvd, Fastfood City", "image_url": _UNSPLASH.format("photo-1568901346375-23c9450c58cd"),
     "lat": 40.7158, "lng": -74.0090, "cuisine": "American", "rating": 4.2, "delivery_time_min": 20, "price_range": "$", "is_open": True},
    {"name": "Taco Fiesta", "address": "22 Salsa Rd, Mexico Way", "image_url": _UNSPLASH.format("photo-1565299585323-38d6b0865b47"),
     "lat": 40.7168, "lng": -74.0100, "cuisine": "Mexican", "rating": 4.7, "delivery_time_min": 35, "price_range": "$", "is_open": True},
    {"name": "Sushi Master", "address": "10 Fish Market, Ocean Drive", "image_url": _UNSPLASH.format("photo-1579871494447-9811cf80d66c"),
     "lat": 40.7178, "lng": -74.0110, "cuisine": "Japanese", "rating": 4.9, "delivery_time_min": 50, "price_range": "$$$", "is_open": True},
    {"name": "Dessert Heaven", "address": "7 Sweet St, Sugar Hill", "image_url": _UNSPLASH.format("photo-1551024601-5629f97773b9"),
     "lat": 40.7188, "lng": -74.0120, "cuisine": "Desserts", "rating": 4.6, "delivery_time_min": 20, "price_range": "$$", "is_open": True},
    {"name": "Vegan Vibes", "address": "55 Green Way, Eco Park", "image_url": _UNSPLASH.format("photo-1512621776951-a57141f2eefd"),
     "lat": 40.7198, "lng": -74.0130, "cuisine": "Vegan", "rating": 4.8, "delivery_time_min": 30, "price_range": "$$", "is_open": True},
]

# (name, price, description, category, is_veg)
MENU_ITEMS = {
    "Italian Delight": [
        ("Margherita Pizza", "12.99", "Classic cheese and tomato pizza", "Pizza", True),
        ("Pepperoni Pizza", "14.99", "Spicy pepperoni topping", "Pizza", False),
        ("Carbonara Pasta", "13.99", "Creamy pasta with bacon", "Pasta", False),
        ("Tiramisu", "6.99", "Classic Italian dessert", "Dessert", True),
    ],
    "Spice Route": [
        ("Butter Chicken", "15.99", "Creamy tomato curry with chicken", "Curry", False),
        ("Paneer Tikka", "13.99", "Grilled cottage cheese with spices", "Starters", True),
        ("Garlic Naan", "3.99", "Soft bread with garlic butter", "Breads", True),
        ("Mango Lassi", "4.99", "Sweet mango yogurt drink", "Drinks", True),
    ],
    "Dragon Wok": [
        ("Kung Pao Chicken", "13.99", "Spicy stir-fry with peanuts", "Main", False),
        ("Vegetable Spring Rolls", "5.99", "Crispy rolls with veggies", "Starters", True),
        ("Fried Rice", "10.99", "Wok-tossed rice with vegetables", "Rice", True),
    ],
    "Burger King": [
        ("Whopper", "5.99", "Flame-grilled beef burger", "Burgers", False),
        ("Chicken Fries", "4.99", "Crispy chicken strips", "Sides", False),
        ("Impossible Whopper", "6.99", "Plant-based patty", "Burgers", True),
    ],
    "Taco Fiesta": [
        ("Beef Tacos", "3.50", "Soft shell taco with seasoned beef", "Tacos", False),
        ("Chicken Burrito", "9.99", "Rice, beans, chicken in tortilla", "Burritos", False),
        ("Nachos Supreme", "11.99", "Chips with cheese, guac, and salsa", "Sides", True),
    ],
    "Sushi Master": [
        ("Salmon Roll", "8.99", "Fresh salmon sushi roll", "Rolls", False),
        ("Tuna Sashimi", "12.99", "Sliced raw tuna", "Sashimi", False),
        ("Miso Soup", "3.99", "Traditional soy bean soup", "Soups", True),
    ],
    "Dessert Heaven": [
        ("Chocolate Cake", "7.99", "Rich chocolate fudge cake", "Cakes", True),
        ("Cheesecake", "8.99", "NY style cheesecake", "Cakes", True),
        ("Ice Cream Sundae", "6.99", "Vanilla ice cream with toppings", "Ice Cream", True),
    ],
    "Vegan Vibes": [
        ("Buddha Bowl", "12.99", "Quinoa, avocado, roasted veggies", "Bowls", True),
        ("Vegan Burger", "11.99", "Black bean patty with vegan cheese", "Burgers", True),
        ("Smoothie", "5.99", "Green detox smoothie", "Drinks", True),
    ],
}


def _upsert_restaurant(data: dict):
    restaurant = Restaurant.query.filter_by(name=data["name"]).first()
    status = "updated" if restaurant else "inserted"
    with transactional(f"Failed to upsert restaurant {data['name']}"):
        if restaurant is None:
            restaurant = Restaurant(**data)
            db.session.add(restaurant)
        else:
            for key, value in data.items():
                setattr(restaurant, key, value)
    return restaurant, status


def _upsert_menu(restaurant: Restaurant, items) -> None:
    categories = {}
    with transactional(f"Failed to upsert menu for {restaurant.name}"):
        for name, price, description, category_name, is_veg in items:
            category = categories.get(category_name)
            if category is None:
                category = MenuCategory.query.filter_by(restaurant_id=restaurant.id, name=category_name).first()
                if category is None:
                    category = MenuCategory(restaurant_id=restaurant.id, name=category_name, display_order=1)
                    db.session.add(category)
                    db.session.flush()
                categories[category_name] = category

            fields = {
                "category_id": category.id,
                "description": description,
                "price": Decimal(price),
                "is_veg": is_veg,
                "is_available": True,
                "image_url": f"https://placehold.co/400x300?text={quote(name)}",
            }
            item = MenuItem.query.filter_by(restaurant_id=restaurant.id, name=name).first()
            if item is None:
                db.session.add(MenuItem(restaurant_id=restaurant.id, name=name, **fields))
            else:
                for key, value in fields.items():
                    setattr(item, key, value)


def seed_catalog(restaurants=None, menu_items=None) -> list:
    """Upsert the demo catalog and return one result per restaurant."""
    restaurants = RESTAURANTS if restaurants is None else restaurants
    menu_items = MENU_ITEMS if menu_items is None else menu_items
    results = []
    for data in restaurants:
        try:
            restaurant, status = _upsert_restaurant(dict(data))
            _upsert_menu(restaurant, menu_items.get(restaurant.name, []))
        except DataAccessError:
            logger.error("Seeding skipped restaurant %s", data["name"])
            continue
        results.append({"restaurant": restaurant.name, "status": status})
    logger.info("Seeded %d restaurants", len(results))
    return results
