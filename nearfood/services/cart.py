"""Cart reads and mutations.

A cart holds items of a single restaurant. Adding an item from another
restaurant first empties the cart, then points it at the new restaurant.
Each store write commits on its own, so a failure part-way through leaves
the earlier writes in place.
"""
import logging
from typing import Optional

from models import db
from models.cart import Cart, CartItem
from models.restaurant import MenuItem
from nearfood.exceptions import CapacityError, NotFoundError
from nearfood.services.pricing import calculate_pricing
from nearfood.utils.db import transactional, reading

logger = logging.getLogger(__name__)

MAX_QUANTITY = 99


def resolve_cart(user_id: str) -> Optional[Cart]:
    """Return the user's cart with its lines and menu items, or None."""
    with reading("Failed to fetch cart"):
        cart = Cart.query.filter_by(user_id=user_id).first()
    return cart


def get_or_create_cart(user_id: str, restaurant_id: str) -> Cart:
    cart = resolve_cart(user_id)
    if cart is not None:
        return cart
    cart = Cart(user_id=user_id, restaurant_id=restaurant_id)
    with transactional("Failed to create cart"):
        db.session.add(cart)
    return cart


def add_item(user_id: str, restaurant_id: str, menu_item_id: str, quantity: int) -> CartItem:
    with reading("Failed to fetch menu item"):
        menu_item = db.session.get(MenuItem, menu_item_id)
    if not menu_item or menu_item.restaurant_id != restaurant_id or not menu_item.is_available:
        raise NotFoundError("Menu item not found")

    cart = get_or_create_cart(user_id, restaurant_id)
    if cart.restaurant_id != restaurant_id:
        logger.info("Cart %s switching restaurant to %s", cart.id, restaurant_id)
        with transactional("Failed to clear cart"):
            CartItem.query.filter_by(cart_id=cart.id).delete()
        with transactional("Failed to update cart"):
            cart.restaurant_id = restaurant_id

    with reading("Failed to check existing item"):
        line = CartItem.query.filter_by(cart_id=cart.id, menu_item_id=menu_item_id).first()

    if line:
        new_quantity = line.quantity + quantity
        if new_quantity > MAX_QUANTITY:
            raise CapacityError("Maximum quantity exceeded")
        with transactional("Failed to update cart item"):
            line.quantity = new_quantity
        return line

    line = CartItem(cart_id=cart.id, menu_item_id=menu_item_id, quantity=quantity)
    with transactional("Failed to add item to cart"):
        db.session.add(line)
    return line


def _owned_line(user_id: str, cart_item_id: str) -> CartItem:
    with reading("Failed to fetch cart item"):
        line = (
            CartItem.query.join(Cart, CartItem.cart_id == Cart.id)
            .filter(CartItem.id == cart_item_id, Cart.user_id == user_id)
            .first()
        )
    if not line:
        raise NotFoundError("Item not found in cart")
    return line


def update_item_quantity(user_id: str, cart_item_id: str, quantity: int) -> CartItem:
    line = _owned_line(user_id, cart_item_id)
    with transactional("Failed to update cart item"):
        line.quantity = quantity
    return line


def remove_item(user_id: str, cart_item_id: str) -> None:
    line = _owned_line(user_id, cart_item_id)
    with transactional("Failed to remove cart item"):
        db.session.delete(line)


def clear_cart(user_id: str) -> None:
    with reading("Failed to fetch cart"):
        cart = Cart.query.filter_by(user_id=user_id).first()
    if cart is None:
        return
    with transactional("Failed to clear cart"):
        CartItem.query.filter_by(cart_id=cart.id).delete()


def cart_to_dict(cart: Cart) -> dict:
    items = []
    priced = []
    for line in cart.items:
        menu_item = line.menu_item
        entry = {
            "id": line.id,
            "menu_item_id": line.menu_item_id,
            "quantity": line.quantity,
            "menu_item": None,
        }
        if menu_item is not None:
            entry["menu_item"] = {
                "name": menu_item.name,
                "price": float(menu_item.price),
                "image_url": menu_item.image_url,
            }
            priced.append((menu_item.price, line.quantity))
        items.append(entry)
    return {
        "id": cart.id,
        "user_id": cart.user_id,
        "restaurant_id": cart.restaurant_id,
        "items": items,
        "pricing": calculate_pricing(priced).to_dict(),
    }


__all__ = [
    "MAX_QUANTITY",
    "resolve_cart",
    "get_or_create_cart",
    "add_item",
    "update_item_quantity",
    "remove_item",
    "clear_cart",
    "cart_to_dict",
]
