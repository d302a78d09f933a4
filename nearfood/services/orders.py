"""Checkout: turn a user's cart into an order.

The order row and its lines are written as separate store commits. When
the lines cannot be written, the order row is deleted again on a
best-effort basis. Emptying the cart afterwards never fails the checkout,
since the order already exists at that point.
"""
import logging
from typing import List, Optional

from models import db
from models.cart import Cart, CartItem
from models.order import Order, OrderItem
from nearfood.exceptions import (
    DataAccessError,
    NotFoundError,
    OrderItemsError,
    ValidationError,
)
from nearfood.services.cart import resolve_cart
from nearfood.services.pricing import calculate_pricing
from nearfood.utils.db import transactional, reading

logger = logging.getLogger(__name__)

UPDATABLE_ORDER_FIELDS = (
    "status",
    "payment_status",
    "delivery_address",
    "delivery_phone",
    "delivery_name",
)


def _snapshot_lines(cart: Cart) -> List[dict]:
    lines = []
    for line in cart.items:
        menu_item = line.menu_item
        if menu_item is None or not menu_item.id or not menu_item.name or not menu_item.price:
            logger.error("Invalid menu item data for cart item %s", line.id)
            raise ValidationError("Invalid cart data: missing item information")
        lines.append(
            {
                "menu_item_id": menu_item.id,
                "name": menu_item.name,
                "price": menu_item.price,
                "quantity": line.quantity,
            }
        )
    return lines


def _delete_order(order_id: str) -> None:
    try:
        with transactional("Failed to roll back order"):
            Order.query.filter_by(id=order_id).delete()
    except DataAccessError:
        logger.error("Compensating delete failed; order %s is orphaned", order_id)


def _reset_cart(cart_id: str) -> None:
    try:
        with transactional("Failed to clear cart items"):
            CartItem.query.filter_by(cart_id=cart_id).delete()
    except DataAccessError:
        logger.warning("Cart %s not emptied after checkout", cart_id)
    try:
        with transactional("Failed to reset cart restaurant"):
            Cart.query.filter_by(id=cart_id).update({"restaurant_id": None})
    except DataAccessError:
        logger.warning("Cart %s restaurant not reset after checkout", cart_id)


def write_order(
    user_id: str,
    cart: Cart,
    delivery: dict,
    payment: Optional[dict] = None,
    restaurant_id: Optional[str] = None,
) -> str:
    """Create an order and its lines from ``cart``; return the order id.

    ``delivery`` holds delivery_address, delivery_phone and delivery_name.
    ``payment`` optionally holds payment_id and payment_status.
    """
    lines = _snapshot_lines(cart)
    pricing = calculate_pricing((line["price"], line["quantity"]) for line in lines)
    payment = payment or {}
    cart_id = cart.id

    order = Order(
        user_id=user_id,
        restaurant_id=restaurant_id or cart.restaurant_id,
        status="PLACED",
        total_amount=pricing.total,
        delivery_fee=pricing.delivery_fee,
        tax_amount=pricing.tax,
        delivery_address=delivery.get("delivery_address"),
        delivery_phone=delivery.get("delivery_phone"),
        delivery_name=delivery.get("delivery_name"),
        payment_id=payment.get("payment_id"),
        payment_status=payment.get("payment_status", "pending"),
    )
    with transactional("Failed to create order"):
        db.session.add(order)
    order_id = order.id

    try:
        with transactional("Failed to create order items"):
            db.session.add_all([OrderItem(order_id=order_id, **line) for line in lines])
    except Exception as e:
        _delete_order(order_id)
        raise OrderItemsError() from e

    _reset_cart(cart_id)
    logger.info("Order %s placed by user %s, total %s", order_id, user_id, pricing.total)
    return order_id


def checkout(user_id: str, delivery: dict) -> str:
    cart = resolve_cart(user_id)
    if cart is None or not cart.items:
        raise ValidationError("Cart is empty")
    return write_order(user_id, cart, delivery)


def list_orders(user_id: str) -> List[Order]:
    with reading("Failed to fetch orders"):
        return (
            Order.query.filter_by(user_id=user_id)
            .order_by(Order.created_at.desc())
            .all()
        )


def get_order(user_id: str, order_id: str) -> Order:
    with reading("Failed to fetch order"):
        order = Order.query.filter_by(id=order_id, user_id=user_id).first()
    if not order:
        raise NotFoundError("Order not found")
    return order


def update_order(user_id: str, order_id: str, changes: dict) -> Order:
    order = get_order(user_id, order_id)
    updates = {k: v for k, v in changes.items() if k in UPDATABLE_ORDER_FIELDS and v is not None}
    if not updates:
        raise ValidationError("No valid fields to update")
    with transactional("Failed to update order"):
        for key, value in updates.items():
            setattr(order, key, value)
    return order


__all__ = [
    "write_order",
    "checkout",
    "list_orders",
    "get_order",
    "update_order",
]
