"""Payment sessions and verification.

Without a Stripe secret key the service runs in dummy mode: sessions are
fabricated locally and accepted as paid on verification. With a key,
sessions are Stripe Checkout sessions and must report ``paid``.
"""
import logging
import time
import uuid
from decimal import Decimal, ROUND_HALF_UP

import stripe
from flask import current_app

from models.cart import Cart
from models.order import Order
from nearfood.exceptions import GenericError, NotFoundError, ValidationError
from nearfood.services.addresses import get_address
from nearfood.services.orders import write_order
from nearfood.utils.db import reading
from nearfood.utils.retry import with_retry, is_network_error

logger = logging.getLogger(__name__)

DUMMY_KEY = "sk_test_dummy"
DUMMY_SESSION_PREFIX = "dummy_"
AMOUNT_TOLERANCE = Decimal("1.00")
PLACEHOLDER_ADDRESS = "User Address (To be updated)"


def _stripe_key():
    key = current_app.config.get("STRIPE_SECRET_KEY")
    if not key or key == DUMMY_KEY:
        return None
    return key


def is_dummy_mode() -> bool:
    return _stripe_key() is None


def _now_ms() -> int:
    return int(time.time() * 1000)


def _to_cents(amount) -> int:
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _is_retryable(exc) -> bool:
    return isinstance(exc, stripe.APIConnectionError) or is_network_error(exc)


def _stripe_call(fn):
    cfg = current_app.config
    return with_retry(
        fn,
        max_retries=cfg.get("PAYMENT_RETRY_ATTEMPTS", 2),
        retry_delay=cfg.get("PAYMENT_RETRY_DELAY_SECONDS", 1.0),
        retry_on=_is_retryable,
    )


def create_payment_session(user, amount, currency=None, origin=None) -> dict:
    currency = currency or current_app.config.get("PAYMENT_DEFAULT_CURRENCY", "USD")
    cents = _to_cents(amount)

    if is_dummy_mode():
        logger.warning("Payment API running in dummy mode; session will not be verified")
        return {
            "id": f"dummy_session_{_now_ms()}_{uuid.uuid4().hex[:7]}",
            "amount": cents,
            "currency": currency,
            "mode": "dummy",
        }

    origin = origin or "http://localhost:3000"
    stripe.api_key = _stripe_key()
    # Shared by every retry so Stripe creates at most one session
    idempotency_key = f"nearfood-session-{uuid.uuid4().hex}"
    try:
        session = _stripe_call(
            lambda: stripe.checkout.Session.create(
                payment_method_types=["card"],
                line_items=[
                    {
                        "price_data": {
                            "currency": currency.lower(),
                            "product_data": {
                                "name": "NearFood Order",
                                "description": "Food delivery order",
                            },
                            "unit_amount": cents,
                        },
                        "quantity": 1,
                    }
                ],
                mode="payment",
                success_url=f"{origin}/orders?session_id={{CHECKOUT_SESSION_ID}}",
                cancel_url=f"{origin}/cart",
                customer_email=user.email or None,
                metadata={"user_id": user.id},
                idempotency_key=idempotency_key,
            )
        )
    except stripe.StripeError as e:
        logger.error("Stripe session creation error: %s", e)
        raise GenericError("Failed to create payment session") from e
    return {"id": session.id, "url": session.url, "mode": "live"}


def _confirm_payment(session_id: str) -> str:
    """Return the payment id for a paid session or raise ValidationError."""
    if is_dummy_mode():
        if not session_id.startswith(DUMMY_SESSION_PREFIX):
            raise ValidationError("Payment not completed")
        return f"dummy_pay_{_now_ms()}"

    stripe.api_key = _stripe_key()
    try:
        session = _stripe_call(lambda: stripe.checkout.Session.retrieve(session_id))
    except stripe.InvalidRequestError as e:
        logger.info("Unknown checkout session %s: %s", session_id, e)
        raise ValidationError("Payment not completed") from e
    except stripe.StripeError as e:
        logger.error("Stripe session retrieval error: %s", e)
        raise GenericError("Payment verification failed") from e
    if session.payment_status != "paid":
        raise ValidationError("Payment not completed")
    return session.payment_intent or session_id


def _delivery_for(user, address_id=None, delivery_name=None, delivery_phone=None) -> dict:
    if address_id:
        address = get_address(user.id, address_id)
        return {
            "delivery_address": address.one_line(),
            "delivery_phone": delivery_phone or address.phone,
            "delivery_name": delivery_name or user.email,
        }
    return {
        "delivery_address": PLACEHOLDER_ADDRESS,
        "delivery_phone": delivery_phone or "",
        "delivery_name": delivery_name or user.email,
    }


def verify_payment(user, session_id, cart_id, amount, address_id=None, delivery_name=None, delivery_phone=None) -> str:
    """Confirm a payment and place the paid order for ``cart_id``."""
    payment_id = _confirm_payment(session_id)
    with reading("Failed to check payment"):
        already_used = Order.query.filter_by(payment_id=payment_id).first() is not None
    if already_used:
        logger.warning("Payment %s already has an order", payment_id)
        raise ValidationError("Payment already processed")

    with reading("Failed to retrieve cart items"):
        cart = Cart.query.filter_by(id=cart_id, user_id=user.id).first()
    if cart is None:
        raise NotFoundError("Cart not found")
    if not cart.items:
        raise ValidationError("Cart is empty")

    restaurant_ids = {
        line.menu_item.restaurant_id for line in cart.items if line.menu_item is not None
    }
    if not restaurant_ids:
        raise ValidationError("Invalid cart data: missing restaurant information")
    if len(restaurant_ids) > 1:
        raise ValidationError("Cart contains items from multiple restaurants")

    calculated = sum(
        (Decimal(str(line.menu_item.price)) * line.quantity for line in cart.items if line.menu_item is not None),
        Decimal("0"),
    )
    if abs(calculated - Decimal(str(amount))) > AMOUNT_TOLERANCE:
        logger.error("Amount mismatch: calculated %s, provided %s", calculated, amount)
        raise ValidationError("Payment amount does not match cart total")

    delivery = _delivery_for(user, address_id, delivery_name, delivery_phone)
    return write_order(
        user.id,
        cart,
        delivery,
        payment={"payment_id": payment_id, "payment_status": "paid"},
        restaurant_id=restaurant_ids.pop(),
    )


__all__ = [
    "is_dummy_mode",
    "create_payment_session",
    "verify_payment",
]
