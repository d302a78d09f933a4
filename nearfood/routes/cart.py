from flask import Blueprint, request, g
from nearfood.version import API_PREFIX
from nearfood.schemas.cart import AddToCartRequest, UpdateCartItemRequest
from nearfood.services.cart import (
    resolve_cart,
    add_item,
    update_item_quantity,
    remove_item,
    clear_cart,
    cart_to_dict,
)
from nearfood.utils import ok, auth_required, validate_schema

cart_bp = Blueprint("cart", __name__, url_prefix=f"{API_PREFIX}/cart")


@cart_bp.before_request
@auth_required
def _require_user():
    return None


@cart_bp.route("", methods=["GET"])
def view_cart():
    """Current cart with menu item details and pricing."""
    cart = resolve_cart(g.user_id)
    if cart is None:
        return ok({"items": []})
    return ok(cart_to_dict(cart))


@cart_bp.route("", methods=["POST"])
@validate_schema(AddToCartRequest)
def add_to_cart():
    data = request.validated_data
    line = add_item(g.user_id, data.restaurant_id, data.menu_item_id, data.quantity)
    return ok({"success": True, "cart_item_id": line.id, "quantity": line.quantity})


@cart_bp.route("", methods=["DELETE"])
def empty_cart():
    clear_cart(g.user_id)
    return ok()


@cart_bp.route("/items/<cart_item_id>", methods=["PATCH"])
@validate_schema(UpdateCartItemRequest)
def update_cart_item(cart_item_id):
    line = update_item_quantity(g.user_id, cart_item_id, request.validated_data.quantity)
    return ok({"success": True, "cart_item_id": line.id, "quantity": line.quantity})


@cart_bp.route("/items/<cart_item_id>", methods=["DELETE"])
def delete_cart_item(cart_item_id):
    remove_item(g.user_id, cart_item_id)
    return ok()
