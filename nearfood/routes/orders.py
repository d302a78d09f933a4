import logging
from flask import Blueprint, request, g, current_app
from flask_limiter.util import get_remote_address
from extensions import limiter
from nearfood.exceptions import ValidationError, DataAccessError
from nearfood.version import API_PREFIX
from nearfood.schemas.order import CreateOrderRequest, UpdateOrderRequest
from nearfood.services.orders import checkout, list_orders, get_order, update_order
from nearfood.utils import ok, error, internal_error_response, auth_required, validate_schema

order_bp = Blueprint("orders", __name__, url_prefix=f"{API_PREFIX}/orders")


@order_bp.before_request
@auth_required
def _require_user():
    return None


@order_bp.route("", methods=["GET"])
def order_history():
    return ok([order.to_dict() for order in list_orders(g.user_id)])


@order_bp.route("", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["ORDER_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many orders from this IP",
)
@validate_schema(CreateOrderRequest)
def place_order():
    """Check out the current cart."""
    try:
        order_id = checkout(g.user_id, request.validated_data.model_dump())
    except ValidationError as e:
        return error(e.message, status=400)
    except DataAccessError as e:
        logging.error("Checkout failed: %s", e.message, exc_info=e.__cause__ or e)
        return error(e.message, status=500)
    except Exception:
        logging.exception("Checkout failed")
        return internal_error_response("Failed to create order")
    return ok({"success": True, "order_id": order_id})


@order_bp.route("/<order_id>", methods=["GET"])
def order_detail(order_id):
    return ok(get_order(g.user_id, order_id).to_dict())


@order_bp.route("/<order_id>", methods=["PATCH"])
@validate_schema(UpdateOrderRequest)
def patch_order(order_id):
    changes = request.validated_data.model_dump(exclude_none=True)
    order = update_order(g.user_id, order_id, changes)
    return ok(order.to_dict())
