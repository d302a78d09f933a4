from flask import Blueprint, request
from nearfood.version import API_PREFIX
from nearfood.schemas.payment import CreatePaymentOrderRequest, VerifyPaymentRequest
from nearfood.services.payments import create_payment_session, verify_payment
from nearfood.utils import ok, auth_required, validate_schema

payment_bp = Blueprint("payments", __name__, url_prefix=f"{API_PREFIX}/payments")


@payment_bp.before_request
@auth_required
def _require_user():
    return None


@payment_bp.route("/create-order", methods=["POST"])
@validate_schema(CreatePaymentOrderRequest)
def create_payment_order():
    data = request.validated_data
    session = create_payment_session(
        request.user,
        data.amount,
        currency=data.currency,
        origin=request.headers.get("Origin"),
    )
    return ok(session)


@payment_bp.route("/verify", methods=["POST"])
@validate_schema(VerifyPaymentRequest)
def verify():
    data = request.validated_data
    order_id = verify_payment(
        request.user,
        data.session_id,
        data.cart_id,
        data.amount,
        address_id=data.address_id,
        delivery_name=data.delivery_name,
        delivery_phone=data.delivery_phone,
    )
    return ok({"success": True, "order_id": order_id})
