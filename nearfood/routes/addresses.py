from flask import Blueprint, request, g
from nearfood.version import API_PREFIX
from nearfood.schemas.address import AddressCreateRequest, AddressUpdateRequest
from nearfood.services.addresses import (
    list_addresses,
    get_address,
    create_address,
    update_address,
    delete_address,
)
from nearfood.utils import ok, auth_required, validate_schema

address_bp = Blueprint("addresses", __name__, url_prefix=f"{API_PREFIX}/addresses")


@address_bp.before_request
@auth_required
def _require_user():
    return None


@address_bp.route("", methods=["GET"])
def all_addresses():
    return ok([a.to_dict() for a in list_addresses(g.user_id)])


@address_bp.route("", methods=["POST"])
@validate_schema(AddressCreateRequest)
def add_address():
    address = create_address(g.user_id, request.validated_data.model_dump())
    return ok(address.to_dict(), status=201)


@address_bp.route("/<address_id>", methods=["GET"])
def address_detail(address_id):
    return ok(get_address(g.user_id, address_id).to_dict())


@address_bp.route("/<address_id>", methods=["PATCH"])
@validate_schema(AddressUpdateRequest)
def edit_address(address_id):
    fields = request.validated_data.model_dump(exclude_unset=True)
    # Explicit nulls are only meaningful for the optional second line
    fields = {k: v for k, v in fields.items() if v is not None or k == "address_line2"}
    address = update_address(g.user_id, address_id, fields)
    return ok(address.to_dict())


@address_bp.route("/<address_id>", methods=["DELETE"])
def remove_address(address_id):
    delete_address(g.user_id, address_id)
    return ok()
