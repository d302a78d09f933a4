import logging
from typing import List

from models import db
from models.address import UserAddress
from nearfood.exceptions import NotFoundError
from nearfood.utils.db import transactional, reading

logger = logging.getLogger(__name__)


def _unset_other_defaults(user_id: str, keep_id: str) -> None:
    # Runs inside the caller's transaction
    UserAddress.query.filter(
        UserAddress.user_id == user_id,
        UserAddress.id != keep_id,
        UserAddress.is_default.is_(True),
    ).update({"is_default": False}, synchronize_session=False)


def list_addresses(user_id: str) -> List[UserAddress]:
    with reading("Failed to fetch addresses"):
        return (
            UserAddress.query.filter_by(user_id=user_id)
            .order_by(UserAddress.is_default.desc(), UserAddress.created_at.desc())
            .all()
        )


def get_address(user_id: str, address_id: str) -> UserAddress:
    with reading("Failed to fetch address"):
        address = UserAddress.query.filter_by(id=address_id, user_id=user_id).first()
    if not address:
        raise NotFoundError("Address not found")
    return address


def create_address(user_id: str, fields: dict) -> UserAddress:
    address = UserAddress(user_id=user_id, **fields)
    with transactional("Failed to create address"):
        db.session.add(address)
        db.session.flush()
        if address.is_default:
            _unset_other_defaults(user_id, address.id)
    return address


def update_address(user_id: str, address_id: str, fields: dict) -> UserAddress:
    address = get_address(user_id, address_id)
    with transactional("Failed to update address"):
        for key, value in fields.items():
            setattr(address, key, value)
        if fields.get("is_default"):
            _unset_other_defaults(user_id, address.id)
    return address


def delete_address(user_id: str, address_id: str) -> None:
    address = get_address(user_id, address_id)
    with transactional("Failed to delete address"):
        db.session.delete(address)
