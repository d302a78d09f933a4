from pydantic import BaseModel, field_validator
from ._fields import uuid_string

MAX_QUANTITY = 99


class AddToCartRequest(BaseModel):
    restaurant_id: str
    menu_item_id: str
    quantity: int = 1

    @field_validator("restaurant_id")
    @classmethod
    def _restaurant_id(cls, v):
        return uuid_string(v, "Invalid restaurant ID")

    @field_validator("menu_item_id")
    @classmethod
    def _menu_item_id(cls, v):
        return uuid_string(v, "Invalid menu item ID")

    @field_validator("quantity")
    @classmethod
    def _quantity(cls, v):
        if v < 1:
            raise ValueError("Quantity must be at least 1")
        if v > MAX_QUANTITY:
            raise ValueError(f"Quantity cannot exceed {MAX_QUANTITY}")
        return v


class UpdateCartItemRequest(BaseModel):
    quantity: int

    @field_validator("quantity")
    @classmethod
    def _quantity(cls, v):
        if v < 1:
            raise ValueError("Quantity must be at least 1")
        if v > MAX_QUANTITY:
            raise ValueError(f"Quantity cannot exceed {MAX_QUANTITY}")
        return v
