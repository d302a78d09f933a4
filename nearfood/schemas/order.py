import re
from typing import Literal, Optional
from pydantic import BaseModel, field_validator

PHONE_RE = re.compile(r"^[\d\s\-\+\(\)]{10,}$")


class DeliveryDetails(BaseModel):
    delivery_address: str
    delivery_phone: str
    delivery_name: str

    @field_validator("delivery_address")
    @classmethod
    def _address(cls, v):
        if len(v.strip()) < 10:
            raise ValueError("Delivery address must be at least 10 characters")
        return v.strip()

    @field_validator("delivery_phone")
    @classmethod
    def _phone(cls, v):
        if not PHONE_RE.match(v):
            raise ValueError("Invalid phone number")
        return v

    @field_validator("delivery_name")
    @classmethod
    def _name(cls, v):
        if len(v.strip()) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v.strip()


class CreateOrderRequest(DeliveryDetails):
    pass


class UpdateOrderRequest(BaseModel):
    status: Optional[Literal["PLACED", "PREPARING", "OUT_FOR_DELIVERY", "DELIVERED", "CANCELLED"]] = None
    payment_status: Optional[Literal["pending", "paid", "failed", "refunded"]] = None
    delivery_address: Optional[str] = None
    delivery_phone: Optional[str] = None
    delivery_name: Optional[str] = None

    @field_validator("delivery_phone")
    @classmethod
    def _phone(cls, v):
        if v is not None and not PHONE_RE.match(v):
            raise ValueError("Invalid phone number")
        return v
