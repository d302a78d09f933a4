from typing import Optional
from pydantic import BaseModel, field_validator
from ._fields import uuid_string

MAX_PAYMENT_AMOUNT = 100000


class CreatePaymentOrderRequest(BaseModel):
    amount: float
    currency: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def _amount(cls, v):
        if v <= 0:
            raise ValueError("Amount must be positive")
        if v > MAX_PAYMENT_AMOUNT:
            raise ValueError(f"Amount cannot exceed {MAX_PAYMENT_AMOUNT}")
        return v


class VerifyPaymentRequest(BaseModel):
    session_id: str
    cart_id: str
    amount: float
    address_id: Optional[str] = None
    delivery_name: Optional[str] = None
    delivery_phone: Optional[str] = None

    @field_validator("session_id")
    @classmethod
    def _session_id(cls, v):
        if not v:
            raise ValueError("Payment session ID is required")
        return v

    @field_validator("cart_id")
    @classmethod
    def _cart_id(cls, v):
        return uuid_string(v, "Invalid cart ID")

    @field_validator("address_id")
    @classmethod
    def _address_id(cls, v):
        return v if v is None else uuid_string(v, "Invalid address ID")

    @field_validator("amount")
    @classmethod
    def _amount(cls, v):
        if v <= 0:
            raise ValueError("Amount must be positive")
        return v
