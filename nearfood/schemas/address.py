from typing import Optional
from pydantic import BaseModel, field_validator


def _required(value, message):
    if value is None or not value.strip():
        raise ValueError(message)
    return value.strip()


def _check_phone(value):
    if value is not None and len(value) < 10:
        raise ValueError("Phone number must be at least 10 digits")
    return value


class AddressCreateRequest(BaseModel):
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str = "India"
    phone: str
    is_default: bool = False

    @field_validator("address_line1")
    @classmethod
    def _line1(cls, v):
        return _required(v, "Address line 1 is required")

    @field_validator("city")
    @classmethod
    def _city(cls, v):
        return _required(v, "City is required")

    @field_validator("state")
    @classmethod
    def _state(cls, v):
        return _required(v, "State is required")

    @field_validator("postal_code")
    @classmethod
    def _postal_code(cls, v):
        return _required(v, "Postal code is required")

    @field_validator("phone")
    @classmethod
    def _phone(cls, v):
        return _check_phone(v)


class AddressUpdateRequest(BaseModel):
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    is_default: Optional[bool] = None

    @field_validator("address_line1")
    @classmethod
    def _line1(cls, v):
        return v if v is None else _required(v, "Address line 1 is required")

    @field_validator("city")
    @classmethod
    def _city(cls, v):
        return v if v is None else _required(v, "City is required")

    @field_validator("state")
    @classmethod
    def _state(cls, v):
        return v if v is None else _required(v, "State is required")

    @field_validator("postal_code")
    @classmethod
    def _postal_code(cls, v):
        return v if v is None else _required(v, "Postal code is required")

    @field_validator("phone")
    @classmethod
    def _phone(cls, v):
        return _check_phone(v)
