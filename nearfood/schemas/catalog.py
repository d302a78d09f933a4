from typing import Optional
from pydantic import BaseModel, Field


class RestaurantListQuery(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class MenuQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=50, ge=1, le=100)
