"""
Shipment Service - Data Models

Shipments reference a sender and a receiver location by id. Reads return
them with both locations expanded in place.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from microservices.location_service.address_parser import is_valid_address
from microservices.location_service.models import Location


def _check_address(value: Optional[str], field: str) -> Optional[str]:
    if value is not None and not is_valid_address(value):
        raise PydanticCustomError(
            "invalid_address",
            f"{field} is invalid, make sure there is no typo.",
        )
    return value


# ==================== Core Models ====================

class Shipment(BaseModel):
    """Shipment record as stored"""
    shipment_id: str
    tracking_number: str
    carrier: str
    sender_address: str
    receiver_address: str
    article_name: str
    article_quantity: int
    article_price: float
    sku: str = Field(..., alias="SKU")
    sender_location: str
    receiver_location: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class ShipmentWithLocations(Shipment):
    """Shipment with sender/receiver locations expanded"""
    sender_location: Optional[Location] = None
    receiver_location: Optional[Location] = None


# ==================== Request Models ====================

class ShipmentCreateRequest(BaseModel):
    """Create shipment request"""
    tracking_number: str
    carrier: str
    sender_address: str
    receiver_address: str
    article_name: str
    article_quantity: int = Field(..., gt=0)
    article_price: float = Field(..., ge=0)
    sku: str = Field(..., alias="SKU")

    class Config:
        populate_by_name = True

    @field_validator("sender_address")
    @classmethod
    def validate_sender_address(cls, v):
        return _check_address(v, "sender_address")

    @field_validator("receiver_address")
    @classmethod
    def validate_receiver_address(cls, v):
        return _check_address(v, "receiver_address")


class ShipmentUpdateRequest(BaseModel):
    """Partial shipment update; a price of 0 is allowed (free items)"""
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    sender_address: Optional[str] = None
    receiver_address: Optional[str] = None
    article_name: Optional[str] = None
    article_quantity: Optional[int] = Field(None, gt=0)
    article_price: Optional[float] = Field(None, ge=0)
    sku: Optional[str] = Field(None, alias="SKU")

    class Config:
        populate_by_name = True

    @field_validator("sender_address")
    @classmethod
    def validate_sender_address(cls, v):
        return _check_address(v, "sender_address")

    @field_validator("receiver_address")
    @classmethod
    def validate_receiver_address(cls, v):
        return _check_address(v, "receiver_address")


class ShipmentFilter(BaseModel):
    """Shipment listing filters (query string)"""
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    limit: Optional[int] = Field(None, ge=0)
    skip: Optional[int] = Field(None, ge=0)


__all__ = [
    "Shipment",
    "ShipmentWithLocations",
    "ShipmentCreateRequest",
    "ShipmentUpdateRequest",
    "ShipmentFilter",
]
