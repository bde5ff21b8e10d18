"""
Location Service - Data Models

Location records keyed by (zip code, country code), the requests that create
and filter them, and the structured result of address parsing.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from microservices.weather_service.models import Coordinates, WeatherSnapshot


# ==================== Core Models ====================

class Location(BaseModel):
    """Location record"""
    location_id: str
    city: str
    country: str
    country_code: str = Field(..., alias="countryCode")
    zip_code: str = Field(..., alias="zipCode")
    coordinates: Coordinates
    weather: Optional[WeatherSnapshot] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class ParsedAddress(BaseModel):
    """Structured result of parsing a free-text address"""
    street: str
    zip_code: str = Field(..., alias="zipCode")
    city: str
    country: str
    country_code: str = Field(..., alias="countryCode")

    class Config:
        populate_by_name = True


class ResolvedLocations(BaseModel):
    """Location ids resolved for a sender/receiver address pair"""
    sender_location: str
    receiver_location: str


# ==================== Request Models ====================

class LocationCreateRequest(BaseModel):
    """Direct location creation"""
    city: str
    country: str
    country_code: str = Field(..., alias="countryCode")
    zip_code: str = Field(..., alias="zipCode")
    coordinates: Coordinates
    weather: Optional[WeatherSnapshot] = None

    class Config:
        populate_by_name = True


class LocationFilter(BaseModel):
    """Location listing filters (query string)"""
    zip_code: Optional[str] = Field(None, alias="zipCode")
    city: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = Field(None, alias="countryCode")
    limit: Optional[int] = Field(None, ge=0)
    skip: Optional[int] = Field(None, ge=0)

    class Config:
        populate_by_name = True


__all__ = [
    "Location",
    "ParsedAddress",
    "ResolvedLocations",
    "LocationCreateRequest",
    "LocationFilter",
]
