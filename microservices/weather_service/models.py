"""
Weather Service Models

Normalized weather/geocoding shapes used by the shipping services, plus the
provider payload shapes they are normalized from.
"""

from typing import Optional, List
from pydantic import BaseModel, Field
from enum import Enum


class WeatherProvider(str, Enum):
    """Weather data providers"""
    OPENWEATHERMAP = "openweathermap"


# Normalized Models

class Coordinates(BaseModel):
    """Geographic coordinates"""
    lon: float = Field(..., ge=-180, le=180, description="Longitude (-180 to 180)")
    lat: float = Field(..., ge=-90, le=90, description="Latitude (-90 to 90)")

    class Config:
        from_attributes = True


class Wind(BaseModel):
    """Wind conditions"""
    speed: Optional[float] = Field(None, description="Wind speed")
    deg: Optional[float] = Field(None, description="Wind direction in degrees")


class WeatherSnapshot(BaseModel):
    """Current weather stored on a location"""
    main: str = Field(..., description="Weather condition (e.g., Clear, Rain)")
    description: str = Field(..., description="Weather description")
    temp: float = Field(..., description="Temperature")
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: Optional[float] = Field(None, description="Atmospheric pressure in hPa")
    humidity: Optional[float] = Field(None, description="Humidity percentage")
    visibility: Optional[float] = Field(None, description="Visibility in meters")
    wind: Optional[Wind] = None

    class Config:
        from_attributes = True


# Provider Payloads
# Every field is optional: third-party payloads change without notice and
# are validated only after normalization.

class ProviderCoord(BaseModel):
    lon: Optional[float] = None
    lat: Optional[float] = None


class ProviderCondition(BaseModel):
    id: Optional[int] = None
    main: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class ProviderMain(BaseModel):
    temp: Optional[float] = None
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None


class ProviderWind(BaseModel):
    speed: Optional[float] = None
    deg: Optional[float] = None


class ProviderWeatherResponse(BaseModel):
    """Current weather payload from the provider"""
    coord: Optional[ProviderCoord] = None
    weather: List[ProviderCondition] = Field(default_factory=list)
    main: Optional[ProviderMain] = None
    visibility: Optional[float] = None
    wind: Optional[ProviderWind] = None
    name: Optional[str] = None
    cod: Optional[int] = None


class ProviderZipResponse(BaseModel):
    """Geocoding-by-zip payload from the provider"""
    zip: Optional[str] = None
    name: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    country: Optional[str] = None


__all__ = [
    "WeatherProvider",
    "Coordinates",
    "Wind",
    "WeatherSnapshot",
    "ProviderCoord",
    "ProviderCondition",
    "ProviderMain",
    "ProviderWind",
    "ProviderWeatherResponse",
    "ProviderZipResponse",
]
