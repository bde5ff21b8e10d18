"""
Location Service

Address parsing, location records and their weather.
"""

from .address_parser import get_country_iso2, parse_address
from .location_service import LocationService
from .models import Location, LocationFilter, LocationCreateRequest, ParsedAddress, ResolvedLocations
from .protocols import (
    LocationServiceError,
    InvalidAddressError,
    LocationNotFoundError,
    LocationRepositoryProtocol,
)

__all__ = [
    "get_country_iso2",
    "parse_address",
    "LocationService",
    "Location",
    "LocationFilter",
    "LocationCreateRequest",
    "ParsedAddress",
    "ResolvedLocations",
    "LocationServiceError",
    "InvalidAddressError",
    "LocationNotFoundError",
    "LocationRepositoryProtocol",
]
