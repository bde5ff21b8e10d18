"""
Location Service Protocols (Interfaces)

Protocol definitions for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable, Optional, List

from core.response import ErrorCode, ServiceError, StatusCode
from microservices.weather_service.models import Coordinates, WeatherSnapshot

from .models import Location, LocationFilter


# ============================================================================
# Custom Exceptions
# ============================================================================


class LocationServiceError(ServiceError):
    """Base exception for location service errors"""
    pass


class InvalidAddressError(LocationServiceError):
    """Address could not be parsed into a location"""
    status_code = StatusCode.FORBIDDEN

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Invalid {field}")


class LocationNotFoundError(LocationServiceError):
    """Location not found"""
    code = ErrorCode.NOT_FOUND
    status_code = StatusCode.NOT_FOUND

    def __init__(self, location_id: str):
        self.location_id = location_id
        super().__init__("The data was not found!")


# ============================================================================
# Repository Protocol
# ============================================================================


@runtime_checkable
class LocationRepositoryProtocol(Protocol):
    """Interface for Location Repository"""

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def create_location(
        self,
        city: str,
        country: str,
        country_code: str,
        zip_code: str,
        coordinates: Coordinates,
        weather: Optional[WeatherSnapshot] = None,
    ) -> Location:
        """Create a location, or return the existing one for the same (zip, country code)"""
        ...

    async def get_location_by_id(self, location_id: str) -> Optional[Location]: ...

    async def get_location_by_zip_code_and_country_code(
        self, zip_code: str, country_code: str
    ) -> Optional[Location]: ...

    async def list_locations(self, filters: LocationFilter, limit: int) -> List[Location]: ...

    async def update_location(
        self, location_id: str, weather: WeatherSnapshot
    ) -> Optional[Location]:
        """Replace the weather snapshot and bump updated_at"""
        ...

    async def check_connection(self) -> bool: ...


__all__ = [
    "LocationServiceError",
    "InvalidAddressError",
    "LocationNotFoundError",
    "LocationRepositoryProtocol",
]
