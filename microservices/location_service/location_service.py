"""
Location Service Business Logic

Location listing and creation, address-to-location resolution and weather
refresh of stored locations.
"""

import logging
from typing import List, Optional

from core.validation import parse_identifier
from microservices.weather_service.protocols import WeatherClientProtocol

from .address_parser import parse_address
from .models import (
    Location,
    LocationCreateRequest,
    LocationFilter,
    ParsedAddress,
    ResolvedLocations,
)
from .protocols import (
    InvalidAddressError,
    LocationNotFoundError,
    LocationRepositoryProtocol,
)

logger = logging.getLogger(__name__)


class LocationService:
    """Location service core business logic"""

    def __init__(
        self,
        repository: LocationRepositoryProtocol,
        weather_client: WeatherClientProtocol,
        default_limit: int = 20,
    ):
        self.repository = repository
        self.weather_client = weather_client
        self.default_limit = default_limit

    async def initialize(self):
        await self.repository.initialize()

    async def close(self):
        await self.weather_client.close()
        await self.repository.close()

    async def check_connection(self) -> bool:
        return await self.repository.check_connection()

    # ====================
    # Queries
    # ====================

    async def find_locations(self, filters: LocationFilter) -> List[Location]:
        """List locations matching the filters"""
        limit = filters.limit or self.default_limit
        return await self.repository.list_locations(filters, limit=limit)

    async def find_location(self, location_id: str) -> Optional[Location]:
        """
        Get a single location.

        Raises:
            RequestValidationFailed: malformed identifier
        """
        location_id = parse_identifier(location_id, field="location_id")
        return await self.repository.get_location_by_id(location_id)

    # ====================
    # Creation
    # ====================

    async def create_location(self, request: LocationCreateRequest) -> Location:
        """Create a location directly; an existing (zip, country code) record is returned as is"""
        location = await self.repository.create_location(
            city=request.city,
            country=request.country,
            country_code=request.country_code,
            zip_code=request.zip_code,
            coordinates=request.coordinates,
            weather=request.weather,
        )
        logger.info(f"Location {location.location_id} ready for {request.zip_code},{request.country_code}")
        return location

    # ====================
    # Resolution
    # ====================

    async def resolve_sender_and_receiver(
        self, sender_address: str, receiver_address: str
    ) -> ResolvedLocations:
        """
        Turn a sender/receiver address pair into two location ids.

        Both addresses are parsed before anything is written, so an invalid
        receiver never leaves a freshly created sender location behind.

        Raises:
            InvalidAddressError: either address does not parse
        """
        sender = parse_address(sender_address)
        if sender is None:
            raise InvalidAddressError("sender_address")

        receiver = parse_address(receiver_address)
        if receiver is None:
            raise InvalidAddressError("receiver_address")

        sender_location = await self._resolve_parsed(sender)
        receiver_location = await self._resolve_parsed(receiver)

        return ResolvedLocations(
            sender_location=sender_location.location_id,
            receiver_location=receiver_location.location_id,
        )

    async def resolve_address(self, address: str, field: str = "address") -> str:
        """
        Resolve a single address to a location id.

        Raises:
            InvalidAddressError: address does not parse
        """
        parsed = parse_address(address)
        if parsed is None:
            raise InvalidAddressError(field)
        location = await self._resolve_parsed(parsed)
        return location.location_id

    async def _resolve_parsed(self, parsed: ParsedAddress) -> Location:
        existing = await self.repository.get_location_by_zip_code_and_country_code(
            parsed.zip_code, parsed.country_code
        )
        if existing:
            logger.debug(f"Reusing location {existing.location_id} for {parsed.zip_code},{parsed.country_code}")
            return existing

        coordinates = await self.weather_client.get_coordinates_from_zip_code(
            parsed.zip_code, parsed.country_code
        )
        location = await self.repository.create_location(
            city=parsed.city,
            country=parsed.country,
            country_code=parsed.country_code,
            zip_code=parsed.zip_code,
            coordinates=coordinates,
        )
        logger.info(f"Created location {location.location_id} for {parsed.zip_code},{parsed.country_code}")
        return location

    # ====================
    # Weather
    # ====================

    async def refresh_weather(self, location: Location) -> Location:
        """
        Fetch current weather for a location and persist it.

        Raises:
            LocationNotFoundError: location vanished from the store
        """
        weather = await self.weather_client.get_current_weather(
            lat=location.coordinates.lat, lon=location.coordinates.lon
        )
        updated = await self.repository.update_location(location.location_id, weather)
        if updated is None:
            raise LocationNotFoundError(location.location_id)

        logger.debug(f"Weather refreshed for location {location.location_id}")
        return updated


__all__ = ["LocationService"]
