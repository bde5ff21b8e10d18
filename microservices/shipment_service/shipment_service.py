"""
Shipment Service Business Logic

Shipment CRUD on top of the location service: addresses are resolved to
location ids before a shipment is written, and listings refresh the weather
of locations whose snapshot has gone stale.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from core.config import DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS
from core.validation import parse_identifier
from microservices.location_service.location_service import LocationService
from microservices.location_service.models import Location

from .models import (
    Shipment,
    ShipmentCreateRequest,
    ShipmentFilter,
    ShipmentUpdateRequest,
    ShipmentWithLocations,
)
from .protocols import ShipmentNotFoundError, ShipmentRepositoryProtocol

logger = logging.getLogger(__name__)


class ShipmentService:
    """Shipment service core business logic"""

    def __init__(
        self,
        repository: ShipmentRepositoryProtocol,
        location_service: LocationService,
        weather_update_interval: int = DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS,
        default_limit: int = 20,
    ):
        self.repository = repository
        self.location_service = location_service
        self.weather_update_interval = weather_update_interval
        self.default_limit = default_limit

    async def initialize(self):
        await self.location_service.initialize()
        await self.repository.initialize()

    async def close(self):
        await self.repository.close()
        await self.location_service.close()

    async def check_connection(self) -> bool:
        return await self.repository.check_connection()

    # ====================
    # Shipment CRUD
    # ====================

    async def create_shipment(self, request: ShipmentCreateRequest) -> Shipment:
        """
        Create a shipment.

        Raises:
            InvalidAddressError: sender or receiver address does not parse
        """
        resolved = await self.location_service.resolve_sender_and_receiver(
            request.sender_address, request.receiver_address
        )

        data = request.model_dump()
        data.update(resolved.model_dump())

        shipment = await self.repository.create_shipment(data)
        logger.info(f"Created shipment {shipment.shipment_id} ({shipment.tracking_number})")
        return shipment

    async def find_shipments(self, filters: ShipmentFilter) -> List[ShipmentWithLocations]:
        """List shipments, refreshing stale location weather on the way out"""
        limit = filters.limit or self.default_limit
        shipments = await self.repository.list_shipments(filters, limit=limit)
        return await self.refresh_outdated_weather(shipments)

    async def find_shipment(self, shipment_id: str) -> Optional[ShipmentWithLocations]:
        shipment_id = parse_identifier(shipment_id, field="shipment_id")
        return await self.repository.get_shipment_by_id(shipment_id)

    async def update_shipment(
        self, shipment_id: str, request: ShipmentUpdateRequest
    ) -> Shipment:
        """
        Apply a partial update. A changed address re-resolves that side's location.

        Raises:
            RequestValidationFailed: malformed identifier
            ShipmentNotFoundError: no shipment with this id
        """
        shipment_id = parse_identifier(shipment_id, field="shipment_id")
        fields = request.model_dump(exclude_unset=True, exclude_none=True)

        if "sender_address" in fields or "receiver_address" in fields:
            # Don't create locations for a shipment that isn't there
            if await self.repository.get_shipment_by_id(shipment_id) is None:
                raise ShipmentNotFoundError(shipment_id)

            if "sender_address" in fields:
                fields["sender_location"] = await self.location_service.resolve_address(
                    fields["sender_address"], field="sender_address"
                )
            if "receiver_address" in fields:
                fields["receiver_location"] = await self.location_service.resolve_address(
                    fields["receiver_address"], field="receiver_address"
                )

        updated = await self.repository.update_shipment(shipment_id, fields)
        if updated is None:
            raise ShipmentNotFoundError(shipment_id)

        logger.info(f"Updated shipment {shipment_id}: {sorted(fields)}")
        return updated

    async def delete_shipment(self, shipment_id: str) -> Shipment:
        """
        Raises:
            RequestValidationFailed: malformed identifier
            ShipmentNotFoundError: no shipment with this id
        """
        shipment_id = parse_identifier(shipment_id, field="shipment_id")
        deleted = await self.repository.delete_shipment(shipment_id)
        if deleted is None:
            raise ShipmentNotFoundError(
                shipment_id, "The data was not found! May have been deleted!"
            )

        logger.info(f"Deleted shipment {shipment_id}")
        return deleted

    # ====================
    # Weather freshness
    # ====================

    def is_weather_outdated(self, location: Optional[Location], now: datetime) -> bool:
        """Stale when whole seconds since the last update exceed the interval"""
        if location is None or location.updated_at is None:
            return False
        elapsed = int((now - location.updated_at).total_seconds())
        return elapsed > self.weather_update_interval

    async def refresh_outdated_weather(
        self, shipments: List[ShipmentWithLocations]
    ) -> List[ShipmentWithLocations]:
        """
        Refresh every stale location in the batch once and swap the refreshed
        copies into the shipments.

        Each side is replaced independently; a side without a refreshed copy
        keeps its own location.
        """
        now = datetime.now(timezone.utc)

        outdated: Dict[str, Location] = {}
        for shipment in shipments:
            for location in (shipment.sender_location, shipment.receiver_location):
                if location is None or location.location_id in outdated:
                    continue
                if self.is_weather_outdated(location, now):
                    outdated[location.location_id] = location

        if not outdated:
            return shipments

        logger.info(f"Refreshing weather for {len(outdated)} outdated locations")

        refreshed: Dict[str, Location] = {}
        for location_id, location in outdated.items():
            refreshed[location_id] = await self.location_service.refresh_weather(location)

        def replacement(location: Optional[Location]) -> Optional[Location]:
            if location is None:
                return None
            return refreshed.get(location.location_id, location)

        return [
            shipment.model_copy(update={
                "sender_location": replacement(shipment.sender_location),
                "receiver_location": replacement(shipment.receiver_location),
            })
            for shipment in shipments
        ]


__all__ = ["ShipmentService"]
