"""
Shipment Service Protocols (Interfaces)

Protocol definitions for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from core.response import ErrorCode, ServiceError, StatusCode

from .models import Shipment, ShipmentFilter, ShipmentWithLocations


# ============================================================================
# Custom Exceptions
# ============================================================================


class ShipmentServiceError(ServiceError):
    """Base exception for shipment service errors"""
    pass


class ShipmentNotFoundError(ShipmentServiceError):
    """Update or delete targeted a shipment that does not exist"""
    code = ErrorCode.NOT_FOUND
    status_code = StatusCode.NOT_FOUND

    def __init__(self, shipment_id: str, message: str = "The data was not found!"):
        self.shipment_id = shipment_id
        super().__init__(message)


# ============================================================================
# Repository Protocol
# ============================================================================


@runtime_checkable
class ShipmentRepositoryProtocol(Protocol):
    """Interface for Shipment Repository"""

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def create_shipment(self, data: Dict[str, Any]) -> Shipment: ...

    async def get_shipment_by_id(self, shipment_id: str) -> Optional[ShipmentWithLocations]: ...

    async def list_shipments(
        self, filters: ShipmentFilter, limit: int
    ) -> List[ShipmentWithLocations]: ...

    async def update_shipment(
        self, shipment_id: str, fields: Dict[str, Any]
    ) -> Optional[Shipment]:
        """Apply the given fields; None when no shipment matched"""
        ...

    async def delete_shipment(self, shipment_id: str) -> Optional[Shipment]:
        """Delete and return the shipment; None when no shipment matched"""
        ...

    async def check_connection(self) -> bool: ...


__all__ = [
    "ShipmentServiceError",
    "ShipmentNotFoundError",
    "ShipmentRepositoryProtocol",
]
