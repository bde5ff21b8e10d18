"""
Shipment Service

Shipment records, location resolution on write and weather freshness on read.
"""

from .shipment_service import ShipmentService
from .models import (
    Shipment,
    ShipmentWithLocations,
    ShipmentCreateRequest,
    ShipmentUpdateRequest,
    ShipmentFilter,
)
from .protocols import (
    ShipmentServiceError,
    ShipmentNotFoundError,
    ShipmentRepositoryProtocol,
)

__all__ = [
    "ShipmentService",
    "Shipment",
    "ShipmentWithLocations",
    "ShipmentCreateRequest",
    "ShipmentUpdateRequest",
    "ShipmentFilter",
    "ShipmentServiceError",
    "ShipmentNotFoundError",
    "ShipmentRepositoryProtocol",
]
