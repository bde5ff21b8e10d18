"""
Shipment Service Factory

Factory for creating ShipmentService with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from typing import Optional

from core.config import AppConfig, get_settings
from microservices.location_service.factory import create_location_service

from .shipment_repository import ShipmentRepository
from .shipment_service import ShipmentService

logger = logging.getLogger(__name__)


def create_shipment_service(config: Optional[AppConfig] = None) -> ShipmentService:
    """
    Create ShipmentService with all real dependencies

    Args:
        config: Optional app config (global settings if not provided)

    Returns:
        ShipmentService instance; call initialize() before serving requests
    """
    if config is None:
        config = get_settings()

    repository = ShipmentRepository(config=config.infrastructure)
    location_service = create_location_service(config)

    logger.info("ShipmentService created with real dependencies")

    return ShipmentService(
        repository=repository,
        location_service=location_service,
        weather_update_interval=config.weather.update_interval_seconds,
        default_limit=config.default_query_limit,
    )


__all__ = ["create_shipment_service"]
