"""
Location Service Factory

Factory for creating LocationService with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from typing import Optional

from core.config import AppConfig, get_settings
from microservices.weather_service.factory import create_weather_client

from .location_repository import LocationRepository
from .location_service import LocationService

logger = logging.getLogger(__name__)


def create_location_service(config: Optional[AppConfig] = None) -> LocationService:
    """
    Create LocationService with all real dependencies

    Args:
        config: Optional app config (global settings if not provided)

    Returns:
        LocationService instance; call initialize() before serving requests
    """
    if config is None:
        config = get_settings()

    repository = LocationRepository(config=config.infrastructure)
    weather_client = create_weather_client(config.weather)

    logger.info("LocationService created with real dependencies")

    return LocationService(
        repository=repository,
        weather_client=weather_client,
        default_limit=config.default_query_limit,
    )


__all__ = ["create_location_service"]
