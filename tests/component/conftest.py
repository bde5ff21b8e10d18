"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── location/    LocationService + location HTTP app
    ├── shipment/    ShipmentService + shipment HTTP app
    ├── weather/     WeatherClient over a mock transport
    ├── scripts/     CLI scripts
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from microservices.location_service.location_service import LocationService
from microservices.shipment_service.shipment_service import ShipmentService

from tests.component.mocks import (
    MockLocationRepository,
    MockPostgresClient,
    MockShipmentRepository,
    MockWeatherClient,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Mocks
# =============================================================================

@pytest.fixture
def mock_db() -> MockPostgresClient:
    """Mock PostgreSQL client"""
    return MockPostgresClient()


@pytest.fixture
def mock_weather_client() -> MockWeatherClient:
    return MockWeatherClient()


@pytest.fixture
def location_repository() -> MockLocationRepository:
    return MockLocationRepository()


@pytest.fixture
def shipment_repository(location_repository) -> MockShipmentRepository:
    return MockShipmentRepository(location_repository)


# =============================================================================
# Services
# =============================================================================

@pytest.fixture
def location_service(location_repository, mock_weather_client) -> LocationService:
    return LocationService(
        repository=location_repository,
        weather_client=mock_weather_client,
        default_limit=20,
    )


@pytest.fixture
def shipment_service(shipment_repository, location_service) -> ShipmentService:
    return ShipmentService(
        repository=shipment_repository,
        location_service=location_service,
        weather_update_interval=7200,
        default_limit=20,
    )
