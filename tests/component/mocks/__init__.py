"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (database, weather provider).
"""

from .db_mock import MockPostgresClient
from .repository_mocks import MockLocationRepository, MockShipmentRepository
from .weather_mock import MockWeatherClient

__all__ = [
    "MockPostgresClient",
    "MockLocationRepository",
    "MockShipmentRepository",
    "MockWeatherClient",
]
