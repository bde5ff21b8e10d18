"""
Weather Service

Outbound geocoding and current-weather lookups for shipment locations.
"""

from .weather_client import WeatherClient
from .factory import create_weather_client
from .models import (
    Coordinates,
    Wind,
    WeatherSnapshot,
    WeatherProvider,
)
from .protocols import (
    WeatherServiceError,
    ProviderError,
    ProviderResponseError,
    WeatherClientProtocol,
)

__version__ = "1.0.0"
__all__ = [
    "WeatherClient",
    "create_weather_client",
    "Coordinates",
    "Wind",
    "WeatherSnapshot",
    "WeatherProvider",
    "WeatherServiceError",
    "ProviderError",
    "ProviderResponseError",
    "WeatherClientProtocol",
]
