"""
Weather Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable

from core.response import ServiceError

from .models import Coordinates, WeatherSnapshot


# =============================================================================
# Custom Exceptions
# =============================================================================


class WeatherServiceError(ServiceError):
    """Base exception for weather service"""
    pass


class ProviderError(WeatherServiceError):
    """Raised when the external weather provider call fails"""
    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"Provider {provider} error: {message}")


class ProviderResponseError(WeatherServiceError):
    """Raised when the provider payload cannot be normalized"""
    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"Provider {provider} returned an unusable response: {message}")


# =============================================================================
# Client Protocol
# =============================================================================


@runtime_checkable
class WeatherClientProtocol(Protocol):
    """
    Interface for the outbound weather/geocoding client.

    Implementations:
    - WeatherClient (production - OpenWeatherMap over httpx)
    - MockWeatherClient (testing)
    """

    async def get_coordinates_from_zip_code(
        self, zip_code: str, country_code: str
    ) -> Coordinates:
        """
        Resolve a postal code to coordinates.

        Args:
            zip_code: Postal code
            country_code: ISO-2 country code

        Returns:
            Coordinates of the postal code area

        Raises:
            ProviderError: HTTP failure
            ProviderResponseError: payload without usable coordinates
        """
        ...

    async def get_current_weather(self, lat: float, lon: float) -> WeatherSnapshot:
        """
        Fetch current weather at coordinates.

        Raises:
            ProviderError: HTTP failure
            ProviderResponseError: payload that cannot be normalized
        """
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client"""
        ...


__all__ = [
    "WeatherServiceError",
    "ProviderError",
    "ProviderResponseError",
    "WeatherClientProtocol",
]
