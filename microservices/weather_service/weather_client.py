"""
Weather Client - Outbound Provider Calls

Thin async wrapper over the OpenWeatherMap geocoding-by-zip and
current-weather endpoints. Responses are normalized into the service's own
shapes. No retries and no caching: failures propagate to the caller.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from core.config import WeatherConfig, get_settings

from .models import (
    Coordinates,
    ProviderWeatherResponse,
    ProviderZipResponse,
    WeatherProvider,
    WeatherSnapshot,
)
from .protocols import ProviderError, ProviderResponseError

logger = logging.getLogger(__name__)


class WeatherClient:
    """OpenWeatherMap client"""

    provider = WeatherProvider.OPENWEATHERMAP.value

    def __init__(
        self,
        config: Optional[WeatherConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or get_settings().weather
        self.api_key = self.config.api_key
        self.weather_api_url = self.config.weather_api_url.rstrip("/")
        self.geocoding_api_url = self.config.geocoding_api_url.rstrip("/")

        if not self.api_key:
            logger.warning("Weather API key not configured")

        # HTTP client
        self.http_client = http_client or httpx.AsyncClient(timeout=self.config.timeout)

    async def close(self):
        """Close HTTP client"""
        await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =============================================================================
    # Geocoding
    # =============================================================================

    async def get_coordinates_from_zip_code(self, zip_code: str, country_code: str) -> Coordinates:
        """Resolve a postal code to coordinates"""
        data = await self._get(
            f"{self.geocoding_api_url}/zip",
            {"zip": f"{zip_code},{country_code}", "appid": self.api_key},
        )

        try:
            payload = ProviderZipResponse.model_validate(data)
            return Coordinates(lat=payload.lat, lon=payload.lon)
        except ValidationError as e:
            logger.error(f"Unusable geocoding response for {zip_code},{country_code}: {e}")
            raise ProviderResponseError(self.provider, str(e)) from e

    # =============================================================================
    # Current Weather
    # =============================================================================

    async def get_current_weather(self, lat: float, lon: float) -> WeatherSnapshot:
        """Fetch current weather at coordinates"""
        data = await self._get(
            self.weather_api_url,
            {"lat": lat, "lon": lon, "appid": self.api_key},
        )

        try:
            payload = ProviderWeatherResponse.model_validate(data)
            return WeatherSnapshot.model_validate(self.normalize_weather_data(payload))
        except ValidationError as e:
            logger.error(f"Unusable weather response for ({lat}, {lon}): {e}")
            raise ProviderResponseError(self.provider, str(e)) from e

    @staticmethod
    def normalize_weather_data(payload: ProviderWeatherResponse) -> Dict[str, Any]:
        """Transform the provider payload to our format"""
        condition = payload.weather[0] if payload.weather else None
        main = payload.main
        wind = payload.wind

        return {
            "main": condition.main if condition else None,
            "description": condition.description if condition else None,
            "temp": main.temp if main else None,
            "feels_like": main.feels_like if main else None,
            "temp_min": main.temp_min if main else None,
            "temp_max": main.temp_max if main else None,
            "pressure": main.pressure if main else None,
            "humidity": main.humidity if main else None,
            "visibility": payload.visibility,
            "wind": {
                "speed": wind.speed if wind else None,
                "deg": wind.deg if wind else None,
            },
        }

    async def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = await self.http_client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"{self.provider} API error: {e.response.status_code}")
            raise ProviderError(self.provider, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Error calling {self.provider}: {e}")
            raise ProviderError(self.provider, str(e)) from e


__all__ = ["WeatherClient"]
