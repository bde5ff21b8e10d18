"""
Weather Client Factory

Factory functions for creating the weather client with real dependencies.
This is the ONLY place that builds the httpx-backed client.

Usage:
    from .factory import create_weather_client
    client = create_weather_client()
"""
from typing import Optional

from core.config import WeatherConfig

from .weather_client import WeatherClient


def create_weather_client(config: Optional[WeatherConfig] = None) -> WeatherClient:
    """
    Create WeatherClient with real dependencies.

    Args:
        config: Weather provider config (defaults to global settings)

    Returns:
        Configured WeatherClient instance
    """
    return WeatherClient(config=config)


__all__ = ["create_weather_client"]
