#!/usr/bin/env python3
"""Weather provider configuration

Endpoints and credentials for the third-party geocoding and current-weather
API, plus the interval after which a stored weather snapshot is outdated.
"""
import os
from dataclasses import dataclass

DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS = 7200


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class WeatherConfig:
    """Weather / geocoding provider settings"""
    weather_api_url: str = "https://api.openweathermap.org/data/2.5/weather"
    geocoding_api_url: str = "https://api.openweathermap.org/geo/1.0"
    api_key: str = ""
    timeout: float = 30.0

    # Locations whose weather is older than this are refreshed on listing
    update_interval_seconds: int = DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS

    @classmethod
    def from_env(cls) -> 'WeatherConfig':
        """Load weather provider config from environment"""
        return cls(
            weather_api_url=os.getenv(
                "WEATHER_API_URL", "https://api.openweathermap.org/data/2.5/weather"
            ),
            geocoding_api_url=os.getenv(
                "GEOCODING_API_URL", "https://api.openweathermap.org/geo/1.0"
            ),
            api_key=os.getenv("WEATHER_API_KEY", ""),
            timeout=_float(os.getenv("WEATHER_API_TIMEOUT", "30"), 30.0),
            update_interval_seconds=_int(
                os.getenv("WEATHER_UPDATE_INTERVAL_IN_SECONDS", ""),
                DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS,
            ),
        )
