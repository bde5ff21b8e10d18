#!/usr/bin/env python3
"""Shipping platform main configuration

Combines all sub-configs with the settings shared by the location and
shipment services.
"""
import os
from dataclasses import dataclass, field

from .infra_config import InfraConfig
from .logging_config import LoggingConfig
from .weather_config import WeatherConfig

DEFAULT_QUERY_LIMIT = 20


def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class AppConfig:
    """Main shipping configuration with all sub-configs"""

    # Environment
    environment: str = "development"
    debug: bool = False

    # Service settings
    default_host: str = "0.0.0.0"
    location_service_port: int = 8224
    shipment_service_port: int = 8240

    # Listing queries return at most this many records unless a limit is given
    default_query_limit: int = DEFAULT_QUERY_LIMIT

    # Sub-configurations
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    infrastructure: InfraConfig = field(default_factory=InfraConfig)
    weather: WeatherConfig = field(default_factory=WeatherConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load complete configuration from environment"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=_bool(os.getenv("DEBUG", "true" if env == "development" else "false")),

            default_host=os.getenv("HOST", "0.0.0.0"),
            location_service_port=_int(os.getenv("LOCATION_SERVICE_PORT", "8224"), 8224),
            shipment_service_port=_int(os.getenv("SHIPMENT_SERVICE_PORT", "8240"), 8240),

            default_query_limit=_int(
                os.getenv("DEFAULT_QUERY_LIMIT", str(DEFAULT_QUERY_LIMIT)), DEFAULT_QUERY_LIMIT
            ),

            logging=LoggingConfig.from_env(),
            infrastructure=InfraConfig.from_env(),
            weather=WeatherConfig.from_env(),
        )
