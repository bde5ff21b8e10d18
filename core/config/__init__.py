#!/usr/bin/env python3
"""Modular configuration system for the shipping services

Configuration hierarchy:
- infra_config: PostgreSQL document store
- weather_config: Third-party geocoding / weather provider
- logging_config: Logging configuration
- app_config: Service settings combining the above
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .infra_config import InfraConfig
from .weather_config import WeatherConfig, DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS
from .app_config import AppConfig, DEFAULT_QUERY_LIMIT

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = AppConfig.from_env()

def get_settings() -> AppConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> AppConfig:
    """Reload settings from environment"""
    global settings
    settings = AppConfig.from_env()
    return settings

__all__ = [
    # Main config
    'AppConfig',
    'get_settings',
    'reload_settings',
    'settings',
    # Sub-configs
    'LoggingConfig',
    'InfraConfig',
    'WeatherConfig',
    # Defaults
    'DEFAULT_QUERY_LIMIT',
    'DEFAULT_WEATHER_UPDATE_INTERVAL_IN_SECONDS',
]
