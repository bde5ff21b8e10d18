"""
Core Module for the shipping services

Shared infrastructure used by the location and shipment services.

COMPONENTS:
    - config/: Dataclass configuration loaded from environment and .env files
    - logger.py: Service logger setup
    - postgres_client.py: asyncpg pool wrapper
    - response.py: Uniform response envelope and error codes
    - validation.py: Identifier and payload validation helpers

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("shipment_service")
"""

from .config import get_settings, settings
from .response import ServiceError, success_response, error_response

__version__ = "1.0.0"
__all__ = [
    "get_settings",
    "settings",
    "ServiceError",
    "success_response",
    "error_response",
]
