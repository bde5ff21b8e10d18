"""
Service Logger Setup

Centralized logger configuration for the shipping microservices.

Usage:
    from core.logger import setup_service_logger

    logger = setup_service_logger("shipment_service")
    logger.info("Service started")
"""

import logging
import sys
from typing import Optional

from core.config import get_settings

_configured_services = set()


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return the logger for a service.

    Handlers are attached once per service name; repeated calls return the
    already configured logger.

    Args:
        service_name: Logger name (e.g., "location_service")
        level: Log level override (defaults to LoggingConfig.log_level)
        log_file: Optional log file path (defaults to LoggingConfig.log_file)

    Returns:
        Configured logger
    """
    logging_config = get_settings().logging
    logger = logging.getLogger(service_name)

    if service_name in _configured_services:
        return logger

    resolved_level = (level or logging_config.log_level or "INFO").upper()
    logger.setLevel(getattr(logging, resolved_level, logging.INFO))
    formatter = logging.Formatter(logging_config.log_format)

    if logging_config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    file_path = log_file or logging_config.log_file
    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Module loggers under microservices.* propagate to the root logger
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=logger.level, format=logging_config.log_format)

    _configured_services.add(service_name)
    return logger


__all__ = ["setup_service_logger"]
