"""
Shared Test Fixtures

Centralized factories and sample data used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - shipping_fixtures.py: Location/shipment/weather factories
"""

from .common import (
    make_location_id,
    make_shipment_id,
    make_timestamp,
    hours_ago,
)

from .shipping_fixtures import (
    SENDER_ADDRESS,
    RECEIVER_ADDRESS,
    make_location,
    make_weather,
    make_shipment_payload,
    make_provider_weather_payload,
    make_provider_zip_payload,
)

__all__ = [
    "make_location_id",
    "make_shipment_id",
    "make_timestamp",
    "hours_ago",
    "SENDER_ADDRESS",
    "RECEIVER_ADDRESS",
    "make_location",
    "make_weather",
    "make_shipment_payload",
    "make_provider_weather_payload",
    "make_provider_zip_payload",
]
