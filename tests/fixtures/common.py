"""
Common/Shared Fixtures

Base factories and generators used across multiple services.
"""
import uuid
from datetime import datetime, timedelta, timezone


def make_location_id() -> str:
    """Generate a unique location ID"""
    return str(uuid.uuid4())


def make_shipment_id() -> str:
    """Generate a unique shipment ID"""
    return str(uuid.uuid4())


def make_timestamp() -> datetime:
    """Current UTC timestamp"""
    return datetime.now(timezone.utc)


def hours_ago(hours: float) -> datetime:
    """UTC timestamp `hours` in the past"""
    return datetime.now(timezone.utc) - timedelta(hours=hours)
