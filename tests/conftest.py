"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked dependencies)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("ENVIRONMENT", "testing")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.fixtures import make_shipment_payload, SENDER_ADDRESS, RECEIVER_ADDRESS


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    SERVICES = {
        "location_service": 8224,
        "shipment_service": 8240,
    }

    WEATHER_UPDATE_INTERVAL = 7200
    DEFAULT_QUERY_LIMIT = 20


@pytest.fixture
def test_config() -> TestConfig:
    return TestConfig()


@pytest.fixture
def sender_address() -> str:
    return SENDER_ADDRESS


@pytest.fixture
def receiver_address() -> str:
    return RECEIVER_ADDRESS


@pytest.fixture
def shipment_payload():
    """Valid create-shipment body"""
    return make_shipment_payload()
