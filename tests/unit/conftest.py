"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── core/        Envelope, validation, config
    ├── location/    Address parser, country lookup, location models
    ├── shipment/    Shipment models, staleness rule
    └── weather/     Provider payload normalization

Usage:
    pytest tests/unit -v
"""
import os
import sys

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
