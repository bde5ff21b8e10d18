"""
Component Test Fixtures for Location Service

Provides the FastAPI TestClient wired to an in-memory LocationService.
"""

import pytest
from unittest.mock import patch


@pytest.fixture
def client(location_service):
    """Create FastAPI test client with mocked dependencies"""
    from fastapi.testclient import TestClient

    # The lifespan builds the service through the factory; hand it ours
    with patch(
        "microservices.location_service.main.create_location_service",
        return_value=location_service,
    ):
        from microservices.location_service.main import app

        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
