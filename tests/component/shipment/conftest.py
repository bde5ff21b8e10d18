"""
Component Test Fixtures for Shipment Service

Provides the FastAPI TestClient wired to an in-memory ShipmentService and
helpers to seed shipments with given locations.
"""

import pytest
from unittest.mock import patch

from microservices.shipment_service.models import ShipmentCreateRequest

from tests.fixtures import make_shipment_payload


@pytest.fixture
def client(shipment_service):
    """Create FastAPI test client with mocked dependencies"""
    from fastapi.testclient import TestClient

    with patch(
        "microservices.shipment_service.main.create_shipment_service",
        return_value=shipment_service,
    ):
        from microservices.shipment_service.main import app

        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client


@pytest.fixture
def add_shipment(shipment_repository):
    """Store a shipment pointing at the given locations"""

    async def _add(sender, receiver, **overrides):
        data = ShipmentCreateRequest.model_validate(make_shipment_payload(**overrides)).model_dump()
        data["sender_location"] = sender.location_id
        data["receiver_location"] = receiver.location_id
        return await shipment_repository.create_shipment(data)

    return _add
