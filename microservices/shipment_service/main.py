"""
Shipment Microservice

Shipment CRUD with sender/receiver locations resolved from free-text
addresses and weather kept fresh on listing.

Port: 8240
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.config import get_settings
from core.logger import setup_service_logger
from core.response import (
    exception_response,
    register_exception_handlers,
    success_response,
)
from core.validation import parse_model

from .factory import create_shipment_service
from .models import ShipmentCreateRequest, ShipmentFilter, ShipmentUpdateRequest
from .shipment_service import ShipmentService

# Setup logger
logger = setup_service_logger("shipment_service")

# Global service instance
shipment_service: Optional[ShipmentService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    global shipment_service

    logger.info("Starting Shipment Service...")

    shipment_service = create_shipment_service()
    await shipment_service.initialize()

    logger.info("Shipment Service initialized successfully")

    yield

    # Cleanup
    logger.info("Shutting down Shipment Service...")
    await shipment_service.close()


# Create FastAPI app
app = FastAPI(
    title="Shipment Service",
    description="Shipment tracking with location resolution and weather",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# ==================== Health Check ====================


@app.get("/api/v1/shipments/health")
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    db_connected = await shipment_service.check_connection()
    return {
        "status": "operational" if db_connected else "degraded",
        "service": "shipment_service",
        "version": "1.0.0",
        "database_connected": db_connected,
    }


# ==================== Shipments ====================


@app.post("/api/v1/shipments")
async def create_shipment(payload: Dict[str, Any] = Body(...)):
    """Create a shipment; both addresses must parse"""
    try:
        request = parse_model(ShipmentCreateRequest, payload)
        shipment = await shipment_service.create_shipment(request)
        return success_response(shipment)
    except Exception as e:
        return exception_response(e)


@app.get("/api/v1/shipments")
async def find_shipments(request: Request):
    """List shipments (tracking_number, carrier, limit, skip)"""
    try:
        filters = parse_model(ShipmentFilter, dict(request.query_params))
        shipments = await shipment_service.find_shipments(filters)
        return success_response(shipments)
    except Exception as e:
        return exception_response(e)


@app.get("/api/v1/shipments/{shipment_id}")
async def find_shipment(shipment_id: str):
    """Get a single shipment; data is null when it does not exist"""
    try:
        shipment = await shipment_service.find_shipment(shipment_id)
        return success_response(shipment)
    except Exception as e:
        return exception_response(e)


@app.patch("/api/v1/shipments/{shipment_id}")
async def update_shipment(shipment_id: str, payload: Dict[str, Any] = Body(...)):
    """Partially update a shipment"""
    try:
        request = parse_model(ShipmentUpdateRequest, payload)
        shipment = await shipment_service.update_shipment(shipment_id, request)
        return success_response(shipment)
    except Exception as e:
        return exception_response(e)


@app.delete("/api/v1/shipments/{shipment_id}")
async def delete_shipment(shipment_id: str):
    """Delete a shipment, returning the deleted record"""
    try:
        shipment = await shipment_service.delete_shipment(shipment_id)
        return success_response(shipment)
    except Exception as e:
        return exception_response(e)


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "microservices.shipment_service.main:app",
        host=settings.default_host,
        port=settings.shipment_service_port,
        reload=settings.debug,
        log_level=settings.logging.log_level.lower(),
    )
