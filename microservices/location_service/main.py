"""
Location Microservice

Location records keyed by (zip code, country code), with coordinates and
the last known weather.

Port: 8224
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

from .factory import create_location_service
from .location_service import LocationService
from .models import LocationCreateRequest, LocationFilter

# Setup logger
logger = setup_service_logger("location_service")

# Global service instance
location_service: Optional[LocationService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    global location_service

    logger.info("Starting Location Service...")

    location_service = create_location_service()
    await location_service.initialize()

    logger.info("Location Service initialized successfully")

    yield

    # Cleanup
    logger.info("Shutting down Location Service...")
    await location_service.close()


# Create FastAPI app
app = FastAPI(
    title="Location Service",
    description="Shipment locations with coordinates and current weather",
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


@app.get("/api/v1/locations/health")
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    db_connected = await location_service.check_connection()
    return {
        "status": "operational" if db_connected else "degraded",
        "service": "location_service",
        "version": "1.0.0",
        "database_connected": db_connected,
    }


# ==================== Locations ====================


@app.get("/api/v1/locations")
async def find_locations(request: Request):
    """List locations (zipCode, city, country, countryCode, limit, skip)"""
    try:
        filters = parse_model(LocationFilter, dict(request.query_params))
        locations = await location_service.find_locations(filters)
        return success_response(locations)
    except Exception as e:
        return exception_response(e)


@app.get("/api/v1/locations/{location_id}")
async def find_location(location_id: str):
    """Get a single location; data is null when it does not exist"""
    try:
        location = await location_service.find_location(location_id)
        return success_response(location)
    except Exception as e:
        return exception_response(e)


@app.post("/api/v1/locations")
async def create_location(payload: Dict[str, Any] = Body(...)):
    """Create a location from explicit fields and coordinates"""
    try:
        request = parse_model(LocationCreateRequest, payload)
        location = await location_service.create_location(request)
        return success_response(location)
    except Exception as e:
        return exception_response(e)


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "microservices.location_service.main:app",
        host=settings.default_host,
        port=settings.location_service_port,
        reload=settings.debug,
        log_level=settings.logging.log_level.lower(),
    )
