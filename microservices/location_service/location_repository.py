"""
Location Repository

Data access layer for location records - PostgreSQL (asyncpg).
Coordinates and weather are stored as JSONB documents.
"""

import logging
from typing import List, Optional, Dict, Any

from core.config import InfraConfig
from core.postgres_client import PostgresClientWrapper, escape_like
from core.validation import new_identifier
from microservices.weather_service.models import Coordinates, WeatherSnapshot

from .models import Location, LocationFilter

logger = logging.getLogger(__name__)


class LocationRepository:
    """Repository for location records"""

    def __init__(
        self,
        db: Optional[PostgresClientWrapper] = None,
        config: Optional[InfraConfig] = None,
    ):
        self.db = db or PostgresClientWrapper("location_service", config=config)
        self.schema = self.db.config.postgres_schema
        self.locations_table = "locations"

    async def initialize(self):
        """Create schema, table and the (zip_code, country_code) unique index"""
        await self.db.execute(f"""
            CREATE SCHEMA IF NOT EXISTS {self.schema};

            CREATE TABLE IF NOT EXISTS {self.schema}.{self.locations_table} (
                location_id TEXT PRIMARY KEY,
                city TEXT NOT NULL,
                country TEXT NOT NULL,
                country_code TEXT NOT NULL,
                zip_code TEXT NOT NULL,
                coordinates JSONB NOT NULL,
                weather JSONB,
                created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            );

            CREATE UNIQUE INDEX IF NOT EXISTS idx_locations_zip_country
                ON {self.schema}.{self.locations_table} (zip_code, country_code);
        """)
        logger.info("Location repository initialized with PostgreSQL")

    async def close(self):
        """Close database connection"""
        await self.db.close()
        logger.info("Location repository database connection closed")

    async def check_connection(self) -> bool:
        return await self.db.health_check()

    # ==================== Location Operations ====================

    async def create_location(
        self,
        city: str,
        country: str,
        country_code: str,
        zip_code: str,
        coordinates: Coordinates,
        weather: Optional[WeatherSnapshot] = None,
    ) -> Location:
        """
        Create a location record.

        A record with the same (zip_code, country_code) already present wins:
        the insert turns into a no-op update and the existing row is returned.
        """
        try:
            query = f"""
                INSERT INTO {self.schema}.{self.locations_table} (
                    location_id, city, country, country_code, zip_code,
                    coordinates, weather, created_at, updated_at
                ) VALUES ($1, $2, $3, $4, $5, $6, $7, NOW(), NOW())
                ON CONFLICT (zip_code, country_code)
                DO UPDATE SET updated_at = {self.locations_table}.updated_at
                RETURNING *
            """

            params = [
                new_identifier(),
                city,
                country,
                country_code,
                zip_code,
                coordinates.model_dump(),
                weather.model_dump() if weather else None,
            ]

            row = await self.db.query_row(query, params)
            logger.debug(f"Location upsert for {zip_code},{country_code}: {row['location_id']}")
            return self._row_to_location(row)

        except Exception as e:
            logger.error(f"Error creating location: {e}", exc_info=True)
            raise

    async def get_location_by_id(self, location_id: str) -> Optional[Location]:
        """Get location by ID"""
        try:
            query = f"""
                SELECT * FROM {self.schema}.{self.locations_table}
                WHERE location_id = $1
            """
            row = await self.db.query_row(query, [location_id])
            return self._row_to_location(row) if row else None

        except Exception as e:
            logger.error(f"Error getting location {location_id}: {e}", exc_info=True)
            raise

    async def get_location_by_zip_code_and_country_code(
        self, zip_code: str, country_code: str
    ) -> Optional[Location]:
        """Exact lookup on the natural key"""
        try:
            query = f"""
                SELECT * FROM {self.schema}.{self.locations_table}
                WHERE zip_code = $1 AND country_code = $2
            """
            row = await self.db.query_row(query, [zip_code, country_code])
            return self._row_to_location(row) if row else None

        except Exception as e:
            logger.error(f"Error getting location {zip_code},{country_code}: {e}", exc_info=True)
            raise

    async def list_locations(self, filters: LocationFilter, limit: int) -> List[Location]:
        """List locations; textual filters are case-insensitive substring matches"""
        try:
            conditions = []
            params: List[Any] = []
            param_idx = 1

            for column in ("zip_code", "city", "country", "country_code"):
                value = getattr(filters, column)
                if value:
                    conditions.append(f"{column} ILIKE ${param_idx}")
                    params.append(f"%{escape_like(value)}%")
                    param_idx += 1

            where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""

            query = f"""
                SELECT * FROM {self.schema}.{self.locations_table}
                {where_clause}
                ORDER BY created_at ASC, location_id ASC
                LIMIT ${param_idx} OFFSET ${param_idx + 1}
            """
            params.extend([limit, filters.skip or 0])

            rows = await self.db.query(query, params)
            return [self._row_to_location(row) for row in rows]

        except Exception as e:
            logger.error(f"Error listing locations: {e}", exc_info=True)
            raise

    async def update_location(
        self, location_id: str, weather: WeatherSnapshot
    ) -> Optional[Location]:
        """Replace the weather snapshot, bumping updated_at"""
        try:
            query = f"""
                UPDATE {self.schema}.{self.locations_table}
                SET weather = $2, updated_at = NOW()
                WHERE location_id = $1
                RETURNING *
            """
            row = await self.db.query_row(query, [location_id, weather.model_dump()])
            return self._row_to_location(row) if row else None

        except Exception as e:
            logger.error(f"Error updating location {location_id}: {e}", exc_info=True)
            raise

    # ==================== Helpers ====================

    @staticmethod
    def _row_to_location(row: Dict[str, Any]) -> Location:
        return Location.model_validate(row)


__all__ = ["LocationRepository"]
