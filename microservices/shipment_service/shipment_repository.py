"""
Shipment Repository

Data access layer for shipments - PostgreSQL (asyncpg). Reads join both
location rows and return them embedded in the shipment.
"""

import logging
from typing import List, Optional, Dict, Any

from core.config import InfraConfig
from core.postgres_client import PostgresClientWrapper, escape_like
from core.validation import new_identifier

from .models import Shipment, ShipmentFilter, ShipmentWithLocations

logger = logging.getLogger(__name__)

# Columns a partial update may touch
UPDATABLE_COLUMNS = (
    "tracking_number",
    "carrier",
    "sender_address",
    "receiver_address",
    "article_name",
    "article_quantity",
    "article_price",
    "sku",
    "sender_location",
    "receiver_location",
)


class ShipmentRepository:
    """Repository for shipment records"""

    def __init__(
        self,
        db: Optional[PostgresClientWrapper] = None,
        config: Optional[InfraConfig] = None,
    ):
        self.db = db or PostgresClientWrapper("shipment_service", config=config)
        self.schema = self.db.config.postgres_schema
        self.shipments_table = "shipments"
        self.locations_table = "locations"

    async def initialize(self):
        """Create schema and shipments table if missing"""
        await self.db.execute(f"""
            CREATE SCHEMA IF NOT EXISTS {self.schema};

            CREATE TABLE IF NOT EXISTS {self.schema}.{self.shipments_table} (
                shipment_id TEXT PRIMARY KEY,
                tracking_number TEXT NOT NULL,
                carrier TEXT NOT NULL,
                sender_address TEXT NOT NULL,
                receiver_address TEXT NOT NULL,
                article_name TEXT NOT NULL,
                article_quantity INTEGER NOT NULL CHECK (article_quantity >= 1),
                article_price DOUBLE PRECISION NOT NULL CHECK (article_price >= 0),
                sku TEXT NOT NULL,
                sender_location TEXT NOT NULL,
                receiver_location TEXT NOT NULL,
                created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            );

            CREATE INDEX IF NOT EXISTS idx_shipments_tracking_number
                ON {self.schema}.{self.shipments_table} (tracking_number);
        """)
        logger.info("Shipment repository initialized with PostgreSQL")

    async def close(self):
        """Close database connection"""
        await self.db.close()
        logger.info("Shipment repository database connection closed")

    async def check_connection(self) -> bool:
        return await self.db.health_check()

    # ====================
    # Shipment CRUD
    # ====================

    async def create_shipment(self, data: Dict[str, Any]) -> Shipment:
        """Create new shipment"""
        try:
            query = f'''
                INSERT INTO {self.schema}.{self.shipments_table} (
                    shipment_id, tracking_number, carrier,
                    sender_address, receiver_address,
                    article_name, article_quantity, article_price, sku,
                    sender_location, receiver_location,
                    created_at, updated_at
                ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, NOW(), NOW())
                RETURNING *
            '''

            params = [
                new_identifier(),
                data["tracking_number"],
                data["carrier"],
                data["sender_address"],
                data["receiver_address"],
                data["article_name"],
                data["article_quantity"],
                data["article_price"],
                data["sku"],
                data["sender_location"],
                data["receiver_location"],
            ]

            row = await self.db.query_row(query, params)
            return Shipment.model_validate(row)

        except Exception as e:
            logger.error(f"Error creating shipment: {e}", exc_info=True)
            raise

    async def get_shipment_by_id(self, shipment_id: str) -> Optional[ShipmentWithLocations]:
        """Get shipment with both locations expanded"""
        try:
            query = f"{self._expanded_select()} WHERE s.shipment_id = $1"
            row = await self.db.query_row(query, [shipment_id])
            return self._row_to_expanded(row) if row else None

        except Exception as e:
            logger.error(f"Error getting shipment {shipment_id}: {e}", exc_info=True)
            raise

    async def list_shipments(
        self, filters: ShipmentFilter, limit: int
    ) -> List[ShipmentWithLocations]:
        """List shipments with locations expanded"""
        try:
            conditions = []
            params: List[Any] = []
            param_idx = 1

            for column in ("tracking_number", "carrier"):
                value = getattr(filters, column)
                if value:
                    conditions.append(f"s.{column} ILIKE ${param_idx}")
                    params.append(f"%{escape_like(value)}%")
                    param_idx += 1

            where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""

            query = f"""
                {self._expanded_select()}
                {where_clause}
                ORDER BY s.created_at ASC, s.shipment_id ASC
                LIMIT ${param_idx} OFFSET ${param_idx + 1}
            """
            params.extend([limit, filters.skip or 0])

            rows = await self.db.query(query, params)
            logger.debug(f"Listed {len(rows)} shipments")
            return [self._row_to_expanded(row) for row in rows]

        except Exception as e:
            logger.error(f"Error listing shipments: {e}", exc_info=True)
            raise

    async def update_shipment(
        self, shipment_id: str, fields: Dict[str, Any]
    ) -> Optional[Shipment]:
        """Update the given fields, returns None when no shipment matched"""
        try:
            set_clauses = []
            params: List[Any] = [shipment_id]
            param_idx = 2

            for column in UPDATABLE_COLUMNS:
                if column in fields:
                    set_clauses.append(f"{column} = ${param_idx}")
                    params.append(fields[column])
                    param_idx += 1

            set_clauses.append("updated_at = NOW()")

            query = f'''
                UPDATE {self.schema}.{self.shipments_table}
                SET {", ".join(set_clauses)}
                WHERE shipment_id = $1
                RETURNING *
            '''

            row = await self.db.query_row(query, params)
            return Shipment.model_validate(row) if row else None

        except Exception as e:
            logger.error(f"Error updating shipment {shipment_id}: {e}", exc_info=True)
            raise

    async def delete_shipment(self, shipment_id: str) -> Optional[Shipment]:
        """Delete shipment, returns the deleted record"""
        try:
            query = f'''
                DELETE FROM {self.schema}.{self.shipments_table}
                WHERE shipment_id = $1
                RETURNING *
            '''
            row = await self.db.query_row(query, [shipment_id])
            return Shipment.model_validate(row) if row else None

        except Exception as e:
            logger.error(f"Error deleting shipment {shipment_id}: {e}", exc_info=True)
            raise

    # ====================
    # Helpers
    # ====================

    def _expanded_select(self) -> str:
        return f"""
            SELECT s.*,
                   to_jsonb(sl) AS sender_location_doc,
                   to_jsonb(rl) AS receiver_location_doc
            FROM {self.schema}.{self.shipments_table} s
            LEFT JOIN {self.schema}.{self.locations_table} sl
                ON sl.location_id = s.sender_location
            LEFT JOIN {self.schema}.{self.locations_table} rl
                ON rl.location_id = s.receiver_location
        """

    @staticmethod
    def _row_to_expanded(row: Dict[str, Any]) -> ShipmentWithLocations:
        data = dict(row)
        data["sender_location"] = data.pop("sender_location_doc", None)
        data["receiver_location"] = data.pop("receiver_location_doc", None)
        return ShipmentWithLocations.model_validate(data)


__all__ = ["ShipmentRepository"]
