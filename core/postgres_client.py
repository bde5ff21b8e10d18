"""
PostgreSQL Client Wrapper for the shipping services

Centralized PostgreSQL client wrapper around an asyncpg connection pool.
Provides configuration integration and a consistent database access pattern.
JSONB columns are encoded/decoded as Python dicts transparently, which is how
the services store their documents (coordinates, weather snapshots).

Usage:
    from core.postgres_client import PostgresClientWrapper

    db = PostgresClientWrapper("shipment_service")

    # Execute queries
    rows = await db.query("SELECT * FROM shipping.shipments WHERE carrier = $1", [carrier])
"""

import json
import logging
from typing import Any, Dict, List, Optional

import asyncpg

from core.config import InfraConfig, get_settings

logger = logging.getLogger(__name__)


async def _init_connection(connection: asyncpg.Connection) -> None:
    """Register JSON codecs on every new pool connection"""
    for type_name in ("json", "jsonb"):
        await connection.set_type_codec(
            type_name,
            encoder=json.dumps,
            decoder=json.loads,
            schema="pg_catalog",
        )


class PostgresClientWrapper:
    """
    PostgreSQL client wrapper with configuration integration.

    Wraps an asyncpg pool and provides:
    - Lazy pool creation on first use
    - Dict rows instead of asyncpg Records
    - Environment-based configuration fallbacks
    """

    def __init__(
        self,
        service_name: str,
        config: Optional[InfraConfig] = None,
        dsn: Optional[str] = None,
    ):
        """
        Initialize PostgreSQL client wrapper.

        Args:
            service_name: Name of the service using this client
            config: Infrastructure config (defaults to global settings)
            dsn: Explicit DSN, overrides host/port/user/password from config
        """
        self.service_name = service_name
        self.config = config or get_settings().infrastructure
        self.dsn = dsn or self.config.postgres_dsn
        self._pool: Optional[asyncpg.Pool] = None

        logger.info(
            f"PostgreSQL client initialized for {service_name}: "
            f"{self.config.postgres_host}:{self.config.postgres_port}/{self.config.postgres_db}"
        )

    async def _get_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            self._pool = await asyncpg.create_pool(
                dsn=self.dsn,
                min_size=self.config.postgres_pool_min_size,
                max_size=self.config.postgres_pool_max_size,
                init=_init_connection,
            )
            logger.debug(f"Connection pool created for {self.service_name}")
        return self._pool

    async def __aenter__(self):
        """Async context manager entry"""
        await self._get_pool()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def health_check(self) -> bool:
        """Check database health"""
        try:
            return await self.query_row("SELECT 1 AS ok") is not None
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def query(self, sql: str, params: Optional[List[Any]] = None) -> List[Dict[str, Any]]:
        """Execute query and return results"""
        pool = await self._get_pool()
        async with pool.acquire() as connection:
            records = await connection.fetch(sql, *(params or []))
        return [dict(record) for record in records]

    async def query_row(self, sql: str, params: Optional[List[Any]] = None) -> Optional[Dict[str, Any]]:
        """Execute query and return single row"""
        pool = await self._get_pool()
        async with pool.acquire() as connection:
            record = await connection.fetchrow(sql, *(params or []))
        return dict(record) if record is not None else None

    async def execute(self, sql: str, params: Optional[List[Any]] = None) -> str:
        """Execute SQL statement, returns the command status tag"""
        pool = await self._get_pool()
        async with pool.acquire() as connection:
            return await connection.execute(sql, *(params or []))

    async def close(self):
        """Close connection pool"""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.debug(f"Connection pool closed for {self.service_name}")


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE wildcards so the value matches literally"""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
