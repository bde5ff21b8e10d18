#!/usr/bin/env python3
"""Infrastructure services configuration

PostgreSQL connection settings for the shipping document store (native asyncpg).
"""
import os
from dataclasses import dataclass

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class InfraConfig:
    """Infrastructure service endpoints"""

    # ===========================================
    # PostgreSQL (native asyncpg - port 5432)
    # ===========================================
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "postgres"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_schema: str = "shipping"

    # Connection pool
    postgres_pool_min_size: int = 1
    postgres_pool_max_size: int = 10

    @property
    def postgres_dsn(self) -> str:
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @classmethod
    def from_env(cls) -> 'InfraConfig':
        """Load infrastructure config from environment"""
        return cls(
            postgres_host=os.getenv("POSTGRES_HOST", "localhost"),
            postgres_port=_int(os.getenv("POSTGRES_PORT", "5432"), 5432),
            postgres_db=os.getenv("POSTGRES_DB", "postgres"),
            postgres_user=os.getenv("POSTGRES_USER", "postgres"),
            postgres_password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            postgres_schema=os.getenv("POSTGRES_SCHEMA", "shipping"),
            postgres_pool_min_size=_int(os.getenv("POSTGRES_POOL_MIN_SIZE", "1"), 1),
            postgres_pool_max_size=_int(os.getenv("POSTGRES_POOL_MAX_SIZE", "10"), 10),
        )
