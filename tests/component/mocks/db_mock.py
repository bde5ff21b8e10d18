"""
Database Mock for Component Testing

Mocks PostgresClientWrapper for testing repositories without a real database.
"""
from typing import Any, Dict, List, Optional

from core.config import InfraConfig


class MockPostgresClient:
    """Mock for PostgresClientWrapper (asyncpg pool wrapper)"""

    def __init__(self, config: Optional[InfraConfig] = None):
        self.config = config or InfraConfig()
        self.queries: List[tuple] = []
        self._row_response: Optional[Dict[str, Any]] = None
        self._rows_response: List[Dict[str, Any]] = []
        self._execute_response: str = "OK"
        self._should_raise: Optional[Exception] = None
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def query_row(self, query: str, params: List[Any] = None) -> Optional[Dict[str, Any]]:
        """Mock single row query"""
        self.queries.append(("query_row", query, params or []))

        if self._should_raise:
            raise self._should_raise

        return self._row_response

    async def query(self, query: str, params: List[Any] = None) -> List[Dict[str, Any]]:
        """Mock multi-row query"""
        self.queries.append(("query", query, params or []))

        if self._should_raise:
            raise self._should_raise

        return self._rows_response

    async def execute(self, query: str, params: List[Any] = None) -> str:
        """Mock execute (DDL/INSERT/UPDATE/DELETE)"""
        self.queries.append(("execute", query, params or []))

        if self._should_raise:
            raise self._should_raise

        return self._execute_response

    async def health_check(self) -> bool:
        return self._should_raise is None

    async def close(self):
        self.closed = True

    # Test helper methods

    def set_row_response(self, row: Optional[Dict[str, Any]]):
        """Set the response for query_row calls"""
        self._row_response = row

    def set_rows_response(self, rows: List[Dict[str, Any]]):
        """Set the response for query calls"""
        self._rows_response = rows

    def set_error(self, error: Exception):
        """Set an error to be raised on every call"""
        self._should_raise = error

    def get_queries(self, method: Optional[str] = None) -> List[tuple]:
        """Get recorded queries, optionally filtered by method"""
        if method:
            return [q for q in self.queries if q[0] == method]
        return self.queries

    def get_last_query(self) -> Optional[tuple]:
        """Get the last recorded query"""
        return self.queries[-1] if self.queries else None

    def assert_query_executed(self, pattern: str, method: Optional[str] = None):
        """Assert that a query matching pattern was executed"""
        queries = self.get_queries(method)
        for q in queries:
            if pattern.lower() in q[1].lower():
                return True
        raise AssertionError(f"No query matching '{pattern}' was executed. Queries: {queries}")
