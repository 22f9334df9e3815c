"""SQLite adapter (sqlite3 stdlib)."""

from __future__ import annotations

import sqlite3
from typing import Any

from nullscan.core.connection import ConnectionConfig
from nullscan.core.exceptions import ConnectionError  # noqa: A004


class SqliteSyncAdapter:
    """Synchronous SQLite adapter using stdlib sqlite3.

    Column values are returned exactly as SQLite stores them; no
    converters are registered, so DATETIME columns arrive as text. Both
    :name (dict params) and ? (tuple params) placeholders are accepted.
    """

    def create_pool(self, config: ConnectionConfig) -> list[sqlite3.Connection]:
        """Create a 'pool' (list of connections) for SQLite."""
        pool: list[sqlite3.Connection] = []
        for _ in range(config.pool_size):
            try:
                conn = sqlite3.connect(config.database, timeout=config.timeout)
            except sqlite3.Error as e:
                raise ConnectionError(f"Cannot open {config.database!r}: {e}") from e
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode=WAL")
            pool.append(conn)
        return pool

    def acquire_connection(self, pool: list[sqlite3.Connection]) -> sqlite3.Connection:
        """Acquire a connection from the pool."""
        if not pool:
            raise ConnectionError("No connections available in pool")
        return pool.pop()

    def release_connection(
        self, connection: sqlite3.Connection, pool: list[sqlite3.Connection]
    ) -> None:
        """Release a connection back to the pool."""
        pool.append(connection)

    def close_pool(self, pool: list[sqlite3.Connection]) -> None:
        """Close all connections in the pool."""
        for conn in pool:
            conn.close()
        pool.clear()

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        params: dict[str, Any] | tuple[Any, ...] | None = None,
    ) -> sqlite3.Cursor:
        """Execute SQL and return a cursor."""
        return connection.execute(sql, params if params is not None else ())
