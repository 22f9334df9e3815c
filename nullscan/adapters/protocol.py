"""Database adapter protocol.

Every adapter module MUST implement this protocol so the Engine can
drive it without knowing the driver.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from nullscan.core.connection import ConnectionConfig


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    def create_pool(self, config: ConnectionConfig) -> Any:
        """Create a connection pool."""
        ...

    def acquire_connection(self, pool: Any) -> Any:
        """Acquire a connection from the pool."""
        ...

    def release_connection(self, connection: Any, pool: Any) -> None:
        """Release a connection back to the pool."""
        ...

    def close_pool(self, pool: Any) -> None:
        """Close the pool and release all connections."""
        ...

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | tuple[Any, ...] | None = None,
    ) -> Any:
        """Execute SQL and return a cursor-like object.

        ``params`` is passed to the driver unchanged: a dict for named
        placeholders, a tuple for positional ones.
        """
        ...
