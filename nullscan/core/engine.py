"""Row-fetch engine.

The Engine executes SQL through the adapter and scans result rows into
caller-supplied targets, one target per column in column order. A row
is scanned all-or-nothing from the caller's point of view: the first
column that fails aborts the call and no target of that row should be
trusted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from nullscan.core.connection import ConnectionConfig, ConnectionManager
from nullscan.core.convert import assign
from nullscan.core.exceptions import (
    ColumnCountError,
    ColumnScanError,
    NoRowsError,
    ParameterBindingError,
    ScanError,
)

logger = logging.getLogger(__name__)


def _column_names(cursor: Any) -> list[str]:
    if cursor.description is None:
        return []
    return [desc[0] for desc in cursor.description]


def _scan_row(columns: list[str], row: Any, targets: tuple[Any, ...]) -> None:
    """Assign each column of ``row`` to the target at the same position."""
    if len(targets) != len(columns):
        raise ColumnCountError(len(columns), len(targets))

    for index, (name, target) in enumerate(zip(columns, targets, strict=True)):
        try:
            assign(target, row[index])
        except ScanError as e:
            raise ColumnScanError(index, name, str(e)) from e


class Engine:
    """Synchronous query execution engine."""

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connection_manager = connection_manager

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> Engine:
        """Create an Engine from a ConnectionConfig.

        Args:
            config: ConnectionConfig instance

        Returns:
            Engine instance
        """
        return cls(ConnectionManager(config))

    @property
    def connection_manager(self) -> ConnectionManager:
        return self._connection_manager

    def _execute(self, conn: Any, sql: str, params: Any) -> Any:
        logger.debug("Executing %r", sql)
        try:
            return self._connection_manager.adapter.execute(conn, sql, params)
        except Exception as e:
            raise ParameterBindingError(sql, str(e)) from e

    def execute(
        self,
        sql: str,
        params: dict[str, Any] | tuple[Any, ...] | None = None,
    ) -> int:
        """Execute a write statement. Returns affected row count."""
        with self._connection_manager.get_connection() as conn:
            cursor = self._execute(conn, sql, params)
            conn.commit()
            return int(cursor.rowcount)

    def scan_one(
        self,
        sql: str,
        params: dict[str, Any] | tuple[Any, ...] | None,
        *targets: Any,
    ) -> None:
        """Scan the first result row into ``targets``.

        Raises:
            NoRowsError: If the query returned no rows.
            ColumnCountError: If len(targets) differs from the column count.
            ColumnScanError: If a column could not be stored in its target.
        """
        with self._connection_manager.get_connection() as conn:
            cursor = self._execute(conn, sql, params)
            columns = _column_names(cursor)
            row = cursor.fetchone()

        if row is None:
            raise NoRowsError(sql)
        _scan_row(columns, row, targets)

    def iter_scan(
        self,
        sql: str,
        params: dict[str, Any] | tuple[Any, ...] | None,
        *targets: Any,
    ) -> Iterator[int]:
        """Scan every result row into the same ``targets``.

        Yields the zero-based row index after each row has been scanned;
        read the targets before advancing. The result set is fetched before
        the first row is yielded, so the connection is back in the pool
        while the caller handles rows.
        """
        with self._connection_manager.get_connection() as conn:
            cursor = self._execute(conn, sql, params)
            columns = _column_names(cursor)
            rows = cursor.fetchall()

        for index, row in enumerate(rows):
            _scan_row(columns, row, targets)
            yield index
