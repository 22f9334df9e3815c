"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from nullscan.core.connection import ConnectionConfig, ConnectionManager
from nullscan.core.engine import Engine


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:", pool_size=1)


@pytest.fixture
def engine(sqlite_config: ConnectionConfig) -> Iterator[Engine]:
    """Engine over a single in-memory SQLite connection."""
    manager = ConnectionManager(sqlite_config)
    yield Engine(manager)
    manager.close_pool()
