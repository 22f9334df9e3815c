"""Unit tests for Engine."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from nullscan.core.connection import ConnectionConfig, ConnectionManager
from nullscan.core.engine import Engine
from nullscan.core.exceptions import (
    AdapterError,
    ColumnCountError,
    ColumnScanError,
    ConversionError,
    NoRowsError,
    ParameterBindingError,
)
from nullscan.scan.batch import targets
from nullscan.scan.ref import Ref, attr


@dataclass(frozen=True)
class FrozenUser:
    name: str | None = None


@pytest.fixture
def users(engine: Engine) -> Engine:
    """Engine with a small users table."""
    engine.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, phone TEXT)")
    engine.execute("INSERT INTO users (id, name, phone) VALUES (1, 'Alice', '555-0100')")
    engine.execute("INSERT INTO users (id, name, phone) VALUES (2, 'Bob', NULL)")
    return engine


class TestEngine:
    def test_from_config(self, sqlite_config: ConnectionConfig) -> None:
        eng = Engine.from_config(sqlite_config)
        assert isinstance(eng.connection_manager, ConnectionManager)

    def test_unknown_driver(self) -> None:
        with pytest.raises(AdapterError, match="Unsupported database driver"):
            ConnectionManager(ConnectionConfig(driver="nosuchdb", database="x"))

    def test_execute_returns_row_count(self, users: Engine) -> None:
        affected = users.execute("UPDATE users SET phone = :phone", {"phone": "1"})
        assert affected == 2

    def test_scan_one(self, users: Engine) -> None:
        name = Ref(str | None)
        phone = Ref(str | None, "stale")
        users.scan_one("SELECT name, phone FROM users WHERE id = :id", {"id": 2},
                       *targets(name, phone))
        assert name.value == "Bob"
        assert phone.value is None

    def test_scan_one_positional_params(self, users: Engine) -> None:
        name = Ref(str | None)
        users.scan_one("SELECT name FROM users WHERE id = ?", (1,), *targets(name))
        assert name.value == "Alice"

    def test_scan_one_no_rows(self, users: Engine) -> None:
        with pytest.raises(NoRowsError):
            users.scan_one("SELECT name FROM users WHERE id = 99", None, *targets(Ref(str | None)))

    def test_scan_one_column_count(self, users: Engine) -> None:
        with pytest.raises(ColumnCountError, match="Expected 2 destination arguments"):
            users.scan_one("SELECT name, phone FROM users WHERE id = 1", None,
                           *targets(Ref(str | None)))

    def test_scan_one_wraps_column_errors(self, users: Engine) -> None:
        number = Ref(int | None, 5)
        with pytest.raises(ColumnScanError) as exc_info:
            users.scan_one("SELECT name FROM users WHERE id = 1", None, *targets(number))
        assert exc_info.value.index == 0
        assert exc_info.value.name == "name"
        assert isinstance(exc_info.value.__cause__, ConversionError)
        assert number.value == 5

    def test_bad_sql(self, users: Engine) -> None:
        with pytest.raises(ParameterBindingError):
            users.scan_one("SELECT nope FROM users", None, None)

    def test_iter_scan_clears_stale_values(self, users: Engine) -> None:
        name = Ref(str | None)
        phone = Ref(str | None)
        seen = []
        for index in users.iter_scan(
            "SELECT name, phone FROM users ORDER BY id", None, *targets(name, phone)
        ):
            seen.append((index, name.value, phone.value))
        assert seen == [(0, "Alice", "555-0100"), (1, "Bob", None)]

    def test_iter_scan_empty(self, users: Engine) -> None:
        rows = list(users.iter_scan("SELECT name FROM users WHERE id > 10", None, None))
        assert rows == []

    def test_iter_scan_allows_statements_inside_loop(self, users: Engine) -> None:
        name = Ref(str | None)
        seen = []
        for _ in users.iter_scan("SELECT name FROM users ORDER BY id", None, *targets(name)):
            seen.append(name.value)
            users.execute("INSERT INTO users (name) VALUES (?)", (f"copy of {name.value}",))
        assert seen == ["Alice", "Bob"]

        count = Ref(int | None)
        users.scan_one("SELECT COUNT(*) FROM users", None, *targets(count))
        assert count.value == 4

    def test_nested_iter_scan(self, users: Engine) -> None:
        outer = Ref(int | None)
        inner = Ref(int | None)
        pairs = []
        for _ in users.iter_scan("SELECT id FROM users ORDER BY id", None, *targets(outer)):
            for _ in users.iter_scan("SELECT id FROM users ORDER BY id", None, *targets(inner)):
                pairs.append((outer.value, inner.value))
        assert pairs == [(1, 1), (1, 2), (2, 1), (2, 2)]

    def test_frozen_destination_is_a_column_error(self, users: Engine) -> None:
        user = FrozenUser()
        with pytest.raises(ColumnScanError, match="Cannot set FrozenUser.name") as exc_info:
            users.scan_one("SELECT name FROM users WHERE id = 1", None,
                           *targets(attr(user, "name")))
        assert exc_info.value.index == 0
        assert user.name is None
