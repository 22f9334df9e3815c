"""nullscan exception hierarchy.

All exceptions are nullscan-specific. Raw driver exceptions are never
exposed to callers; they are chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Any


class NullScanError(Exception):
    """Base exception for all nullscan errors."""


# --- Scanning ---


class ScanError(NullScanError):
    """Base for destination scanning errors."""


class UnsupportedDestination(ScanError):
    """Raised when a destination is not a nullable slot over a scalar kind."""

    def __init__(self, destination: Any, detail: str | None = None) -> None:
        self.destination = destination
        message = f"NullValue for {_describe(destination)} is not supported"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ConversionError(ScanError):
    """Raised when a raw column value cannot be converted for a scalar kind."""

    def __init__(self, kind: Any, raw: Any, detail: str) -> None:
        self.kind = kind
        self.raw = raw
        super().__init__(f"Cannot convert {raw!r} ({type(raw).__name__}) to {kind}: {detail}")


# --- Execution ---


class ExecutionError(NullScanError):
    """Base for query execution errors."""


class ParameterBindingError(ExecutionError):
    """Raised on statement execution or parameter binding failures."""

    def __init__(self, sql: str, detail: str) -> None:
        self.sql = sql
        super().__init__(f"Parameter binding error for {sql!r}: {detail}")


class NoRowsError(ExecutionError):
    """Raised when scan_one finds no row to scan."""

    def __init__(self, sql: str) -> None:
        self.sql = sql
        super().__init__(f"No rows in result set for {sql!r}")


class ColumnCountError(ExecutionError):
    """Raised when the number of scan targets differs from the column count."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Expected {expected} destination arguments in scan, not {received}")


class ColumnScanError(ExecutionError):
    """Raised when a single column fails to scan; aborts the whole row."""

    def __init__(self, index: int, name: str, detail: str) -> None:
        self.index = index
        self.name = name
        super().__init__(f"Scan error on column index {index}, name {name!r}: {detail}")


# --- Adapter ---


class AdapterError(NullScanError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""


def _describe(destination: Any) -> str:
    declared = getattr(destination, "declared_type", None)
    if declared is not None:
        return f"{type(destination).__name__}[{_type_name(declared)}]"
    return type(destination).__name__


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)
