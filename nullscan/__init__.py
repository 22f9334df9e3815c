"""nullscan - scan nullable SQL columns into plain typed destinations."""

from __future__ import annotations

from nullscan.core.connection import ConnectionConfig, ConnectionManager
from nullscan.core.engine import Engine
from nullscan.core.enums import DatabaseBackend, ScalarKind
from nullscan.core.exceptions import (
    AdapterError,
    ColumnCountError,
    ColumnScanError,
    ConnectionError,  # noqa: A004
    ConversionError,
    ExecutionError,
    NoRowsError,
    NullScanError,
    ParameterBindingError,
    ScanError,
    UnsupportedDestination,
)
from nullscan.scan import (
    AttrRef,
    Discard,
    NullValue,
    Ref,
    attr,
    attrs,
    is_supported,
    new,
    plan,
    resolve,
    target,
    targets,
)

__all__ = [
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    # Engine
    "Engine",
    # Enums
    "ScalarKind",
    "DatabaseBackend",
    # Slots
    "Ref",
    "AttrRef",
    "attr",
    "attrs",
    # Scanning
    "resolve",
    "is_supported",
    "NullValue",
    "new",
    "Discard",
    "plan",
    "target",
    "targets",
    # Exceptions
    "NullScanError",
    "ScanError",
    "UnsupportedDestination",
    "ConversionError",
    "ExecutionError",
    "ParameterBindingError",
    "NoRowsError",
    "ColumnCountError",
    "ColumnScanError",
    "AdapterError",
    "ConnectionError",
]
