"""Scalar kind and database backend enumerations."""

from __future__ import annotations

from enum import Enum


class ScalarKind(Enum):
    """Canonical scalar kinds a nullable destination can resolve to."""

    BOOL = "bool"
    BYTE = "byte"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    STRING = "string"
    FLOAT64 = "float64"
    TIME = "time"

    def __str__(self) -> str:
        return self.value


class DatabaseBackend(Enum):
    """Supported database backends."""

    SQLITE = "sqlite"
