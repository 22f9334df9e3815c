"""Scanning layer - write nullable column values into typed slots."""

from __future__ import annotations

from nullscan.scan.adapter import NullValue, convert, new
from nullscan.scan.batch import (
    Discard,
    Discarded,
    PassThrough,
    ScanTarget,
    Wrapped,
    plan,
    target,
    targets,
)
from nullscan.scan.holders import (
    NullBool,
    NullByte,
    NullFloat64,
    NullHolder,
    NullInt16,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
    holder_for,
)
from nullscan.scan.protocol import Scanner, Slot
from nullscan.scan.ref import AttrRef, Ref, attr, attrs
from nullscan.scan.resolver import is_supported, kind_of, resolve, split_optional

__all__ = [
    # Slots
    "Slot",
    "Ref",
    "AttrRef",
    "attr",
    "attrs",
    # Resolution
    "resolve",
    "is_supported",
    "kind_of",
    "split_optional",
    # Holders
    "Scanner",
    "NullHolder",
    "NullBool",
    "NullByte",
    "NullInt16",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullFloat64",
    "NullTime",
    "holder_for",
    # Adapter
    "NullValue",
    "new",
    "convert",
    # Targets
    "ScanTarget",
    "Wrapped",
    "Discarded",
    "PassThrough",
    "Discard",
    "plan",
    "target",
    "targets",
]
