"""Destination type resolution.

A destination is supported when it is a Slot whose declared type is
``X | None`` and ``X`` is represented by one of the eight scalar kinds.
Classification is structural: NewType chains are unwrapped to their
supertype and classes are matched through their MRO, so a user-declared
``NewType("Flag", bool)`` or ``class Code(str)`` resolves like its base.
"""

from __future__ import annotations

import datetime
import types
import typing
from functools import lru_cache
from typing import Any

import numpy as np

from nullscan.core.enums import ScalarKind
from nullscan.core.exceptions import UnsupportedDestination
from nullscan.scan.protocol import Slot

_NONE_TYPE = type(None)

# Underlying representation -> scalar kind. Closed: anything missing here
# is unsupported.
_KIND_TABLE: dict[type, ScalarKind] = {
    bool: ScalarKind.BOOL,
    np.bool_: ScalarKind.BOOL,
    np.uint8: ScalarKind.BYTE,
    np.int8: ScalarKind.INT16,
    np.int16: ScalarKind.INT16,
    np.uint16: ScalarKind.INT16,
    np.int32: ScalarKind.INT32,
    np.uint32: ScalarKind.INT32,
    int: ScalarKind.INT64,
    np.int64: ScalarKind.INT64,
    np.uint64: ScalarKind.INT64,
    np.intp: ScalarKind.INT64,
    np.uintp: ScalarKind.INT64,
    str: ScalarKind.STRING,
    np.str_: ScalarKind.STRING,
    float: ScalarKind.FLOAT64,
    np.float32: ScalarKind.FLOAT64,
    np.float64: ScalarKind.FLOAT64,
    datetime.datetime: ScalarKind.TIME,
}


def underlying_type(tp: Any) -> Any:
    """Follow NewType chains down to the first real type."""
    while hasattr(tp, "__supertype__"):
        tp = tp.__supertype__
    return tp


def split_optional(tp: Any) -> tuple[Any, bool]:
    """Split ``X | None`` into ``(X, True)``.

    Returns ``(tp, False)`` for anything that is not a two-member union
    with None.
    """
    if typing.get_origin(tp) not in (typing.Union, types.UnionType):
        return tp, False
    args = typing.get_args(tp)
    if len(args) != 2 or _NONE_TYPE not in args:
        return tp, False
    inner = args[0] if args[1] is _NONE_TYPE else args[1]
    return inner, True


@lru_cache(maxsize=512)
def kind_of(tp: Any) -> ScalarKind | None:
    """Classify a bare type by its underlying representation.

    Returns None when the type is not one of the scalar kinds.
    """
    base = underlying_type(tp)
    if not isinstance(base, type):
        # Generic aliases, unions, Annotated and friends
        return None
    for klass in base.__mro__:
        kind = _KIND_TABLE.get(klass)
        if kind is not None:
            return kind
    return None


def resolve(destination: Any) -> ScalarKind:
    """Resolve the scalar kind of a nullable destination.

    Args:
        destination: A Slot declared as ``X | None``.

    Returns:
        The ScalarKind of ``X``.

    Raises:
        UnsupportedDestination: If the destination is not a slot, is not
            nullable, or ``X`` has no scalar kind.
    """
    if not isinstance(destination, Slot):
        raise UnsupportedDestination(destination, "not a reference")

    inner, nullable = split_optional(destination.declared_type)
    if not nullable:
        raise UnsupportedDestination(destination, "declared type is not nullable")

    kind = kind_of(inner)
    if kind is None:
        raise UnsupportedDestination(destination, "no scalar kind for the declared type")
    return kind


def is_supported(destination: Any) -> bool:
    """Return True if ``resolve`` would succeed for ``destination``."""
    try:
        resolve(destination)
    except UnsupportedDestination:
        return False
    return True
