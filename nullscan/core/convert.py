"""Native column assignment used by the Engine.

Targets that implement scan() are delegated to. Slots are assigned
directly:

* ``Any`` / ``object`` slots take the raw value as-is, NULL included.
* Slots declared ``X | None`` take NULL as None, other values as for ``X``.
* Slots of a scalar type take the converted value and reject NULL.
* Slots of any other type take a raw value that is already an instance.

Everything else is rejected.
"""

from __future__ import annotations

from typing import Any

from nullscan.core.exceptions import ScanError
from nullscan.scan.adapter import convert
from nullscan.scan.holders import holder_for
from nullscan.scan.protocol import Scanner, Slot
from nullscan.scan.resolver import kind_of, split_optional


def assign(target: Any, raw: Any) -> None:
    """Store one raw column value into ``target``.

    Raises:
        ScanError: If the target cannot take the value.
    """
    if isinstance(target, Scanner):
        target.scan(raw)
        return

    if not isinstance(target, Slot):
        raise ScanError(f"Unsupported scan target type {type(target).__name__}")

    declared = target.declared_type
    if declared is Any or declared is object:
        target.set(raw)
        return

    declared, nullable = split_optional(declared)
    if nullable and raw is None:
        target.set(None)
        return

    kind = kind_of(declared)
    if kind is not None:
        if raw is None:
            raise ScanError(f"Converting NULL to {_name(declared)} is unsupported")
        holder = holder_for(kind)
        holder.scan(raw)
        target.set(convert(holder.value, declared, kind))
        return

    if raw is not None and isinstance(declared, type) and isinstance(raw, declared):
        target.set(raw)
        return

    raise ScanError(
        f"Unsupported scan, storing {type(raw).__name__} into {_name(declared)}"
    )


def _name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)
