"""Scan adapter for nullable scalar destinations.

NullValue wraps one destination slot. On every scan() it resolves the
slot's scalar kind, lets the kind's canonical holder parse the raw value,
then either clears the slot (NULL) or writes a fresh value converted to
the slot's exact declared type.
"""

from __future__ import annotations

from typing import Any

from nullscan.core.enums import ScalarKind
from nullscan.core.exceptions import ConversionError
from nullscan.scan.holders import holder_for
from nullscan.scan.resolver import resolve, split_optional


def _construct(base: type, kind: ScalarKind, value: Any) -> Any:
    """Build an instance of ``base`` from a native holder value."""
    if type(value) is base:
        return value
    if kind is ScalarKind.TIME:
        if isinstance(value, base):
            return value
        return base.combine(value.date(), value.timetz())  # type: ignore[attr-defined]
    return base(value)


def convert(value: Any, declared: Any, kind: ScalarKind) -> Any:
    """Convert a native value to ``declared``, following NewType chains.

    Raises:
        ConversionError: If ``declared`` rejects the value (e.g. overflow
            into a narrower NumPy integer).
    """
    chain = []
    base = declared
    while hasattr(base, "__supertype__"):
        chain.append(base)
        base = base.__supertype__

    try:
        result = _construct(base, kind, value)
        for named in reversed(chain):
            result = named(result)
    except (ValueError, TypeError, OverflowError) as e:
        raise ConversionError(kind, value, f"cannot store in {_name(declared)}: {e}") from e
    return result


class NullValue:
    """Scanner that writes a nullable column into a destination slot.

    Construction does not validate the destination; an unsupported one
    fails on the first scan() without being touched.

    Args:
        target: A slot declared as ``X | None``.
    """

    __slots__ = ("_target",)

    def __init__(self, target: Any) -> None:
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    def scan(self, raw: Any) -> None:
        """Accept one raw column value."""
        kind = resolve(self._target)

        holder = holder_for(kind)
        holder.scan(raw)

        if not holder.valid:
            self._target.set(None)
            return

        declared, _ = split_optional(self._target.declared_type)
        self._target.set(convert(holder.value, declared, kind))

    def __repr__(self) -> str:
        return f"NullValue({self._target!r})"


def new(target: Any) -> NullValue:
    """Create a NullValue for ``target`` without validating it."""
    return NullValue(target)


def _name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)
