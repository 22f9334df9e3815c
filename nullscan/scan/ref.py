"""Settable slots used as scan destinations.

Ref is a free-standing cell; AttrRef points at one attribute of an
existing object and takes its declared type from the class annotations.
Supports dataclasses, Pydantic models, and plain annotated classes.
"""

from __future__ import annotations

import typing
from typing import Any, Generic, TypeVar

from nullscan.core.exceptions import ScanError

T = TypeVar("T")


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    try:
        from pydantic import BaseModel

        return issubclass(cls, BaseModel)
    except ImportError:
        return False


def _annotation_of(cls: type, name: str) -> Any:
    """Look up the declared type of attribute ``name`` on ``cls``."""
    if _is_pydantic_model(cls):
        model_fields = cls.model_fields  # type: ignore[attr-defined]
        if name in model_fields:
            return model_fields[name].annotation

    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as e:
        raise AttributeError(f"Cannot resolve annotations of {cls.__name__}: {e}") from e

    if name not in hints:
        raise AttributeError(f"{cls.__name__} has no annotated attribute {name!r}")
    return hints[name]


class Ref(Generic[T]):
    """A standalone settable cell.

    Args:
        declared_type: The type the cell holds, e.g. ``int | None``.
        value: Initial value.
    """

    __slots__ = ("_declared_type", "_value")

    def __init__(self, declared_type: Any, value: Any = None) -> None:
        self._declared_type = declared_type
        self._value = value

    @property
    def declared_type(self) -> Any:
        return self._declared_type

    @property
    def value(self) -> Any:
        return self._value

    def get(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Ref({self._declared_type!r}, {self._value!r})"


class AttrRef:
    """A slot bound to one attribute of an object.

    The declared type is read once, at construction.
    """

    __slots__ = ("_obj", "_name", "_declared_type")

    def __init__(self, obj: Any, name: str) -> None:
        self._obj = obj
        self._name = name
        self._declared_type = _annotation_of(type(obj), name)

    @property
    def declared_type(self) -> Any:
        return self._declared_type

    @property
    def name(self) -> str:
        return self._name

    def get(self) -> Any:
        return getattr(self._obj, self._name, None)

    def set(self, value: Any) -> None:
        """Assign ``value`` to the attribute.

        Raises:
            ScanError: If the object refuses the assignment (frozen
                dataclass or Pydantic model, read-only property).
        """
        try:
            setattr(self._obj, self._name, value)
        except (AttributeError, TypeError, ValueError) as e:
            raise ScanError(
                f"Cannot set {type(self._obj).__name__}.{self._name}: {e}"
            ) from e

    def __repr__(self) -> str:
        return f"AttrRef({type(self._obj).__name__}.{self._name})"


def attr(obj: Any, name: str) -> AttrRef:
    """Bind a slot to ``obj.name``."""
    return AttrRef(obj, name)


def attrs(obj: Any, *names: str) -> list[AttrRef]:
    """Bind one slot per attribute name, in the given order."""
    return [AttrRef(obj, name) for name in names]
