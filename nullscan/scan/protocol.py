"""Scanning protocols.

The Engine hands every column value of a row to a scan target. Targets
that implement Scanner receive the raw value through scan(); everything
else goes through the engine's native assignment.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Scanner(Protocol):
    """Accepts one raw column value per row."""

    def scan(self, raw: Any) -> None:
        """Consume a raw column value. Raises on failure."""
        ...


@runtime_checkable
class Slot(Protocol):
    """A settable location with a declared type."""

    @property
    def declared_type(self) -> Any:
        """The annotation the slot was declared with."""
        ...

    def set(self, value: Any) -> None:
        """Replace the current value."""
        ...
