"""Scan target planning for a row of destinations.

Every destination is classified into exactly one of three cases:

    Wrapped      resolvable nullable slot -> scanned through NullValue
    Discarded    None -> the column is read and thrown away
    PassThrough  anything else -> handed to the engine unchanged

Planning never raises; unsupported destinations fail (or not) only when
the engine assigns to them natively.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from nullscan.core.exceptions import UnsupportedDestination
from nullscan.scan.adapter import NullValue
from nullscan.scan.resolver import resolve

logger = logging.getLogger(__name__)


class Discard:
    """Scanner that accepts and ignores any value."""

    __slots__ = ()

    def scan(self, raw: Any) -> None:
        return None

    def __repr__(self) -> str:
        return "Discard()"


@dataclass(frozen=True)
class Wrapped:
    """A supported destination wrapped in its adapter."""

    adapter: NullValue

    @property
    def target(self) -> Any:
        return self.adapter


@dataclass(frozen=True)
class Discarded:
    """A None destination; its column is dropped."""

    @property
    def target(self) -> Any:
        return Discard()


@dataclass(frozen=True)
class PassThrough:
    """An unsupported destination left to the engine."""

    destination: Any

    @property
    def target(self) -> Any:
        return self.destination


ScanTarget = Wrapped | Discarded | PassThrough


def plan(destination: Any) -> ScanTarget:
    """Classify a single destination."""
    if destination is None:
        return Discarded()
    try:
        resolve(destination)
    except UnsupportedDestination as e:
        logger.debug("Passing destination through unchanged: %s", e)
        return PassThrough(destination)
    return Wrapped(NullValue(destination))


def target(destination: Any) -> Any:
    """Return the object the engine should scan ``destination`` with."""
    return plan(destination).target


def targets(*destinations: Any) -> list[Any]:
    """Build scan targets for a row, one per destination, in order."""
    return [target(destination) for destination in destinations]
