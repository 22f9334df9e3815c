"""Canonical nullable holders, one per scalar kind.

A holder is the engine-native boundary for a column value: scan() parses
a raw driver value with the kind's own rules and records either "absent"
(SQL NULL) or a native Python value. Holders implement the Scanner
protocol, so they can also be passed to the Engine directly.
"""

from __future__ import annotations

import datetime
import re
from typing import Any, ClassVar

import dateutil.parser
import numpy as np

from nullscan.core.enums import ScalarKind
from nullscan.core.exceptions import ConversionError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_TRUE_STRINGS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def _as_text(raw: Any) -> str | None:
    """Return raw as str if it is textual, else None."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw).decode("utf-8")
    return None


def _is_bool(raw: Any) -> bool:
    return isinstance(raw, (bool, np.bool_))


class NullHolder:
    """Base for nullable holders.

    Attributes:
        valid: True when the last scanned value was not NULL.
        value: The native value, or None when not valid.
    """

    kind: ClassVar[ScalarKind]

    def __init__(self) -> None:
        self.valid = False
        self.value: Any = None

    def scan(self, raw: Any) -> None:
        """Parse a raw column value into this holder."""
        if raw is None:
            self.valid = False
            self.value = None
            return
        try:
            native = self._parse(raw)
        except (ValueError, TypeError, OverflowError, UnicodeDecodeError) as e:
            raise ConversionError(self.kind, raw, str(e)) from e
        self.valid = True
        self.value = native

    def get(self) -> Any:
        """Return the native value, or None when absent."""
        return self.value if self.valid else None

    def _parse(self, raw: Any) -> Any:
        raise NotImplementedError

    def _reject(self, raw: Any) -> ConversionError:
        return ConversionError(
            self.kind, raw, f"unsupported source type {type(raw).__name__}"
        )

    def __repr__(self) -> str:
        if not self.valid:
            return f"{type(self).__name__}(NULL)"
        return f"{type(self).__name__}({self.value!r})"


class NullBool(NullHolder):
    kind = ScalarKind.BOOL

    def _parse(self, raw: Any) -> bool:
        if _is_bool(raw):
            return bool(raw)
        if isinstance(raw, (int, np.integer)):
            if raw in (0, 1):
                return bool(raw)
            raise ConversionError(self.kind, raw, "integer is not 0 or 1")
        text = _as_text(raw)
        if text is None:
            raise self._reject(raw)
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ConversionError(self.kind, raw, "invalid boolean text")


class _NullInteger(NullHolder):
    """Integer holder range-checked to ``[minimum, maximum]``."""

    minimum: ClassVar[int]
    maximum: ClassVar[int]

    def _parse(self, raw: Any) -> int:
        if _is_bool(raw):
            raise self._reject(raw)
        if isinstance(raw, (int, np.integer)):
            number = int(raw)
        elif isinstance(raw, (float, np.floating)):
            if not float(raw).is_integer():
                raise ConversionError(self.kind, raw, "value has a fractional part")
            number = int(raw)
        else:
            text = _as_text(raw)
            if text is None:
                raise self._reject(raw)
            if not _INTEGER_PATTERN.fullmatch(text):
                raise ConversionError(self.kind, raw, "invalid integer text")
            number = int(text, 10)

        if not self.minimum <= number <= self.maximum:
            raise ConversionError(
                self.kind, raw, f"value out of range [{self.minimum}, {self.maximum}]"
            )
        return number


class NullByte(_NullInteger):
    kind = ScalarKind.BYTE
    minimum = 0
    maximum = 2**8 - 1


class NullInt16(_NullInteger):
    kind = ScalarKind.INT16
    minimum = -(2**15)
    maximum = 2**15 - 1


class NullInt32(_NullInteger):
    kind = ScalarKind.INT32
    minimum = -(2**31)
    maximum = 2**31 - 1


class NullInt64(_NullInteger):
    kind = ScalarKind.INT64
    minimum = -(2**63)
    maximum = 2**63 - 1


class NullFloat64(NullHolder):
    kind = ScalarKind.FLOAT64

    def _parse(self, raw: Any) -> float:
        if _is_bool(raw):
            raise self._reject(raw)
        if isinstance(raw, (int, float, np.integer, np.floating)):
            return float(raw)
        text = _as_text(raw)
        if text is None:
            raise self._reject(raw)
        if not _FLOAT_PATTERN.fullmatch(text):
            raise ConversionError(self.kind, raw, "invalid float text")
        return float(text)


class NullString(NullHolder):
    kind = ScalarKind.STRING

    def _parse(self, raw: Any) -> str:
        text = _as_text(raw)
        if text is not None:
            return text
        if _is_bool(raw):
            return "true" if raw else "false"
        if isinstance(raw, (int, float, np.integer, np.floating)):
            return str(raw.item() if isinstance(raw, np.generic) else raw)
        if isinstance(raw, datetime.datetime):
            return raw.isoformat()
        raise self._reject(raw)


class NullTime(NullHolder):
    kind = ScalarKind.TIME

    def _parse(self, raw: Any) -> datetime.datetime:
        if isinstance(raw, datetime.datetime):
            return raw
        if isinstance(raw, datetime.date):
            return datetime.datetime.combine(raw, datetime.time())
        text = _as_text(raw)
        if text is None:
            raise self._reject(raw)
        return dateutil.parser.isoparse(text)


def holder_for(kind: ScalarKind) -> NullHolder:
    """Build an empty holder for ``kind``."""
    match kind:
        case ScalarKind.BOOL:
            return NullBool()
        case ScalarKind.BYTE:
            return NullByte()
        case ScalarKind.INT16:
            return NullInt16()
        case ScalarKind.INT32:
            return NullInt32()
        case ScalarKind.INT64:
            return NullInt64()
        case ScalarKind.STRING:
            return NullString()
        case ScalarKind.FLOAT64:
            return NullFloat64()
        case ScalarKind.TIME:
            return NullTime()
    raise ValueError(f"Unknown scalar kind: {kind!r}")
