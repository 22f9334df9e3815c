"""Unit tests for canonical nullable holders."""

from __future__ import annotations

import datetime

import numpy as np
import pytest

from nullscan.core.enums import ScalarKind
from nullscan.core.exceptions import ConversionError
from nullscan.scan.holders import (
    NullBool,
    NullByte,
    NullFloat64,
    NullInt16,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
    holder_for,
)


class TestNull:
    @pytest.mark.parametrize("kind", list(ScalarKind))
    def test_none_is_absent(self, kind: ScalarKind) -> None:
        holder = holder_for(kind)
        holder.scan(None)
        assert holder.valid is False
        assert holder.get() is None

    def test_null_after_value_resets(self) -> None:
        holder = NullInt64()
        holder.scan(7)
        holder.scan(None)
        assert holder.valid is False
        assert holder.get() is None

    @pytest.mark.parametrize(
        ("kind", "cls"),
        [
            (ScalarKind.BOOL, NullBool),
            (ScalarKind.BYTE, NullByte),
            (ScalarKind.INT16, NullInt16),
            (ScalarKind.INT32, NullInt32),
            (ScalarKind.INT64, NullInt64),
            (ScalarKind.STRING, NullString),
            (ScalarKind.FLOAT64, NullFloat64),
            (ScalarKind.TIME, NullTime),
        ],
    )
    def test_holder_for(self, kind: ScalarKind, cls: type) -> None:
        holder = holder_for(kind)
        assert type(holder) is cls
        assert holder.kind is kind


class TestNullBool:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(True, True), (False, False), (1, True), (0, False), ("t", True), (b"FALSE", False),
         (np.bool_(True), True)],
    )
    def test_accepts(self, raw: object, expected: bool) -> None:
        holder = NullBool()
        holder.scan(raw)
        assert holder.valid is True
        assert holder.get() is expected

    @pytest.mark.parametrize("raw", [2, -1, "yes", 1.5])
    def test_rejects(self, raw: object) -> None:
        with pytest.raises(ConversionError):
            NullBool().scan(raw)


class TestIntegers:
    def test_byte_bounds(self) -> None:
        holder = NullByte()
        holder.scan(255)
        assert holder.get() == 255
        with pytest.raises(ConversionError, match="out of range"):
            NullByte().scan(256)
        with pytest.raises(ConversionError, match="out of range"):
            NullByte().scan(-1)

    def test_int16_bounds(self) -> None:
        holder = NullInt16()
        holder.scan(-32768)
        assert holder.get() == -32768
        with pytest.raises(ConversionError):
            NullInt16().scan(32768)

    def test_int32_bounds(self) -> None:
        with pytest.raises(ConversionError):
            NullInt32().scan(2**31)

    def test_int64_bounds(self) -> None:
        holder = NullInt64()
        holder.scan(2**63 - 1)
        assert holder.get() == 2**63 - 1
        with pytest.raises(ConversionError):
            NullInt64().scan(2**63)

    def test_text_and_bytes(self) -> None:
        holder = NullInt16()
        holder.scan("42")
        assert holder.get() == 42
        holder.scan(b"-12")
        assert holder.get() == -12

    def test_numpy_integer(self) -> None:
        holder = NullInt32()
        holder.scan(np.int64(99))
        assert holder.get() == 99
        assert type(holder.get()) is int

    def test_integral_float(self) -> None:
        holder = NullInt64()
        holder.scan(99.0)
        assert holder.get() == 99

    @pytest.mark.parametrize(
        "raw", [99.5, "4.2", "abc", "", True, object(), "\u0661\u0662", " 12", "1_000"]
    )
    def test_rejects(self, raw: object) -> None:
        with pytest.raises(ConversionError):
            NullInt64().scan(raw)

    def test_failed_scan_keeps_previous_state(self) -> None:
        holder = NullInt64()
        holder.scan(5)
        with pytest.raises(ConversionError):
            holder.scan("nope")
        assert holder.get() == 5


class TestNullFloat64:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(88.89, 88.89), (3, 3.0), ("88.89", 88.89), (b"1e3", 1000.0), (np.float32(0.5), 0.5),
         ("-.5", -0.5), ("+2.", 2.0), ("1E-2", 0.01), ("-Infinity", float("-inf"))],
    )
    def test_accepts(self, raw: object, expected: float) -> None:
        holder = NullFloat64()
        holder.scan(raw)
        assert holder.get() == expected
        assert type(holder.get()) is float

    @pytest.mark.parametrize(
        "raw", [True, "abc", object(), " 1_000 ", "1_000", " 1.5", "\u0661.5", b"1e3 "]
    )
    def test_rejects(self, raw: object) -> None:
        with pytest.raises(ConversionError):
            NullFloat64().scan(raw)


class TestNullString:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("lorem ipsum", "lorem ipsum"),
            (b"bytes", "bytes"),
            (99, "99"),
            (1.5, "1.5"),
            (np.int16(7), "7"),
            (True, "true"),
            (datetime.datetime(2024, 5, 1, 10, 20, 30), "2024-05-01T10:20:30"),
        ],
    )
    def test_accepts(self, raw: object, expected: str) -> None:
        holder = NullString()
        holder.scan(raw)
        assert holder.get() == expected

    def test_rejects_invalid_utf8(self) -> None:
        with pytest.raises(ConversionError):
            NullString().scan(b"\xff\xfe")

    def test_rejects_other_objects(self) -> None:
        with pytest.raises(ConversionError, match="unsupported source type"):
            NullString().scan(object())


class TestNullTime:
    def test_datetime_passes_through(self) -> None:
        now = datetime.datetime.now()
        holder = NullTime()
        holder.scan(now)
        assert holder.get() is now

    def test_date_at_midnight(self) -> None:
        holder = NullTime()
        holder.scan(datetime.date(2024, 5, 1))
        assert holder.get() == datetime.datetime(2024, 5, 1)

    @pytest.mark.parametrize(
        "raw",
        ["2024-05-01T10:20:30", "2024-05-01 10:20:30", b"2024-05-01T10:20:30"],
    )
    def test_iso_text(self, raw: object) -> None:
        holder = NullTime()
        holder.scan(raw)
        assert holder.get() == datetime.datetime(2024, 5, 1, 10, 20, 30)

    def test_timezone_preserved(self) -> None:
        holder = NullTime()
        holder.scan("2024-05-01T10:20:30+00:00")
        assert holder.get().utcoffset() == datetime.timedelta(0)

    @pytest.mark.parametrize("raw", ["not a time", 5])
    def test_rejects(self, raw: object) -> None:
        with pytest.raises(ConversionError):
            NullTime().scan(raw)
