# -*- coding: utf-8 -*-
"""Tests for the date, time and date-time value codecs."""

import pytest

from freepicker.core.codecs import DateCodec, DateTimeCodec, TimeCodec
from freepicker.core.config import PickerConfig
from freepicker.core.values import DateParts, DateTimeParts, TimeParts

VALIDATING = PickerConfig(validate=True)
PERMISSIVE = PickerConfig(validate=False)


# --- date --------------------------------------------------------------------

def test_date_decode_splits_parts(utc_clock) -> None:
    """Day and month stay zero-padded strings; the year is numeric."""

    parts = DateCodec(utc_clock).decode("2023-02-08", VALIDATING)

    assert parts == DateParts(day="08", month="02", year=2023)


@pytest.mark.parametrize("empty", [None, ""])
def test_date_decode_empty_value(utc_clock, empty) -> None:
    """No value decodes to blank parts with a ``None`` year."""

    assert DateCodec(utc_clock).decode(empty, VALIDATING) == DateParts(day="", month="", year=None)


def test_date_encode_requires_all_parts_when_validating(utc_clock) -> None:
    """A partially filled date is not a value yet."""

    codec = DateCodec(utc_clock)

    assert codec.encode(DateParts(day="05", month="03"), VALIDATING) is None
    assert codec.encode(DateParts(day="05", month="03", year=2020), VALIDATING) == "2020-03-05"


def test_date_encode_reflects_partial_input_without_validation(utc_clock) -> None:
    """Without validation the codec assembles whatever was entered."""

    codec = DateCodec(utc_clock)

    assert codec.encode(DateParts(month="03", year=2020), PERMISSIVE) == "2020-03-"
    assert codec.encode(DateParts(), PERMISSIVE) is None


def test_date_encode_leaves_calendar_checks_to_validator(utc_clock) -> None:
    """31 February is assembled as-is."""

    assert DateCodec(utc_clock).encode(DateParts("31", "02", 2023), VALIDATING) == "2023-02-31"


@pytest.mark.parametrize("value", ["2023-02-28", "2000-01-01", "1999-12-31", "2024-02-29"])
def test_date_round_trip(utc_clock, value) -> None:
    codec = DateCodec(utc_clock)

    assert codec.encode(codec.decode(value, PERMISSIVE), PERMISSIVE) == value


def test_date_year_enumeration(utc_clock) -> None:
    """Years run inclusively from the min year to the max year."""

    codec = DateCodec(utc_clock)

    assert codec.years(PickerConfig(min="2020-01-01", max="2022-06-01")) == [2020, 2021, 2022]
    assert len(codec.years(PickerConfig())) == 401


# --- time --------------------------------------------------------------------

def test_time_encode_examples(utc_clock) -> None:
    """Twelve-hour parts become a 24-hour canonical value."""

    codec = TimeCodec(utc_clock)

    assert codec.encode(TimeParts(hour="02", minute="15", meridian="PM"), VALIDATING) == "14:15:00"
    assert codec.encode(TimeParts(hour="12", minute="00", meridian="AM"), VALIDATING) == "00:00:00"
    assert codec.encode(TimeParts(hour="12", minute="00", meridian="PM"), VALIDATING) == "12:00:00"


def test_time_decode(utc_clock) -> None:
    codec = TimeCodec(utc_clock)

    assert codec.decode("14:05:00", VALIDATING) == TimeParts("02", "05", "PM")
    assert codec.decode("00:00:00", VALIDATING) == TimeParts("12", "00", "AM")
    assert codec.decode(None, VALIDATING) == TimeParts("", "", "AM")


def test_time_encode_missing_parts(utc_clock) -> None:
    """Missing hour or minute yields ``None`` with or without validation."""

    codec = TimeCodec(utc_clock)

    assert codec.encode(TimeParts(hour="02"), VALIDATING) is None
    assert codec.encode(TimeParts(hour="02"), PERMISSIVE) is None


def test_time_encode_malformed_parts_yield_none(utc_clock) -> None:
    """An impossible hour is not an exception."""

    codec = TimeCodec(utc_clock)

    assert codec.encode(TimeParts(hour="13", minute="00", meridian="PM"), VALIDATING) is None
    assert codec.encode(TimeParts(hour="02", minute="61", meridian="PM"), VALIDATING) is None


def test_time_lenient_encoding(utc_clock) -> None:
    """Forgiving mode accepts unpadded numbers and lowercase meridians."""

    codec = TimeCodec(utc_clock)
    parts = TimeParts(hour="2", minute="5", meridian="pm")

    assert codec.encode(parts, PickerConfig(strict=False)) == "14:05:00"
    assert codec.encode(parts, PickerConfig(strict=True)) is None


@pytest.mark.parametrize("value", ["00:00:00", "09:30:00", "12:00:00", "23:59:00"])
def test_time_round_trip(utc_clock, value) -> None:
    codec = TimeCodec(utc_clock)

    assert codec.encode(codec.decode(value, PERMISSIVE), PERMISSIVE) == value


# --- date-time ---------------------------------------------------------------

def test_datetime_decode_without_utc(ist_clock) -> None:
    parts = DateTimeCodec(ist_clock).decode("2023-02-28 14:05:00", PickerConfig())

    assert parts == DateTimeParts(date="2023-02-28", time="14:05:00")


def test_datetime_decode_converts_utc_to_local(ist_clock) -> None:
    """A UTC value is shown in local time (+05:30 here)."""

    codec = DateTimeCodec(ist_clock)
    config = PickerConfig(is_utc=True)

    assert codec.decode("2023-02-28 10:00:00", config) == DateTimeParts("2023-02-28", "15:30:00")
    assert codec.decode("2023-02-28 20:00:00", config) == DateTimeParts("2023-03-01", "01:30:00")


def test_datetime_encode_converts_local_to_utc(ist_clock) -> None:
    codec = DateTimeCodec(ist_clock)
    config = PickerConfig(is_utc=True)

    assert codec.encode(DateTimeParts("2023-03-01", "01:30:00"), config) == "2023-02-28 20:00:00"


def test_datetime_encode_incomplete_or_malformed(ist_clock) -> None:
    """Missing or unparseable sub-strings give ``None`` rather than an error."""

    codec = DateTimeCodec(ist_clock)

    for config in (PickerConfig(), PickerConfig(is_utc=True)):
        assert codec.encode(DateTimeParts("2023-02-28", None), config) is None
        assert codec.encode(DateTimeParts(None, "10:00:00"), config) is None
        assert codec.encode(DateTimeParts("2023-02-", "10:00:00"), config) is None
        assert codec.decode("yesterday", config) == DateTimeParts()


@pytest.mark.parametrize("is_utc", [False, True])
def test_datetime_round_trip(ist_clock, is_utc) -> None:
    codec = DateTimeCodec(ist_clock)
    config = PickerConfig(is_utc=is_utc)

    for value in ("2023-02-28 10:00:00", "2023-12-31 23:59:00", "2024-02-29 00:00:00"):
        assert codec.encode(codec.decode(value, config), config) == value


# The End
