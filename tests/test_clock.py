# -*- coding: utf-8 -*-
"""Tests for the local zone and the UTC <-> local primitive."""

from datetime import date, datetime

from freepicker.core.clock import UTC
from tests.conftest import IST, REFERENCE


def test_now_is_local_and_injectable(ist_clock) -> None:
    now = ist_clock.now()

    assert now == REFERENCE
    assert (now.hour, now.minute) == (17, 30)
    assert ist_clock.utcnow().tzinfo is UTC


def test_utc_to_local(ist_clock) -> None:
    local = ist_clock.utc_to_local("2023-02-28 10:00:00")

    assert local == datetime(2023, 2, 28, 15, 30, tzinfo=IST)


def test_local_to_utc(ist_clock) -> None:
    value = ist_clock.local_to_utc("2023-02-28 15:30:00")

    assert value == datetime(2023, 2, 28, 10, 0, tzinfo=UTC)
    assert value.utcoffset().total_seconds() == 0


def test_conversion_accepts_date_objects(ist_clock) -> None:
    assert ist_clock.local_to_utc(date(2023, 3, 1)) == datetime(2023, 2, 28, 18, 30, tzinfo=UTC)


def test_conversion_failures_yield_none(ist_clock) -> None:
    """Malformed strings never raise out of a conversion."""

    assert ist_clock.utc_to_local("2023-02-28") is None
    assert ist_clock.local_to_utc("garbage") is None


def test_lenient_conversion(ist_clock) -> None:
    assert ist_clock.utc_to_local("2023/2/28 10:00", strict=False) == datetime(
        2023, 2, 28, 10, 0, tzinfo=UTC
    )


# The End
