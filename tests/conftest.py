# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for picker test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import datetime

import pytest
from dateutil import tz

from freepicker.conf import PickerSettings, configure, reset_settings
from freepicker.core.clock import UTC, Clock
from freepicker.host.control import FormControl

REFERENCE = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
IST = tz.tzoffset("IST", 5 * 3600 + 30 * 60)


class CountingControl(FormControl):
    """Form control recording how often the dirty flag was requested."""

    def __init__(self, *args, **kwargs) -> None:
        self.dirty_calls = 0
        super().__init__(*args, **kwargs)

    def set_dirty(self) -> None:
        self.dirty_calls += 1
        super().set_dirty()


class ClockFactory:
    """Build clocks pinned to the shared reference instant."""

    def __init__(self, reference: datetime = REFERENCE) -> None:
        self.reference = reference

    def build(self, zone) -> Clock:
        return Clock(zone=zone, now=lambda: self.reference)


@pytest.fixture(autouse=True)
def picker_settings():
    """Install default settings so the environment cannot leak into tests."""

    settings = PickerSettings()
    configure(settings)
    yield settings
    reset_settings()


@pytest.fixture
def utc_clock() -> Clock:
    return ClockFactory().build(UTC)


@pytest.fixture
def ist_clock() -> Clock:
    """Local zone at +05:30."""
    return ClockFactory().build(IST)


__all__ = ["CountingControl", "ClockFactory", "IST", "REFERENCE"]


# The End
