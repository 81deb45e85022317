# -*- coding: utf-8 -*-
"""
clock

Local time zone, reference instant and the UTC <-> local primitive.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Any, Callable

from dateutil import tz

from ..conf import current_settings
from .exceptions import FormatError
from .formats import DATETIME

logger = logging.getLogger(__name__)

UTC = tz.UTC


class Clock:
    """Answer "what time is it" and "what zone is local" for a widget.

    Both are injectable so tests can pin the reference instant and the
    local offset; by default the zone comes from the active settings and
    the instant from the system clock.
    """

    def __init__(
        self,
        zone: tzinfo | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._zone = zone
        self._now = now

    def __repr__(self) -> str:
        return f"Clock(zone={self.zone!r})"

    @property
    def zone(self) -> tzinfo:
        if self._zone is not None:
            return self._zone
        return current_settings().get_tzinfo()

    def now(self) -> datetime:
        """Return the reference instant as an aware local datetime."""
        current = self._now() if self._now is not None else datetime.now(UTC)
        return self.to_local(current)

    def utcnow(self) -> datetime:
        """Return the reference instant as an aware UTC datetime."""
        return self.now().astimezone(UTC)

    def localize(self, value: datetime) -> datetime:
        """Attach the local zone to a naive wall-clock ``value``."""
        if value.tzinfo is not None:
            return value.astimezone(self.zone)
        return value.replace(tzinfo=self.zone)

    def to_local(self, value: datetime) -> datetime:
        """Express an instant in the local zone; naive values are read as local."""
        return self.localize(value)

    def utc_to_local(self, value: Any = None, strict: bool = True) -> datetime | None:
        """Read ``value`` as UTC and return it as an aware local datetime.

        Strings are parsed under the date-time wire format; naive
        ``datetime`` objects are taken to be UTC. ``None`` means "now".
        Returns ``None`` when the string cannot be parsed.
        """
        if value is None:
            return self.now()
        instant = self._coerce(value, strict)
        if instant is None:
            return None
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return instant.astimezone(self.zone)

    def local_to_utc(self, value: Any = None, strict: bool = True) -> datetime | None:
        """Read ``value`` as local wall time and return it as an aware UTC datetime."""
        if value is None:
            return self.utcnow()
        instant = self._coerce(value, strict)
        if instant is None:
            return None
        return self.localize(instant).astimezone(UTC)

    @staticmethod
    def _coerce(value: Any, strict: bool) -> datetime | None:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        try:
            return DATETIME.parse(value, strict)
        except FormatError:
            logger.debug("Cannot convert %r between UTC and local time", value)
            return None


__all__ = ["Clock", "UTC"]


# The End
