# -*- coding: utf-8 -*-
"""
bounds

Turn a config's loose ``min``/``max`` into a concrete, always-valid window.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date, datetime, time
from typing import Any

from dateutil.relativedelta import relativedelta

from ..conf import current_settings
from .clock import UTC, Clock
from .config import PickerConfig
from .formats import DATE, DATETIME, TIME, TIME_ANCHOR, CanonicalFormat, is_instant_like

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Inclusive ``[min, max]`` window; ``min <= max`` always holds."""

    min: datetime
    max: datetime
    min_fallback: bool = field(default=False, compare=False)
    max_fallback: bool = field(default=False, compare=False)

    def contains(self, value: datetime) -> bool:
        return self.min <= value <= self.max

    def years(self) -> list[int]:
        """Every year from ``min`` through ``max`` inclusive."""
        return list(range(self.min.year, self.max.year + 1))


class BoundsResolver:
    """Resolve ``config.min``/``config.max`` against a canonical format.

    A bound that is absent, unreadable as an instant, or not in ``fmt`` at
    the configured strictness is replaced by the default window: the start
    of the reference year minus ``span`` years and the end of the reference
    year plus ``span`` years.
    """

    def __init__(
        self,
        fmt: CanonicalFormat,
        clock: Clock | None = None,
        span: int | None = None,
    ) -> None:
        self.fmt = fmt
        self.clock = clock or Clock()
        self._span = span

    @property
    def span(self) -> int:
        if self._span is not None:
            return self._span
        return current_settings().year_span

    def resolve(self, config: PickerConfig, reference: datetime | None = None) -> Bounds:
        """Return the bounds for ``config`` as of ``reference`` (default: now)."""
        reference = self._reference(config, reference)
        low_default, high_default = self.default_window(reference)
        low = self._resolve_edge(config.min, config, low_default)
        high = self._resolve_edge(config.max, config, high_default)
        if low is not None and high is not None and low > high:
            logger.debug(
                "Configured min %r is after max %r; using the default window",
                config.min,
                config.max,
            )
            low = high = None
        return Bounds(
            min=low_default if low is None else low,
            max=high_default if high is None else high,
            min_fallback=low is None,
            max_fallback=high is None,
        )

    def default_window(self, reference: datetime) -> tuple[datetime, datetime]:
        # stay a year clear of the datetime limits so zone conversion cannot overflow
        back = relativedelta(years=max(0, min(self.span, reference.year - MINYEAR - 1)))
        ahead = relativedelta(years=max(0, min(self.span, MAXYEAR - reference.year - 1)))
        start = reference.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
        end = reference.replace(
            month=12, day=31, hour=23, minute=59, second=59, microsecond=999999
        )
        return self.to_local(start - back), self.to_local(end + ahead)

    def to_local(self, value: datetime) -> datetime:
        return self.clock.to_local(value)

    def _reference(self, config: PickerConfig, reference: datetime | None) -> datetime:
        # the default window follows local years even when bounds are given in UTC
        if reference is None:
            return self.clock.now()
        if config.is_utc and reference.tzinfo is None:
            reference = reference.replace(tzinfo=UTC)
        return self.clock.to_local(reference)

    def _resolve_edge(self, raw: Any, config: PickerConfig, fallback: datetime) -> datetime | None:
        if not raw:
            return None
        if not is_instant_like(raw) or not self.fmt.matches(raw, config.strict):
            logger.debug("Bound %r is not a %s value; using %s", raw, self.fmt.pattern, fallback)
            return None
        if isinstance(raw, str):
            instant = self.fmt.parse(raw, config.strict)
        elif isinstance(raw, datetime):
            instant = raw
        else:
            instant = datetime.combine(raw, time())
        return self.instant(instant, config)

    def instant(self, value: datetime, config: PickerConfig) -> datetime:
        """Express a parsed bound as a local instant, reading it as UTC if needed."""
        if config.is_utc:
            converted = self.clock.utc_to_local(value)
            if converted is not None:
                return converted
        return self.clock.to_local(value)


class TimeOfDayResolver(BoundsResolver):
    """Bounds for a bare time of day; the default window is the whole day."""

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__(TIME, clock, span=0)

    def default_window(self, reference: datetime) -> tuple[datetime, datetime]:
        return (
            datetime.combine(TIME_ANCHOR, time(0, 0)),
            datetime.combine(TIME_ANCHOR, time(23, 59, 59)),
        )

    def _reference(self, config: PickerConfig, reference: datetime | None) -> datetime:
        return datetime.combine(TIME_ANCHOR, time())

    def _resolve_edge(self, raw: Any, config: PickerConfig, fallback: datetime) -> datetime | None:
        if isinstance(raw, time):
            return datetime.combine(TIME_ANCHOR, raw.replace(second=0, microsecond=0, tzinfo=None))
        if isinstance(raw, datetime):
            return datetime.combine(TIME_ANCHOR, raw.time().replace(second=0, microsecond=0))
        if isinstance(raw, date) or not raw:
            return None
        try:
            return self.fmt.parse(raw, config.strict)
        except ValueError:
            logger.debug("Time bound %r is not a %s value", raw, self.fmt.pattern)
            return None


def date_resolver(clock: Clock | None = None) -> BoundsResolver:
    return BoundsResolver(DATE, clock)


def datetime_resolver(clock: Clock | None = None) -> BoundsResolver:
    return BoundsResolver(DATETIME, clock)


__all__ = [
    "Bounds",
    "BoundsResolver",
    "TimeOfDayResolver",
    "date_resolver",
    "datetime_resolver",
]


# The End
