# -*- coding: utf-8 -*-
"""
codecs

Bidirectional converters between view values and canonical strings.

``decode`` is what the host installs as a formatter and ``encode`` what it
installs as a parser. ``encode`` returning ``None`` is the ordinary answer
for "not a canonical value yet"; neither method raises.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from .bounds import BoundsResolver, date_resolver
from .clock import Clock
from .config import PickerConfig
from .exceptions import FormatError
from .formats import DATE, DATETIME, TIME, TIME_12H
from .values import DateParts, DateTimeParts, TimeParts

logger = logging.getLogger(__name__)


class FieldCodec(ABC):
    """Base class for the per-widget value codecs."""

    parts_class: type = object

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or Clock()

    def empty(self) -> Any:
        """Return the view value meaning "nothing entered"."""
        return self.parts_class()

    @abstractmethod
    def decode(self, canonical: str | None, config: PickerConfig) -> Any:
        """Split a canonical value into view parts."""
        raise NotImplementedError

    @abstractmethod
    def encode(self, parts: Any, config: PickerConfig) -> str | None:
        """Assemble view parts into a canonical value or ``None``."""
        raise NotImplementedError


class DateCodec(FieldCodec):
    """``YYYY-MM-DD`` <-> day/month/year."""

    parts_class = DateParts

    def __init__(self, clock: Clock | None = None, resolver: BoundsResolver | None = None) -> None:
        super().__init__(clock)
        self.resolver = resolver or date_resolver(self.clock)

    def decode(self, canonical: str | None, config: PickerConfig) -> DateParts:
        if not canonical:
            return self.empty()
        try:
            value = DATE.parse(canonical, strict=False)
        except FormatError:
            logger.debug("Cannot decode %r as a date", canonical)
            return self.empty()
        return DateParts(day=f"{value.day:02d}", month=f"{value.month:02d}", year=value.year)

    def encode(self, parts: DateParts | None, config: PickerConfig) -> str | None:
        if parts is None or not parts.has_input():
            # nothing entered is "no value" even without validation
            return None
        if config.validate and not parts.is_complete():
            return None
        # calendar validity (e.g. 31 February) is left to the validator
        year = "" if parts.year is None else parts.year
        return f"{year}-{parts.month or ''}-{parts.day or ''}"

    def years(self, config: PickerConfig) -> list[int]:
        """Years offered for selection under ``config``."""
        return self.resolver.resolve(config).years()


class TimeCodec(FieldCodec):
    """``HH:mm:00`` <-> hour/minute/meridian."""

    parts_class = TimeParts

    def decode(self, canonical: str | None, config: PickerConfig) -> TimeParts:
        if not canonical:
            return self.empty()
        try:
            value = TIME.parse(canonical, config.strict)
        except FormatError:
            logger.debug("Cannot decode %r as a time", canonical)
            return self.empty()
        hour, rest = TIME_12H.format(value).split(":", 1)
        minute, meridian = rest.split(" ", 1)
        return TimeParts(hour=hour, minute=minute, meridian=meridian)

    def encode(self, parts: TimeParts | None, config: PickerConfig) -> str | None:
        if parts is None:
            return None
        if config.validate and not parts.is_complete():
            return None
        assembled = f"{parts.hour or ''}:{parts.minute or ''} {parts.meridian or ''}"
        try:
            value = TIME_12H.parse(assembled, config.strict)
        except FormatError:
            logger.debug("Cannot encode time parts %r", parts)
            return None
        return TIME.format(value)


class DateTimeCodec(FieldCodec):
    """``YYYY-MM-DD HH:mm:00`` <-> date/time sub-strings, optionally via UTC."""

    parts_class = DateTimeParts

    def decode(self, canonical: str | None, config: PickerConfig) -> DateTimeParts:
        if not canonical:
            return self.empty()
        if config.is_utc:
            value = self.clock.utc_to_local(canonical, config.strict)
        else:
            try:
                value = DATETIME.parse(canonical, strict=True)
            except FormatError:
                value = None
        if value is None:
            logger.debug("Cannot decode %r as a date-time", canonical)
            return self.empty()
        return DateTimeParts(date=DATE.format(value), time=TIME.format(value))

    def encode(self, parts: DateTimeParts | None, config: PickerConfig) -> str | None:
        if parts is None or not parts.is_complete():
            return None
        assembled = f"{parts.date} {parts.time}"
        if config.is_utc:
            value = self.clock.local_to_utc(assembled, strict=True)
        else:
            try:
                value = DATETIME.parse(assembled, strict=True)
            except FormatError:
                value = None
        if value is None:
            logger.debug("Cannot encode date-time parts %r", parts)
            return None
        return DATETIME.format(value)


__all__ = ["DateCodec", "DateTimeCodec", "FieldCodec", "TimeCodec"]


# The End
