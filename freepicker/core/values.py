# -*- coding: utf-8 -*-
"""
values

Composite view values the user edits one sub-field at a time.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DateParts:
    """Day, month and year selections; ``year`` is numeric or ``None``."""

    day: str = ""
    month: str = ""
    year: int | str | None = None

    def has_input(self) -> bool:
        return bool(self.day or self.month or self.year)

    def is_complete(self) -> bool:
        return bool(self.day and self.month and self.year)


@dataclass(frozen=True)
class TimeParts:
    """Hour, minute and meridian selections on a 12-hour clock."""

    hour: str = ""
    minute: str = ""
    meridian: str = "AM"

    def has_input(self) -> bool:
        # meridian always carries a default, so it does not count as input
        return bool(self.hour or self.minute)

    def is_complete(self) -> bool:
        return bool(self.hour and self.minute)


@dataclass(frozen=True)
class DateTimeParts:
    """Canonical date and time sub-strings of a date-time value."""

    date: str | None = None
    time: str | None = None

    def has_input(self) -> bool:
        return bool(self.date or self.time)

    def is_complete(self) -> bool:
        return bool(self.date and self.time)


__all__ = ["DateParts", "DateTimeParts", "TimeParts"]


# The End
