# -*- coding: utf-8 -*-
"""
formats

Canonical wire formats and their strict/lenient parsers.

Every parser returns a naive ``datetime``; time-only formats anchor the
result on ``1900-01-01`` the same way ``datetime.strptime`` does. Parsing
failures raise :class:`~freepicker.core.exceptions.FormatError`, which the
codecs and validators catch and turn into ``None`` / ``False``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Callable

from dateutil import parser as date_parser

from .exceptions import FormatError

TIME_ANCHOR = date(1900, 1, 1)

MERIDIANS = ("AM", "PM")


def _hour_from_meridian(hour: int, meridian: str) -> int:
    """Convert a 12-hour clock value into 0-23."""
    if meridian.upper().startswith("P"):
        return hour if hour == 12 else hour + 12
    return 0 if hour == 12 else hour


def _build_date(match: re.Match[str]) -> datetime:
    year, month, day = (int(part) for part in match.group(1, 2, 3))
    return datetime(year, month, day)


def _build_time(match: re.Match[str]) -> datetime:
    hour, minute = int(match.group(1)), int(match.group(2))
    return datetime.combine(TIME_ANCHOR, time(hour, minute))


def _build_time12(match: re.Match[str]) -> datetime:
    hour, minute = int(match.group(1)), int(match.group(2))
    if not 0 <= hour <= 12:
        raise ValueError(f"hour {hour} is outside the 12-hour clock")
    hour = _hour_from_meridian(hour, match.group(3))
    return datetime.combine(TIME_ANCHOR, time(hour, minute))


def _build_time12_strict(match: re.Match[str]) -> datetime:
    if int(match.group(1)) == 0:
        raise ValueError("hour 00 is not valid on a 12-hour clock")
    return _build_time12(match)


def _build_datetime(match: re.Match[str]) -> datetime:
    parts = [int(part) if part else 0 for part in match.group(1, 2, 3, 4, 5, 6)]
    return datetime(*parts)


def _format_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _format_time(value: datetime | time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}:00"


def _format_time12(value: datetime | time) -> str:
    hour = value.hour % 12 or 12
    meridian = MERIDIANS[value.hour >= 12]
    return f"{hour:02d}:{value.minute:02d} {meridian}"


def _format_datetime(value: datetime) -> str:
    return f"{_format_date(value)} {_format_time(value)}"


class CanonicalFormat:
    """A fixed, case-sensitive wire format with a forgiving fallback grammar."""

    def __init__(
        self,
        pattern: str,
        *,
        strict: str,
        lenient: str,
        build: Callable[[re.Match[str]], datetime],
        render: Callable[[Any], str],
        build_strict: Callable[[re.Match[str]], datetime] | None = None,
    ) -> None:
        self.pattern = pattern
        self._strict = re.compile(strict)
        self._lenient = re.compile(lenient, re.IGNORECASE)
        self._build = build
        self._build_strict = build_strict or build
        self._render = render

    def __repr__(self) -> str:
        return f"CanonicalFormat({self.pattern!r})"

    def parse(self, value: Any, strict: bool = True) -> datetime:
        """Parse ``value`` into a naive ``datetime`` or raise ``FormatError``."""
        if not isinstance(value, str):
            raise FormatError(value, self.pattern)
        if strict:
            match = self._strict.fullmatch(value)
            build = self._build_strict
        else:
            match = self._lenient.match(value.strip())
            build = self._build
        if match is None:
            raise FormatError(value, self.pattern)
        try:
            return build(match)
        except (ValueError, OverflowError) as exc:
            raise FormatError(value, self.pattern) from exc

    def matches(self, value: Any, strict: bool = True) -> bool:
        """Return ``True`` when ``value`` parses under this format.

        Concrete ``date``/``datetime`` objects always match; a format only
        constrains strings.
        """
        if isinstance(value, (date, datetime)):
            return True
        try:
            self.parse(value, strict)
        except FormatError:
            return False
        return True

    def format(self, value: Any) -> str:
        """Render a ``date``/``datetime``/``time`` in this format."""
        return self._render(value)


DATE = CanonicalFormat(
    "YYYY-MM-DD",
    strict=r"(\d{4})-(\d{2})-(\d{2})",
    lenient=r"(\d{1,4})\D+(\d{1,2})\D+(\d{1,2})",
    build=_build_date,
    render=_format_date,
)

TIME = CanonicalFormat(
    "HH:mm:00",
    strict=r"(\d{2}):(\d{2}):00",
    lenient=r"(\d{1,2})\D+(\d{1,2})",
    build=_build_time,
    render=_format_time,
)

TIME_12H = CanonicalFormat(
    "hh:mm A",
    strict=r"(\d{2}):(\d{2}) (AM|PM)",
    lenient=r"(\d{1,2})\D+(\d{1,2})\s*([AP])\.?M?\.?",
    build=_build_time12,
    build_strict=_build_time12_strict,
    render=_format_time12,
)

DATETIME = CanonicalFormat(
    "YYYY-MM-DD HH:mm:00",
    strict=r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})",
    lenient=r"(\d{1,4})\D+(\d{1,2})\D+(\d{1,2})(?:[\sT]+(\d{1,2})\D+(\d{1,2})(?:\D+(\d{1,2}))?)?",
    build=_build_datetime,
    render=_format_datetime,
)


def is_instant_like(value: Any) -> bool:
    """Return ``True`` when ``value`` can be read as some point in time.

    ``date``/``datetime`` objects qualify as-is; strings qualify when
    ``dateutil`` can make sense of them. Everything else is malformed.
    """
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        date_parser.parse(value)
    except (date_parser.ParserError, ValueError, OverflowError):
        return False
    return True


__all__ = [
    "CanonicalFormat",
    "DATE",
    "DATETIME",
    "MERIDIANS",
    "TIME",
    "TIME_12H",
    "TIME_ANCHOR",
    "is_instant_like",
]


# The End
