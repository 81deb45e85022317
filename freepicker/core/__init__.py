# -*- coding: utf-8 -*-
"""
core

Value-adapter and validation core shared by the picker widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .bounds import Bounds, BoundsResolver, TimeOfDayResolver, date_resolver, datetime_resolver
from .clock import UTC, Clock
from .codecs import DateCodec, DateTimeCodec, FieldCodec, TimeCodec
from .config import PickerConfig
from .exceptions import ControlAttachError, FormatError, PickerError, WidgetNotFound
from .formats import DATE, DATETIME, TIME, TIME_12H, CanonicalFormat
from .guard import GuardState, InitGuard
from .validators import (
    DateRangeValidator,
    DateTimeRangeValidator,
    RangeValidator,
    RequiredValidator,
    TimeRangeValidator,
)
from .values import DateParts, DateTimeParts, TimeParts

__all__ = [
    "Bounds",
    "BoundsResolver",
    "CanonicalFormat",
    "Clock",
    "ControlAttachError",
    "DATE",
    "DATETIME",
    "DateCodec",
    "DateParts",
    "DateRangeValidator",
    "DateTimeCodec",
    "DateTimeParts",
    "DateTimeRangeValidator",
    "FieldCodec",
    "FormatError",
    "GuardState",
    "InitGuard",
    "PickerConfig",
    "PickerError",
    "RangeValidator",
    "RequiredValidator",
    "TIME",
    "TIME_12H",
    "TimeCodec",
    "TimeOfDayResolver",
    "TimeParts",
    "TimeRangeValidator",
    "UTC",
    "WidgetNotFound",
    "date_resolver",
    "datetime_resolver",
]


# The End
