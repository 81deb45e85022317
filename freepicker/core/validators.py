# -*- coding: utf-8 -*-
"""
validators

Predicates the host re-evaluates on every value change.

Each predicate receives both the backing model value and the live view
value, because the model lags the view while an edit is in progress.
They return ``True`` for "passes" and never raise.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable

from .bounds import BoundsResolver
from .clock import Clock
from .config import PickerConfig
from .exceptions import PickerError
from .formats import DATE, DATETIME, TIME, TIME_12H
from .values import DateParts, DateTimeParts, TimeParts

logger = logging.getLogger(__name__)

ConfigSource = Callable[[], PickerConfig]


def _has_input(view: Any) -> bool:
    has_input = getattr(view, "has_input", None)
    return bool(has_input()) if callable(has_input) else bool(view)


class RequiredValidator:
    """Pass unless the host marks the field required and nothing is entered."""

    name = "required"

    def __init__(self, is_required: Callable[[], bool]) -> None:
        self._is_required = is_required

    def __call__(self, model_value: Any, view_value: Any) -> bool:
        if not self._is_required():
            return True
        return bool(model_value) or _has_input(view_value)


class RangeValidator(ABC):
    """Pass when the entered value is well formed and inside the bounds."""

    name = "invalid"

    def __init__(
        self,
        config: ConfigSource,
        resolver: BoundsResolver,
        clock: Clock | None = None,
    ) -> None:
        self._config = config
        self.resolver = resolver
        self.clock = clock or resolver.clock

    def __call__(self, model_value: Any, view_value: Any) -> bool:
        config = self._config()
        if not config.validate:
            return True
        if not model_value and not _has_input(view_value):
            return True
        try:
            candidate = self.candidate(model_value, view_value, config)
            if candidate is None:
                return False
            return self.resolver.resolve(config).contains(candidate)
        except (PickerError, ValueError, TypeError, OverflowError):
            logger.debug("Validator %s rejected %r / %r", self.name, model_value, view_value)
            return False

    @abstractmethod
    def candidate(self, model_value: Any, view_value: Any, config: PickerConfig) -> datetime | None:
        """Return the instant to range-check, raising or ``None`` when unreadable."""
        raise NotImplementedError


class DateRangeValidator(RangeValidator):
    name = "invalidDate"

    def candidate(self, model_value: Any, view_value: DateParts, config: PickerConfig) -> datetime:
        if model_value:
            text = model_value
        else:
            year = "" if view_value.year is None else view_value.year
            text = f"{year}-{view_value.month}-{view_value.day}"
        return self.clock.localize(DATE.parse(text, config.strict))


class TimeRangeValidator(RangeValidator):
    name = "invalidTime"

    def candidate(self, model_value: Any, view_value: TimeParts, config: PickerConfig) -> datetime:
        if model_value:
            return TIME.parse(model_value, config.strict)
        text = f"{view_value.hour}:{view_value.minute} {view_value.meridian}"
        return TIME_12H.parse(text, config.strict)


class DateTimeRangeValidator(RangeValidator):
    """Compare local against local: a UTC model value is converted first."""

    name = "inValidDateTime"

    def candidate(
        self, model_value: Any, view_value: DateTimeParts, config: PickerConfig
    ) -> datetime | None:
        if model_value:
            if config.is_utc:
                return self.clock.utc_to_local(model_value, config.strict)
            return self.clock.localize(DATETIME.parse(model_value, strict=True))
        text = f"{view_value.date or ''} {view_value.time or ''}"
        return self.clock.localize(DATETIME.parse(text, strict=True))


__all__ = [
    "DateRangeValidator",
    "DateTimeRangeValidator",
    "RangeValidator",
    "RequiredValidator",
    "TimeRangeValidator",
]


# The End
