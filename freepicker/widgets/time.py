# -*- coding: utf-8 -*-
"""
time

Three-part time picker (hour / minute / meridian).

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Callable, Dict

from ..core.bounds import BoundsResolver, TimeOfDayResolver
from ..core.codecs import TimeCodec
from ..core.formats import MERIDIANS
from ..core.validators import RequiredValidator, TimeRangeValidator
from .base import BaseWidget
from .registry import registry


@registry.register("time")
class TimePickerWidget(BaseWidget):
    """
    Widget for ``time`` fields.
    The model value is ``HH:mm:00`` on a 24-hour clock; the view is a
    :class:`TimeParts` on a 12-hour clock.
    """

    hours = tuple(f"{h:02d}" for h in range(1, 13))
    minutes = tuple(f"{m:02d}" for m in range(60))
    meridians = MERIDIANS

    def build_resolver(self) -> BoundsResolver:
        return TimeOfDayResolver(self.clock)

    def build_codec(self) -> TimeCodec:
        return TimeCodec(self.clock)

    def get_validators(self) -> Dict[str, Callable[[Any, Any], bool]]:
        return {
            RequiredValidator.name: RequiredValidator(lambda: self.control.required),
            TimeRangeValidator.name: TimeRangeValidator(self.current_config, self.resolver),
        }

# The End
