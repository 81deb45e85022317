# -*- coding: utf-8 -*-
"""
date

Three-part date picker (day / month / year).

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Callable, Dict

from ..core.bounds import BoundsResolver, date_resolver
from ..core.codecs import DateCodec
from ..core.validators import DateRangeValidator, RequiredValidator
from .base import BaseWidget
from .registry import registry


@registry.register("date")
class DatePickerWidget(BaseWidget):
    """
    Widget for ``date`` fields.
    The model value is ``YYYY-MM-DD``; the view is a :class:`DateParts`.
    """

    years: list[int]

    def build_resolver(self) -> BoundsResolver:
        return date_resolver(self.clock)

    def build_codec(self) -> DateCodec:
        return DateCodec(self.clock, resolver=date_resolver(self.clock))

    def config_changed(self) -> None:
        super().config_changed()
        self.years = self.codec.years(self.config)

    def get_validators(self) -> Dict[str, Callable[[Any, Any], bool]]:
        return {
            RequiredValidator.name: RequiredValidator(lambda: self.control.required),
            DateRangeValidator.name: DateRangeValidator(self.current_config, self.resolver),
        }

# The End
