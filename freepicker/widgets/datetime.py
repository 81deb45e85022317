# -*- coding: utf-8 -*-
"""
datetime

Date-time picker composed of a date picker and a time picker.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping

from ..core.bounds import BoundsResolver, datetime_resolver
from ..core.codecs import DateTimeCodec
from ..core.formats import DATE
from ..core.validators import DateTimeRangeValidator, RequiredValidator
from ..core.values import DateTimeParts
from ..host.control import FormControl
from .base import BaseWidget
from .context import WidgetContext
from .date import DatePickerWidget
from .registry import registry
from .time import TimePickerWidget


@registry.register("datetime")
class DateTimePickerWidget(BaseWidget):
    """
    Widget for ``datetime`` fields.

    The model value is ``YYYY-MM-DD HH:mm:00``, in UTC when ``is_utc`` is
    set. The view is a :class:`DateTimeParts` of local canonical date and
    time strings, each edited through its own child picker. The children
    never validate on their own; only the combined value is checked here.
    """

    supports_utc = True

    def __init__(self, ctx: WidgetContext, options: Mapping[str, Any] | None = None) -> None:
        self.date_widget = DatePickerWidget(ctx.child("date"), {"validate": False})
        self.time_widget = TimePickerWidget(ctx.child("time"), {"validate": False})
        self.date_control = FormControl(f"{ctx.name}.date")
        self.time_control = FormControl(f"{ctx.name}.time")
        super().__init__(ctx, options)
        self.date_widget.attach(self.date_control)
        self.time_widget.attach(self.time_control)
        self.date_control.view_change_listeners.append(self._children_changed)
        self.time_control.view_change_listeners.append(self._children_changed)

    def build_resolver(self) -> BoundsResolver:
        return datetime_resolver(self.clock)

    def build_codec(self) -> DateTimeCodec:
        return DateTimeCodec(self.clock)

    @property
    def years(self) -> list[int]:
        return self.date_widget.years

    def config_changed(self) -> None:
        super().config_changed()
        # bounds are local instants already; children never convert
        self.date_widget.update_config({
            "min": DATE.format(self.bounds.min),
            "max": DATE.format(self.bounds.max),
            "strict": self.config.strict,
            "validate": False,
            "is_utc": False,
        })
        self.time_widget.update_config({
            "strict": self.config.strict,
            "validate": False,
            "is_utc": False,
        })

    def get_validators(self) -> Dict[str, Callable[[Any, Any], bool]]:
        return {
            RequiredValidator.name: RequiredValidator(lambda: self.control.required),
            DateTimeRangeValidator.name: DateTimeRangeValidator(self.current_config, self.resolver),
        }

    def render(self) -> None:
        super().render()
        self._push_to_children()

    def edit(self, **changes: Any) -> None:
        """Replace the date and/or time sub-strings directly."""
        if self.ctx.readonly:
            return
        self.view = replace(self.view, **changes)
        self._push_to_children()
        self.commit()

    def edit_date(self, **changes: Any) -> None:
        """Forward a day/month/year edit to the date picker."""
        self.date_widget.edit(**changes)

    def edit_time(self, **changes: Any) -> None:
        """Forward an hour/minute/meridian edit to the time picker."""
        self.time_widget.edit(**changes)

    def focus(self, part: str | None = None) -> None:
        super().focus()
        if part == "date":
            self.date_widget.focus()
        elif part == "time":
            self.time_widget.focus()

    def _push_to_children(self) -> None:
        view: DateTimeParts = self.view
        self.date_control.set_model_value(view.date)
        self.time_control.set_model_value(view.time)

    def _children_changed(self) -> None:
        self.view = DateTimeParts(
            date=self.date_control.model_value,
            time=self.time_control.model_value,
        )
        self.commit()

# The End
