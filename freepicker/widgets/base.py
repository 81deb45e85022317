# -*- coding: utf-8 -*-
"""
base

Base widget class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping

from ..core.bounds import Bounds, BoundsResolver
from ..core.codecs import FieldCodec
from ..core.config import PickerConfig
from ..core.exceptions import ControlAttachError
from ..core.guard import InitGuard
from ..host.control import FormControl
from .context import WidgetContext


class BaseWidget(ABC):
    """
    Base Widget Class

    A widget owns a codec and a bounds resolver, keeps the composite view
    the user is editing, and plugs into a :class:`FormControl`:

        widget = DatePickerWidget(WidgetContext("birthday"), {"max": "2020-12-31"})
        widget.attach(control)      # formatter, parser, validators, render
        widget.edit(day="05")       # user picks a day
        widget.update_config({...}) # new bounds take effect immediately
    """
    key: str = "base"
    supports_utc: bool = False

    def __init__(self, ctx: WidgetContext, options: Mapping[str, Any] | None = None) -> None:
        self.ctx = ctx
        self.logger = logging.getLogger(__name__)
        self.control: FormControl | None = None
        self.guard: InitGuard | None = None
        self.codec = self.build_codec()
        self.resolver = self.build_resolver()
        self.view = self.codec.empty()
        self.config = self._normalize(self.base_config().merge(options))
        self.bounds: Bounds | None = None
        self.config_changed()

    @property
    def clock(self):
        return self.ctx.clock

    # === Construction hooks ===
    @abstractmethod
    def build_codec(self) -> FieldCodec:
        raise NotImplementedError

    @abstractmethod
    def build_resolver(self) -> BoundsResolver:
        raise NotImplementedError

    @abstractmethod
    def get_validators(self) -> Dict[str, Callable[[Any, Any], bool]]:
        """Named predicates to register with the host."""
        raise NotImplementedError

    def base_config(self) -> PickerConfig:
        return PickerConfig.from_settings()

    # === Configuration ===
    def update_config(self, options: Mapping[str, Any] | None) -> PickerConfig:
        """Merge ``options`` into a new config and apply it before returning."""
        self.config = self._normalize(self.config.merge(options))
        self.config_changed()
        if self.control is not None:
            self.control.validate()
        return self.config

    def _normalize(self, config: PickerConfig) -> PickerConfig:
        if config.is_utc and not self.supports_utc:
            return config.merge(is_utc=False)
        return config

    def config_changed(self) -> None:
        """Recompute everything derived from ``self.config``."""
        self.bounds = self.resolver.resolve(self.config)
        for edge in ("min", "max"):
            raw = getattr(self.config, edge)
            if raw and getattr(self.bounds, f"{edge}_fallback"):
                self.logger.warning(
                    "%s: ignoring malformed %s bound %r", self.ctx.name or self.key, edge, raw
                )
        self.logger.debug("%s: config applied %s", self.ctx.name or self.key, self.config.as_dict())

    def current_config(self) -> PickerConfig:
        return self.config

    # === Host protocol ===
    def attach(self, control: FormControl) -> None:
        """Install this widget's formatter, parser, validators and render callback."""
        if self.control is not None:
            raise ControlAttachError(f"{self.key} widget is already attached")
        self.control = control
        self.guard = InitGuard(control.set_dirty)
        control.intercept_dirty(self.guard.mark_dirty)
        control.formatters.append(self.format_value)
        control.parsers.append(self.parse_value)
        control.validators.update(self.get_validators())
        control.render = self.render
        control.set_model_value(control.model_value)
        self.commit()

    def format_value(self, model_value: Any) -> Any:
        return self.codec.decode(model_value, self.config)

    def parse_value(self, view_value: Any) -> str | None:
        return self.codec.encode(view_value, self.config)

    def render(self) -> None:
        if self.control is not None and self.control.view_value is not None:
            self.view = self.control.view_value

    def commit(self) -> None:
        """Push the current view to the host."""
        if self.control is None:
            return
        self.control.set_view_value(self.view)
        self.guard.view_changed()

    # === User interaction ===
    def edit(self, **changes: Any) -> None:
        """Apply a user edit to one or more sub-fields."""
        if self.ctx.readonly:
            self.logger.debug("%s: edit ignored on read-only field", self.ctx.name)
            return
        self.view = replace(self.view, **changes)
        self.commit()

    def focus(self) -> None:
        """Focus landed on the control or one of its parts."""
        if self.control is not None:
            self.control.set_touched()

    @property
    def value(self) -> str | None:
        return self.control.model_value if self.control is not None else None

# The End
