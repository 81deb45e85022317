# -*- coding: utf-8 -*-
"""
registry

Widget registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Type

from ..core.exceptions import WidgetNotFound
from .base import BaseWidget
from .context import WidgetContext


class WidgetRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseWidget]] = {}

    def register(self, key: str):
        """Decorator to register a widget by key."""
        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseWidget] | None:
        return self._by_key.get(key)

    def keys(self) -> list[str]:
        return sorted(self._by_key)

    def create(
        self,
        key: str,
        ctx: WidgetContext,
        options: Mapping[str, Any] | None = None,
    ) -> BaseWidget:
        """Instantiate the widget registered under ``key``."""
        cls = self.get(key)
        if cls is None:
            raise WidgetNotFound(f"No widget registered under {key!r}")
        return cls(ctx, options)

    def resolve_for_kind(self, kind: str | None, meta: Mapping[str, Any] | None = None) -> str:
        """Map a field kind to a widget key."""
        meta = meta or {}
        if "widget" in meta:
            return str(meta["widget"])

        k = (kind or "").lower()  # "date" | "time" | "datetime" | "timestamp" | ...
        if k in ("datetime", "timestamp", "datetime-local"):
            return "datetime"
        if k == "time":
            return "time"
        if k == "date":
            return "date"
        raise WidgetNotFound(f"No picker handles field kind {kind!r}")

registry = WidgetRegistry()

# The End
