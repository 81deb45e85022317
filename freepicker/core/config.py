# -*- coding: utf-8 -*-
"""
config

Immutable per-widget configuration snapshot.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from ..conf import PickerSettings, current_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerConfig:
    """Options a picker widget is configured with.

    ``min``/``max`` stay loosely typed here: ``None``, a ``date``/``datetime``,
    a pre-formatted string or plain garbage. They only become usable once a
    :class:`~freepicker.core.bounds.BoundsResolver` has resolved them.
    """

    min: Any = None
    max: Any = None
    strict: bool = True
    validate: bool = True
    is_utc: bool = False

    # option names accepted from host markup
    ALIASES = {"isUtc": "is_utc"}

    @classmethod
    def from_settings(cls, settings: PickerSettings | None = None) -> "PickerConfig":
        """Seed a config with package-wide defaults."""
        settings = settings or current_settings()
        return cls(
            strict=settings.strict,
            validate=settings.validate,
            is_utc=settings.is_utc,
        )

    def merge(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> "PickerConfig":
        """Return a new config with recognized keys from ``options`` applied."""
        known = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for key, value in {**dict(options or {}), **overrides}.items():
            name = self.ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown picker option %r", key)
                continue
            if name in ("strict", "validate", "is_utc"):
                value = bool(value)
            changes[name] = value
        if not changes:
            return self
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


__all__ = ["PickerConfig"]


# The End
