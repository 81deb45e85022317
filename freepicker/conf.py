# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the freepicker package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, tzinfo
from threading import RLock
from typing import Callable, Mapping

from dateutil import tz


@dataclass
class PickerSettings:
    """Container for package-wide picker defaults derived from environment variables."""

    strict: bool = True
    validate: bool = True
    is_utc: bool = False
    year_span: int = 200
    local_timezone: str | None = None

    def __post_init__(self) -> None:
        """Normalize the timezone name and clamp the year span."""
        if self.local_timezone is not None:
            self.local_timezone = self.local_timezone.strip() or None
        self.year_span = min(max(self.year_span, 0), MAXYEAR - MINYEAR)

    def get_tzinfo(self) -> tzinfo:
        """Return the configured local zone or the system zone."""
        if self.local_timezone:
            zone = tz.gettz(self.local_timezone)
            if zone is not None:
                return zone
        return tz.tzlocal()

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FREEPICKER_",
    ) -> "PickerSettings":
        """Build a settings instance from environment variables."""
        source = env or os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            strict=cls._to_bool(data.get("STRICT"), default=True),
            validate=cls._to_bool(data.get("VALIDATE"), default=True),
            is_utc=cls._to_bool(data.get("IS_UTC"), default=False),
            year_span=cls._to_int(data.get("YEAR_SPAN"), default=200),
            local_timezone=data.get("TIMEZONE") or None,
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default


class SettingsManager:
    """Central storage for the active ``PickerSettings`` instance."""

    def __init__(self, initial: PickerSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[PickerSettings], None]] = []

    def configure(self, settings: PickerSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> PickerSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = PickerSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access reloads the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[PickerSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[PickerSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: PickerSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> PickerSettings:
    """Return the active settings instance used by picker components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop configured settings; used by tests."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[PickerSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[PickerSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "PickerSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
