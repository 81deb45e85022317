# -*- coding: utf-8 -*-
"""
__init__

Picker widgets and their registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# widgets/__init__.py
from __future__ import annotations

from .base import BaseWidget
from .context import WidgetContext
from .registry import registry

# Import built-in widgets so they register themselves:
from .date import DatePickerWidget  # noqa: F401
from .time import TimePickerWidget  # noqa: F401
from .datetime import DateTimePickerWidget  # noqa: F401

__all__ = [
    "BaseWidget",
    "WidgetContext",
    "registry",
    "DatePickerWidget",
    "TimePickerWidget",
    "DateTimePickerWidget",
]

# The End
