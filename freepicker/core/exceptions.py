# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the picker core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class PickerError(Exception):
    """Base class for picker-specific exceptions."""


class FormatError(PickerError, ValueError):
    """Raised when a string does not match a canonical format."""

    def __init__(self, value: object, fmt: str) -> None:
        super().__init__(f"{value!r} does not match {fmt!r}")
        self.value = value
        self.fmt = fmt


class WidgetNotFound(PickerError):
    """Raised when a widget key is not registered."""


class ControlAttachError(PickerError):
    """Raised when a widget or control is attached more than once."""


# The End
