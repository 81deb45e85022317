# -*- coding: utf-8 -*-
"""
control

A form control exposing the slots a picker widget plugs into.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

Formatter = Callable[[Any], Any]
Parser = Callable[[Any], Any]
Predicate = Callable[[Any, Any], bool]


class FormControl:
    """Backing model value, live view value and validation state of one field.

    * ``formatters`` turn a model value into a view value and run last to first;
    * ``parsers`` turn a view value into a model value and run first to last,
      stopping at the first ``None``;
    * ``validators`` map a rule name to a ``(model, view) -> bool`` predicate;
    * ``render`` is called after the model value changes programmatically;
    * ``view_change_listeners`` are called after a view change reaches the model.
    """

    def __init__(self, name: str = "", *, required: bool = False, model_value: Any = None) -> None:
        self.name = name
        self.required = required
        self.model_value = model_value
        self.view_value: Any = None
        self.formatters: List[Formatter] = []
        self.parsers: List[Parser] = []
        self.validators: Dict[str, Predicate] = {}
        self.view_change_listeners: List[Callable[[], None]] = []
        self.render: Callable[[], None] | None = None
        self.validity: Dict[str, bool] = {}
        self.pristine = True
        self.touched = False
        self._dirty_handler: Callable[[], None] = self.set_dirty
        self.logger = logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"FormControl({self.name!r}, model_value={self.model_value!r})"

    @property
    def dirty(self) -> bool:
        return not self.pristine

    @property
    def valid(self) -> bool:
        return all(self.validity.values())

    @property
    def errors(self) -> Dict[str, bool]:
        """Names of failing rules, mapped to ``True``."""
        return {name: True for name, passed in self.validity.items() if not passed}

    # === Interaction state ===
    def set_dirty(self) -> None:
        self.pristine = False

    def set_pristine(self) -> None:
        self.pristine = True

    def set_touched(self) -> None:
        self.touched = True

    def set_untouched(self) -> None:
        self.touched = False

    def intercept_dirty(self, handler: Callable[[], None]) -> Callable[[], None]:
        """Route dirty requests from view changes through ``handler``.

        Returns the handler previously installed.
        """
        previous = self._dirty_handler
        self._dirty_handler = handler
        return previous

    # === Value flow ===
    def set_model_value(self, value: Any) -> None:
        """Assign the model value programmatically and refresh the view."""
        self.model_value = value
        view = value
        for formatter in reversed(self.formatters):
            view = formatter(view)
        self.view_value = view
        self.validate()
        if self.render is not None:
            self.render()

    def set_view_value(self, view: Any) -> None:
        """Commit a view value coming from the widget."""
        self.view_value = view
        if self.pristine:
            self._dirty_handler()
        model = view
        for parser in self.parsers:
            model = parser(model)
            if model is None:
                break
        self.model_value = model
        self.validate()
        for listener in list(self.view_change_listeners):
            listener()

    def validate(self) -> Dict[str, bool]:
        """Re-run every registered predicate against the current values."""
        self.validity = {
            name: bool(predicate(self.model_value, self.view_value))
            for name, predicate in self.validators.items()
        }
        if not self.valid:
            self.logger.debug("Control %r failed %s", self.name, sorted(self.errors))
        return dict(self.validity)


__all__ = ["FormControl"]


# The End
