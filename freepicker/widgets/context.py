# -*- coding: utf-8 -*-
"""
context

Widget context helper.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..core.clock import Clock


@dataclass(frozen=True)
class WidgetContext:
    """Everything a widget needs to know about itself and its environment."""
    name: str                                          # field name in the form
    clock: Clock = field(default_factory=Clock)        # local zone and reference instant
    readonly: bool = False                             # field read-only?

    def child(self, suffix: str) -> "WidgetContext":
        """Context for a sub-widget nested under this one."""
        return WidgetContext(
            name=f"{self.name}.{suffix}" if self.name else suffix,
            clock=self.clock,
            readonly=self.readonly,
        )

# The End
