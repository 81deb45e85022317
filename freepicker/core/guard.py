# -*- coding: utf-8 -*-
"""
guard

Hold back the host's dirty flag until the user actually edits something.

Populating the view from an incoming model value produces the same view
change notification as a user edit. The guard swallows dirty requests
until the first notification has gone through, then forwards them.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable


logger = logging.getLogger(__name__)


class GuardState(str, Enum):
    SUPPRESSED = "suppressed"
    ACTIVE = "active"


class InitGuard:
    """One-way ``SUPPRESSED -> ACTIVE`` switch in front of a dirty callback."""

    def __init__(self, set_dirty: Callable[[], None]) -> None:
        self._set_dirty = set_dirty
        self._state = GuardState.SUPPRESSED

    @property
    def state(self) -> GuardState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is GuardState.ACTIVE

    def mark_dirty(self) -> None:
        """Forward to the host's dirty callback once the guard is active."""
        if not self.active:
            logger.debug("Dirty request swallowed during initialization")
            return
        self._set_dirty()

    def view_changed(self) -> None:
        """Record that a view change has been committed."""
        if not self.active:
            self._state = GuardState.ACTIVE


__all__ = ["GuardState", "InitGuard"]


# The End
