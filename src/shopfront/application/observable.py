"""Listener list shared by every store.

Stores call ``_notify()`` after each mutation; the presentation layer
subscribes once and re-renders from the store's derived state.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

Listener = Callable[["Observable"], None]


class Observable:

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        # One failing listener must not stop the others from rendering.
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception(
                    "Listener %r failed for %s", listener, type(self).__name__
                )
