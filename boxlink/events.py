"""Ordered, synchronous listener registries used by boxes and connectors."""

from __future__ import annotations

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class ListenerList:
    """Callbacks invoked in registration order, before ``notify`` returns.

    Dispatch iterates over a snapshot, so a listener that registers or removes
    listeners only affects later notifications.  There is no reentrancy guard:
    a listener that triggers another notification recurses.
    """

    def __init__(self, name: str = "listeners") -> None:
        self._name = name
        self._listeners: List[Listener] = []

    def add(self, listener: Listener) -> None:
        if listener in self._listeners:
            return
        self._listeners.append(listener)

    def remove(self, listener: Listener) -> None:
        if listener not in self._listeners:
            logger.debug("%s: ignoring removal of unknown listener %r", self._name, listener)
            return
        self._listeners.remove(listener)

    def notify(self, *payload: Any) -> None:
        snapshot = tuple(self._listeners)
        if snapshot and logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: notifying %d listener(s)", self._name, len(snapshot))
        for listener in snapshot:
            listener(*payload)

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners


__all__ = ["Listener", "ListenerList"]
