from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Callable

from .anchor import Anchor
from .events import Listener, ListenerList
from .vector import Vector2D

if TYPE_CHECKING:  # pragma: no cover
    from .box import Box

logger = logging.getLogger(__name__)

PositionListener = Callable[[Vector2D, Vector2D], None]


def _relay_to(connector: "StraightConnector") -> PositionListener:
    # The box keeps this relay alive; it must not keep the connector alive.
    ref = weakref.ref(connector)

    def relay(old_position: Vector2D, new_position: Vector2D) -> None:
        target = ref()
        if target is not None:
            target._box_moved()

    return relay


def _unsubscribe(start_box: "Box", end_box: "Box", relay: PositionListener) -> None:
    start_box.remove_position_listener(relay)
    end_box.remove_position_listener(relay)


class StraightConnector:
    """Straight line between two boxes, each end placed by its own anchor.

    Endpoints are computed on every read.  Moving either box emits a change
    notification ``listener(connector)``.
    """

    def __init__(self, start_box: "Box", start_anchor: Anchor, end_box: "Box", end_anchor: Anchor) -> None:
        self._start_box = start_box
        self._start_anchor = start_anchor
        self._end_box = end_box
        self._end_anchor = end_anchor
        self._change_listeners = ListenerList("connector change")
        relay = _relay_to(self)

        end_box.add_position_listener(relay)
        start_box.add_position_listener(relay)
        # unsubscribes on disconnect() or when the connector is collected;
        # must not reference the connector itself
        self._detach = weakref.finalize(self, _unsubscribe, start_box, end_box, relay)

    def __repr__(self) -> str:
        return (
            f"StraightConnector(start={self._start_box!r} via {self._start_anchor!r}, "
            f"end={self._end_box!r} via {self._end_anchor!r})"
        )

    @property
    def start_box(self) -> "Box":
        return self._start_box

    @property
    def end_box(self) -> "Box":
        return self._end_box

    @property
    def start_anchor(self) -> Anchor:
        return self._start_anchor

    @property
    def end_anchor(self) -> Anchor:
        return self._end_anchor

    @property
    def start_point(self) -> Vector2D:
        target = self._end_anchor.reference_point_for(self._end_box)
        return self._start_anchor.point_from_to(self._start_box, target)

    @property
    def end_point(self) -> Vector2D:
        target = self._start_anchor.reference_point_for(self._start_box)
        return self._end_anchor.point_from_to(self._end_box, target)

    @property
    def connected(self) -> bool:
        return self._detach.alive

    def add_change_listener(self, listener: Listener) -> None:
        self._change_listeners.add(listener)

    def remove_change_listener(self, listener: Listener) -> None:
        self._change_listeners.remove(listener)

    def disconnect(self) -> None:
        """Stop following both boxes; endpoints stay readable."""

        # a finalizer runs at most once, so repeated calls are no-ops
        self._detach()

    def _box_moved(self) -> None:
        logger.debug("connector geometry changed: %r", self)
        self._change_listeners.notify(self)


__all__ = ["StraightConnector"]
