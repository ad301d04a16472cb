"""Diagram orchestration: owns boxes and connectors and keeps boxes apart.

Whenever a box moves, every other box that now overlaps it is pushed away by
its own :meth:`~boxlink.box.Box.hit_delta`.  Pushing a box moves it, so the
response cascades through the same notification path; nested responses are
capped by :attr:`DiagramConfig.max_cascade_depth`.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from .anchor import Anchor
from .box import Box
from .config import DiagramConfig, get_diagram_config
from .connector import PositionListener, StraightConnector
from .logging_utils import apply_debug_logging
from .vector import Vector2D

logger = logging.getLogger(__name__)


class Diagram:
    def __init__(self, config: Optional[DiagramConfig] = None) -> None:
        self.config = config if config is not None else get_diagram_config()
        self._boxes: List[Box] = []
        self._connectors: List[StraightConnector] = []
        self._subscriptions: Dict[Box, PositionListener] = {}
        self._cascade_depth = 0

    @property
    def boxes(self) -> Tuple[Box, ...]:
        return tuple(self._boxes)

    @property
    def connectors(self) -> Tuple[StraightConnector, ...]:
        return tuple(self._connectors)

    def add_box(
        self,
        position: Vector2D,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> Box:
        box = Box(
            self.config.default_box_width if width is None else width,
            self.config.default_box_height if height is None else height,
            position,
        )

        def on_moved(old_position: Vector2D, new_position: Vector2D) -> None:
            self._box_moved(box)

        box.add_position_listener(on_moved)
        self._subscriptions[box] = on_moved
        self._boxes.append(box)
        logger.debug("added box #%d: %r", len(self._boxes) - 1, box)
        return box

    def remove_box(self, box: Box) -> None:
        if box not in self._subscriptions:
            raise ValueError(f"{box!r} is not part of this diagram")
        box.remove_position_listener(self._subscriptions.pop(box))
        self._boxes.remove(box)
        for connector in [c for c in self._connectors if box in (c.start_box, c.end_box)]:
            self.remove_connector(connector)

    def connect(
        self,
        start: Box,
        end: Box,
        start_anchor: Optional[Anchor] = None,
        end_anchor: Optional[Anchor] = None,
    ) -> StraightConnector:
        connector = start.straight_connector_to(
            end,
            start.nearest_fixed_anchor() if start_anchor is None else start_anchor,
            end.nearest_fixed_anchor() if end_anchor is None else end_anchor,
        )
        self._connectors.append(connector)
        return connector

    def remove_connector(self, connector: StraightConnector) -> None:
        self._connectors.remove(connector)
        connector.disconnect()

    def drag(self, box: Box, delta: Vector2D) -> None:
        """Apply a pointer-drag displacement to ``box``."""

        box.move_by(delta)

    def bounds(self) -> Optional[Tuple[Vector2D, Vector2D]]:
        """Return the top-left and bottom-right corners enclosing every box."""

        if not self._boxes:
            return None
        extents = np.array([[b.left, b.top, b.right, b.bottom] for b in self._boxes], dtype=float)
        lower = extents[:, :2].min(axis=0)
        upper = extents[:, 2:].max(axis=0)
        return Vector2D(lower[0], lower[1]), Vector2D(upper[0], upper[1])

    def _box_moved(self, moved: Box) -> None:
        if not self.config.resolve_collisions:
            return
        if self._cascade_depth >= self.config.max_cascade_depth:
            logger.warning(
                "collision cascade reached depth %d; overlaps with %r left unresolved",
                self._cascade_depth,
                moved,
            )
            return

        self._cascade_depth += 1
        try:
            for box in list(self._boxes):
                if box is moved:
                    continue
                delta = box.hit_delta(moved)
                if delta is None:
                    continue
                logger.debug("pushing %r by %s away from %r", box, delta, moved)
                box.move_by(delta)
        finally:
            self._cascade_depth -= 1


apply_debug_logging(globals(), logger=logger)


__all__ = ["Diagram"]
