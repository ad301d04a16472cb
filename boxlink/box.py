"""Axis-aligned boxes: derived geometry, movement and overlap separation."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .anchor import Anchor, EdgeFractionAnchor, NearestOfSetAnchor
from .connector import StraightConnector
from .edge import Edge
from .events import Listener, ListenerList
from .fraction import Fraction
from .line import Line
from .segment import LineSegment
from .vector import Vector2D

logger = logging.getLogger(__name__)

# Enumeration order of all_anchors(): fraction outer, edge inner.
ANCHOR_FRACTIONS = (0.2, 0.5, 0.8)
ANCHOR_EDGES = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)


class Box:
    """Rectangle with a mutable top-left ``position`` and a fixed size.

    Every effective change of position synchronously calls the registered
    position listeners with ``(old_position, new_position)``.
    """

    def __init__(self, width: float, height: float, position: Vector2D) -> None:
        if not width > 0 or not height > 0:
            raise ValueError(f"box size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        self._position = position
        self._position_listeners = ListenerList("box position")

    def __repr__(self) -> str:
        return f"Box(width={self.width!r}, height={self.height!r}, position={self._position!r})"

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def position(self) -> Vector2D:
        return self._position

    @property
    def size(self) -> Vector2D:
        return Vector2D(self.width, self.height)

    @property
    def top(self) -> float:
        return self._position.y

    @property
    def bottom(self) -> float:
        return self._position.y + self.height

    @property
    def left(self) -> float:
        return self._position.x

    @property
    def right(self) -> float:
        return self._position.x + self.width

    @property
    def top_left(self) -> Vector2D:
        return self._position

    @property
    def top_center(self) -> Vector2D:
        return Vector2D(self._position.x + self.width / 2, self._position.y)

    @property
    def top_right(self) -> Vector2D:
        return Vector2D(self._position.x + self.width, self._position.y)

    @property
    def bottom_left(self) -> Vector2D:
        return Vector2D(self._position.x, self._position.y + self.height)

    @property
    def bottom_center(self) -> Vector2D:
        return Vector2D(self._position.x + self.width / 2, self._position.y + self.height)

    @property
    def bottom_right(self) -> Vector2D:
        return Vector2D(self._position.x + self.width, self._position.y + self.height)

    @property
    def left_center(self) -> Vector2D:
        return Vector2D(self._position.x, self._position.y + self.height / 2)

    @property
    def right_center(self) -> Vector2D:
        return Vector2D(self._position.x + self.width, self._position.y + self.height / 2)

    @property
    def center(self) -> Vector2D:
        return Vector2D(self._position.x + self.width / 2, self._position.y + self.height / 2)

    def center_at_edge(self, edge: Union[Edge, str]) -> Vector2D:
        edge = Edge(edge)
        if edge is Edge.TOP:
            return self.top_center
        if edge is Edge.BOTTOM:
            return self.bottom_center
        if edge is Edge.LEFT:
            return self.left_center
        return self.right_center

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def edge_heading(self, point: Vector2D) -> Edge:
        """Classify ``point`` by the side of the box it lies beyond.

        The two diagonals split the plane into four wedges.  "Below" is the
        strict ``line.y_for(x) < y`` test, so a point exactly on a diagonal
        counts as not below it; the center itself maps to ``TOP``.
        """

        first_diagonal = Line.between(self.top_left, self.bottom_right)
        second_diagonal = Line.between(self.bottom_left, self.top_right)
        below_first = first_diagonal.y_for(point.x) < point.y
        below_second = second_diagonal.y_for(point.x) < point.y

        if below_first and below_second:
            return Edge.BOTTOM
        if below_first:
            return Edge.LEFT
        if below_second:
            return Edge.RIGHT
        return Edge.TOP

    def edge_line(self, edge: Union[Edge, str]) -> Line:
        edge = Edge(edge)
        if edge is Edge.TOP:
            return Line.horizontal(self.top)
        if edge is Edge.BOTTOM:
            return Line.horizontal(self.bottom)
        if edge is Edge.LEFT:
            return Line.vertical(self.left)
        return Line.vertical(self.right)

    def segment_for_edge(self, edge: Union[Edge, str]) -> LineSegment:
        """Edge segment, wound clockwise: fraction 0 is where the edge starts."""

        edge = Edge(edge)
        if edge is Edge.TOP:
            return LineSegment(self.top_left, self.top_right)
        if edge is Edge.RIGHT:
            return LineSegment(self.top_right, self.bottom_right)
        if edge is Edge.BOTTOM:
            return LineSegment(self.bottom_right, self.bottom_left)
        return LineSegment(self.bottom_left, self.top_left)

    def point_at_edge_fraction(self, edge: Union[Edge, str], fraction: Union[Fraction, float]) -> Vector2D:
        return self.segment_for_edge(edge).point_at_fraction(fraction)

    # ------------------------------------------------------------------
    # Anchors
    # ------------------------------------------------------------------

    def top_edge_anchor_at_fraction(self, fraction: Union[Fraction, float]) -> EdgeFractionAnchor:
        return Anchor.point_at_edge(Edge.TOP, fraction)

    def bottom_edge_anchor_at_fraction(self, fraction: Union[Fraction, float]) -> EdgeFractionAnchor:
        return Anchor.point_at_edge(Edge.BOTTOM, fraction)

    def left_edge_anchor_at_fraction(self, fraction: Union[Fraction, float]) -> EdgeFractionAnchor:
        return Anchor.point_at_edge(Edge.LEFT, fraction)

    def right_edge_anchor_at_fraction(self, fraction: Union[Fraction, float]) -> EdgeFractionAnchor:
        return Anchor.point_at_edge(Edge.RIGHT, fraction)

    def all_anchors(self) -> List[EdgeFractionAnchor]:
        return [
            Anchor.point_at_edge(edge, fraction)
            for fraction in ANCHOR_FRACTIONS
            for edge in ANCHOR_EDGES
        ]

    def nearest_fixed_anchor(self) -> NearestOfSetAnchor:
        return Anchor.nearest_from(self.all_anchors())

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def add_position_listener(self, listener: Listener) -> None:
        self._position_listeners.add(listener)

    def remove_position_listener(self, listener: Listener) -> None:
        self._position_listeners.remove(listener)

    def move_by(self, delta: Vector2D) -> None:
        self.move_to(self._position.plus(delta))

    def move_to(self, new_position: Vector2D) -> None:
        old_position = self._position
        if old_position == new_position:
            return
        self._position = new_position
        logger.debug("box moved from %s to %s", old_position, new_position)
        self._position_listeners.notify(old_position, new_position)

    # ------------------------------------------------------------------
    # Overlap
    # ------------------------------------------------------------------

    def hit_delta(self, other: "Box") -> Optional[Vector2D]:
        """Displacement for ``self`` that separates it from ``other``.

        Returns ``None`` when the boxes do not overlap, touching edges
        included.  The push goes along the axis of smaller overlap (the Y axis
        on ties), away from ``other``'s center.  The result is meant for
        ``self`` only; ``other.hit_delta(self)`` is its exact opposite unless
        both centers coincide on the separation axis, in which case both boxes
        are pushed the same way.
        """

        overlap_x = min(self.right - other.left, other.right - self.left)
        overlap_y = min(self.bottom - other.top, other.bottom - self.top)

        if overlap_x <= 0 or overlap_y <= 0:
            return None

        delta_x = 0.0
        delta_y = 0.0
        if overlap_x < overlap_y:
            if self.center.x < other.center.x:
                delta_x = -overlap_x
            else:
                delta_x = overlap_x
        else:
            if self.center.y < other.center.y:
                delta_y = -overlap_y
            else:
                delta_y = overlap_y

        return Vector2D(delta_x, delta_y)

    def overlaps(self, other: "Box") -> bool:
        return self.hit_delta(other) is not None

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    def straight_connector_to(
        self, other: "Box", start_anchor: Anchor, end_anchor: Anchor
    ) -> StraightConnector:
        return StraightConnector(self, start_anchor, other, end_anchor)


__all__ = ["Box", "ANCHOR_FRACTIONS", "ANCHOR_EDGES"]
