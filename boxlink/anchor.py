"""Strategies that choose where a connector touches a box.

Anchors hold no reference to a box; they are resolved against a box and a
target point at call time by :func:`point_from_to` and
:func:`reference_point_for`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Tuple, Union

from .edge import Edge
from .fraction import Fraction, as_fraction
from .line import Line
from .vector import Vector2D

if TYPE_CHECKING:  # pragma: no cover
    from .box import Box

logger = logging.getLogger(__name__)


class Anchor:
    """Base of the anchor variants, with the public factories."""

    @staticmethod
    def nearest() -> "NearestAnchor":
        return NearestAnchor()

    @staticmethod
    def point_at_edge(edge: Union[Edge, str], fraction: Union[Fraction, float]) -> "EdgeFractionAnchor":
        return EdgeFractionAnchor(Edge(edge), as_fraction(fraction))

    @staticmethod
    def nearest_from(anchors: Iterable["Anchor"]) -> "NearestOfSetAnchor":
        return NearestOfSetAnchor(tuple(anchors))

    def reference_point_for(self, box: "Box") -> Vector2D:
        return reference_point_for(self, box)

    def point_from_to(self, box: "Box", target_point: Vector2D) -> Vector2D:
        return point_from_to(self, box, target_point)


@dataclass(frozen=True)
class NearestAnchor(Anchor):
    """Where the line from the box center to the target leaves the box."""


@dataclass(frozen=True)
class EdgeFractionAnchor(Anchor):
    """Fixed point along one edge, following the box's clockwise winding."""

    edge: Edge
    fraction: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "edge", Edge(self.edge))
        if not isinstance(self.fraction, Fraction):
            object.__setattr__(self, "fraction", as_fraction(self.fraction))


@dataclass(frozen=True)
class NearestOfSetAnchor(Anchor):
    """Candidate closest to what :class:`NearestAnchor` would pick.

    Ties resolve to the earliest candidate in ``anchors``.
    """

    anchors: Tuple[Anchor, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "anchors", tuple(self.anchors))
        if not self.anchors:
            raise ValueError("nearest_from requires at least one anchor")


def reference_point_for(anchor: Anchor, box: "Box") -> Vector2D:
    """Point other anchors aim at when connecting to ``box`` through ``anchor``."""

    if isinstance(anchor, (NearestAnchor, NearestOfSetAnchor)):
        return box.center
    if isinstance(anchor, EdgeFractionAnchor):
        return box.point_at_edge_fraction(anchor.edge, anchor.fraction)
    raise TypeError(f"unsupported anchor {anchor!r}")


def _nearest_point(box: "Box", target_point: Vector2D) -> Vector2D:
    line_between_centers = Line.between(box.center, target_point)
    edge = box.edge_heading(target_point)
    return box.edge_line(edge).intersection_with(line_between_centers)


def point_from_to(anchor: Anchor, box: "Box", target_point: Vector2D) -> Vector2D:
    """Resolve ``anchor`` on ``box`` for a connection heading to ``target_point``."""

    if isinstance(anchor, NearestAnchor):
        return _nearest_point(box, target_point)
    if isinstance(anchor, EdgeFractionAnchor):
        return box.point_at_edge_fraction(anchor.edge, anchor.fraction)
    if isinstance(anchor, NearestOfSetAnchor):
        reference = _nearest_point(box, target_point)
        candidates = [point_from_to(candidate, box, target_point) for candidate in anchor.anchors]
        # min() keeps the first of equally distant candidates
        chosen = min(candidates, key=lambda point: point.distance_to(reference))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "nearest-of-set: picked %s among %d candidate(s) for reference %s",
                chosen,
                len(candidates),
                reference,
            )
        return chosen
    raise TypeError(f"unsupported anchor {anchor!r}")


__all__ = [
    "Anchor",
    "NearestAnchor",
    "EdgeFractionAnchor",
    "NearestOfSetAnchor",
    "point_from_to",
    "reference_point_for",
]
