from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .fraction import Fraction
from .vector import Vector2D


@dataclass(frozen=True)
class LineSegment:
    """Directed segment; fraction 0 is ``start`` and fraction 1 is ``end``."""

    start: Vector2D
    end: Vector2D

    def point_at_fraction(self, fraction: Union[Fraction, float]) -> Vector2D:
        return self.end.minus(self.start).times(float(fraction)).plus(self.start)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def midpoint(self) -> Vector2D:
        return self.point_at_fraction(0.5)


__all__ = ["LineSegment"]
