"""Infinite straight lines and their intersection algebra.

A line is one of three closed variants: :class:`ObliqueLine`,
:class:`HorizontalLine` and :class:`VerticalLine`.  Coordinate queries live on
the variants; intersection is resolved by :func:`intersect`, a single case
analysis over the pair of variants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import Vector2D


class LineError(ValueError):
    """Base class for precondition violations on lines."""


class DegenerateLineError(LineError):
    """Raised when a line is requested through a single point."""


class UndefinedCoordinateError(LineError):
    """Raised when a coordinate query has no unique answer for a line."""


class ParallelLinesError(LineError):
    """Raised when intersecting two parallel lines."""


class Line:
    """Common interface and factories for the line variants.

    Never instantiated directly: every line is one of the three variants
    below, and each of them overrides ``slope``, ``y_for`` and ``x_for``.
    """

    @staticmethod
    def between(p1: Vector2D, p2: Vector2D) -> "Line":
        if p1 == p2:
            raise DegenerateLineError("Cannot create line with single point")
        if p1.x == p2.x:
            return VerticalLine(p1.x)
        if p1.y == p2.y:
            return HorizontalLine(p1.y)
        return ObliqueLine(p1, p2.x - p1.x, p2.y - p1.y)

    @staticmethod
    def horizontal(y: float) -> "HorizontalLine":
        return HorizontalLine(y)

    @staticmethod
    def vertical(x: float) -> "VerticalLine":
        return VerticalLine(x)

    @property
    def slope(self) -> float:
        raise NotImplementedError

    def y_for(self, x: float) -> float:
        raise NotImplementedError

    def x_for(self, y: float) -> float:
        raise NotImplementedError

    def is_parallel_to(self, other: "Line") -> bool:
        return self.slope == other.slope

    def intersection_with(self, other: "Line") -> Vector2D:
        return intersect(self, other)


@dataclass(frozen=True)
class ObliqueLine(Line):
    """Line through ``point`` with direction ``(dx, dy)``, neither zero."""

    point: Vector2D
    dx: float
    dy: float

    @property
    def slope(self) -> float:
        return self.dy / self.dx

    def y_for(self, x: float) -> float:
        return self.dy / self.dx * (x - self.point.x) + self.point.y

    def x_for(self, y: float) -> float:
        return (y - self.point.y) * self.dx / self.dy + self.point.x


@dataclass(frozen=True)
class HorizontalLine(Line):
    y: float

    @property
    def slope(self) -> float:
        return 0.0

    def y_for(self, x: float) -> float:
        return self.y

    def x_for(self, y: float) -> float:
        raise UndefinedCoordinateError("Cannot get x coordinate from horizontal line")


@dataclass(frozen=True)
class VerticalLine(Line):
    x: float

    @property
    def slope(self) -> float:
        # every vertical line shares this slope, so two verticals are parallel
        return math.inf

    def y_for(self, x: float) -> float:
        raise UndefinedCoordinateError("Cannot get y coordinate from vertical line")

    def x_for(self, y: float) -> float:
        return self.x


def _oblique_intersection(a: ObliqueLine, b: ObliqueLine) -> Vector2D:
    slope_a = a.slope
    slope_b = b.slope
    x = (slope_a * a.point.x - slope_b * b.point.x + b.point.y - a.point.y) / (slope_a - slope_b)
    return Vector2D(x, a.y_for(x))


def intersect(a: Line, b: Line) -> Vector2D:
    """Return the single point shared by two non-parallel lines."""

    if a.is_parallel_to(b):
        raise ParallelLinesError("Cannot intersect parallel lines")

    if isinstance(a, HorizontalLine):
        return Vector2D(b.x_for(a.y), a.y)
    if isinstance(b, HorizontalLine):
        return Vector2D(a.x_for(b.y), b.y)
    if isinstance(a, VerticalLine):
        return Vector2D(a.x, b.y_for(a.x))
    if isinstance(b, VerticalLine):
        return Vector2D(b.x, a.y_for(b.x))
    if isinstance(a, ObliqueLine) and isinstance(b, ObliqueLine):
        return _oblique_intersection(a, b)
    raise TypeError(f"unsupported line pair {type(a).__name__}, {type(b).__name__}")


__all__ = [
    "Line",
    "ObliqueLine",
    "HorizontalLine",
    "VerticalLine",
    "LineError",
    "DegenerateLineError",
    "UndefinedCoordinateError",
    "ParallelLinesError",
    "intersect",
]
