"""Immutable 2-D vectors used for positions, sizes and displacements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Tuple


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


@dataclass(frozen=True)
class Vector2D:
    """Value type with exact, coordinate-wise equality (no epsilon)."""

    x: float
    y: float

    ZERO: ClassVar["Vector2D"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, factor: float) -> "Vector2D":
        if isinstance(factor, Vector2D):
            return NotImplemented
        return self.times(factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2D":
        return self.times(-1)

    def plus(self, other: "Vector2D") -> "Vector2D":
        return self._zip_with(other, lambda a, b: a + b)

    def minus(self, other: "Vector2D") -> "Vector2D":
        return self._zip_with(other, lambda a, b: a - b)

    def times(self, factor: float) -> "Vector2D":
        return self.map(lambda coordinate: coordinate * factor)

    def delta_to_reach(self, other: "Vector2D") -> "Vector2D":
        """Return the displacement that takes ``self`` onto ``other``."""

        return other.minus(self)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def min(self, other: "Vector2D") -> "Vector2D":
        return self._zip_with(other, min)

    def max(self, other: "Vector2D") -> "Vector2D":
        return self._zip_with(other, max)

    def map(self, transformation: Callable[[float], float]) -> "Vector2D":
        return Vector2D(transformation(self.x), transformation(self.y))

    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def normalized(self) -> "Vector2D":
        """Scale to unit length.

        The zero vector has no direction; dividing by its magnitude raises
        ``ZeroDivisionError`` and is left to the caller to avoid.
        """

        magnitude = self.magnitude()
        return self.map(lambda coordinate: coordinate / magnitude)

    def distance_to(self, other: "Vector2D") -> float:
        return self.minus(other).magnitude()

    def round(self) -> "Vector2D":
        """Round both coordinates to the nearest integer, halves going up."""

        return self.map(_round_half_up)

    def sign(self) -> "Vector2D":
        return self.map(_sign)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def _zip_with(
        self, other: "Vector2D", combiner: Callable[[float, float], float]
    ) -> "Vector2D":
        return Vector2D(combiner(self.x, other.x), combiner(self.y, other.y))

    def __repr__(self) -> str:
        return f"Vector2D({self.x!r}, {self.y!r})"


Vector2D.ZERO = Vector2D(0.0, 0.0)
ZERO = Vector2D.ZERO


def vector(x: float, y: float) -> Vector2D:
    return Vector2D(x, y)


__all__ = ["Vector2D", "ZERO", "vector"]
