from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class FractionError(ValueError):
    """Raised when a value outside ``[0, 1]`` is used as a fraction."""


@dataclass(frozen=True)
class Fraction:
    """Float validated to lie in the closed interval ``[0, 1]``."""

    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        # also rejects NaN
        if not 0.0 <= value <= 1.0:
            raise FractionError("Fraction must be between 0 and 1")
        object.__setattr__(self, "value", value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def as_fraction(value: Union[Fraction, float]) -> Fraction:
    if isinstance(value, Fraction):
        return value
    return Fraction(value)


__all__ = ["Fraction", "FractionError", "as_fraction"]
