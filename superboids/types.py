# superboids/types.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, NewType, Tuple, TypeAlias

EntityId = NewType("EntityId", int)
SystemId = NewType("SystemId", str)

InputAction = str

Scalar: TypeAlias = float

Color = Tuple[float, float, float]  # r, g, b in 0-1

Cell = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if scalar == 0:
            raise ValueError(scalar)
        return Vector2(self.x / scalar, self.y / scalar)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)
