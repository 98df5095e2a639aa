from __future__ import annotations

import random
from dataclasses import dataclass

from superboids.types import Vector2


@dataclass(frozen=True)
class SimulationTime:
    # Total simulated time
    elapsed_seconds: float = 0.0

    # Number of fixed steps run so far
    step_index: int = 0


@dataclass(frozen=True, slots=True)
class WorldBounds:
    """
    Axis aligned rectangle the flock lives in, y up.
    Owned by the presentation layer and refreshed every frame.
    """

    left: float
    right: float
    bottom: float
    top: float

    def __post_init__(self):
        if self.right < self.left:
            raise ValueError(
                f"Invalid bounds: right ({self.right}) < left ({self.left})"
            )
        if self.top < self.bottom:
            raise ValueError(
                f"Invalid bounds: top ({self.top}) < bottom ({self.bottom})"
            )

    @staticmethod
    def centered(width: float, height: float) -> WorldBounds:
        """Bounds of a width x height viewport centered on the origin."""
        return WorldBounds(
            left=-width / 2.0,
            right=width / 2.0,
            bottom=-height / 2.0,
            top=height / 2.0,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def contains(self, point: Vector2) -> bool:
        return (
            self.left <= point.x <= self.right
            and self.bottom <= point.y <= self.top
        )

    def from_normalized(self, point: Vector2) -> Vector2:
        """Maps a point in [0, 1] x [0, 1] (y up) into world coordinates."""
        return Vector2(
            self.left + point.x * self.width,
            self.bottom + point.y * self.height,
        )


@dataclass(frozen=True)
class RandomSource:
    """Shared RNG so a seeded run spawns the same flock every time."""

    rng: random.Random
