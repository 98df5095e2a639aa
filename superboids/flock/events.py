from dataclasses import dataclass
from typing import Optional

from superboids.types import Vector2


@dataclass(frozen=True)
class SpawnBoid:
    """Request a new boid. A missing position means anywhere in bounds."""

    position: Optional[Vector2] = None


@dataclass(frozen=True)
class AdjustWeight:
    field: str
    delta: float
