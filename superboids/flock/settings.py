"""
Flocking constants and the runtime-tunable BoidSettings resource.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

# Perception
PERCEPTION_RADIUS: float = 50.0

# Per-boid kinematic limits (defaults for the Boid component fields)
MAX_FORCE: float = 0.2
MIN_VELOCITY: float = 1.0
MAX_VELOCITY: float = 3.0

# Soft turn containment. The turn factor sits far above MAX_FORCE so the
# force clamp, not the raw constant, sets the turn rate.
BORDER_MARGIN: float = 50.0
BORDER_TURN_FACTOR: float = 100.0

# Weights
DEFAULT_ALIGNMENT: float = 1.0
DEFAULT_COHESION: float = 0.05
DEFAULT_SEPARATION: float = 1.0
WEIGHT_STEP: float = 0.05

# Spawning
SPAWN_VELOCITY_RANGE: Tuple[float, float] = (-0.5, 0.5)

WEIGHT_FIELDS: Tuple[str, ...] = ("alignment", "cohesion", "separation")


class BoundaryMode(Enum):
    WRAP = "wrap"  # Teleport to the opposite edge
    TURN = "turn"  # Steer away from edges within the border margin


class NeighborSearch(Enum):
    BRUTE_FORCE = "brute"
    GRID = "grid"
    MATRIX = "matrix"


@dataclass(frozen=True)
class BoidSettings:
    alignment: float = DEFAULT_ALIGNMENT
    cohesion: float = DEFAULT_COHESION
    separation: float = DEFAULT_SEPARATION

    perception_radius: float = PERCEPTION_RADIUS
    boundary: BoundaryMode = BoundaryMode.WRAP
    border_margin: float = BORDER_MARGIN
    border_turn_factor: float = BORDER_TURN_FACTOR
    neighbor_search: NeighborSearch = NeighborSearch.MATRIX

    def __post_init__(self):
        if not self.perception_radius > 0.0:
            raise ValueError(
                f"perception_radius must be positive, got {self.perception_radius}"
            )
        for name in WEIGHT_FIELDS:
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} weight must be finite")

    def weight(self, field: str) -> float:
        if field not in WEIGHT_FIELDS:
            raise KeyError(f"Unknown weight: {field!r}")
        return getattr(self, field)


def adjust_weight(settings: BoidSettings, field: str, delta: float) -> BoidSettings:
    """
    Returns settings with one weight moved by delta.

    Weights are not clamped: a negative weight inverts its behaviour
    (negative separation makes boids clump).
    """
    current = settings.weight(field)
    return replace(settings, **{field: current + delta})
