from superboids.flock.boid import (
    Boid,
    BoidAppearance,
    random_color,
    spawn_at,
    spawn_random,
)
from superboids.flock.neighbors import find_all_neighbors, neighbors
from superboids.flock.settings import (
    BoidSettings,
    BoundaryMode,
    NeighborSearch,
    adjust_weight,
)
from superboids.flock.steering import alignment, cohesion, separation
from superboids.flock.tick import step_boid, tick

__all__ = [
    "Boid",
    "BoidAppearance",
    "BoidSettings",
    "BoundaryMode",
    "NeighborSearch",
    "adjust_weight",
    "alignment",
    "cohesion",
    "find_all_neighbors",
    "neighbors",
    "random_color",
    "separation",
    "spawn_at",
    "spawn_random",
    "step_boid",
    "tick",
]
