from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from superboids.flock.settings import (
    MAX_FORCE,
    MAX_VELOCITY,
    MIN_VELOCITY,
    SPAWN_VELOCITY_RANGE,
)
from superboids.resources.core import WorldBounds
from superboids.types import Color, Vector2

logger = logging.getLogger(__name__)

BOID_SIZE: Tuple[float, float] = (5.0, 5.0)

BOID_COLORS: Tuple[Color, ...] = (
    (0.4, 0.361, 0.329),
    (0.49, 0.682, 0.639),
    (0.573, 0.514, 0.455),
    (0.49, 0.682, 0.639),
    (0.537, 0.706, 0.51),
)


@dataclass(frozen=True)
class Boid:
    """
    Kinematic state of one flocking agent.

    acceleration only accumulates steering for the step in progress and
    is zero again once the step has been integrated.
    """

    position: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)
    acceleration: Vector2 = field(default_factory=Vector2.zero)
    max_force: float = MAX_FORCE
    min_velocity: float = MIN_VELOCITY
    max_velocity: float = MAX_VELOCITY


@dataclass(frozen=True)
class BoidAppearance:
    """Presentation-only data. Nothing in the flocking math reads it."""

    size: Tuple[float, float] = BOID_SIZE
    color: Color = BOID_COLORS[0]


def random_color(rng: Optional[random.Random] = None) -> Color:
    rng = rng or random
    return rng.choice(BOID_COLORS)


def _random_vec(rng, lo: float, hi: float) -> Vector2:
    return Vector2(rng.uniform(lo, hi), rng.uniform(lo, hi))


def spawn_at(position: Vector2, rng: Optional[random.Random] = None) -> Boid:
    """New boid at position with a small random velocity and acceleration."""
    if not position.is_finite():
        raise ValueError(f"Spawn position must be finite, got {position}")

    rng = rng or random
    lo, hi = SPAWN_VELOCITY_RANGE
    boid = Boid(
        position=position,
        velocity=_random_vec(rng, lo, hi),
        acceleration=_random_vec(rng, lo, hi),
    )
    logger.debug("Spawned boid at (%.1f, %.1f)", position.x, position.y)
    return boid


def spawn_random(
    bounds: WorldBounds, rng: Optional[random.Random] = None
) -> Boid:
    """New boid at a uniformly random position inside bounds."""
    rng = rng or random
    position = Vector2(
        rng.uniform(bounds.left, bounds.right),
        rng.uniform(bounds.bottom, bounds.top),
    )
    return spawn_at(position, rng)
