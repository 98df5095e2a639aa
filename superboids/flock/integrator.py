from __future__ import annotations

from dataclasses import replace
from typing import Sequence

import numpy as np

from superboids.flock.boid import Boid
from superboids.flock.settings import BoidSettings
from superboids.flock.steering import alignment, batch_rules, cohesion, separation
from superboids.math import clamp_length_vec, limit_vec, vec_array
from superboids.types import Vector2


def steering_force(
    boid: Boid, neighbors: Sequence[Boid], settings: BoidSettings
) -> Vector2:
    """Weighted sum of the three flocking rules."""
    return (
        alignment(boid, neighbors) * settings.alignment
        + cohesion(boid, neighbors) * settings.cohesion
        + separation(boid, neighbors) * settings.separation
    )


def batch_steering_force(
    snapshot: Sequence[Boid], is_neighbor: np.ndarray, settings: BoidSettings
) -> np.ndarray:
    """steering_force() for every boid of snapshot at once. Returns: (N, 2)"""
    pos = vec_array([b.position for b in snapshot])
    vel = vec_array([b.velocity for b in snapshot])
    align_forces, cohesion_forces, sep_forces = batch_rules(pos, vel, is_neighbor)

    return (
        align_forces * settings.alignment
        + cohesion_forces * settings.cohesion
        + sep_forces * settings.separation
    )


def integrate(boid: Boid, force: Vector2) -> Boid:
    """
    Advance one boid by one step.

    Order matters and is fixed:
        1. acceleration += force
        2. cap |acceleration| at max_force
        3. position += velocity (the velocity from before this step)
        4. velocity += acceleration
        5. clamp |velocity| into [min_velocity, max_velocity]
        6. acceleration = 0
    """
    acceleration = limit_vec(boid.acceleration + force, boid.max_force)
    position = boid.position + boid.velocity
    velocity = clamp_length_vec(
        boid.velocity + acceleration, boid.min_velocity, boid.max_velocity
    )
    return replace(
        boid,
        position=position,
        velocity=velocity,
        acceleration=Vector2.zero(),
    )
