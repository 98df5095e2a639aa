"""
The three classic flocking rules.

Each rule maps (boid, neighbors) to an unweighted 2D adjustment and
returns the zero vector when there are no neighbors.
"""

from __future__ import annotations

import sys
from typing import Sequence, Tuple

import numpy as np

from superboids.flock.boid import Boid
from superboids.math import magnitude_vec, mean_vec
from superboids.types import Vector2

# Stand-in for a zero separation distance: a huge but finite push.
SEPARATION_EPSILON: float = sys.float_info.min


def alignment(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    """Steer toward the neighbors' mean velocity."""
    if not neighbors:
        return Vector2.zero()
    return mean_vec([n.velocity for n in neighbors]) - boid.velocity


def cohesion(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    """Steer toward the neighbors' centroid."""
    if not neighbors:
        return Vector2.zero()
    return mean_vec([n.position for n in neighbors]) - boid.position


def separation(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    """Sum of (boid - neighbor) / distance over all neighbors."""
    sx, sy = 0.0, 0.0
    for n in neighbors:
        away = boid.position - n.position
        distance = max(magnitude_vec(away), SEPARATION_EPSILON)
        sx += away.x / distance
        sy += away.y / distance
    return Vector2(sx, sy)


def batch_rules(
    pos: np.ndarray, vel: np.ndarray, is_neighbor: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    The three rules for a whole flock at once.

    pos, vel: (N, 2). is_neighbor: (N, N) mask, row i marking the
    neighbors of boid i. Returns (alignment, cohesion, separation), each
    (N, 2). Agrees with the per-boid rules up to summation order.
    """
    mask = is_neighbor[:, :, np.newaxis]
    counts = np.sum(is_neighbor, axis=1)[:, np.newaxis]
    has_neighbors = counts > 0
    safe_counts = np.maximum(counts, 1)

    avg_vel = np.sum(vel[np.newaxis, :, :] * mask, axis=1) / safe_counts
    avg_pos = np.sum(pos[np.newaxis, :, :] * mask, axis=1) / safe_counts
    align_forces = np.where(has_neighbors, avg_vel - vel, 0.0)
    cohesion_forces = np.where(has_neighbors, avg_pos - pos, 0.0)

    # diff[i, j] points from boid j to boid i
    diff = pos[:, np.newaxis, :] - pos[np.newaxis, :, :]
    dist = np.maximum(np.hypot(diff[:, :, 0], diff[:, :, 1]), SEPARATION_EPSILON)
    sep_forces = np.sum(diff / dist[:, :, np.newaxis] * mask, axis=1)

    return align_forces, cohesion_forces, sep_forces
