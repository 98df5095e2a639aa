"""
One flocking step over a frozen snapshot.

Every boid's new state is computed from the snapshot alone; nothing is
written back until all boids are done. The result therefore does not
depend on the order boids are visited in.

With NeighborSearch.MATRIX the steering forces of the whole flock come
out of one set of numpy array operations. The other strategies run the
per-boid rules over explicit neighbor lists.
"""

from __future__ import annotations

from typing import List, Sequence

from superboids.flock.boid import Boid
from superboids.flock.boundary import turn_force, wrap
from superboids.flock.integrator import (
    batch_steering_force,
    integrate,
    steering_force,
)
from superboids.flock.neighbors import find_all_neighbors, neighbor_mask
from superboids.flock.settings import BoidSettings, BoundaryMode, NeighborSearch
from superboids.resources.core import WorldBounds
from superboids.types import Vector2


def _advance(
    boid: Boid, force: Vector2, settings: BoidSettings, bounds: WorldBounds
) -> Boid:
    """(turn force) -> integrate -> (wrap)"""
    if settings.boundary is BoundaryMode.TURN:
        force = force + turn_force(
            boid,
            bounds,
            settings.border_margin,
            settings.border_turn_factor,
        )

    moved = integrate(boid, force)

    if settings.boundary is BoundaryMode.WRAP:
        moved = wrap(moved, bounds)

    return moved


def step_boid(
    boid: Boid,
    neighbors: Sequence[Boid],
    settings: BoidSettings,
    bounds: WorldBounds,
) -> Boid:
    """steering -> (turn force) -> integrate -> (wrap)"""
    return _advance(boid, steering_force(boid, neighbors, settings), settings, bounds)


def tick(
    snapshot: Sequence[Boid],
    settings: BoidSettings,
    bounds: WorldBounds,
) -> List[Boid]:
    """
    Returns the next state of every boid. Entry i of the result is the
    successor of snapshot[i]. The snapshot itself is left untouched.
    """
    frozen = tuple(snapshot)
    if not frozen:
        return []

    if settings.neighbor_search is NeighborSearch.MATRIX:
        is_neighbor = neighbor_mask(frozen, settings.perception_radius)
        forces = batch_steering_force(frozen, is_neighbor, settings)
        return [
            _advance(boid, Vector2(float(fx), float(fy)), settings, bounds)
            for boid, (fx, fy) in zip(frozen, forces)
        ]

    neighbor_ids = find_all_neighbors(
        frozen, settings.perception_radius, settings.neighbor_search
    )
    return [
        step_boid(boid, [frozen[j] for j in ids], settings, bounds)
        for boid, ids in zip(frozen, neighbor_ids)
    ]
