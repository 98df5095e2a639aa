"""
Neighbor discovery.

A boid's neighbors are the other boids of the snapshot closer than the
perception radius, tested as dx * dx + dy * dy < radius * radius. Self is
excluded by identity, so two boids sharing a position still see each other.

Three interchangeable strategies find every boid's neighbors at once. They
return identical index lists, in snapshot order. neighbor_mask() exposes
the matrix strategy's boolean mask for the batch steering path.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from superboids.flock.boid import Boid
from superboids.flock.settings import PERCEPTION_RADIUS, NeighborSearch
from superboids.math import dist_sq_vec, pairwise_dist_sq, vec_array
from superboids.spatial.spatial_hash import SpatialHash

# Relative padding on grid lookups so rounding at cell edges never drops
# a candidate; the exact test runs afterwards anyway.
_GRID_PAD = 1e-6


def neighbors(
    boid: Boid, snapshot: Sequence[Boid], radius: float = PERCEPTION_RADIUS
) -> List[Boid]:
    """Every boid of snapshot within radius of boid, excluding boid itself."""
    radius_sq = radius * radius
    return [
        other
        for other in snapshot
        if other is not boid
        and dist_sq_vec(boid.position, other.position) < radius_sq
    ]


def _brute_force(snapshot: Sequence[Boid], radius: float) -> List[List[int]]:
    radius_sq = radius * radius
    result = []
    for i, boid in enumerate(snapshot):
        result.append(
            [
                j
                for j, other in enumerate(snapshot)
                if j != i
                and dist_sq_vec(boid.position, other.position) < radius_sq
            ]
        )
    return result


def _grid(snapshot: Sequence[Boid], radius: float) -> List[List[int]]:
    radius_sq = radius * radius
    grid = SpatialHash(cell_size=radius)
    for j, other in enumerate(snapshot):
        grid.insert(j, other.position)

    reach = radius * (1.0 + _GRID_PAD)
    result = []
    for i, boid in enumerate(snapshot):
        candidates = grid.query(boid.position, reach)
        result.append(
            sorted(
                j
                for j in candidates
                if j != i
                and dist_sq_vec(boid.position, snapshot[j].position) < radius_sq
            )
        )
    return result


def neighbor_mask(snapshot: Sequence[Boid], radius: float) -> np.ndarray:
    """
    (N, N) bool matrix. Entry [i, j] is True when snapshot[j] is a
    neighbor of snapshot[i]; the diagonal is always False.
    """
    pos = vec_array([b.position for b in snapshot])
    is_neighbor = pairwise_dist_sq(pos) < radius * radius
    np.fill_diagonal(is_neighbor, False)
    return is_neighbor


def _matrix(snapshot: Sequence[Boid], radius: float) -> List[List[int]]:
    is_neighbor = neighbor_mask(snapshot, radius)
    return [np.flatnonzero(row).tolist() for row in is_neighbor]


_STRATEGIES = {
    NeighborSearch.BRUTE_FORCE: _brute_force,
    NeighborSearch.GRID: _grid,
    NeighborSearch.MATRIX: _matrix,
}


def find_all_neighbors(
    snapshot: Sequence[Boid],
    radius: float = PERCEPTION_RADIUS,
    search: NeighborSearch = NeighborSearch.MATRIX,
) -> List[List[int]]:
    """
    Neighbor indices for every boid of snapshot.
    Entry i lists the indices j of snapshot[i]'s neighbors, ascending.
    """
    if radius <= 0.0:
        raise ValueError(f"radius must be positive, got {radius}")
    if not snapshot:
        return []
    return _STRATEGIES[search](snapshot, radius)
