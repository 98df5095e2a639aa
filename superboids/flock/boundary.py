"""
Containment policies keeping boids inside the world bounds.

WRAP teleports a boid that has left the bounds to the opposite edge and
runs after integration. TURN adds an inward force near the edges and runs
before integration, so the turn is capped by the boid's max_force.
"""

from __future__ import annotations

from dataclasses import replace

from superboids.flock.boid import Boid
from superboids.flock.settings import BORDER_MARGIN, BORDER_TURN_FACTOR
from superboids.resources.core import WorldBounds
from superboids.types import Vector2


def wrap(boid: Boid, bounds: WorldBounds) -> Boid:
    """Moves a boid past an edge onto the opposite edge. Velocity is kept."""
    if bounds.contains(boid.position):
        return boid

    x, y = boid.position

    if x > bounds.right:
        x = bounds.left
    elif x < bounds.left:
        x = bounds.right

    if y > bounds.top:
        y = bounds.bottom
    elif y < bounds.bottom:
        y = bounds.top

    return replace(boid, position=Vector2(x, y))


def turn_force(
    boid: Boid,
    bounds: WorldBounds,
    margin: float = BORDER_MARGIN,
    factor: float = BORDER_TURN_FACTOR,
) -> Vector2:
    """Inward push for every edge the boid is within margin of."""
    fx, fy = 0.0, 0.0
    pos = boid.position

    if pos.x < bounds.left + margin:
        fx += factor
    if pos.x > bounds.right - margin:
        fx -= factor
    if pos.y < bounds.bottom + margin:
        fy += factor
    if pos.y > bounds.top - margin:
        fy -= factor

    return Vector2(fx, fy)
