from dataclasses import dataclass

import pytest

from superboids.core.world import World
from superboids.flock.boid import Boid
from superboids.flock.settings import BoidSettings
from superboids.resources.core import WorldBounds
from superboids.types import Vector2


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class Velocity:
    x: float
    y: float


@dataclass(frozen=True)
class Health:
    hp: int


@pytest.fixture
def world():
    """Returns a fresh World instance for each test."""
    return World()


@pytest.fixture
def settings():
    return BoidSettings()


@pytest.fixture
def bounds():
    """A 1280x720 world centered on the origin."""
    return WorldBounds.centered(1280, 720)


def make_boid(x: float, y: float, vx: float = 0.0, vy: float = 0.0, **kwargs) -> Boid:
    return Boid(position=Vector2(x, y), velocity=Vector2(vx, vy), **kwargs)


def component_of(world, eid, component_type):
    """Reads one component of one entity through join(), or None."""
    for other, component in world.join(component_type):
        if other == eid:
            return component
    return None
