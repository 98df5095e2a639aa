import random

import pytest

from superboids.flock.boid import Boid
from superboids.flock.integrator import batch_steering_force, integrate, steering_force
from superboids.flock.neighbors import neighbor_mask, neighbors
from superboids.flock.settings import BoidSettings
from superboids.math import magnitude_vec
from superboids.types import Vector2
from tests.conftest import make_boid

TOL = 1e-9


def test_position_moves_by_previous_velocity():
    boid = make_boid(0.0, 0.0, 2.0, 0.0)

    moved = integrate(boid, Vector2(0.0, 0.1))

    # Position uses the velocity from before this step's acceleration
    assert moved.position == Vector2(2.0, 0.0)
    assert moved.velocity == Vector2(2.0, 0.1)


def test_acceleration_is_reset():
    boid = Boid(
        position=Vector2(0.0, 0.0),
        velocity=Vector2(2.0, 0.0),
        acceleration=Vector2(0.1, 0.1),
    )

    assert integrate(boid, Vector2(5.0, 5.0)).acceleration == Vector2.zero()


def test_pending_acceleration_is_combined_with_force():
    boid = Boid(
        velocity=Vector2(2.0, 0.0),
        acceleration=Vector2(0.0, 0.125),
        max_force=1.0,
    )

    moved = integrate(boid, Vector2(0.0, 0.125))

    assert moved.velocity == Vector2(2.0, 0.25)


def test_force_is_capped_but_keeps_direction():
    boid = make_boid(0.0, 0.0, 2.0, 0.0, max_force=0.2)

    moved = integrate(boid, Vector2(0.0, 1000.0))

    applied = moved.velocity - boid.velocity
    assert magnitude_vec(applied) == pytest.approx(0.2)
    assert applied.x == 0.0
    assert applied.y > 0.0


def test_velocity_below_min_is_scaled_up():
    boid = make_boid(0.0, 0.0, 0.3, 0.4, min_velocity=1.0, max_velocity=3.0)

    moved = integrate(boid, Vector2.zero())

    assert magnitude_vec(moved.velocity) == pytest.approx(1.0)
    assert moved.velocity.x / moved.velocity.y == pytest.approx(0.75)


def test_velocity_above_max_is_scaled_down():
    boid = make_boid(0.0, 0.0, 30.0, 40.0, min_velocity=1.0, max_velocity=3.0)

    moved = integrate(boid, Vector2.zero())

    assert magnitude_vec(moved.velocity) == pytest.approx(3.0)


def test_zero_velocity_stays_zero():
    boid = make_boid(0.0, 0.0, 0.0, 0.0)

    moved = integrate(boid, Vector2.zero())

    assert moved.velocity == Vector2.zero()
    assert moved.velocity.is_finite()


@pytest.mark.parametrize("vx, vy", [(5e-324, 0.0), (0.0, -5e-324), (1e-320, 1e-320)])
def test_tiny_velocity_is_scaled_up_without_nan(vx, vy):
    boid = make_boid(0.0, 0.0, vx, vy)

    moved = integrate(boid, Vector2.zero())

    assert moved.velocity.is_finite()
    assert boid.min_velocity - TOL <= magnitude_vec(moved.velocity) <= boid.max_velocity


def test_tiny_pending_acceleration_stays_finite():
    boid = Boid(velocity=Vector2(2.0, 0.0), acceleration=Vector2(5e-324, 5e-324))

    moved = integrate(boid, Vector2.zero())

    assert moved.velocity.is_finite()
    assert moved.position == Vector2(2.0, 0.0)


def test_limits_hold_for_random_pre_states():
    rng = random.Random(99)
    for _ in range(500):
        boid = Boid(
            position=Vector2(rng.uniform(-100, 100), rng.uniform(-100, 100)),
            velocity=Vector2(rng.uniform(-10, 10), rng.uniform(-10, 10)),
            acceleration=Vector2(rng.uniform(-1, 1), rng.uniform(-1, 1)),
            max_force=rng.uniform(0.01, 2.0),
            min_velocity=0.5,
            max_velocity=4.0,
        )
        force = Vector2(rng.uniform(-1e6, 1e6), rng.uniform(-1e6, 1e6))

        moved = integrate(boid, force)
        speed = magnitude_vec(moved.velocity)

        assert moved.acceleration == Vector2.zero()
        assert moved.velocity.is_finite()
        assert boid.min_velocity - TOL <= speed <= boid.max_velocity + TOL


def test_applied_acceleration_never_exceeds_max_force():
    boid = make_boid(0.0, 0.0, 2.0, 0.0, max_force=0.2, min_velocity=0.0, max_velocity=100.0)

    for force in (Vector2(1e9, -1e9), Vector2(-0.15, 0.15), Vector2(3.0, 4.0)):
        moved = integrate(boid, force)
        applied = magnitude_vec(moved.velocity - boid.velocity)
        assert applied <= 0.2 + TOL


def test_steering_force_weights_each_rule():
    boid = make_boid(0.0, 0.0, 1.0, 0.0)
    other = make_boid(10.0, 0.0, 1.0, 2.0)
    settings = BoidSettings(alignment=2.0, cohesion=0.5, separation=3.0)

    force = steering_force(boid, [other], settings)

    # alignment (0, 2) * 2 + cohesion (10, 0) * 0.5 + separation (-1, 0) * 3
    assert force == Vector2(2.0, 4.0)


def test_steering_force_without_neighbors_is_zero(settings):
    assert steering_force(make_boid(0.0, 0.0, 1.0, 1.0), [], settings) == Vector2.zero()


def test_batch_steering_force_matches_per_boid_force():
    rng = random.Random(4)
    snapshot = [
        make_boid(rng.uniform(-60, 60), rng.uniform(-60, 60), rng.uniform(-2, 2), rng.uniform(-2, 2))
        for _ in range(40)
    ]
    # A far away loner and a coincident pair
    snapshot.append(make_boid(5000.0, 5000.0, 1.0, 0.0))
    snapshot.append(make_boid(0.0, 0.0, 1.0, 0.0))
    snapshot.append(make_boid(0.0, 0.0, -1.0, 0.0))
    settings = BoidSettings(alignment=1.0, cohesion=0.3, separation=2.0)

    forces = batch_steering_force(
        snapshot, neighbor_mask(snapshot, settings.perception_radius), settings
    )

    assert forces.shape == (len(snapshot), 2)
    for boid, (fx, fy) in zip(snapshot, forces):
        expected = steering_force(
            boid, neighbors(boid, snapshot, settings.perception_radius), settings
        )
        assert fx == pytest.approx(expected.x, abs=1e-9)
        assert fy == pytest.approx(expected.y, abs=1e-9)

    assert tuple(forces[40]) == (0.0, 0.0)
