import math

import pytest

from superboids.flock.steering import alignment, cohesion, separation
from superboids.types import Vector2
from tests.conftest import make_boid


@pytest.mark.parametrize("rule", [alignment, cohesion, separation])
def test_no_neighbors_gives_zero(rule):
    boid = make_boid(3.0, 4.0, 1.0, -1.0)
    assert rule(boid, []) == Vector2.zero()


def test_alignment_steers_toward_mean_velocity():
    boid = make_boid(0.0, 0.0, 1.0, 0.0)
    others = [make_boid(5.0, 0.0, 0.0, 2.0), make_boid(0.0, 5.0, 2.0, 2.0)]

    # mean velocity (1, 2) minus own (1, 0)
    assert alignment(boid, others) == Vector2(0.0, 2.0)


def test_alignment_of_identical_velocities_is_zero():
    boid = make_boid(0.0, 0.0, 1.0, 0.0)
    others = [make_boid(10.0, 0.0, 1.0, 0.0), make_boid(0.0, 10.0, 1.0, 0.0)]

    assert alignment(boid, others) == Vector2.zero()


def test_cohesion_steers_toward_centroid():
    boid = make_boid(0.0, 0.0)
    others = [make_boid(10.0, 0.0), make_boid(0.0, 10.0)]

    assert cohesion(boid, others) == Vector2(5.0, 5.0)


def test_separation_sums_unit_vectors_away_from_neighbors():
    boid = make_boid(0.0, 0.0)
    others = [make_boid(-4.0, 0.0), make_boid(0.0, 3.0)]

    # (4, 0) / 4 + (0, -3) / 3
    assert separation(boid, others) == Vector2(1.0, -1.0)


def test_separation_is_symmetric_between_a_pair():
    a = make_boid(1.0, 2.0)
    b = make_boid(4.0, 6.0)

    push_a = separation(a, [b])
    push_b = separation(b, [a])

    assert push_a == -push_b
    assert math.hypot(*push_a) == pytest.approx(1.0)


def test_separation_of_coincident_boids_is_finite():
    a = make_boid(7.0, 7.0)
    b = make_boid(7.0, 7.0)

    push = separation(a, [b])

    assert push.is_finite()
    assert not any(math.isnan(c) for c in push)


def test_separation_of_nearly_coincident_boids_is_finite():
    a = make_boid(0.0, 0.0)
    b = make_boid(5e-324, 0.0)

    assert separation(a, [b]).is_finite()
