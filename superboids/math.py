# superboids/math.py
import math
from typing import Iterable, Sequence

import numpy as np

from superboids.types import Scalar, Vector2


# -- Vector Math --
def magnitude_vec(v: Vector2) -> Scalar:
    return math.hypot(*v)


def dist_sq_vec(a: Vector2, b: Vector2) -> Scalar:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def sum_vec(vectors: Iterable[Vector2]) -> Vector2:
    sx, sy = 0.0, 0.0
    for v in vectors:
        sx += v.x
        sy += v.y
    return Vector2(sx, sy)


def mean_vec(vectors: Sequence[Vector2]) -> Vector2:
    """Component-wise mean. An empty sequence has no mean and yields zero."""
    if not vectors:
        return Vector2.zero()
    return sum_vec(vectors) / float(len(vectors))


def limit_vec(v: Vector2, max_length: Scalar) -> Vector2:
    """Cap the magnitude of v at max_length, keeping its direction."""
    mag = magnitude_vec(v)
    if mag > max_length:
        return (v / mag) * max_length
    return v


def clamp_length_vec(
    v: Vector2, min_length: Scalar, max_length: Scalar
) -> Vector2:
    """
    Rescale v so that its magnitude lies in [min_length, max_length].

    A zero vector has no direction to rescale along and is returned as is.
    """
    mag = magnitude_vec(v)
    if mag == 0.0:
        return v
    if mag < min_length:
        return (v / mag) * min_length
    if mag > max_length:
        return (v / mag) * max_length
    return v


# -- Batch Math --
def vec_array(vectors: Sequence[Vector2]) -> np.ndarray:
    """Packs a sequence of Vector2 into an (N, 2) float64 array."""
    if not vectors:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([(v.x, v.y) for v in vectors], dtype=np.float64)


def pairwise_dist_sq(points: np.ndarray) -> np.ndarray:
    """
    Squared distance between every pair of rows of an (N, 2) array.
    Evaluated as dx * dx + dy * dy so results match dist_sq_vec exactly.
    Returns: (N, N)
    """
    dx = points[:, np.newaxis, 0] - points[np.newaxis, :, 0]
    dy = points[:, np.newaxis, 1] - points[np.newaxis, :, 1]
    return dx * dx + dy * dy
