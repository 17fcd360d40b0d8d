# core/utils.py
from typing import Optional

import numpy as np

from core.vector import Vector3

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Creates the random source passed to every sampling routine.
    Give each rendering worker its own generator; they are not shared safely.
    """
    return np.random.default_rng(seed)

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere.

    Rejection sampling: draws from the cube [-1, 1]^3 until the point lands
    inside the ball, about 1.91 draws on average.
    """
    while True:
        p = Vector3(rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0))
        if p.length_squared() < 1.0:
            return p

def random_in_unit_circle(rng) -> Vector3:
    """
    Returns a random point (x, y, 0) strictly inside the unit circle.
    """
    while True:
        p = Vector3(rng.uniform(-1.0, 1.0),
                    rng.uniform(-1.0, 1.0),
                    0.0)
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalized()
