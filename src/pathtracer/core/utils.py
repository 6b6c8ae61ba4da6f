# core/utils.py
import numpy as np

from pathtracer.core.vector import Vector3

def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside the unit sphere by rejection sampling
    the [-1, 1] cube.
    """
    while True:
        p = Vector3(2.0 * rng.random() - 1.0,
                    2.0 * rng.random() - 1.0,
                    2.0 * rng.random() - 1.0)
        if p.length_squared() < 1.0:
            return p

def random_in_unit_disk(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside the unit disk in the z=0 plane.
    """
    while True:
        p = Vector3(2.0 * rng.random() - 1.0,
                    2.0 * rng.random() - 1.0,
                    0.0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
