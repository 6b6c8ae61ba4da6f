import numpy as np
import pytest

from pathtracer.core.utils import random_in_unit_disk, random_in_unit_sphere, reflect
from pathtracer.core.vector import Vector3


class TestRandomSampling:
    def test_unit_sphere_points_are_inside(self, rng):
        for _ in range(1000):
            p = random_in_unit_sphere(rng)
            assert p.length_squared() < 1.0

    def test_unit_disk_points_are_inside_and_flat(self, rng):
        for _ in range(1000):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_unit_sphere_is_centered(self, rng):
        """Test that the sample mean is close to the origin."""
        points = np.array([tuple(random_in_unit_sphere(rng)) for _ in range(5000)])
        assert np.abs(points.mean(axis=0)).max() < 0.05

    def test_same_seed_same_points(self):
        a = np.random.default_rng(7)
        b = np.random.default_rng(7)
        for _ in range(10):
            assert random_in_unit_sphere(a) == random_in_unit_sphere(b)


class TestReflect:
    def test_reflect_across_up(self):
        v = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert v == Vector3(1, 1, 0)

    def test_reflect_preserves_length(self):
        v = Vector3(0.3, -0.4, 0.5)
        n = Vector3(1, 2, 2).unit()
        assert reflect(v, n).length() == pytest.approx(v.length())
