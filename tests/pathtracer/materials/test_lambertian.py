from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.lambertian import Lambertian


class TestLambertian:
    def test_always_scatters_with_albedo(self, rng):
        """Test that diffuse surfaces never absorb and attenuate by albedo."""
        albedo = Vector3(0.2, 0.5, 0.9)
        material = Lambertian(albedo)
        rec = HitRecord(1.0, Vector3(0, 0, -1), Vector3(0, 0, -1), material)
        ray = Ray(Vector3(0, 0, -3), Vector3(0, 0, 1))
        for _ in range(1000):
            result = material.scatter(ray, rec, rng)
            assert result is not None
            scattered, attenuation = result
            assert attenuation == albedo
            assert all(0.0 <= c <= 1.0 for c in attenuation)
            assert scattered.origin == rec.p

    def test_scatters_away_from_surface(self, rng):
        """Test that directions stay within the unit sphere centered on the normal."""
        material = Lambertian(Vector3(0.5, 0.5, 0.5))
        normal = Vector3(0, 1, 0)
        rec = HitRecord(1.0, Vector3(0, 0, 0), normal, material)
        ray = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        for _ in range(1000):
            scattered, _ = material.scatter(ray, rec, rng)
            assert (scattered.direction - normal).length_squared() < 1.0
            assert scattered.direction.y > 0
