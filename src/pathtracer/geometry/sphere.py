# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        assert radius > 0, f"sphere radius must be positive, got {radius}"
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Scaled quadratic a*t^2 + 2b*t + c, so no factors of 2 or 4 below.
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Near root first; both ends of the interval are excluded.
        root = (-b - sqrt_disc) / a
        if not t_min < root < t_max:
            root = (-b + sqrt_disc) / a
            if not t_min < root < t_max:
                return None

        p = ray.at(root)
        normal = (p - self.center) / self.radius
        return HitRecord(root, p, normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
