# materials/lambertian.py
from typing import Tuple
import numpy as np
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Vector3]:
        # Aim at a random point in the unit sphere tangent to the surface at p.
        scatter_direction = rec.normal + random_in_unit_sphere(rng)
        return Ray(rec.p, scatter_direction), self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
