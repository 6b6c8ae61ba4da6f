# materials/dielectric.py
import math
from typing import Optional, Tuple
import numpy as np
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material such as glass (refraction_index around 1.5).
    Always scatters: either a reflected or a refracted ray, chosen with
    Schlick's reflectance as the probability of reflection.
    """
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Vector3]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)

        # rec.normal always points out of the sphere; flip it when exiting.
        d_dot_n = direction.dot(rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.refraction_index
            cosine = self.refraction_index * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.refraction_index
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is not None:
            reflect_prob = schlick(cosine, self.refraction_index)
        else:
            # Total internal reflection
            reflect_prob = 1.0

        if rng.random() < reflect_prob:
            return Ray(rec.p, reflected), attenuation
        return Ray(rec.p, refracted), attenuation

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Snell's law refraction of v through a surface with unit normal n.
    Returns None on total internal reflection.
    """
    uv = v.unit()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant <= 0:
        return None
    return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)

def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
