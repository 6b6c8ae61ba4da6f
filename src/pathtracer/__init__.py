"""Offline Monte Carlo path tracer for sphere scenes."""
from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableArray
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.renderer.raytracer import Renderer, ray_color

__all__ = [
    "Camera",
    "Dielectric",
    "HitRecord",
    "Hittable",
    "HittableArray",
    "Lambertian",
    "Metal",
    "Ray",
    "RenderSettings",
    "Renderer",
    "Sphere",
    "Vector3",
    "ray_color",
]
