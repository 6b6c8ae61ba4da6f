# camera/camera.py
import math
import numpy as np
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera. get_ray(s, t) maps s, t in [0, 1] onto the image plane
    at focus_dist, jittering the origin over a lens of radius aperture / 2.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        assert look_from != look_at, "camera look_from and look_at coincide"
        self.vfov = vfov  # Vertical field of view, degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        theta = math.radians(vfov)
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        self.origin = look_from
        self.w = (look_from - look_at).unit()
        across = vup.cross(self.w)
        assert across.length_squared() > 0, "camera vup is parallel to the view direction"
        self.u = across.unit()
        self.v = self.w.cross(self.u)

        self.lower_left_corner = (self.origin -
                                  self.u * (half_width * focus_dist) -
                                  self.v * (half_height * focus_dist) -
                                  self.w * focus_dist)
        self.horizontal = self.u * (2 * half_width * focus_dist)
        self.vertical = self.v * (2 * half_height * focus_dist)

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generates a ray with depth of field effect."""
        rd = self.lens_radius * random_in_unit_disk(rng)
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
