# scenes.py
import logging
from typing import Callable, Dict, Optional

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableArray
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

logger = logging.getLogger(__name__)

GROUND_CENTER = Vector3(0, -1000, 0)
GROUND_RADIUS = 1000.0


def _ground() -> Sphere:
    return Sphere(GROUND_CENTER, GROUND_RADIUS, Lambertian(Vector3(0.5, 0.5, 0.5)))


def random_scene(rng: np.random.Generator) -> HittableArray:
    """
    A ground plane covered by a 22x22 grid of small jittered spheres with
    random materials (80% diffuse, 15% metal, 5% glass) around three large
    showcase spheres.
    """
    world = HittableArray([_ground()])
    # Small spheres are kept clear of the metal showcase sphere.
    clearing = Vector3(4, 0.2, 0)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:  # diffuse
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:  # metal
                albedo = Vector3(0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()))
                material = Metal(albedo, 0.5 * rng.random())
            else:  # glass
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    logger.debug("Random scene has %d spheres", len(world))
    return world


def two_sphere_scene(rng: Optional[np.random.Generator] = None) -> HittableArray:
    """The ground sphere and one diffuse sphere of radius 0.5 at (0, 0, -1)."""
    return HittableArray([
        _ground(),
        Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.8, 0.3, 0.3))),
    ])


SCENES: Dict[str, Callable[[np.random.Generator], HittableArray]] = {
    "random": random_scene,
    "two_spheres": two_sphere_scene,
}


def build_scene(name: str, seed: int = 0) -> HittableArray:
    if name not in SCENES:
        raise ValueError(f"unknown scene {name!r}, expected one of {sorted(SCENES)}")
    return SCENES[name](np.random.default_rng(seed))


def default_camera(settings: RenderSettings) -> Camera:
    look_from = Vector3(*settings.look_from)
    look_at = Vector3(*settings.look_at)
    dist_to_focus = (look_from - Vector3(*settings.focus_point)).length()
    return Camera(look_from, look_at, Vector3(*settings.vup), settings.vfov,
                  settings.aspect_ratio, settings.aperture, dist_to_focus)
