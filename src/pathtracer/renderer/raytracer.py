# renderer/raytracer.py
import logging
import math
import time
from multiprocessing import Pool
from typing import List

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

MAX_DEPTH = 50
# Scattered rays start exactly on a surface; hits closer than this are
# floating-point noise from that same surface.
T_MIN = 0.001

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def ray_color(ray: Ray, world: Hittable, rng: np.random.Generator,
              depth: int = 0, max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Radiance carried back along `ray`. Every bounce multiplies by the
    surface attenuation; absorption or reaching max_depth yields black and
    escaping rays pick up the sky gradient.
    """
    rec = world.hit(ray, T_MIN, math.inf)
    if rec is not None:
        if depth < max_depth:
            result = rec.material.scatter(ray, rec, rng)
            if result is not None:
                scattered, attenuation = result
                return attenuation * ray_color(scattered, world, rng, depth + 1, max_depth)
        return Vector3.zero()

    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE.lerp(SKY_BLUE, t)


def render_row(world: Hittable, camera: Camera, j: int, width: int, height: int,
               samples: int, max_depth: int, seed: np.random.SeedSequence) -> np.ndarray:
    """
    Sums `samples` jittered ray colors for every pixel of camera row j
    (0 is the bottom row). Returns a (width, 3) array of unaveraged sums.
    """
    rng = np.random.default_rng(seed)
    row = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        col = Vector3.zero()
        for _ in range(samples):
            s = (i + rng.random()) / width
            t = (j + rng.random()) / height
            col = col + ray_color(camera.get_ray(s, t, rng), world, rng, 0, max_depth)
        row[i] = (col.x, col.y, col.z)
    return row


# Set once per worker process by _init_worker
_worker_data = {}


def _init_worker(world, camera, width, height, samples, max_depth):
    _worker_data.update(world=world, camera=camera, width=width, height=height,
                        samples=samples, max_depth=max_depth)


def _render_row(job):
    j, seed = job
    d = _worker_data
    return j, render_row(d["world"], d["camera"], j, d["width"], d["height"],
                         d["samples"], d["max_depth"], seed)


class Renderer:
    """
    Offline renderer. Every camera row gets its own generator spawned from
    settings.seed, so the image depends only on the seed and never on the
    number of workers or the order in which rows finish.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.samples = settings.samples
        self.max_depth = settings.max_depth
        self.workers = settings.workers
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)

    def row_seeds(self) -> List[np.random.SeedSequence]:
        return np.random.SeedSequence(self.settings.seed).spawn(self.height)

    def _store_row(self, j: int, row: np.ndarray):
        # Image row 0 is the top of the picture, camera row height-1.
        self.accumulation_buffer[self.height - 1 - j] = row

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Renders the full image and returns a (height, width, 3) array of
        gamma-corrected 8-bit channel values, top row first.
        """
        logger.info("Rendering %dx%d, %d samples per pixel, %d worker(s)",
                    self.width, self.height, self.samples, self.workers)
        start = time.perf_counter()
        self.accumulation_buffer.fill(0.0)
        jobs = list(enumerate(self.row_seeds()))

        if self.workers == 1:
            for j, seed in jobs:
                self._store_row(j, render_row(world, camera, j, self.width, self.height,
                                              self.samples, self.max_depth, seed))
                logger.debug("Row %d/%d done", self.height - j, self.height)
        else:
            init_args = (world, camera, self.width, self.height, self.samples, self.max_depth)
            with Pool(processes=self.workers, initializer=_init_worker, initargs=init_args) as pool:
                completed = 0
                for j, row in pool.imap_unordered(_render_row, jobs):
                    self._store_row(j, row)
                    completed += 1
                    logger.debug("Row %d/%d done", completed, self.height)

        logger.info("Rendered in %.2fs", time.perf_counter() - start)
        return gamma_correct(self.accumulation_buffer, self.samples)
