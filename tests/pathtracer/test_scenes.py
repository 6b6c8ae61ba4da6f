import numpy as np
import pytest

from pathtracer.config import RenderSettings
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.scenes import SCENES, build_scene, default_camera, random_scene, two_sphere_scene


class TestRandomScene:
    def test_layout(self):
        world = random_scene(np.random.default_rng(0))
        spheres = list(world)
        ground, big = spheres[0], spheres[-3:]
        assert ground.center == Vector3(0, -1000, 0)
        assert ground.radius == 1000
        assert [s.center for s in big] == [Vector3(0, 1, 0), Vector3(-4, 1, 0), Vector3(4, 1, 0)]
        assert isinstance(big[0].material, Dielectric)
        assert isinstance(big[1].material, Lambertian)
        assert isinstance(big[2].material, Metal)
        # At most 22 * 22 small spheres, minus the few near the clearing.
        assert 400 < len(spheres) - 4 <= 484

    def test_small_spheres(self):
        world = random_scene(np.random.default_rng(1))
        small = list(world)[1:-3]
        clearing = Vector3(4, 0.2, 0)
        for sphere in small:
            assert sphere.radius == 0.2
            assert sphere.center.y == 0.2
            assert (sphere.center - clearing).length() > 0.9
            material = sphere.material
            if isinstance(material, Lambertian):
                assert all(0.0 <= c < 1.0 for c in material.albedo)
            elif isinstance(material, Metal):
                assert all(0.5 <= c < 1.0 for c in material.albedo)
                assert 0.0 <= material.fuzz < 0.5
            else:
                assert material.refraction_index == 1.5

    def test_seeded_generation_is_reproducible(self):
        a = random_scene(np.random.default_rng(5))
        b = random_scene(np.random.default_rng(5))
        assert [s.center for s in a] == [s.center for s in b]


class TestSceneRegistry:
    def test_build_known_scenes(self):
        for name in SCENES:
            assert len(build_scene(name, seed=0)) > 0

    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            build_scene("cornell_box")

    def test_two_sphere_scene(self):
        world = two_sphere_scene()
        assert [(s.center, s.radius) for s in world] == [
            (Vector3(0, -1000, 0), 1000), (Vector3(0, 0, -1), 0.5)]


class TestDefaultCamera:
    def test_focus_distance(self):
        settings = RenderSettings()
        camera = default_camera(settings)
        expected = (Vector3(16, 2, 4) - Vector3(4, 1, 0)).length()
        assert camera.focus_dist == pytest.approx(expected)
        assert camera.aspect_ratio == 2.0
        assert camera.lens_radius == pytest.approx(1 / 32)
