"""Unit tests for the path tracing integrator.

Tests cover:
- Depth exhaustion returns black without touching the scene
- Sky gradient for escaping rays
- Absorption returns black
- Attenuation multiplies through bounces
- Energy stays bounded for physically valid materials
- Depths far beyond the interpreter recursion limit
"""

import numpy as np
import pytest

from pathtracer.core.integrator import (
    BLACK,
    MAX_DEPTH,
    SKY_BLUE,
    T_MIN,
    WHITE,
    background_color,
    ray_color,
)
from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color, Vec3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials import Metal, ScatterResult
from pathtracer.scene.default_scene import create_default_scene
from pathtracer.scene.intersection import Scene

FORWARD = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))


class ExplodingScene:
    """Scene double that fails if it is ever queried."""

    def hit(self, ray, t_min, t_max):
        raise AssertionError("scene should not be queried")


class AbsorbingMaterial:
    """Material that absorbs every ray."""

    def scatter(self, ray_in, rec, rng):
        return None


class HalfGrayUpMaterial:
    """Material that halves the light and always scatters straight up."""

    def scatter(self, ray_in, rec, rng):
        return ScatterResult(
            attenuation=Color(0.5, 0.5, 0.5),
            scattered=Ray(rec.point, Vec3(0.0, 1.0, 0.0)),
        )


def assert_color_close(actual: Color, expected) -> None:
    assert np.allclose(actual.to_array(), expected), f"{actual} != {expected}"


class TestConstants:
    """Tests for integrator constants."""

    def test_defaults(self):
        assert MAX_DEPTH == 50
        assert T_MIN == pytest.approx(0.0001)
        assert WHITE == Color(1.0, 1.0, 1.0)
        assert SKY_BLUE == Color(0.5, 0.7, 1.0)
        assert BLACK == Color(0.0, 0.0, 0.0)


class TestBackground:
    """Tests for the sky gradient."""

    def test_straight_up_is_sky_blue(self):
        assert_color_close(background_color(Ray(Vec3(), Vec3(0.0, 1.0, 0.0))), [0.5, 0.7, 1.0])

    def test_straight_down_is_white(self):
        assert_color_close(background_color(Ray(Vec3(), Vec3(0.0, -1.0, 0.0))), [1.0, 1.0, 1.0])

    def test_horizon_is_halfway(self):
        assert_color_close(background_color(Ray(Vec3(), Vec3(1.0, 0.0, 0.0))), [0.75, 0.85, 1.0])

    def test_direction_length_ignored(self):
        """Test only the direction's orientation matters."""
        short = background_color(Ray(Vec3(), Vec3(0.0, 0.3, -0.4)))
        long = background_color(Ray(Vec3(), Vec3(0.0, 3.0, -4.0)))
        assert_color_close(short, long.to_array())


class TestRayColor:
    """Tests for ray_color."""

    def test_depth_zero_is_black(self, rng):
        """Test an exhausted bounce budget returns black without querying the scene."""
        assert ray_color(FORWARD, ExplodingScene(), 0, rng) == BLACK

    def test_negative_depth_is_black(self, rng):
        assert ray_color(FORWARD, ExplodingScene(), -3, rng) == BLACK

    def test_miss_returns_background(self, rng):
        """Test an empty scene shows the sky."""
        ray = Ray(Vec3(), Vec3(0.0, 1.0, 0.0))
        assert_color_close(ray_color(ray, Scene(), 5, rng), background_color(ray).to_array())

    def test_absorbed_is_black(self, rng):
        """Test an absorbing surface returns black."""
        scene = Scene([Sphere(Vec3(0.0, 0.0, -1.0), 0.5, AbsorbingMaterial())])
        assert ray_color(FORWARD, scene, 10, rng) == BLACK

    def test_hit_without_material_is_black(self, rng):
        scene = Scene([Sphere(Vec3(0.0, 0.0, -1.0), 0.5, None)])
        assert ray_color(FORWARD, scene, 10, rng) == BLACK

    def test_attenuation_multiplies_background(self, rng):
        """Test one bounce returns attenuation times the sky seen by the scattered ray."""
        scene = Scene([Sphere(Vec3(0.0, 0.0, -1.0), 0.5, HalfGrayUpMaterial())])
        assert_color_close(ray_color(FORWARD, scene, 2, rng), [0.25, 0.35, 0.5])

    def test_depth_one_cannot_bounce(self, rng):
        """Test a hit with a single unit of depth leaves nothing for the scattered ray."""
        scene = Scene([Sphere(Vec3(0.0, 0.0, -1.0), 0.5, HalfGrayUpMaterial())])
        assert ray_color(FORWARD, scene, 1, rng) == BLACK

    def test_default_scene_energy_bounded(self, rng):
        """Test radiance stays within [0, 1] for valid albedos and the sky."""
        scene, camera = create_default_scene()
        for _ in range(200):
            ray = camera.get_ray(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))
            color = ray_color(ray, scene, MAX_DEPTH, rng).to_array()
            assert np.all(color >= 0.0)
            assert np.all(color <= 1.0 + 1e-12)

    def test_same_seed_same_color(self):
        """Test tracing is deterministic for a given seed."""
        scene, camera = create_default_scene()
        ray = camera.get_ray(0.3, 0.4)
        a = ray_color(ray, scene, MAX_DEPTH, np.random.default_rng(11))
        b = ray_color(ray, scene, MAX_DEPTH, np.random.default_rng(11))
        assert a == b

    def test_depth_beyond_interpreter_recursion_limit(self, rng):
        """Test a ray trapped inside a mirror bounces thousands of times and ends black."""
        mirror = Metal(Color(0.9, 0.9, 0.9), fuzz=0.0)
        scene = Scene([Sphere(Vec3(0.0, 0.0, 0.0), 1.0, mirror)])
        ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.3, 0.2, -1.0))
        assert ray_color(ray, scene, 3000, rng) == BLACK

    def test_bounce_count_matches_depth(self, rng):
        """Test the trapped ray is traced exactly once per unit of depth."""
        mirror = Metal(Color(0.9, 0.9, 0.9), fuzz=0.0)
        scene = Scene([Sphere(Vec3(0.0, 0.0, 0.0), 1.0, mirror)])
        calls = []
        original_hit = scene.hit

        def counting_hit(ray, t_min, t_max):
            calls.append(t_min)
            return original_hit(ray, t_min, t_max)

        scene.hit = counting_hit
        ray_color(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.3, 0.2, -1.0)), scene, 2500, rng)
        assert len(calls) == 2500
