"""Unit tests for scene-level intersection.

Tests cover:
- Empty scene
- Nearest hit across multiple spheres regardless of insertion order
- Material binding of the nearest sphere
- Interval narrowing and container operations
"""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color, Vec3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials import Lambertian, Metal
from pathtracer.scene.intersection import Scene

FORWARD = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))


@pytest.fixture
def near_sphere():
    return Sphere(Vec3(0.0, 0.0, -3.0), 1.0, Lambertian(Color(0.9, 0.1, 0.1)))


@pytest.fixture
def far_sphere():
    return Sphere(Vec3(0.0, 0.0, -10.0), 1.0, Metal(Color(0.1, 0.1, 0.9), fuzz=0.0))


class TestSceneHit:
    """Tests for Scene.hit."""

    def test_empty_scene_misses(self):
        """Test an empty scene never reports a hit."""
        assert Scene().hit(FORWARD, 0.001, math.inf) is None

    def test_nearest_hit_far_added_first(self, near_sphere, far_sphere):
        """Test the nearest sphere wins when it was added last."""
        scene = Scene([far_sphere, near_sphere])
        rec = scene.hit(FORWARD, 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.material is near_sphere.material

    def test_nearest_hit_near_added_first(self, near_sphere, far_sphere):
        """Test the nearest sphere wins when it was added first."""
        scene = Scene([near_sphere, far_sphere])
        rec = scene.hit(FORWARD, 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.material is near_sphere.material

    def test_t_max_limits_all_members(self, near_sphere, far_sphere):
        """Test no member beyond t_max is reported."""
        scene = Scene([near_sphere, far_sphere])
        assert scene.hit(FORWARD, 0.001, 1.5) is None

    def test_t_min_skips_near_sphere(self, near_sphere, far_sphere):
        """Test spheres entirely behind t_min are skipped."""
        scene = Scene([near_sphere, far_sphere])
        rec = scene.hit(FORWARD, 5.0, math.inf)
        assert rec.t == pytest.approx(9.0)
        assert rec.material is far_sphere.material


class TestSceneContainer:
    """Tests for Scene container operations."""

    def test_add_and_len(self, near_sphere, far_sphere):
        scene = Scene()
        scene.add(near_sphere)
        scene.add(far_sphere)
        assert len(scene) == 2
        assert list(scene) == [near_sphere, far_sphere]

    def test_clear(self, near_sphere):
        scene = Scene([near_sphere])
        scene.clear()
        assert len(scene) == 0
        assert scene.hit(FORWARD, 0.001, math.inf) is None

    def test_repr(self, near_sphere):
        assert repr(Scene([near_sphere])) == "Scene(objects=1)"
