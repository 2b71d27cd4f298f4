"""Pytest configuration for path tracer tests.

This module provides shared fixtures for all test modules. Every test that
draws random numbers gets its own seeded generator so results do not depend
on test order.
"""

import numpy as np
import pytest

from pathtracer.core.vec3 import Color, Point3, Vec3
from pathtracer.geometry.sphere import HitRecord
from pathtracer.materials import Lambertian


@pytest.fixture
def rng():
    """A freshly seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def gray_lambertian():
    """A mid-gray diffuse material."""
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def make_hit_record():
    """Factory for hit records on a surface facing +y at the origin by default."""

    def _make(
        point=Point3(0.0, 0.0, 0.0),
        normal=Vec3(0.0, 1.0, 0.0),
        t=1.0,
        front_face=True,
        material=None,
    ):
        return HitRecord(point=point, normal=normal, t=t, front_face=front_face, material=material)

    return _make
