"""Ray data structure and vector utilities for Monte Carlo ray tracing.

This module provides the fundamental Ray dataclass together with the reflection,
refraction and random-vector helpers used by the materials. Every helper that
draws random numbers takes an explicit ``numpy.random.Generator`` so a render
is reproducible from a single seed.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vec3 import Vec3
    >>> ray = Ray(origin=Vec3(0.0, 0.0, 0.0), direction=Vec3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    Vec3(0.0, 0.0, -5.0)
"""

import math
from dataclasses import dataclass

import numpy as np

from pathtracer.core.vec3 import Point3, Vec3


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not normalized; its
            length enters the intersection algebra directly.
    """

    origin: Point3
    direction: Vec3

    def at(self, t: float) -> Point3:
        """Compute the point ``origin + t * direction`` along the ray."""
        return self.origin + self.direction * t


# =============================================================================
# Reflection and Refraction
# =============================================================================


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect a vector about a normal: ``v - 2 * dot(v, n) * n``.

    Args:
        v: The incoming direction (pointing toward the surface).
        n: The surface normal (should be unit length).

    Returns:
        The reflected direction.
    """
    return v - n * (2.0 * v.dot(n))


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Refract a unit vector through a surface using Snell's law.

    The perpendicular part is ``etai_over_etat * (uv + cos_theta * n)`` and the
    parallel part is ``-sqrt(|1 - |perp|^2|) * n``. Total internal reflection
    is not detected: a negative discriminant is folded back to a positive one
    by the absolute value and a refracted direction is always returned.

    Args:
        uv: The incoming direction, unit length.
        n: The surface normal, unit length and facing against ``uv``.
        etai_over_etat: Ratio of refractive indices (incident / transmitted).

    Returns:
        The refracted direction.
    """
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


# =============================================================================
# Random Sampling Utilities for Monte Carlo
# =============================================================================


def random_vec3(rng: np.random.Generator, minimum: float = 0.0, maximum: float = 1.0) -> Vec3:
    """Generate a vector whose components are uniform in ``[minimum, maximum]``."""
    return Vec3.from_array(rng.uniform(minimum, maximum, size=3))


def random_in_unit_sphere(rng: np.random.Generator) -> Vec3:
    """Generate a random point strictly inside the unit sphere.

    Uses rejection sampling: points of the ``[-1, 1]^3`` cube are drawn until
    one has squared length below 1.

    Args:
        rng: The random generator to draw from.

    Returns:
        A random point with ``length_squared() < 1``.
    """
    while True:
        p = random_vec3(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: np.random.Generator) -> Vec3:
    """Generate a random unit vector (normalized unit-sphere sample)."""
    return random_in_unit_sphere(rng).unit_vector()


def random_in_hemisphere(normal: Vec3, rng: np.random.Generator) -> Vec3:
    """Generate a random point in the unit ball on the same side as ``normal``.

    A unit-sphere sample that points away from the normal is negated.

    Args:
        normal: The surface normal defining the hemisphere orientation.
        rng: The random generator to draw from.

    Returns:
        A random vector whose dot product with ``normal`` is non-negative.
    """
    in_unit_sphere = random_in_unit_sphere(rng)
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere
