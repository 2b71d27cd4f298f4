"""Core rendering module.

Components:
    vec3: Three-component vector used for points, directions and colors
    ray: Ray type, reflection/refraction and random direction sampling
    integrator: Radiance estimate for a single ray, one bounce per loop step
    render: Per-pixel sampling loop and render settings

All random sampling draws from a ``numpy.random.Generator`` passed in by the
caller, so a fixed seed reproduces a render exactly.
"""

from .ray import (
    Ray,
    random_in_hemisphere,
    random_in_unit_sphere,
    random_unit_vector,
    random_vec3,
    reflect,
    refract,
)
from .vec3 import Color, Point3, Vec3

# Note: integrator and render are NOT imported here to avoid circular imports.
# Import directly from pathtracer.core.integrator or pathtracer.core.render when needed.

__all__ = [
    "Vec3",
    "Point3",
    "Color",
    "Ray",
    "reflect",
    "refract",
    "random_vec3",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_in_hemisphere",
]
