"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with ray-sphere intersection and the HitRecord type

Intersection follows the pattern:
    rec = shape.hit(ray, t_min, t_max)  # HitRecord or None
"""

from .sphere import HitRecord, Sphere

__all__ = [
    "Sphere",
    "HitRecord",
]
