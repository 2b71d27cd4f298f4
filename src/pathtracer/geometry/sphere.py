"""Sphere primitive with ray-sphere intersection.

The intersection solves ``a*t^2 + 2*half_b*t + c = 0`` for the ray parameter
``t`` (the half-b form of the quadratic) and keeps the nearest root inside the
requested parametric interval.

Example:
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vec3 import Vec3
    >>> from pathtracer.geometry.sphere import Sphere
    >>> from pathtracer.materials.lambertian import Lambertian
    >>> sphere = Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.5, 0.5, 0.5)))
    >>> rec = sphere.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, 100.0)
    >>> rec.t
    0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3, Vec3

if TYPE_CHECKING:
    from pathtracer.materials import Material


@dataclass
class HitRecord:
    """Record of a ray-surface intersection.

    Attributes:
        point: The point where the ray struck the surface.
        normal: The unit surface normal, always oriented against the incoming
            ray direction.
        t: The ray parameter of the intersection.
        front_face: True when the ray hit the outward-facing side.
        material: The material of the struck surface, if any.
    """

    point: Point3
    normal: Vec3
    t: float
    front_face: bool = True
    material: Optional[Material] = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the stored normal against ``ray`` and record the face side.

        Args:
            ray: The incoming ray.
            outward_normal: The geometric normal pointing out of the surface
                (unit length).
        """
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and a shared material.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere.
        material: The material bound to every hit on this sphere. The same
            material object may be shared by any number of spheres.
    """

    center: Point3
    radius: float
    material: Material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test for ray-sphere intersection within ``[t_min, t_max]``.

        The quadratic coefficients are:
            a = dot(direction, direction)
            half_b = dot(oc, direction)
            c = dot(oc, oc) - radius^2
        where ``oc = origin - center``. The smaller root is preferred; the
        larger one is tried only when the smaller lies outside the interval.

        Args:
            ray: The ray to test. Its direction need not be normalized.
            t_min: Minimum accepted ray parameter (inclusive).
            t_max: Maximum accepted ray parameter (inclusive).

        Returns:
            A new HitRecord for the nearest root in range, or None when the
            discriminant is negative or neither root is in range.
        """
        oc = ray.origin - self.center
        # NumPy scalar keeps a zero-length direction IEEE (NaN) instead of raising
        a = np.float64(ray.direction.length_squared())
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (-half_b - sqrtd) / a
        if root < t_min or t_max < root:
            root = (-half_b + sqrtd) / a
            if root < t_min or t_max < root:
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius
        rec = HitRecord(point=point, normal=outward_normal, t=float(root), material=self.material)
        rec.set_face_normal(ray, outward_normal)
        return rec
