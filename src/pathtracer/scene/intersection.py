"""Scene-level ray intersection testing.

A Scene is an ordered collection of spheres. ``Scene.hit`` tests every member
and narrows the upper bound of the parametric interval to the closest hit
found so far, so the returned record is the globally nearest intersection.

Example:
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vec3 import Vec3
    >>> from pathtracer.geometry.sphere import Sphere
    >>> from pathtracer.materials import Lambertian
    >>> from pathtracer.scene.intersection import Scene
    >>> scene = Scene()
    >>> scene.add(Sphere(Vec3(0, 0, -1), 0.5, Lambertian(Vec3(0.5, 0.5, 0.5))))
    >>> rec = scene.hit(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 0.001, float("inf"))
"""

from collections.abc import Iterable, Iterator
from typing import Optional

from pathtracer.core.ray import Ray
from pathtracer.geometry.sphere import HitRecord, Sphere


class Scene:
    """Ordered collection of geometry answering nearest-hit queries.

    Attributes:
        objects: The contained spheres, in insertion order.
    """

    def __init__(self, objects: Optional[Iterable[Sphere]] = None) -> None:
        self.objects: list[Sphere] = list(objects) if objects is not None else []

    def add(self, obj: Sphere) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all geometry from the scene."""
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Find the nearest intersection of ``ray`` with any member.

        Each member is tested against ``[t_min, closest_so_far]``, where
        ``closest_so_far`` starts at ``t_max`` and shrinks with every hit.

        Args:
            ray: The ray to test.
            t_min: Minimum accepted ray parameter.
            t_max: Maximum accepted ray parameter.

        Returns:
            The record of the nearest hit, or None if no member is hit.
        """
        closest: Optional[HitRecord] = None
        closest_so_far = t_max

        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest = rec
                closest_so_far = rec.t

        return closest

    def __repr__(self) -> str:
        return f"Scene(objects={len(self.objects)})"
