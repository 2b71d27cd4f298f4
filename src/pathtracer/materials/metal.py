"""Metal (specular reflective) material implementation.

The reflection formula is:
    R = I - 2(I . N)N

where I is the unit incident direction and N is the surface normal. For fuzzy
metals the reflected direction is offset by ``fuzz`` times a random point in
the unit sphere. Rays whose final direction points into the surface are
absorbed; this is the only way a ray is absorbed anywhere in the renderer.

Example:
    >>> from pathtracer.core.vec3 import Color
    >>> from pathtracer.materials.metal import Metal
    >>> mirror = Metal(Color(0.8, 0.8, 0.8), fuzz=0.0)
    >>> brushed = Metal(Color(0.8, 0.6, 0.2), fuzz=0.3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Optional

import numpy as np

from pathtracer.core.ray import Ray, random_in_unit_sphere, reflect
from pathtracer.core.vec3 import Color
from pathtracer.materials.material import (
    MaterialType,
    ScatterResult,
    as_color,
)

if TYPE_CHECKING:
    from pathtracer.geometry.sphere import HitRecord


@dataclass(frozen=True)
class Metal:
    """Metal (specular reflective) material properties.

    Attributes:
        albedo: The reflective color (RGB).
        fuzz: Radius of the random perturbation of the reflected direction,
            normally in [0, 1]. 0 = perfect mirror.
    """

    albedo: Color
    fuzz: float = 0.0

    material_type: ClassVar[MaterialType] = MaterialType.METAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", as_color(self.albedo))

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> Optional[ScatterResult]:
        """Reflect the incoming ray about the surface normal.

        The fuzz offset is drawn even when ``fuzz`` is 0, so the random stream
        advances identically for every metal hit.

        Args:
            ray_in: The incoming ray.
            rec: The hit record at the surface.
            rng: The random generator for the fuzz offset.

        Returns:
            The attenuation (albedo) and reflected ray, or None when the
            reflected direction does not leave the surface
            (``dot(direction, normal) <= 0``).
        """
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        scattered = Ray(rec.point, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) <= 0.0:
            return None

        return ScatterResult(attenuation=self.albedo, scattered=scattered)

    def params(self) -> dict[str, Any]:
        return {"albedo": list(self.albedo), "fuzz": self.fuzz}
