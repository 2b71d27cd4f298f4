"""Lambertian (ideal diffuse) material implementation.

Scattered directions are ``normal + random_unit_vector``, which distributes
outgoing rays proportionally to the cosine of the angle from the normal. The
attenuation is the albedo: with this cosine-weighted sampling the BRDF and the
sampling density cancel, so no extra ``1/pi`` factor appears.

When ``hemisphere`` is set, the older uniform-hemisphere distribution
(``random_in_hemisphere``) is used instead.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.vec3 import Color
    >>> from pathtracer.materials.lambertian import Lambertian
    >>> material = Lambertian(Color(0.8, 0.3, 0.3))
    >>> # result = material.scatter(ray_in, rec, np.random.default_rng(0))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from pathtracer.core.ray import Ray, random_in_hemisphere, random_unit_vector
from pathtracer.core.vec3 import Color
from pathtracer.materials.material import (
    MaterialType,
    ScatterResult,
    as_color,
)

if TYPE_CHECKING:
    from pathtracer.geometry.sphere import HitRecord


@dataclass(frozen=True)
class Lambertian:
    """Lambertian (ideal diffuse) material properties.

    Attributes:
        albedo: The diffuse reflectance color (RGB). Components are usually
            in [0, 1]; larger values are accepted and brighten each bounce.
        hemisphere: Sample a uniform hemisphere around the normal instead of
            the cosine-weighted ``normal + random_unit_vector``.
    """

    albedo: Color
    hemisphere: bool = False

    material_type: ClassVar[MaterialType] = MaterialType.LAMBERTIAN

    def __post_init__(self) -> None:
        object.__setattr__(self, "albedo", as_color(self.albedo))

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterResult:
        """Scatter a ray diffusely off the surface.

        Lambertian surfaces never absorb.

        Args:
            ray_in: The incoming ray (unused; diffuse scattering ignores it).
            rec: The hit record at the surface.
            rng: The random generator to draw the direction from.

        Returns:
            The attenuation (albedo) and the scattered ray from the hit point.
        """
        if self.hemisphere:
            scatter_direction = random_in_hemisphere(rec.normal, rng)
        else:
            scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can nearly cancel the normal
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterResult(
            attenuation=self.albedo,
            scattered=Ray(rec.point, scatter_direction),
        )

    def params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"albedo": list(self.albedo)}
        if self.hemisphere:
            params["hemisphere"] = True
        return params
