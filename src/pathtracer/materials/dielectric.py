"""Dielectric (glass/water) material implementation.

A dielectric always transmits: the incoming unit direction is bent with
Snell's law using the ratio ``1 / ir`` when entering the surface and ``ir``
when leaving it. There is no Fresnel term and no reflection branch, and the
refraction formula masks total internal reflection rather than detecting it
(see ``pathtracer.core.ray.refract``). No random numbers are drawn.

Common indices of refraction:
    - Air: 1.0
    - Water: 1.33
    - Glass: 1.5
    - Diamond: 2.4
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from pathtracer.core.ray import Ray, refract
from pathtracer.core.vec3 import Color
from pathtracer.materials.material import MaterialType, ScatterResult

if TYPE_CHECKING:
    from pathtracer.geometry.sphere import HitRecord


@dataclass(frozen=True)
class Dielectric:
    """Dielectric (refractive) material properties.

    Attributes:
        ir: Index of refraction relative to the surrounding medium.
    """

    ir: float = 1.5

    material_type: ClassVar[MaterialType] = MaterialType.DIELECTRIC

    def __post_init__(self) -> None:
        # Entering a zero-index surface would divide by zero
        if self.ir == 0.0:
            raise ValueError("Index of refraction must be non-zero")

    def refraction_ratio(self, front_face: bool) -> float:
        """Return ``etai_over_etat`` for a hit on the given side of the surface."""
        return 1.0 / self.ir if front_face else self.ir

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: np.random.Generator,
    ) -> ScatterResult:
        """Refract the incoming ray through the surface.

        Args:
            ray_in: The incoming ray.
            rec: The hit record at the surface.
            rng: Unused; accepted so every material shares one signature.

        Returns:
            White attenuation and the refracted ray. Dielectrics never absorb.
        """
        unit_direction = ray_in.direction.unit_vector()
        refracted = refract(unit_direction, rec.normal, self.refraction_ratio(rec.front_face))
        return ScatterResult(
            attenuation=Color(1.0, 1.0, 1.0),
            scattered=Ray(rec.point, refracted),
        )

    def params(self) -> dict[str, Any]:
        return {"ir": self.ir}
