"""Shared pieces of the material model.

Every material exposes the same capability:

    scatter(ray_in, rec, rng) -> ScatterResult | None

``None`` means the ray was absorbed. The set of materials is closed
(Lambertian, Metal, Dielectric) and each one is identified by a
``MaterialType`` used for scene serialization.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color


class MaterialType(IntEnum):
    """Enumeration of supported material types."""

    LAMBERTIAN = 0
    METAL = 1
    DIELECTRIC = 2


@dataclass(frozen=True)
class ScatterResult:
    """Outcome of a scattering event.

    Attributes:
        attenuation: Color multiplied into the radiance carried by ``scattered``.
        scattered: The outgoing ray, starting at the hit point.
    """

    attenuation: Color
    scattered: Ray


def as_color(value: Sequence[float]) -> Color:
    """Convert an (R, G, B) sequence or Color to a Color."""
    if isinstance(value, Color):
        return value
    return Color(value[0], value[1], value[2])
