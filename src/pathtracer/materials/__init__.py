"""Materials module for light scattering models.

Components:
    lambertian: Ideal diffuse reflection
    metal: Specular reflection with optional fuzz
    dielectric: Glass-like refraction
    material: Shared types (MaterialType, ScatterResult) and validation

Each material provides ``scatter(ray_in, rec, rng)`` returning a
``ScatterResult`` (attenuation color and outgoing ray) or None when the ray is
absorbed. Materials hold no mutable state and may be shared by any number of
spheres.
"""

from typing import Union

from .dielectric import Dielectric
from .lambertian import Lambertian
from .material import MaterialType, ScatterResult, as_color
from .metal import Metal

# Closed set of materials understood by the renderer
Material = Union[Lambertian, Metal, Dielectric]

__all__ = [
    "Material",
    "MaterialType",
    "ScatterResult",
    "Lambertian",
    "Metal",
    "Dielectric",
    "as_color",
]
