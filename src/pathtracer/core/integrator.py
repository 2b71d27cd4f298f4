"""Path tracing integrator.

``ray_color`` estimates the radiance arriving along a ray by bouncing it
through the scene. Light picks up each surface's attenuation multiplicatively,
and the only light source is the sky gradient seen by rays that escape.

Each bounce is one of three terminal cases or a transition to the next bounce:
    1. depth <= 0: bounce budget exhausted, return black.
    2. miss: return throughput times the sky gradient for the ray direction.
    3. hit, material absorbs: return black.
    4. hit, material scatters: multiply throughput by the attenuation and
       continue with the scattered ray and depth - 1.

The result equals ``attenuation * ray_color(scattered, depth - 1)`` applied
recursively, but the bounces run in a loop so the explicit depth argument is
the only limit on path length.

Example:
    >>> import numpy as np
    >>> from pathtracer.camera.pinhole import PinholeCamera
    >>> from pathtracer.core.integrator import ray_color
    >>> from pathtracer.scene.default_scene import create_default_scene
    >>> scene, camera = create_default_scene()
    >>> rng = np.random.default_rng(7)
    >>> color = ray_color(camera.get_ray(0.5, 0.5), scene, 50, rng)
"""

import math

import numpy as np

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Color
from pathtracer.scene.intersection import Scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Maximum ray bounces (path length)
MAX_DEPTH = 50

# t_min excludes self-intersection at the surface a ray leaves from
T_MIN = 0.0001
T_MAX = math.inf

# Sky gradient endpoints
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def background_color(ray: Ray) -> Color:
    """Sky gradient for a ray that escapes the scene.

    Blends white at the bottom to sky blue at the top using
    ``t = 0.5 * (unit_direction.y + 1)``.

    Args:
        ray: The escaping ray.

    Returns:
        ``(1 - t) * white + t * sky_blue``.
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, scene: Scene, depth: int, rng: np.random.Generator) -> Color:
    """Compute the radiance carried back along ``ray``.

    Args:
        ray: The ray to trace.
        scene: The geometry to intersect.
        depth: Remaining bounce budget. A value of 0 or less returns black
            without touching the scene.
        rng: The random generator passed on to material scattering.

    Returns:
        The estimated color for this ray.
    """
    throughput = WHITE

    while depth > 0:
        rec = scene.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return throughput * background_color(ray)

        if rec.material is None:
            return BLACK

        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            # Absorbed
            return BLACK

        throughput = throughput * result.attenuation
        ray = result.scattered
        depth -= 1

    return BLACK
