"""Pinhole camera model for perspective projection ray generation.

The camera is described by its derived viewport geometry: an origin, the
lower-left corner of the image plane and the ``horizontal`` / ``vertical``
vectors spanning it. ``get_ray(u, v)`` maps normalized image-plane
coordinates ``u, v`` in [0, 1] to a world-space ray.

Two constructors are provided:
- ``from_viewport``: axis-aligned camera looking down -z, built from aspect
  ratio, viewport height and focal length.
- ``look_at``: camera positioned with lookfrom/lookat/vup and a vertical
  field of view, using an orthonormal basis (u, v, w):
    - w: points from lookat toward lookfrom (opposite view direction)
    - u: points right in the image plane
    - v: points up in the image plane

Example:
    >>> from pathtracer.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera.from_viewport(aspect_ratio=16.0 / 9.0)
    >>> ray = camera.get_ray(0.5, 0.5)  # Ray through image center
    >>> ray.direction
    Vec3(0.0, 0.0, -1.0)
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from pathtracer.core.ray import Ray
from pathtracer.core.vec3 import Point3, Vec3

# Default viewport used by the renderer
DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_VIEWPORT_HEIGHT = 2.0
DEFAULT_FOCAL_LENGTH = 1.0


def _as_vec3(value: Sequence[float]) -> Vec3:
    if isinstance(value, Vec3):
        return value
    return Vec3(value[0], value[1], value[2])


@dataclass(frozen=True)
class PinholeCamera:
    """A pinhole (perspective) camera with precomputed viewport geometry.

    Attributes:
        origin: Camera position in world space.
        lower_left_corner: Lower-left corner of the viewport in world space.
        horizontal: Vector spanning the full viewport width.
        vertical: Vector spanning the full viewport height.
    """

    origin: Point3
    lower_left_corner: Point3
    horizontal: Vec3
    vertical: Vec3

    @classmethod
    def from_viewport(
        cls,
        aspect_ratio: float = DEFAULT_ASPECT_RATIO,
        viewport_height: float = DEFAULT_VIEWPORT_HEIGHT,
        focal_length: float = DEFAULT_FOCAL_LENGTH,
        origin: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> "PinholeCamera":
        """Build a camera looking down the -z axis.

        The viewport sits ``focal_length`` in front of the origin:
            lower_left_corner = origin - horizontal/2 - vertical/2 - (0, 0, focal_length)

        Args:
            aspect_ratio: Width divided by height of the output image.
            viewport_height: Height of the viewport in world units.
            focal_length: Distance from the origin to the viewport.
            origin: Camera position.

        Returns:
            The derived camera.
        """
        origin_vec = _as_vec3(origin)
        viewport_width = aspect_ratio * viewport_height

        horizontal = Vec3(viewport_width, 0.0, 0.0)
        vertical = Vec3(0.0, viewport_height, 0.0)
        lower_left_corner = (
            origin_vec - horizontal / 2.0 - vertical / 2.0 - Vec3(0.0, 0.0, focal_length)
        )

        return cls(
            origin=origin_vec,
            lower_left_corner=lower_left_corner,
            horizontal=horizontal,
            vertical=vertical,
        )

    @classmethod
    def look_at(
        cls,
        lookfrom: Sequence[float],
        lookat: Sequence[float],
        vup: Sequence[float] = (0.0, 1.0, 0.0),
        vfov: float = 90.0,
        aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    ) -> "PinholeCamera":
        """Build a camera from a position, a target and a vertical field of view.

        The viewport is placed at unit distance along -w. With
        ``lookfrom=(0, 0, 0)``, ``lookat=(0, 0, -1)`` and ``vfov=90`` this gives
        the same camera as ``from_viewport()``.

        Args:
            lookfrom: Camera position in world space.
            lookat: Point the camera is looking at.
            vup: Up direction for camera orientation (typically (0, 1, 0)).
            vfov: Vertical field of view in degrees.
            aspect_ratio: Width divided by height of the output image.

        Returns:
            The derived camera.
        """
        theta = math.radians(vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        origin = _as_vec3(lookfrom)
        w = (origin - _as_vec3(lookat)).unit_vector()
        u = _as_vec3(vup).cross(w).unit_vector()
        v = w.cross(u)

        horizontal = u * viewport_width
        vertical = v * viewport_height
        lower_left_corner = origin - horizontal / 2.0 - vertical / 2.0 - w

        return cls(
            origin=origin,
            lower_left_corner=lower_left_corner,
            horizontal=horizontal,
            vertical=vertical,
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate the ray through viewport coordinates ``(u, v)``.

        Args:
            u: Horizontal coordinate, 0 = left edge, 1 = right edge.
            v: Vertical coordinate, 0 = bottom edge, 1 = top edge.

        Returns:
            A ray from the camera origin through
            ``lower_left_corner + u*horizontal + v*vertical``. The direction is
            not normalized.
        """
        return Ray(
            self.origin,
            self.lower_left_corner + self.horizontal * u + self.vertical * v - self.origin,
        )
