"""Three-sphere demonstration scene.

The default scene is a large yellowish ground sphere with three small spheres
resting on it at z = -1:
- Center: red-brown diffuse
- Left: silver metal, slightly fuzzy
- Right: gold metal, fully fuzzy

The camera sits at the origin looking down -z with a 2-unit-high viewport at
unit focal length.

Example:
    >>> from pathtracer.scene.default_scene import create_default_scene
    >>> scene, camera = create_default_scene()
    >>> len(scene)
    4
"""

from dataclasses import dataclass
from typing import Optional

from pathtracer.camera.pinhole import DEFAULT_ASPECT_RATIO, PinholeCamera
from pathtracer.scene.intersection import Scene
from pathtracer.scene.manager import SceneManager

# =============================================================================
# Default Scene Parameters
# =============================================================================


@dataclass
class DefaultSceneParams:
    """Parameters for configuring the three-sphere scene.

    All parameters default to the classic configuration.

    Attributes:
        ground_albedo: RGB albedo of the ground sphere.
        center_albedo: RGB albedo of the diffuse center sphere.
        left_albedo: RGB albedo of the left metal sphere.
        left_fuzz: Fuzz of the left metal sphere.
        right_albedo: RGB albedo of the right metal sphere.
        right_fuzz: Fuzz of the right metal sphere.

    Example:
        >>> params = DefaultSceneParams()
        >>> params.left_fuzz
        0.3
        >>> mirror = DefaultSceneParams(left_fuzz=0.0, right_fuzz=0.0)
    """

    ground_albedo: tuple[float, float, float] = (0.8, 0.8, 0.0)
    center_albedo: tuple[float, float, float] = (0.7, 0.3, 0.3)
    left_albedo: tuple[float, float, float] = (0.8, 0.8, 0.8)
    left_fuzz: float = 0.3
    right_albedo: tuple[float, float, float] = (0.8, 0.6, 0.2)
    right_fuzz: float = 1.0


# =============================================================================
# Default Scene Geometry
# =============================================================================

GROUND_CENTER = (0.0, -100.5, -1.0)
GROUND_RADIUS = 100.0

SMALL_SPHERE_RADIUS = 0.5
CENTER_SPHERE_CENTER = (0.0, 0.0, -1.0)
LEFT_SPHERE_CENTER = (-1.0, 0.0, -1.0)
RIGHT_SPHERE_CENTER = (1.0, 0.0, -1.0)


def build_default_scene(params: Optional[DefaultSceneParams] = None) -> SceneManager:
    """Populate a SceneManager with the three-sphere scene.

    Args:
        params: Optional DefaultSceneParams for customizing colors and fuzz.
            If None, uses default DefaultSceneParams().

    Returns:
        The populated manager, useful for saving the scene as JSON.

    Raises:
        ValueError: If an albedo does not have 3 components.
    """
    if params is None:
        params = DefaultSceneParams()

    manager = SceneManager()

    ground_mat = manager.add_lambertian_material(albedo=params.ground_albedo)
    center_mat = manager.add_lambertian_material(albedo=params.center_albedo)
    left_mat = manager.add_metal_material(albedo=params.left_albedo, fuzz=params.left_fuzz)
    right_mat = manager.add_metal_material(albedo=params.right_albedo, fuzz=params.right_fuzz)

    manager.add_sphere(GROUND_CENTER, GROUND_RADIUS, ground_mat)
    manager.add_sphere(CENTER_SPHERE_CENTER, SMALL_SPHERE_RADIUS, center_mat)
    manager.add_sphere(LEFT_SPHERE_CENTER, SMALL_SPHERE_RADIUS, left_mat)
    manager.add_sphere(RIGHT_SPHERE_CENTER, SMALL_SPHERE_RADIUS, right_mat)

    return manager


def create_default_scene(
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    params: Optional[DefaultSceneParams] = None,
) -> tuple[Scene, PinholeCamera]:
    """Create the three-sphere scene and its camera.

    Args:
        aspect_ratio: Width divided by height of the output image.
        params: Optional DefaultSceneParams.

    Returns:
        A tuple of (Scene, PinholeCamera). Spheres are in the order ground,
        center, left, right.

    Example:
        >>> scene, camera = create_default_scene()
        >>> camera.origin
        Vec3(0.0, 0.0, 0.0)
    """
    manager = build_default_scene(params)
    return manager.scene, manager.make_camera(aspect_ratio)
