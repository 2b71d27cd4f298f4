"""Scene manager for coordinating spheres and shared materials.

The SceneManager maintains:
- A unified material_id space across all material types
- The list of spheres, each referring to a material by id
- An optional camera description
- Scene serialization to and from plain dicts / JSON files

Spheres that name the same material_id share one immutable material object.

Example:
    >>> from pathtracer.scene.manager import SceneManager
    >>> manager = SceneManager()
    >>> mat_id = manager.add_lambertian_material(albedo=(0.8, 0.3, 0.3))
    >>> manager.add_sphere(center=(0, 0, -1), radius=0.5, material_id=mat_id)
    0
    >>> scene = manager.scene
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from pathtracer.camera.pinhole import DEFAULT_ASPECT_RATIO, PinholeCamera
from pathtracer.core.vec3 import Vec3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials import Dielectric, Lambertian, Material, MaterialType, Metal
from pathtracer.scene.intersection import Scene

Triple = tuple[float, float, float]


@dataclass
class MaterialInfo:
    """Information about a registered material.

    Attributes:
        material_id: The unified material ID.
        material_type: The type of material (Lambertian, Metal, Dielectric).
        material: The shared material object.
    """

    material_id: int
    material_type: MaterialType
    material: Material


@dataclass
class SphereInfo:
    """Information about a sphere in the scene.

    Attributes:
        sphere_index: The index of the sphere in the scene.
        center: The center of the sphere.
        radius: The radius of the sphere.
        material_id: The material ID assigned to the sphere.
    """

    sphere_index: int
    center: Triple
    radius: float
    material_id: int


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        materials: List of material configurations, e.g.
            ``{"type": "metal", "albedo": [0.8, 0.8, 0.8], "fuzz": 0.3}``.
            A material's ID is its position in this list.
        spheres: List of sphere configurations, e.g.
            ``{"center": [0, 0, -1], "radius": 0.5, "material_id": 0}``.
        camera: Optional camera configuration. Either look-at form
            (``lookfrom``, ``lookat``, ``vup``, ``vfov``) or viewport form
            (``viewport_height``, ``focal_length``, ``origin``).
    """

    materials: list[dict[str, Any]] = field(default_factory=list)
    spheres: list[dict[str, Any]] = field(default_factory=list)
    camera: Optional[dict[str, Any]] = None


def _triple(values: Any, name: str) -> Triple:
    try:
        count = len(values)
    except TypeError:
        raise ValueError(f"{name} must be a sequence of 3 numbers, got {values!r}") from None
    if count != 3:
        raise ValueError(f"{name} must have 3 components, got {count}")
    try:
        return (float(values[0]), float(values[1]), float(values[2]))
    except (TypeError, ValueError):
        raise ValueError(f"{name} must contain numbers, got {values!r}") from None


class SceneManager:
    """Scene builder with a unified material registry.

    Attributes:
        materials: List of MaterialInfo for all registered materials.
        spheres: List of SphereInfo for all spheres in the scene.
        camera_config: Camera description used by ``make_camera``, or None
            for the default viewport camera.

    Example:
        >>> manager = SceneManager()
        >>> ground = manager.add_lambertian_material(albedo=(0.8, 0.8, 0.0))
        >>> gold = manager.add_metal_material(albedo=(0.8, 0.6, 0.2), fuzz=0.3)
        >>> glass = manager.add_dielectric_material(ir=1.5)
        >>> manager.add_sphere((0, -100.5, -1), 100, ground)
        0
        >>> manager.add_sphere((1, 0, -1), 0.5, gold)
        1
        >>> manager.add_sphere((-1, 0, -1), 0.5, glass)
        2
    """

    def __init__(self) -> None:
        """Initialize an empty scene."""
        self.materials: list[MaterialInfo] = []
        self.spheres: list[SphereInfo] = []
        self.camera_config: Optional[dict[str, Any]] = None
        self._scene = Scene()

    def clear(self) -> None:
        """Clear the entire scene (spheres, materials and camera)."""
        self.materials.clear()
        self.spheres.clear()
        self.camera_config = None
        self._scene.clear()

    @property
    def scene(self) -> Scene:
        """The Scene holding every sphere added so far."""
        return self._scene

    # =========================================================================
    # Material Management
    # =========================================================================

    def add_material(self, material: Material) -> int:
        """Register a material object and return its unified material ID."""
        material_id = len(self.materials)
        self.materials.append(
            MaterialInfo(
                material_id=material_id,
                material_type=material.material_type,
                material=material,
            )
        )
        return material_id

    def add_lambertian_material(self, albedo: Triple, hemisphere: bool = False) -> int:
        """Add a Lambertian (diffuse) material.

        Args:
            albedo: The diffuse reflectance color as (R, G, B) tuple.
            hemisphere: Use uniform hemisphere sampling instead of the
                cosine-weighted default.

        Returns:
            The unified material ID for this material.

        Raises:
            ValueError: If the albedo does not have 3 components.
        """
        color = Vec3(*_triple(albedo, "albedo"))
        return self.add_material(Lambertian(color, hemisphere=hemisphere))

    def add_metal_material(self, albedo: Triple, fuzz: float = 0.0) -> int:
        """Add a metal (specular reflective) material.

        Args:
            albedo: The reflective color as (R, G, B) tuple.
            fuzz: Reflection perturbation radius, normally in [0, 1]. Default is 0
                (perfect mirror).

        Returns:
            The unified material ID for this material.

        Raises:
            ValueError: If the albedo does not have 3 components.
        """
        color = Vec3(*_triple(albedo, "albedo"))
        return self.add_material(Metal(color, fuzz=fuzz))

    def add_dielectric_material(self, ir: float = 1.5) -> int:
        """Add a dielectric (glass/water) material.

        Args:
            ir: Index of refraction. Default is 1.5 (typical glass).

        Returns:
            The unified material ID for this material.

        Raises:
            ValueError: If the index of refraction is zero.
        """
        return self.add_material(Dielectric(ir))

    def get_material(self, material_id: int) -> Material:
        """Look up a registered material.

        Raises:
            ValueError: If no material has this ID.
        """
        if not 0 <= material_id < len(self.materials):
            raise ValueError(
                f"Unknown material ID {material_id} "
                f"({len(self.materials)} materials registered)"
            )
        return self.materials[material_id].material

    def get_material_count(self) -> int:
        """Get the number of registered materials."""
        return len(self.materials)

    # =========================================================================
    # Sphere Management
    # =========================================================================

    def add_sphere(self, center: Triple, radius: float, material_id: int) -> int:
        """Add a sphere using a registered material.

        Args:
            center: The center of the sphere.
            radius: The radius of the sphere.
            material_id: ID returned by one of the ``add_*_material`` methods.

        Returns:
            The index of the sphere in the scene.

        Raises:
            ValueError: If the material ID is unknown.
        """
        material = self.get_material(material_id)
        center = _triple(center, "center")

        sphere_index = len(self.spheres)
        self._scene.add(Sphere(Vec3(*center), float(radius), material))
        self.spheres.append(
            SphereInfo(
                sphere_index=sphere_index,
                center=center,
                radius=float(radius),
                material_id=material_id,
            )
        )
        return sphere_index

    def add_lambertian_sphere(self, center: Triple, radius: float, albedo: Triple) -> int:
        """Add a sphere with a new Lambertian material. Returns the sphere index."""
        return self.add_sphere(center, radius, self.add_lambertian_material(albedo))

    def add_metal_sphere(
        self, center: Triple, radius: float, albedo: Triple, fuzz: float = 0.0
    ) -> int:
        """Add a sphere with a new metal material. Returns the sphere index."""
        return self.add_sphere(center, radius, self.add_metal_material(albedo, fuzz))

    def add_dielectric_sphere(self, center: Triple, radius: float, ir: float = 1.5) -> int:
        """Add a sphere with a new dielectric material. Returns the sphere index."""
        return self.add_sphere(center, radius, self.add_dielectric_material(ir))

    def get_sphere_count(self) -> int:
        """Get the number of spheres in the scene."""
        return len(self.spheres)

    # =========================================================================
    # Camera
    # =========================================================================

    def make_camera(self, aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> PinholeCamera:
        """Build the camera described by ``camera_config``.

        Args:
            aspect_ratio: Width divided by height of the output image.

        Returns:
            A look-at camera when the config has ``lookfrom``, otherwise a
            viewport camera (the default when no config is set).
        """
        config = self.camera_config or {}
        if "lookfrom" in config:
            return PinholeCamera.look_at(
                lookfrom=_triple(config["lookfrom"], "lookfrom"),
                lookat=_triple(config.get("lookat", [0.0, 0.0, -1.0]), "lookat"),
                vup=_triple(config.get("vup", [0.0, 1.0, 0.0]), "vup"),
                vfov=float(config.get("vfov", 90.0)),
                aspect_ratio=aspect_ratio,
            )
        return PinholeCamera.from_viewport(
            aspect_ratio=aspect_ratio,
            viewport_height=float(config.get("viewport_height", 2.0)),
            focal_length=float(config.get("focal_length", 1.0)),
            origin=_triple(config.get("origin", [0.0, 0.0, 0.0]), "origin"),
        )

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object."""
        config = SceneConfig()

        for info in self.materials:
            config.materials.append(
                {"type": info.material_type.name.lower(), **info.material.params()}
            )

        for sphere in self.spheres:
            config.spheres.append(
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "material_id": sphere.material_id,
                }
            )

        if self.camera_config is not None:
            config.camera = dict(self.camera_config)

        return config

    def from_config(self, config: SceneConfig) -> None:
        """Load a scene from a configuration object.

        Replaces the current scene. The whole configuration is loaded into a
        staging manager first, so a bad configuration leaves this manager
        unchanged. Materials are loaded before spheres so that sphere
        ``material_id`` values refer to positions in ``config.materials``.

        Raises:
            ValueError: If the configuration contains an unknown material type,
                an unknown material ID or malformed values.
        """
        staged = SceneManager()
        try:
            staged._load_config(config)
        except TypeError as e:
            raise ValueError(f"Invalid scene configuration: {e}") from e

        self.clear()
        self.materials.extend(staged.materials)
        self.spheres.extend(staged.spheres)
        for sphere in staged.scene:
            self._scene.add(sphere)
        self.camera_config = staged.camera_config

    def _load_config(self, config: SceneConfig) -> None:
        for mat_config in config.materials:
            mat_type = str(mat_config.get("type", "")).lower()
            if mat_type == "lambertian":
                albedo = _triple(mat_config.get("albedo", [0.5, 0.5, 0.5]), "albedo")
                self.add_lambertian_material(
                    albedo, hemisphere=bool(mat_config.get("hemisphere", False))
                )
            elif mat_type == "metal":
                albedo = _triple(mat_config.get("albedo", [0.8, 0.8, 0.8]), "albedo")
                self.add_metal_material(albedo, float(mat_config.get("fuzz", 0.0)))
            elif mat_type == "dielectric":
                self.add_dielectric_material(float(mat_config.get("ir", 1.5)))
            else:
                raise ValueError(f"Unknown material type: {mat_type}")

        for sphere_config in config.spheres:
            center = _triple(sphere_config.get("center", [0.0, 0.0, 0.0]), "center")
            radius = float(sphere_config.get("radius", 1.0))
            material_id = int(sphere_config.get("material_id", 0))
            self.add_sphere(center, radius, material_id)

        if config.camera is not None:
            self.camera_config = dict(config.camera)

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        config = self.to_config()
        data: dict[str, Any] = {
            "materials": config.materials,
            "spheres": config.spheres,
        }
        if config.camera is not None:
            data["camera"] = config.camera
        return data

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load a scene from a dictionary.

        Args:
            data: Dictionary with 'materials', 'spheres' and optional 'camera'
                keys.
        """
        config = SceneConfig(
            materials=data.get("materials", []),
            spheres=data.get("spheres", []),
            camera=data.get("camera"),
        )
        self.from_config(config)

    def save_json(self, filepath: Union[str, Path]) -> None:
        """Write the scene description to a JSON file."""
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_json(cls, filepath: Union[str, Path]) -> "SceneManager":
        """Create a manager from a JSON scene description.

        Raises:
            ValueError: If the file is not valid JSON or describes an invalid
                scene.
        """
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        manager = cls()
        manager.from_dict(data)
        return manager

    def __repr__(self) -> str:
        return (
            f"SceneManager(materials={len(self.materials)}, "
            f"spheres={len(self.spheres)})"
        )
