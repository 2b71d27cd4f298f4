"""Scene module for scene representation and construction.

Components:
    intersection: Scene container answering nearest-hit queries
    manager: Scene manager coordinating spheres, shared materials and JSON configs
    default_scene: The three-sphere demonstration scene
"""

from .default_scene import DefaultSceneParams, build_default_scene, create_default_scene
from .intersection import Scene
from .manager import MaterialInfo, SceneConfig, SceneManager, SphereInfo

__all__ = [
    # Intersection module
    "Scene",
    # Manager module
    "SceneManager",
    "MaterialInfo",
    "SphereInfo",
    "SceneConfig",
    # Default scene module
    "DefaultSceneParams",
    "build_default_scene",
    "create_default_scene",
]
