"""Camera module for primary ray generation.

Components:
    pinhole: Simple pinhole (perspective) camera model

Ray generation uses normalized image-plane coordinates:
    u in [0, 1]: left to right across image
    v in [0, 1]: bottom to top across image
"""

from .pinhole import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_VIEWPORT_HEIGHT,
    PinholeCamera,
)

__all__ = [
    "PinholeCamera",
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_VIEWPORT_HEIGHT",
    "DEFAULT_FOCAL_LENGTH",
]
