"""Preview module for output and visualization.

Components:
    export: gamma-2 quantization, ASCII PPM and PNG writers
    display: Matplotlib-based static preview

Example:
    >>> import sys
    >>> from pathtracer.preview import write_ppm, save_png
    >>> # write_ppm(image, sys.stdout)
    >>> # save_png(image, "output.png")
"""

from pathtracer.preview.display import show_preview
from pathtracer.preview.export import (
    MAX_INTENSITY,
    image_to_uint8,
    save_image,
    save_png,
    save_ppm,
    write_ppm,
)

__all__ = [
    # Display functions
    "show_preview",
    # Export functions
    "MAX_INTENSITY",
    "image_to_uint8",
    "write_ppm",
    "save_ppm",
    "save_png",
    "save_image",
]
