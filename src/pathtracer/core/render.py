"""Sampling loop turning a scene and camera into an image buffer.

For every pixel, ``samples_per_pixel`` camera rays are jittered uniformly
within the pixel footprint, traced with ``ray_color`` and averaged. Scanlines
are visited from the top of the image (largest ``v``) to the bottom, pixels
left to right, and samples in order, all drawing from the one generator passed
in. The same seed therefore always produces the same image.

The returned buffer holds averaged linear color; gamma correction and
quantization happen in ``pathtracer.preview.export``.

Example:
    >>> import numpy as np
    >>> from pathtracer.core.render import RenderSettings, render_image
    >>> from pathtracer.scene.default_scene import create_default_scene
    >>> scene, camera = create_default_scene()
    >>> settings = RenderSettings(image_width=40, samples_per_pixel=4, max_depth=10)
    >>> image = render_image(scene, camera, settings, np.random.default_rng(1))
    >>> image.shape
    (22, 40, 3)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt

from pathtracer.camera.pinhole import DEFAULT_ASPECT_RATIO, PinholeCamera
from pathtracer.core.integrator import MAX_DEPTH, ray_color
from pathtracer.core.vec3 import Color
from pathtracer.scene.intersection import Scene

# Type alias for progress callback
# Callback receives (scanlines_remaining, total_scanlines)
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class RenderSettings:
    """Image and sampling configuration.

    Attributes:
        image_width: Image width in pixels.
        aspect_ratio: Width divided by height; the height is derived.
        samples_per_pixel: Number of jittered samples averaged per pixel.
        max_depth: Maximum number of ray bounces.
        seed: Seed for ``numpy.random.default_rng``. None draws fresh entropy.
    """

    image_width: int = 400
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    samples_per_pixel: int = 100
    max_depth: int = MAX_DEPTH
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.image_width < 2:
            raise ValueError(f"Image width must be at least 2, got {self.image_width}")
        if self.aspect_ratio <= 0.0:
            raise ValueError(f"Aspect ratio must be positive, got {self.aspect_ratio}")
        if self.image_height < 2:
            raise ValueError(
                f"Derived image height {self.image_height} is below 2; "
                "increase the width or lower the aspect ratio"
            )
        if self.samples_per_pixel < 1:
            raise ValueError(
                f"Samples per pixel must be at least 1, got {self.samples_per_pixel}"
            )
        if self.max_depth < 0:
            raise ValueError(f"Max depth must be non-negative, got {self.max_depth}")

    @property
    def image_height(self) -> int:
        """Image height in pixels, ``int(image_width / aspect_ratio)``."""
        return int(self.image_width / self.aspect_ratio)

    def make_rng(self) -> np.random.Generator:
        """Create the random generator for a render with these settings."""
        return np.random.default_rng(self.seed)


def sample_pixel(
    i: int,
    j: int,
    scene: Scene,
    camera: PinholeCamera,
    settings: RenderSettings,
    rng: np.random.Generator,
) -> Color:
    """Sum ``samples_per_pixel`` jittered radiance samples for one pixel.

    Args:
        i: Pixel column, 0 = left.
        j: Pixel row in camera space, 0 = bottom.
        scene: The scene to render.
        camera: The camera generating primary rays.
        settings: Image and sampling configuration.
        rng: The random generator for jitter and scattering.

    Returns:
        The accumulated (not yet averaged) color.
    """
    width = settings.image_width
    height = settings.image_height

    pixel_color = Color(0.0, 0.0, 0.0)
    for _ in range(settings.samples_per_pixel):
        u = (i + rng.uniform(0.0, 1.0)) / (width - 1)
        v = (j + rng.uniform(0.0, 1.0)) / (height - 1)
        ray = camera.get_ray(u, v)
        pixel_color = pixel_color + ray_color(ray, scene, settings.max_depth, rng)
    return pixel_color


def render_image(
    scene: Scene,
    camera: PinholeCamera,
    settings: RenderSettings,
    rng: Optional[np.random.Generator] = None,
    progress: Optional[ProgressCallback] = None,
) -> npt.NDArray[np.float64]:
    """Render the scene into an averaged linear color buffer.

    Args:
        scene: The scene to render.
        camera: The camera generating primary rays.
        settings: Image and sampling configuration.
        rng: The random generator. Defaults to ``settings.make_rng()``.
        progress: Optional callback invoked before each scanline with
            ``(scanlines_remaining, total_scanlines)``.

    Returns:
        Array of shape (height, width, 3). Row 0 is the top scanline.
    """
    if rng is None:
        rng = settings.make_rng()

    width = settings.image_width
    height = settings.image_height
    scale = 1.0 / settings.samples_per_pixel

    image = np.zeros((height, width, 3), dtype=np.float64)

    for j in range(height - 1, -1, -1):
        if progress is not None:
            progress(j, height)
        row = height - 1 - j
        for i in range(width):
            pixel_color = sample_pixel(i, j, scene, camera, settings, rng)
            image[row, i, :] = pixel_color.to_array() * scale

    return image
