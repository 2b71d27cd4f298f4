"""Matplotlib-based preview display for rendered images.

The preview shows exactly the 8-bit values the exporters write, so what is
on screen matches the PPM/PNG output.

Example:
    >>> from pathtracer.preview.display import show_preview
    >>> # image = render_image(scene, camera, settings)
    >>> # show_preview(image, samples_per_pixel=settings.samples_per_pixel)
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import numpy.typing as npt

from pathtracer.preview.export import image_to_uint8


def show_preview(
    image: npt.NDArray[np.floating],
    *,
    samples_per_pixel: Optional[int] = None,
    title: Optional[str] = None,
    figsize: tuple[float, float] = (8, 4.5),
    block: bool = True,
) -> None:
    """Display a rendered image as a Matplotlib figure.

    Args:
        image: Averaged linear image of shape (H, W, 3); row 0 is the top.
        samples_per_pixel: Sample count shown in the default title.
        title: Custom title (overrides the default).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = image_to_uint8(image)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")

    if title is None:
        height, width, _ = display_image.shape
        title = f"Render Preview - {width}x{height}"
        if samples_per_pixel is not None:
            title += f", {samples_per_pixel} SPP"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
