"""Image export utilities for rendered images.

Rendered buffers hold averaged linear color. Before writing, each channel is
gamma corrected with gamma 2 (square root), clamped to [0, 0.999], scaled by
256 and truncated, giving integers in [0, 255]. A channel that averages to
exactly 1.0 maps to 255.

Supported formats:
    - PPM (ASCII "P3", written to any text stream)
    - PNG (8-bit via Pillow)

Example:
    >>> import sys
    >>> from pathtracer.preview.export import write_ppm
    >>> # write_ppm(image, sys.stdout)
"""

from pathlib import Path
from typing import TextIO, Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

# Upper clamp keeps 256 * value below 256 so truncation tops out at 255
MAX_INTENSITY = 0.999


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert an averaged linear image to 8-bit channel values.

    Applies ``sqrt`` (gamma 2), clamps to ``[0, MAX_INTENSITY]``, multiplies by
    256 and truncates. NaN channels come out as 0, the same result a
    saturating float-to-integer cast gives.

    Args:
        image: Linear image array of shape (H, W, 3).

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    with np.errstate(invalid="ignore"):
        # Negative averages only arise from NaN/Inf arithmetic; sqrt maps them to NaN
        corrected = np.sqrt(np.asarray(image, dtype=np.float64))
    clamped = np.clip(corrected, 0.0, MAX_INTENSITY)
    clamped = np.nan_to_num(clamped, nan=0.0)
    return (256.0 * clamped).astype(np.uint8)


def write_ppm(image: npt.NDArray[np.floating], stream: TextIO) -> None:
    """Write an image as ASCII PPM ("P3").

    The header is ``P3``, ``<width> <height>`` and ``255``, followed by one
    ``R G B`` line per pixel, rows top to bottom.

    Args:
        image: Averaged linear image of shape (H, W, 3); row 0 is the top.
        stream: Text stream to write to (e.g. ``sys.stdout``).
    """
    pixels = image_to_uint8(image)
    height, width, _ = pixels.shape

    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")


def save_ppm(image: npt.NDArray[np.floating], filepath: Union[str, Path]) -> None:
    """Save an image as an ASCII PPM file."""
    with open(filepath, "w", encoding="ascii") as f:
        write_ppm(image, f)


def save_png(image: npt.NDArray[np.floating], filepath: Union[str, Path]) -> None:
    """Save an image as an 8-bit PNG file.

    Uses the same gamma-2 quantization as the PPM writer.

    Args:
        image: Averaged linear image of shape (H, W, 3); row 0 is the top.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(filepath)


def save_image(image: npt.NDArray[np.floating], filepath: Union[str, Path]) -> None:
    """Save an image, choosing PNG or PPM from the file extension.

    Raises:
        ValueError: If the extension is neither ``.png`` nor ``.ppm``.
    """
    suffix = Path(filepath).suffix.lower()
    if suffix == ".png":
        save_png(image, filepath)
    elif suffix == ".ppm":
        save_ppm(image, filepath)
    else:
        raise ValueError(f"Unsupported image format: {suffix or filepath}")
