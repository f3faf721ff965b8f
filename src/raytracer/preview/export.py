"""Image export utilities for rendered images.

This module writes rendered 8-bit images to disk.

Supported formats:
    - PPM (ASCII "P3", one "r g b" line per pixel)
    - PNG (8-bit via Pillow)

Images are NumPy arrays of shape (height, width, 3) with dtype uint8, top
row first, as returned by Screen.render().

Example:
    >>> from src.raytracer.preview.export import write_ppm
    >>> from src.raytracer.core.screen import Screen
    >>>
    >>> image = screen.render(samples=16, seed=0)
    >>> write_ppm(image, "rendered.ppm")
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)

# Maximum channel value written in the PPM header
PPM_MAX_VALUE = 255


def _check_image(image: npt.NDArray[np.uint8]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected an image with dtype uint8, got {image.dtype}")


def format_ppm(image: npt.NDArray[np.uint8]) -> str:
    """Format an image as ASCII PPM (P3) text.

    The layout is a "P3" line, a "<width> <height>" line, a "255" line, then
    one "<r> <g> <b>" line per pixel in row-major order from the top row.

    Args:
        image: 8-bit RGB image of shape (H, W, 3).

    Returns:
        The PPM file contents, ending with a newline.

    Raises:
        ValueError: If the image has the wrong shape or dtype.
    """
    _check_image(image)
    height, width, _ = image.shape

    lines = ["P3", f"{width} {height}", str(PPM_MAX_VALUE)]
    lines.extend(f"{r} {g} {b}" for r, g, b in image.reshape(-1, 3).tolist())
    return "\n".join(lines) + "\n"


def write_ppm(image: npt.NDArray[np.uint8], filepath: str | Path) -> Path:
    """Write an image as an ASCII PPM (P3) file.

    Args:
        image: 8-bit RGB image of shape (H, W, 3).
        filepath: Output file path.

    Returns:
        Path to the written file.

    Raises:
        ValueError: If the image has the wrong shape or dtype.
        OSError: If the file cannot be created or written. A partially
            written file is left in place.
    """
    contents = format_ppm(image)
    output_file = Path(filepath)
    with open(output_file, "w", encoding="ascii", newline="\n") as f:
        f.write(contents)

    logger.info("Wrote PPM image to %s", output_file)
    return output_file


def save_png(image: npt.NDArray[np.uint8], filepath: str | Path) -> Path:
    """Save an image as a PNG file using Pillow.

    Args:
        image: 8-bit RGB image of shape (H, W, 3).
        filepath: Output file path (should end in .png).

    Returns:
        Path to the written file.

    Raises:
        ValueError: If the image has the wrong shape or dtype.
        OSError: If the file cannot be written.
    """
    _check_image(image)
    output_file = Path(filepath)

    pil_image = PILImage.fromarray(image)
    pil_image.save(output_file)

    logger.info("Wrote PNG image to %s", output_file)
    return output_file


def save_image(image: npt.NDArray[np.uint8], filepath: str | Path) -> Path:
    """Save an image, choosing the format from the file extension.

    ``.png`` files are written with Pillow; every other extension is written
    as ASCII PPM.

    Args:
        image: 8-bit RGB image of shape (H, W, 3).
        filepath: Output file path.

    Returns:
        Path to the written file.
    """
    if Path(filepath).suffix.lower() == ".png":
        return save_png(image, filepath)
    return write_ppm(image, filepath)


def load_ppm(filepath: str | Path) -> npt.NDArray[np.uint8]:
    """Read an ASCII PPM (P3) file back into an image array.

    Args:
        filepath: Path to a P3 file with a maximum value of 255.

    Returns:
        8-bit RGB image of shape (H, W, 3).

    Raises:
        ValueError: If the file is not a P3 image with max value 255 or the
            pixel count does not match the header.
    """
    tokens = Path(filepath).read_text(encoding="ascii").split()
    if len(tokens) < 4 or tokens[0] != "P3":
        raise ValueError(f"{filepath} is not an ASCII PPM (P3) file")

    width, height, max_value = int(tokens[1]), int(tokens[2]), int(tokens[3])
    if max_value != PPM_MAX_VALUE:
        raise ValueError(f"Unsupported PPM max value {max_value}")

    values = np.array(tokens[4:], dtype=np.int64)
    if values.size != width * height * 3:
        raise ValueError(
            f"PPM pixel data has {values.size} values, expected {width * height * 3}"
        )
    return values.reshape(height, width, 3).astype(np.uint8)


def compute_rmse(
    image_a: npt.NDArray[np.generic],
    image_b: npt.NDArray[np.generic],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(
            f"Image shapes must match: {image_a.shape} vs {image_b.shape}"
        )

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
