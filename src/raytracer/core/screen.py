"""Screen: camera, scene and sampler for a single render.

The Screen owns the viewport, the output resolution and the scene for the
duration of a render. It supports:
- Nearest-hit queries and recursive color evaluation for arbitrary rays
- Per-pixel jittered multi-sample anti-aliasing
- Full-image rendering to an 8-bit array, with progress callbacks
- A generator-based pixel stream for incremental consumers
- Rendering straight to a PPM or PNG file

Pixels are produced top row first (y = height - 1 down to 0), left to right
within a row, matching the PPM scan order. Each pixel is a pure function of
its coordinates, the scene, the sample count and the random stream it is
given.

Example:
    >>> from src.raytracer.core.screen import Screen
    >>> from src.raytracer.scene.demo import create_demo_scene
    >>>
    >>> objects, params = create_demo_scene(width=64, height=64)
    >>> screen = Screen.from_params(params, objects)
    >>> image = screen.render(samples=4, seed=1)
    >>> image.shape
    (64, 64, 3)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator, Sequence
from pathlib import Path

import numpy as np
import numpy.typing as npt

from src.raytracer.camera.viewport import Viewport
from src.raytracer.core.color import BLACK, Color
from src.raytracer.core.config import MAX_DEPTH, ScreenParams
from src.raytracer.core.integrator import trace_color
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vector
from src.raytracer.preview.export import save_image
from src.raytracer.scene.intersection import SceneHit, find_nearest_hit
from src.raytracer.scene.object import SceneObject

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (completed_pixels, total_pixels)
ProgressCallback = Callable[[int, int], None]


def _check_positive_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _resolve_rng(
    rng: np.random.Generator | None,
    seed: int | None,
) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


class Screen:
    """Camera viewport, resolution and scene for one render.

    Attributes:
        viewport: The camera origin and virtual screen.
        width: Image width in pixels.
        height: Image height in pixels.
        objects: The scene, in order.
        max_depth: Recursion cap for bounce rays.
    """

    def __init__(
        self,
        viewport: Viewport,
        width: int,
        height: int,
        objects: Sequence[SceneObject] = (),
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize the screen.

        Args:
            viewport: The camera origin and virtual screen.
            width: Image width in pixels.
            height: Image height in pixels.
            objects: The scene objects. Copied into a tuple.
            max_depth: Recursion cap for bounce rays.

        Raises:
            ValueError: If width, height or max_depth is not a positive integer.
        """
        _check_positive_int("width", width)
        _check_positive_int("height", height)
        _check_positive_int("max_depth", max_depth)

        self._viewport = viewport
        self._width = width
        self._height = height
        self._objects = tuple(objects)
        self._max_depth = max_depth

    @classmethod
    def look_at(
        cls,
        look_from: Vector,
        look_at: Vector,
        vup: Vector,
        viewport_width: float,
        viewport_height: float,
        width: int,
        height: int,
        objects: Sequence[SceneObject] = (),
        max_depth: int = MAX_DEPTH,
    ) -> Screen:
        """Create a screen from look-at camera parameters."""
        viewport = Viewport.look_at(look_from, look_at, vup, viewport_width, viewport_height)
        return cls(viewport, width, height, objects, max_depth)

    @classmethod
    def from_params(
        cls,
        params: ScreenParams,
        objects: Sequence[SceneObject] = (),
        max_depth: int = MAX_DEPTH,
    ) -> Screen:
        """Create a screen from a ScreenParams configuration."""
        return cls.look_at(
            Vector.from_iterable(params.look_from),
            Vector.from_iterable(params.look_at),
            Vector.from_iterable(params.vup),
            params.viewport_width,
            params.viewport_height,
            params.width,
            params.height,
            objects,
            max_depth,
        )

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def objects(self) -> tuple[SceneObject, ...]:
        return self._objects

    @property
    def max_depth(self) -> int:
        return self._max_depth

    # =========================================================================
    # Ray queries
    # =========================================================================

    def hit(self, ray: Ray) -> SceneHit | None:
        """Find the nearest object hit by the ray, or None."""
        return find_nearest_hit(self._objects, ray)

    def color(self, ray: Ray, rng: np.random.Generator, depth: int = 0) -> Color:
        """Compute the color seen along the ray."""
        return trace_color(self._objects, ray, rng, depth, self._max_depth)

    # =========================================================================
    # Sampling
    # =========================================================================

    def render_pixel(self, x: int, y: int, samples: int, rng: np.random.Generator) -> Color:
        """Average jittered samples for one pixel.

        Args:
            x: Pixel column (0 = left).
            y: Pixel row (0 = bottom).
            samples: Anti-aliasing factor (number of jittered samples).
            rng: The random source for jitter and material perturbation.

        Returns:
            The linear color averaged over all samples (before quantization).
        """
        total = BLACK
        for _ in range(samples):
            ray = self._viewport.get_ray_jittered(x, y, self._width, self._height, rng)
            total = total + self.color(ray, rng)
        return total / samples

    def iter_pixels(
        self,
        samples: int,
        rng: np.random.Generator,
    ) -> Generator[tuple[int, int, tuple[int, int, int]], None, None]:
        """Render pixels one by one in output order.

        Yields pixels from the top row (y = height - 1) down to the bottom
        row, left to right within a row.

        Args:
            samples: Anti-aliasing factor.
            rng: The random source.

        Yields:
            Tuple of (x, y, (r, g, b)) with 8-bit quantized channels.
        """
        _check_positive_int("samples", samples)
        for y in range(self._height - 1, -1, -1):
            for x in range(self._width):
                yield x, y, self.render_pixel(x, y, samples, rng).to_rgb8()

    def render(
        self,
        samples: int = 1,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        callback: ProgressCallback | None = None,
    ) -> npt.NDArray[np.uint8]:
        """Render the full image.

        Args:
            samples: Anti-aliasing factor.
            rng: The random source. Mutually exclusive with seed.
            seed: Seed for a fresh generator when rng is not given.
                None draws fresh entropy.
            callback: Optional progress sink, called once per completed pixel.
                Receives (completed_pixels, total_pixels).

        Returns:
            Array of shape (height, width, 3) with dtype uint8. Row 0 is the
            top row of the image.

        Raises:
            ValueError: If samples is not a positive integer, or both rng and
                seed are given.
        """
        _check_positive_int("samples", samples)
        rng = _resolve_rng(rng, seed)

        total = self._width * self._height
        image = np.zeros((self._height, self._width, 3), dtype=np.uint8)

        logger.info(
            "Rendering %dx%d with %d samples per pixel (%d objects)",
            self._width,
            self._height,
            samples,
            len(self._objects),
        )
        start_time = time.perf_counter()

        for done, (x, y, rgb) in enumerate(self.iter_pixels(samples, rng), start=1):
            image[self._height - 1 - y, x] = rgb
            if callback is not None:
                callback(done, total)

        logger.info("Rendered %d pixels in %.2fs", total, time.perf_counter() - start_time)
        return image

    def render_to_file(
        self,
        filepath: str | Path,
        samples: int = 1,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        callback: ProgressCallback | None = None,
    ) -> Path:
        """Render the image and write it to a file.

        The format follows the extension: ``.png`` is written with Pillow,
        anything else as an ASCII PPM (P3).

        Args:
            filepath: Output file path.
            samples: Anti-aliasing factor.
            rng: The random source. Mutually exclusive with seed.
            seed: Seed for a fresh generator when rng is not given.
            callback: Optional per-pixel progress sink.

        Returns:
            Path to the written file.

        Raises:
            OSError: If the output file cannot be written.
        """
        image = self.render(samples=samples, rng=rng, seed=seed, callback=callback)
        return save_image(image, filepath)

    def __repr__(self) -> str:
        """Return a string representation of the screen."""
        return (
            f"Screen(width={self._width}, height={self._height}, "
            f"objects={len(self._objects)}, max_depth={self._max_depth})"
        )
