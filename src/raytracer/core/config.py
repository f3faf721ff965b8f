"""Render configuration dataclasses.

ScreenParams describes the camera and image resolution; RenderSettings
describes how the image is sampled. Both are plain data and are validated
on construction so that bad values fail before any ray is traced.

Example:
    >>> from src.raytracer.core.config import RenderSettings, ScreenParams
    >>> params = ScreenParams(
    ...     look_from=(0.0, 1.0, 3.0),
    ...     look_at=(0.0, 1.0, 0.0),
    ...     vup=(0.0, 1.0, 0.0),
    ...     viewport_width=4.0,
    ...     viewport_height=3.0,
    ...     width=160,
    ...     height=120,
    ... )
    >>> settings = RenderSettings(samples=16, seed=7)
"""

from dataclasses import dataclass

# Recursion cap for the shading pipeline
MAX_DEPTH = 64


def _check_positive_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class ScreenParams:
    """Camera and resolution parameters for a look-at screen.

    Attributes:
        look_from: Camera position in world space (x, y, z).
        look_at: Point the camera is looking at (x, y, z).
        vup: Up direction used to orient the camera (typically (0, 1, 0)).
        viewport_width: Width of the virtual screen at unit distance.
        viewport_height: Height of the virtual screen at unit distance.
        width: Output image width in pixels.
        height: Output image height in pixels.
    """

    look_from: tuple[float, float, float]
    look_at: tuple[float, float, float]
    vup: tuple[float, float, float]
    viewport_width: float
    viewport_height: float
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.viewport_width <= 0.0 or self.viewport_height <= 0.0:
            raise ValueError(
                f"Viewport dimensions must be positive, got "
                f"{self.viewport_width}x{self.viewport_height}"
            )
        _check_positive_int("width", self.width)
        _check_positive_int("height", self.height)


@dataclass(frozen=True)
class RenderSettings:
    """Sampling parameters for a render.

    Attributes:
        samples: Anti-aliasing factor (jittered samples averaged per pixel).
        max_depth: Recursion cap for bounce rays. Rays at this depth return
            black.
        seed: Seed for the random generator. None draws fresh entropy.
    """

    samples: int = 16
    max_depth: int = MAX_DEPTH
    seed: int | None = None

    def __post_init__(self) -> None:
        _check_positive_int("samples", self.samples)
        _check_positive_int("max_depth", self.max_depth)
