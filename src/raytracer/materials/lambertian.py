"""Lambertian (diffuse) material implementation.

Diffuse scattering is approximated by jittering the surface normal: a point
drawn uniformly from a small ball around the tip of the unit normal becomes
the next bounce direction. This is cheaper than a cosine-weighted
hemisphere sample and produces a similar soft look.

Since the ball radius (0.5 by default) is smaller than the unit normal, the
perturbed direction always stays on the outward side of the surface.

Example:
    >>> import numpy as np
    >>> from src.raytracer.core.vector import Vector
    >>> from src.raytracer.materials.lambertian import Lambertian
    >>> rng = np.random.default_rng(0)
    >>> bounce = Lambertian().perturb(Vector(0.0, 1.0, 0.0), rng)
    >>> bounce.y > 0.0
    True
"""

import math
from dataclasses import dataclass

import numpy as np

from src.raytracer.core.vector import Vector, random_in_sphere
from src.raytracer.materials.material import Material

# Radius of the jitter ball added to the unit normal
DEFAULT_SCATTER_RADIUS = 0.5


@dataclass(frozen=True)
class Lambertian(Material):
    """Diffuse material that jitters the normal.

    Attributes:
        radius: Radius of the ball the jitter is drawn from. Must lie in
            (0, 1) so that the bounce never points into the surface.
    """

    radius: float = DEFAULT_SCATTER_RADIUS

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius <= 0.0 or self.radius >= 1.0:
            raise ValueError(
                f"Scatter radius = {self.radius} is outside (0, 1). "
                "The jitter must not reach the surface plane."
            )

    def perturb(self, normal: Vector, rng: np.random.Generator) -> Vector:
        return normal + random_in_sphere(rng, self.radius)
