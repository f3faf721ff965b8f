"""Metal (mirror) material implementation.

A metal bounces the next ray straight along the surface normal. The ray
carries the object color as its tint. No randomness is consumed.
"""

from dataclasses import dataclass

import numpy as np

from src.raytracer.core.vector import Vector
from src.raytracer.materials.material import Material


@dataclass(frozen=True)
class Metal(Material):
    """Mirror-like material; the normal passes through unchanged."""

    def perturb(self, normal: Vector, rng: np.random.Generator) -> Vector:
        return normal
