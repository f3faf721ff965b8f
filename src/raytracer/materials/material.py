"""Material interface.

A material turns the unit surface normal at a hit point into the direction
of the next bounce ray. The bounce ray starts at the hit point and travels
along the returned vector as-is; it is neither reflected about the normal
nor re-normalized.
"""

from abc import ABC, abstractmethod

import numpy as np

from src.raytracer.core.vector import Vector


class Material(ABC):
    """Abstract base class for surface responses."""

    @abstractmethod
    def perturb(self, normal: Vector, rng: np.random.Generator) -> Vector:
        """Compute the bounce direction from a surface normal.

        Args:
            normal: The outward unit normal at the hit point.
            rng: The random source for stochastic materials.

        Returns:
            The direction for the next ray (not necessarily unit length).
        """
