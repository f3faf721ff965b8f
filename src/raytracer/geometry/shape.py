"""Shape interface shared by every geometric primitive.

Each primitive answers two questions:

* ``hit(ray)``: the smallest ray parameter ``t > EPSILON`` at which the ray
  meets the surface, or ``None`` if there is no such intersection.
* ``unit_normal(point)``: the outward unit normal at a point that is already
  known to lie on the surface. No on-surface check is performed.

The set of shapes is closed (Sphere, Plane, Triangle, Ellipsoid,
ProjectedSphere, HalfSpace); the abstract base class only fixes the call
signatures for the scene scan.
"""

from abc import ABC, abstractmethod

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vector

# Minimum accepted ray parameter; suppresses self-intersection at bounce origins
EPSILON = 1e-8

# Denominators smaller than this are treated as parallel / degenerate
PARALLEL_TOLERANCE = 1e-12


class Shape(ABC):
    """Abstract base class for ray-intersectable surfaces."""

    @abstractmethod
    def hit(self, ray: Ray) -> float | None:
        """Find the nearest valid intersection along the ray.

        Args:
            ray: The ray to test. Its direction need not be normalized.

        Returns:
            The smallest ray parameter t > EPSILON where the ray meets the
            surface, or None if the ray misses.
        """

    @abstractmethod
    def unit_normal(self, point: Vector) -> Vector:
        """Outward unit normal at a point on the surface."""


def first_root_after_epsilon(roots: tuple[float, ...]) -> float | None:
    """Pick the first root greater than EPSILON from ascending roots."""
    for root in roots:
        if root > EPSILON:
            return root
    return None
