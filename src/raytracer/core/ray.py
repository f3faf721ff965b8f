"""Ray data structure.

Example:
    >>> from src.raytracer.core.ray import Ray
    >>> from src.raytracer.core.vector import Vector
    >>> ray = Ray(origin=Vector(0.0, 0.0, 0.0), direction=Vector(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    Vector(x=0.0, y=0.0, z=-5.0)
"""

from dataclasses import dataclass

from src.raytracer.core.vector import Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            unit length; primary rays are normalized, while bounce rays
            carry the unnormalized perturbed normal.
    """

    origin: Vector
    direction: Vector

    def at(self, t: float) -> Vector:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t


def make_ray(origin: Vector, direction: Vector) -> Ray:
    """Create a ray from origin and direction."""
    return Ray(origin=origin, direction=direction)
