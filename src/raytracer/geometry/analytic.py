"""Alternative analytic primitives with bespoke hit derivations.

These two shapes cover the same ground as Sphere and Plane but derive the
intersection differently:

* ProjectedSphere uses the geometric construction: project the center onto
  the ray, compare the perpendicular distance with the radius, then step
  back and forward by the half-chord.
* HalfSpace is a solid bounded by a plane. It uses a sign test on the
  origin's side and the direction of travel before dividing, so only rays
  approaching from outside can hit it.
"""

import math
from dataclasses import dataclass

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import DegenerateGeometryError, Vector
from src.raytracer.geometry.shape import EPSILON, Shape


@dataclass(frozen=True)
class ProjectedSphere(Shape):
    """Sphere intersected through projection onto the ray.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive float).
    """

    center: Vector
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def hit(self, ray: Ray) -> float | None:
        speed = ray.direction.norm()
        if speed == 0.0:
            return None
        heading = ray.direction / speed

        # Distance along the ray to the point closest to the center
        to_center = self.center - ray.origin
        t_closest = to_center.dot(heading)
        # Squared distance from the center to the ray's line
        perp_sq = to_center.norm_squared() - t_closest * t_closest
        radius_sq = self.radius * self.radius
        if perp_sq > radius_sq:
            return None

        half_chord = math.sqrt(radius_sq - perp_sq)
        # Convert travelled distance back to the ray parameter
        for distance in (t_closest - half_chord, t_closest + half_chord):
            t = distance / speed
            if t > EPSILON:
                return t
        return None

    def unit_normal(self, point: Vector) -> Vector:
        return (point - self.center) / self.radius


@dataclass(frozen=True)
class HalfSpace(Shape):
    """The solid ``{p : dot(p, direction) <= offset}``.

    The boundary faces along ``direction``. A ray hits only when its origin is
    strictly outside the solid and it travels toward the boundary. Rays that
    start inside or on the boundary, or that move away from it, miss.

    Attributes:
        direction: Outward direction of the bounding plane (non-zero).
        offset: Plane constant along the direction.
    """

    direction: Vector
    offset: float

    def __post_init__(self) -> None:
        if self.direction.norm_squared() == 0.0:
            raise DegenerateGeometryError("HalfSpace direction must be non-zero")

    def hit(self, ray: Ray) -> float | None:
        # Positive when the origin is outside the solid
        side = ray.origin.dot(self.direction) - self.offset
        # Negative when the ray heads toward the boundary
        approach = ray.direction.dot(self.direction)
        if side <= 0.0 or approach >= 0.0:
            return None

        t = -side / approach
        if t <= EPSILON:
            return None
        return t

    def unit_normal(self, point: Vector) -> Vector:
        return self.direction.unit()
