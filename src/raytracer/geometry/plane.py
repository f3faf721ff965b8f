"""Infinite plane primitive.

A plane is stored as a normal vector and a scalar offset, describing the
set of points ``{p : dot(p, normal) = offset}``. With a unit normal the
offset is the signed distance of the plane from the origin.

Ray-plane intersection solves the linear equation:
    dot(origin + t * direction, normal) = offset
    t = (offset - dot(origin, normal)) / dot(direction, normal)

Rays parallel to the plane (vanishing denominator) never hit.

Example:
    >>> from src.raytracer.core.vector import Vector
    >>> from src.raytracer.geometry.plane import Plane
    >>> ground = Plane(normal=Vector(0.0, 1.0, 0.0), offset=0.0)  # y = 0
"""

from dataclasses import dataclass

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import DegenerateGeometryError, Vector
from src.raytracer.geometry.shape import EPSILON, PARALLEL_TOLERANCE, Shape


@dataclass(frozen=True)
class Plane(Shape):
    """An infinite plane ``dot(p, normal) = offset``.

    Attributes:
        normal: The plane normal. It need not be unit length; the normal
            reported by unit_normal() is normalized.
        offset: The plane constant along the normal.
    """

    normal: Vector
    offset: float

    def __post_init__(self) -> None:
        if self.normal.norm_squared() == 0.0:
            raise DegenerateGeometryError("Plane normal must be non-zero")

    def hit(self, ray: Ray) -> float | None:
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PARALLEL_TOLERANCE:
            return None

        t = (self.offset - ray.origin.dot(self.normal)) / denom
        if t <= EPSILON:
            return None
        return t

    def unit_normal(self, point: Vector) -> Vector:
        return self.normal.unit()
