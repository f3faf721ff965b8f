"""Triangle primitive with Moller-Trumbore intersection.

A triangle is stored as a base vertex ``v0`` and the two edge vectors
``dv1 = v1 - v0`` and ``dv2 = v2 - v0``. Intersection solves

    origin + t * direction = v0 + u * dv1 + v * dv2

with Cramer's rule:

    ft = dot(dv1, cross(direction, dv2))
    u  = dot(origin - v0, cross(direction, dv2)) / ft
    v  = dot(direction, cross(origin - v0, dv1)) / ft
    t  = dot(dv2, cross(origin - v0, dv1)) / ft

and accepts the hit iff u >= 0, v >= 0, u <= 1, u + v <= 1 and t > EPSILON.
A vanishing ``ft`` means the ray is parallel to the triangle's plane and is
reported as a miss.

Winding order:
    The surface normal is ``cross(dv1, dv2)``, so it depends on the order in
    which the vertices are given. List vertices counter-clockwise as seen
    from the side the normal should face. With the opposite winding the
    normal points into the surface and bounce rays leave through the back
    of the triangle.

Example:
    >>> from src.raytracer.core.vector import Vector
    >>> from src.raytracer.geometry.triangle import Triangle
    >>> tri = Triangle.from_vertices(
    ...     Vector(0.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0)
    ... )
    >>> tri.unit_normal(Vector(0.2, 0.0, -0.2)).y  # faces +y
    1.0
"""

from dataclasses import dataclass

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import DegenerateGeometryError, Vector
from src.raytracer.geometry.shape import EPSILON, PARALLEL_TOLERANCE, Shape


@dataclass(frozen=True)
class Triangle(Shape):
    """A triangle defined by a vertex and two edge vectors.

    Attributes:
        v0: The base vertex.
        dv1: Edge vector from v0 to the second vertex.
        dv2: Edge vector from v0 to the third vertex.
    """

    v0: Vector
    dv1: Vector
    dv2: Vector

    def __post_init__(self) -> None:
        if self.dv1.cross(self.dv2).norm_squared() == 0.0:
            raise DegenerateGeometryError("Triangle has zero area (collinear vertices)")

    @classmethod
    def from_vertices(cls, v0: Vector, v1: Vector, v2: Vector) -> "Triangle":
        """Create a triangle from its three vertices (winding order matters)."""
        return cls(v0=v0, dv1=v1 - v0, dv2=v2 - v0)

    @property
    def vertices(self) -> tuple[Vector, Vector, Vector]:
        return self.v0, self.v0 + self.dv1, self.v0 + self.dv2

    def hit(self, ray: Ray) -> float | None:
        p = ray.direction.cross(self.dv2)
        ft = self.dv1.dot(p)
        if abs(ft) < PARALLEL_TOLERANCE:
            return None

        s = ray.origin - self.v0
        q = s.cross(self.dv1)

        dp1 = s.dot(p) / ft
        dp2 = ray.direction.dot(q) / ft
        dp3 = self.dv2.dot(q) / ft

        if dp1 < 0.0 or dp2 < 0.0 or dp1 > 1.0 or dp1 + dp2 > 1.0:
            return None
        if dp3 <= EPSILON:
            return None
        return dp3

    def unit_normal(self, point: Vector) -> Vector:
        # Flat normal, constant over the triangle
        return self.dv1.cross(self.dv2).unit()
