"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |ray_origin + t * ray_direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + b*t + c = 0

where:
    oc = origin - center
    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2

The nearer root is preferred; the farther root is used when the nearer one
lies behind (or at) the ray origin, which happens for rays starting inside
the sphere.

Example:
    >>> from src.raytracer.core.ray import Ray
    >>> from src.raytracer.core.vector import Vector
    >>> from src.raytracer.geometry.sphere import Sphere
    >>> sphere = Sphere(center=Vector(0.0, 0.0, 0.0), radius=1.0)
    >>> sphere.hit(Ray(Vector(0.0, 0.0, 5.0), Vector(0.0, 0.0, -1.0)))
    4.0
"""

import math
from dataclasses import dataclass

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vector, solve_quadratic
from src.raytracer.geometry.shape import Shape, first_root_after_epsilon


@dataclass(frozen=True)
class Sphere(Shape):
    """A sphere defined by center point and radius.

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
        oc = ray.origin - self.center

        a = ray.direction.norm_squared()
        if a == 0.0:
            return None
        b = 2.0 * oc.dot(ray.direction)
        c = oc.norm_squared() - self.radius * self.radius

        return first_root_after_epsilon(solve_quadratic(a, b, c))

    def unit_normal(self, point: Vector) -> Vector:
        # Outward normal: points from center to surface point
        return (point - self.center).unit()
