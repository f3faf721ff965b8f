"""Geometry module for shape primitives.

This module provides the closed set of geometric primitives and their
intersection algorithms:

Components:
    shape: Shape interface (hit / unit_normal) and the EPSILON threshold
    sphere: Sphere primitive with quadratic ray-sphere intersection
    plane: Infinite plane with linear ray-plane intersection
    triangle: Flat-shaded triangle with Moller-Trumbore intersection
    ellipsoid: Oriented ellipsoid solved in its local frame
    analytic: ProjectedSphere and HalfSpace, alternate analytic derivations

Ray-object intersection follows the pattern:
    t = shape.hit(ray)            # None on a miss
    n = shape.unit_normal(ray.at(t))
"""

from .analytic import HalfSpace, ProjectedSphere
from .ellipsoid import Ellipsoid
from .plane import Plane
from .shape import EPSILON, Shape
from .sphere import Sphere
from .triangle import Triangle

__all__ = [
    "Shape",
    "EPSILON",
    "Sphere",
    "Plane",
    "Triangle",
    "Ellipsoid",
    "ProjectedSphere",
    "HalfSpace",
]
