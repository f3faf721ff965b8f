"""Oriented ellipsoid primitive.

An ellipsoid is described by its center, an orthonormal basis of three axes
and the squared semi-axis length along each axis. In the ellipsoid's local
frame (coordinates taken along the axes) the surface is

    x^2 / L0 + y^2 / L1 + z^2 / L2 = 1

where L0, L1, L2 are the squared lengths. The ray origin offset and the
direction are transformed into this frame, which gives the quadratic

    a = sum(d * d / L)
    b = 2 * sum(oc * d / L)
    c = sum(oc * oc / L) - 1

solved with the same ``solve_quadratic`` as the sphere. The gradient of the
implicit function gives the normal: the local point is divided by the
squared lengths, transformed back to world space and normalized.

Example:
    >>> from src.raytracer.core.vector import Vector
    >>> from src.raytracer.geometry.ellipsoid import Ellipsoid
    >>> axes = (Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 1.0))
    >>> egg = Ellipsoid.from_semi_axes(Vector(0.0, 1.0, 0.0), axes, (0.5, 1.0, 0.5))
"""

import math
from dataclasses import dataclass

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import (
    Basis,
    DegenerateGeometryError,
    Vector,
    inverse_transform,
    solve_quadratic,
    transform,
)
from src.raytracer.geometry.shape import Shape, first_root_after_epsilon

# Tolerance for the orthonormality check on the axes
ORTHONORMAL_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Ellipsoid(Shape):
    """An ellipsoid with arbitrary orientation.

    Attributes:
        center: The center point of the ellipsoid.
        axes: Orthonormal basis (three unit vectors, mutually perpendicular)
            giving the directions of the semi-axes.
        squared_lengths: Squared semi-axis length along each of the axes.
    """

    center: Vector
    axes: Basis
    squared_lengths: Vector

    def __post_init__(self) -> None:
        if len(self.axes) != 3:
            raise ValueError(f"Ellipsoid needs exactly 3 axes, got {len(self.axes)}")

        for i, axis in enumerate(self.axes):
            if abs(axis.norm() - 1.0) > ORTHONORMAL_TOLERANCE:
                raise DegenerateGeometryError(f"Ellipsoid axis {i} is not unit length")
        for i, j in ((0, 1), (0, 2), (1, 2)):
            if abs(self.axes[i].dot(self.axes[j])) > ORTHONORMAL_TOLERANCE:
                raise DegenerateGeometryError(
                    f"Ellipsoid axes {i} and {j} are not perpendicular"
                )

        for i, length_sq in enumerate(self.squared_lengths):
            if not math.isfinite(length_sq) or length_sq <= 0.0:
                raise DegenerateGeometryError(
                    f"Ellipsoid squared length {i} = {length_sq} must be positive"
                )

    @classmethod
    def from_semi_axes(
        cls,
        center: Vector,
        axes: Basis,
        lengths: tuple[float, float, float],
    ) -> "Ellipsoid":
        """Create an ellipsoid from (unsquared) semi-axis lengths."""
        l0, l1, l2 = lengths
        return cls(
            center=center,
            axes=tuple(axes),
            squared_lengths=Vector(l0 * l0, l1 * l1, l2 * l2),
        )

    def hit(self, ray: Ray) -> float | None:
        oc = transform(ray.origin - self.center, self.axes)
        d = transform(ray.direction, self.axes)
        lengths = self.squared_lengths

        a = (d * d / lengths).reduce_sum()
        if a == 0.0:
            return None
        b = 2.0 * (oc * d / lengths).reduce_sum()
        c = (oc * oc / lengths).reduce_sum() - 1.0

        return first_root_after_epsilon(solve_quadratic(a, b, c))

    def unit_normal(self, point: Vector) -> Vector:
        local = transform(point - self.center, self.axes)
        return inverse_transform(local / self.squared_lengths, self.axes).unit()
