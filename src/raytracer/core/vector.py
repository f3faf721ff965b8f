"""3D vector value type and the small numeric toolkit built around it.

This module provides the immutable Vector used everywhere in the tracer,
together with the helpers the shapes need: a quadratic root solver, basis
transforms for oriented primitives, and rejection sampling inside a sphere.

All functions are pure. Randomness is drawn from an explicitly passed
``numpy.random.Generator`` so that renders are reproducible from a seed.

Example:
    >>> from src.raytracer.core.vector import Vector, cross, solve_quadratic
    >>> i, j = Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0)
    >>> cross(i, j)
    Vector(x=0.0, y=0.0, z=1.0)
    >>> solve_quadratic(1.0, 0.0, -4.0)
    (-2.0, 2.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


class DegenerateGeometryError(ValueError):
    """Raised when geometry is too degenerate to produce a defined result.

    Examples are normalizing a zero-length vector, a triangle with zero
    area, or a quadratic whose leading coefficient is zero.
    """


@dataclass(frozen=True)
class Vector:
    """An immutable (x, y, z) triple of floats.

    Supports elementwise arithmetic with other vectors and scalar scaling:
    ``v * w`` and ``v / w`` are elementwise when ``w`` is a Vector, and
    scale when ``w`` is a number.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vector:
        return Vector(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other: Vector | float) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vector(self.x / other, self.y / other, self.z / other)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm_squared(self) -> float:
        """Squared Euclidean length; avoids the square root."""
        return self.dot(self)

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.norm_squared())

    def unit(self) -> Vector:
        """Return the vector scaled to unit length.

        Raises:
            DegenerateGeometryError: If the vector has zero length.
        """
        length = self.norm()
        if length == 0.0:
            raise DegenerateGeometryError("Cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)

    def reduce_sum(self) -> float:
        """Sum of the three components."""
        return self.x + self.y + self.z

    def is_close(self, other: Vector, tol: float = 1e-9) -> bool:
        """Check componentwise equality within an absolute tolerance."""
        return (
            abs(self.x - other.x) <= tol
            and abs(self.y - other.y) <= tol
            and abs(self.z - other.z) <= tol
        )

    @classmethod
    def from_iterable(cls, values) -> Vector:
        """Build a Vector from any 3-element sequence (tuple, list, ndarray)."""
        x, y, z = values
        return cls(float(x), float(y), float(z))


ZERO = Vector(0.0, 0.0, 0.0)

# Basis of three vectors, used by transform() / inverse_transform()
Basis = tuple[Vector, Vector, Vector]


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product a . b."""
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    """Compute the cross product a x b."""
    return a.cross(b)


def reflect(v: Vector, n: Vector) -> Vector:
    """Reflect v about the unit normal n: v - 2 (v . n) n."""
    return v - n * (2.0 * v.dot(n))


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Solve a*t^2 + b*t + c = 0 for real t.

    The double-root case is detected with exact floating-point equality on
    the discriminant. Two roots that are merely very close are reported as
    two roots.

    Args:
        a: Quadratic coefficient. Must be non-zero.
        b: Linear coefficient.
        c: Constant term.

    Returns:
        ``()`` when the discriminant is negative, ``(t,)`` when it is exactly
        zero, otherwise ``((-b - sqrt(D)) / 2a, (-b + sqrt(D)) / 2a)``, which
        is ascending for ``a > 0``.

    Raises:
        DegenerateGeometryError: If ``a`` is zero.
    """
    if a == 0.0:
        raise DegenerateGeometryError("Quadratic leading coefficient is zero")

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()
    if discriminant == 0.0:
        return (-b / (2.0 * a),)

    sqrt_d = math.sqrt(discriminant)
    return ((-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a))


def transform(v: Vector, basis: Basis) -> Vector:
    """Express v in the coordinates of an orthonormal basis."""
    e0, e1, e2 = basis
    return Vector(v.dot(e0), v.dot(e1), v.dot(e2))


def inverse_transform(v: Vector, basis: Basis) -> Vector:
    """Map basis coordinates back to world space; inverse of transform()."""
    e0, e1, e2 = basis
    return e0 * v.x + e1 * v.y + e2 * v.z


def random_in_sphere(rng: np.random.Generator, radius: float = 1.0) -> Vector:
    """Sample a point uniformly from the ball of the given radius.

    Uses rejection sampling: draw uniformly from the cube [-1, 1]^3, reject
    draws outside the unit ball, then scale by ``radius``.

    Args:
        rng: The random source.
        radius: Radius of the ball to sample from.

    Returns:
        A random point with length <= radius.
    """
    while True:
        x, y, z = rng.uniform(-1.0, 1.0, size=3)
        if x * x + y * y + z * z > 1.0:
            continue
        return Vector(float(x) * radius, float(y) * radius, float(z) * radius)
