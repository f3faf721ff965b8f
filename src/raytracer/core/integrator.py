"""Recursive shading pipeline.

This module computes the color seen along a ray. On a hit, the object's
material turns the surface normal into a bounce direction, a new ray is
traced from the hit point along it, and the returned color is tinted
channel-wise by the object's color. On a miss the ray sees a vertical sky
gradient. Recursion stops at ``max_depth``, where the ray contributes
black.

The model is a tinted-reflectance approximation, not an energy-conserving
BRDF integration: there are no light sources and all illumination comes
from the sky.

Example:
    >>> import numpy as np
    >>> from src.raytracer.core.integrator import trace_color
    >>> from src.raytracer.core.ray import Ray
    >>> from src.raytracer.core.vector import Vector
    >>> rng = np.random.default_rng(42)
    >>> sky = trace_color([], Ray(Vector(0, 0, 0), Vector(0, 1, 0)), rng)
    >>> sky
    Color(r=0.5, g=0.7, b=1.0)
"""

from collections.abc import Sequence

import numpy as np

from src.raytracer.core.color import BLACK, Color
from src.raytracer.core.config import MAX_DEPTH
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vector
from src.raytracer.scene.intersection import find_nearest_hit
from src.raytracer.scene.object import SceneObject


def background_color(direction: Vector) -> Color:
    """Sky gradient seen by rays that escape the scene.

    Blends from white at the horizon-down direction to light blue straight
    up, using t = 0.5 * (unit_direction.y + 1).

    Args:
        direction: The ray direction (any non-zero length).

    Returns:
        The color (1 - 0.5t, 1 - 0.3t, 1.0).
    """
    t = 0.5 * (direction.unit().y + 1.0)
    return Color(1.0 - 0.5 * t, 1.0 - 0.3 * t, 1.0)


def trace_color(
    objects: Sequence[SceneObject],
    ray: Ray,
    rng: np.random.Generator,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
) -> Color:
    """Compute the color seen along a ray.

    Args:
        objects: The scene.
        ray: The ray to trace.
        rng: The random source consumed by stochastic materials.
        depth: Number of bounces that led to this ray (0 for primary rays).
        max_depth: Depth at which tracing stops and black is returned.

    Returns:
        The linear color carried back along the ray.
    """
    # Deep bounces are too insignificant to be worth tracing
    if depth >= max_depth:
        return BLACK

    hit = find_nearest_hit(objects, ray)
    if hit is None:
        return background_color(ray.direction)

    point = ray.at(hit.t)
    normal = hit.obj.shape.unit_normal(point)
    bounce = hit.obj.material.perturb(normal, rng)

    reflected = trace_color(objects, Ray(point, bounce), rng, depth + 1, max_depth)
    return hit.obj.color * reflected
