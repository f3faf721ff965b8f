"""Scene-level nearest-hit resolution.

The scene is an ordered sequence of SceneObjects. Every ray is tested
against every object (no spatial acceleration), and the object with the
smallest accepted ray parameter wins. Ties on exactly equal t keep the
object that appears first in the scene.

Example:
    >>> from src.raytracer.core.color import Color
    >>> from src.raytracer.core.ray import Ray
    >>> from src.raytracer.core.vector import Vector
    >>> from src.raytracer.geometry import Sphere
    >>> from src.raytracer.materials import Metal
    >>> from src.raytracer.scene.intersection import find_nearest_hit
    >>> from src.raytracer.scene.object import SceneObject
    >>> ball = SceneObject(Sphere(Vector(0, 0, -3), 1.0), Metal(), Color(1, 1, 1))
    >>> hit = find_nearest_hit([ball], Ray(Vector(0, 0, 0), Vector(0, 0, -1)))
    >>> hit.t
    2.0
"""

from collections.abc import Sequence
from typing import NamedTuple

from src.raytracer.core.ray import Ray
from src.raytracer.scene.object import SceneObject


class SceneHit(NamedTuple):
    """Record of the nearest ray-scene intersection.

    Attributes:
        obj: The object that was hit.
        t: The ray parameter of the intersection (t > EPSILON).
    """

    obj: SceneObject
    t: float


def find_nearest_hit(objects: Sequence[SceneObject], ray: Ray) -> SceneHit | None:
    """Test the ray against all objects and keep the closest hit.

    Args:
        objects: The scene, in order.
        ray: The ray to trace.

    Returns:
        A SceneHit for the nearest intersection, or None if the ray misses
        every object.
    """
    closest: SceneHit | None = None

    for obj in objects:
        t = obj.shape.hit(ray)
        if t is None:
            continue
        # Strict less-than: the earlier object wins a tie
        if closest is None or t < closest.t:
            closest = SceneHit(obj, t)

    return closest
