"""Scene module for scene objects and ray-scene queries.

Components:
    object: SceneObject (shape + material + tint color)
    intersection: Nearest-hit resolution by linear scan
    demo: Built-in demo scene and camera

A scene is a plain ordered sequence of SceneObjects. Order only matters for
tie-breaking between hits at exactly the same distance.
"""

from .demo import create_demo_objects, create_demo_scene
from .intersection import SceneHit, find_nearest_hit
from .object import SceneObject

__all__ = [
    "SceneObject",
    "SceneHit",
    "find_nearest_hit",
    "create_demo_objects",
    "create_demo_scene",
]
