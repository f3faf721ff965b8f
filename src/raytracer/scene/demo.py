"""Built-in demo scene.

The demo scene consists of:
- 3 mirror spheres tinted red, green and blue, floating above the ground
- A diffuse light-gray ground plane (y = 0)
- 2 pairs of mirror triangles lying just above the ground: a blue pair
  pointing toward +x and a green pair pointing toward +z

The camera sits above and to the side of the spheres, looking down at them.
All triangles are wound counter-clockwise seen from above so that their
normals face +y.

Example:
    >>> from src.raytracer.core.screen import Screen
    >>> from src.raytracer.scene.demo import create_demo_scene
    >>> objects, params = create_demo_scene(width=64, height=64)
    >>> screen = Screen.from_params(params, objects)
"""

from src.raytracer.core.color import Color
from src.raytracer.core.config import ScreenParams
from src.raytracer.core.vector import Vector
from src.raytracer.geometry import Plane, Sphere, Triangle
from src.raytracer.materials import Lambertian, Metal
from src.raytracer.scene.object import SceneObject

# Camera placement
LOOK_FROM = (2.5, 1.5, 2.5)
LOOK_AT = (2.0, 1.2, 2.0)
VUP = (0.0, 1.0, 0.0)
VIEWPORT_SIZE = 6.0

# Height of the ground decals above the plane, avoids coplanar hits
DECAL_HEIGHT = 0.01


def _ground_triangle(tip: tuple[float, float], left: tuple[float, float],
                     right: tuple[float, float]) -> Triangle:
    """Triangle lying at DECAL_HEIGHT from (x, z) vertex pairs."""
    return Triangle.from_vertices(
        Vector(tip[0], DECAL_HEIGHT, tip[1]),
        Vector(left[0], DECAL_HEIGHT, left[1]),
        Vector(right[0], DECAL_HEIGHT, right[1]),
    )


def create_demo_objects() -> list[SceneObject]:
    """Create the demo scene's object list."""
    metal = Metal()
    blue = Color(0.0, 0.0, 1.0)
    green = Color(0.0, 0.5, 0.0)

    return [
        SceneObject(Sphere(Vector(2.0, 3.7, 0.0), 1.0), metal, Color(1.0, 0.5, 0.5)),
        SceneObject(Sphere(Vector(0.0, 1.9, 1.0), 1.0), metal, Color(0.5, 1.0, 0.5)),
        SceneObject(Sphere(Vector(-2.0, 5.0, 0.0), 1.0), metal, Color(0.5, 0.5, 1.0)),
        SceneObject(Plane(Vector(0.0, 1.0, 0.0), 0.0), Lambertian(), Color(0.8, 0.8, 0.8)),
        # Blue pair, pointing toward +x
        SceneObject(_ground_triangle((3.0, 0.0), (2.0, -0.5), (2.0, 0.5)), metal, blue),
        SceneObject(_ground_triangle((4.0, 0.0), (3.0, -0.5), (3.0, 0.5)), metal, blue),
        # Green pair, pointing toward +z
        SceneObject(_ground_triangle((-0.5, 2.0), (0.0, 3.0), (0.5, 2.0)), metal, green),
        SceneObject(_ground_triangle((-0.5, 3.0), (0.0, 4.0), (0.5, 3.0)), metal, green),
    ]


def create_demo_scene(
    width: int = 512,
    height: int = 512,
) -> tuple[list[SceneObject], ScreenParams]:
    """Create the demo scene and its camera.

    Args:
        width: Output image width in pixels.
        height: Output image height in pixels.

    Returns:
        A tuple of (objects, screen_params).
    """
    params = ScreenParams(
        look_from=LOOK_FROM,
        look_at=LOOK_AT,
        vup=VUP,
        viewport_width=VIEWPORT_SIZE,
        viewport_height=VIEWPORT_SIZE,
        width=width,
        height=height,
    )
    return create_demo_objects(), params
