"""Look-at viewport for primary ray generation.

The viewport is a virtual screen at unit distance in front of the camera,
described by its lower-left corner and two spanning vectors. It can be
given directly or built from look-at parameters, which form an orthonormal
basis (u, v, w):
- w: points from look_at toward look_from (opposite view direction)
- u: points right in the image plane (vup x w)
- v: points up in the image plane (w x u)

Screen coordinates (s, t) run over [0, 1]:
    s = 0: left edge, s = 1: right edge
    t = 0: bottom edge, t = 1: top edge

Example:
    >>> from src.raytracer.camera.viewport import Viewport
    >>> from src.raytracer.core.vector import Vector
    >>> viewport = Viewport.look_at(
    ...     look_from=Vector(0.0, 0.0, 3.0),
    ...     look_at=Vector(0.0, 0.0, 0.0),
    ...     vup=Vector(0.0, 1.0, 0.0),
    ...     viewport_width=2.0,
    ...     viewport_height=2.0,
    ... )
    >>> ray = viewport.get_ray(0.5, 0.5)  # Ray through screen center
"""

from dataclasses import dataclass

import numpy as np

from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import DegenerateGeometryError, Vector

# Upper bound of the per-axis sub-pixel jitter
JITTER_SPAN = 0.5


@dataclass(frozen=True)
class Viewport:
    """Camera origin and virtual screen.

    Attributes:
        origin: Camera position in world space.
        lower_left_corner: World position of the screen's lower-left corner.
        horizontal: Vector spanning the full screen width (left to right).
        vertical: Vector spanning the full screen height (bottom to top).
    """

    origin: Vector
    lower_left_corner: Vector
    horizontal: Vector
    vertical: Vector

    @classmethod
    def look_at(
        cls,
        look_from: Vector,
        look_at: Vector,
        vup: Vector,
        viewport_width: float,
        viewport_height: float,
    ) -> "Viewport":
        """Build the viewport from look-at camera parameters.

        Args:
            look_from: Camera position.
            look_at: Point the camera is looking at.
            vup: Up direction for camera orientation.
            viewport_width: Width of the screen at unit distance.
            viewport_height: Height of the screen at unit distance.

        Returns:
            The viewport one unit in front of look_from.

        Raises:
            DegenerateGeometryError: If look_from equals look_at, or vup is
                parallel to the view direction.
        """
        # w points from look_at toward look_from (backward)
        w = (look_from - look_at).unit()

        # u points right (perpendicular to w and vup)
        u = vup.cross(w)
        if u.norm_squared() == 0.0:
            raise DegenerateGeometryError("vup must not be parallel to the view direction")
        u = u.unit()

        # v points up in the camera's frame
        v = w.cross(u)

        horizontal = u * viewport_width
        vertical = v * viewport_height

        # Origin - w (move forward) - horizontal/2 (left) - vertical/2 (down)
        lower_left = look_from - horizontal * 0.5 - vertical * 0.5 - w

        return cls(
            origin=look_from,
            lower_left_corner=lower_left,
            horizontal=horizontal,
            vertical=vertical,
        )

    def point_at(self, s: float, t: float) -> Vector:
        """World-space point at screen coordinates (s, t)."""
        return self.lower_left_corner + self.horizontal * s + self.vertical * t

    def get_ray(self, s: float, t: float) -> Ray:
        """Generate the primary ray through screen coordinates (s, t).

        Args:
            s: Horizontal coordinate in [0, 1] (left to right).
            t: Vertical coordinate in [0, 1] (bottom to top).

        Returns:
            A Ray from the camera origin with a normalized direction toward
            the screen point.
        """
        direction = (self.point_at(s, t) - self.origin).unit()
        return Ray(self.origin, direction)

    def get_ray_jittered(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        rng: np.random.Generator,
    ) -> Ray:
        """Generate a jittered ray for anti-aliasing.

        The pixel position is offset by a random amount in [0, 0.5) on each
        axis before it is mapped onto the screen.

        Args:
            x: Pixel column (0 = left).
            y: Pixel row (0 = bottom).
            width: Image width in pixels.
            height: Image height in pixels.
            rng: The random source.

        Returns:
            A primary ray through the jittered pixel position.
        """
        dx, dy = rng.random(2) * JITTER_SPAN
        return self.get_ray((x + float(dx)) / width, (y + float(dy)) / height)
