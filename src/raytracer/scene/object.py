"""Scene objects: a shape paired with a material and a tint color."""

from dataclasses import dataclass

from src.raytracer.core.color import Color, validate_unit_color
from src.raytracer.geometry.shape import Shape
from src.raytracer.materials.material import Material


@dataclass(frozen=True)
class SceneObject:
    """A renderable object.

    Attributes:
        shape: The geometry tested for intersections.
        material: How the surface turns its normal into a bounce direction.
        color: Base reflectance, multiplied channel-wise into the color
            carried back by the bounce ray. Each channel lies in [0, 1].
    """

    shape: Shape
    material: Material
    color: Color

    def __post_init__(self) -> None:
        validate_unit_color(self.color, name="Object color")
