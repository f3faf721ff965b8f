"""Linear RGB color and output quantization.

Colors flow through the shading pipeline as linear RGB triples. Object
colors act as multiplicative tints (channel-wise products), and the final
averaged pixel color is quantized to 8 bits with a square-root gamma
approximation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A linear RGB color.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color is the Hadamard product (tinted reflectance)
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: float) -> Color:
        return Color(self.r * other, self.g * other, self.b * other)

    def __truediv__(self, t: float) -> Color:
        return Color(self.r / t, self.g / t, self.b / t)

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def to_rgb8(self) -> tuple[int, int, int]:
        """Quantize to 8-bit channels.

        Each channel is clamped to [0, 1], passed through ``sqrt`` as a
        gamma-correction approximation, scaled by 255 and truncated.

        Returns:
            The (r, g, b) integer triple, each in [0, 255].
        """
        return (
            quantize_channel(self.r),
            quantize_channel(self.g),
            quantize_channel(self.b),
        )


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


def quantize_channel(value: float) -> int:
    """Clamp to [0, 1], apply sqrt gamma, scale by 255 and truncate."""
    if value < 0.0:
        return 0
    if value > 1.0:
        # clamped channels skip the sqrt: sqrt(1) == 1
        return 255
    return int(255 * math.sqrt(value))


def validate_unit_color(color: Color, name: str = "color") -> None:
    """Check that every channel lies in [0, 1].

    Raises:
        ValueError: If any channel is outside [0, 1] or not finite.
    """
    for channel, component in zip("rgb", color):
        if not math.isfinite(component) or component < 0.0 or component > 1.0:
            raise ValueError(
                f"{name} channel {channel} = {component} is outside [0, 1]. "
                "Object colors are multiplicative tints."
            )
