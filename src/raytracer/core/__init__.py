"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector value type, quadratic solver, basis transforms, sampling
    color: Linear RGB color and 8-bit quantization
    ray: Ray data structure
    config: ScreenParams / RenderSettings configuration dataclasses
    integrator: Recursive shading pipeline with sky background
    screen: Camera + scene + jittered multi-sample rendering

Randomness is always drawn from an explicitly passed
``numpy.random.Generator``; a fixed seed reproduces a render exactly.
"""

from .color import BLACK, WHITE, Color, quantize_channel
from .config import MAX_DEPTH, RenderSettings, ScreenParams
from .ray import Ray, make_ray
from .vector import (
    ZERO,
    DegenerateGeometryError,
    Vector,
    cross,
    dot,
    inverse_transform,
    random_in_sphere,
    reflect,
    solve_quadratic,
    transform,
)

# Note: integrator and screen are NOT imported here to avoid circular imports.
# Import directly from src.raytracer.core.integrator or src.raytracer.core.screen.

__all__ = [
    "Vector",
    "ZERO",
    "DegenerateGeometryError",
    "dot",
    "cross",
    "reflect",
    "solve_quadratic",
    "transform",
    "inverse_transform",
    "random_in_sphere",
    "Color",
    "BLACK",
    "WHITE",
    "quantize_channel",
    "Ray",
    "make_ray",
    "MAX_DEPTH",
    "ScreenParams",
    "RenderSettings",
]
