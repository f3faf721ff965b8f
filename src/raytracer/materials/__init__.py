"""Materials module for surface responses.

This module implements the closed set of materials that turn a surface
normal into the next bounce direction:

Components:
    material: Material interface (perturb)
    lambertian: Diffuse scattering by normal jitter
    metal: Mirror bounce along the unperturbed normal

Stochastic materials draw from an explicitly passed
``numpy.random.Generator``; no global random state is used.
"""

from .lambertian import DEFAULT_SCATTER_RADIUS, Lambertian
from .material import Material
from .metal import Metal

__all__ = [
    "Material",
    "Lambertian",
    "DEFAULT_SCATTER_RADIUS",
    "Metal",
]
