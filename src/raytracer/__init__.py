"""Recursive CPU ray tracer.

This package casts rays from a look-at camera into a scene of analytic
primitives and shades them recursively, with support for:
- Spheres, planes, triangles, oriented ellipsoids and two alternate
  analytic primitives
- Diffuse (normal-jitter) and mirror materials with per-object tint colors
- Jittered multi-sample anti-aliasing with square-root gamma quantization
- ASCII PPM and PNG output

Subpackages:
    core: Vectors, colors, rays, configuration, shading pipeline and screen
    geometry: Shape primitives and intersection algorithms
    materials: Surface responses (Lambertian, Metal)
    scene: Scene objects, nearest-hit resolution and the demo scene
    camera: Look-at viewport with jittered primary rays
    preview: Image export and Matplotlib preview
"""

__version__ = "0.1.0"
