"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: a seeded random
generator and a few small scenes that render quickly.
"""

import matplotlib
import numpy as np
import pytest

from src.raytracer.core.color import Color
from src.raytracer.core.vector import Vector
from src.raytracer.geometry import Plane, Sphere
from src.raytracer.materials import Lambertian, Metal
from src.raytracer.scene.object import SceneObject

# Headless backend so preview tests never open a window
matplotlib.use("Agg")


@pytest.fixture
def rng():
    """Seeded random generator, fresh for every test."""
    return np.random.default_rng(42)


@pytest.fixture
def white_metal():
    """Untinted mirror material and color."""
    return Metal(), Color(1.0, 1.0, 1.0)


@pytest.fixture
def single_sphere_scene():
    """A red mirror sphere in front of a camera at the origin looking down -z."""
    return [
        SceneObject(
            Sphere(center=Vector(0.0, 0.0, -3.0), radius=1.0),
            Metal(),
            Color(1.0, 0.0, 0.0),
        )
    ]


@pytest.fixture
def ground_scene():
    """A diffuse gray ground plane at y = 0 with a mirror sphere resting on it."""
    return [
        SceneObject(Plane(Vector(0.0, 1.0, 0.0), 0.0), Lambertian(), Color(0.5, 0.5, 0.5)),
        SceneObject(Sphere(Vector(0.0, 1.0, -3.0), 1.0), Metal(), Color(0.9, 0.9, 0.9)),
    ]
