"""Tests for the built-in demo scene."""

import numpy as np

from src.raytracer.core.color import validate_unit_color
from src.raytracer.core.screen import Screen
from src.raytracer.core.vector import Vector
from src.raytracer.geometry import Plane, Sphere, Triangle
from src.raytracer.materials import Lambertian, Metal
from src.raytracer.scene.demo import (
    LOOK_AT,
    LOOK_FROM,
    VIEWPORT_SIZE,
    create_demo_objects,
    create_demo_scene,
)

UP = Vector(0.0, 1.0, 0.0)


class TestDemoObjects:
    """Tests for the demo object list."""

    def test_composition(self):
        """Test three spheres, one ground plane and four triangles."""
        objects = create_demo_objects()
        shapes = [type(obj.shape) for obj in objects]
        assert len(objects) == 8
        assert shapes.count(Sphere) == 3
        assert shapes.count(Plane) == 1
        assert shapes.count(Triangle) == 4

    def test_materials(self):
        """Test that only the ground plane is diffuse."""
        for obj in create_demo_objects():
            if isinstance(obj.shape, Plane):
                assert isinstance(obj.material, Lambertian)
            else:
                assert isinstance(obj.material, Metal)

    def test_colors_are_valid_tints(self):
        """Test that every object color lies in [0, 1]."""
        for obj in create_demo_objects():
            validate_unit_color(obj.color)

    def test_triangles_face_up(self):
        """Test that the ground decals are wound to face +y above the plane."""
        for obj in create_demo_objects():
            if isinstance(obj.shape, Triangle):
                assert obj.shape.unit_normal(obj.shape.v0).is_close(UP)
                assert all(v.y > 0.0 for v in obj.shape.vertices)

    def test_spheres_above_ground(self):
        """Test that no sphere intersects the ground plane."""
        for obj in create_demo_objects():
            if isinstance(obj.shape, Sphere):
                assert obj.shape.center.y > obj.shape.radius


class TestDemoScene:
    """Tests for create_demo_scene."""

    def test_camera(self):
        """Test the demo camera placement."""
        _, params = create_demo_scene()
        assert params.look_from == LOOK_FROM
        assert params.look_at == LOOK_AT
        assert params.vup == (0.0, 1.0, 0.0)
        assert params.viewport_width == params.viewport_height == VIEWPORT_SIZE
        assert (params.width, params.height) == (512, 512)

    def test_custom_resolution(self):
        """Test that the resolution is configurable."""
        _, params = create_demo_scene(width=32, height=16)
        assert (params.width, params.height) == (32, 16)

    def test_small_render(self):
        """Test a tiny reproducible render of the demo scene."""
        objects, params = create_demo_scene(width=8, height=8)
        screen = Screen.from_params(params, objects)
        first = screen.render(samples=1, seed=0)
        second = screen.render(samples=1, seed=0)
        assert first.shape == (8, 8, 3)
        np.testing.assert_array_equal(first, second)
        # Not a blank frame
        assert first.std() > 0.0
