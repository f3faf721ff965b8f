"""Unit tests for scene objects and nearest-hit resolution.

Tests cover:
- Empty scenes
- Nearest object wins regardless of scene order
- Ties keep the first object in scene order
- Mixed primitive types
- SceneObject color validation
"""

import pytest

from src.raytracer.core.color import Color
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vector
from src.raytracer.geometry import Plane, Sphere, Triangle
from src.raytracer.materials import Lambertian, Metal
from src.raytracer.scene.intersection import SceneHit, find_nearest_hit
from src.raytracer.scene.object import SceneObject

FORWARD = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0))


def make_object(shape, color=Color(1.0, 1.0, 1.0)):
    return SceneObject(shape, Metal(), color)


class TestSceneObject:
    """Tests for SceneObject construction."""

    def test_fields(self):
        """Test that shape, material and color are stored."""
        shape = Sphere(Vector(0.0, 0.0, -3.0), 1.0)
        material = Lambertian()
        obj = SceneObject(shape, material, Color(0.2, 0.4, 0.6))
        assert obj.shape is shape
        assert obj.material is material
        assert obj.color == Color(0.2, 0.4, 0.6)

    def test_rejects_color_above_one(self):
        """Test that tint channels above 1 are rejected."""
        with pytest.raises(ValueError, match="Object color"):
            make_object(Sphere(Vector(0.0, 0.0, -3.0), 1.0), Color(1.2, 0.0, 0.0))


class TestFindNearestHit:
    """Tests for find_nearest_hit."""

    def test_empty_scene(self):
        """Test that an empty scene never hits."""
        assert find_nearest_hit([], FORWARD) is None

    def test_single_hit(self, single_sphere_scene):
        """Test the hit record for a single sphere."""
        hit = find_nearest_hit(single_sphere_scene, FORWARD)
        assert isinstance(hit, SceneHit)
        assert hit.obj is single_sphere_scene[0]
        assert hit.t == pytest.approx(2.0)

    def test_miss(self, single_sphere_scene):
        """Test a ray that misses every object."""
        ray = Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0))
        assert find_nearest_hit(single_sphere_scene, ray) is None

    @pytest.mark.parametrize("reverse", [False, True])
    def test_nearest_wins_in_any_order(self, reverse):
        """Test that the closest object is chosen regardless of order."""
        near = make_object(Sphere(Vector(0.0, 0.0, -3.0), 1.0))
        far = make_object(Sphere(Vector(0.0, 0.0, -10.0), 1.0))
        objects = [far, near] if reverse else [near, far]

        hit = find_nearest_hit(objects, FORWARD)
        assert hit.obj is near
        assert hit.t == pytest.approx(2.0)

    def test_tie_keeps_first_object(self):
        """Test that exactly equal distances keep the earlier object."""
        first = make_object(Sphere(Vector(0.0, 0.0, -3.0), 1.0), Color(1.0, 0.0, 0.0))
        second = make_object(Sphere(Vector(0.0, 0.0, -3.0), 1.0), Color(0.0, 1.0, 0.0))

        assert find_nearest_hit([first, second], FORWARD).obj is first
        assert find_nearest_hit([second, first], FORWARD).obj is second

    def test_mixed_primitives(self):
        """Test a triangle in front of a wall plane."""
        wall = make_object(Plane(Vector(0.0, 0.0, 1.0), -5.0))
        tri = make_object(
            Triangle.from_vertices(
                Vector(-1.0, -1.0, -2.0), Vector(1.0, -1.0, -2.0), Vector(0.0, 1.0, -2.0)
            )
        )
        hit = find_nearest_hit([wall, tri], FORWARD)
        assert hit.obj is tri
        assert hit.t == pytest.approx(2.0)

    def test_hit_point_on_surface(self, single_sphere_scene):
        """Test that ray.at(t) lies on the hit object's surface."""
        ray = Ray(Vector(0.0, 0.0, 0.0), Vector(0.2, 0.1, -1.0))
        hit = find_nearest_hit(single_sphere_scene, ray)
        point = ray.at(hit.t)
        assert (point - Vector(0.0, 0.0, -3.0)).norm() == pytest.approx(1.0)
