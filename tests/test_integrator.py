"""Unit tests for the recursive shading pipeline.

Tests cover:
- Sky gradient for escaping rays
- Tinting by object color on a single mirror bounce
- Recursion cap returning black
- Closed mirror traps terminating at the cap
- Diffuse bounces staying within the tint
"""

import pytest

from src.raytracer.core.color import BLACK, Color
from src.raytracer.core.config import MAX_DEPTH
from src.raytracer.core.integrator import background_color, trace_color
from src.raytracer.core.ray import Ray
from src.raytracer.core.vector import Vector
from src.raytracer.geometry import Plane
from src.raytracer.materials import Lambertian, Metal
from src.raytracer.scene.object import SceneObject

ORIGIN = Vector(0.0, 0.0, 0.0)
FORWARD = Ray(ORIGIN, Vector(0.0, 0.0, -1.0))
SKY_HORIZON = Color(0.75, 0.85, 1.0)


class TestBackgroundColor:
    """Tests for the sky gradient."""

    def test_straight_up(self):
        """Test the zenith color."""
        assert tuple(background_color(Vector(0.0, 1.0, 0.0))) == pytest.approx((0.5, 0.7, 1.0))

    def test_straight_down(self):
        """Test that the nadir is white."""
        assert tuple(background_color(Vector(0.0, -1.0, 0.0))) == pytest.approx((1.0, 1.0, 1.0))

    def test_horizon(self):
        """Test a horizontal direction."""
        assert tuple(background_color(Vector(1.0, 0.0, 0.0))) == pytest.approx(tuple(SKY_HORIZON))

    def test_direction_length_ignored(self):
        """Test that only the direction matters."""
        assert background_color(Vector(0.0, 5.0, 0.0)) == background_color(Vector(0.0, 1.0, 0.0))

    def test_blue_channel_constant(self):
        """Test that blue is always full."""
        for y in (-1.0, -0.3, 0.0, 0.4, 1.0):
            assert background_color(Vector(1.0, y, 0.0)).b == 1.0


class TestTraceColor:
    """Tests for trace_color."""

    def test_empty_scene_returns_background(self, rng):
        """Test that a miss returns the sky for the ray's direction."""
        ray = Ray(ORIGIN, Vector(0.3, 0.4, -1.0))
        assert trace_color([], ray, rng) == background_color(ray.direction)

    def test_mirror_bounce_is_tinted(self, rng, single_sphere_scene):
        """Test one bounce off a red mirror sphere back toward the horizon."""
        color = trace_color(single_sphere_scene, FORWARD, rng)
        # Bounce leaves along +z and escapes: red * horizon sky
        assert tuple(color) == pytest.approx((0.75, 0.0, 0.0))

    def test_depth_cap_returns_black(self, rng):
        """Test that a ray at the cap contributes black even in an empty scene."""
        assert trace_color([], FORWARD, rng, depth=5, max_depth=5) == BLACK

    def test_cap_cuts_first_bounce(self, rng, single_sphere_scene):
        """Test that max_depth=1 shades the bounce ray black."""
        assert trace_color(single_sphere_scene, FORWARD, rng, max_depth=1) == BLACK

    def test_cap_allows_one_bounce(self, rng, single_sphere_scene):
        """Test that max_depth=2 lets the bounce reach the sky."""
        color = trace_color(single_sphere_scene, FORWARD, rng, max_depth=2)
        assert tuple(color) == pytest.approx((0.75, 0.0, 0.0))

    def test_closed_mirror_trap_terminates(self, rng):
        """Test that facing mirrors end at the recursion cap with black."""
        floor = SceneObject(Plane(Vector(0.0, 1.0, 0.0), 0.0), Metal(), Color(1.0, 1.0, 1.0))
        # y = 1, facing down
        ceiling = SceneObject(Plane(Vector(0.0, -1.0, 0.0), -1.0), Metal(), Color(1.0, 1.0, 1.0))
        ray = Ray(Vector(0.0, 0.5, 0.0), Vector(0.0, -1.0, 0.0))

        assert trace_color([floor, ceiling], ray, rng) == BLACK
        assert trace_color([floor, ceiling], ray, rng, max_depth=MAX_DEPTH) == BLACK

    def test_closed_diffuse_trap_terminates(self, rng):
        """Test that facing diffuse planes also end at the cap."""
        floor = SceneObject(Plane(Vector(0.0, 1.0, 0.0), 0.0), Lambertian(), Color(1.0, 1.0, 1.0))
        ceiling = SceneObject(
            Plane(Vector(0.0, -1.0, 0.0), -1.0), Lambertian(), Color(1.0, 1.0, 1.0)
        )
        ray = Ray(Vector(0.0, 0.5, 0.0), Vector(0.0, -1.0, 0.0))
        assert trace_color([floor, ceiling], ray, rng, max_depth=8) == BLACK

    def test_diffuse_ground_within_tint(self, rng):
        """Test that a diffuse bounce is darkened by the tint."""
        ground = SceneObject(Plane(Vector(0.0, 1.0, 0.0), 0.0), Lambertian(), Color(0.5, 0.5, 0.5))
        ray = Ray(Vector(0.0, 1.0, 0.0), Vector(0.0, -1.0, -1.0))
        for _ in range(20):
            color = trace_color([ground], ray, rng)
            for channel in color:
                assert 0.0 < channel <= 0.5
