"""Unit tests for render configuration dataclasses."""

import dataclasses

import pytest

from src.raytracer.core.config import MAX_DEPTH, RenderSettings, ScreenParams


def make_params(**overrides):
    values = dict(
        look_from=(0.0, 0.0, 3.0),
        look_at=(0.0, 0.0, 0.0),
        vup=(0.0, 1.0, 0.0),
        viewport_width=2.0,
        viewport_height=2.0,
        width=8,
        height=6,
    )
    values.update(overrides)
    return ScreenParams(**values)


class TestScreenParams:
    """Tests for ScreenParams validation."""

    def test_valid_params(self):
        """Test that valid parameters are stored unchanged."""
        params = make_params()
        assert params.width == 8
        assert params.height == 6
        assert params.look_from == (0.0, 0.0, 3.0)

    def test_frozen(self):
        """Test that params cannot be mutated."""
        params = make_params()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.width = 10

    @pytest.mark.parametrize("field", ["width", "height"])
    @pytest.mark.parametrize("value", [0, -1, 2.5])
    def test_rejects_bad_resolution(self, field, value):
        """Test that non-positive or non-integer resolutions are rejected."""
        with pytest.raises(ValueError, match=field):
            make_params(**{field: value})

    @pytest.mark.parametrize("field", ["viewport_width", "viewport_height"])
    def test_rejects_non_positive_viewport(self, field):
        """Test that the virtual screen must have positive size."""
        with pytest.raises(ValueError, match="Viewport"):
            make_params(**{field: 0.0})


class TestRenderSettings:
    """Tests for RenderSettings defaults and validation."""

    def test_defaults(self):
        """Test default sampling parameters."""
        settings = RenderSettings()
        assert settings.samples == 16
        assert settings.max_depth == MAX_DEPTH == 64
        assert settings.seed is None

    def test_rejects_zero_samples(self):
        """Test that at least one sample per pixel is required."""
        with pytest.raises(ValueError, match="samples"):
            RenderSettings(samples=0)

    def test_rejects_zero_depth(self):
        """Test that the recursion cap must be positive."""
        with pytest.raises(ValueError, match="max_depth"):
            RenderSettings(max_depth=0)

    def test_rejects_bool_samples(self):
        """Test that booleans are not accepted as counts."""
        with pytest.raises(ValueError):
            RenderSettings(samples=True)
