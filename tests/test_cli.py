"""Tests for the demo scene rendering script."""

import numpy as np
import pytest
from PIL import Image as PILImage

from examples.render_demo_scene import main, parse_args
from src.raytracer.core.config import MAX_DEPTH
from src.raytracer.preview.export import load_ppm

SMALL = ["--width", "6", "--height", "4", "--samples", "1", "--seed", "3"]


class TestParseArgs:
    """Tests for command-line parsing."""

    def test_defaults(self):
        """Test default option values."""
        args = parse_args([])
        assert (args.width, args.height) == (512, 512)
        assert args.samples == 16
        assert args.max_depth == MAX_DEPTH
        assert args.seed is None
        assert args.output == "rendered.ppm"
        assert not args.quiet
        assert not args.preview

    def test_overrides(self):
        """Test that options are parsed."""
        args = parse_args(["--max-depth", "5", "--output", "x.png", "--quiet"])
        assert args.max_depth == 5
        assert args.output == "x.png"
        assert args.quiet


class TestMain:
    """Tests for the script entry point."""

    def test_renders_ppm(self, tmp_path):
        """Test a quiet render to PPM."""
        output = tmp_path / "demo.ppm"
        assert main([*SMALL, "--output", str(output), "--quiet"]) == 0
        assert load_ppm(output).shape == (4, 6, 3)

    def test_renders_png(self, tmp_path):
        """Test a render to PNG."""
        output = tmp_path / "demo.png"
        assert main([*SMALL, "--output", str(output), "--quiet"]) == 0
        with PILImage.open(output) as img:
            assert img.size == (6, 4)

    def test_seed_reproducible(self, tmp_path):
        """Test that the same seed writes the same image."""
        a, b = tmp_path / "a.ppm", tmp_path / "b.ppm"
        main([*SMALL, "--output", str(a), "--quiet"])
        main([*SMALL, "--output", str(b), "--quiet"])
        np.testing.assert_array_equal(load_ppm(a), load_ppm(b))

    def test_progress_output(self, tmp_path, capsys):
        """Test that progress and the output path are printed."""
        output = tmp_path / "demo.ppm"
        assert main([*SMALL, "--output", str(output)]) == 0
        out = capsys.readouterr().out
        assert "Progress: 24/24 pixels" in out
        assert "Saved to:" in out

    @pytest.mark.parametrize("bad", [["--samples", "0"], ["--width", "0"], ["--max-depth", "-1"]])
    def test_invalid_settings(self, tmp_path, capsys, bad):
        """Test that invalid settings print an error and return 1."""
        output = tmp_path / "demo.ppm"
        assert main([*SMALL, *bad, "--output", str(output), "--quiet"]) == 1
        assert capsys.readouterr().err.startswith("Error:")
        assert not output.exists()

    def test_unwritable_output(self, tmp_path, capsys):
        """Test that a write failure prints an error and returns 1."""
        output = tmp_path / "missing" / "demo.ppm"
        assert main([*SMALL, "--output", str(output), "--quiet"]) == 1
        assert "Error:" in capsys.readouterr().err
