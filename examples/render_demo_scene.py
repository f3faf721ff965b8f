#!/usr/bin/env python3
"""Render the demo scene.

This script demonstrates end-to-end rendering of the built-in demo scene:
three mirror spheres and four mirror floor decals over a diffuse ground
plane under a sky gradient. It builds the scene, sets up the look-at camera,
renders with jittered anti-aliasing and writes the image to disk.

Usage:
    python -m examples.render_demo_scene [options]

Options:
    --width WIDTH         Image width in pixels (default: 512)
    --height HEIGHT       Image height in pixels (default: 512)
    --samples SAMPLES     Anti-aliasing samples per pixel (default: 16)
    --max-depth DEPTH     Recursion cap for bounce rays (default: 64)
    --seed SEED           Random seed for a reproducible render
    --output OUTPUT       Output file path, .ppm or .png (default: rendered.ppm)
    --preview             Show the result in a Matplotlib window
    --quiet               Suppress progress output
    --verbose             Enable debug logging

Example:
    python -m examples.render_demo_scene --width 128 --height 128 --samples 4 --seed 1
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from src.raytracer.core.config import MAX_DEPTH, RenderSettings
from src.raytracer.core.screen import Screen
from src.raytracer.preview.display import show_preview
from src.raytracer.preview.export import save_image
from src.raytracer.scene.demo import create_demo_scene

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=512,
        help="Image width in pixels (default: 512)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=512,
        help="Image height in pixels (default: 512)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=16,
        help="Anti-aliasing samples per pixel (default: 16)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Recursion cap for bounce rays (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible render (default: fresh entropy)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="rendered.ppm",
        help="Output file path, .ppm or .png (default: rendered.ppm)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def render_demo_scene(
    settings: RenderSettings,
    width: int = 512,
    height: int = 512,
    output_path: str = "rendered.ppm",
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save to file.

    Args:
        settings: Sampling parameters (samples, recursion cap, seed).
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (PPM, or PNG for a .png extension).
        preview: If True, show the image in a Matplotlib window after saving.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")

    objects, params = create_demo_scene(width=width, height=height)
    screen = Screen.from_params(params, objects, max_depth=settings.max_depth)
    logger.debug("Screen: %r, params: %s", screen, params)

    if not quiet:
        print(f"Rendering {settings.samples} samples per pixel...")

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / target) * 100 if target > 0 else 0
            pixels_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{target} pixels "
                f"({progress_pct:.1f}%) - {pixels_per_sec:.1f} px/s",
                end="",
                flush=True,
            )

    image = screen.render(
        samples=settings.samples,
        seed=settings.seed,
        callback=progress_callback,
    )

    if not quiet:
        print()  # Newline after progress

    output_file = save_image(image, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if preview:
        show_preview(image, title=f"Demo scene - {settings.samples} samples")

    return output_file


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = RenderSettings(
            samples=args.samples,
            max_depth=args.max_depth,
            seed=args.seed,
        )
        render_demo_scene(
            settings,
            width=args.width,
            height=args.height,
            output_path=args.output,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
