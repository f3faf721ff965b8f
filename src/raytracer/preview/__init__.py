"""Preview module for output and visualization.

This module handles rendering output and preview:

Components:
    export: ASCII PPM (P3) and PNG export, PPM loading, RMSE comparison
    display: Matplotlib-based preview and comparison windows

Example:
    >>> from src.raytracer.preview import save_image, show_preview
    >>>
    >>> image = screen.render(samples=16, seed=0)
    >>> save_image(image, "rendered.ppm")
    >>> show_preview(image)
"""

from src.raytracer.preview.display import show_comparison, show_preview
from src.raytracer.preview.export import (
    compute_rmse,
    format_ppm,
    load_ppm,
    save_image,
    save_png,
    write_ppm,
)

__all__ = [
    # Display functions
    "show_preview",
    "show_comparison",
    # Export functions
    "format_ppm",
    "write_ppm",
    "load_ppm",
    "save_png",
    "save_image",
    "compute_rmse",
]
