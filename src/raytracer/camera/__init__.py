"""Camera module for view and ray generation.

Components:
    viewport: Look-at viewport with plain and jittered primary rays

Camera responsibilities:
    - Transform (s, t) screen coordinates to world-space rays
    - Apply anti-aliasing jitter for sub-pixel sampling
    - Support look-at positioning with up vector
"""

from .viewport import JITTER_SPAN, Viewport

__all__ = [
    "Viewport",
    "JITTER_SPAN",
]
