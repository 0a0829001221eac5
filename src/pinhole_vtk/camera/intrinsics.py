"""Pinhole intrinsics to VTK camera conversions."""

from __future__ import annotations
from typing import Tuple
import math
import numpy as np


def compute_window_center(
    principal_pt,
    nx: int,
    ny: int
) -> Tuple[float, float]:
    """
    Convert a principal point to a VTK window center.

    The window center is the principal point offset in normalized
    [-1, 1] viewport coordinates:
        wcx = -2 * (px - nx/2) / nx
        wcy =  2 * (py - ny/2) / ny

    Image rows grow downward while the camera view-up is -Y, hence the
    opposite signs on the two axes.

    Args:
        principal_pt: (px, py) principal point (pixels)
        nx, ny: Image width and height (pixels)

    Returns:
        (wcx, wcy)
    """
    px, py = np.float64(principal_pt[0]), np.float64(principal_pt[1])
    nx, ny = np.float64(nx), np.float64(ny)

    # Zero image size gives inf/nan offsets, not an exception
    with np.errstate(divide="ignore", invalid="ignore"):
        wcx = -2.0 * (px - nx / 2.0) / nx
        wcy = 2.0 * (py - ny / 2.0) / ny
    return float(wcx), float(wcy)


def compute_view_angle(focal_len: float, ny: int) -> float:
    """
    Vertical field of view (degrees) for a focal length in pixels.

        view_angle = degrees(2 * atan2(ny/2, focal_len))
    """
    return math.degrees(2.0 * math.atan2(ny / 2.0, focal_len))


def compute_focal_length(view_angle: float, ny: int) -> float:
    """Focal length (pixels) giving ``view_angle`` degrees over ``ny`` rows."""
    return (ny / 2.0) / math.tan(math.radians(view_angle) / 2.0)
