"""2D projection utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..camera.transform import make_transform


def project_points_to_pixels(
    xyz: np.ndarray,
    focal_len: float,
    principal_pt,
    camera_rot,
    camera_trans
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project 3D world points to pixel coordinates with a pinhole model.

    Args:
        xyz: (N, 3) world-space positions
        focal_len: Focal length (pixels)
        principal_pt: (px, py) principal point (pixels)
        camera_rot, camera_trans: World-to-camera rotation and translation

    Returns:
        uv: (N, 2) pixel coordinates (u right, v down)
        valid: (N,) boolean mask for valid projections

    Notes:
        - Points at or behind the camera (z <= 0) are invalid
        - Invalid points set to (-1e6, -1e6)
    """
    xyz = np.asarray(xyz, dtype=np.float64).reshape(-1, 3)
    N = xyz.shape[0]

    # Homogeneous coordinates
    xyz_homogeneous = np.concatenate([xyz, np.ones((N, 1))], axis=1)

    # World -> camera
    M = make_transform(camera_rot, camera_trans)
    cam = xyz_homogeneous @ M.T
    z = cam[:, 2]

    valid = np.isfinite(cam).all(axis=1) & (z > 0)

    uv = np.full((N, 2), -1e6, dtype=np.float64)
    uv[valid, 0] = focal_len * cam[valid, 0] / z[valid] + float(principal_pt[0])
    uv[valid, 1] = focal_len * cam[valid, 1] / z[valid] + float(principal_pt[1])

    return uv, valid
