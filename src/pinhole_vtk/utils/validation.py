"""Input validation utilities."""

from __future__ import annotations
import math
import numpy as np


def validate_camera_inputs(
    focal_len: float,
    nx: int,
    ny: int,
    principal_pt,
    depth_min: float,
    depth_max: float
):
    """
    Validate pinhole camera parameters before conversion.
    
    Args:
        focal_len: Focal length (pixels)
        nx, ny: Image dimensions (pixels)
        principal_pt: (px, py) principal point (pixels)
        depth_min, depth_max: Clipping range
    
    Raises:
        ValueError: If inputs are invalid
    """
    if nx <= 0 or ny <= 0:
        raise ValueError(f"Image dimensions must be positive, got {nx}x{ny}")
    
    if not math.isfinite(focal_len) or focal_len <= 0:
        raise ValueError(f"focal_len must be positive and finite, got {focal_len}")
    
    pp = np.asarray(principal_pt, dtype=np.float64)
    if pp.shape != (2,):
        raise ValueError(f"principal_pt must be (2,), got {pp.shape}")
    
    if not np.isfinite(pp).all():
        raise ValueError("principal_pt contains NaN or Inf")
    
    if depth_min <= 0:
        raise ValueError(f"depth_min must be positive, got {depth_min}")
    
    if depth_min >= depth_max:
        raise ValueError(
            f"depth_min must be less than depth_max, got ({depth_min}, {depth_max})"
        )
