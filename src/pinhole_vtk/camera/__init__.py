"""Pinhole camera to VTK camera conversion."""

from .transform import (
    make_transform,
    rotation_to_matrix,
    to_vtk_matrix,
    from_vtk_matrix,
)
from .intrinsics import (
    compute_window_center,
    compute_view_angle,
    compute_focal_length,
)
from .vtk_camera import (
    VtkCameraParams,
    compute_vtk_camera_params,
    apply_camera_params,
    make_vtk_camera,
    read_camera_params,
)
from .config import load_camera_config, make_vtk_camera_from_config

__all__ = [
    "make_transform",
    "rotation_to_matrix",
    "to_vtk_matrix",
    "from_vtk_matrix",
    "compute_window_center",
    "compute_view_angle",
    "compute_focal_length",
    "VtkCameraParams",
    "compute_vtk_camera_params",
    "apply_camera_params",
    "make_vtk_camera",
    "read_camera_params",
    "load_camera_config",
    "make_vtk_camera_from_config",
]
