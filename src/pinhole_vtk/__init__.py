"""
pinhole_vtk - Pinhole camera parameters for VTK rendering

Converts pinhole intrinsics (focal length, image size, principal point) and
world-to-camera extrinsics into a configured vtkCamera.

Components:
    - Camera: Homogeneous transforms, intrinsics conversion, vtkCamera setup
    - Utils: Validation, projection and debug helpers

Example:
    >>> import numpy as np
    >>> from pinhole_vtk import make_vtk_camera
    >>> 
    >>> cam = make_vtk_camera(
    ...     focal_len=415.7, nx=640, ny=480, principal_pt=(320.0, 240.0),
    ...     camera_rot=np.eye(3), camera_trans=[0.0, 0.0, 5.0],
    ...     depth_min=0.1, depth_max=100.0,
    ... )
    >>> renderer.SetActiveCamera(cam)
"""

__version__ = "0.1.0"

# Camera
from .camera import (
    make_transform,
    rotation_to_matrix,
    to_vtk_matrix,
    from_vtk_matrix,
    compute_window_center,
    compute_view_angle,
    compute_focal_length,
    VtkCameraParams,
    compute_vtk_camera_params,
    apply_camera_params,
    make_vtk_camera,
    read_camera_params,
    load_camera_config,
    make_vtk_camera_from_config,
)

# Utils
from .utils import (
    validate_camera_inputs,
    debug_print,
    is_debug_enabled,
)
from .utils.projection_2d import project_points_to_pixels

__all__ = [
    "__version__",
    
    # Camera
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
    
    # Utils
    "validate_camera_inputs",
    "project_points_to_pixels",
    "debug_print",
    "is_debug_enabled",
]
