"""Pinhole camera to vtkCamera conversion."""

from __future__ import annotations
from typing import NamedTuple, Tuple
import numpy as np
from vtkmodules.vtkRenderingCore import vtkCamera

from .transform import make_transform, to_vtk_matrix, from_vtk_matrix
from .intrinsics import compute_window_center, compute_view_angle
from ..utils.validation import validate_camera_inputs
from ..utils.debug import debug_print

# Canonical pose: the model transform carries the real extrinsics
CAMERA_POSITION = (0.0, 0.0, 0.0)
CAMERA_FOCAL_POINT = (0.0, 0.0, 1.0)
CAMERA_VIEW_UP = (0.0, -1.0, 0.0)


class VtkCameraParams(NamedTuple):
    """Values written into a vtkCamera."""
    model_transform: np.ndarray
    position: Tuple[float, float, float]
    focal_point: Tuple[float, float, float]
    view_up: Tuple[float, float, float]
    clipping_range: Tuple[float, float]
    window_center: Tuple[float, float]
    view_angle: float


def compute_vtk_camera_params(
    focal_len: float,
    nx: int,
    ny: int,
    principal_pt,
    camera_rot,
    camera_trans,
    depth_min: float,
    depth_max: float,
    validate: bool = False
) -> VtkCameraParams:
    """
    Compute vtkCamera parameters from pinhole intrinsics and extrinsics.

    Assumes square pixels and zero skew.

    Args:
        focal_len: Focal length (pixels)
        nx, ny: Image dimensions (pixels)
        principal_pt: (px, py) intersection of the principal ray with the
            image plane (pixels)
        camera_rot, camera_trans: Rotation and translation mapping world
            points to camera coordinates
        depth_min, depth_max: Range of depths to render (clipping range)
        validate: Reject degenerate inputs with ValueError instead of
            producing a degenerate camera

    Returns:
        VtkCameraParams
    """
    if validate:
        validate_camera_inputs(focal_len, nx, ny, principal_pt, depth_min, depth_max)

    # World-to-camera transform is applied to the scene, not the camera
    model_transform = make_transform(camera_rot, camera_trans)

    window_center = compute_window_center(principal_pt, nx, ny)
    view_angle = compute_view_angle(focal_len, ny)

    return VtkCameraParams(
        model_transform=model_transform,
        position=CAMERA_POSITION,
        focal_point=CAMERA_FOCAL_POINT,
        view_up=CAMERA_VIEW_UP,
        clipping_range=(float(depth_min), float(depth_max)),
        window_center=window_center,
        view_angle=view_angle,
    )


def apply_camera_params(camera: vtkCamera, params: VtkCameraParams) -> vtkCamera:
    """
    Write VtkCameraParams into an existing vtkCamera.

    Position is set before the focal point and view-up, matching the
    order vtkCamera expects when moving away from its default pose.

    Returns:
        The same camera, for chaining
    """
    camera.SetModelTransformMatrix(to_vtk_matrix(params.model_transform))

    camera.SetPosition(*params.position)
    camera.SetFocalPoint(*params.focal_point)
    camera.SetViewUp(*params.view_up)

    camera.SetClippingRange(*params.clipping_range)
    camera.SetWindowCenter(*params.window_center)

    debug_print(f"view_angle = {params.view_angle}")
    camera.SetViewAngle(params.view_angle)

    return camera


def make_vtk_camera(
    focal_len: float,
    nx: int,
    ny: int,
    principal_pt,
    camera_rot,
    camera_trans,
    depth_min: float,
    depth_max: float,
    validate: bool = False
) -> vtkCamera:
    """
    Convert pinhole camera parameters to a new vtkCamera.

    The camera stays at the origin looking down +Z with -Y up; the
    world-to-camera transform is installed as the model transform so scene
    objects are moved into camera coordinates.

    Example:
        >>> cam = make_vtk_camera(
        ...     415.7, 640, 480, (320.0, 240.0),
        ...     np.eye(3), [0.0, 0.0, 5.0], 0.1, 100.0
        ... )
        >>> renderer.SetActiveCamera(cam)

    Returns:
        vtkCamera owned by the caller
    """
    params = compute_vtk_camera_params(
        focal_len, nx, ny, principal_pt,
        camera_rot, camera_trans,
        depth_min, depth_max,
        validate=validate
    )
    return apply_camera_params(vtkCamera(), params)


def read_camera_params(camera: vtkCamera) -> VtkCameraParams:
    """Read back the fields set by ``apply_camera_params``."""
    return VtkCameraParams(
        model_transform=from_vtk_matrix(camera.GetModelTransformMatrix()),
        position=tuple(camera.GetPosition()),
        focal_point=tuple(camera.GetFocalPoint()),
        view_up=tuple(camera.GetViewUp()),
        clipping_range=tuple(camera.GetClippingRange()),
        window_center=tuple(camera.GetWindowCenter()),
        view_angle=camera.GetViewAngle(),
    )
