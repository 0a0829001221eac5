"""Homogeneous transform utilities."""

from __future__ import annotations
import numpy as np
from vtkmodules.vtkCommonMath import vtkMatrix4x4

from ..utils.conversion import to_numpy_array


def rotation_to_matrix(rotation) -> np.ndarray:
    """
    Convert a rotation to a 3x3 numpy array.

    Args:
        rotation: 3x3 array-like, flat row-major list of 9 floats, or any
            object with an ``as_matrix()`` method
            (e.g. ``scipy.spatial.transform.Rotation``)

    Returns:
        3x3 float64 numpy array

    Raises:
        ValueError: If input cannot be reshaped to 3x3
    """
    if hasattr(rotation, "as_matrix"):
        rotation = rotation.as_matrix()

    R = to_numpy_array(rotation)

    if R.shape == (9,):
        R = R.reshape(3, 3)

    if R.shape != (3, 3):
        raise ValueError(
            f"Expected 3x3 rotation or flat length-9 array, got shape {R.shape}"
        )

    return R


def make_transform(rotation, translation) -> np.ndarray:
    """
    Pack a rotation and translation into a 4x4 homogeneous transform.

    Layout (row-major):
        [ R00 R01 R02 Tx ]
        [ R10 R11 R12 Ty ]
        [ R20 R21 R22 Tz ]
        [  0   0   0   1 ]

    Args:
        rotation: 3x3 rotation mapping world points to camera coordinates
            (see ``rotation_to_matrix`` for accepted forms)
        translation: (3,) translation mapping world points to camera coordinates

    Returns:
        4x4 float64 transform; a new array that does not alias the inputs

    Raises:
        ValueError: If rotation or translation has the wrong shape
    """
    R = rotation_to_matrix(rotation)
    T = to_numpy_array(translation).reshape(-1)

    if T.shape != (3,):
        raise ValueError(f"translation must be (3,), got {T.shape}")

    # Bottom row stays zero apart from (3, 3)
    M = np.zeros((4, 4), dtype=np.float64)
    M[:3, :3] = R
    M[:3, 3] = T
    M[3, 3] = 1.0

    return M


def to_vtk_matrix(m) -> vtkMatrix4x4:
    """
    Copy a 4x4 transform into a new vtkMatrix4x4.

    Args:
        m: 4x4 array-like or flat length-16 array (row-major)

    Returns:
        vtkMatrix4x4 owned by the caller
    """
    M = to_numpy_array(m)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )

    vtk_m = vtkMatrix4x4()
    for r in range(4):
        for c in range(4):
            vtk_m.SetElement(r, c, float(M[r, c]))

    return vtk_m


def from_vtk_matrix(vtk_m: vtkMatrix4x4) -> np.ndarray:
    """Read a vtkMatrix4x4 into a 4x4 float64 numpy array."""
    return np.array(
        [[vtk_m.GetElement(r, c) for c in range(4)] for r in range(4)],
        dtype=np.float64
    )
