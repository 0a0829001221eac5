import math

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from pinhole_vtk.utils.debug import DEBUG_ENV_VAR


@pytest.fixture(autouse=True)
def _quiet_debug(monkeypatch):
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)


@pytest.fixture
def vga_intrinsics():
    """640x480 image, centered principal point, 60 degree vertical FOV."""
    return {
        "focal_len": 480.0 / (2.0 * math.tan(math.radians(30.0))),
        "nx": 640,
        "ny": 480,
        "principal_pt": (320.0, 240.0),
    }


@pytest.fixture
def rotation():
    return Rotation.from_euler("xyz", [10.0, -25.0, 40.0], degrees=True)


@pytest.fixture
def translation():
    return np.array([0.3, -1.2, 4.5])
