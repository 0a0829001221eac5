"""Camera configuration parser."""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Union
from omegaconf import DictConfig, OmegaConf
from vtkmodules.vtkRenderingCore import vtkCamera

from .vtk_camera import make_vtk_camera

REQUIRED_KEYS = ("width", "height", "focal_len", "rotation", "translation")

DEFAULT_ZNEAR = 0.01
DEFAULT_ZFAR = 100.0


def load_camera_config(config_path: Union[str, Path]) -> DictConfig:
    """
    Load and validate a YAML camera configuration.

    Args:
        config_path: Path to YAML file with a top-level ``camera`` section

    Returns:
        The ``camera`` section as an OmegaConf DictConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the section or a required key is missing
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    if "camera" not in config:
        raise ValueError("Missing required config section: camera")

    camera_cfg = config.camera
    for key in REQUIRED_KEYS:
        if key not in camera_cfg:
            raise ValueError(f"Missing required camera key: {key}")

    return camera_cfg


def _get_float(camera_cfg, key: str, default: float) -> float:
    """Optional float key; missing or null falls back to the default."""
    value = camera_cfg.get(key)
    return default if value is None else float(value)


def make_vtk_camera_from_config(
    camera_cfg: Union[DictConfig, Dict[str, Any]]
) -> vtkCamera:
    """
    Build a vtkCamera from a configuration mapping.

    Args:
        camera_cfg: Camera configuration with keys:
            Required:
                - width, height: Image dimensions (int)
                - focal_len: Focal length in pixels (float)
                - rotation: World-to-camera rotation (3x3 or flat 9 values)
                - translation: World-to-camera translation [x, y, z]
            Optional:
                - cx, cy: Principal point in pixels (default: image center)
                - znear, zfar: Clipping range (default: 0.01, 100.0)

    Returns:
        vtkCamera

    Raises:
        ValueError: If a value is out of range

    Example:
        >>> config = {
        ...     "width": 640, "height": 480,
        ...     "focal_len": 415.7,
        ...     "cx": 320.0, "cy": 240.0,
        ...     "rotation": [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
        ...     "translation": [0, 0, 5],
        ... }
        >>> cam = make_vtk_camera_from_config(config)
    """
    if isinstance(camera_cfg, DictConfig):
        camera_cfg = OmegaConf.to_container(camera_cfg, resolve=True)

    width = int(camera_cfg["width"])
    height = int(camera_cfg["height"])
    focal_len = float(camera_cfg["focal_len"])

    cx = _get_float(camera_cfg, "cx", width / 2.0)
    cy = _get_float(camera_cfg, "cy", height / 2.0)

    znear = _get_float(camera_cfg, "znear", DEFAULT_ZNEAR)
    zfar = _get_float(camera_cfg, "zfar", DEFAULT_ZFAR)

    return make_vtk_camera(
        focal_len,
        width,
        height,
        (cx, cy),
        camera_cfg["rotation"],
        camera_cfg["translation"],
        znear,
        zfar,
        validate=True
    )
