"""
Command-line entry point for pinhole -> VTK camera conversion

This script:
1. Loads a camera configuration from YAML
2. Applies command-line overrides
3. Builds the vtkCamera
4. Prints the derived VTK camera parameters

Usage:
    python run.py --config configs/camera.yaml
    python run.py --config configs/camera.yaml --focal-len 800 --debug
"""

import argparse
import os
import sys
from pathlib import Path
from omegaconf import DictConfig

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from pinhole_vtk import (
    load_camera_config,
    make_vtk_camera_from_config,
    read_camera_params,
)
from pinhole_vtk.utils.debug import DEBUG_ENV_VAR, format_vector


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Convert pinhole camera parameters to a VTK camera",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/camera.yaml
  python run.py --config configs/camera.yaml --depth-min 0.5 --depth-max 20
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="configs/camera.yaml",
        help="Path to YAML camera configuration"
    )

    parser.add_argument(
        "--focal-len", "-f",
        type=float,
        default=None,
        help="Override focal length (pixels)"
    )

    parser.add_argument(
        "--depth-min",
        type=float,
        default=None,
        help="Override near clipping distance"
    )

    parser.add_argument(
        "--depth-max",
        type=float,
        default=None,
        help="Override far clipping distance"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Enable diagnostic output (same as {DEBUG_ENV_VAR}=1)"
    )

    return parser.parse_args(argv)


def apply_cli_overrides(camera_cfg: DictConfig, args) -> DictConfig:
    """
    Apply command-line argument overrides to the camera config

    Args:
        camera_cfg: Camera section of the configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    if args.focal_len is not None:
        camera_cfg.focal_len = args.focal_len
        print(f"[Config] Override focal_len: {args.focal_len}")

    if args.depth_min is not None:
        camera_cfg.znear = args.depth_min
        print(f"[Config] Override znear: {args.depth_min}")

    if args.depth_max is not None:
        camera_cfg.zfar = args.depth_max
        print(f"[Config] Override zfar: {args.depth_max}")

    return camera_cfg


def main(argv=None):
    args = parse_args(argv)

    if args.debug:
        os.environ[DEBUG_ENV_VAR] = "1"

    camera_cfg = load_camera_config(args.config)
    print(f"[Config] Loaded camera from: {args.config}")
    print(f"  - Image: {camera_cfg.width}x{camera_cfg.height}")
    print(f"  - Focal length: {camera_cfg.focal_len}")

    camera_cfg = apply_cli_overrides(camera_cfg, args)

    camera = make_vtk_camera_from_config(camera_cfg)
    params = read_camera_params(camera)

    print(f"[Camera] Position:       {format_vector(params.position)}")
    print(f"[Camera] Focal point:    {format_vector(params.focal_point)}")
    print(f"[Camera] View up:        {format_vector(params.view_up)}")
    print(f"[Camera] Clipping range: {format_vector(params.clipping_range)}")
    print(f"[Camera] Window center:  {format_vector(params.window_center)}")
    print(f"[Camera] View angle:     {params.view_angle:.4f} deg")
    print("[Camera] Model transform:")
    for row in params.model_transform:
        print(f"  {format_vector(row)}")

    return camera


if __name__ == "__main__":
    main()
