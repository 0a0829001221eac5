"""Debug utilities."""

from __future__ import annotations
import os

DEBUG_ENV_VAR = "PINHOLE_VTK_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def format_vector(v, precision: int = 4) -> str:
    """Format a short vector as '(a, b, c)' for status lines."""
    return "(" + ", ".join(f"{float(x):.{precision}f}" for x in v) + ")"
