"""Common utilities for camera conversion."""

from .conversion import to_numpy_array
from .validation import validate_camera_inputs
from .debug import (
    is_debug_enabled,
    debug_print,
    format_vector,
)

__all__ = [
    # Conversion
    "to_numpy_array",
    
    # Validation
    "validate_camera_inputs",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "format_vector",
]
