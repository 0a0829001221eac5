"""Type conversion utilities."""

from __future__ import annotations
from typing import Union
import numpy as np
from omegaconf import ListConfig, OmegaConf


def to_numpy_array(
    x: Union[np.ndarray, ListConfig, list, tuple],
    dtype: np.dtype = np.float64
) -> np.ndarray:
    """
    Convert input to NumPy array.
    
    Args:
        x: Input (numpy array, OmegaConf list or plain sequence)
        dtype: Target dtype
    
    Returns:
        NumPy array (always a copy, never a view of the input)
    """
    if isinstance(x, ListConfig):
        x = OmegaConf.to_container(x, resolve=True)
    return np.array(x, dtype=dtype)
