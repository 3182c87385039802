"""Fixed-capacity sliding-window buffers for numeric samples."""

from .analysis import fit_slope, slope, slope_per_second, window_array
from .config import BufferConfig, load_config
from .core import (
    BufferBank,
    BumpBuffer,
    BumpBufferIterator,
    SIZED_BUFFERS,
    STANDARD_CAPACITIES,
    sized_buffer_type,
)

__version__ = "0.1.0"

__all__ = [
    "BumpBuffer",
    "BumpBufferIterator",
    "BufferBank",
    "SIZED_BUFFERS",
    "STANDARD_CAPACITIES",
    "sized_buffer_type",
    "BufferConfig",
    "load_config",
    "fit_slope",
    "slope",
    "slope_per_second",
    "window_array",
]
