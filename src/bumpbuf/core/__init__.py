"""Core data structures: the bump buffer, its iterator, and sized presets.

Everything here is synchronous and allocation-stable: a buffer's storage is
sized once at construction and only overwritten in place afterwards.
"""

from .iterator import BumpBufferIterator
from .ringbuffer import MIN_CAPACITY, BumpBuffer

from .bank import BufferBank
from .sized import SIZED_BUFFERS, STANDARD_CAPACITIES, sized_buffer_type

__all__ = [
    "BumpBuffer",
    "BumpBufferIterator",
    "MIN_CAPACITY",
    "BufferBank",
    "SIZED_BUFFERS",
    "STANDARD_CAPACITIES",
    "sized_buffer_type",
]
