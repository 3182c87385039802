"""Fixed-capacity presets built on the single generic :class:`BumpBuffer`."""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple, Type

from .ringbuffer import BumpBuffer

STANDARD_CAPACITIES: Tuple[int, ...] = (
    8,
    16,
    25,
    32,
    50,
    64,
    100,
    128,
    250,
    256,
    512,
    1024,
    2056,
)


@lru_cache(maxsize=None)
def sized_buffer_type(capacity: int) -> Type[BumpBuffer]:
    """
    Return a :class:`BumpBuffer` subclass whose capacity is fixed to ``capacity``.

    The subclass constructor takes no arguments; calling this twice with the
    same capacity returns the same class.
    """
    # Validate once here so a bad preset fails at definition time
    BumpBuffer(capacity)

    def __init__(self: BumpBuffer) -> None:
        BumpBuffer.__init__(self, capacity)

    return type(
        f"BumpBuffer{capacity}",
        (BumpBuffer,),
        {
            "__slots__": (),
            "__init__": __init__,
            "__module__": __name__,
            "__doc__": f"Bump buffer retaining the last {capacity} pushes.",
        },
    )


SIZED_BUFFERS: Dict[int, Type[BumpBuffer]] = {
    capacity: sized_buffer_type(capacity) for capacity in STANDARD_CAPACITIES
}

BumpBuffer8 = SIZED_BUFFERS[8]
BumpBuffer16 = SIZED_BUFFERS[16]
BumpBuffer25 = SIZED_BUFFERS[25]
BumpBuffer32 = SIZED_BUFFERS[32]
BumpBuffer50 = SIZED_BUFFERS[50]
BumpBuffer64 = SIZED_BUFFERS[64]
BumpBuffer100 = SIZED_BUFFERS[100]
BumpBuffer128 = SIZED_BUFFERS[128]
BumpBuffer250 = SIZED_BUFFERS[250]
BumpBuffer256 = SIZED_BUFFERS[256]
BumpBuffer512 = SIZED_BUFFERS[512]
BumpBuffer1024 = SIZED_BUFFERS[1024]
BumpBuffer2056 = SIZED_BUFFERS[2056]

__all__ = [
    "STANDARD_CAPACITIES",
    "SIZED_BUFFERS",
    "sized_buffer_type",
    "BumpBuffer8",
    "BumpBuffer16",
    "BumpBuffer25",
    "BumpBuffer32",
    "BumpBuffer50",
    "BumpBuffer64",
    "BumpBuffer100",
    "BumpBuffer128",
    "BumpBuffer250",
    "BumpBuffer256",
    "BumpBuffer512",
    "BumpBuffer1024",
    "BumpBuffer2056",
]
