"""Named collection of bump buffers, one per logical sample stream."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Dict, List, Optional, Tuple

from .ringbuffer import BumpBuffer

logger = logging.getLogger(__name__)

DEFAULT_BANK_CAPACITY = 64

StreamName = str
Number = float


class BufferBank:
    """Mapping of stream name -> :class:`BumpBuffer` sharing one capacity.

    Buffers are created lazily the first time a stream is pushed to, so only
    streams that actually produce samples hold storage. The bank does no
    locking; callers sharing it across threads must synchronize externally.
    """

    def __init__(self, capacity: int = DEFAULT_BANK_CAPACITY) -> None:
        # Validate up front; stream buffers are created lazily
        BumpBuffer(capacity)
        self._capacity = capacity
        self._buffers: Dict[StreamName, BumpBuffer[Number]] = {}

    @classmethod
    def for_streams(
        cls,
        names: Iterable[StreamName],
        capacity: int = DEFAULT_BANK_CAPACITY,
    ) -> BufferBank:
        """Pre-create buffers for the expected ``names``."""
        bank = cls(capacity)
        for name in names:
            bank.get_or_create(name)
        return bank

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, name: StreamName, value: Number) -> None:
        self.get_or_create(name).push(value)

    def get_or_create(self, name: StreamName) -> BumpBuffer[Number]:
        buf = self._buffers.get(name)
        if buf is None:
            buf = BumpBuffer(self._capacity)
            self._buffers[name] = buf
            logger.debug("Created buffer for stream %r (capacity %d)", name, self._capacity)
        return buf

    def get(self, name: StreamName) -> Optional[BumpBuffer[Number]]:
        return self._buffers.get(name)

    def names(self) -> List[StreamName]:
        return list(self._buffers.keys())

    def items(self) -> List[Tuple[StreamName, BumpBuffer[Number]]]:
        """Return a snapshot list of (name, buffer) pairs."""
        return list(self._buffers.items())

    def latest(self) -> Dict[StreamName, Optional[Number]]:
        """Return the most recent value of every stream."""
        return {name: buf.recent() for name, buf in self._buffers.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._buffers

    def __len__(self) -> int:
        return len(self._buffers)

    def discard(self, name: StreamName) -> None:
        """Drop the buffer for ``name`` if present."""
        if self._buffers.pop(name, None) is not None:
            logger.debug("Discarded buffer for stream %r", name)
