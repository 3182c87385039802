from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


class BumpBufferIterator(Iterator[T]):
    """
    Oldest-to-newest walk over a frozen copy of a buffer's slots.

    The slots are copied when the iterator is created, so pushes made to the
    buffer afterwards never show up in (or disturb) an iteration in progress.
    """

    __slots__ = ("_slots", "_index", "_remaining")

    def __init__(self, slots: Sequence[T | None], start: int, count: int) -> None:
        self._slots = slots
        self._index = start
        self._remaining = count

    def __iter__(self) -> BumpBufferIterator[T]:
        return self

    def __next__(self) -> T:
        if self._remaining <= 0:
            raise StopIteration
        item = self._slots[self._index]
        self._index += 1
        if self._index == len(self._slots):
            self._index = 0
        self._remaining -= 1
        return item  # type: ignore[return-value]

    def __length_hint__(self) -> int:
        return self._remaining
