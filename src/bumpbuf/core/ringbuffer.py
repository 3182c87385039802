from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from .iterator import BumpBufferIterator

T = TypeVar("T")

MIN_CAPACITY = 2


class BumpBuffer(Generic[T]):
    """
    Fixed-capacity sliding window over the most recent pushes.

    Storage is allocated once at construction. ``push`` writes at the cursor
    and overwrites the oldest slot once the buffer has wrapped, so the window
    always holds the last ``capacity`` values.

    Offsets count backward in time: ``at(0)`` is the newest value and
    ``at(len(buf) - 1)`` the oldest retained one. Accessors return ``None``
    when the requested sample does not exist yet.
    """

    __slots__ = ("_capacity", "_data", "_cursor", "_wrapped")

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        if capacity < MIN_CAPACITY:
            raise ValueError(f"capacity must be >= {MIN_CAPACITY}, got {capacity}")
        self._capacity = capacity
        self._data: list[T | None] = [None] * capacity
        self._cursor = 0
        self._wrapped = False

    # ------------------------------------------------------------------ write
    def push(self, value: T) -> None:
        """Write ``value`` at the cursor, evicting the oldest value when full."""
        self._data[self._cursor] = value
        self._cursor += 1
        if self._cursor == self._capacity:
            self._cursor = 0
            # Slots at the cursor and above now hold valid past data
            self._wrapped = True

    def extend(self, values: Iterable[T]) -> None:
        """Convenience method to push several values in order."""
        for value in values:
            self.push(value)

    # ------------------------------------------------------------------ state
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        """Index of the next slot to be written."""
        return self._cursor

    @property
    def wrapped(self) -> bool:
        """True once the buffer has been filled at least once."""
        return self._wrapped

    def __len__(self) -> int:
        return self._capacity if self._wrapped else self._cursor

    def __bool__(self) -> bool:
        return not self.is_empty()

    def is_empty(self) -> bool:
        return self._cursor == 0 and not self._wrapped

    def just_wrapped(self) -> bool:
        """Return True if the last push completed a lap of ``capacity`` writes."""
        return self._cursor == 0 and self._wrapped

    def span(self) -> int | None:
        """Index steps between the oldest and newest sample (``None`` if empty)."""
        if self.is_empty():
            return None
        return len(self) - 1

    # ------------------------------------------------------------------- read
    def at(self, offset: int) -> T | None:
        """
        Return the value ``offset`` pushes back from the most recent one.

        Parameters
        ----------
        offset:
            0 for the newest value, 1 for the one before it, up to
            ``len(self) - 1`` for the oldest retained value.

        Returns
        -------
        The stored value, or ``None`` when ``offset`` is outside the
        retained window.
        """
        if offset < 0 or offset >= len(self):
            return None
        return self._data[(self._cursor - 1 - offset) % self._capacity]

    def recent(self) -> T | None:
        """Return the most recently pushed value."""
        return self.at(0)

    def previous(self) -> T | None:
        """Return the second most recent value, or ``None`` before two pushes."""
        return self.at(1)

    def oldest(self) -> T | None:
        """Return the oldest value still retained."""
        span = self.span()
        if span is None:
            return None
        return self.at(span)

    # --------------------------------------------------------------- iterate
    def iter(self) -> BumpBufferIterator[T]:
        """Return an oldest-to-newest iterator over a snapshot of the window."""
        if not self._wrapped:
            # Only the filled prefix holds data
            return BumpBufferIterator(tuple(self._data[: self._cursor]), 0, self._cursor)
        return BumpBufferIterator(tuple(self._data), self._cursor, self._capacity)

    def __iter__(self) -> BumpBufferIterator[T]:
        return self.iter()

    def snapshot(self) -> list[T]:
        """Return a copy of the logical contents, oldest first."""
        return list(self.iter())

    def copy(self) -> BumpBuffer[T]:
        """Return an independent buffer with identical contents and cursor."""
        clone = object.__new__(type(self))
        clone._capacity = self._capacity
        clone._data = list(self._data)
        clone._cursor = self._cursor
        clone._wrapped = self._wrapped
        return clone

    def __copy__(self) -> BumpBuffer[T]:
        return self.copy()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"len={len(self)}, wrapped={self._wrapped})"
        )
