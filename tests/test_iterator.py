from __future__ import annotations

import operator

from bumpbuf.core.iterator import BumpBufferIterator
from bumpbuf.core.ringbuffer import BumpBuffer


def test_empty_buffer_yields_nothing() -> None:
    buf: BumpBuffer[int] = BumpBuffer(4)
    assert list(buf) == []


def test_partial_fill_yields_push_order() -> None:
    buf: BumpBuffer[int] = BumpBuffer(8)
    buf.extend([5, 6, 7])
    assert list(buf) == [5, 6, 7]


def test_exact_fill_yields_all_values() -> None:
    buf: BumpBuffer[int] = BumpBuffer(4)
    buf.extend([1, 2, 3, 4])
    assert buf.just_wrapped()
    assert list(buf) == [1, 2, 3, 4]


def test_overflow_yields_capacity_items_oldest_first() -> None:
    buf: BumpBuffer[int] = BumpBuffer(4)
    buf.extend(range(11))
    assert list(buf) == [7, 8, 9, 10]


def test_each_iteration_is_independent() -> None:
    buf: BumpBuffer[int] = BumpBuffer(3)
    buf.extend([1, 2, 3, 4])
    first = iter(buf)
    second = buf.iter()
    assert isinstance(first, BumpBufferIterator)
    assert next(first) == 2
    assert list(second) == [2, 3, 4]
    assert list(first) == [3, 4]
    assert list(buf) == [2, 3, 4]


def test_pushes_do_not_affect_iteration_in_progress() -> None:
    buf: BumpBuffer[int] = BumpBuffer(4)
    buf.extend([1, 2, 3])
    it = iter(buf)
    assert next(it) == 1
    buf.extend([10, 20, 30])
    assert list(it) == [2, 3]
    assert list(buf) == [3, 10, 20, 30]


def test_length_hint_tracks_remaining_items() -> None:
    buf: BumpBuffer[int] = BumpBuffer(4)
    buf.extend(range(6))
    it = iter(buf)
    assert operator.length_hint(it) == 4
    next(it)
    assert operator.length_hint(it) == 3
    list(it)
    assert operator.length_hint(it) == 0


def test_filling_buffer_copies_only_filled_slots() -> None:
    buf: BumpBuffer[int] = BumpBuffer(2056)
    buf.push(7)
    it = buf.iter()
    assert len(it._slots) == 1
    assert list(it) == [7]


def test_wrapped_buffer_copies_every_slot() -> None:
    buf: BumpBuffer[int] = BumpBuffer(4)
    buf.extend(range(6))
    assert len(buf.iter()._slots) == 4
