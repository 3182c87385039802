from __future__ import annotations

import logging

import pytest

from bumpbuf.core.bank import BufferBank


def test_push_creates_buffers_lazily() -> None:
    bank = BufferBank(capacity=3)
    assert len(bank) == 0
    bank.push("ax", 1.0)
    bank.push("ax", 2.0)
    bank.push("ay", 5.0)

    assert bank.names() == ["ax", "ay"]
    assert "ax" in bank
    assert bank.get("gz") is None
    ax = bank.get("ax")
    assert ax is not None
    assert ax.capacity == 3
    assert ax.snapshot() == [1.0, 2.0]


def test_for_streams_precreates_buffers() -> None:
    bank = BufferBank.for_streams(["t1", "t2"], capacity=4)
    assert sorted(bank.names()) == ["t1", "t2"]
    assert all(buf.is_empty() for _, buf in bank.items())
    assert bank.latest() == {"t1": None, "t2": None}


def test_latest_reports_newest_per_stream() -> None:
    bank = BufferBank(capacity=2)
    for value in range(5):
        bank.push("a", float(value))
    bank.push("b", -1.0)
    assert bank.latest() == {"a": 4.0, "b": -1.0}


def test_discard_drops_stream() -> None:
    bank = BufferBank(capacity=2)
    bank.push("a", 1.0)
    bank.discard("a")
    bank.discard("missing")
    assert "a" not in bank


def test_rejects_degenerate_capacity() -> None:
    with pytest.raises(ValueError):
        BufferBank(capacity=1)


def test_stream_creation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bumpbuf.core.bank")
    bank = BufferBank(capacity=2)
    bank.push("temp", 21.5)
    bank.push("temp", 21.7)
    messages = [rec.getMessage() for rec in caplog.records]
    assert messages == ["Created buffer for stream 'temp' (capacity 2)"]
