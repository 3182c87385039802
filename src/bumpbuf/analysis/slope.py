"""Rate-of-change estimates over a bump buffer's retained window."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..core.ringbuffer import BumpBuffer


def window_array(buffer: BumpBuffer[Any]) -> np.ndarray:
    """Return the retained window as a 1-D float64 array, oldest first."""
    count = len(buffer)
    if count == 0:
        return np.empty(0, dtype=np.float64)
    return np.fromiter(buffer, dtype=np.float64, count=count)


def slope(buffer: BumpBuffer[Any]) -> Optional[Any]:
    """
    Two-point rate of change between the oldest and newest sample.

    Samples are treated as evenly spaced on an index axis, so the result is
    ``(recent - oldest) / span`` in units per push. This is not a
    least-squares fit; see :func:`fit_slope` for that.

    Returns
    -------
    The slope, or ``None`` when fewer than two samples have been pushed.
    """
    span = buffer.span()
    if not span:
        return None
    return (buffer.recent() - buffer.oldest()) / span


def slope_per_second(buffer: BumpBuffer[Any], sample_rate_hz: float) -> Optional[float]:
    """
    Convert :func:`slope` to units per second for a fixed sampling rate.

    Parameters
    ----------
    buffer:
        Buffer of samples pushed at ``sample_rate_hz``.
    sample_rate_hz:
        Sampling rate in Hz. Must be > 0.
    """
    rate = float(sample_rate_hz)
    if rate <= 0:
        raise ValueError(f"sample_rate_hz must be > 0, got {rate}")
    per_push = slope(buffer)
    if per_push is None:
        return None
    return float(per_push) * rate


def fit_slope(buffer: BumpBuffer[Any]) -> Optional[float]:
    """Least-squares slope of all retained samples against their index."""
    values = window_array(buffer)
    if values.size < 2:
        return None
    index = np.arange(values.size, dtype=np.float64)
    gradient, _intercept = np.polyfit(index, values, 1)
    return float(gradient)
