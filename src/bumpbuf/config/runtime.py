"""Runtime configuration helpers for sizing bump buffers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

import yaml

from ..core.bank import BufferBank
from ..core.ringbuffer import MIN_CAPACITY, BumpBuffer

logger = logging.getLogger(__name__)


def calculate_capacity(window_seconds: float, rate_hz: float, *, margin: float = 1.0) -> int:
    """
    Compute how many samples are needed to cover ``window_seconds`` at
    ``rate_hz`` with an optional ``margin``.
    """
    samples = float(window_seconds) * float(rate_hz) * float(margin)
    return max(MIN_CAPACITY, int(math.ceil(samples)))


@dataclass(slots=True)
class BufferConfig:
    """
    How large a bump buffer should be.

    Either give ``capacity`` directly, or give both ``window_seconds`` and
    ``sample_rate_hz`` to size the buffer for a time window.
    """

    capacity: int = 64
    window_seconds: Optional[float] = None
    sample_rate_hz: Optional[float] = None
    margin: float = 1.0

    def resolved_capacity(self) -> int:
        """Return the number of slots to allocate (never below 2)."""
        if self.window_seconds is not None and self.sample_rate_hz is not None:
            return calculate_capacity(
                self.window_seconds, self.sample_rate_hz, margin=self.margin
            )
        return max(MIN_CAPACITY, int(self.capacity))

    def build(self) -> BumpBuffer[Any]:
        """Return a new, empty buffer with the resolved capacity."""
        return BumpBuffer(self.resolved_capacity())

    def build_bank(self) -> BufferBank:
        """Return a new :class:`BufferBank` whose streams use this capacity."""
        return BufferBank(self.resolved_capacity())


_DEFAULTS = BufferConfig()


def _config_keys() -> set[str]:
    """Names of the :class:`BufferConfig` fields a mapping may set."""
    return {f.name for f in fields(BufferConfig)}


def _buffer_settings(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """
    Collect buffer settings from ``data``.

    Keys inside a ``buffer:`` block override top-level keys of the same name.
    """
    settings: MutableMapping[str, Any] = {
        key: value for key, value in data.items() if key != "buffer"
    }
    block = data.get("buffer")
    if isinstance(block, Mapping):
        settings.update(block)
    keys = _config_keys()
    return {key: value for key, value in settings.items() if key in keys}


def _as_number(key: str, value: Any, cast: type) -> Any:
    """Return ``value`` converted by ``cast``, or ``None`` (with a warning) if unusable."""
    if isinstance(value, bool):
        logger.warning("Ignoring boolean %s=%r", key, value)
        return None
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric %s=%r", key, value)
        return None
    if not math.isfinite(as_float):
        logger.warning("Ignoring non-finite %s=%r", key, value)
        return None
    return cast(as_float)


def _coerce_positive(key: str, value: Any, fallback: Any) -> Any:
    if value is None:
        return fallback
    number = _as_number(key, value, float)
    if number is None:
        return fallback
    if number <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %r", key, value, fallback)
        return fallback
    return number


def _coerce_capacity(value: Any) -> int:
    if value is None:
        return _DEFAULTS.capacity
    capacity = _as_number("capacity", value, int)
    if capacity is None:
        return _DEFAULTS.capacity
    if capacity < MIN_CAPACITY:
        logger.warning(
            "capacity=%r is below the minimum of %d; using %d",
            value,
            MIN_CAPACITY,
            MIN_CAPACITY,
        )
        return MIN_CAPACITY
    return capacity


def config_from_mapping(data: Mapping[str, Any] | None) -> BufferConfig:
    """
    Build :class:`BufferConfig` from a parsed config document.

    Unknown keys are ignored. Values that cannot be used fall back to the
    defaults, except a capacity below 2, which is raised to 2.
    """
    if not data:
        return BufferConfig()
    settings = _buffer_settings(data)
    return BufferConfig(
        capacity=_coerce_capacity(settings.get("capacity")),
        window_seconds=_coerce_positive("window_seconds", settings.get("window_seconds"), None),
        sample_rate_hz=_coerce_positive("sample_rate_hz", settings.get("sample_rate_hz"), None),
        margin=_coerce_positive("margin", settings.get("margin"), _DEFAULTS.margin),
    )


def load_config(path: str | Path | None) -> BufferConfig:
    """
    Read buffer sizing from a YAML file.

    ``None`` or a path that does not exist gives the default sizing; a
    document that is not a mapping raises ``ValueError``.
    """
    if path is None:
        return BufferConfig()
    cfg_path = Path(path)
    if not cfg_path.is_file():
        logger.info("No buffer config at %s; using defaults", cfg_path)
        return BufferConfig()
    document = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    if document is None:
        return BufferConfig()
    if not isinstance(document, Mapping):
        raise ValueError(
            f"{cfg_path}: buffer config must be a mapping, not {type(document).__name__}"
        )
    return config_from_mapping(document)


__all__ = ["BufferConfig", "calculate_capacity", "config_from_mapping", "load_config"]
