"""Configuration objects and helpers for bumpbuf.

Buffer sizes can be given directly or derived from a time window and a
sampling rate, and loaded from a YAML file such as::

    buffer:
      window_seconds: 2.0
      sample_rate_hz: 256
      margin: 1.1
"""

from .runtime import BufferConfig, calculate_capacity, config_from_mapping, load_config

__all__ = ["BufferConfig", "calculate_capacity", "config_from_mapping", "load_config"]
