"""Numeric statistics derived from a bump buffer's accessors.

These helpers only apply to buffers holding numbers; the buffer itself stays
agnostic of its element type. NumPy is used for the array-based helpers.
"""

from .slope import fit_slope, slope, slope_per_second, window_array

__all__ = ["fit_slope", "slope", "slope_per_second", "window_array"]
