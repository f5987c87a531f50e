"""Diagnostics package.

- round_trip, holiday_table: always available, stdlib only
- holiday_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["round_trip", "holiday_table", "holiday_scatter"]
