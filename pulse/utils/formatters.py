"""Formatting utilities for durations and byte sizes.

Provides functions to render entity metrics for display:
- Uptime: seconds to the largest units, e.g. "2d 5h 30m"
- Bytes: binary (1024-based) units, e.g. "1.0 GB"
- Refresh age: seconds since last refresh, e.g. "12s ago"
"""

from __future__ import annotations

from pulse.constants.values import REFRESH_NEVER, UPTIME_UNKNOWN

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024
_TB = _GB * 1024

# Largest unit first; (threshold, suffix, decimals).
_BYTE_UNITS: tuple[tuple[int, str, int], ...] = (
    (_TB, "TB", 1),
    (_GB, "GB", 1),
    (_MB, "MB", 0),
    (_KB, "KB", 0),
)


def format_uptime(seconds: int) -> str:
    """Format an uptime in seconds.

    Examples:
        0 -> "-", 60 -> "1m", 3600 -> "1h 0m", 192600 -> "2d 5h 30m"

    Args:
        seconds: Seconds since boot. 0 means unknown or offline.

    Returns:
        Human readable uptime string.
    """
    if seconds <= 0:
        return UPTIME_UNKNOWN

    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_bytes(num_bytes: int) -> str:
    """Format a byte count using 1024-based units.

    GB and TB keep one decimal place, MB and KB none, and values below
    1024 are printed as a bare integer with a "B" suffix.
    """
    for threshold, suffix, decimals in _BYTE_UNITS:
        if num_bytes >= threshold:
            return f"{num_bytes / threshold:.{decimals}f} {suffix}"
    return f"{num_bytes} B"


def format_time_since(seconds: float | None) -> str:
    """Format the age of the last refresh ("never" before the first one)."""
    if seconds is None:
        return REFRESH_NEVER
    elapsed = int(seconds)
    if elapsed < 60:
        return f"{elapsed}s ago"
    return f"{elapsed // 60}m ago"


__all__ = [
    "format_bytes",
    "format_time_since",
    "format_uptime",
]
