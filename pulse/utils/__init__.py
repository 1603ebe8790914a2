"""Utility functions for Pulse."""

from pulse.utils.formatters import (
    format_bytes,
    format_time_since,
    format_uptime,
)

__all__ = [
    # Formatting
    "format_bytes",
    "format_time_since",
    "format_uptime",
]
