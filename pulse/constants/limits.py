"""Limit and threshold constants for Pulse."""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1.0

# ============================================================================
# Display thresholds (percent)
# ============================================================================

USAGE_CRITICAL_THRESHOLD: Final = 90.0
USAGE_WARNING_THRESHOLD: Final = 70.0

# ============================================================================
# Display widths (characters)
# ============================================================================

MINI_BAR_WIDTH: Final = 8
NODE_NAME_WIDTH: Final = 10
WORKLOAD_NAME_WIDTH: Final = 12
WORKLOAD_NODE_WIDTH: Final = 8

__all__ = [
    "MINI_BAR_WIDTH",
    "NODE_NAME_WIDTH",
    "REFRESH_INTERVAL_MIN",
    "USAGE_CRITICAL_THRESHOLD",
    "USAGE_WARNING_THRESHOLD",
    "WORKLOAD_NAME_WIDTH",
    "WORKLOAD_NODE_WIDTH",
]
