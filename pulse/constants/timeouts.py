"""Timeout constants for Pulse.

All timeout and interval values for API requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# Proxmox API timeouts (float, in seconds)
# ============================================================================

PROXMOX_CONNECT_TIMEOUT: Final = 5.0
PROXMOX_TOTAL_TIMEOUT: Final = 10.0

# ============================================================================
# UI intervals (float, in seconds)
# ============================================================================

CLOCK_TICK_INTERVAL: Final = 1.0

__all__ = [
    "CLOCK_TICK_INTERVAL",
    "PROXMOX_CONNECT_TIMEOUT",
    "PROXMOX_TOTAL_TIMEOUT",
]
