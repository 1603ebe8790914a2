"""Scalar constants for Pulse.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Pulse"
APP_VERSION: Final = "0.1.0"
APP_DESCRIPTION: Final = "Real-time homelab infrastructure monitor"

# ============================================================================
# Display strings
# ============================================================================

UPTIME_UNKNOWN: Final = "-"
REFRESH_NEVER: Final = "never"
SORT_ASCENDING_GLYPH: Final = "^"
SORT_DESCENDING_GLYPH: Final = "v"
STATUS_ACTIVE_ICON: Final = "●"
STATUS_INACTIVE_ICON: Final = "○"

# ============================================================================
# Proxmox API vocabulary
# ============================================================================

PROXMOX_API_PREFIX: Final = "/api2/json"
PROXMOX_AUTH_SCHEME: Final = "PVEAPIToken"
PROXMOX_NODE_ONLINE: Final = "online"
PROXMOX_GUEST_RUNNING: Final = "running"

__all__ = [
    "APP_DESCRIPTION",
    "APP_TITLE",
    "APP_VERSION",
    "PROXMOX_API_PREFIX",
    "PROXMOX_AUTH_SCHEME",
    "PROXMOX_GUEST_RUNNING",
    "PROXMOX_NODE_ONLINE",
    "REFRESH_NEVER",
    "SORT_ASCENDING_GLYPH",
    "SORT_DESCENDING_GLYPH",
    "STATUS_ACTIVE_ICON",
    "STATUS_INACTIVE_ICON",
    "UPTIME_UNKNOWN",
]
