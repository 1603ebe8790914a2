"""Providers module for Pulse.

Each provider adapts one virtualization backend to the normalized
node and workload models.
"""

from pulse.providers.base import BaseProvider
from pulse.providers.exceptions import (
    ProviderDecodeError,
    ProviderError,
    ProviderTransportError,
)
from pulse.providers.proxmox import ProxmoxProvider

__all__ = [
    # Base
    "BaseProvider",
    # Errors
    "ProviderDecodeError",
    "ProviderError",
    "ProviderTransportError",
    # Backends
    "ProxmoxProvider",
]
