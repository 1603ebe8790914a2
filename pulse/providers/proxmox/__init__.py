"""Proxmox VE backend."""

from pulse.providers.proxmox.client import ProxmoxClient
from pulse.providers.proxmox.parser import ProxmoxParser
from pulse.providers.proxmox.provider import ProxmoxProvider

__all__ = ["ProxmoxClient", "ProxmoxParser", "ProxmoxProvider"]
