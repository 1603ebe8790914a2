"""Pulse - real-time homelab infrastructure monitor."""

from pulse.constants.values import APP_VERSION

__version__ = APP_VERSION
