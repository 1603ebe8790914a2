"""Screens for Pulse."""

from pulse.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
