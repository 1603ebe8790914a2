"""Dashboard screen package."""

from pulse.screens.dashboard.dashboard_screen import DashboardScreen
from pulse.screens.dashboard.presenter import DashboardPresenter

__all__ = ["DashboardPresenter", "DashboardScreen"]
