"""Main application class for Pulse."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from textual.app import App
from textual.binding import Binding

from pulse.constants import APP_TITLE
from pulse.constants.defaults import REFRESH_INTERVAL_DEFAULT
from pulse.controllers.interaction import InteractionController
from pulse.controllers.refresh import RefreshCoordinator
from pulse.keyboard.app import APP_BINDINGS
from pulse.models.state.dashboard_state import DashboardState
from pulse.providers.base import BaseProvider

logger = logging.getLogger(__name__)


class PulseApp(App[None]):
    """Main TUI application for Pulse."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    state: DashboardState

    def __init__(
        self,
        providers: Iterable[BaseProvider] = (),
        refresh_interval: float = REFRESH_INTERVAL_DEFAULT,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.state = DashboardState()
        self.coordinator = RefreshCoordinator(providers)
        self.controller = InteractionController()
        self.refresh_interval = refresh_interval

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from pulse.screens import DashboardScreen

        logger.info(
            "Starting dashboard with %d provider(s), refresh every %.1fs",
            len(self.coordinator.providers),
            self.refresh_interval,
        )
        self.push_screen(DashboardScreen())

    def on_unmount(self) -> None:
        for provider in self.coordinator.providers:
            provider.close()


__all__ = ["PulseApp"]
