"""Dashboard screen - nodes and workloads panels with live refresh."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Static
from textual.worker import Worker, WorkerState

from pulse.constants.enums import Effect
from pulse.constants.timeouts import CLOCK_TICK_INTERVAL
from pulse.controllers.refresh import RefreshOutcome
from pulse.keyboard.keymap import translate_key
from pulse.screens.dashboard.presenter import DashboardPresenter

if TYPE_CHECKING:
    from pulse.app import PulseApp

logger = logging.getLogger(__name__)

_REFRESH_WORKER_NAME = "provider-refresh"


class DashboardScreen(Screen[None]):
    """Main dashboard screen.

    Key presses are translated into input events and applied through the
    interaction controller. Provider polling runs in a thread worker; its
    outcome is merged into the state on the UI thread, so every repaint
    sees a complete snapshot.
    """

    INHERIT_BINDINGS = False

    DEFAULT_CSS = """
    DashboardScreen {
        layers: default overlay;
    }

    #header {
        height: 1;
        padding: 0 1;
    }

    #panels {
        height: 1fr;
    }

    #nodes-panel {
        width: 35%;
    }

    #workloads-panel {
        width: 65%;
    }

    #details-panel {
        height: 7;
    }

    #status-bar {
        height: 1;
    }

    #help-overlay {
        layer: overlay;
        display: none;
        dock: top;
        height: auto;
        margin: 4 20;
    }

    #help-overlay.visible {
        display: block;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._refresh_in_flight = False
        self._presenter: DashboardPresenter | None = None

    @property
    def pulse_app(self) -> PulseApp:
        return cast("PulseApp", self.app)

    @property
    def presenter(self) -> DashboardPresenter:
        if self._presenter is None:
            self._presenter = DashboardPresenter(self.pulse_app.state)
        return self._presenter

    @property
    def is_refreshing(self) -> bool:
        return self._refresh_in_flight

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        with Horizontal(id="panels"):
            yield Static(id="nodes-panel")
            yield Static(id="workloads-panel")
        yield Static(id="details-panel")
        yield Static(id="status-bar")
        yield Static(id="help-overlay")

    def on_mount(self) -> None:
        self.render_state()
        self.set_interval(self.pulse_app.refresh_interval, self.request_refresh)
        self.set_interval(CLOCK_TICK_INTERVAL, self._update_header)
        self.request_refresh()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _update_header(self) -> None:
        self.query_one("#header", Static).update(self.presenter.header())

    def render_state(self) -> None:
        """Repaint every region from the current state."""
        presenter = self.presenter
        self._update_header()
        self.query_one("#nodes-panel", Static).update(presenter.nodes_panel())
        self.query_one("#workloads-panel", Static).update(presenter.workloads_panel())
        self.query_one("#details-panel", Static).update(presenter.details_panel())
        self.query_one("#status-bar", Static).update(presenter.status_bar())
        help_overlay = self.query_one("#help-overlay", Static)
        help_overlay.update(presenter.help_overlay())
        help_overlay.set_class(self.pulse_app.state.show_help, "visible")

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        app = self.pulse_app
        input_event = translate_key(app.state, event.key, event.character)
        if input_event is None:
            # Any key still dismisses the help overlay.
            if not app.state.show_help:
                return
            app.state.show_help = False
        else:
            effect = app.controller.handle(app.state, input_event)
            if not app.state.running:
                app.exit()
                return
            if effect is Effect.REFRESH:
                self.request_refresh()
        event.stop()
        event.prevent_default()
        self.render_state()

    # =========================================================================
    # Refresh
    # =========================================================================

    def request_refresh(self) -> None:
        """Start a provider poll unless one is already running."""
        if self._refresh_in_flight:
            logger.debug("Refresh already in flight, skipping")
            return
        self._refresh_in_flight = True
        self.run_worker(
            self._poll_providers,
            name=_REFRESH_WORKER_NAME,
            thread=True,
            exit_on_error=False,
        )

    def _poll_providers(self) -> None:
        """Worker: poll every provider (runs in a thread)."""
        outcome = self.pulse_app.coordinator.poll()
        self.app.call_from_thread(self._apply_outcome, outcome)

    def _apply_outcome(self, outcome: RefreshOutcome) -> None:
        self.pulse_app.coordinator.apply(self.pulse_app.state, outcome)
        self._refresh_in_flight = False
        self.render_state()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker.name != _REFRESH_WORKER_NAME:
            return
        if event.state in (WorkerState.ERROR, WorkerState.CANCELLED):
            logger.error("Refresh worker ended with %s: %s", event.state.name, event.worker.error)
            self.pulse_app.state.error_message = f"Refresh failed: {event.worker.error}"
            self._refresh_in_flight = False
            self.render_state()


__all__ = ["DashboardScreen"]
