"""Unit tests for DashboardPresenter and its helpers."""

from __future__ import annotations

from rich.console import Console, RenderableType

from pulse.models.state.dashboard_state import DashboardState
from pulse.screens.dashboard.presenter import (
    DashboardPresenter,
    create_mini_bar,
    truncate,
    usage_color,
)


def _render(renderable: RenderableType, width: int = 100) -> str:
    console = Console(width=width, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


# =============================================================================
# Helpers
# =============================================================================


class TestHelpers:
    """Test rendering helpers."""

    def test_mini_bar(self) -> None:
        assert create_mini_bar(0) == "[        ]"
        assert create_mini_bar(50) == "[====    ]"
        assert create_mini_bar(100) == "[========]"

    def test_mini_bar_clamps(self) -> None:
        assert create_mini_bar(250) == "[========]"
        assert create_mini_bar(-5) == "[        ]"

    def test_truncate(self) -> None:
        assert truncate("short", 10) == "short"
        assert truncate("a-very-long-name", 6) == "a-ver~"

    def test_usage_color_thresholds(self) -> None:
        assert usage_color(10) == "green"
        assert usage_color(70) == "yellow"
        assert usage_color(89.9) == "yellow"
        assert usage_color(90) == "red"


# =============================================================================
# Presenter
# =============================================================================


class TestDashboardPresenter:
    """Test DashboardPresenter output."""

    def test_header(self, populated_state: DashboardState) -> None:
        text = DashboardPresenter(populated_state).header(now=5.0).plain
        assert "PULSE" in text
        assert "Nodes: 2/3" in text
        assert "Workloads: 3/4" in text
        assert "Sort: Name ^" in text
        assert "Refresh: 5s ago" in text

    def test_header_before_first_refresh(self, state: DashboardState) -> None:
        assert "Refresh: never" in DashboardPresenter(state).header().plain

    def test_nodes_panel_marks_selection(self, populated_state: DashboardState) -> None:
        output = _render(DashboardPresenter(populated_state).nodes_panel())
        assert "Nodes (2/3)" in output
        assert ">" in output
        assert "backup" in output

    def test_workloads_panel_rows(self, populated_state: DashboardState) -> None:
        output = _render(DashboardPresenter(populated_state).workloads_panel())
        assert "Workloads (3/4)" in output
        assert "LXC" in output
        assert "media" in output

    def test_empty_panels(self, state: DashboardState) -> None:
        presenter = DashboardPresenter(state)
        assert "No nodes" in _render(presenter.nodes_panel())
        assert "No workloads" in _render(presenter.workloads_panel())
        assert "No node selected" in _render(presenter.details_panel())

    def test_details_follow_active_panel(self, populated_state: DashboardState) -> None:
        presenter = DashboardPresenter(populated_state)
        assert "backup" in _render(presenter.details_panel())
        populated_state.next_panel()
        output = _render(presenter.details_panel())
        assert "db" in output
        assert "ID: 101" in output

    def test_status_bar_hints(self, state: DashboardState) -> None:
        assert "q:Quit" in DashboardPresenter(state).status_bar().plain

    def test_status_bar_search_prompt(self, state: DashboardState) -> None:
        state.enter_search_mode()
        state.push_search_char("p")
        assert DashboardPresenter(state).status_bar().plain == " Search: p_ "

    def test_status_bar_error(self, state: DashboardState) -> None:
        state.error_message = "Error fetching nodes from a: down"
        assert "down" in DashboardPresenter(state).status_bar().plain

    def test_status_bar_active_filter(self, state: DashboardState) -> None:
        state.search_query = "web"
        assert "Filter: web" in DashboardPresenter(state).status_bar().plain

    def test_help_overlay(self, state: DashboardState) -> None:
        output = _render(DashboardPresenter(state).help_overlay())
        assert "Keyboard Shortcuts" in output
        assert "Toggle sort order" in output
