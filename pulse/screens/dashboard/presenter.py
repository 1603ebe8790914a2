"""Dashboard presenter - turns dashboard state into Rich renderables."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel as RichPanel
from rich.table import Table
from rich.text import Text

from pulse.constants.enums import InputMode, Panel, WorkloadKind
from pulse.constants.limits import (
    MINI_BAR_WIDTH,
    NODE_NAME_WIDTH,
    USAGE_CRITICAL_THRESHOLD,
    USAGE_WARNING_THRESHOLD,
    WORKLOAD_NAME_WIDTH,
    WORKLOAD_NODE_WIDTH,
)
from pulse.constants.values import APP_TITLE, STATUS_ACTIVE_ICON, STATUS_INACTIVE_ICON
from pulse.keyboard.keymap import HELP_ENTRIES, STATUS_HINTS
from pulse.models.core import NodeInfo, WorkloadInfo
from pulse.models.state.dashboard_state import DashboardState
from pulse.utils.formatters import format_bytes, format_uptime

_ACTIVE_BORDER = "cyan"
_INACTIVE_BORDER = "grey50"
_SELECTED_STYLE = "on grey23"
_KIND_COLORS: dict[WorkloadKind, str] = {
    WorkloadKind.VM: "magenta",
    WorkloadKind.CONTAINER: "blue",
}
_KIND_DESCRIPTIONS: dict[WorkloadKind, str] = {
    WorkloadKind.VM: "QEMU VM",
    WorkloadKind.CONTAINER: "LXC Container",
}


# =============================================================================
# Helpers
# =============================================================================


def create_mini_bar(percent: float, width: int = MINI_BAR_WIDTH) -> str:
    """Render ``percent`` as a fixed-width bar such as ``[====    ]``."""
    filled = min(width, max(0, round(percent / 100.0 * width)))
    return f"[{'=' * filled}{' ' * (width - filled)}]"


def truncate(text: str, max_len: int) -> str:
    """Shorten ``text`` to ``max_len`` characters, marking the cut with ``~``."""
    if len(text) > max_len:
        return f"{text[: max_len - 1]}~"
    return text


def usage_color(percent: float) -> str:
    if percent >= USAGE_CRITICAL_THRESHOLD:
        return "red"
    if percent >= USAGE_WARNING_THRESHOLD:
        return "yellow"
    return "green"


def _status_icon(active: bool) -> Text:
    if active:
        return Text(STATUS_ACTIVE_ICON, style="green")
    return Text(STATUS_INACTIVE_ICON, style="red")


def _gauge(title: str, percent: float, label: str, width: int = 30) -> Text:
    filled = min(width, max(0, int(percent / 100.0 * width)))
    color = usage_color(percent)
    text = Text(f"{title:<7}")
    text.append("█" * filled, style=color)
    text.append("░" * (width - filled), style="grey35")
    text.append(f" {label}")
    return text


# =============================================================================
# Presenter
# =============================================================================


class DashboardPresenter:
    """Presenter for the dashboard screen.

    Every method reads the state and returns a renderable; none of them
    mutate it.
    """

    def __init__(self, state: DashboardState) -> None:
        self._state = state

    @property
    def state(self) -> DashboardState:
        return self._state

    def header(self, *, now: float | None = None) -> Text:
        state = self._state
        nodes_online, nodes_total = state.nodes_summary()
        running, workloads_total = state.workloads_summary()

        text = Text()
        text.append(f" {APP_TITLE.upper()} ", style="bold cyan")
        text.append("| ")
        text.append(
            f"Nodes: {nodes_online}/{nodes_total}",
            style="green" if nodes_online == nodes_total else "yellow",
        )
        text.append(" | ")
        text.append(
            f"Workloads: {running}/{workloads_total}",
            style="green" if running == workloads_total else "yellow",
        )
        text.append(" | ")
        text.append(f"Sort: {state.sort_label} {state.sort_glyph}", style="grey70")
        text.append(" | ")
        text.append(f"Refresh: {state.time_since_refresh(now)}", style="grey70")
        return text

    def _node_row(self, node: NodeInfo, selected: bool) -> Text:
        row = Text(">" if selected else " ")
        row.append_text(_status_icon(node.is_online))
        row.append(f" {truncate(node.name, NODE_NAME_WIDTH):<{NODE_NAME_WIDTH}} ")
        row.append("CPU", style="grey70")
        row.append(create_mini_bar(node.cpu_usage), style=usage_color(node.cpu_usage))
        row.append(" ")
        row.append("MEM", style="grey70")
        row.append(create_mini_bar(node.memory_percent), style=usage_color(node.memory_percent))
        if selected:
            row.stylize(_SELECTED_STYLE)
        return row

    def _workload_row(self, workload: WorkloadInfo, selected: bool) -> Text:
        row = Text(">" if selected else " ")
        row.append_text(_status_icon(workload.is_running))
        row.append(" ")
        row.append(f"{workload.type_label:<3}", style=_KIND_COLORS[workload.kind])
        row.append(f" {truncate(workload.name, WORKLOAD_NAME_WIDTH):<{WORKLOAD_NAME_WIDTH}} ")
        row.append(
            f"{truncate(workload.node, WORKLOAD_NODE_WIDTH):<{WORKLOAD_NODE_WIDTH}}",
            style="grey50",
        )
        row.append(f" {workload.cpu_usage:>5.1f}% ")
        row.append(f"{format_bytes(workload.memory_used):>8}")
        if selected:
            row.stylize(_SELECTED_STYLE)
        return row

    def nodes_panel(self) -> RichPanel:
        state = self._state
        is_active = state.active_panel is Panel.NODES
        rows = [
            self._node_row(node, is_active and index == state.node_index)
            for index, node in enumerate(state.filtered_nodes())
        ]
        online, total = state.nodes_summary()
        return RichPanel(
            Group(*rows) if rows else Text("No nodes", style="grey50"),
            title=f"Nodes ({online}/{total})",
            title_align="left",
            border_style=_ACTIVE_BORDER if is_active else _INACTIVE_BORDER,
        )

    def workloads_panel(self) -> RichPanel:
        state = self._state
        is_active = state.active_panel is Panel.WORKLOADS
        rows = [
            self._workload_row(workload, is_active and index == state.workload_index)
            for index, workload in enumerate(state.filtered_workloads())
        ]
        running, total = state.workloads_summary()
        return RichPanel(
            Group(*rows) if rows else Text("No workloads", style="grey50"),
            title=f"Workloads ({running}/{total})",
            title_align="left",
            border_style=_ACTIVE_BORDER if is_active else _INACTIVE_BORDER,
        )

    def _node_details(self, node: NodeInfo) -> RenderableType:
        title = Text(node.name, style="bold")
        title.append(" | Status: ")
        title.append(node.status.value, style="green" if node.is_online else "red")
        title.append(f" | Uptime: {format_uptime(node.uptime)}")
        memory_label = (
            f"{node.memory_percent:.1f}% "
            f"({format_bytes(node.memory_used)} / {format_bytes(node.memory_total)})"
        )
        return Group(
            title,
            _gauge("CPU", node.cpu_usage, f"{node.cpu_usage:.1f}%"),
            _gauge("Memory", node.memory_percent, memory_label),
        )

    def _workload_details(self, workload: WorkloadInfo) -> RenderableType:
        title = Text(workload.name, style="bold")
        title.append(f" (ID: {workload.vmid}) | ")
        title.append(_KIND_DESCRIPTIONS[workload.kind], style=_KIND_COLORS[workload.kind])
        title.append(f" | Node: {workload.node} | ")
        title.append(workload.status.value, style="green" if workload.is_running else "red")
        title.append(f" | Uptime: {format_uptime(workload.uptime)}")
        memory_label = (
            f"{workload.memory_percent:.1f}% "
            f"({format_bytes(workload.memory_used)} / {format_bytes(workload.memory_max)})"
        )
        return Group(
            title,
            _gauge("CPU", workload.cpu_usage, f"{workload.cpu_usage:.1f}%"),
            _gauge("Memory", workload.memory_percent, memory_label),
        )

    def details_panel(self) -> RichPanel:
        state = self._state
        body: RenderableType
        if state.active_panel is Panel.NODES:
            node = state.selected_node()
            body = self._node_details(node) if node else Text("No node selected", style="grey50")
        else:
            workload = state.selected_workload()
            body = (
                self._workload_details(workload)
                if workload
                else Text("No workload selected", style="grey50")
            )
        return RichPanel(body, title="Details", title_align="left", border_style=_INACTIVE_BORDER)

    def status_bar(self) -> Text:
        state = self._state
        if state.input_mode is InputMode.SEARCH:
            return Text(f" Search: {state.search_query}_ ", style="yellow")
        if state.error_message:
            return Text(f" Error: {state.error_message} ", style="red")
        if state.search_query:
            return Text(f" Filter: {state.search_query}  (Esc to clear) ", style="grey70")
        return Text(STATUS_HINTS, style="grey70")

    def help_overlay(self) -> RichPanel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", no_wrap=True)
        table.add_column()
        for keys, description in HELP_ENTRIES:
            table.add_row(keys, description)
        return RichPanel(
            Group(
                Text("Keyboard Shortcuts", style="bold"),
                Text(""),
                table,
                Text(""),
                Text("Press any key to close", style="grey50"),
            ),
            title="Help",
            border_style=_ACTIVE_BORDER,
        )


__all__ = [
    "DashboardPresenter",
    "create_mini_bar",
    "truncate",
    "usage_color",
]
