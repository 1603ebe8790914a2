"""Dashboard state - merged collections plus UI-orthogonal view state.

The state object is created once by the application and passed
explicitly to the refresh coordinator, the interaction controller and the
renderer. Canonical collections are only ever replaced wholesale, so a
reader sees either the previous snapshot or the complete new one.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from pulse.constants.enums import InputMode, Panel, SortField
from pulse.constants.values import SORT_ASCENDING_GLYPH, SORT_DESCENDING_GLYPH
from pulse.models.core import NodeInfo, WorkloadInfo
from pulse.utils.formatters import format_time_since

logger = logging.getLogger(__name__)

# Sort keys shared by nodes and workloads. Status sorts active first when
# ascending, so the key is "is inactive".
_SORT_KEYS: dict[SortField, Callable[[Any], Any]] = {
    SortField.NAME: lambda item: item.name,
    SortField.STATUS: lambda item: not _is_active(item),
    SortField.CPU: lambda item: item.cpu_usage,
    SortField.MEMORY: lambda item: item.memory_percent,
}


def _is_active(item: NodeInfo | WorkloadInfo) -> bool:
    if isinstance(item, NodeInfo):
        return item.is_online
    return item.is_running


def sort_entities(
    items: Sequence[Any], sort_field: SortField, ascending: bool
) -> list[Any]:
    """Return ``items`` sorted by ``sort_field``.

    Descending order inverts the comparison (stable sort with ``reverse``)
    rather than reversing a previously sorted list.
    """
    return sorted(items, key=_SORT_KEYS[sort_field], reverse=not ascending)


def _clamp_index(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


@dataclass
class DashboardState:
    """Mutable dashboard state."""

    nodes: list[NodeInfo] = field(default_factory=list)
    workloads: list[WorkloadInfo] = field(default_factory=list)
    active_panel: Panel = Panel.NODES
    node_index: int = 0
    workload_index: int = 0
    sort_field: SortField = SortField.NAME
    sort_ascending: bool = True
    input_mode: InputMode = InputMode.NORMAL
    search_query: str = ""
    error_message: str | None = None
    last_refresh: float | None = None
    show_help: bool = False
    running: bool = True

    # =========================================================================
    # Collections
    # =========================================================================

    def replace_collections(
        self,
        nodes: Sequence[NodeInfo],
        workloads: Sequence[WorkloadInfo],
        *,
        refreshed_at: float | None = None,
    ) -> None:
        """Swap in new canonical collections, re-sort and clamp selections."""
        self.nodes = list(nodes)
        self.workloads = list(workloads)
        self.last_refresh = time.monotonic() if refreshed_at is None else refreshed_at
        self.apply_sort()
        self.clamp_selection()

    def apply_sort(self) -> None:
        """Re-sort both canonical collections under the current criteria."""
        self.nodes = sort_entities(self.nodes, self.sort_field, self.sort_ascending)
        self.workloads = sort_entities(self.workloads, self.sort_field, self.sort_ascending)

    # =========================================================================
    # Derived views
    # =========================================================================

    def filtered_nodes(self) -> list[NodeInfo]:
        """Nodes whose name contains the search query (case-insensitive)."""
        if not self.search_query:
            return list(self.nodes)
        query = self.search_query.lower()
        return [node for node in self.nodes if query in node.name.lower()]

    def filtered_workloads(self) -> list[WorkloadInfo]:
        """Workloads whose name or owning node contains the search query."""
        if not self.search_query:
            return list(self.workloads)
        query = self.search_query.lower()
        return [
            workload
            for workload in self.workloads
            if query in workload.name.lower() or query in workload.node.lower()
        ]

    def selected_node(self) -> NodeInfo | None:
        nodes = self.filtered_nodes()
        if 0 <= self.node_index < len(nodes):
            return nodes[self.node_index]
        return None

    def selected_workload(self) -> WorkloadInfo | None:
        workloads = self.filtered_workloads()
        if 0 <= self.workload_index < len(workloads):
            return workloads[self.workload_index]
        return None

    def nodes_summary(self) -> tuple[int, int]:
        """Return ``(online, total)`` over the canonical node collection."""
        online = sum(1 for node in self.nodes if node.is_online)
        return online, len(self.nodes)

    def workloads_summary(self) -> tuple[int, int]:
        """Return ``(running, total)`` over the canonical workload collection."""
        running = sum(1 for workload in self.workloads if workload.is_running)
        return running, len(self.workloads)

    @property
    def sort_label(self) -> str:
        return self.sort_field.label

    @property
    def sort_glyph(self) -> str:
        return SORT_ASCENDING_GLYPH if self.sort_ascending else SORT_DESCENDING_GLYPH

    def time_since_refresh(self, now: float | None = None) -> str:
        """Format the time since the last successful refresh."""
        if self.last_refresh is None:
            return format_time_since(None)
        current = time.monotonic() if now is None else now
        return format_time_since(max(0.0, current - self.last_refresh))

    # =========================================================================
    # Selection
    # =========================================================================

    def clamp_selection(self) -> None:
        """Keep both selection indices inside their filtered views."""
        self.node_index = _clamp_index(self.node_index, len(self.filtered_nodes()))
        self.workload_index = _clamp_index(self.workload_index, len(self.filtered_workloads()))

    def select_next(self) -> None:
        if self.active_panel is Panel.NODES:
            self.node_index = _clamp_index(self.node_index + 1, len(self.filtered_nodes()))
        else:
            self.workload_index = _clamp_index(
                self.workload_index + 1, len(self.filtered_workloads())
            )

    def select_previous(self) -> None:
        if self.active_panel is Panel.NODES:
            self.node_index = _clamp_index(self.node_index - 1, len(self.filtered_nodes()))
        else:
            self.workload_index = _clamp_index(
                self.workload_index - 1, len(self.filtered_workloads())
            )

    def next_panel(self) -> None:
        self.active_panel = self.active_panel.next()

    # =========================================================================
    # Sorting
    # =========================================================================

    def cycle_sort(self) -> None:
        self.sort_field = self.sort_field.next()
        self.apply_sort()
        self.clamp_selection()

    def toggle_sort_direction(self) -> None:
        self.sort_ascending = not self.sort_ascending
        self.apply_sort()
        self.clamp_selection()

    # =========================================================================
    # Search
    # =========================================================================

    def enter_search_mode(self) -> None:
        self.input_mode = InputMode.SEARCH

    def exit_search_mode(self) -> None:
        self.input_mode = InputMode.NORMAL

    def _reset_selection(self) -> None:
        self.node_index = 0
        self.workload_index = 0

    def push_search_char(self, char: str) -> None:
        self.search_query += char
        self._reset_selection()

    def pop_search_char(self) -> None:
        self.search_query = self.search_query[:-1]
        self._reset_selection()

    def clear_search(self) -> None:
        self.search_query = ""
        self._reset_selection()

    # =========================================================================
    # Misc
    # =========================================================================

    def toggle_help(self) -> None:
        self.show_help = not self.show_help

    def quit(self) -> None:
        logger.debug("Quit requested")
        self.running = False


__all__ = ["DashboardState", "sort_entities"]
