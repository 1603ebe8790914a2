"""All enum definitions for Pulse.

This module consolidates all enumerations used throughout the application.
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================


class NodeStatus(Enum):
    """Normalized node status."""

    ONLINE = "Online"
    OFFLINE = "Offline"


class WorkloadStatus(Enum):
    """Normalized workload status."""

    RUNNING = "Running"
    STOPPED = "Stopped"


class WorkloadKind(Enum):
    """Workload kinds, valued by their short display label."""

    VM = "VM"
    CONTAINER = "LXC"


# =============================================================================
# Dashboard State Enums
# =============================================================================


class Panel(Enum):
    """Dashboard panels that can hold the selection focus."""

    NODES = "nodes"
    WORKLOADS = "workloads"

    def next(self) -> Panel:
        """Return the other panel."""
        return Panel.WORKLOADS if self is Panel.NODES else Panel.NODES


class SortField(Enum):
    """Sort fields shared by the nodes and workloads panels."""

    NAME = "Name"
    STATUS = "Status"
    CPU = "CPU"
    MEMORY = "Memory"

    @property
    def label(self) -> str:
        return self.value

    def next(self) -> SortField:
        """Return the following field in the fixed sort cycle."""
        index = _SORT_CYCLE.index(self)
        return _SORT_CYCLE[(index + 1) % len(_SORT_CYCLE)]


_SORT_CYCLE: tuple[SortField, ...] = (
    SortField.NAME,
    SortField.STATUS,
    SortField.CPU,
    SortField.MEMORY,
)


class InputMode(Enum):
    """Keyboard input mode."""

    NORMAL = "normal"
    SEARCH = "search"


# =============================================================================
# Interaction Enums
# =============================================================================


class InputEventKind(Enum):
    """Abstract input events understood by the interaction controller."""

    QUIT = "quit"
    NEXT_PANEL = "next_panel"
    SELECT_PREVIOUS = "select_previous"
    SELECT_NEXT = "select_next"
    REFRESH = "refresh"
    CYCLE_SORT = "cycle_sort"
    TOGGLE_SORT_DIRECTION = "toggle_sort_direction"
    ENTER_SEARCH = "enter_search"
    EXIT_SEARCH = "exit_search"
    CANCEL_SEARCH = "cancel_search"
    PUSH_CHAR = "push_char"
    POP_CHAR = "pop_char"
    CLEAR_SEARCH = "clear_search"
    TOGGLE_HELP = "toggle_help"


class Effect(Enum):
    """Side effect requested by the interaction controller."""

    NONE = "none"
    REFRESH = "refresh"


class FetchKind(Enum):
    """Which provider call an error originated from."""

    NODES = "nodes"
    WORKLOADS = "workloads"


__all__ = [
    # Status
    "NodeStatus",
    "WorkloadKind",
    "WorkloadStatus",
    # Dashboard state
    "InputMode",
    "Panel",
    "SortField",
    # Interaction
    "Effect",
    "FetchKind",
    "InputEventKind",
]
