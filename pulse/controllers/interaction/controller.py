"""Interaction controller - maps abstract input events onto state changes.

The controller never performs I/O. A refresh request is returned to the
caller as :attr:`Effect.REFRESH`, which then runs the refresh coordinator.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pulse.constants.enums import Effect, InputEventKind, InputMode
from pulse.models.state.dashboard_state import DashboardState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputEvent:
    """A discrete input event. ``char`` is only set for ``PUSH_CHAR``."""

    kind: InputEventKind
    char: str | None = None


_SEARCH_EVENTS = frozenset(
    {
        InputEventKind.PUSH_CHAR,
        InputEventKind.POP_CHAR,
        InputEventKind.CLEAR_SEARCH,
        InputEventKind.EXIT_SEARCH,
        InputEventKind.CANCEL_SEARCH,
    }
)


def _push_char(state: DashboardState, event: InputEvent) -> None:
    if event.char:
        state.push_search_char(event.char)


def _cancel_search(state: DashboardState, event: InputEvent) -> None:
    state.exit_search_mode()
    state.clear_search()


_HANDLERS: dict[InputEventKind, Callable[[DashboardState, InputEvent], None]] = {
    InputEventKind.QUIT: lambda state, _: state.quit(),
    InputEventKind.NEXT_PANEL: lambda state, _: state.next_panel(),
    InputEventKind.SELECT_PREVIOUS: lambda state, _: state.select_previous(),
    InputEventKind.SELECT_NEXT: lambda state, _: state.select_next(),
    InputEventKind.CYCLE_SORT: lambda state, _: state.cycle_sort(),
    InputEventKind.TOGGLE_SORT_DIRECTION: lambda state, _: state.toggle_sort_direction(),
    InputEventKind.ENTER_SEARCH: lambda state, _: state.enter_search_mode(),
    InputEventKind.EXIT_SEARCH: lambda state, _: state.exit_search_mode(),
    InputEventKind.CANCEL_SEARCH: _cancel_search,
    InputEventKind.PUSH_CHAR: _push_char,
    InputEventKind.POP_CHAR: lambda state, _: state.pop_search_char(),
    InputEventKind.CLEAR_SEARCH: lambda state, _: state.clear_search(),
    InputEventKind.TOGGLE_HELP: lambda state, _: state.toggle_help(),
}


class InteractionController:
    """Pure state-transition function over (state, event)."""

    def handle(self, state: DashboardState, event: InputEvent) -> Effect:
        """Apply ``event`` to ``state``.

        Args:
            state: Dashboard state to mutate.
            event: Input event to apply.

        Returns:
            Effect the caller must carry out.
        """
        if state.show_help:
            # Any event only dismisses the overlay.
            state.show_help = False
            return Effect.NONE

        if state.input_mode is InputMode.SEARCH and event.kind not in _SEARCH_EVENTS:
            return Effect.NONE

        if event.kind is InputEventKind.REFRESH:
            return Effect.REFRESH

        handler = _HANDLERS.get(event.kind)
        if handler is None:
            logger.debug("Ignoring unhandled event %s", event.kind)
            return Effect.NONE
        handler(state, event)
        return Effect.NONE


__all__ = ["InputEvent", "InteractionController"]
