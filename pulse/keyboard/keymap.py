"""Key translation - maps Textual key events onto abstract input events.

Which events a key produces depends on the input mode: in search mode
printable characters edit the query, so normal-mode shortcuts are not
translated at all.
"""

from __future__ import annotations

from typing import Final

from pulse.constants.enums import InputEventKind, InputMode
from pulse.controllers.interaction import InputEvent
from pulse.models.state.dashboard_state import DashboardState

# ============================================================================
# Normal mode
# ============================================================================

NORMAL_CHARACTER_MAP: Final[dict[str, InputEventKind]] = {
    "q": InputEventKind.QUIT,
    "k": InputEventKind.SELECT_PREVIOUS,
    "j": InputEventKind.SELECT_NEXT,
    "r": InputEventKind.REFRESH,
    "s": InputEventKind.CYCLE_SORT,
    "S": InputEventKind.TOGGLE_SORT_DIRECTION,
    "/": InputEventKind.ENTER_SEARCH,
    "?": InputEventKind.TOGGLE_HELP,
}

NORMAL_KEY_MAP: Final[dict[str, InputEventKind]] = {
    "tab": InputEventKind.NEXT_PANEL,
    "up": InputEventKind.SELECT_PREVIOUS,
    "down": InputEventKind.SELECT_NEXT,
    "escape": InputEventKind.CLEAR_SEARCH,
}

# ============================================================================
# Search mode
# ============================================================================

SEARCH_KEY_MAP: Final[dict[str, InputEventKind]] = {
    "escape": InputEventKind.CANCEL_SEARCH,
    "enter": InputEventKind.EXIT_SEARCH,
    "backspace": InputEventKind.POP_CHAR,
}

# (keys, description) rows for the help overlay.
HELP_ENTRIES: Final[tuple[tuple[str, str], ...]] = (
    ("q", "Quit application"),
    ("Tab", "Switch between panels"),
    ("j/Down", "Move selection down"),
    ("k/Up", "Move selection up"),
    ("r", "Refresh data"),
    ("s", "Cycle sort field"),
    ("S", "Toggle sort order"),
    ("/", "Enter search mode"),
    ("Esc", "Clear search / Exit mode"),
    ("?", "Toggle this help"),
)

STATUS_HINTS: Final = " q:Quit  Tab:Panel  j/k:Nav  r:Refresh  s:Sort  /:Search  ?:Help "


def translate_key(
    state: DashboardState, key: str, character: str | None = None
) -> InputEvent | None:
    """Translate a key press into an input event for the current mode.

    Args:
        state: Dashboard state (only the input mode is read).
        key: Textual key name, e.g. ``"tab"``, ``"escape"``, ``"j"``.
        character: Printable character for the key, if any.

    Returns:
        The matching InputEvent, or None when the key means nothing.
    """
    if state.input_mode is InputMode.SEARCH:
        kind = SEARCH_KEY_MAP.get(key)
        if kind is not None:
            return InputEvent(kind)
        if character and character.isprintable():
            return InputEvent(InputEventKind.PUSH_CHAR, character)
        return None

    if character and character in NORMAL_CHARACTER_MAP:
        return InputEvent(NORMAL_CHARACTER_MAP[character])
    kind = NORMAL_KEY_MAP.get(key)
    if kind is not None:
        return InputEvent(kind)
    return None


__all__ = [
    "HELP_ENTRIES",
    "NORMAL_CHARACTER_MAP",
    "NORMAL_KEY_MAP",
    "SEARCH_KEY_MAP",
    "STATUS_HINTS",
    "translate_key",
]
