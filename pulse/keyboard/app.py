"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings that
work in every input mode. Dashboard keys are translated by
:mod:`pulse.keyboard.keymap` instead, since their meaning depends on the
input mode.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
