"""Keyboard bindings module.

This module provides all keyboard handling for Pulse:

- app: App-level Textual bindings (APP_BINDINGS)
- keymap: Mode-aware translation of key presses into input events
"""

from pulse.keyboard.app import APP_BINDINGS
from pulse.keyboard.keymap import HELP_ENTRIES, STATUS_HINTS, translate_key

__all__ = [
    "APP_BINDINGS",
    "HELP_ENTRIES",
    "STATUS_HINTS",
    "translate_key",
]
