"""Controllers module for Pulse.

This module provides the refresh coordinator, which polls providers and
merges their results into the dashboard state, and the interaction
controller, which maps input events onto state changes.
"""

from __future__ import annotations

from pulse.controllers.interaction import InputEvent, InteractionController
from pulse.controllers.refresh import FetchError, RefreshCoordinator, RefreshOutcome

__all__ = [
    # Interaction
    "InputEvent",
    "InteractionController",
    # Refresh
    "FetchError",
    "RefreshCoordinator",
    "RefreshOutcome",
]
