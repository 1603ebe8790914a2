"""Init file for refresh module."""

from pulse.controllers.refresh.coordinator import (
    FetchError,
    RefreshCoordinator,
    RefreshOutcome,
)

__all__ = ["FetchError", "RefreshCoordinator", "RefreshOutcome"]
