"""State and configuration models."""

from pulse.models.state.config_manager import (
    ConfigError,
    ConfigLoadError,
    ConfigManager,
    ProxmoxConfig,
    PulseConfig,
)
from pulse.models.state.dashboard_state import DashboardState

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardState",
    "ProxmoxConfig",
    "PulseConfig",
]
